from .text import render_event, render_events
from .types import RenderConfig

__all__ = [
    "RenderConfig",
    "render_event",
    "render_events",
]
