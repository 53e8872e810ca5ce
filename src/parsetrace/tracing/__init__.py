"""Trace recording: events, channels, the registry and the instrumentation API."""

from .api import (
    activate,
    deactivate,
    get_silenced_trace,
    get_trace,
    level_of,
    print_trace,
    reset,
    set_max_depth,
    set_print_immediate,
    silence,
    tr,
    tr_ctx,
    tr_tag,
    traced,
    wrap,
)
from .events import Event, EventKind
from .registry import TraceRegistry
from .trace import DEFAULT_TAG, Trace
from .tracer import SILENCED_TAG, Tracer, current_tracer, set_tracer, use_tracer

__all__ = [
    "DEFAULT_TAG",
    "Event",
    "EventKind",
    "SILENCED_TAG",
    "Trace",
    "TraceRegistry",
    "Tracer",
    "activate",
    "current_tracer",
    "deactivate",
    "get_silenced_trace",
    "get_trace",
    "level_of",
    "print_trace",
    "reset",
    "set_max_depth",
    "set_print_immediate",
    "set_tracer",
    "silence",
    "tr",
    "tr_ctx",
    "tr_tag",
    "traced",
    "use_tracer",
    "wrap",
]
