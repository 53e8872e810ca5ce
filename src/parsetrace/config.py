"""Runtime configuration for a :class:`~parsetrace.tracing.tracer.Tracer`."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .render.types import RenderConfig


@dataclass
class TracerConfig:
    """Options selected when a tracer is constructed.

    Attributes
    ----------
    enrich_errors : bool
        Add a ``(location, context)`` breadcrumb to error outcomes of wrapped
        parsers that carry a context label.
    silencing : bool
        When False, :func:`~parsetrace.silence` behaves like a plain wrap.
    render : RenderConfig
        Formatting used by live printing and :func:`~parsetrace.print_trace`.
    stream : TextIO | None
        Destination for live printing; ``None`` means ``sys.stdout`` at the
        time of writing.
    """

    enrich_errors: bool = True
    silencing: bool = True
    render: RenderConfig = field(default_factory=RenderConfig)
    stream: Optional[TextIO] = None

    def output(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout
