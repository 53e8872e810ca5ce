"""
parsetrace.tracing.tracer — The context object that owns all tracing state.

A :class:`Tracer` bundles the tag registry, the silencing stack with its
shared discard buffer, and the :class:`~parsetrace.config.TracerConfig`
chosen at construction.  Each thread gets its own default tracer through
:func:`current_tracer`; code that prefers explicit state can build a
``Tracer`` and pass it around instead.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, TextIO

from ..config import TracerConfig
from ..errors import ContextError
from ..outcome import is_error
from ..render.text import render_event
from .events import Event
from .registry import TraceRegistry
from .trace import DEFAULT_TAG, Trace

logger = logging.getLogger(__name__)

SILENCED_TAG = "<silenced>"

Parser = Callable[[Any], Any]


class Tracer:
    """
    Registry of trace channels plus the silencing machinery.

    Parameters
    ----------
    config : TracerConfig | None
        Optional behaviors (error enrichment, silencing, rendering, output
        stream).  Defaults to ``TracerConfig()``.
    """

    def __init__(self, config: Optional[TracerConfig] = None):
        self.config = config or TracerConfig()
        self.registry = TraceRegistry(emit=self._emit)
        self.silent_trace = Trace(SILENCED_TAG, emit=self._emit)
        self._silence_stack: list[int] = []

    # ---- output ----------------------------------------------------------

    def _emit(self, event: Event) -> None:
        out = self.config.output()
        out.write(render_event(event, self.config.render))
        out.flush()

    @property
    def silenced(self) -> bool:
        """True while at least one silenced region is executing."""
        return bool(self._silence_stack)

    # ---- instrumentation -------------------------------------------------

    def invoke(
        self,
        location: str,
        computation: Parser,
        input: Any,
        *,
        tag: str = DEFAULT_TAG,
        context: Optional[str] = None,
    ) -> Any:
        """Run *computation* on *input* between an open and a close event."""
        if self._silence_stack:
            target, silent = self.silent_trace, True
        else:
            target, silent = self.registry.get_or_create(tag), False

        target.open(context, input, location, silent)
        outcome = computation(input)
        target.close(context, input, location, outcome, silent)
        return self._enrich(outcome, input, location, context)

    def invoke_silenced(
        self,
        location: str,
        computation: Parser,
        input: Any,
        *,
        tag: str = DEFAULT_TAG,
        context: Optional[str] = None,
    ) -> Any:
        """Run *computation* with its whole subtree diverted to the discard buffer."""
        if not self.config.silencing:
            return self.invoke(location, computation, input, tag=tag, context=context)

        if self._silence_stack:
            # already inside a silenced region: keep nesting in the shared buffer
            baseline = self.silent_trace.level
        else:
            baseline = self.registry.level_of(tag)
        self._silence_stack.append(baseline)
        logger.debug(
            "silence: enter tag=%s location=%s baseline=%d depth=%d",
            tag,
            location,
            baseline,
            len(self._silence_stack),
        )
        try:
            self.silent_trace.set_level(baseline)
            self.silent_trace.open(context, input, location, silent=True)
            outcome = computation(input)
            self.silent_trace.close(context, input, location, outcome, silent=True)
        finally:
            # an abort leaves opens behind; rewind the buffer to where this region began
            self.silent_trace.set_level(self._silence_stack.pop())
            logger.debug("silence: leave tag=%s location=%s", tag, location)
        return self._enrich(outcome, input, location, context)

    def _enrich(
        self, outcome: Any, input: Any, location: str, context: Optional[str]
    ) -> Any:
        if context is None or not self.config.enrich_errors:
            return outcome
        if not is_error(outcome) or not isinstance(outcome.error, ContextError):
            return outcome
        return type(outcome)(outcome.error.add_context(input, location, context))

    def wrap(
        self,
        location: str,
        computation: Parser,
        *,
        tag: str = DEFAULT_TAG,
        context: Optional[str] = None,
    ) -> Parser:
        """Return a parser that records every call of *computation* on *tag*."""

        def traced_parser(input: Any) -> Any:
            return self.invoke(location, computation, input, tag=tag, context=context)

        traced_parser.__wrapped__ = computation  # type: ignore[attr-defined]
        return traced_parser

    def silence(
        self,
        location: str,
        computation: Parser,
        *,
        tag: str = DEFAULT_TAG,
        context: Optional[str] = None,
    ) -> Parser:
        """Return a parser whose calls, and everything they call, stay out of *tag*."""

        def silenced_parser(input: Any) -> Any:
            return self.invoke_silenced(
                location, computation, input, tag=tag, context=context
            )

        silenced_parser.__wrapped__ = computation  # type: ignore[attr-defined]
        return silenced_parser

    # ---- per-tag administration -------------------------------------------

    def activate(self, tag: str = DEFAULT_TAG) -> None:
        self.registry.activate(tag)

    def deactivate(self, tag: str = DEFAULT_TAG) -> None:
        self.registry.deactivate(tag)

    def reset(self, tag: str = DEFAULT_TAG) -> None:
        self.registry.reset(tag)

    def set_max_depth(self, tag: str = DEFAULT_TAG, max_depth: Optional[int] = None) -> None:
        self.registry.set_max_depth(tag, max_depth)

    def set_print_immediate(self, tag: str = DEFAULT_TAG, enabled: bool = True) -> None:
        self.registry.set_print_immediate(tag, enabled)

    def level_of(self, tag: str = DEFAULT_TAG) -> int:
        return self.registry.level_of(tag)

    def trace(self, tag: str = DEFAULT_TAG) -> Optional[Trace]:
        return self.registry.get(tag)

    # ---- output ----------------------------------------------------------

    def get_trace(self, tag: str = DEFAULT_TAG) -> str:
        return self.registry.render(tag, self.config.render)

    def print_trace(self, tag: str = DEFAULT_TAG, file: Optional[TextIO] = None) -> None:
        out = file if file is not None else self.config.output()
        out.write(self.get_trace(tag))
        out.flush()

    def get_silenced_trace(self) -> str:
        return self.silent_trace.render(self.config.render)

    def teardown(self) -> None:
        """Forget every channel and the discard buffer."""
        self.registry.clear_all()
        self.silent_trace.clear()
        self._silence_stack.clear()

    def __repr__(self) -> str:
        return f"Tracer(tags={self.registry.tags()!r}, silenced={self.silenced})"


# ---------------------------------------------------------------------------
# Per-thread default tracer
# ---------------------------------------------------------------------------

_local = threading.local()


def current_tracer() -> Tracer:
    """The calling thread's tracer, created on first use."""
    tracer = getattr(_local, "tracer", None)
    if tracer is None:
        tracer = Tracer()
        _local.tracer = tracer
        logger.debug(
            "current_tracer: created tracer for thread %s", threading.current_thread().name
        )
    return tracer


def set_tracer(tracer: Optional[Tracer]) -> Optional[Tracer]:
    """Install *tracer* for the calling thread; returns the previous one.

    Passing ``None`` drops the thread's tracer so the next
    :func:`current_tracer` call starts fresh.
    """
    previous = getattr(_local, "tracer", None)
    _local.tracer = tracer
    return previous


@contextmanager
def use_tracer(tracer: Tracer) -> Iterator[Tracer]:
    """Temporarily make *tracer* the calling thread's tracer."""
    previous = set_tracer(tracer)
    try:
        yield tracer
    finally:
        set_tracer(previous)
