"""
parsetrace.tracing.api — Module-level entry points.

Every function works on the calling thread's tracer unless an explicit
``tracer=`` is given.  Parsers returned by :func:`wrap`, :func:`silence`
and :func:`traced` look the tracer up on each call, so one wrapped parser
can be shared between threads and each thread records into its own trace.

Example::

    digits = pt.wrap("digits", parse_digits, context="number")
    digits("42+1")
    pt.print_trace()
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional, TextIO

from .trace import DEFAULT_TAG
from .tracer import Parser, Tracer, current_tracer

__all__ = [
    "activate",
    "deactivate",
    "get_silenced_trace",
    "get_trace",
    "level_of",
    "print_trace",
    "reset",
    "set_max_depth",
    "set_print_immediate",
    "silence",
    "tr",
    "tr_ctx",
    "tr_tag",
    "traced",
    "wrap",
]


def _resolve(tracer: Optional[Tracer]) -> Tracer:
    return tracer if tracer is not None else current_tracer()


def wrap(
    location: str,
    computation: Parser,
    *,
    tag: str = DEFAULT_TAG,
    context: Optional[str] = None,
    tracer: Optional[Tracer] = None,
) -> Parser:
    """
    Bracket every call of *computation* with an open and a close event.

    Parameters
    ----------
    location : str
        Name shown for this parser in the trace.
    computation : Callable[[input], Outcome]
        The parser to instrument.  Its result is returned unchanged, except
        that error outcomes gain a breadcrumb when *context* is given and the
        error supports ``add_context``.
    tag : str
        Trace channel to record into.
    context : str | None
        Human-readable annotation shown next to the location.
    tracer : Tracer | None
        Explicit tracer; defaults to the calling thread's.
    """

    def traced_parser(input: Any) -> Any:
        return _resolve(tracer).invoke(
            location, computation, input, tag=tag, context=context
        )

    traced_parser.__wrapped__ = computation  # type: ignore[attr-defined]
    return traced_parser


def silence(
    location: str,
    computation: Parser,
    *,
    tag: str = DEFAULT_TAG,
    context: Optional[str] = None,
    tracer: Optional[Tracer] = None,
) -> Parser:
    """
    Run *computation* normally but keep it, and every wrapped parser it calls,
    out of the trace for *tag*.

    The hidden events go to a shared discard buffer, readable through
    :func:`get_silenced_trace`.
    """

    def silenced_parser(input: Any) -> Any:
        return _resolve(tracer).invoke_silenced(
            location, computation, input, tag=tag, context=context
        )

    silenced_parser.__wrapped__ = computation  # type: ignore[attr-defined]
    return silenced_parser


def traced(
    func: Optional[Callable] = None,
    *,
    tag: str = DEFAULT_TAG,
    context: Optional[str] = None,
    location: Optional[str] = None,
    silenced: bool = False,
    tracer: Optional[Tracer] = None,
) -> Any:
    """Decorator form of :func:`wrap` (or :func:`silence` with ``silenced=True``).

    The location defaults to the decorated function's ``__qualname__``::

        @traced(context="number")
        def digits(input): ...
    """

    def decorate(fn: Callable) -> Callable:
        name = location or fn.__qualname__
        make = silence if silenced else wrap
        wrapped = make(name, fn, tag=tag, context=context, tracer=tracer)
        return functools.wraps(fn)(wrapped)

    if func is not None:
        return decorate(func)
    return decorate


def tr(location: str, computation: Parser, *, tracer: Optional[Tracer] = None) -> Parser:
    return wrap(location, computation, tracer=tracer)


def tr_ctx(
    location: str, context: str, computation: Parser, *, tracer: Optional[Tracer] = None
) -> Parser:
    return wrap(location, computation, context=context, tracer=tracer)


def tr_tag(
    tag: str, location: str, computation: Parser, *, tracer: Optional[Tracer] = None
) -> Parser:
    return wrap(location, computation, tag=tag, tracer=tracer)


# ---------------------------------------------------------------------------
# Administration and output
# ---------------------------------------------------------------------------


def activate(tag: str = DEFAULT_TAG, *, tracer: Optional[Tracer] = None) -> None:
    _resolve(tracer).activate(tag)


def deactivate(tag: str = DEFAULT_TAG, *, tracer: Optional[Tracer] = None) -> None:
    _resolve(tracer).deactivate(tag)


def reset(tag: str = DEFAULT_TAG, *, tracer: Optional[Tracer] = None) -> None:
    _resolve(tracer).reset(tag)


def set_max_depth(
    tag: str = DEFAULT_TAG,
    max_depth: Optional[int] = None,
    *,
    tracer: Optional[Tracer] = None,
) -> None:
    """Abort with :class:`~parsetrace.errors.MaxDepthExceeded` when nesting on
    *tag* reaches *max_depth*; ``None`` removes the limit."""
    _resolve(tracer).set_max_depth(tag, max_depth)


def set_print_immediate(
    tag: str = DEFAULT_TAG,
    enabled: bool = True,
    *,
    tracer: Optional[Tracer] = None,
) -> None:
    _resolve(tracer).set_print_immediate(tag, enabled)


def level_of(tag: str = DEFAULT_TAG, *, tracer: Optional[Tracer] = None) -> int:
    return _resolve(tracer).level_of(tag)


def get_trace(tag: str = DEFAULT_TAG, *, tracer: Optional[Tracer] = None) -> str:
    """Rendered trace for *tag*, or ``"No trace found for tag '<tag>'"``."""
    return _resolve(tracer).get_trace(tag)


def print_trace(
    tag: str = DEFAULT_TAG,
    *,
    file: Optional[TextIO] = None,
    tracer: Optional[Tracer] = None,
) -> None:
    _resolve(tracer).print_trace(tag, file=file)


def get_silenced_trace(*, tracer: Optional[Tracer] = None) -> str:
    return _resolve(tracer).get_silenced_trace()
