"""
parsetrace.errors — Tracer aborts and the error-enrichment capability.

Two unrelated kinds of "error" live here:

* :class:`TraceAbort` and its subclasses are raised by the tracer itself when
  the instrumentation contract is broken or the max-depth guard trips.  They
  derive from ``BaseException`` so that ``except Exception`` blocks inside
  parser code never swallow them.
* :class:`ContextError` describes parser error *values* that can carry
  breadcrumbs.  When a wrapped parser with a context label fails, the
  wrapper calls ``error.add_context(input, location, context)`` and returns
  the enriched error in place of the original.  :class:`VerboseError` is a
  ready-made implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

from .view import StringifyView, View


class TraceAbort(BaseException):
    """Base for tracer failures that must stop the current computation."""

    def __init__(self, message: str, tag: str):
        super().__init__(message)
        self.tag = tag


class MaxDepthExceeded(TraceAbort):
    """Nesting on a tag reached its configured ``max_depth``."""

    def __init__(self, tag: str, limit: int):
        super().__init__(f"Max depth reached: tag='{tag}' limit={limit}", tag)
        self.limit = limit


class UnbalancedClose(TraceAbort):
    """A close was recorded with no matching open."""

    def __init__(self, tag: str, location: str):
        super().__init__(
            f"Cannot close at level 0: tag='{tag}' location='{location}'", tag
        )
        self.location = location


@runtime_checkable
class ContextError(Protocol):
    """An error value that can absorb a ``(location, context)`` breadcrumb."""

    def add_context(self, input: Any, location: str, context: str) -> Any:
        ...


# ---------------------------------------------------------------------------
# VerboseError — an error value that accumulates breadcrumbs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Expected:
    """The innermost failure: what the parser was looking for."""

    what: str

    def __str__(self) -> str:
        return f"Expected({View.format_value(self.what)})"


@dataclass(frozen=True)
class Breadcrumb:
    """A wrapped parser the error passed through on its way out."""

    location: str
    context: Optional[str] = None

    def __str__(self) -> str:
        if self.context is None:
            return f"Context({self.location})"
        return f"Context({self.location}[{self.context}])"


@dataclass(frozen=True)
class VerboseError:
    """Immutable stack of ``(input, kind)`` pairs, innermost first.

    Attributes
    ----------
    entries : tuple[tuple[str, Expected | Breadcrumb], ...]
        The original failure followed by every breadcrumb added while the
        error propagated outwards.
    """

    entries: tuple[tuple[Any, Any], ...] = field(default_factory=tuple)

    @classmethod
    def expected(cls, input: Any, what: str) -> VerboseError:
        return cls(entries=((input, Expected(what)),))

    def add_context(self, input: Any, location: str, context: str) -> VerboseError:
        return VerboseError(
            entries=self.entries + ((input, Breadcrumb(location, context)),)
        )

    @property
    def breadcrumbs(self) -> list[Breadcrumb]:
        return [kind for _, kind in self.entries if isinstance(kind, Breadcrumb)]

    def __str__(self) -> str:
        parts = [f"({View.format_value(inp)}, {kind})" for inp, kind in self.entries]
        return "VerboseError([" + ", ".join(parts) + "])"


View.register(VerboseError, lambda: StringifyView())
View.register(Expected, lambda: StringifyView())
View.register(Breadcrumb, lambda: StringifyView())
