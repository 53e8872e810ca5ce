"""
parsetrace.outcome — the four results a wrapped parser can produce.

A parser is any callable ``input -> Outcome``.  ``Outcome`` is a plain
``Union`` of four frozen dataclasses; callers discriminate with
``isinstance``::

    out = parser("abc")
    if isinstance(out, Success):
        rest, value = out.remaining, out.value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Needed:
    """How much more input an incomplete parser wants (``None`` = unknown)."""

    size: Optional[int] = None

    def __str__(self) -> str:
        if self.size is None:
            return "Unknown"
        return f"Size({self.size})"


@dataclass(frozen=True)
class Success:
    """The parser consumed input and produced *value*."""

    remaining: Any
    value: Any


@dataclass(frozen=True)
class RecoverableError:
    """The parser did not match; an alternative branch may still succeed."""

    error: Any


@dataclass(frozen=True)
class FatalError:
    """The parser failed in a way that must stop backtracking."""

    error: Any


@dataclass(frozen=True)
class Incomplete:
    """The parser ran out of input."""

    needed: Needed = Needed()


Outcome = Union[Success, RecoverableError, FatalError, Incomplete]


def is_error(value: Any) -> bool:
    """True for the two variants that carry an error payload."""
    return isinstance(value, (RecoverableError, FatalError))
