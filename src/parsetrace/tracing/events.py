from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventKind(Enum):
    OPEN = "open"
    OK = "ok"
    ERROR = "error"
    FAILURE = "failure"
    INCOMPLETE = "incomplete"

    @property
    def label(self) -> str:
        """Keyword shown after ``->`` on close lines."""
        return self.value.capitalize()

    @property
    def is_close(self) -> bool:
        return self is not EventKind.OPEN


@dataclass(frozen=True)
class Event:
    """One recorded open or close.

    ``depth`` is the trace level *before* an open increments it and *after* a
    close decrements it, so an open and its matching close share a depth and
    the flat event list reads as a tree.
    """

    depth: int
    location: str
    context: Optional[str]
    input: str
    kind: EventKind
    payload: Optional[str] = None

    def __repr__(self) -> str:
        tail = f" -> {self.kind.label}({self.payload})" if self.kind.is_close else ""
        return f"Event({self.depth}, {self.location}{tail})"
