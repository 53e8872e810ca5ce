"""
parsetrace.tracing.trace — One trace channel: an ordered, depth-annotated log.

Lifecycle of a channel::

    1. Trace(tag)                 — created lazily by the registry
    2. open(...) / close(...)     — bracket every wrapped parser call
    3. render()                   — turn the flat log into indented text
    4. clear()                    — start over, keeping configuration
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Optional

from ..errors import MaxDepthExceeded, UnbalancedClose
from ..outcome import FatalError, Incomplete, RecoverableError, Success
from ..render.text import render_event, render_events
from ..render.types import RenderConfig
from ..view import View
from .events import Event, EventKind

logger = logging.getLogger(__name__)

DEFAULT_TAG = "default"

__all__ = [
    "DEFAULT_TAG",
    "Trace",
    "classify_outcome",
    "snapshot_input",
]


def snapshot_input(input: Any) -> str:
    """Text recorded as the input of an event."""
    if isinstance(input, str):
        return input
    if isinstance(input, (bytes, bytearray)):
        return bytes(input).decode("utf-8", errors="replace")
    return str(input)


def classify_outcome(outcome: Any) -> tuple[EventKind, str]:
    """Map an outcome to its close-event kind and formatted payload."""
    if isinstance(outcome, Success):
        return EventKind.OK, View.format_value(outcome.value)
    if isinstance(outcome, RecoverableError):
        return EventKind.ERROR, View.format_value(outcome.error)
    if isinstance(outcome, FatalError):
        return EventKind.FAILURE, View.format_value(outcome.error)
    if isinstance(outcome, Incomplete):
        return EventKind.INCOMPLETE, str(outcome.needed)
    raise TypeError(
        "parser must return Success, RecoverableError, FatalError or "
        f"Incomplete, got {type(outcome).__name__}"
    )


def _print_to_stdout(event: Event) -> None:
    sys.stdout.write(render_event(event))
    sys.stdout.flush()


class Trace:
    """
    Event log and settings for a single tag.

    Attributes
    ----------
    events : list[Event]
        Every recorded open and close, in call order.
    level : int
        Number of opens not yet matched by a close.
    active : bool
        When False, open and close are no-ops.
    print_immediate : bool
        Emit each event through *emit* as soon as it is recorded.
    max_depth : int | None
        Opening at this level raises :class:`MaxDepthExceeded`.
    """

    def __init__(
        self,
        tag: str = DEFAULT_TAG,
        *,
        emit: Optional[Callable[[Event], None]] = None,
    ):
        self.tag = tag
        self.events: list[Event] = []
        self.level = 0
        self.active = True
        self.print_immediate = False
        self.max_depth: Optional[int] = None
        self._emit = emit or _print_to_stdout

    def clear(self) -> None:
        self.events.clear()
        self.level = 0

    def set_level(self, level: int) -> None:
        """Move the level without recording anything (used to align silenced output)."""
        if level < 0:
            raise ValueError(f"level must be non-negative, got {level}")
        self.level = level

    def open(
        self,
        context: Optional[str],
        input: Any,
        location: str,
        silent: bool = False,
    ) -> int:
        if not self.active:
            return self.level

        if self.max_depth is not None and self.level >= self.max_depth:
            logger.error(
                "Trace.open: tag=%s location=%s hit max_depth=%d",
                self.tag,
                location,
                self.max_depth,
            )
            raise MaxDepthExceeded(self.tag, self.max_depth)

        event = Event(
            depth=self.level,
            location=location,
            context=context,
            input=snapshot_input(input),
            kind=EventKind.OPEN,
        )
        self._record(event, silent)
        self.level += 1
        return self.level

    def close(
        self,
        context: Optional[str],
        input: Any,
        location: str,
        outcome: Any,
        silent: bool = False,
    ) -> int:
        if not self.active:
            return self.level

        if self.level == 0:
            logger.error(
                "Trace.close: tag=%s location=%s has no matching open",
                self.tag,
                location,
            )
            raise UnbalancedClose(self.tag, location)

        kind, payload = classify_outcome(outcome)
        self.level -= 1
        event = Event(
            depth=self.level,
            location=location,
            context=context,
            input=snapshot_input(input),
            kind=kind,
            payload=payload,
        )
        self._record(event, silent)
        return self.level

    def _record(self, event: Event, silent: bool) -> None:
        if self.print_immediate and not silent:
            self._emit(event)
        self.events.append(event)

    def render(self, config: Optional[RenderConfig] = None) -> str:
        return render_events(self.events, config)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"Trace({self.tag!r}, {len(self.events)} events, level={self.level}, {state})"
