from __future__ import annotations

from typing import Iterable, Optional

from rich.console import Console
from rich.text import Text

from ..tracing.events import Event, EventKind
from ..view import escape_control
from .types import (
    CONTEXT_STYLE,
    ELLIPSIS,
    INDENT_STYLE,
    INPUT_STYLE,
    OUTCOME_STYLES,
    RenderConfig,
)


def _snippet(input: str, config: RenderConfig) -> str:
    width = config.max_input_width
    if width is not None and len(input) > width:
        return escape_control(input[:width]) + ELLIPSIS
    return escape_control(input)


def _plain_line(event: Event, config: RenderConfig) -> str:
    indent = config.indent_marker * event.depth
    snippet = _snippet(event.input, config)
    if event.kind is EventKind.OPEN:
        if event.context is not None:
            return f'{indent}{event.location}[{event.context}]("{snippet}")'
        return f'{indent}{event.location}("{snippet}")'
    line = f'{indent}{event.location}("{snippet}") -> {event.kind.label}({event.payload})'
    if event.context is not None:
        line += f"[{event.context}]"
    return line


def _styled_line(event: Event, config: RenderConfig) -> Text:
    indent = config.indent_marker * event.depth
    snippet = _snippet(event.input, config)
    if event.kind is EventKind.OPEN:
        text = Text(indent, style=INDENT_STYLE)
        text.append(event.location)
        if event.context is not None:
            text.append("[")
            text.append(event.context, style=CONTEXT_STYLE)
            text.append("]")
        text.append('("')
        text.append(snippet, style=INPUT_STYLE)
        text.append('")')
        return text

    text = Text(
        f'{indent}{event.location}("{snippet}") -> {event.kind.label}({event.payload})',
        style=OUTCOME_STYLES[event.kind.value],
    )
    if event.context is not None:
        text.append("[")
        text.append(event.context, style=CONTEXT_STYLE)
        text.append("]")
    return text


def _to_ansi(lines: list[Text]) -> str:
    console = Console(
        force_terminal=True,
        color_system="standard",
        no_color=False,
        soft_wrap=True,
        highlight=False,
        markup=False,
        emoji=False,
    )
    with console.capture() as capture:
        for line in lines:
            console.print(line)
    return capture.get()


def render_event(event: Event, config: Optional[RenderConfig] = None) -> str:
    """Render a single event as one newline-terminated line."""
    return render_events([event], config)


def render_events(events: Iterable[Event], config: Optional[RenderConfig] = None) -> str:
    """Render an event log, in stored order, one indented line per event.

    Open lines show the location, the bracketed context (if any) and the
    quoted input.  Close lines add ``-> Ok(..)``, ``-> Error(..)``,
    ``-> Failure(..)`` or ``-> Incomplete(..)`` and put the context after
    the outcome.  With ``config.color`` the same text is emitted with ANSI
    styling.
    """
    cfg = config or RenderConfig()
    events = list(events)
    if cfg.color:
        return _to_ansi([_styled_line(e, cfg) for e in events])
    return "".join(_plain_line(e, cfg) + "\n" for e in events)
