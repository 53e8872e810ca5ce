from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class RenderConfig:
    """Rendering options for trace text.

    Attributes
    ----------
    color : bool
        Emit ANSI colors (outcome-colored close lines, highlighted input and
        context).  Plain text otherwise.
    indent_marker : str
        Repeated once per nesting level in front of every line.
    max_input_width : int | None
        Truncate input snippets longer than this many characters.
    """

    color: bool = False
    indent_marker: str = "| "
    max_input_width: Optional[int] = None


ELLIPSIS = "..."

OUTCOME_STYLES = {
    "ok": "green",
    "error": "red",
    "failure": "magenta",
    "incomplete": "yellow",
}
INDENT_STYLE = "white"
CONTEXT_STYLE = "on cyan"
INPUT_STYLE = "on bright_blue"
