"""
parsetrace.view — Display formatting for values carried by trace events.

Every close event stores a short textual description of the parser's result
(the parsed value, or the error).  The text is produced by dispatching on the
value's type through :class:`View`:

* built-in scalars and containers have views registered below;
* user types can register their own with :meth:`View.register`;
* anything else falls back to ``repr``.

Example::

    class TokenView(View):
        def format_label(self, value):
            return f"{value.kind}:{value.text}"

    View.register(Token, lambda: TokenView())
"""

from __future__ import annotations

from typing import Any, Callable

# C0 controls and DEL as Python-style escapes, so a trace line stays one line
_CONTROL_ESCAPES = {c: repr(chr(c))[1:-1] for c in (*range(0x20), 0x7F)}


def escape_control(text: str) -> str:
    return text.translate(_CONTROL_ESCAPES)


class View:
    """
    Base view: decides *how* a value of one type is shown in a trace line.

    Subclass per type and override :meth:`format_label`.
    """

    _type_to_view: dict[type, Callable[[], View]] = {}

    def format_label(self, value: Any) -> str:
        """Format *value* as a short display string."""
        return repr(value)

    @staticmethod
    def register(value_type: type, view_factory: Callable[[], View]) -> None:
        """Register a view factory for a specific value type."""
        View._type_to_view[value_type] = view_factory

    @staticmethod
    def unregister(value_type: type) -> None:
        View._type_to_view.pop(value_type, None)

    @staticmethod
    def for_value(value: Any) -> View:
        """Look up the view for a value's type (walks MRO)."""
        for cls in type(value).__mro__:
            if cls in View._type_to_view:
                return View._type_to_view[cls]()
        raise TypeError(f"No view registered for {type(value).__name__}")

    @classmethod
    def format_value(cls, value: Any) -> str:
        """Format any Python value as display text via View dispatch.

        This is the single entry point the tracer uses to describe outcome
        payloads.  Unregistered types fall back to ``repr``.
        """
        try:
            view = cls.for_value(value)
        except TypeError:
            return repr(value)
        return view.format_label(value)


# ---------------------------------------------------------------------------
# Built-in type views
# ---------------------------------------------------------------------------


class StrView(View):
    """Double-quoted, with quotes, backslashes and control characters escaped."""

    def format_label(self, value: Any) -> str:
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escape_control(escaped)}"'


class BytesView(View):
    def format_label(self, value: Any) -> str:
        return repr(bytes(value))


class BoolView(View):
    def format_label(self, value: Any) -> str:
        return str(value)


class NoneView(View):
    def format_label(self, value: Any) -> str:
        return "None"


class IntView(View):
    def format_label(self, value: Any) -> str:
        return str(value)


class FloatView(View):
    def format_label(self, value: Any) -> str:
        return str(value)


class ListView(View):
    def format_label(self, value: Any) -> str:
        items = [View.format_value(item) for item in value]
        return "[" + ", ".join(items) + "]"


class DictView(View):
    def format_label(self, value: Any) -> str:
        items = [
            f"{View.format_value(k)}: {View.format_value(v)}" for k, v in value.items()
        ]
        return "{" + ", ".join(items) + "}"


class TupleView(View):
    def format_label(self, value: Any) -> str:
        items = [View.format_value(item) for item in value]
        if len(items) == 1:
            return f"({items[0]},)"
        return "(" + ", ".join(items) + ")"


class SetView(View):
    """Items are sorted by their display text so output is deterministic."""

    def format_label(self, value: Any) -> str:
        items = sorted(View.format_value(item) for item in value)
        return "{" + ", ".join(items) + "}"


class StringifyView(View):
    """Uses ``str``; for small value objects that define a readable ``__str__``."""

    def format_label(self, value: Any) -> str:
        return str(value)


# ---------------------------------------------------------------------------
# Default registrations
# ---------------------------------------------------------------------------

View.register(type(None), lambda: NoneView())
View.register(bool, lambda: BoolView())  # bool before int (bool subclasses int)
View.register(int, lambda: IntView())
View.register(float, lambda: FloatView())
View.register(str, lambda: StrView())
View.register(bytes, lambda: BytesView())
View.register(list, lambda: ListView())
View.register(dict, lambda: DictView())
View.register(tuple, lambda: TupleView())
View.register(set, lambda: SetView())
View.register(frozenset, lambda: SetView())
