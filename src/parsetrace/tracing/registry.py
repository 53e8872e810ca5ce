from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..render.types import RenderConfig
from .events import Event
from .trace import DEFAULT_TAG, Trace

logger = logging.getLogger(__name__)


def no_trace_message(tag: str) -> str:
    return f"No trace found for tag '{tag}'"


class TraceRegistry:
    """
    Tag -> :class:`Trace` mapping.

    Every operation that names a tag (except :meth:`get`, :meth:`level_of`
    and :meth:`render`) creates the trace on first use with default
    settings.  The default tag exists from construction.
    """

    def __init__(self, emit: Optional[Callable[[Event], None]] = None):
        self._emit = emit
        self._traces: dict[str, Trace] = {}
        self.get_or_create(DEFAULT_TAG)

    # ---- lookup ----------------------------------------------------------

    def get_or_create(self, tag: str) -> Trace:
        trace = self._traces.get(tag)
        if trace is None:
            trace = Trace(tag, emit=self._emit)
            self._traces[tag] = trace
            logger.debug("TraceRegistry: created trace for tag=%s", tag)
        return trace

    def get(self, tag: str) -> Optional[Trace]:
        return self._traces.get(tag)

    def tags(self) -> list[str]:
        return list(self._traces)

    def __contains__(self, tag: object) -> bool:
        return tag in self._traces

    def __len__(self) -> int:
        return len(self._traces)

    # ---- administration --------------------------------------------------

    def activate(self, tag: str) -> None:
        self.get_or_create(tag).active = True
        logger.info("activate: tag=%s", tag)

    def deactivate(self, tag: str) -> None:
        self.get_or_create(tag).active = False
        logger.info("deactivate: tag=%s", tag)

    def reset(self, tag: str) -> None:
        self.get_or_create(tag).clear()
        logger.info("reset: tag=%s", tag)

    def set_max_depth(self, tag: str, max_depth: Optional[int]) -> None:
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative or None, got {max_depth}")
        self.get_or_create(tag).max_depth = max_depth
        logger.info("set_max_depth: tag=%s max_depth=%s", tag, max_depth)

    def set_print_immediate(self, tag: str, enabled: bool) -> None:
        self.get_or_create(tag).print_immediate = bool(enabled)
        logger.info("set_print_immediate: tag=%s enabled=%s", tag, bool(enabled))

    def clear_all(self) -> None:
        """Drop every channel, leaving a fresh default one."""
        self._traces.clear()
        self.get_or_create(DEFAULT_TAG)
        logger.info("TraceRegistry: cleared all traces")

    # ---- recording -------------------------------------------------------

    def open(
        self,
        tag: str,
        context: Optional[str],
        input: Any,
        location: str,
        silent: bool = False,
    ) -> int:
        return self.get_or_create(tag).open(context, input, location, silent)

    def close(
        self,
        tag: str,
        context: Optional[str],
        input: Any,
        location: str,
        outcome: Any,
        silent: bool = False,
    ) -> int:
        return self.get_or_create(tag).close(context, input, location, outcome, silent)

    def level_of(self, tag: str) -> int:
        trace = self._traces.get(tag)
        return trace.level if trace is not None else 0

    def render(self, tag: str, config: Optional[RenderConfig] = None) -> str:
        trace = self._traces.get(tag)
        if trace is None:
            return no_trace_message(tag)
        return trace.render(config)
