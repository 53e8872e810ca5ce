__version__ = "0.1.0"

from .tracing import (
    DEFAULT_TAG,
    SILENCED_TAG,
    Event,
    EventKind,
    Trace,
    TraceRegistry,
    Tracer,
    activate,
    current_tracer,
    deactivate,
    get_silenced_trace,
    get_trace,
    level_of,
    print_trace,
    reset,
    set_max_depth,
    set_print_immediate,
    set_tracer,
    silence,
    tr,
    tr_ctx,
    tr_tag,
    traced,
    use_tracer,
    wrap,
)
from .config import TracerConfig
from .errors import (
    Breadcrumb,
    ContextError,
    Expected,
    MaxDepthExceeded,
    TraceAbort,
    UnbalancedClose,
    VerboseError,
)
from .outcome import (
    FatalError,
    Incomplete,
    Needed,
    Outcome,
    RecoverableError,
    Success,
)
from .render import RenderConfig, render_event, render_events
from .view import View


__all__ = [
    "Breadcrumb",
    "ContextError",
    "DEFAULT_TAG",
    "Event",
    "EventKind",
    "Expected",
    "FatalError",
    "Incomplete",
    "MaxDepthExceeded",
    "Needed",
    "Outcome",
    "RecoverableError",
    "RenderConfig",
    "SILENCED_TAG",
    "Success",
    "Trace",
    "TraceAbort",
    "TraceRegistry",
    "Tracer",
    "TracerConfig",
    "UnbalancedClose",
    "VerboseError",
    "View",
    "activate",
    "current_tracer",
    "deactivate",
    "get_silenced_trace",
    "get_trace",
    "level_of",
    "print_trace",
    "render_event",
    "render_events",
    "reset",
    "set_max_depth",
    "set_print_immediate",
    "set_tracer",
    "silence",
    "tr",
    "tr_ctx",
    "tr_tag",
    "traced",
    "use_tracer",
    "wrap",
]
