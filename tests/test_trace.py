import pytest

from parsetrace import (
    EventKind,
    FatalError,
    Incomplete,
    MaxDepthExceeded,
    Needed,
    RecoverableError,
    Success,
    Trace,
    TraceAbort,
    UnbalancedClose,
    VerboseError,
)


def test_trace_defaults():
    trace = Trace()
    assert trace.events == []
    assert trace.level == 0
    assert trace.active
    assert not trace.print_immediate
    assert trace.max_depth is None


def test_open_records_depth_before_increment():
    trace = Trace()
    assert trace.open("ctx", "input", "location") == 1
    assert len(trace.events) == 1
    event = trace.events[0]
    assert event.kind is EventKind.OPEN
    assert event.depth == 0
    assert event.context == "ctx"
    assert event.input == "input"
    assert event.location == "location"
    assert event.payload is None


def test_close_records_depth_after_decrement():
    trace = Trace()
    trace.open(None, "input", "location")
    assert trace.close(None, "input", "location", Success("", "result")) == 0
    close = trace.events[1]
    assert close.kind is EventKind.OK
    assert close.depth == 0
    assert close.payload == '"result"'


def test_nested_pairs_share_depth():
    trace = Trace()
    trace.open(None, "input1", "location1")
    trace.open(None, "input2", "location2")
    trace.close(None, "input2", "location2", Success("", "result2"))
    trace.close(None, "input1", "location1", Success("", "result1"))

    assert trace.level == 0
    assert [e.depth for e in trace.events] == [0, 1, 1, 0]


def test_close_classifies_every_outcome():
    trace = Trace()
    outcomes = [
        Success("", 42),
        RecoverableError("bad"),
        FatalError("worse"),
        Incomplete(Needed(3)),
        Incomplete(),
    ]
    for outcome in outcomes:
        trace.open(None, "in", "loc")
        trace.close(None, "in", "loc", outcome)

    closes = [e for e in trace.events if e.kind.is_close]
    assert [(e.kind, e.payload) for e in closes] == [
        (EventKind.OK, "42"),
        (EventKind.ERROR, '"bad"'),
        (EventKind.FAILURE, '"worse"'),
        (EventKind.INCOMPLETE, "Size(3)"),
        (EventKind.INCOMPLETE, "Unknown"),
    ]


def test_close_formats_verbose_error():
    trace = Trace()
    trace.open(None, "ab", "loc")
    trace.close(None, "ab", "loc", RecoverableError(VerboseError.expected("ab", "x")))
    assert trace.events[1].payload == 'VerboseError([("ab", Expected("x"))])'


def test_close_rejects_non_outcome_without_touching_level():
    trace = Trace()
    trace.open(None, "in", "loc")
    with pytest.raises(TypeError, match="got int"):
        trace.close(None, "in", "loc", 5)
    assert trace.level == 1
    assert len(trace.events) == 1


def test_close_at_level_zero_aborts():
    trace = Trace("custom")
    with pytest.raises(UnbalancedClose, match="Cannot close at level 0") as info:
        trace.close(None, "in", "orphan", Success("", None))
    assert info.value.tag == "custom"
    assert info.value.location == "orphan"
    assert trace.events == []


def test_aborts_are_not_ordinary_exceptions():
    assert issubclass(MaxDepthExceeded, TraceAbort)
    assert issubclass(UnbalancedClose, TraceAbort)
    assert not issubclass(TraceAbort, Exception)


def test_max_depth_allows_up_to_limit():
    trace = Trace()
    trace.max_depth = 3
    for i in range(3):
        trace.open(None, f"input{i}", f"location{i}")
    assert trace.level == 3


def test_max_depth_aborts_past_limit():
    trace = Trace("expr")
    trace.max_depth = 2
    trace.open(None, "input", "location")
    trace.open(None, "input", "location")
    with pytest.raises(MaxDepthExceeded, match="limit=2") as info:
        trace.open(None, "input", "location")
    assert info.value.tag == "expr"
    assert info.value.limit == 2
    assert trace.level == 2
    assert len(trace.events) == 2


def test_no_max_depth_allows_deep_nesting():
    trace = Trace()
    for _ in range(500):
        trace.open(None, "x", "loc")
    assert trace.level == 500


def test_inactive_trace_records_nothing():
    trace = Trace()
    trace.active = False
    assert trace.open(None, "in", "loc") == 0
    assert trace.close(None, "in", "loc", Success("", 1)) == 0
    assert trace.events == []


def test_inactive_trace_ignores_unbalanced_close():
    trace = Trace()
    trace.active = False
    trace.close(None, "in", "loc", Success("", 1))
    assert trace.level == 0


def test_clear_keeps_configuration():
    trace = Trace()
    trace.max_depth = 4
    trace.print_immediate = True
    trace.active = False
    trace.active = True
    trace.open(None, "in", "loc")
    trace.clear()
    assert trace.events == []
    assert trace.level == 0
    assert trace.max_depth == 4
    assert trace.print_immediate


def test_set_level():
    trace = Trace()
    trace.set_level(5)
    assert trace.level == 5
    assert trace.events == []
    with pytest.raises(ValueError):
        trace.set_level(-1)


def test_print_immediate_emits_each_event():
    seen = []
    trace = Trace(emit=seen.append)
    trace.print_immediate = True
    trace.open(None, "in", "loc")
    trace.close(None, "in", "loc", Success("", 1), silent=True)
    assert [e.kind for e in seen] == [EventKind.OPEN]
    assert len(trace.events) == 2


def test_input_snapshot_of_non_string_input():
    trace = Trace()
    trace.open(None, b"bytes", "loc")
    trace.open(None, ["a", "b"], "loc")
    assert trace.events[0].input == "bytes"
    assert trace.events[1].input == "['a', 'b']"
