import pytest

import parsetrace as pt
from parsetrace import (
    Breadcrumb,
    MaxDepthExceeded,
    RecoverableError,
    Success,
    Tracer,
    TracerConfig,
)
from parsers import digits, literal, many1, sequence


def _item(input):
    return sequence(
        pt.wrap("name", literal("apple")),
        pt.wrap("sep", literal(":")),
        pt.wrap("qty", digits),
    )(input)


def _shopping_list(item_parser):
    return pt.wrap(
        "shopping_list",
        many1(sequence(item_parser, pt.wrap("comma", literal(",")))),
        context="Parsing shopping list",
    )


def test_silenced_subtree_is_hidden_and_sibling_shown():
    parser = _shopping_list(pt.silence("item", _item, context="silenced"))
    parser("apple:3,apple:2,")

    text = pt.get_trace()
    assert "shopping_list" in text
    assert "comma" in text
    for hidden in ("item", "name", "sep", "qty"):
        assert f"{hidden}(" not in text and f"{hidden}[" not in text


def test_outcome_identical_with_and_without_silencing():
    loud = _shopping_list(pt.wrap("item", _item, context="silenced"))("apple:3,apple:2,")
    pt.reset()
    quiet = _shopping_list(pt.silence("item", _item, context="silenced"))("apple:3,apple:2,")
    assert loud == quiet
    assert quiet == Success("", [(("apple", ":", "3"), ","), (("apple", ":", "2"), ",")])


def test_silenced_events_go_to_discard_buffer(fresh_tracer):
    pt.silence("item", _item)("apple:1")
    silenced = pt.get_silenced_trace()
    assert 'item("apple:1")' in silenced
    assert "| qty" in silenced
    assert fresh_tracer.trace().events == []
    assert not fresh_tracer.silenced


def test_silenced_buffer_aligns_with_outer_depth(fresh_tracer):
    outer = pt.wrap("outer", pt.wrap("middle", pt.silence("hidden", digits)))
    outer("5")
    events = fresh_tracer.silent_trace.events
    assert [(e.location, e.depth) for e in events] == [("hidden", 2), ("hidden", 2)]
    assert pt.get_silenced_trace().startswith('| | hidden("5")')
    assert fresh_tracer.trace().level == 0


def test_silencing_redirects_every_tag(fresh_tracer):
    inner = pt.wrap("other_tag_parser", digits, tag="other")
    pt.silence("hidden", inner)("1")
    assert "other" not in fresh_tracer.registry
    assert "other_tag_parser" in pt.get_silenced_trace()


def test_nested_silence_shares_the_buffer(fresh_tracer):
    innermost = pt.silence("innermost", digits)
    middle = pt.silence("middle", pt.wrap("plain", innermost))
    pt.wrap("top", middle)("9")

    assert [e.location for e in fresh_tracer.trace().events] == ["top", "top"]
    silent = fresh_tracer.silent_trace
    assert [(e.location, e.depth) for e in silent.events] == [
        ("middle", 1),
        ("plain", 2),
        ("innermost", 3),
        ("innermost", 3),
        ("plain", 2),
        ("middle", 1),
    ]
    assert silent.level == 1


def test_silenced_events_never_print(capsys):
    pt.set_print_immediate()
    pt.wrap("shown", pt.silence("hidden", pt.wrap("deeper", digits)))("3")
    out = capsys.readouterr().out
    assert "shown" in out
    assert "hidden" not in out
    assert "deeper" not in out


def test_silence_enriches_errors():
    result = pt.silence("item", literal("x"), context="ctx")("ab")
    assert isinstance(result, RecoverableError)
    assert result.error.breadcrumbs == [Breadcrumb("item", "ctx")]


def test_silence_stack_popped_after_abort(fresh_tracer):
    fresh_tracer.silent_trace.max_depth = 1
    hidden = pt.silence("hidden", pt.wrap("deeper", digits))
    with pytest.raises(MaxDepthExceeded):
        hidden("1")
    assert not fresh_tracer.silenced
    assert fresh_tracer.silent_trace.level == 0

    pt.wrap("visible", digits)("2")
    assert "visible" in pt.get_trace()


def test_silencing_disabled_records_normally():
    tracer = Tracer(TracerConfig(silencing=False))
    pt.silence("item", _item, tracer=tracer)("apple:4")
    text = tracer.get_trace()
    assert "item" in text
    assert tracer.get_silenced_trace() == ""


def test_silenced_decorator():
    @pt.traced(silenced=True, location="quiet")
    def quiet(input):
        return digits(input)

    quiet("8")
    assert "quiet" not in pt.get_trace()
    assert "quiet" in pt.get_silenced_trace()


def test_tracer_silence_method_on_explicit_tracer():
    tracer = Tracer()
    tracer.wrap("outer", tracer.silence("hidden", digits))("12")
    assert [e.location for e in tracer.trace().events] == ["outer", "outer"]
    assert 'hidden("12")' in tracer.get_silenced_trace()


def test_nested_silence_restores_baseline_after_abort(fresh_tracer):
    fresh_tracer.silent_trace.max_depth = 3
    inner = pt.silence("inner", pt.wrap("a", pt.wrap("b", digits)))
    outer = pt.silence("outer", inner)
    with pytest.raises(MaxDepthExceeded):
        pt.wrap("top", outer)("1")
    assert fresh_tracer.silent_trace.level == 1
    assert not fresh_tracer.silenced


def test_teardown_forgets_channels_and_silent_buffer(fresh_tracer):
    pt.wrap("custom_parser", digits, tag="custom")("1")
    pt.silence("hidden", digits)("2")
    assert "custom" in fresh_tracer.registry
    assert pt.get_silenced_trace() != ""

    fresh_tracer.teardown()

    assert pt.get_trace("custom") == "No trace found for tag 'custom'"
    assert pt.get_trace() == ""
    assert pt.get_silenced_trace() == ""
    assert fresh_tracer.silent_trace.level == 0
    assert not fresh_tracer.silenced
