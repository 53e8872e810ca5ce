import pytest

import parsetrace as pt


@pytest.fixture(autouse=True)
def fresh_tracer():
    """Each test records into its own thread-local tracer."""
    tracer = pt.Tracer()
    previous = pt.set_tracer(tracer)
    yield tracer
    pt.set_tracer(previous)
