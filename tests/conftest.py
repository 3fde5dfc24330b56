import pytest

from halfqwerty.core.context import InputContext
from halfqwerty.core.layouts import LayoutVariant


class ManualClock:
    """Millisecond clock advanced explicitly by tests."""

    def __init__(self, start_ms: float = 1000.0):
        self.now_ms = start_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms

    def __call__(self) -> float:
        return self.now_ms


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def make_context(clock):
    """Factory for InputContext instances sharing the manual clock."""
    def _make(layout=LayoutVariant.WIDE, **kwargs):
        return InputContext(layout, clock=clock, **kwargs)
    return _make


@pytest.fixture
def wide(make_context):
    return make_context(LayoutVariant.WIDE)


@pytest.fixture
def left(make_context):
    return make_context(LayoutVariant.LEFT)


@pytest.fixture
def right(make_context):
    return make_context(LayoutVariant.RIGHT)
