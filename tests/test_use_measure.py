import pytest

from rnk.hooks.context import HookContext, with_hooks
from rnk.hooks.use_measure import (
    Dimensions,
    Layout,
    MeasureContext,
    get_measure_context,
    measure_element,
    set_measure_context,
    use_measure,
)


@pytest.fixture(autouse=True)
def _reset_measure_context():
    set_measure_context(None)
    yield
    set_measure_context(None)


def test_dimensions_from_layout():
    layout = Layout(x=0.0, y=0.0, width=100.0, height=50.0)
    dims = Dimensions.from_layout(layout)
    assert dims.width == 100.0
    assert dims.height == 50.0


def test_measure_context():
    ctx = MeasureContext()
    ctx.set_layouts({7: Layout(x=1.0, y=2.0, width=80.0, height=24.0)})
    dims = ctx.measure(7)
    assert dims == Dimensions(width=80.0, height=24.0)


def test_measure_context_unknown_id():
    ctx = MeasureContext()
    ctx.set_layouts({1: Layout(width=3.0, height=4.0)})
    assert ctx.measure(2) is None


def test_set_layouts_replaces_previous():
    ctx = MeasureContext()
    ctx.set_layouts({1: Layout(width=3.0, height=4.0)})
    ctx.set_layouts({2: Layout(width=5.0, height=6.0)})
    assert ctx.measure(1) is None
    assert ctx.measure(2) == Dimensions(5.0, 6.0)


def test_measure_element_without_context():
    assert get_measure_context() is None
    assert measure_element(1) is None


def test_measure_element_with_context():
    ctx = MeasureContext()
    ctx.set_layouts({"a": Layout(width=10.0, height=2.0)})
    set_measure_context(ctx)
    assert get_measure_context() is ctx
    assert measure_element("a") == Dimensions(10.0, 2.0)


def test_use_measure_tracks_element():
    hook_ctx = HookContext()
    measure_ref, get_dimensions = with_hooks(hook_ctx, use_measure)

    assert measure_ref.get() is None
    assert get_dimensions() is None

    ctx = MeasureContext()
    ctx.set_layouts({42: Layout(width=20.0, height=5.0)})
    set_measure_context(ctx)

    measure_ref.set(42)
    assert measure_ref.get() == 42
    assert get_dimensions() == Dimensions(20.0, 5.0)


def test_use_measure_persists_across_renders():
    hook_ctx = HookContext()
    first_ref, _ = with_hooks(hook_ctx, use_measure)
    first_ref.set(9)
    second_ref, _ = with_hooks(hook_ctx, use_measure)
    assert second_ref.get() == 9


def test_use_measure_outside_component_raises():
    with pytest.raises(RuntimeError):
        use_measure()