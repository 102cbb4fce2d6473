import pytest

from rnk.hooks.use_mouse import (
    Mouse,
    MouseAction,
    MouseActionKind,
    MouseButton,
    clear_mouse_handlers,
    dispatch_mouse_event,
    is_mouse_enabled,
    register_mouse_handler,
    set_mouse_enabled,
    use_mouse,
)


def test_mouse_action_constructors():
    action = MouseAction.press(MouseButton.LEFT)
    assert action.kind is MouseActionKind.PRESS
    assert action.button is MouseButton.LEFT
    assert MouseAction.release(MouseButton.RIGHT) == MouseAction(
        MouseActionKind.RELEASE, MouseButton.RIGHT
    )


def test_mouse_action_validation():
    with pytest.raises(ValueError):
        MouseAction(MouseActionKind.PRESS)
    with pytest.raises(ValueError):
        MouseAction(MouseActionKind.SCROLL_UP, MouseButton.LEFT)


def test_mouse_is_click():
    mouse = Mouse(x=10, y=5, action=MouseAction.press(MouseButton.LEFT))
    assert mouse.is_click()
    assert mouse.is_left_click()
    assert not mouse.is_right_click()
    assert not mouse.is_scroll()


def test_right_click_and_release():
    right = Mouse(0, 0, MouseAction.press(MouseButton.RIGHT))
    assert right.is_right_click()
    assert not right.is_left_click()
    release = Mouse(0, 0, MouseAction.release(MouseButton.LEFT))
    assert not release.is_click()


def test_mouse_scroll_delta():
    assert Mouse(0, 0, MouseAction(MouseActionKind.SCROLL_UP)).scroll_delta() == (0, -1)
    assert Mouse(0, 0, MouseAction(MouseActionKind.SCROLL_DOWN)).scroll_delta() == (0, 1)
    assert Mouse(0, 0, MouseAction(MouseActionKind.SCROLL_LEFT)).scroll_delta() == (-1, 0)
    assert Mouse(0, 0, MouseAction(MouseActionKind.SCROLL_RIGHT)).scroll_delta() == (1, 0)
    assert Mouse(0, 0, MouseAction(MouseActionKind.MOVE)).scroll_delta() == (0, 0)


def test_is_scroll():
    assert Mouse(0, 0, MouseAction(MouseActionKind.SCROLL_DOWN)).is_scroll()
    assert not Mouse(0, 0, MouseAction.drag(MouseButton.MIDDLE)).is_scroll()


def test_mouse_enabled():
    set_mouse_enabled(False)
    assert not is_mouse_enabled()
    set_mouse_enabled(True)
    assert is_mouse_enabled()
    set_mouse_enabled(False)


def test_dispatch_to_handlers():
    clear_mouse_handlers()
    received = []
    register_mouse_handler(lambda m: received.append(("a", m.x, m.y)))
    register_mouse_handler(lambda m: received.append(("b", m.x, m.y)))
    dispatch_mouse_event(Mouse(3, 4, MouseAction(MouseActionKind.MOVE)))
    assert received == [("a", 3, 4), ("b", 3, 4)]
    clear_mouse_handlers()
    dispatch_mouse_event(Mouse(1, 1, MouseAction(MouseActionKind.MOVE)))
    assert len(received) == 2


def test_use_mouse_enables_and_registers():
    clear_mouse_handlers()
    set_mouse_enabled(False)
    clicks = []
    use_mouse(lambda m: clicks.append(m.is_left_click()))
    assert is_mouse_enabled()
    dispatch_mouse_event(Mouse(0, 0, MouseAction.press(MouseButton.LEFT)))
    assert clicks == [True]
    clear_mouse_handlers()
    set_mouse_enabled(False)