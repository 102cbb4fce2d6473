import pytest

from rnk.hooks.use_input import (
    Key,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    clear_input_handlers,
    dispatch_input,
    dispatch_key_event,
    register_input_handler,
    use_input,
)


@pytest.fixture(autouse=True)
def _clean_handlers():
    clear_input_handlers()
    yield
    clear_input_handlers()


def test_key_from_event():
    key = Key.from_event(KeyEvent(KeyCode.UP, KeyModifiers.NONE))
    assert key.up_arrow
    assert not key.down_arrow
    assert not key.ctrl


def test_key_with_modifiers():
    key = Key.from_event(KeyEvent.from_char("c", KeyModifiers.CONTROL))
    assert key.ctrl
    assert not key.shift


def test_key_combined_modifiers():
    key = Key.from_event(KeyEvent(KeyCode.ENTER, KeyModifiers.SHIFT | KeyModifiers.ALT))
    assert key.return_key
    assert key.shift
    assert key.alt
    assert not key.ctrl


@pytest.mark.parametrize(
    ("code", "field"),
    [
        (KeyCode.DOWN, "down_arrow"),
        (KeyCode.LEFT, "left_arrow"),
        (KeyCode.RIGHT, "right_arrow"),
        (KeyCode.PAGE_UP, "page_up"),
        (KeyCode.PAGE_DOWN, "page_down"),
        (KeyCode.HOME, "home"),
        (KeyCode.END, "end"),
        (KeyCode.ESC, "escape"),
        (KeyCode.TAB, "tab"),
        (KeyCode.BACKSPACE, "backspace"),
        (KeyCode.DELETE, "delete"),
    ],
)
def test_key_fields(code, field):
    key = Key.from_event(KeyEvent(code))
    assert getattr(key, field) is True
    assert key.up_arrow is False


def test_char_from_event():
    assert Key.char_from_event(KeyEvent.from_char("a")) == "a"
    assert Key.char_from_event(KeyEvent(KeyCode.ENTER)) == ""
    assert Key.char_from_event(KeyEvent.from_char("x", KeyModifiers.CONTROL)) == "x"


def test_char_event_validation():
    with pytest.raises(ValueError):
        KeyEvent(KeyCode.CHAR)
    with pytest.raises(ValueError):
        KeyEvent(KeyCode.TAB, char="a")


def test_dispatch_input():
    received = []
    register_input_handler(lambda text, key: received.append(text))
    dispatch_input("test", Key())
    assert received == ["test"]


def test_dispatch_key_event_and_clear():
    received = []
    use_input(lambda text, key: received.append((text, key.ctrl)))
    dispatch_key_event(KeyEvent.from_char("q", KeyModifiers.CONTROL))
    assert received == [("q", True)]

    clear_input_handlers()
    dispatch_key_event(KeyEvent.from_char("z"))
    assert received == [("q", True)]