import pytest

from rnk.hooks.use_window_title import (
    WindowTitleGuard,
    clear_window_title,
    set_window_title,
    title_escape,
    use_window_title,
    use_window_title_fn,
)


def test_title_escape_sequence():
    assert title_escape("Test Title") == "\x1b]0;Test Title\x07"


def test_empty_title():
    assert title_escape("") == "\x1b]0;\x07"


def test_title_with_special_chars():
    assert title_escape("My App - [1/10]") == "\x1b]0;My App - [1/10]\x07"


def test_set_window_title_writes(capsys):
    set_window_title("Hello")
    assert capsys.readouterr().out == "\x1b]0;Hello\x07"


def test_clear_window_title(capsys):
    clear_window_title()
    assert capsys.readouterr().out == "\x1b]0;\x07"


def test_use_window_title_hooks(capsys):
    use_window_title("A")
    use_window_title_fn(lambda: "Count: 3")
    assert capsys.readouterr().out == "\x1b]0;A\x07\x1b]0;Count: 3\x07"


def test_guard_restores_original(capsys):
    with WindowTitleGuard("Original") as guard:
        set_window_title("Temporary")
    assert guard.original_title == "Original"
    assert capsys.readouterr().out == "\x1b]0;Temporary\x07\x1b]0;Original\x07"


def test_guard_without_original_clears(capsys):
    with WindowTitleGuard():
        pass
    assert capsys.readouterr().out == "\x1b]0;\x07"


def test_guard_restores_on_exception(capsys):
    with pytest.raises(KeyError):
        with WindowTitleGuard("Back"):
            raise KeyError("boom")
    assert capsys.readouterr().out == "\x1b]0;Back\x07"