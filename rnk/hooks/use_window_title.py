"""Setting the terminal window title."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, Optional

__all__ = [
    "WindowTitleGuard",
    "title_escape",
    "set_window_title",
    "clear_window_title",
    "use_window_title",
    "use_window_title_fn",
]

_RESTORE_ESCAPE = "\x1b]0;\x07"


def title_escape(title: str) -> str:
    """Return the OSC 0 escape sequence that sets the window title."""
    return f"\x1b]0;{title}\x07"


def _emit(sequence: str) -> None:
    try:
        sys.stdout.write(sequence)
        sys.stdout.flush()
    except (OSError, ValueError):
        pass


def set_window_title(title: str) -> None:
    """Set the terminal window title; write errors are ignored."""
    _emit(title_escape(title))


def clear_window_title() -> None:
    """Set the window title to an empty string."""
    set_window_title("")


class WindowTitleGuard:
    """Context manager that restores the window title on exit."""

    def __init__(self, original_title: Optional[str] = None) -> None:
        self.original_title = original_title

    def __enter__(self) -> WindowTitleGuard:
        return self

    def __exit__(self, *args: Any) -> None:
        if self.original_title is not None:
            set_window_title(self.original_title)
        else:
            _emit(_RESTORE_ESCAPE)


def use_window_title(title: str) -> None:
    """Set the window title on each render."""
    set_window_title(title)


def use_window_title_fn(fn: Callable[[], str]) -> None:
    """Set the window title to the string that ``fn`` returns."""
    set_window_title(fn())