"""Keyboard events and keyboard input handler registration."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, Flag, auto

__all__ = [
    "KeyCode",
    "KeyModifiers",
    "KeyEvent",
    "Key",
    "register_input_handler",
    "clear_input_handlers",
    "dispatch_input",
    "dispatch_key_event",
    "use_input",
]


class KeyCode(Enum):
    """The key that was pressed; ``CHAR`` keys carry their character in the event."""

    CHAR = "char"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    ENTER = "enter"
    ESC = "esc"
    TAB = "tab"
    BACK_TAB = "back_tab"
    BACKSPACE = "backspace"
    DELETE = "delete"
    INSERT = "insert"
    F = "f"
    NULL = "null"


class KeyModifiers(Flag):
    """Modifier keys held during a key event."""

    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()
    SUPER = auto()
    HYPER = auto()
    META = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A raw key event: the key code, its character for ``CHAR`` keys, and modifiers."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    char: str = ""

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR and len(self.char) != 1:
            raise ValueError("a CHAR key event needs exactly one character")
        if self.code is not KeyCode.CHAR and self.char:
            raise ValueError(f"{self.code.value} key event takes no character")

    @classmethod
    def from_char(cls, char: str, modifiers: KeyModifiers = KeyModifiers.NONE) -> KeyEvent:
        """Create a character key event."""
        return cls(KeyCode.CHAR, modifiers, char)


@dataclass(frozen=True)
class Key:
    """Which special keys and modifiers a key event involved."""

    up_arrow: bool = False
    down_arrow: bool = False
    left_arrow: bool = False
    right_arrow: bool = False
    page_up: bool = False
    page_down: bool = False
    home: bool = False
    end: bool = False
    return_key: bool = False
    escape: bool = False
    tab: bool = False
    backspace: bool = False
    delete: bool = False
    ctrl: bool = False
    shift: bool = False
    alt: bool = False

    @classmethod
    def from_event(cls, event: KeyEvent) -> Key:
        """Describe a key event."""
        code = event.code
        mods = event.modifiers
        return cls(
            up_arrow=code is KeyCode.UP,
            down_arrow=code is KeyCode.DOWN,
            left_arrow=code is KeyCode.LEFT,
            right_arrow=code is KeyCode.RIGHT,
            page_up=code is KeyCode.PAGE_UP,
            page_down=code is KeyCode.PAGE_DOWN,
            home=code is KeyCode.HOME,
            end=code is KeyCode.END,
            return_key=code is KeyCode.ENTER,
            escape=code is KeyCode.ESC,
            tab=code is KeyCode.TAB,
            backspace=code is KeyCode.BACKSPACE,
            delete=code is KeyCode.DELETE,
            ctrl=KeyModifiers.CONTROL in mods,
            shift=KeyModifiers.SHIFT in mods,
            alt=KeyModifiers.ALT in mods,
        )

    @staticmethod
    def char_from_event(event: KeyEvent) -> str:
        """Return the typed character of a key event, or an empty string."""
        return event.char if event.code is KeyCode.CHAR else ""


InputHandler = Callable[[str, Key], None]


class _InputState(threading.local):
    def __init__(self) -> None:
        self.handlers: list[InputHandler] = []


_state = _InputState()


def register_input_handler(handler: InputHandler) -> None:
    """Add a handler that receives every dispatched input."""
    _state.handlers.append(handler)


def clear_input_handlers() -> None:
    """Remove all input handlers."""
    _state.handlers.clear()


def dispatch_input(input: str, key: Key) -> None:
    """Pass input to every registered handler in registration order."""
    for handler in list(_state.handlers):
        handler(input, key)


def dispatch_key_event(event: KeyEvent) -> None:
    """Translate a key event and dispatch it to the input handlers."""
    dispatch_input(Key.char_from_event(event), Key.from_event(event))


def use_input(handler: InputHandler) -> None:
    """Register ``handler`` for keyboard input."""
    register_input_handler(handler)