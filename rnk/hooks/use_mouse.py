"""Mouse events and mouse handler registration."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = [
    "MouseButton",
    "MouseActionKind",
    "MouseAction",
    "Mouse",
    "register_mouse_handler",
    "clear_mouse_handlers",
    "dispatch_mouse_event",
    "is_mouse_enabled",
    "set_mouse_enabled",
    "use_mouse",
]


class MouseButton(Enum):
    """A mouse button."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class MouseActionKind(Enum):
    """What happened with the mouse."""

    PRESS = "press"
    RELEASE = "release"
    DRAG = "drag"
    MOVE = "move"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    SCROLL_LEFT = "scroll_left"
    SCROLL_RIGHT = "scroll_right"


_BUTTON_KINDS = frozenset({MouseActionKind.PRESS, MouseActionKind.RELEASE, MouseActionKind.DRAG})

_SCROLL_DELTAS = {
    MouseActionKind.SCROLL_UP: (0, -1),
    MouseActionKind.SCROLL_DOWN: (0, 1),
    MouseActionKind.SCROLL_LEFT: (-1, 0),
    MouseActionKind.SCROLL_RIGHT: (1, 0),
}


@dataclass(frozen=True)
class MouseAction:
    """A mouse action; press, release and drag carry the button involved."""

    kind: MouseActionKind
    button: Optional[MouseButton] = None

    def __post_init__(self) -> None:
        if self.kind in _BUTTON_KINDS and self.button is None:
            raise ValueError(f"{self.kind.value} action requires a button")
        if self.kind not in _BUTTON_KINDS and self.button is not None:
            raise ValueError(f"{self.kind.value} action takes no button")

    @classmethod
    def press(cls, button: MouseButton) -> MouseAction:
        return cls(MouseActionKind.PRESS, button)

    @classmethod
    def release(cls, button: MouseButton) -> MouseAction:
        return cls(MouseActionKind.RELEASE, button)

    @classmethod
    def drag(cls, button: MouseButton) -> MouseAction:
        return cls(MouseActionKind.DRAG, button)


@dataclass
class Mouse:
    """A mouse event at a terminal cell, with modifier key state."""

    x: int
    y: int
    action: MouseAction
    ctrl: bool = False
    shift: bool = False
    alt: bool = False

    def is_click(self) -> bool:
        """True for any button press."""
        return self.action.kind is MouseActionKind.PRESS

    def is_left_click(self) -> bool:
        """True for a left button press."""
        return self.is_click() and self.action.button is MouseButton.LEFT

    def is_right_click(self) -> bool:
        """True for a right button press."""
        return self.is_click() and self.action.button is MouseButton.RIGHT

    def is_scroll(self) -> bool:
        """True for any scroll wheel event."""
        return self.action.kind in _SCROLL_DELTAS

    def scroll_delta(self) -> tuple[int, int]:
        """Return ``(dx, dy)``: -1 for up/left, 1 for down/right, 0 otherwise."""
        return _SCROLL_DELTAS.get(self.action.kind, (0, 0))


MouseHandler = Callable[[Mouse], None]


class _MouseState(threading.local):
    def __init__(self) -> None:
        self.handlers: list[MouseHandler] = []
        self.enabled = False


_state = _MouseState()


def register_mouse_handler(handler: MouseHandler) -> None:
    """Add a handler that receives every dispatched mouse event."""
    _state.handlers.append(handler)


def clear_mouse_handlers() -> None:
    """Remove all mouse handlers."""
    _state.handlers.clear()


def dispatch_mouse_event(mouse: Mouse) -> None:
    """Pass a mouse event to every registered handler in registration order."""
    for handler in list(_state.handlers):
        handler(mouse)


def is_mouse_enabled() -> bool:
    """True if mouse reporting has been requested."""
    return _state.enabled


def set_mouse_enabled(enabled: bool) -> None:
    """Turn mouse reporting on or off."""
    _state.enabled = enabled


def use_mouse(handler: MouseHandler) -> None:
    """Enable mouse reporting and register ``handler`` for mouse events."""
    set_mouse_enabled(True)
    register_mouse_handler(handler)