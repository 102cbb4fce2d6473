"""Focus management: focusable components and keyboard focus navigation."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional, TypeVar

from rnk.hooks.use_signal import use_signal

__all__ = [
    "FocusState",
    "UseFocusOptions",
    "FocusManager",
    "FocusManagerHandle",
    "with_focus_manager",
    "use_focus",
    "use_focus_manager",
]

R = TypeVar("R")

_id_counter = itertools.count()
_id_lock = threading.Lock()


def _generate_focus_id() -> int:
    with _id_lock:
        return next(_id_counter)


@dataclass
class FocusState:
    """Whether a focusable component currently has focus."""

    is_focused: bool


@dataclass
class UseFocusOptions:
    """Options for :func:`use_focus`."""

    auto_focus: bool = False
    is_active: bool = True
    id: Optional[str] = None


@dataclass
class _FocusableElement:
    id: int
    custom_id: Optional[str]
    is_active: bool


@dataclass
class FocusManager:
    """Tracks focusable elements and which of them has focus."""

    elements: list[_FocusableElement] = field(default_factory=list)
    focused_index: Optional[int] = None

    def register(self, custom_id: Optional[str], is_active: bool, auto_focus: bool) -> int:
        """Add a focusable element and return its id."""
        element_id = _generate_focus_id()
        self.elements.append(_FocusableElement(element_id, custom_id, is_active))
        if auto_focus and self.focused_index is None and is_active:
            self.focused_index = len(self.elements) - 1
        return element_id

    def unregister(self, id: int) -> None:
        """Remove an element, keeping the focus on the same element where possible."""
        pos = next((i for i, e in enumerate(self.elements) if e.id == id), None)
        if pos is None:
            return
        del self.elements[pos]
        focused = self.focused_index
        if focused is not None:
            if pos == focused:
                self.focused_index = None
            elif pos < focused:
                self.focused_index = focused - 1

    def is_focused(self, id: int) -> bool:
        """Return True if the element with ``id`` has focus."""
        idx = self.focused_index
        if idx is None or idx >= len(self.elements):
            return False
        return self.elements[idx].id == id

    def _active_indices(self) -> list[int]:
        return [i for i, e in enumerate(self.elements) if e.is_active]

    def _current_position(self, active: list[int]) -> int:
        current = self.focused_index if self.focused_index is not None else 0
        try:
            return active.index(current)
        except ValueError:
            return 0

    def focus_next(self) -> None:
        """Move focus to the next active element, wrapping around."""
        active = self._active_indices()
        if not active:
            return
        pos = self._current_position(active)
        self.focused_index = active[(pos + 1) % len(active)]

    def focus_previous(self) -> None:
        """Move focus to the previous active element, wrapping around."""
        active = self._active_indices()
        if not active:
            return
        pos = self._current_position(active)
        self.focused_index = active[(pos - 1) % len(active)]

    def focus(self, custom_id: str) -> None:
        """Focus the first active element with the given custom id."""
        for i, element in enumerate(self.elements):
            if element.custom_id == custom_id and element.is_active:
                self.focused_index = i
                return

    def enable_focus(self, id: int, enabled: bool) -> None:
        """Make an element focusable or not."""
        for element in self.elements:
            if element.id == id:
                element.is_active = enabled
                return

    def clear(self) -> None:
        """Forget registered elements; the focused position is kept."""
        self.elements.clear()


class _ThreadFocusManager(threading.local):
    def __init__(self) -> None:
        self.manager = FocusManager()


_local = _ThreadFocusManager()


def with_focus_manager(fn: Callable[[], R]) -> R:
    """Clear this thread's registered focusable elements, then call ``fn``."""
    _local.manager.clear()
    return fn()


def use_focus(options: Optional[UseFocusOptions] = None) -> FocusState:
    """Register the current component as focusable and report its focus state."""
    opts = options if options is not None else UseFocusOptions()
    manager = _local.manager
    focus_id = use_signal(lambda: manager.register(opts.id, opts.is_active, opts.auto_focus))
    return FocusState(is_focused=manager.is_focused(focus_id.get()))


class FocusManagerHandle:
    """Controls the focus manager of the calling thread."""

    def focus_next(self) -> None:
        """Focus the next focusable element."""
        _local.manager.focus_next()

    def focus_previous(self) -> None:
        """Focus the previous focusable element."""
        _local.manager.focus_previous()

    def focus(self, id: str) -> None:
        """Focus the element with the given custom id."""
        _local.manager.focus(id)

    def enable_focus(self, id: int, enabled: bool) -> None:
        """Enable or disable focus for an element."""
        _local.manager.enable_focus(id, enabled)


def use_focus_manager() -> FocusManagerHandle:
    """Return a handle to the focus manager."""
    return FocusManagerHandle()