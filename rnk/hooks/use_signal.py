"""Reactive signals stored in component hooks."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

from rnk.hooks.context import RenderCallback, current_context

__all__ = ["Signal", "use_signal"]

T = TypeVar("T")
R = TypeVar("R")


class Signal(Generic[T]):
    """A value that requests a re-render whenever it is changed."""

    def __init__(self, value: T, render_callback: Optional[RenderCallback] = None) -> None:
        self._value = value
        self._render_callback = render_callback

    def get(self) -> T:
        """Return the current value."""
        return self._value

    def with_value(self, fn: Callable[[T], R]) -> R:
        """Call ``fn`` with the current value and return its result."""
        return fn(self._value)

    def set(self, value: T) -> None:
        """Store a new value and request a re-render."""
        self._value = value
        self._trigger_render()

    def update(self, fn: Callable[[T], T]) -> None:
        """Replace the value with ``fn(value)`` and request a re-render."""
        self._value = fn(self._value)
        self._trigger_render()

    def set_silent(self, value: T) -> None:
        """Store a new value without requesting a re-render."""
        self._value = value

    def _trigger_render(self) -> None:
        if self._render_callback is not None:
            self._render_callback()

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Signal({self._value!r})"


def use_signal(init: Callable[[], Any]) -> Signal[Any]:
    """Return this component's signal at the current hook position.

    ``init`` supplies the value on the first render; later renders keep the stored value.
    """
    ctx = current_context()
    if ctx is None:
        raise RuntimeError("use_signal must be called within a component")

    render_callback = ctx.render_callback
    init_value = init()
    storage = ctx.use_hook(lambda: Signal(init_value, render_callback))
    signal = storage.get()
    if isinstance(signal, Signal):
        return signal
    return Signal(init_value, render_callback)