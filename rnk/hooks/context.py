"""Per-component hook storage and the render cycle that drives it."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional, TypeVar

__all__ = [
    "HookStorage",
    "Effect",
    "HookContext",
    "current_context",
    "with_hooks",
]

R = TypeVar("R")

RenderCallback = Callable[[], None]
Cleanup = Callable[[], None]
EffectCallback = Callable[[], Optional[Cleanup]]


class HookStorage:
    """A mutable cell holding the value of one hook."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def get(self) -> Any:
        """Return the stored value."""
        return self._value

    def set(self, value: Any) -> None:
        """Replace the stored value."""
        self._value = value


@dataclass
class Effect:
    """An effect to run after render; it may return a cleanup function."""

    callback: EffectCallback
    cleanup: Optional[Cleanup] = None
    deps: Optional[list[int]] = None


@dataclass
class HookContext:
    """Hook state for a single component across renders."""

    hooks: list[HookStorage] = field(default_factory=list)
    hook_index: int = 0
    effects: list[Effect] = field(default_factory=list)
    cleanups: list[Optional[Cleanup]] = field(default_factory=list)
    render_callback: Optional[RenderCallback] = None
    is_rendering: bool = False

    def begin_render(self) -> None:
        """Start a render cycle."""
        self.hook_index = 0
        self.effects.clear()
        self.is_rendering = True

    def end_render(self) -> None:
        """Finish a render cycle."""
        self.is_rendering = False

    def use_hook(self, init: Callable[[], Any]) -> HookStorage:
        """Return the hook at the current position, creating it with ``init`` on first use."""
        index = self.hook_index
        self.hook_index += 1
        if index >= len(self.hooks):
            storage = HookStorage(init())
            self.hooks.append(storage)
            return storage
        return self.hooks[index]

    def add_effect(self, effect: Effect) -> None:
        """Queue an effect to run after render."""
        self.effects.append(effect)

    def run_effects(self) -> None:
        """Run previous cleanups, then run queued effects and keep their cleanups."""
        cleanups, self.cleanups = self.cleanups, []
        for cleanup in cleanups:
            if cleanup is not None:
                cleanup()

        effects, self.effects = self.effects, []
        for effect in effects:
            self.cleanups.append(effect.callback())

    def request_render(self) -> None:
        """Ask the owner to re-render, if a render callback is set."""
        if self.render_callback is not None:
            self.render_callback()


class _CurrentContext(threading.local):
    context: Optional[HookContext] = None


_current = _CurrentContext()


def current_context() -> Optional[HookContext]:
    """Return the hook context of the component being rendered on this thread."""
    return _current.context


def with_hooks(ctx: HookContext, fn: Callable[[], R]) -> R:
    """Render ``fn`` with ``ctx`` as the current hook context, then run its effects."""
    _current.context = ctx
    try:
        ctx.begin_render()
        try:
            result = fn()
        finally:
            ctx.end_render()
        ctx.run_effects()
    finally:
        _current.context = None
    return result