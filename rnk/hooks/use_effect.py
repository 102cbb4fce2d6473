"""Effect hooks: side effects that run after a component renders."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any, Optional, Union

from rnk.hooks.context import Effect, HookContext, current_context

__all__ = ["deps_hash", "use_effect", "use_effect_once"]

Cleanup = Callable[[], None]
EffectFn = Callable[[], Optional[Cleanup]]
Deps = Union[Sequence[Hashable], Hashable, None]


def deps_hash(deps: Deps) -> int:
    """Return a hash summarising effect dependencies.

    An empty (or missing) dependency list always hashes to 0.
    """
    if deps is None:
        return 0
    if isinstance(deps, (tuple, list)):
        if not deps:
            return 0
        return hash(tuple(deps))
    return hash((deps,))


def _require_context(hook_name: str) -> HookContext:
    ctx = current_context()
    if ctx is None:
        raise RuntimeError(f"{hook_name} must be called within a component")
    return ctx


def use_effect(effect: EffectFn, deps: Deps = ()) -> None:
    """Schedule ``effect`` after render when ``deps`` differ from the previous render.

    The effect may return a cleanup function, which runs before the next
    round of effects.
    """
    ctx = _require_context("use_effect")
    new_hash = deps_hash(deps)

    storage = ctx.use_hook(lambda: None)
    previous: Any = storage.get()

    if previous is None or previous != new_hash:
        storage.set(new_hash)
        ctx.add_effect(Effect(callback=effect, deps=[new_hash]))


def use_effect_once(effect: EffectFn) -> None:
    """Schedule ``effect`` only after the first render of the component."""
    ctx = _require_context("use_effect_once")

    storage = ctx.use_hook(lambda: False)
    if not storage.get():
        storage.set(True)
        ctx.add_effect(Effect(callback=effect))