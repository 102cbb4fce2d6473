"""Measuring laid-out elements by their ids."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass, field
from typing import Optional

from rnk.hooks.use_signal import Signal, use_signal

__all__ = [
    "Layout",
    "Dimensions",
    "MeasureContext",
    "MeasureRef",
    "set_measure_context",
    "get_measure_context",
    "measure_element",
    "use_measure",
]

ElementId = Hashable


@dataclass(frozen=True)
class Layout:
    """Computed position and size of an element."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Dimensions:
    """Width and height of a measured element."""

    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_layout(cls, layout: Layout) -> Dimensions:
        """Take the size of a computed layout."""
        return cls(width=layout.width, height=layout.height)


@dataclass
class MeasureContext:
    """Computed layouts, looked up by element id."""

    layouts: dict[ElementId, Layout] = field(default_factory=dict)

    def set_layouts(self, layouts: Mapping[ElementId, Layout]) -> None:
        """Replace the known layouts."""
        self.layouts = dict(layouts)

    def measure(self, element_id: ElementId) -> Optional[Dimensions]:
        """Return the dimensions of an element, or None if it has no layout."""
        layout = self.layouts.get(element_id)
        if layout is None:
            return None
        return Dimensions.from_layout(layout)


class _MeasureState(threading.local):
    context: Optional[MeasureContext] = None


_state = _MeasureState()


def set_measure_context(ctx: Optional[MeasureContext]) -> None:
    """Set (or clear, with None) the measure context for this thread."""
    _state.context = ctx


def get_measure_context() -> Optional[MeasureContext]:
    """Return this thread's measure context, if any."""
    return _state.context


def measure_element(element_id: ElementId) -> Optional[Dimensions]:
    """Return the dimensions of an element after layout, or None if unknown."""
    ctx = get_measure_context()
    if ctx is None:
        return None
    return ctx.measure(element_id)


class MeasureRef:
    """Tracks which element a component wants to measure."""

    def __init__(self, element_id: Signal[Optional[ElementId]]) -> None:
        self._element_id = element_id

    def set(self, id: ElementId) -> None:
        """Set the element id to measure."""
        self._element_id.set(id)

    def get(self) -> Optional[ElementId]:
        """Return the element id being tracked, if any."""
        return self._element_id.get()


def use_measure() -> tuple[MeasureRef, Callable[[], Optional[Dimensions]]]:
    """Return a measure ref and a function giving the tracked element's dimensions."""
    element_id: Signal[Optional[ElementId]] = use_signal(lambda: None)
    measure_ref = MeasureRef(element_id)

    def get_dimensions() -> Optional[Dimensions]:
        current = element_id.get()
        if current is None:
            return None
        return measure_element(current)

    return measure_ref, get_dimensions