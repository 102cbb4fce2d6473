"""Scroll state for scrollable content areas."""

from __future__ import annotations

from dataclasses import dataclass

from rnk.hooks.context import current_context

__all__ = ["ScrollState", "use_scroll"]


@dataclass
class ScrollState:
    """Scroll offsets, content size and viewport size of a scrollable area."""

    offset_y: int = 0
    offset_x: int = 0
    content_height: int = 0
    content_width: int = 0
    viewport_height: int = 0
    viewport_width: int = 0

    @classmethod
    def with_viewport(cls, viewport_width: int, viewport_height: int) -> ScrollState:
        """Create a scroll state with the given viewport size."""
        return cls(viewport_width=viewport_width, viewport_height=viewport_height)

    def set_content_size(self, width: int, height: int) -> None:
        """Set the content size and keep the offsets in range."""
        self.content_width = width
        self.content_height = height
        self._clamp_offset()

    def set_viewport_size(self, width: int, height: int) -> None:
        """Set the viewport size and keep the offsets in range."""
        self.viewport_width = width
        self.viewport_height = height
        self._clamp_offset()

    def scroll_up(self, lines: int) -> None:
        """Scroll up by ``lines`` rows, stopping at the top."""
        self.offset_y = max(self.offset_y - lines, 0)

    def scroll_down(self, lines: int) -> None:
        """Scroll down by ``lines`` rows, stopping at the bottom."""
        self.offset_y += lines
        self._clamp_offset()

    def scroll_left(self, cols: int) -> None:
        """Scroll left by ``cols`` columns, stopping at the left edge."""
        self.offset_x = max(self.offset_x - cols, 0)

    def scroll_right(self, cols: int) -> None:
        """Scroll right by ``cols`` columns, stopping at the right edge."""
        self.offset_x += cols
        self._clamp_offset()

    def scroll_to_y(self, offset: int) -> None:
        """Scroll to a vertical offset, clamped to the valid range."""
        self.offset_y = offset
        self._clamp_offset()

    def scroll_to_x(self, offset: int) -> None:
        """Scroll to a horizontal offset, clamped to the valid range."""
        self.offset_x = offset
        self._clamp_offset()

    def scroll_to_top(self) -> None:
        """Scroll to the first row."""
        self.offset_y = 0

    def scroll_to_bottom(self) -> None:
        """Scroll so that the last row is at the bottom of the viewport."""
        self.offset_y = self.max_offset_y()

    def page_up(self) -> None:
        """Scroll up by one viewport height (at least one row)."""
        self.scroll_up(max(self.viewport_height, 1))

    def page_down(self) -> None:
        """Scroll down by one viewport height (at least one row)."""
        self.scroll_down(max(self.viewport_height, 1))

    def scroll_to_item(self, index: int) -> None:
        """Adjust the vertical offset so that row ``index`` is visible."""
        if index < self.offset_y:
            self.offset_y = index
        elif index >= self.offset_y + self.viewport_height:
            if self.viewport_height > 0:
                self.offset_y = max(index - (self.viewport_height - 1), 0)
            else:
                self.offset_y = 0

    def max_offset_y(self) -> int:
        """Largest valid vertical offset."""
        return max(self.content_height - self.viewport_height, 0)

    def max_offset_x(self) -> int:
        """Largest valid horizontal offset."""
        return max(self.content_width - self.viewport_width, 0)

    def can_scroll_up(self) -> bool:
        """True if there is content above the viewport."""
        return self.offset_y > 0

    def can_scroll_down(self) -> bool:
        """True if there is content below the viewport."""
        return self.offset_y < self.max_offset_y()

    def can_scroll_left(self) -> bool:
        """True if there is content left of the viewport."""
        return self.offset_x > 0

    def can_scroll_right(self) -> bool:
        """True if there is content right of the viewport."""
        return self.offset_x < self.max_offset_x()

    def scroll_percent_y(self) -> float:
        """Vertical position as a fraction from 0.0 to 1.0."""
        maximum = self.max_offset_y()
        return 0.0 if maximum == 0 else self.offset_y / maximum

    def scroll_percent_x(self) -> float:
        """Horizontal position as a fraction from 0.0 to 1.0."""
        maximum = self.max_offset_x()
        return 0.0 if maximum == 0 else self.offset_x / maximum

    def visible_range(self) -> tuple[int, int]:
        """Visible rows as ``(start, end)``, end exclusive."""
        start = self.offset_y
        end = min(self.offset_y + self.viewport_height, self.content_height)
        return start, end

    def _clamp_offset(self) -> None:
        self.offset_y = min(self.offset_y, self.max_offset_y())
        self.offset_x = min(self.offset_x, self.max_offset_x())


def use_scroll() -> ScrollState:
    """Return this component's scroll state, kept across renders."""
    ctx = current_context()
    if ctx is None:
        raise RuntimeError("use_scroll must be called within a render context")
    storage = ctx.use_hook(ScrollState)
    state = storage.get()
    if not isinstance(state, ScrollState):
        raise TypeError("scroll state should be the correct type")
    return state