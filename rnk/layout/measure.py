"""Display-width aware text measurement, wrapping, truncation and padding."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

import regex
from wcwidth import wcswidth, wcwidth

__all__ = [
    "TextAlign",
    "measure_text_width",
    "display_width",
    "measure_text",
    "wrap_text",
    "truncate_text",
    "truncate_start",
    "truncate_middle",
    "pad_text",
]

_GRAPHEME = regex.compile(r"\X")


class TextAlign(Enum):
    """Horizontal alignment used when padding text."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def _graphemes(text: str) -> list[str]:
    return _GRAPHEME.findall(text)


def _width(text: str) -> int:
    """Terminal cell width of a string; non-printable characters count as zero."""
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(ch), 0) for ch in text)


def _take(graphemes: Iterable[str], limit: int) -> list[str]:
    """Take graphemes in order while their total width stays within ``limit``."""
    taken: list[str] = []
    used = 0
    for grapheme in graphemes:
        width = _width(grapheme)
        if used + width > limit:
            break
        taken.append(grapheme)
        used += width
    return taken


def _lines(text: str) -> list[str]:
    """Split into lines on ``\\n``, dropping a trailing empty line and any ``\\r``."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def measure_text_width(text: str) -> int:
    """Return the display width of ``text``, measured grapheme by grapheme."""
    return sum(_width(grapheme) for grapheme in _graphemes(text))


def display_width(text: str) -> int:
    """Alias of :func:`measure_text_width`."""
    return measure_text_width(text)


def measure_text(text: str) -> tuple[int, int]:
    """Return ``(width, height)`` of multi-line text; height is at least 1."""
    lines = _lines(text)
    height = max(len(lines), 1)
    width = max((_width(line) for line in lines), default=0)
    return width, height


def wrap_text(text: str, max_width: int) -> str:
    """Hard-wrap text so that no line exceeds ``max_width`` cells."""
    if max_width <= 0:
        return ""

    pieces: list[str] = []
    current = 0
    for grapheme in _graphemes(text):
        width = _width(grapheme)
        if grapheme == "\n":
            pieces.append("\n")
            current = 0
        elif current + width > max_width:
            pieces.append("\n")
            pieces.append(grapheme)
            current = width
        else:
            pieces.append(grapheme)
            current += width
    return "".join(pieces)


def _clipped_ellipsis(ellipsis: str, max_width: int) -> str:
    return "".join(_take(_graphemes(ellipsis), max_width))


def truncate_text(text: str, max_width: int, ellipsis: str) -> str:
    """Cut text at the end so that it fits, appending ``ellipsis``."""
    if measure_text_width(text) <= max_width:
        return text
    ellipsis_width = measure_text_width(ellipsis)
    if max_width <= ellipsis_width:
        return _clipped_ellipsis(ellipsis, max_width)
    kept = _take(_graphemes(text), max_width - ellipsis_width)
    return "".join(kept) + ellipsis


def truncate_start(text: str, max_width: int, ellipsis: str) -> str:
    """Cut text at the start so that it fits, prefixing ``ellipsis``."""
    if measure_text_width(text) <= max_width:
        return text
    ellipsis_width = measure_text_width(ellipsis)
    if max_width <= ellipsis_width:
        return _clipped_ellipsis(ellipsis, max_width)
    kept = _take(reversed(_graphemes(text)), max_width - ellipsis_width)
    return ellipsis + "".join(reversed(kept))


def truncate_middle(text: str, max_width: int, ellipsis: str) -> str:
    """Cut text in the middle so that it fits, inserting ``ellipsis``."""
    if measure_text_width(text) <= max_width:
        return text
    ellipsis_width = measure_text_width(ellipsis)
    if max_width <= ellipsis_width:
        return _clipped_ellipsis(ellipsis, max_width)

    available = max_width - ellipsis_width
    left_width = available // 2
    right_width = available - left_width

    graphemes = _graphemes(text)
    left = "".join(_take(graphemes, left_width))
    right = "".join(reversed(_take(reversed(graphemes), right_width)))
    return f"{left}{ellipsis}{right}"


def pad_text(text: str, width: int, align: TextAlign = TextAlign.LEFT) -> str:
    """Pad text with spaces up to ``width`` cells using the given alignment."""
    text_width = _width(text)
    if text_width >= width:
        return text

    padding = width - text_width
    if align is TextAlign.RIGHT:
        return " " * padding + text
    if align is TextAlign.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding