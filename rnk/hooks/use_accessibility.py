"""Screen reader detection for accessibility-aware rendering."""

from __future__ import annotations

import os
import subprocess
import sys
import threading
from typing import Optional

__all__ = [
    "use_is_screen_reader_enabled",
    "set_screen_reader_enabled",
    "clear_screen_reader_cache",
]

_INDICATORS = (
    "SCREEN_READER",
    "ACCESSIBILITY_ENABLED",
    "ORCA_ENABLED",
    "NVDA_RUNNING",
    "JAWS_RUNNING",
    "VOICEOVER_RUNNING",
    "TERM_PROGRAM",
)


def _voiceover_enabled() -> bool:
    try:
        result = subprocess.run(
            ["defaults", "read", "com.apple.universalaccess", "voiceOverOnOffKey"],
            capture_output=True,
            check=False,
        )
    except OSError:
        return False
    if result.returncode != 0:
        return False
    return result.stdout.decode("utf-8", errors="replace").strip() == "1"


def _detect_screen_reader() -> bool:
    for name in _INDICATORS:
        value = os.environ.get(name)
        if value is None:
            continue
        if name == "TERM_PROGRAM":
            if "accessibility" in value.lower():
                return True
        elif value and value != "0" and value.lower() != "false":
            return True

    if sys.platform == "darwin" and _voiceover_enabled():
        return True
    return False


class _Cache(threading.local):
    enabled: Optional[bool] = None


_cache = _Cache()


def use_is_screen_reader_enabled() -> bool:
    """Return True if a screen reader appears to be in use; the result is cached."""
    if _cache.enabled is None:
        _cache.enabled = _detect_screen_reader()
    return _cache.enabled


def set_screen_reader_enabled(enabled: bool) -> None:
    """Override the detected screen reader status."""
    _cache.enabled = enabled


def clear_screen_reader_cache() -> None:
    """Forget the cached status so that the next call detects it again."""
    _cache.enabled = None