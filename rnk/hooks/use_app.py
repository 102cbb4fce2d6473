"""Access to application-level controls from within components."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

__all__ = ["AppContext", "set_app_context", "get_app_context", "use_app"]


@dataclass
class AppContext:
    """Application controls handed to components; shares the app's exit flag."""

    exit_flag: threading.Event = field(default_factory=threading.Event)

    def exit(self) -> None:
        """Ask the application to exit."""
        self.exit_flag.set()


class _AppState(threading.local):
    context: Optional[AppContext] = None


_state = _AppState()


def set_app_context(ctx: Optional[AppContext]) -> None:
    """Set (or clear, with None) the app context for this thread."""
    _state.context = ctx


def get_app_context() -> Optional[AppContext]:
    """Return this thread's app context, if any."""
    return _state.context


def use_app() -> AppContext:
    """Return the current app context; raises RuntimeError outside an app."""
    ctx = get_app_context()
    if ctx is None:
        raise RuntimeError("use_app must be called within an App context")
    return ctx