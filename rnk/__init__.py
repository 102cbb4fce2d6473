"""Hooks, focus, scrolling, input dispatch and text measurement for terminal user interfaces."""

__version__ = "0.6.3"