"""Handles for writing to stdout and stderr and reading from stdin."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = [
    "StdoutHandle",
    "StderrHandle",
    "StdinHandle",
    "use_stdout",
    "use_stderr",
    "use_stdin",
]


def _write(stream: TextIO, text: str) -> None:
    stream.write(text)
    stream.flush()


class StdoutHandle:
    """Writes to standard output."""

    def write(self, text: str) -> None:
        """Write text and flush."""
        _write(sys.stdout, text)

    def writeln(self, text: str) -> None:
        """Write text followed by a newline and flush."""
        _write(sys.stdout, text + "\n")

    def raw(self) -> TextIO:
        """Return the underlying stream."""
        return sys.stdout


class StderrHandle:
    """Writes to standard error."""

    def write(self, text: str) -> None:
        """Write text and flush."""
        _write(sys.stderr, text)

    def writeln(self, text: str) -> None:
        """Write text followed by a newline and flush."""
        _write(sys.stderr, text + "\n")

    def raw(self) -> TextIO:
        """Return the underlying stream."""
        return sys.stderr


def _isatty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError, OSError):
        return False


class StdinHandle:
    """Reads from standard input and reports whether the streams are terminals."""

    def is_tty(self) -> bool:
        """True when stdin is connected to a terminal."""
        return _isatty(sys.stdin)

    def stdout_is_tty(self) -> bool:
        """True when stdout is connected to a terminal."""
        return _isatty(sys.stdout)

    def stderr_is_tty(self) -> bool:
        """True when stderr is connected to a terminal."""
        return _isatty(sys.stderr)

    def read_line(self) -> str:
        """Read one line from stdin, including its newline; blocks."""
        return sys.stdin.readline()


def use_stdout() -> StdoutHandle:
    """Return a handle for writing to stdout."""
    return StdoutHandle()


def use_stderr() -> StderrHandle:
    """Return a handle for writing to stderr."""
    return StderrHandle()


def use_stdin() -> StdinHandle:
    """Return a handle for reading from stdin."""
    return StdinHandle()