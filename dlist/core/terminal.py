"""
Output channels for dlist.

The primary channel (stdout) only ever carries a device path, so that
``minicom -D $(dlist)`` works. Everything meant for humans goes to the
status channel (stderr).
"""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

# ANSI styling
RED = "\033[0;31m"
YELLOW = "\033[0;33m"
BOLD = "\033[1m"
RESET = "\033[0m"
BACKSPACE = "\b"

COLOR_MODES = ("auto", "always", "never")


def _stream_supports_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed stream
        return False


class Terminal:
    """Writes newline-terminated lines to the primary and status channels."""

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        color: str = "auto",
    ) -> None:
        if color not in COLOR_MODES:
            raise ValueError(f"Unknown color mode '{color}'")
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        if color == "auto":
            self.use_color = _stream_supports_color(self.stderr)
        else:
            self.use_color = color == "always"

    def _style(self, text: str, *codes: str) -> str:
        if not self.use_color:
            return text
        return "".join(codes) + text + RESET

    def output(self, message: str) -> None:
        """Write to the primary channel."""
        print(message, file=self.stdout, flush=True)

    def report(self, message: str) -> None:
        """Write to the status channel."""
        print(message, file=self.stderr, flush=True)

    def report_warning(self, message: str) -> None:
        self.report(f"{self._style('WARNING', YELLOW, BOLD)} {message}")

    def report_error(self, message: str) -> None:
        self.report(f"{self._style('ERROR', RED, BOLD)} {message}")

    def report_fatal(self, message: str) -> None:
        self.report_error(f"{message} -- exiting")

    def report_interrupted(self) -> None:
        # Back over the echoed ^C when attached to a terminal
        prefix = f"{BACKSPACE}{BACKSPACE}\r" if self.use_color else ""
        self.report(f"{prefix}dlist interrupted -- halting")

    def flush(self) -> None:
        for stream in (self.stdout, self.stderr):
            try:
                stream.flush()
            except (OSError, ValueError):
                continue


__all__ = ["Terminal", "COLOR_MODES"]
