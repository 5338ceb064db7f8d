"""Single-keystroke input from the controlling terminal."""

from __future__ import annotations

import os
import sys

from mcp_toggle.exceptions import UnsupportedTerminalError

if os.name == "nt":
    import msvcrt
else:
    import termios
    import tty

# Escape sequences and control characters mapped to key names
POSIX_KEYS = {
    "\x1b[A": "up",
    "\x1bOA": "up",
    "\x1b[B": "down",
    "\x1bOB": "down",
    "\x1b": "escape",
    "\r": "enter",
    "\n": "enter",
    " ": "space",
    "\x03": "interrupt",
}

WINDOWS_ARROWS = {
    b"H": "up",
    b"P": "down",
}

WINDOWS_KEYS = {
    b"\x1b": "escape",
    b"\r": "enter",
    b" ": "space",
    b"\x03": "interrupt",
}


def require_interactive(stream) -> None:
    """Raise UnsupportedTerminalError unless stream is a TTY."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        raise UnsupportedTerminalError()


class RawTerminal:
    """Context manager that switches stdin to per-keystroke delivery.

    On POSIX the terminal is put in cbreak mode (no line buffering, no echo)
    with signal keys turned off, and restored on exit. Ctrl-C is then read
    as the "interrupt" key.
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin
        self._saved_attrs = None

    def __enter__(self) -> "RawTerminal":
        require_interactive(self.stream)
        if os.name != "nt":
            fd = self.stream.fileno()
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            # Ctrl-C arrives as "\x03" data instead of SIGINT
            attrs = termios.tcgetattr(fd)
            attrs[3] &= ~termios.ISIG
            termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved_attrs is not None:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def read_key(self) -> str:
        """Block until one key event arrives and return its name.

        Named keys come back as "up", "down", "space", "enter", "escape" or
        "interrupt"; anything else is returned as the characters received.
        """
        if os.name == "nt":
            return self._read_key_windows()
        # A single read returns one whole escape sequence, so a lone ESC
        # is distinguishable from an arrow key.
        data = os.read(self.stream.fileno(), 8).decode("utf-8", errors="ignore")
        return POSIX_KEYS.get(data, data)

    def _read_key_windows(self) -> str:
        key = msvcrt.getch()
        if key in (b"\x00", b"\xe0"):
            return WINDOWS_ARROWS.get(msvcrt.getch(), "")
        if key in WINDOWS_KEYS:
            return WINDOWS_KEYS[key]
        return key.decode("utf-8", errors="ignore")
