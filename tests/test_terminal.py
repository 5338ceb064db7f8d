from __future__ import annotations

import io
import os

import pytest

from mcp_toggle.exceptions import UnsupportedTerminalError
from mcp_toggle.terminal import RawTerminal, require_interactive

posix_only = pytest.mark.skipif(os.name == "nt", reason="POSIX key decoding")


def test_require_interactive_rejects_non_tty() -> None:
    with pytest.raises(UnsupportedTerminalError):
        require_interactive(io.StringIO())


def test_raw_terminal_rejects_non_tty() -> None:
    with pytest.raises(UnsupportedTerminalError):
        with RawTerminal(io.StringIO()):
            pass


@posix_only
@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x1b[A", "up"),
        (b"\x1b[B", "down"),
        (b"\x1b", "escape"),
        (b"\r", "enter"),
        (b"\n", "enter"),
        (b" ", "space"),
        (b"\x03", "interrupt"),
        (b"j", "j"),
        (b"\x1b[C", "\x1b[C"),
    ],
)
def test_read_key_decodes_sequences(data: bytes, expected: str) -> None:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, data)
        with os.fdopen(read_fd, "r", closefd=False) as stream:
            assert RawTerminal(stream).read_key() == expected
    finally:
        os.close(read_fd)
        os.close(write_fd)


@posix_only
def test_raw_terminal_reads_ctrl_c_as_key() -> None:
    import pty
    import termios

    master_fd, slave_fd = pty.openpty()
    try:
        with os.fdopen(slave_fd, "r", closefd=False) as stream:
            before = termios.tcgetattr(slave_fd)
            assert before[3] & termios.ISIG

            with RawTerminal(stream) as terminal:
                assert not termios.tcgetattr(slave_fd)[3] & termios.ISIG
                os.write(master_fd, b"\x03")
                assert terminal.read_key() == "interrupt"

            assert termios.tcgetattr(slave_fd) == before
    finally:
        os.close(master_fd)
        os.close(slave_fd)
