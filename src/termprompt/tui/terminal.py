"""
Terminal acquisition for interactive prompts.

Puts stdin into cbreak mode for the duration of a prompt and exposes it
as a blocking :class:`~termprompt.tui.keys.ByteSource`.

  - Unix: termios cbreak (no echo, no canonical mode, CR kept as 13,
    ISIG kept so Ctrl-C still raises ``KeyboardInterrupt``)
  - Windows: console modes switched to VT100 output and raw input, with
    application cursor keys so arrows arrive as SS3 (``ESC O``)
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from termprompt.errors import TerminalUnavailableError
from termprompt.logging import get_logger
from termprompt.tui.ansi import application_cursor_keys

_IS_WINDOWS = os.name == "nt"

if not _IS_WINDOWS:
    import termios

logger = get_logger("tui.terminal")


class FileByteSource:
    """Reads one byte at a time from file descriptor *fd*."""

    def __init__(self, fd: int) -> None:
        self._fd = fd

    def read_byte(self) -> int:
        data = os.read(self._fd, 1)
        if not data:
            raise EOFError("input closed")
        return data[0]


class ConsoleByteSource:
    """Reads keys from the Windows console via ``msvcrt`` as UTF-8 bytes."""

    def __init__(self) -> None:
        self._pending = b""

    def read_byte(self) -> int:
        if not self._pending:
            import msvcrt

            self._pending = msvcrt.getwch().encode("utf-8", "surrogatepass")
        byte, self._pending = self._pending[0], self._pending[1:]
        return byte


def _set_cbreak(fd: int) -> None:
    """Apply cbreak terminal settings: no echo, no canonical mode."""
    new = termios.tcgetattr(fd)
    # LFLAG: clear ICANON, ECHO, IEXTEN; keep ISIG for Ctrl-C
    new[3] &= ~(termios.ICANON | termios.ECHO | termios.IEXTEN)
    # IFLAG: clear IXON, IXOFF, ICRNL, INLCR, IGNCR
    new[1] &= ~(
        termios.IXON | termios.IXOFF | termios.ICRNL | termios.INLCR | termios.IGNCR
    )
    new[6][termios.VMIN] = 1
    new[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, new)


@contextmanager
def application_cursor_mode(output: TextIO) -> Iterator[None]:
    """Ask the terminal for SS3 arrow keys, restoring CSI arrows on exit."""
    output.write(application_cursor_keys(True))
    output.flush()
    try:
        yield
    finally:
        output.write(application_cursor_keys(False))
        output.flush()


@contextmanager
def _unix_terminal() -> Iterator[FileByteSource]:
    fd = sys.stdin.fileno()
    if not os.isatty(fd):
        raise TerminalUnavailableError("stdin is not a terminal")
    old = termios.tcgetattr(fd)
    _set_cbreak(fd)
    logger.debug("Entered cbreak mode on fd %d", fd)
    try:
        yield FileByteSource(fd)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
        logger.debug("Restored terminal mode on fd %d", fd)


@contextmanager
def _windows_terminal() -> Iterator[ConsoleByteSource]:
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.windll.kernel32

    STD_INPUT_HANDLE = -10
    STD_OUTPUT_HANDLE = -11
    stdin_handle = kernel32.GetStdHandle(STD_INPUT_HANDLE)
    stdout_handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE)

    old_out_mode = wintypes.DWORD()
    old_in_mode = wintypes.DWORD()
    if not kernel32.GetConsoleMode(stdin_handle, ctypes.byref(old_in_mode)):
        raise TerminalUnavailableError("stdin is not a console")
    kernel32.GetConsoleMode(stdout_handle, ctypes.byref(old_out_mode))

    ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
    ENABLE_VIRTUAL_TERMINAL_INPUT = 0x0200
    kernel32.SetConsoleMode(stdout_handle, old_out_mode.value | ENABLE_VIRTUAL_TERMINAL_PROCESSING)
    # clear ECHO, LINE, PROCESSED
    new_in = (old_in_mode.value | ENABLE_VIRTUAL_TERMINAL_INPUT) & ~(0x0004 | 0x0002 | 0x0001)
    kernel32.SetConsoleMode(stdin_handle, new_in)
    try:
        with application_cursor_mode(sys.stdout):
            yield ConsoleByteSource()
    finally:
        kernel32.SetConsoleMode(stdout_handle, old_out_mode)
        kernel32.SetConsoleMode(stdin_handle, old_in_mode)


def raw_terminal():
    """
    Context manager yielding a byte source bound to the attached terminal.

    The previous terminal mode is restored on exit, including when the
    prompt is interrupted.
    """
    if _IS_WINDOWS:
        return _windows_terminal()
    return _unix_terminal()
