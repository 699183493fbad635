"""Non-blocking key input and decoding into viewer commands (cross-platform)."""

from __future__ import annotations

import logging
import os
import sys
import time
from enum import Enum
from typing import Any, Optional

IS_WINDOWS = sys.platform == "win32"

if IS_WINDOWS:
    import msvcrt
else:
    import fcntl
    import select
    import termios
    import tty

logger = logging.getLogger(__name__)


class Command(Enum):
    """What a key press asks the viewer to do."""

    QUIT = "quit"
    LINE_UP = "line_up"
    LINE_DOWN = "line_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    TOP = "top"
    BOTTOM = "bottom"


CHAR_COMMANDS = {
    "\x11": Command.QUIT,  # ctrl-q
    "q": Command.QUIT,
    "Q": Command.QUIT,
    "k": Command.LINE_UP,
    "j": Command.LINE_DOWN,
    "b": Command.PAGE_UP, "\x02": Command.PAGE_UP,  # b or ctrl-b
    "f": Command.PAGE_DOWN, "\x06": Command.PAGE_DOWN,  # f or ctrl-f
    " ": Command.PAGE_DOWN,
    "g": Command.TOP,
    "G": Command.BOTTOM,
}

ESCAPE_COMMANDS = {
    "[A": Command.LINE_UP, "OA": Command.LINE_UP,
    "[B": Command.LINE_DOWN, "OB": Command.LINE_DOWN,
    "[5~": Command.PAGE_UP,
    "[6~": Command.PAGE_DOWN,
    "[H": Command.TOP, "[1~": Command.TOP, "OH": Command.TOP,
    "[F": Command.BOTTOM, "[4~": Command.BOTTOM, "OF": Command.BOTTOM,
}

# Second byte of the two-byte sequences msvcrt reports for special keys
WINDOWS_COMMANDS = {
    b"H": Command.LINE_UP,
    b"P": Command.LINE_DOWN,
    b"I": Command.PAGE_UP,
    b"Q": Command.PAGE_DOWN,
    b"G": Command.TOP,
    b"O": Command.BOTTOM,
}


def decode_key(raw: bytes) -> Optional[Command]:
    """Decode the bytes of one key press.

    Args:
        raw: A single character, or ESC followed by the rest of its sequence

    Returns:
        The matching command, or None for keys the viewer ignores
    """
    text = raw.decode("utf-8", errors="ignore")
    if not text:
        return None
    if text[0] == "\x1b":
        sequence = text[1:]
        for prefix, command in ESCAPE_COMMANDS.items():
            if sequence.startswith(prefix):
                return command
        return None
    return CHAR_COMMANDS.get(text[0])


class KeyReader:
    """Reads key presses without blocking the refresh loop."""

    def __init__(self, poll_timeout: float = 0.02):
        self.poll_timeout = poll_timeout
        self._old_terminal_settings: Optional[list[Any]] = None

    def setup(self) -> None:
        """Put the terminal in cbreak mode, with ctrl-q delivered as a key."""
        if IS_WINDOWS:
            return
        try:
            fd = sys.stdin.fileno()
            self._old_terminal_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
            attrs = termios.tcgetattr(fd)
            attrs[0] &= ~termios.IXON  # no XON/XOFF, or ctrl-q never reaches us
            termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
        except (termios.error, AttributeError, ValueError):
            self._old_terminal_settings = None

    def restore(self) -> None:
        if not IS_WINDOWS and self._old_terminal_settings:
            try:
                termios.tcsetattr(sys.stdin, termios.TCSADRAIN, self._old_terminal_settings)
            except (termios.error, ValueError):
                pass
            self._old_terminal_settings = None

    def read(self) -> Optional[Command]:
        if IS_WINDOWS:
            return self._read_windows()
        return self._read_unix()

    def _read_windows(self) -> Optional[Command]:
        if not msvcrt.kbhit():
            return None
        ch = msvcrt.getch()
        if ch in (b"\x00", b"\xe0"):
            if msvcrt.kbhit():
                return WINDOWS_COMMANDS.get(msvcrt.getch())
            return None
        return decode_key(ch)

    def _read_unix(self) -> Optional[Command]:
        try:
            ready, _, _ = select.select([sys.stdin], [], [], self.poll_timeout)
            if not ready:
                return None

            fd = sys.stdin.fileno()
            first = os.read(fd, 1)
            if not first:
                logger.info("end of input, quitting")
                return Command.QUIT
            if first != b"\x1b":
                return decode_key(first)

            # Read the rest of the escape sequence without blocking
            old_flags = fcntl.fcntl(fd, fcntl.F_GETFL)
            fcntl.fcntl(fd, fcntl.F_SETFL, old_flags | os.O_NONBLOCK)
            try:
                time.sleep(0.02)
                try:
                    rest = os.read(fd, 5)
                except BlockingIOError:
                    rest = b""
            finally:
                fcntl.fcntl(fd, fcntl.F_SETFL, old_flags)
            return decode_key(first + rest)
        except (OSError, ValueError) as e:
            logger.warning("cannot read keys (%s), quitting", e)
            return Command.QUIT
