"""Reading a command line from a terminal in non-canonical mode."""

from __future__ import annotations

import termios
from contextlib import contextmanager
from typing import Callable, Iterator, TextIO

from .history import Direction, History
from .prompt import ERASE_LINE, clear_screen

MAX_LINE = 999999

CTRL_D = "\x04"
CTRL_L = "\x0c"
ESCAPE = "\033"
DELETE = "\x7f"


@contextmanager
def raw_mode(stream: TextIO) -> Iterator[TextIO]:
    """Turn off line buffering and echo on ``stream`` for the duration.

    Raises OSError when ``stream`` is not a terminal.
    """
    if not stream.isatty():
        raise OSError("standard input is not a terminal")
    fd = stream.fileno()
    termios.tcdrain(fd)
    saved = termios.tcgetattr(fd)
    attributes = termios.tcgetattr(fd)
    attributes[3] &= ~(
        termios.ICANON
        | termios.ECHOK
        | termios.ECHO
        | termios.ECHONL
        | termios.ECHOE
        | termios.IEXTEN
    )
    attributes[6][termios.VMIN] = 1
    attributes[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSADRAIN, attributes)
    try:
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


class LineEditor:
    """A minimal line editor with backspace, history and screen clearing.

    ``read_char`` returns one character, or an empty string at end of
    input; ``write`` shows text; ``prompt`` returns the prompt to draw.
    """

    def __init__(
        self,
        read_char: Callable[[], str],
        write: Callable[[str], object],
        prompt: Callable[[], str],
        history: History,
    ) -> None:
        self._read_char = read_char
        self._write = write
        self._prompt = prompt
        self.history = history

    def _recall(self, direction: Direction) -> list[str]:
        self._write(ERASE_LINE)
        entry = self.history.navigate(direction)
        self._write(self._prompt())
        self._write(entry)
        return list(entry)

    def _escape(self, buffer: list[str]) -> list[str]:
        self._read_char()
        key = self._read_char()
        if key == "A":
            return self._recall(Direction.UP)
        if key == "B":
            return self._recall(Direction.DOWN)
        return []

    def _backspace(self, buffer: list[str]) -> None:
        self._write(ERASE_LINE)
        self._write(self._prompt())
        if buffer:
            buffer.pop()
            self._write("".join(buffer))

    def read_line(self) -> str | None:
        """Read one line.

        Returns None when input ends before anything was typed; raises
        EOFError on Ctrl-D.
        """
        self._write(self._prompt())
        buffer: list[str] = []
        at_end = False
        while len(buffer) < MAX_LINE - 1:
            ch = self._read_char()
            if not ch:
                at_end = True
                break
            if ch in ("\n", "\0"):
                break
            if ch == CTRL_D:
                raise EOFError
            if ch == ESCAPE:
                buffer = self._escape(buffer)
            elif ch == DELETE:
                self._backspace(buffer)
            elif ch == CTRL_L:
                self._write(clear_screen())
                self._write(self._prompt())
                self._write("".join(buffer))
            else:
                self._write(ch)
                buffer.append(ch)
        self._write("\n")
        self.history.reset()
        if at_end and not buffer:
            return None
        return "".join(buffer)