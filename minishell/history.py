"""Command history kept in memory and appended to a file."""

from __future__ import annotations

import enum
import os
from typing import Iterable, Iterator

HISTORY_FILE = "minishell-history"


class Direction(enum.IntEnum):
    """Which way the arrow keys move through history."""

    UP = 1
    DOWN = 2


def history_path(home: str) -> str:
    """Path of the history file under ``home``."""
    return f"{home}/{HISTORY_FILE}"


def append_line(path: str | os.PathLike[str], line: str) -> bool:
    """Append ``line`` and a newline to ``path``; False if it cannot be written."""
    try:
        with open(path, "a", encoding="utf-8") as stream:
            stream.write(line + "\n")
    except OSError:
        return False
    return True


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Lines of ``path`` without their newlines; empty if it cannot be read."""
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            text = stream.read()
    except OSError:
        return []
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def last_entry(path: str | os.PathLike[str]) -> str | None:
    """The last line of ``path``, or None when there is none."""
    lines = read_lines(path)
    return lines[-1] if lines else None


class History:
    """Entered commands, oldest first, with an arrow-key cursor."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)
        self._offset = 0

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, entry: str) -> None:
        """Add an entry at the end."""
        self._entries.append(entry)

    def get(self, index: int) -> str | None:
        """The entry at ``index``, or None when out of range."""
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def navigate(self, direction: Direction) -> str:
        """Move the cursor one step and return the entry under it.

        Moving up stops at the oldest entry. Moving down past the newest
        entry yields an empty line and eventually wraps back to it.
        """
        length = len(self._entries)
        if direction == Direction.UP:
            self._offset -= 1
        elif direction == Direction.DOWN:
            self._offset += 1
        if self._offset > length:
            self._offset = 0
        if length + self._offset < 0:
            self._offset = -length
        if self._offset >= 0:
            return ""
        entry = self.get(length + self._offset)
        return "" if entry is None else entry

    def reset(self) -> None:
        """Put the cursor back after the newest entry."""
        self._offset = 0

    def record(self, command: str, home: str) -> None:
        """Append ``command`` to the history file under ``home`` and to memory."""
        append_line(history_path(home), command)
        self.append(command)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "History":
        """Read a history file; a missing file gives an empty history."""
        return cls(read_lines(path))