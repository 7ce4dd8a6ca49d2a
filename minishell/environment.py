"""The shell's environment: an ordered list of NAME=value entries."""

from __future__ import annotations

from typing import Iterable, Iterator

from .textutil import before_char, is_only_space, split_fields, trim


class EnvError(Exception):
    """Raised when an environment operation cannot be carried out."""


class Environment:
    """Ordered NAME=value entries, looked up by name prefix."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def find(self, name: str) -> int | None:
        """Index of the first entry beginning with ``name``, or None."""
        for index, entry in enumerate(self._entries):
            if entry.startswith(name):
                return index
        return None

    def get(self, name: str) -> str | None:
        """Value of the first entry beginning with ``name``, or None."""
        index = self.find(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1:]

    def home(self) -> str:
        """The HOME directory, or ``.`` when it is not set."""
        value = self.get("HOME")
        return "." if value is None else value

    def search_path(self) -> list[str]:
        """Directories listed in PATH."""
        value = self.get("PATH")
        if value is None:
            raise EnvError("PATH is not set")
        return split_fields(value, ":")

    def export(self, assignment: str) -> None:
        """Set a variable from a ``NAME=value`` string."""
        if "=" not in assignment:
            raise EnvError(f"export: not an assignment: {assignment}")
        name = before_char(assignment, "=")
        for index, entry in enumerate(self._entries):
            if before_char(entry, "=") == name:
                self._entries[index] = assignment
                return
        self._entries.append(assignment)

    def unset(self, name: str) -> None:
        """Remove every entry beginning with ``name``."""
        name = trim(name)
        if not name or is_only_space(name):
            raise EnvError("unset: Not enough arguments")
        self._entries = [e for e in self._entries if not e.startswith(name)]

    def as_dict(self) -> dict[str, str]:
        """The entries as a mapping suitable for a child process."""
        result: dict[str, str] = {}
        for entry in self._entries:
            key, _, value = entry.partition("=")
            result[key] = value
        return result

    def lines(self) -> list[str]:
        """The entries, one per line, as the ``env`` builtin shows them."""
        return list(self._entries)