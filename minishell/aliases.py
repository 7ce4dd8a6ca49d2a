"""Command aliases: a name that stands for the start of a command line."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .textutil import before_char, split_fields


def join_words(words: Iterable[str]) -> str:
    """Join words with single spaces."""
    return " ".join(words)


@dataclass(frozen=True)
class Alias:
    """One alias: ``name`` is replaced by ``value``."""

    name: str
    value: str


class AliasTable:
    """Aliases in the order they were defined; the first match wins."""

    def __init__(self) -> None:
        self._aliases: list[Alias] = []

    def __iter__(self) -> Iterator[Alias]:
        return iter(list(self._aliases))

    def __len__(self) -> int:
        return len(self._aliases)

    def add(self, name: str, value: str) -> Alias:
        """Append an alias and return it."""
        alias = Alias(name, value)
        self._aliases.append(alias)
        return alias

    def lookup(self, name: str) -> str | None:
        """The value of the first alias called ``name``, or None."""
        for alias in self._aliases:
            if alias.name == name:
                return alias.value
        return None

    def define(self, command: str) -> str:
        """Handle the arguments of the ``alias`` builtin.

        With no arguments the listing is returned for display. A
        ``name=value`` argument longer than three characters defines an
        alias; anything else is ignored. Returns the text to show.
        """
        if not command:
            return self.format()
        if "=" in command and len(command) > 3:
            name = before_char(command, "=")
            value = command.split("=", 1)[1]
            self.add(name, value)
        return ""

    def format(self) -> str:
        """The listing shown by ``alias`` with no arguments."""
        return "".join(
            f"{alias.name}\t\t=> output: {alias.value}\n" for alias in self._aliases
        )

    def translate(self, command: str) -> str:
        """Replace the first word of ``command`` by its alias, if any.

        The words are rejoined with single spaces. A line starting with
        ``alias`` is returned untouched.
        """
        words = split_fields(command, " ")
        if not words:
            return ""
        if words[0] == "alias":
            return command
        value = self.lookup(words[0])
        if value is not None:
            words[0] = value
        return join_words(words)