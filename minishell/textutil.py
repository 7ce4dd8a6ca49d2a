"""String helpers used by the command-line parser."""

from __future__ import annotations

from typing import Iterator

WHITESPACE = " \t\f\n\v\r"


def _is_space(ch: str) -> bool:
    return ch in WHITESPACE


def is_only_space(s: str) -> bool:
    """Return True when ``s`` is empty or holds nothing but whitespace."""
    return all(_is_space(ch) for ch in s)


def squeeze_spaces(s: str | None) -> str:
    """Replace every run of whitespace by a single space.

    A blank (or missing) string yields an empty string.
    """
    if not s or is_only_space(s):
        return ""
    out: list[str] = []
    for ch in s:
        if _is_space(ch):
            if not out or out[-1] != " ":
                out.append(" ")
        else:
            out.append(ch)
    return "".join(out)


def split_fields(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty fields."""
    return [field for field in s.split(sep) if field]


def _quoted_tokens(s: str) -> Iterator[str]:
    current: list[str] = []
    inside = False
    for ch in s:
        if ch == '"':
            inside = not inside
        if _is_space(ch) and not inside:
            if current:
                yield "".join(current)
                current = []
        else:
            current.append(ch)
    # A word left open by an unterminated quote is not counted.
    if current and not inside:
        yield "".join(current)


def split_words(s: str) -> list[str]:
    """Split on whitespace outside double quotes.

    Double quotes at the start and end of each word are removed.
    """
    return [token.strip('"') for token in _quoted_tokens(s)]


def split_quoted(s: str) -> list[str]:
    """Split on double quotes and trim whitespace around each piece."""
    return [trim(field) for field in split_fields(s, '"')]


def before_char(s: str, c: str) -> str:
    """Return the part of ``s`` before the first ``c`` (all of it if absent)."""
    head, _, _ = s.partition(c)
    return head


def before_space(s: str) -> str | None:
    """Return the text before the first space or tab, or None if there is none."""
    for index, ch in enumerate(s):
        if ch in " \t":
            return s[:index]
    return None


def first_word(command: str) -> str:
    """Return the leading run of characters above the space character."""
    for index, ch in enumerate(command):
        if ord(ch) <= ord(" "):
            return command[:index]
    return command


def trim(s: str) -> str:
    """Strip whitespace from both ends."""
    return s.strip(WHITESPACE)


def format_number(template: str, number: int) -> str:
    """Replace each ``^`` in ``template`` with ``number``."""
    return template.replace("^", str(number))