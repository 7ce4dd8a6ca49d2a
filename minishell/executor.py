"""Finding programs on PATH and running them."""

from __future__ import annotations

import os
import subprocess

from .environment import Environment
from .textutil import first_word, split_fields, split_words


def dir_has(directory: str, name: str) -> bool:
    """True when ``directory`` can be listed and contains ``name``."""
    try:
        entries = os.listdir(directory)
    except OSError:
        return False
    return name in (".", "..") or name in entries


def find_binary(command: str, path: list[str]) -> str | None:
    """The full path of the command's program in the first PATH directory holding it."""
    word = first_word(command)
    for directory in path:
        if dir_has(directory, word) and command != ".":
            return f"{directory}/{word}"
    return None


def is_executable(command: str) -> bool:
    """True when the first word of ``command`` names an executable file."""
    words = split_fields(command, " ")
    if not words:
        return False
    return os.access(words[0], os.X_OK) and len(command) > 2


def build_argv(command: str) -> list[str]:
    """Split a command line into arguments; ``ls`` gets ``-G`` added."""
    argv = split_words(command)
    if argv and argv[0] == "ls":
        argv.insert(1, "-G")
    return argv


def execute(binary: str, command: str, env: Environment) -> int:
    """Run ``binary`` with the arguments of ``command`` and wait for it.

    Returns the exit status; a program killed by a signal counts as 0.
    """
    argv = build_argv(command) or [binary]
    try:
        completed = subprocess.run(argv, executable=binary, env=env.as_dict())
    except OSError:
        print(f"{binary}: Unknown error")
        return 1
    return completed.returncode if completed.returncode >= 0 else 0