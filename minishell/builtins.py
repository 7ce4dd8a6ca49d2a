"""The ``pwd`` and ``cd`` builtins."""

from __future__ import annotations

import os
import stat
import sys
from typing import TextIO

from .environment import Environment
from .textutil import split_quoted

CD_FAILURE = 42


def pwd() -> str | None:
    """The current working directory, or None when it cannot be read."""
    try:
        return os.getcwd()
    except OSError:
        return None


def cd_error(path: str) -> str:
    """The message explaining why changing into ``path`` failed."""
    try:
        info = os.lstat(path)
    except OSError:
        return f"cd: No such file or directory: {path}"
    if not stat.S_ISDIR(info.st_mode):
        return f"cd: Not a directory: {path}"
    return "Permission denied"


def cd(env: Environment, target: str | None, out: TextIO | None = None) -> int:
    """Change directory, keeping PWD and OLDPWD up to date.

    Supports ``~`` for HOME, ``-`` for OLDPWD and a ``--`` prefix for
    HOME. Returns 0 on success and 42 on failure.
    """
    if out is None:
        out = sys.stdout
    if not target:
        target = env.home()
    pieces = split_quoted(target)
    target = pieces[0] if pieces else env.home()
    if target.startswith("~"):
        target = env.home() + target[1:]
    if target == "-":
        previous = env.get("OLDPWD")
        if previous is None:
            out.write("cd: OLDPWD not set\n")
            return CD_FAILURE
        target = previous
        out.write(target + "\n")
    if target.startswith("--"):
        target = env.home() + target[2:]
    env.export("OLDPWD=" + (pwd() or ""))
    try:
        os.chdir(target)
    except OSError:
        out.write(cd_error(target) + "\n")
        return CD_FAILURE
    env.export("PWD=" + (pwd() or ""))
    return 0