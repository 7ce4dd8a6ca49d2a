"""The coloured prompt line and screen-control sequences."""

from __future__ import annotations

import os
import socket
from datetime import datetime

from .environment import Environment

COLOR_RED = "\x1b[31m"
COLOR_GREEN = "\x1b[32m"
COLOR_YELLOW = "\x1b[33m"
COLOR_BLUE = "\x1b[34m"
COLOR_MAGENTA = "\x1b[35m"
COLOR_CYAN = "\x1b[36m"
COLOR_RESET = "\x1b[0m"

ERASE_LINE = "\033[2K\r"
CLEAR_SCREEN = "\033[2J\033[1;1H"

_HOST_BUFFER = 8


def current_time(now: datetime | None = None) -> str:
    """The time of day as ``HH:MM:SS``."""
    if now is None:
        now = datetime.now()
    return now.strftime("%H:%M:%S")


def hostname() -> str:
    """The host name, cut to fit a small fixed buffer."""
    return socket.gethostname()[: _HOST_BUFFER - 1]


def prompt_dirname(cwd: str | None, env: Environment | None = None) -> str:
    """The last component of ``cwd`` as shown in the prompt.

    When it equals the USER variable, ``~`` is shown instead; the root
    directory is shown as ``/``.
    """
    if not cwd:
        return ""
    last = cwd.rfind("/")
    base = cwd[last + 1:]
    if env is not None:
        user = env.get("USER")
        if user is not None and user == base:
            return "~"
    if not base and last >= 0:
        return cwd[last:]
    return base


def _cwd() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def render_prompt(
    status: int,
    env: Environment | None = None,
    cwd: str | None = None,
    now: datetime | None = None,
    host: str | None = None,
) -> str:
    """The full prompt line, coloured green after success and red after failure."""
    if cwd is None:
        cwd = _cwd()
    if host is None:
        host = hostname()
    marker = COLOR_GREEN if status == 0 else COLOR_RED
    return "".join(
        (
            ERASE_LINE,
            COLOR_CYAN,
            "[ ",
            current_time(now),
            " - ",
            host,
            " ]",
            marker,
            " $> ",
            COLOR_CYAN,
            prompt_dirname(cwd, env),
            COLOR_RESET,
            " ",
        )
    )


def clear_screen() -> str:
    """The sequence that clears the terminal and homes the cursor."""
    return CLEAR_SCREEN