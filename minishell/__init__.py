"""An interactive shell with aliases, history, environment builtins and a start-up file."""

__version__ = "0.1.0"
__all__ = [
    "aliases",
    "builtins",
    "environment",
    "executor",
    "history",
    "lineedit",
    "prompt",
    "shell",
    "textutil",
]