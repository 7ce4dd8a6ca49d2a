"""Command dispatch, startup file and the interactive loop."""

from __future__ import annotations

import codecs
import getpass
import os
import signal
import sys
from typing import Callable, Mapping, Protocol, Sequence, TextIO

from .aliases import AliasTable
from .builtins import cd, pwd
from .environment import EnvError, Environment
from .executor import execute, find_binary, is_executable
from .history import History, history_path, read_lines
from .prompt import render_prompt
from .textutil import (
    before_char,
    first_word,
    format_number,
    split_fields,
    split_quoted,
    squeeze_spaces,
    trim,
)

DEFAULT_PATH = "/usr/local/bin:/usr/bin:/bin:/usr/sbin:/sbin:/opt/X11/bin:/usr/texbin"
RC_FILE = "minishell1rc"
NOT_FOUND = "Minishell One: command not found: "
RC_ERROR = "Minishell One: error line ^ of minishellrc\n"


class _Editor(Protocol):
    def read_line(self) -> str | None: ...


def _translate_home(command: str, env: Environment) -> str:
    head = before_char(command, "~")
    tail = command.split("~", 1)[1]
    return head + env.home() + tail


class Shell:
    """Runs command lines against an environment, aliases and a history."""

    def __init__(
        self,
        env: Environment,
        aliases: AliasTable | None = None,
        history: History | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.env = env
        self.aliases = aliases if aliases is not None else AliasTable()
        self.history = history if history is not None else History()
        self.out = out if out is not None else sys.stdout
        self.status = 0

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    def run(self, command: str) -> int:
        """Run one command line and return its status."""
        return self._run(command, frozenset())

    def _run(self, command: str, expanded: frozenset[str]) -> int:
        command = trim(squeeze_spaces(command))
        if "~" in command:
            command = _translate_home(command, self.env)
        is_alias = command.startswith("alias")
        if ";" in command and not is_alias:
            return self.run_sequence(command)
        if not is_alias:
            self.history.record(command, self.env.home())
        words = split_fields(command, " ")
        # An alias is expanded at most once per line, so cycles terminate.
        if words and words[0] in expanded:
            translated = command
        else:
            translated = self.aliases.translate(command)
        if translated != command:
            return self._run(translated, expanded | {words[0]})
        status = self.builtin(translated)
        if status is not None:
            return status
        try:
            path = self.env.search_path()
        except EnvError:
            path = []
        binary = find_binary(translated, path)
        if binary is not None:
            return execute(binary, translated, self.env)
        if is_executable(translated):
            return execute(split_fields(translated, " ")[0], translated, self.env)
        self._say(NOT_FOUND + translated)
        return -1

    def builtin(self, command: str) -> int | None:
        """Run ``command`` if it is a builtin; None when it is not one.

        ``exit`` raises SystemExit.
        """
        word = first_word(command)
        if word == "exit":
            self._say("Bye !")
            raise SystemExit(0)
        if word == "pwd":
            self._say(pwd() or "")
            return 0
        if word == "env":
            for line in self.env.lines():
                self._say(line)
            return 0
        if word == "cd":
            return cd(self.env, trim(squeeze_spaces(command[2:])), self.out)
        if word == "alias":
            self.out.write(self.aliases.define(command[6:]))
            return 0
        if word == "export":
            try:
                self.env.export(trim(command[6:]))
            except EnvError:
                return -1
            return 0
        if word == "unset":
            try:
                self.env.unset(command[5:])
            except EnvError as error:
                self._say(str(error))
                return -1
            return 0
        return None

    def run_sequence(self, commands: str) -> int:
        """Run the ``;``-separated commands in turn; return the last status."""
        status = 0
        for piece in split_fields(commands, ";"):
            parts = split_quoted(piece)
            if not parts:
                continue
            status = self.run(parts[0])
        return status

    def load_rc(self, path: str | os.PathLike[str] = RC_FILE) -> None:
        """Run the startup file, reporting lines that fail."""
        status = 0
        for number, line in enumerate(read_lines(path), start=1):
            if line and not line.startswith("#"):
                status = self.run(line)
            if status != 0:
                self.out.write(format_number(RC_ERROR, number))

    def repl(self, editor: _Editor) -> int:
        """Read and run lines until input ends; return the last status."""
        while True:
            try:
                line = editor.read_line()
            except EOFError:
                break
            if line is None:
                break
            if trim(squeeze_spaces(line)):
                self.status = self.run(line)
        return self.status


def _user_name() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "user"


def default_environment(env: Mapping[str, str] | None = None) -> Environment:
    """Build the startup environment from ``env`` (the process's by default).

    An empty environment gets a default PATH and HOME; PWD, USER and
    OLDPWD are always set.
    """
    source = os.environ if env is None else env
    environment = Environment(f"{key}={value}" for key, value in source.items())
    if not source:
        environment.export("PATH=" + DEFAULT_PATH)
        environment.export("HOME=" + os.path.expanduser("~"))
    cwd = pwd() or ""
    environment.export("PWD=" + cwd)
    environment.export("USER=" + _user_name())
    environment.export("OLDPWD=" + cwd)
    return environment


def _terminal_reader(fd: int) -> Callable[[], str]:
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def read_char() -> str:
        while True:
            data = os.read(fd, 1)
            if not data:
                return ""
            text = decoder.decode(data)
            if text:
                return text

    return read_char


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive shell on the controlling terminal."""
    from .lineedit import LineEditor, raw_mode

    if not sys.stdin.isatty():
        return 1
    try:
        with raw_mode(sys.stdin):
            env = default_environment()
            aliases = AliasTable()
            aliases.add("shell", "echo Minishell One")
            history = History.load(history_path(env.home()))
            shell = Shell(env, aliases, history)

            def on_interrupt(signum: int, frame: object) -> None:
                _write("\n" + render_prompt(shell.status, None))

            signal.signal(signal.SIGINT, on_interrupt)
            shell.load_rc(RC_FILE)
            editor = LineEditor(
                _terminal_reader(sys.stdin.fileno()),
                _write,
                lambda: render_prompt(shell.status, shell.env),
                history,
            )
            return shell.repl(editor)
    except OSError:
        return 1