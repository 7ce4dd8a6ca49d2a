import io
import os

import pytest

from minishell.aliases import AliasTable
from minishell.environment import Environment
from minishell.history import History, history_path, read_lines
from minishell.shell import DEFAULT_PATH, Shell, default_environment


@pytest.fixture
def shell(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    empty_bin = tmp_path / "bin"
    empty_bin.mkdir()
    env = Environment([f"HOME={tmp_path}", f"PATH={empty_bin}"])
    return Shell(env, AliasTable(), History(), io.StringIO())


def test_pwd_builtin_prints_cwd(shell):
    assert shell.run("pwd") == 0
    assert shell.out.getvalue() == os.getcwd() + "\n"


def test_env_builtin_lists_entries(shell):
    shell.run("env")
    assert shell.out.getvalue().splitlines() == shell.env.lines()


def test_export_and_unset(shell):
    assert shell.run("export   FOO=bar") == 0
    assert shell.env.get("FOO") == "bar"
    assert shell.run("unset FOO") == 0
    assert shell.env.get("FOO") is None


def test_export_without_assignment_fails(shell):
    assert shell.run("export FOO") == -1
    assert shell.env.get("FOO") is None


def test_unset_without_argument_fails(shell):
    assert shell.run("unset") == -1
    assert shell.out.getvalue() == "unset: Not enough arguments\n"


def test_unknown_command_reports_not_found(shell):
    assert shell.run("nosuchcommand") == -1
    assert shell.out.getvalue() == "Minishell One: command not found: nosuchcommand\n"


def test_builtin_returns_none_for_other_commands(shell):
    assert shell.builtin("nosuchcommand") is None


def test_exit_raises_system_exit(shell):
    with pytest.raises(SystemExit) as info:
        shell.run("exit")
    assert info.value.code == 0
    assert shell.out.getvalue() == "Bye !\n"


def test_command_is_recorded_in_history(shell, tmp_path):
    shell.run("pwd")
    assert list(shell.history) == ["pwd"]
    assert read_lines(history_path(str(tmp_path))) == ["pwd"]


def test_alias_lines_are_not_recorded(shell):
    shell.run("alias p=pwd")
    assert len(shell.history) == 0


def test_alias_is_defined_and_expanded(shell):
    shell.run("alias p=pwd")
    assert shell.aliases.lookup("p") == "pwd"
    assert shell.run("p") == 0
    assert shell.out.getvalue() == os.getcwd() + "\n"


def test_cyclic_aliases_terminate(shell):
    shell.aliases.add("a", "b")
    shell.aliases.add("b", "a")
    assert shell.run("a") == -1
    assert shell.out.getvalue() == "Minishell One: command not found: a\n"


def test_sequence_runs_every_command(shell):
    assert shell.run("export A=1;export B=2") == 0
    assert shell.env.get("A") == "1"
    assert shell.env.get("B") == "2"


def test_sequence_returns_last_status(shell):
    assert shell.run_sequence("export A=1;unset") == -1
    assert shell.env.get("A") == "1"


def test_cd_updates_pwd(shell, tmp_path):
    target = tmp_path / "bin"
    assert shell.run(f"cd {target}") == 0
    assert os.getcwd() == str(target)
    assert shell.env.get("PWD") == str(target)


def test_tilde_expands_to_home(shell, tmp_path):
    assert shell.run("cd ~") == 0
    assert os.getcwd() == str(tmp_path)


def test_external_program_status(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    env = Environment([f"HOME={tmp_path}", "PATH=/bin:/usr/bin"])
    runner = Shell(env, AliasTable(), History(), io.StringIO())
    assert runner.run("true") == 0
    assert runner.run("false") != 0


def test_load_rc_reports_failing_lines(shell, tmp_path):
    rc = tmp_path / "rc"
    rc.write_text("# comment\nexport X=1\nunset\n")
    shell.load_rc(rc)
    assert shell.env.get("X") == "1"
    assert shell.out.getvalue().endswith(
        "Minishell One: error line 3 of minishellrc\n"
    )


def test_load_rc_missing_file_does_nothing(shell, tmp_path):
    shell.load_rc(tmp_path / "missing")
    assert shell.out.getvalue() == ""


class FakeEditor:
    def __init__(self, lines):
        self._lines = iter(lines)

    def read_line(self):
        return next(self._lines, None)


def test_repl_runs_lines_until_input_ends(shell):
    status = shell.repl(FakeEditor(["export A=1", "   ", "unset"]))
    assert status == -1
    assert shell.env.get("A") == "1"
    assert list(shell.history) == ["export A=1", "unset"]


def test_repl_stops_on_eof_error(shell):
    class Closing:
        def read_line(self):
            raise EOFError

    assert shell.repl(Closing()) == 0


def test_default_environment_fills_empty_environment():
    env = default_environment({})
    assert env.get("PATH") == DEFAULT_PATH
    assert env.get("PWD") == os.getcwd()
    assert env.get("OLDPWD") == os.getcwd()
    assert env.get("USER")
    assert env.get("HOME")


def test_default_environment_keeps_given_path(tmp_path):
    env = default_environment({"PATH": str(tmp_path), "HOME": str(tmp_path)})
    assert env.get("PATH") == str(tmp_path)
    assert env.home() == str(tmp_path)