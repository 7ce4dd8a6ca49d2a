# minishell

A small interactive shell for POSIX terminals. It reads commands with its own
line editor and looks programs up on `PATH` to run them. It also has a handful
of builtins of its own.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Starting

```
minishell
```

The shell needs a terminal on standard input. If standard input is not a
terminal, `minishell` exits with status 1. While it runs, the terminal is
switched to unbuffered input without echo. The previous settings are restored
on the way out.

If the process starts with an empty environment, the shell fills in a default
`PATH` and sets `HOME` to the user's home directory. It always sets `PWD`,
`USER` and `OLDPWD`.

## The prompt

```
[ 14:02:33 - myhost ] $> project
```

The prompt shows three things:

- the time of day;
- the host name, cut to seven characters;
- the last component of the current directory. This is shown as `~` when it
  equals `$USER`.

The `$>` marker is green when the last command succeeded and red when it
failed. Ctrl-C prints a fresh prompt instead of stopping the shell.

## Line editing

| Key          | Effect                                  |
|--------------|-----------------------------------------|
| Up / Down    | step back and forward through history   |
| Backspace    | delete the last character               |
| Ctrl-L       | clear the screen and redraw the line    |
| Ctrl-D       | leave the shell                         |
| Enter        | run the line                            |

## Builtins

- `exit` prints `Bye !` and leaves the shell.
- `pwd` prints the current directory.
- `env` lists the environment, one `NAME=value` per line.
- `cd [dir]` changes directory and updates `PWD` and `OLDPWD`.
  - With no argument it goes to `$HOME`.
  - A leading `~` or `--` stands for the home directory.
  - `-` goes to `$OLDPWD` and prints it.
  - On failure it prints a message and the status is 42.
- `export NAME=value` sets or replaces a variable.
- `unset NAME` removes every variable whose entry starts with `NAME`.
- `alias` with no argument lists the aliases. `alias name=value` defines one.
  The `shell` alias is defined from the start.

## Command lines

- Runs of whitespace collapse to one space.
- Every `~` expands to the home directory.
- Several commands can be joined with `;`. The status of the last one is kept.
- An alias replaces the first word of a line. Each alias is expanded at most
  once per line.
- Words are split on whitespace outside double quotes.
- Lines that are not builtins are looked up on `PATH`, or run directly when
  their first word names an executable file. Otherwise the shell prints
  `Minishell One: command not found: ...`.
- `ls` gets `-G` added to its arguments.

## Start-up file and history

At start-up, commands are read from `minishell1rc` in the current directory.
Empty lines and lines starting with `#` are skipped. When a line fails, the
shell prints `Minishell One: error line N of minishellrc`.

Every command except `alias` lines is appended to `minishell-history` in the
home directory. The file is read back into history the next time the shell
starts.

## What it does not do

There are no pipes, redirections, job control, globbing or variable
expansion. Quoting is limited to double quotes that group words.

## Using it from Python

The modules can also be used as a library:

```python
import io

from minishell.aliases import AliasTable
from minishell.environment import Environment
from minishell.history import History
from minishell.shell import Shell

out = io.StringIO()
shell = Shell(Environment(["PATH=/usr/bin:/bin", "HOME=/tmp"]),
              AliasTable(), History(), out=out)
status = shell.run("export GREETING=hello")
```

Each command run this way is also appended to the history file under the
environment's `HOME`.

The modules:

| Module | Contents |
|--------|----------|
| `minishell.shell` | `Shell` (`run`, `builtin`, `run_sequence`, `load_rc`, `repl`), `default_environment` and `main` |
| `minishell.environment` | `Environment` and `EnvError` |
| `minishell.aliases` | `AliasTable` and `Alias` |
| `minishell.history` | `History`, `Direction` and helpers for the history file |
| `minishell.lineedit` | `LineEditor` and the `raw_mode` context manager |
| `minishell.prompt` | `render_prompt` and the escape sequences |
| `minishell.builtins` | `cd` and `pwd` |
| `minishell.executor` | `find_binary` and `execute` |
| `minishell.textutil` | the splitting and trimming helpers |