# minishell

A small interactive shell for POSIX systems. It reads a line, splits it into
words, pipes and redirections, expands variables, and runs the result either
as a built-in command or as a pipeline of external programs.

## Installing

```
pip install .
```

## Running

```
minishell
```

The prompt is `minishell:$ `. Line editing and history come from Python's
`readline` module where it is available. End the session with `exit` or
end-of-file (Ctrl-D); the shell exits with the status of the last command.

## What it understands

- Pipes: `ls | grep py | wc -l`
- Redirections: `<` input, `>` output (truncate), `>>` output (append).
  When a command has several redirections for the same stream, the last one wins.
- Quotes: text inside `'single'` quotes is taken literally; inside `"double"`
  quotes `$NAME` is still expanded. The quotes themselves are removed.
- Variables: `$NAME` expands to its value, or to nothing when unset. `$?`
  (outside double quotes) expands to the status of the last command. The word
  after `<<` is never expanded.
- Syntax errors are reported for unclosed quotes, a pipe at the start or end of
  a line, two pipes in a row, and a redirection not followed by a file name.
  They set the status to 2 and nothing is run.

Commands are found through `PATH`. A name starting with `/` is run as given,
one starting with `.` is taken relative to `PWD`, and one starting with `~`
relative to `HOME`. A command that cannot be found prints
`minishell: NAME: command not found` and gives status 127.

## Builtins

| Command  | Effect |
|----------|--------|
| `echo`   | Prints its arguments separated by spaces; `-n` (and forms such as `-nnn`) omits the newline |
| `cd`     | Changes directory, to `HOME` when given no argument or `~`; updates `PWD` and `OLDPWD` |
| `pwd`    | Prints the current directory |
| `env`    | Lists the variables that have a value |
| `export` | Adds variables, or with no arguments lists them all as `declare -x` lines in sorted order |
| `unset`  | Removes variables; stops at the first invalid name |
| `exit`   | Leaves the shell with the given numeric status (an invalid number gives 2) |

A builtin on its own line runs in the shell itself, so `cd`, `export` and
`unset` change the shell's state, and `>`/`>>` redirect its output. A builtin
inside a pipeline works on a copy of the environment, so its changes are lost
when the pipeline ends; its output is passed on to the next command.

## What it does not do

- Here-documents: `<<` is recognised and checked, but the shell does not
  collect the document's text, so a command that uses one fails with a
  bad-file-descriptor error.
- There is no `;`, `&&`, `||`, background jobs, job control, subshells,
  globbing or command substitution.
- Signals such as Ctrl-C get no special handling.

## Using it from Python

```python
from minishell.shell import Shell

shell = Shell({"PATH": "/usr/bin:/bin", "HOME": "/tmp"})
shell.run_line("export GREETING=hello")
shell.run_line("echo $GREETING | tr a-z A-Z")
```

`Shell` takes a mapping or an iterable of `KEY=VALUE` strings and defaults to
`os.environ`. `Shell.run_line` runs one line and returns the new status; the
`exit` builtin raises `minishell.builtins.ShellExit`, whose `status` holds the
exit code. `Shell.loop` runs each line of any iterable until the lines run out
or one exits, and returns the final status.

The stages are also available on their own:

- `minishell.parsing.parse(line, env, last_status)` turns a line into a list of
  `minishell.commands.Command` objects without running anything, and raises
  `minishell.syntax.ShellSyntaxError` for a malformed line.
- `minishell.tokens.tokenize`, `minishell.syntax.check_syntax` and
  `minishell.expander.expand_string` / `expand_tokens` do the lexing, checking
  and expansion.
- `minishell.environment.Environment` is the ordered variable list the shell uses.
- `minishell.executor.run_commands` and `execute_pipeline` run parsed commands.
- `minishell.output` has a small `printf`-style formatter (`format_message`,
  `print_to`) and `LineReader`, which reads a stream line by line in fixed-size
  chunks; `minishell.strutil` has C-style string helpers such as `atoi`,
  `strcmp` and `strlcpy`.