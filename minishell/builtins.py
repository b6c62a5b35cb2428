"""Commands the shell runs itself: cd, echo, env, exit, export, pwd, unset."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from contextlib import ExitStack
from typing import IO

from .commands import Command, RedirectionKind
from .environment import Environment, is_valid_identifier
from .output import print_to
from .strutil import atoi

BUILTIN_NAMES = frozenset({"cd", "echo", "env", "exit", "export", "pwd", "unset"})


class ShellExit(Exception):
    """Raised by the exit builtin; status is the code the shell ends with."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status & 0xFF


def is_builtin(name: str | None) -> bool:
    """Return True if name is one of the shell's own commands."""
    return name is not None and name in BUILTIN_NAMES


def is_n_flag(arg: str) -> bool:
    """Return True for an echo option made of an optional '-' and any 'n's."""
    if not arg:
        return False
    body = arg[1:] if arg.startswith("-") else arg
    return body.strip("n") == ""


def builtin_echo(args: Sequence[str], stdout: IO[str]) -> int:
    """Print the arguments separated by spaces; '-n' drops the newline."""
    if len(args) == 1:
        return print_to(stdout, "\n")
    words = list(args[1:])
    newline = True
    while words and (words[0] == "-n" or is_n_flag(words[0])):
        newline = False
        words.pop(0)
    stdout.write(" ".join(words))
    if newline:
        stdout.write("\n")
    return 0


def _getcwd() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


def builtin_cd(args: Sequence[str], env: Environment, stderr: IO[str]) -> int:
    """Change directory and update PWD and OLDPWD."""
    if len(env) == 0:
        return -1
    if len(args) > 2:
        print_to(stderr, "cd: too many arguments\n")
        return -1
    oldpwd = _getcwd()
    given = args[1] if len(args) > 1 else None
    target = env.get("HOME") if given is None or given == "~" else given
    if target is None:
        if given is None:
            print_to(stderr, "bash: cd: HOME not set\n")
        else:
            print_to(stderr, "bash: cd: %s: %s\n", given, "HOME not set")
        return -1
    try:
        os.chdir(target)
    except OSError as exc:
        if given is None:
            print_to(stderr, "bash: cd: HOME not set\n")
        else:
            print_to(stderr, "bash: cd: %s: %s\n", given, os.strerror(exc.errno or 0))
        return -1
    pwd = _getcwd()
    if pwd is None:
        return -1
    if oldpwd is not None:
        env.update("OLDPWD", oldpwd)
    env.update("PWD", pwd)
    return 0


def builtin_pwd(stdout: IO[str], stderr: IO[str]) -> int:
    """Print the current directory."""
    try:
        path = os.getcwd()
    except OSError as exc:
        print_to(stderr, "pwd: %s\n", os.strerror(exc.errno or 0))
        return 1
    print_to(stdout, "%s\n", path)
    return 0


def builtin_env(env: Environment, stdout: IO[str]) -> int:
    """Print every variable that has a value."""
    for key, value in env:
        if value is not None:
            print_to(stdout, "%s=%s\n", key, value)
    return 0


def builtin_export(
    args: Sequence[str], env: Environment, stdout: IO[str], stderr: IO[str]
) -> int:
    """Add variables, or list all of them sorted when given no arguments."""
    if len(env) == 0:
        return 1
    if len(args) == 1:
        env.sort()
        for key, value in env:
            line = f"declare -x {key}"
            if value is not None:
                line += f'="{value}"'
            stdout.write(line + "\n")
        return 0
    for arg in args[1:]:
        if not is_valid_identifier(arg):
            print_to(stderr, "minishell: export: `%s`: not a valid identifier\n", arg)
            continue
        env.add(arg)
        env.sort()
    return 0


def builtin_unset(args: Sequence[str], env: Environment, stderr: IO[str]) -> int:
    """Remove variables; stop at the first invalid name."""
    if len(env) == 0:
        return 1
    for arg in args[1:]:
        if not is_valid_identifier(arg):
            print_to(stderr, "bash: unset `%s': not a valid identifier\n", arg)
            return 1
        env.remove(arg)
    return 0


def parse_exit_code(text: str) -> int:
    """Parse an exit argument: an optional sign followed by digits only."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body or not all("0" <= c <= "9" for c in body):
        raise ValueError(f"{text}: numeric argument required")
    return atoi(text)


def builtin_exit(args: Sequence[str], last_status: int, stderr: IO[str]) -> int:
    """Raise ShellExit with the requested status; return 1 on too many arguments."""
    if len(args) == 1:
        raise ShellExit(last_status)
    if len(args) > 2:
        print_to(stderr, "exit\nbash: exit: too many arguments\n")
        return 1
    try:
        code = parse_exit_code(args[1])
    except ValueError:
        print_to(stderr, "exit\n")
        print_to(stderr, "bash: exit: %s: numeric argument required\n", args[1])
        raise ShellExit(2) from None
    raise ShellExit(code)


def _open_output(command: Command, stack: ExitStack, stdout: IO[str]) -> IO[str]:
    out = stdout
    for redirection in command.redirections:
        if redirection.kind is RedirectionKind.OUT:
            out = stack.enter_context(open(redirection.target, "w", encoding="utf-8"))
        elif redirection.kind is RedirectionKind.APPEND:
            out = stack.enter_context(open(redirection.target, "a", encoding="utf-8"))
        elif redirection.kind is RedirectionKind.IN:
            stack.enter_context(open(redirection.target, encoding="utf-8"))
        elif redirection.fd is not None and redirection.fd < 0:
            raise OSError(0, "bad here-document descriptor", redirection.target)
    return out


def run_builtin(
    command: Command,
    env: Environment,
    last_status: int = 0,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> int:
    """Run a builtin command with its output redirections; return its status."""
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    if not command.args:
        return 1
    args = command.args
    handlers: dict[str, Callable[[IO[str]], int]] = {
        "env": lambda o: builtin_env(env, o),
        "cd": lambda o: builtin_cd(args, env, err),
        "pwd": lambda o: builtin_pwd(o, err),
        "exit": lambda o: builtin_exit(args, last_status, err),
        "echo": lambda o: builtin_echo(args, o),
        "export": lambda o: builtin_export(args, env, o, err),
        "unset": lambda o: builtin_unset(args, env, err),
    }
    handler = handlers.get(args[0])
    with ExitStack() as stack:
        try:
            target = _open_output(command, stack, out)
        except OSError as exc:
            message = os.strerror(exc.errno) if exc.errno else str(exc.strerror)
            print_to(err, "open: %s\n", message)
            return 1
        if handler is None:
            return 1
        status = handler(target)
        target.flush()
    return status