"""Running parsed commands: path lookup, redirections and pipelines."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
import tempfile
from collections.abc import Sequence
from typing import Any

from .builtins import ShellExit, is_builtin, run_builtin
from .commands import Command, Redirection, RedirectionKind
from .environment import Environment, join_path, split_entry
from .output import print_to
from .strutil import split

COMMAND_NOT_FOUND = 127
_FILE_MODE = 0o644


def find_in_path(name: str, env: Environment) -> str | None:
    """Return the first executable named name in the directories of PATH."""
    path_value = env.get("PATH")
    if path_value is None:
        return None
    for directory in split(path_value, ":"):
        candidate = join_path(directory, name)
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command_path(name: str, env: Environment) -> str | None:
    """Work out the file a command name refers to, or None if there is none.

    Absolute names are used as they are, names starting with '.' are taken
    relative to PWD and names starting with '~' relative to HOME; any other
    name is searched for in PATH.
    """
    if not name:
        return None
    if name.startswith("/"):
        return name
    if name.startswith("."):
        base = env.get("PWD")
        return join_path(base, name) if base is not None else None
    if name.startswith("~"):
        home = env.get("HOME")
        return join_path(home, name[1:]) if home is not None else None
    return find_in_path(name, env)


def open_redirection(redirection: Redirection) -> int:
    """Open the file of a redirection and return its descriptor."""
    kind = redirection.kind
    target = redirection.target
    if kind is RedirectionKind.OUT:
        return os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
    if kind is RedirectionKind.APPEND:
        return os.open(target, os.O_WRONLY | os.O_CREAT | os.O_APPEND, _FILE_MODE)
    if kind is RedirectionKind.IN:
        return os.open(target, os.O_RDONLY)
    if redirection.fd is None or redirection.fd < 0:
        raise OSError(errno.EBADF, os.strerror(errno.EBADF), target)
    return redirection.fd


def _open_redirections(command: Command) -> tuple[int | None, int | None, list[int]]:
    """Open every redirection in order; the last one for each stream wins."""
    stdin_fd: int | None = None
    stdout_fd: int | None = None
    opened: list[int] = []
    try:
        for redirection in command.redirections:
            fd = open_redirection(redirection)
            if redirection.kind is not RedirectionKind.HEREDOC:
                opened.append(fd)
            if redirection.kind in (RedirectionKind.OUT, RedirectionKind.APPEND):
                stdout_fd = fd
            else:
                stdin_fd = fd
    except OSError:
        for fd in opened:
            os.close(fd)
        raise
    return stdin_fd, stdout_fd, opened


def _empty_input(last: bool) -> Any:
    return None if last else subprocess.DEVNULL


def _close_source(source: Any) -> None:
    if source is not None and not isinstance(source, int):
        source.close()


def _copy_env(env: Environment) -> Environment:
    return Environment.from_entries(
        key if value is None else f"{key}={value}" for key, value in env
    )


def _run_builtin_stage(
    command: Command, env: Environment, last_status: int, last: bool
) -> tuple[int, Any]:
    buffer = None if last else tempfile.TemporaryFile("w+", encoding="utf-8")
    try:
        status = run_builtin(command, _copy_env(env), last_status, stdout=buffer)
    except ShellExit as exc:
        status = exc.status
    sys.stdout.flush()
    if buffer is not None:
        buffer.flush()
        buffer.seek(0)
    return status & 0xFF, buffer


def _spawn(
    command: Command,
    env: Environment,
    source: Any,
    stdin_fd: int | None,
    stdout_fd: int | None,
    last: bool,
) -> tuple[Any, Any]:
    if not command.args:
        return 0, _empty_input(last)
    name = command.args[0]
    path = resolve_command_path(name, env)
    if path is None:
        print_to(sys.stderr, "minishell: %s: command not found\n", name)
        return COMMAND_NOT_FOUND, _empty_input(last)
    if stdout_fd is not None:
        stdout: Any = stdout_fd
    else:
        stdout = None if last else subprocess.PIPE
    child_env = dict(split_entry(entry) for entry in env.to_strings())
    try:
        process = subprocess.Popen(
            command.args,
            executable=path,
            stdin=stdin_fd if stdin_fd is not None else source,
            stdout=stdout,
            env=child_env,
        )
    except OSError as exc:
        print_to(sys.stderr, "minishell: %s: %s\n", name, exc.strerror or str(exc))
        return 1, _empty_input(last)
    if not last and stdout_fd is None:
        return process, process.stdout
    return process, _empty_input(last)


def _start_stage(
    command: Command, env: Environment, last_status: int, source: Any, last: bool
) -> tuple[Any, Any]:
    sys.stdout.flush()
    sys.stderr.flush()
    if command.args and is_builtin(command.args[0]):
        return _run_builtin_stage(command, env, last_status, last)
    try:
        stdin_fd, stdout_fd, opened = _open_redirections(command)
    except OSError as exc:
        print_to(
            sys.stderr, "minishell: %s: %s\n", exc.filename or "", exc.strerror or ""
        )
        return 1, _empty_input(last)
    try:
        return _spawn(command, env, source, stdin_fd, stdout_fd, last)
    finally:
        for fd in opened:
            os.close(fd)


def execute_pipeline(
    commands: Sequence[Command], env: Environment, last_status: int = 0
) -> int:
    """Run commands connected by pipes and return the resulting status.

    Builtins inside a pipeline work on a copy of the environment, so their
    changes do not outlive the pipeline.
    """
    results: list[Any] = []
    source: Any = None
    try:
        for index, command in enumerate(commands):
            last = index == len(commands) - 1
            result, next_source = _start_stage(command, env, last_status, source, last)
            _close_source(source)
            source = next_source
            results.append(result)
    finally:
        _close_source(source)
    status = last_status
    for result in results:
        code = result.wait() if isinstance(result, subprocess.Popen) else result
        if code >= 0:
            status = code
    return status


def run_commands(
    commands: Sequence[Command], env: Environment, last_status: int = 0
) -> int:
    """Run a parsed line: a lone builtin in the shell itself, else a pipeline."""
    if not commands:
        return last_status
    first = commands[0]
    if len(commands) == 1 and first.args and is_builtin(first.args[0]):
        return run_builtin(first, env, last_status)
    return execute_pipeline(commands, env, last_status)