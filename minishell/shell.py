"""The interactive shell: read a line, parse it, run it."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator, Mapping, Sequence

from .builtins import ShellExit
from .environment import Environment
from .executor import run_commands
from .output import print_to
from .parsing import parse
from .syntax import ShellSyntaxError

PROMPT = "minishell:$ "


class Shell:
    """A shell session holding the environment and the last exit status."""

    def __init__(self, environ: Mapping[str, str] | Iterable[str] | None = None) -> None:
        if environ is None:
            environ = os.environ
        if isinstance(environ, Mapping):
            entries: Iterable[str] = (f"{k}={v}" for k, v in environ.items())
        else:
            entries = environ
        self.env = Environment.from_entries(entries)
        self.status = 0

    def run_line(self, line: str) -> int:
        """Run one command line and return the new exit status.

        ShellExit propagates when the line runs the exit builtin.
        """
        try:
            commands = parse(line, self.env, self.status)
        except ShellSyntaxError as exc:
            print_to(sys.stderr, "minishell: %s\n", str(exc))
            self.status = exc.status
            return self.status
        if not commands:
            return self.status
        self.status = run_commands(commands, self.env, self.status)
        return self.status

    def loop(self, lines: Iterable[str]) -> int:
        """Run lines until they run out or one exits; return the final status."""
        for line in lines:
            try:
                self.run_line(line)
            except ShellExit as exc:
                return exc.status
        return self.status


def _prompt_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive session and return its exit status."""
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass
    return Shell().loop(_prompt_lines(PROMPT))


if __name__ == "__main__":
    sys.exit(main())