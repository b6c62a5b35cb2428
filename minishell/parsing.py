"""Turning a command line into a list of commands."""

from __future__ import annotations

from collections.abc import Iterable

from .commands import Command, Redirection, RedirectionKind
from .environment import Environment
from .expander import expand_tokens
from .syntax import check_syntax, is_redirection
from .tokens import Token, TokenType

_WHITESPACE = " \t\n\v\f\r"

_KINDS = {
    TokenType.REDIR_IN: RedirectionKind.IN,
    TokenType.REDIR_OUT: RedirectionKind.OUT,
    TokenType.REDIR_APPEND: RedirectionKind.APPEND,
    TokenType.HEREDOC: RedirectionKind.HEREDOC,
}


def _build_commands(tokens: Iterable[Token]) -> list[Command]:
    commands: list[Command] = []
    current = Command([])
    pending: Token | None = None
    for token in tokens:
        if token.type is TokenType.PIPE:
            commands.append(current)
            current = Command([])
        elif is_redirection(token):
            pending = token
        elif pending is not None:
            current.redirections.append(Redirection(token.text, _KINDS[pending.type]))
            pending = None
        else:
            current.args.append(token.text)
    commands.append(current)
    return commands


def parse(line: str, env: Environment, last_status: int = 0) -> list[Command]:
    """Parse a line into commands; raise ShellSyntaxError if it is malformed.

    A blank line gives an empty list.
    """
    text = line.strip(_WHITESPACE)
    if not text:
        return []
    tokens = check_syntax(__import_tokens(text))
    return _build_commands(expand_tokens(tokens, env, last_status))


def __import_tokens(text: str) -> list[Token]:
    from .tokens import tokenize

    return tokenize(text)