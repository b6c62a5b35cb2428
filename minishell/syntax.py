"""Syntax checks on a token list: quotes, pipes and redirections."""

from __future__ import annotations

from collections.abc import Sequence

from .tokens import Token, TokenType

_REDIRECTIONS = frozenset(
    {
        TokenType.REDIR_IN,
        TokenType.REDIR_OUT,
        TokenType.REDIR_APPEND,
        TokenType.HEREDOC,
    }
)


class ShellSyntaxError(Exception):
    """A command line that cannot be run; the shell's status becomes 2."""

    status = 2


def _unexpected(text: str) -> ShellSyntaxError:
    return ShellSyntaxError(f"syntax error near unexpected token `{text}'")


def check_quotes(text: str) -> str:
    """Return text unchanged, or raise if it has an unclosed quote."""
    in_single = False
    in_double = False
    for char in text:
        if char == '"' and not in_single:
            in_double = not in_double
        elif char == "'" and not in_double:
            in_single = not in_single
    if in_single or in_double:
        raise ShellSyntaxError("unclosed quotes")
    return text


def is_redirection(token: Token | None) -> bool:
    """Return True if token is one of the redirection operators."""
    return token is not None and token.type in _REDIRECTIONS


def check_pipes(tokens: Sequence[Token]) -> Sequence[Token]:
    """Reject a pipe at either end of the line or two pipes in a row."""
    if not tokens:
        return tokens
    if tokens[0].type is TokenType.PIPE or tokens[-1].type is TokenType.PIPE:
        raise _unexpected("|")
    for current, following in zip(tokens, tokens[1:]):
        if current.type is TokenType.PIPE and following.type is TokenType.PIPE:
            raise _unexpected("|")
    return tokens


def check_redirections(tokens: Sequence[Token]) -> Sequence[Token]:
    """Reject redirections that are not followed by a word."""
    for index, current in enumerate(tokens[:-1]):
        if not is_redirection(current):
            continue
        following = tokens[index + 1]
        if is_redirection(following):
            raise _unexpected(following.text)
        if following.type is TokenType.PIPE:
            if index + 2 < len(tokens):
                raise _unexpected("|")
            raise _unexpected("newline")
    if tokens and is_redirection(tokens[-1]):
        raise _unexpected("newline")
    return tokens


def check_syntax(tokens: Sequence[Token]) -> Sequence[Token]:
    """Run every check in order and return the tokens if all pass."""
    for token in tokens:
        check_quotes(token.text)
    check_pipes(tokens)
    check_redirections(tokens)
    return tokens