"""Variable expansion and quote removal for tokens."""

from __future__ import annotations

from collections.abc import Iterable

from .environment import Environment
from .tokens import Token, TokenType


def _is_name_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char == "_"


def _lookup(env: Environment, name: str) -> str:
    value = env.get(name)
    return value if value is not None else ""


def _expand_dollar(
    text: str, pos: int, env: Environment, last_status: int, in_double: bool
) -> tuple[str, int]:
    """Expand what follows a '$' at pos; return the text and the new position."""
    end = pos
    while end < len(text) and _is_name_char(text[end]):
        end += 1
    if end > pos:
        return _lookup(env, text[pos:end]), end
    if pos < len(text) and not in_double:
        char = text[pos]
        value = str(last_status) if char == "?" else _lookup(env, char)
        return value, pos + 1
    return "$", pos


def expand_string(
    text: str, env: Environment, last_status: int = 0, heredoc: bool = False
) -> str:
    """Expand variables in text and remove the quotes that group it.

    Nothing is expanded inside single quotes, and nothing at all when the
    word is a here-document delimiter.
    """
    parts: list[str] = []
    in_single = False
    in_double = False
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
        elif char == "$" and not in_single and not heredoc:
            piece, pos = _expand_dollar(text, pos + 1, env, last_status, in_double)
            parts.append(piece)
            continue
        else:
            parts.append(char)
        pos += 1
    return "".join(parts)


def expand_tokens(
    tokens: Iterable[Token], env: Environment, last_status: int = 0
) -> list[Token]:
    """Return the tokens with every text expanded.

    A token that follows a here-document operator is left unexpanded,
    though its quotes are still removed.
    """
    result: list[Token] = []
    previous: Token | None = None
    for token in tokens:
        heredoc = previous is not None and previous.type is TokenType.HEREDOC
        result.append(
            Token(expand_string(token.text, env, last_status, heredoc), token.type)
        )
        previous = token
    return result