"""Lexical analysis of a command line into words, pipes and redirections."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_WHITESPACE = frozenset(" \t\n\v\f\r")
_OPERATORS = frozenset("|<>")


class TokenType(enum.Enum):
    """Kinds of token produced by the tokenizer."""

    WORD = enum.auto()
    PIPE = enum.auto()
    REDIR_IN = enum.auto()
    REDIR_OUT = enum.auto()
    REDIR_APPEND = enum.auto()
    HEREDOC = enum.auto()


@dataclass
class Token:
    """A piece of the command line together with its kind."""

    text: str
    type: TokenType


def is_operator(char: str) -> bool:
    """Return True for an operator character or the end of input (empty string)."""
    return char == "" or char in _OPERATORS


def _char_at(text: str, index: int) -> str:
    return text[index] if index < len(text) else ""


def _read_word(text: str, start: int) -> tuple[Token, int]:
    in_single = False
    in_double = False
    end = start
    for end in range(start, len(text) + 1):
        char = _char_at(text, end)
        if char == "":
            break
        if char == '"' and not in_single:
            in_double = not in_double
        elif char == "'" and not in_double:
            in_single = not in_single
        elif not in_single and not in_double and (
            char in _WHITESPACE or is_operator(char)
        ):
            break
    return Token(text[start:end], TokenType.WORD), end


def _read_redirection(text: str, pos: int) -> tuple[Token, int]:
    char = text[pos]
    doubled = _char_at(text, pos + 1) == char
    if char == "<":
        if doubled:
            return Token("<<", TokenType.HEREDOC), pos + 2
        return Token("<", TokenType.REDIR_IN), pos + 1
    if doubled:
        return Token(">>", TokenType.REDIR_APPEND), pos + 2
    return Token(">", TokenType.REDIR_OUT), pos + 1


def tokenize(text: str) -> list[Token]:
    """Split a command line into tokens.

    Quotes are kept inside word tokens. An empty line yields a single empty
    word, and whitespace at the end of the line yields a trailing empty word.
    """
    if text == "":
        return [Token("", TokenType.WORD)]
    tokens: list[Token] = []
    pos = 0
    while pos < len(text):
        while pos < len(text) and text[pos] in _WHITESPACE:
            pos += 1
        char = _char_at(text, pos)
        if char == "|":
            token, pos = Token("|", TokenType.PIPE), pos + 1
        elif char in ("<", ">"):
            token, pos = _read_redirection(text, pos)
        else:
            token, pos = _read_word(text, pos)
        tokens.append(token)
    return tokens