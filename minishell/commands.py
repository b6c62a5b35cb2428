"""Parsed commands: their arguments and their redirections."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class RedirectionKind(enum.Enum):
    """How a redirection connects a file to a command."""

    APPEND = enum.auto()
    OUT = enum.auto()
    IN = enum.auto()
    HEREDOC = enum.auto()


@dataclass
class Redirection:
    """A file a command reads from or writes to.

    For a here-document, fd holds the descriptor its text is read from.
    """

    target: str
    kind: RedirectionKind
    fd: int | None = None


@dataclass
class Command:
    """One command of a pipeline."""

    args: list[str]
    redirections: list[Redirection] = field(default_factory=list)