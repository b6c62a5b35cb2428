"""The shell's environment: an ordered list of variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def split_entry(entry: str) -> tuple[str, str | None]:
    """Split 'KEY=VALUE' at the first '='; the value is None without '='."""
    key, sep, value = entry.partition("=")
    return key, (value if sep else None)


def is_valid_identifier(name: str | None) -> bool:
    """Check the part before any '=' is a valid variable name."""
    if not name or not (_is_alpha(name[0]) or name[0] == "_"):
        return False
    key = name.split("=", 1)[0]
    return all(_is_alnum(c) or c == "_" for c in key)


def join_path(directory: str, name: str) -> str:
    """Join a directory and a name with exactly one '/' between them."""
    if directory.endswith("/"):
        return directory + name
    return f"{directory}/{name}"


@dataclass
class _Variable:
    key: str
    value: str | None


class Environment:
    """Variables in insertion order; a key may appear more than once."""

    def __init__(self) -> None:
        self._vars: list[_Variable] = []

    @classmethod
    def from_entries(cls, entries: Iterable[str]) -> Environment:
        """Build an environment from 'KEY=VALUE' strings."""
        env = cls()
        for entry in entries:
            env.add(entry)
        return env

    def _find(self, key: str) -> _Variable | None:
        return next((var for var in self._vars if var.key == key), None)

    def get(self, key: str) -> str | None:
        """Return the value of the first variable named key, or None."""
        var = self._find(key)
        return var.value if var else None

    def update(self, key: str, value: str | None) -> None:
        """Change the first variable named key; do nothing if there is none."""
        var = self._find(key)
        if var is not None:
            var.value = value

    def add(self, entry: str) -> None:
        """Append a variable parsed from 'KEY=VALUE' or a bare 'KEY'."""
        key, value = split_entry(entry)
        self._vars.append(_Variable(key, value))

    def remove(self, key: str) -> bool:
        """Remove the first variable named key; return whether one was found."""
        var = self._find(key)
        if var is None:
            return False
        self._vars.remove(var)
        return True

    def sort(self) -> None:
        """Order the variables by name."""
        self._vars.sort(key=lambda var: var.key)

    def to_strings(self) -> list[str]:
        """Return 'KEY=VALUE' strings for every variable that has a value."""
        return [f"{v.key}={v.value}" for v in self._vars if v.value is not None]

    def __iter__(self) -> Iterator[tuple[str, str | None]]:
        return ((var.key, var.value) for var in self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __contains__(self, key: object) -> bool:
        return any(var.key == key for var in self._vars)