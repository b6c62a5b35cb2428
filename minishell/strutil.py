"""Small string helpers with C-library style semantics."""

from __future__ import annotations

_SPACES = frozenset(" \t\n\v\f\r")


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _code(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and sign.

    Returns 0 if no digits follow; the result wraps to a 32-bit int.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return _wrap_int32(sign * int(digits)) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal representation of number."""
    return str(number)


def split(text: str, sep: str) -> list[str]:
    """Split text at sep, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    if start >= len(text):
        return ""
    return text[start : start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find needle within the first length characters of haystack.

    Returns haystack from the match onwards, or None if there is none.
    """
    if needle == "":
        return haystack
    index = haystack[:length].find(needle)
    return haystack[index:] if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src.
    """
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst in a buffer of size characters including the terminator.

    Returns the resulting text and the length it tried to create.
    """
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strcmp(a: str, b: str) -> int:
    """Compare two strings; the sign gives their order."""
    for index in range(max(len(a), len(b)) + 1):
        diff = _code(a, index) - _code(b, index)
        if diff or index >= len(a) or index >= len(b):
            return diff
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n leading characters of two strings."""
    if n <= 0:
        return 0
    index = 0
    while index < n - 1 and index < len(a) and _code(a, index) == _code(b, index):
        index += 1
    return _code(a, index) - _code(b, index)