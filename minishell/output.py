"""Formatted output and buffered line reading."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, Any

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
DEFAULT_BUFFER_SIZE = 3
_MAX_BUFFER_SIZE = 2147483647


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 0x100000000 if value & 0x80000000 else value


def format_number(number: int, base: int = 10, upper: bool = False) -> str:
    """Write number in base (2 to 16), with a leading '-' when negative."""
    if not 2 <= base <= 16:
        raise ValueError(f"unsupported base: {base}")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    sign = "-" if number < 0 else ""
    remaining = abs(number)
    out: list[str] = []
    while True:
        remaining, digit = divmod(remaining, base)
        out.append(digits[digit])
        if remaining == 0:
            break
    return sign + "".join(reversed(out))


def format_pointer(address: int) -> str:
    """Write an address as '0x' followed by lower-case hexadecimal."""
    return "0x" + format_number(address & _ULONG_MASK, 16)


def _format_spec(spec: str, args: Iterator[Any]) -> str:
    def take() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise ValueError(f"missing argument for %{spec}") from None

    if spec == "c":
        value = take()
        return chr(value & 0xFF) if isinstance(value, int) else str(value)[:1]
    if spec == "s":
        value = take()
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return format_number(_to_int32(int(take())), 10)
    if spec == "u":
        return format_number(int(take()) & _UINT32_MASK, 10)
    if spec == "x":
        return format_number(int(take()) & _UINT32_MASK, 16)
    if spec == "X":
        return format_number(int(take()) & _UINT32_MASK, 16, upper=True)
    if spec == "p":
        return format_pointer(int(take()))
    if spec == "%":
        return "%"
    return ""


def format_message(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %d %i %u %x %X %p and %% in fmt.

    An unknown conversion produces nothing and a lone '%' at the end of
    fmt ends the output.
    """
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_format_spec(spec, values))
    return "".join(out)


def print_to(stream: IO[str], fmt: str, *args: Any) -> int:
    """Write the formatted message to stream and return its length."""
    text = format_message(fmt, *args)
    stream.write(text)
    return len(text)


def put_line(stream: IO[str], text: str | None) -> None:
    """Write text followed by a newline; None writes only the newline."""
    stream.write((text or "") + "\n")


class LineReader:
    """Read a stream one line at a time, in chunks of buffer_size characters."""

    def __init__(self, stream: IO[Any], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0 or buffer_size >= _MAX_BUFFER_SIZE:
            raise ValueError(f"invalid buffer size: {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Any = None

    def _fill(self) -> None:
        while self._pending is None or self._newline() not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk

    def _newline(self) -> Any:
        return b"\n" if isinstance(self._pending, bytes) else "\n"

    def next_line(self) -> Any:
        """Return the next line with its newline, the last partial line, or None."""
        self._fill()
        if not self._pending:
            self._pending = None
            return None
        head, sep, rest = self._pending.partition(self._newline())
        self._pending = rest if sep else None
        return head + sep

    def __iter__(self) -> Iterator[Any]:
        while (line := self.next_line()) is not None:
            yield line