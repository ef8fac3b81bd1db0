"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_INT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(n: int) -> int:
    n &= _INT32_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def format_char(c: int | str) -> str:
    """Render one character; integers are truncated to a single byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("%c expects a single character")
        return c
    return chr(c & 0xFF)


def format_string(s: str | None) -> str:
    """Render a string, with ``None`` shown as ``(null)``."""
    return "(null)" if s is None else s


def format_pointer(address: int | None) -> str:
    """Render an address as lowercase hex with a ``0x`` prefix, or ``(nil)``."""
    if address is None:
        return "(nil)"
    address &= _POINTER_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def format_integer(n: int) -> str:
    """Render a signed 32-bit decimal integer."""
    return str(_to_int32(n))


def format_unsigned(n: int) -> str:
    """Render an unsigned 32-bit decimal integer."""
    return str(n & _INT32_MASK)


def format_hex(n: int, uppercase: bool = False) -> str:
    """Render an unsigned 32-bit integer in hexadecimal."""
    return format(n & _INT32_MASK, "X" if uppercase else "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_integer,
    "i": format_integer,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, False),
    "X": lambda n: format_hex(n, True),
}


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    pending = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        yield convert(arg)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt``; unknown conversions print nothing."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default) and return its length."""
    text = sprintf(fmt, *args)
    out = stream if stream is not None else sys.stdout
    out.write(text)
    out.flush()
    return len(text)