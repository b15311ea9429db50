"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT_MASK = 0xFFFFFFFF


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument."""


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise FormatError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(int(arg) & 0xFF)


def _string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _pointer(arg: Any) -> str:
    if arg is None:
        return "(nil)"
    address = arg if isinstance(arg, int) else id(arg)
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _signed(arg: Any) -> str:
    return str(_to_int32(int(arg)))


def _unsigned(arg: Any) -> str:
    return str(int(arg) & _UINT_MASK)


def _hexa(arg: Any, upper: bool) -> str:
    text = format(int(arg) & _UINT_MASK, "x")
    return text.upper() if upper else text


def _render(fmt: str, args: tuple[Any, ...]) -> tuple[str, int]:
    """Return the produced text and the count the formatter reports."""
    pieces: list[str] = []
    count = 0
    values: Iterator[Any] = iter(args)
    pos = 0

    def next_arg(conversion: str) -> Any:
        try:
            return next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{conversion}") from None

    while pos < len(fmt):
        ch = fmt[pos]
        if ch != "%":
            pieces.append(ch)
            count += 1
            pos += 1
            continue
        conversion = fmt[pos + 1] if pos + 1 < len(fmt) else ""
        if conversion == "c":
            piece = _char(next_arg(conversion))
        elif conversion == "s":
            piece = _string(next_arg(conversion))
        elif conversion == "p":
            piece = _pointer(next_arg(conversion))
        elif conversion in ("d", "i"):
            piece = _signed(next_arg(conversion))
        elif conversion == "u":
            piece = _unsigned(next_arg(conversion))
        elif conversion in ("x", "X"):
            piece = _hexa(next_arg(conversion), conversion == "X")
        elif conversion == "%":
            piece = "%"
        elif conversion == " ":
            # "% " is counted as one character but prints nothing.
            count += 1
            pos += 2
            continue
        else:
            raise FormatError(f"unsupported conversion {('%' + conversion)!r}")
        pieces.append(piece)
        count += len(piece)
        pos += 2
    return "".join(pieces), count


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    return _render(fmt, args)[0]


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its count."""
    text, count = _render(fmt, args)
    sys.stdout.write(text)
    return count