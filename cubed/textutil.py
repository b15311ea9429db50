"""Small C-style string helpers with their exact edge-case behaviour."""

from __future__ import annotations

from itertools import zip_longest

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_WHITESPACE = frozenset(" \t\n\v\f\r\x7f")


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >= 1 << (_INT_BITS - 1) else value


def _terminated(text: str) -> str:
    """Return the part of ``text`` before the first NUL character."""
    return text.split("\0", 1)[0]


def _single_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a 32-bit ``atoi`` does.

    Leading whitespace (including DEL) is skipped, one optional sign is
    accepted, and digits are read until the first non-digit.  The value
    wraps around on overflow exactly like 32-bit arithmetic.
    """
    text = _terminated(text)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        value = (value * 10 + ord(ch) - ord("0")) & _UINT_MASK
    return _to_int32(sign * _to_int32(value))


def itoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as a signed 32-bit integer."""
    return str(_to_int32(int(n)))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    sep = _single_char(sep)
    return [word for word in _terminated(text).split(sep) if word]


def strchr(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``, or None.

    Searching for ``"\\0"`` finds the terminator, i.e. ``len(text)``.
    """
    ch = _single_char(ch)
    text = _terminated(text)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``, or None.

    Searching for ``"\\0"`` finds the terminator, i.e. ``len(text)``.
    """
    ch = _single_char(ch)
    text = _terminated(text)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _as_bytes(value: str | bytes) -> bytes:
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    return data.split(b"\0", 1)[0]


def strncmp(s1: str | bytes, s2: str | bytes, n: int) -> int:
    """Compare at most ``n`` bytes; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    left = _as_bytes(s1)[:n]
    right = _as_bytes(s2)[:n]
    for a, b in zip_longest(left, right, fillvalue=0):
        if a != b:
            return a - b
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text (at most ``size - 1`` characters, empty when
    ``size`` is 0) together with the full length of ``src``, so truncation
    happened when the length is not smaller than ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    src = _terminated(src)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)