"""Reading XPM pixmaps, from in-memory lines or from files, into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from cubed.colors import TRANSPARENT, lookup_color
from cubed.images import Image
from cubed.textutil import atoi

_NAME_BUFFER = 64
_TRANSPARENT_PIXEL = 0xFF000000
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_WORD_SEPARATORS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str, limit: int) -> int:
    """Index of ``needle`` in ``text``, or -1.

    Nothing is found when ``needle`` is longer than ``limit``; the search
    itself runs up to the first NUL character of ``text``.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return text.split("\0", 1)[0].find(needle)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Index of the first ``needle`` not inside a double-quoted string, or -1."""
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    text = text.split("\0", 1)[0]
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, length: int) -> str:
    stop = min(len(text), start + length)
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The text keeps its length.  A ``//`` comment is blanked together with
    the newline that ends it.
    """
    size = len(text)
    while (begin := find_outside_quotes(text, "/*", size)) != -1:
        end = find(text[begin + 2 :], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_outside_quotes(text, "//", size)) != -1:
        end = find(text[begin + 2 :], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def parse_color(name: str, extra: str | None = None) -> int:
    """Return the 0xRRGGBB value of an XPM colour specification.

    ``#RRGGBB`` is read as hexadecimal.  Otherwise ``name`` (joined with
    ``extra`` when given) is looked up among the named colours; unknown
    names give 0 and ``None`` gives -1 (transparent).
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        sign, digits = match.groups() if match else ("", "")
        value = int(digits, 16) if digits else 0
        return -value if sign == "-" else value
    if extra is not None:
        name = f"{name} {extra}"[: _NAME_BUFFER - 1]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(lines: Iterator[str]) -> tuple[int, int, int, int]:
    words = split_words(_next_line(lines, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (atoi(word) for word in words[:4])
    if 0 in (width, height, ncolors, cpp):
        raise XpmError("header values must not be zero")
    if min(width, height, ncolors, cpp) < 0:
        raise XpmError("header values must not be negative")
    return width, height, ncolors, cpp


def _read_palette(lines: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    # Short codes keep the last definition of a code, long ones the first.
    later_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour definitions")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without a 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        rgb = parse_color(words[index + 1], extra)
        key = line[:cpp]
        if later_wins or key not in palette:
            palette[key] = rgb
    return palette


def _parse(lines: Iterable[str]) -> Image:
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(rows)
    palette = _read_palette(rows, ncolors, cpp)
    try:
        image = Image(width, height)
    except ValueError as exc:
        raise XpmError(str(exc)) from exc
    for y in range(height):
        line = _next_line(rows, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width * cpp} characters")
        for x in range(width):
            color = palette.get(line[x * cpp : (x + 1) * cpp], 0)
            if color == TRANSPARENT:
                color = _TRANSPARENT_PIXEL
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM data given as its sequence of strings."""
    return _parse(lines)


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1 : end]
        pos = end + 1


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Build an image from an XPM file written as C source."""
    text = strip_comments(Path(path).read_text(encoding="latin-1"))
    return _parse(_quoted_strings(text))