"""Loading XPM pixmaps from files or from in-memory line lists."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .colornames import lookup_color

__all__ = [
    "XpmImage",
    "XpmError",
    "TRANSPARENT",
    "find_unquoted",
    "strip_comments",
    "text_to_rgb",
    "parse_xpm",
    "xpm_from_file",
    "xpm_from_data",
]

TRANSPARENT = 0xFF000000
"""Pixel value stored for the ``none`` colour."""

_NAME_LIMIT = 63
_WORD_SEP = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data is malformed or cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap; ``pixels`` holds rows of 0xAARRGGBB values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the value of the pixel at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside image")
        return self.pixels[y][x]

    def to_bytes(self) -> bytes:
        """Return the pixels as little-endian 32-bit words, row by row."""
        flat = [value & 0xFFFFFFFF for row in self.pixels for value in row]
        return struct.pack(f"<{len(flat)}I", *flat)


def _words(text: str) -> list[str]:
    return [word for word in _WORD_SEP.split(text) if word]


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of ``needle`` in ``text`` outside double quotes, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside quoted strings.

    Comments are replaced by spaces, so the text keeps its length. An
    unterminated comment runs to the end of the text.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Resolve an XPM colour specification to a 0xRRGGBB value.

    ``#``-prefixed values are read as hexadecimal. Otherwise ``name``,
    joined with ``end`` when given, is looked up among the colour names;
    ``none`` gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX_NUMBER.match(name, 1)
        sign, digits = match.group(1), match.group(2)
        value = int(digits, 16) if digits else 0
        return -value if sign == "-" else value
    full = f"{name} {end}" if end is not None else name
    try:
        return lookup_color(full[:_NAME_LIMIT])
    except KeyError:
        return 0


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while (start := text.find('"', pos)) != -1:
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its sequence of string lines."""
    rows = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = _words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = _words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if at >= len(words):
            raise XpmError(f"no colour value in {line!r}")
        value = text_to_rgb(words[at], words[at + 1] if at + 1 < len(words) else None)
        key = line[:cpp]
        # Short keys let a later definition win; long keys keep the first.
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    pixels = []
    span = width * cpp
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < span:
            raise XpmError(f"pixel row too short: {line!r}")
        pixels.append(
            tuple(
                _pixel_value(palette.get(line[i : i + cpp], 0))
                for i in range(0, span, cpp)
            )
        )
    return XpmImage(width, height, tuple(pixels))


def xpm_from_file(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as error:
        raise XpmError(f"cannot read {path}: {error}") from error
    return parse_xpm(_quoted_strings(strip_comments(text)))


def xpm_from_data(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data held in memory as a sequence of lines."""
    return parse_xpm(lines)