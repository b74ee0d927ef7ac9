"""Reading FdF height maps: line reading, word splitting and grid building."""

from __future__ import annotations

from typing import Iterator, TextIO

__all__ = ["split_words", "read_lines", "to_grid", "read_grid"]


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if not sep:
        raise ValueError("separator must be a non-empty character")
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` without their trailing newline.

    A final line that is not terminated by a newline is still yielded.
    """
    for raw in stream:
        yield raw[:-1] if raw.endswith("\n") else raw


def to_grid(text: str) -> list[list[str]]:
    """Turn map text into rows of space-separated cells.

    Empty lines are skipped, as are runs of spaces inside a line.
    """
    return [split_words(row, " ") for row in split_words(text, "\n")]


def read_grid(stream: TextIO) -> list[list[str]]:
    """Read a whole map from ``stream`` and return its grid of cells."""
    return to_grid("".join(f"{line}\n" for line in read_lines(stream)))