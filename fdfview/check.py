"""Validation of map paths and grids, with error reporting."""

from __future__ import annotations

import enum
from pathlib import Path

from .parser import read_grid

__all__ = [
    "ErrorFlag",
    "GridError",
    "check_path_format",
    "check_grid",
    "load_checked_grid",
    "describe_errors",
]


class ErrorFlag(enum.IntFlag):
    """Problems found while loading a map; several may be combined."""

    FORMAT = 0x01
    CHARS = 0x02
    LINESIZE = 0x08
    NOFILE = 0x10


_MESSAGES = (
    (ErrorFlag.FORMAT, "wrong file format (*.fdf)."),
    (ErrorFlag.CHARS, "wrong characters in the file."),
    (ErrorFlag.LINESIZE, "the size of each line is not equal."),
    (ErrorFlag.NOFILE, "unable to open or read the file."),
)

_NO_ERROR = ErrorFlag(0)


class GridError(Exception):
    """Raised when a map cannot be loaded; ``flags`` says why."""

    def __init__(self, flags: ErrorFlag) -> None:
        super().__init__(describe_errors(flags))
        self.flags = ErrorFlag(flags)


def check_path_format(path: str | None) -> ErrorFlag:
    """Return ``FORMAT`` unless ``path`` ends in an ``.fdf`` extension."""
    if not path:
        return ErrorFlag.FORMAT
    dot = path.rfind(".")
    if dot > 0 and path[dot:] == ".fdf":
        return _NO_ERROR
    return ErrorFlag.FORMAT


def check_grid(grid: list[list[str]]) -> ErrorFlag:
    """Return ``LINESIZE`` if the grid is empty or its rows differ in width."""
    if not grid:
        return ErrorFlag.LINESIZE
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        return ErrorFlag.LINESIZE
    return _NO_ERROR


def load_checked_grid(path: str | Path) -> list[list[str]]:
    """Load and validate a map file, raising :class:`GridError` on failure."""
    flags = check_path_format(str(path))
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError:
        raise GridError(flags | ErrorFlag.NOFILE) from None
    with handle:
        if flags:
            raise GridError(flags)
        try:
            grid = read_grid(handle)
        except OSError:
            raise GridError(ErrorFlag.NOFILE) from None
    flags |= check_grid(grid)
    if flags:
        raise GridError(flags)
    return grid


def describe_errors(flags: ErrorFlag | int) -> str:
    """Render the error report for ``flags``, one line per problem."""
    lines = ["Error(s):"]
    for flag, message in _MESSAGES:
        bit = int(flags) & int(flag)
        if bit:
            lines.append(f"{bit:#05x} : {message}")
    return "\n".join(lines) + "\n"