"""Field-level formatting for the fixed-width report.

Three small helpers the renderer composes per row:

    insert_separators(1234567)          -> "1,234,567"
    crop_path("src/core/engine.cpp")    -> "engine.cpp"
    pad_field("42", 6, Align.RIGHT)     -> "    42"

Widths are minimums, the way a stream field width behaves: a value
longer than its column pushes the rest of the row to the right instead
of being cut.
"""
from __future__ import annotations

from enum import Enum

_PATH_SEPARATORS = "/\\"


class Align(Enum):
    """Horizontal alignment of a value inside its column."""
    LEFT = "<"
    RIGHT = ">"


def pad_field(text: str, width: int, align: Align = Align.LEFT) -> str:
    """Pad text with spaces to at least width characters. Never truncates."""
    return f"{text:{align.value}{width}}"


def insert_separators(n: int) -> str:
    """Insert a comma after every group of three digits, counted from the right.

    Negative values keep their sign in front of the grouped magnitude:
    -1234 -> "-1,234".
    """
    if n < 0:
        return "-" + insert_separators(-n)

    digits = str(n)
    out: list[str] = []
    for pos, digit in enumerate(digits):
        out.append(digit)
        remaining = len(digits) - 1 - pos
        if remaining >= 3 and remaining % 3 == 0:
            out.append(",")
    return "".join(out)


def crop_path(path: str) -> str:
    """Return the part of path after the last '/' or '\\'.

    A path without any separator is already a file name and comes back
    unchanged.
    """
    cut = max(path.rfind(sep) for sep in _PATH_SEPARATORS)
    return path[cut + 1:]
