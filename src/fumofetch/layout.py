"""
ANSI-aware two-column text layout.

Widths ignore SGR escape sequences (ESC up to the next "m"). Every other
character counts as one cell, so double-width characters are measured
wrongly; logos are expected to be ASCII art.
"""

from __future__ import annotations

from typing import Sequence

ESC = "\x1b"

DEFAULT_PADDING = 4


def visible_width(line: str) -> int:
    """Return the number of characters in line outside escape sequences."""
    width = 0
    in_escape = False

    for char in line:
        if in_escape:
            if char == "m":
                in_escape = False
            continue
        if char == ESC:
            in_escape = True
            continue
        width += 1

    return width


def compose_columns(
    left: Sequence[str],
    right: Sequence[str],
    padding: int = DEFAULT_PADDING,
) -> list[str]:
    """
    Join two blocks of lines side by side.

    Every left cell is padded to the widest visible left line plus padding
    spaces, so the right column starts at the same screen column on every
    row. The shorter block is extended with empty cells.

    Args:
        left: Lines of the left block (the logo).
        right: Lines of the right block (the report).
        padding: Spaces between the widest left line and the right block.

    Returns:
        One combined line per row.
    """
    max_left = max((visible_width(line) for line in left), default=0)
    rows = []

    for i in range(max(len(left), len(right))):
        left_cell = left[i] if i < len(left) else ""
        right_cell = right[i] if i < len(right) else ""
        spaces = " " * (max_left - visible_width(left_cell) + padding)
        rows.append(f"{left_cell}{spaces}{right_cell}")

    return rows
