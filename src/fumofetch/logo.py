"""
Logo loading.

The logo is read once from a text asset, keeping any ANSI colour codes it
contains. A built-in drawing is used when no asset can be read.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

LOGO_FILENAME = "fumofetch_logo.txt"

DEFAULT_LOGO_PATHS = [
    Path("resources") / LOGO_FILENAME,
    Path(LOGO_FILENAME),
]

FALLBACK_LOGO: tuple[str, ...] = (
    "      /\\      ",
    "     /  \\     ",
    "    /\\   \\    ",
    "   /      \\   ",
    "  /   ,,   \\  ",
    " /   |  |   \\ ",
    "/_-''    ''-_\\",
    "             ",
)


def split_logo(content: str) -> tuple[str, ...]:
    """Split logo text into lines, dropping the empty tail after a final newline."""
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


def find_logo(logo_path: str | Path | None = None) -> Path | None:
    """
    Find the logo asset to use.

    Args:
        logo_path: Explicit path, checked before the default locations.

    Returns:
        First existing candidate, or None.
    """
    candidates = list(DEFAULT_LOGO_PATHS)
    if logo_path:
        candidates.insert(0, Path(logo_path).expanduser())

    for path in candidates:
        if path.exists():
            return path
    return None


def load_logo(logo_path: str | Path | None = None) -> tuple[str, ...]:
    """Load the logo lines, falling back to the built-in logo."""
    path = find_logo(logo_path)
    if path is None:
        logger.debug("No logo asset found, using built-in logo")
        return FALLBACK_LOGO

    try:
        content = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read logo {path}: {e}")
        return FALLBACK_LOGO

    return split_logo(content)
