"""
Report rendering.

Turns a FetchReport into coloured "Label: value" lines and prints them next
to the logo.
"""

from __future__ import annotations

from typing import Callable, Sequence

from fumofetch.core import FetchReport
from fumofetch.layout import DEFAULT_PADDING, compose_columns

RESET = "\x1b[0m"
TITLE_STYLE = "\x1b[1;36m"
LABEL_STYLE = "\x1b[1;32m"

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def _label(label: str, value: str) -> str:
    return f"{LABEL_STYLE}{label}:{RESET} {value}"


def render_info_lines(report: FetchReport) -> list[str]:
    """Format the report fields in display order."""
    return [
        f"{TITLE_STYLE}{report.username}@{report.hostname}{RESET}",
        _label("OS", report.os_name),
        _label("Kernel", report.kernel_version),
        _label("Uptime", report.uptime),
        _label("Shell", report.shell),
        _label("Terminal", report.terminal if report.terminal is not None else "Unknown"),
        _label("Packages", report.package_summary),
        _label("CPU", report.cpu_model),
        _label("GPU", report.gpu_name),
        _label("GPU Driver", report.gpu_driver),
        _label("Memory", f"{report.memory_used} / {report.memory_total}"),
    ]


def display(
    report: FetchReport,
    logo: Sequence[str],
    write: Callable[[str], None],
    padding: int = DEFAULT_PADDING,
) -> None:
    """
    Print the logo and report side by side.

    The cursor is hidden while the block is written and shown again
    afterwards.

    Args:
        report: Report to render.
        logo: Logo lines.
        write: Callback receiving raw output text.
        padding: Spaces between the logo and the report.
    """
    write(HIDE_CURSOR)
    try:
        for row in compose_columns(logo, render_info_lines(report), padding):
            write(f"{row}\n")
    finally:
        write(SHOW_CURSOR)
