"""
Command-line interface for Fumofetch.

Gathers the host report and prints it next to the logo.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from fumofetch import __version__
from fumofetch.config import Config, ConfigError
from fumofetch.core import FetchCore
from fumofetch.logo import load_logo
from fumofetch.probes import FatalProbeError
from fumofetch.render import display

# Diagnostics go to stderr so stdout only carries the rendered block
console = Console(stderr=True)


def setup_logging(level: str, log_file: str | None = None) -> None:
    """Configure logging with rich handler."""
    handlers: list[logging.Handler] = [RichHandler(console=console, rich_tracebacks=True)]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )


def _write(text: str) -> None:
    click.echo(text, nl=False, color=True)


@click.command()
@click.version_option(version=__version__, prog_name="fumofetch")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--logo",
    type=click.Path(path_type=Path),
    help="Path to a logo text file",
)
@click.option(
    "-V",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
def main(config: Path | None, logo: Path | None, verbose: bool) -> None:
    """
    Fumofetch - System information next to an ASCII-art logo.

    Shows hostname, OS, kernel, uptime, shell, terminal, packages, CPU,
    GPU and memory.
    """
    try:
        cfg = Config.load(config)
    except ConfigError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/]")
        sys.exit(1)

    if logo:
        cfg.logo_path = str(logo)

    setup_logging("DEBUG" if verbose else cfg.log_level, cfg.log_file)

    try:
        report = FetchCore(cfg).collect()
    except FatalProbeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/]")
        sys.exit(1)

    display(report, load_logo(cfg.logo_path), _write, padding=cfg.padding)


if __name__ == "__main__":
    main()
