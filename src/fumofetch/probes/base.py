"""
Base probe class that all field probes inherit from.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable

from fumofetch.sources import TextSource

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"


class FetchError(Exception):
    """Base class for fumofetch errors."""


class FatalProbeError(FetchError):
    """A probe failed in a way that must abort the whole run."""


class BaseProbe(ABC):
    """
    Abstract base class for all field probes.

    A probe fetches one fact about the host. Subclasses implement `probe`,
    usually by handing an ordered list of steps to `first_of`.
    """

    name: str = "base"
    description: str = "Base probe"
    placeholder: str | None = UNKNOWN

    def __init__(self, source: TextSource | None = None):
        self.source = source or TextSource()
        self.logger = logging.getLogger(f"{__name__}.{self.name}")

    @abstractmethod
    def probe(self) -> Any:
        """
        Fetch and return the value for this probe.

        Returns:
            Display-ready value, or the probe's placeholder.
        """
        pass

    def first_of(self, steps: Iterable[Callable[[], Any]]) -> Any:
        """
        Evaluate steps in order and return the first value found.

        Each step reads its own source and parses it, returning None when the
        source is unavailable or its text does not parse.

        Returns:
            The first non-None value, or the placeholder when all steps fail.
        """
        for step in steps:
            value = step()
            if value is not None:
                return value
        self.logger.debug(f"All sources exhausted, using {self.placeholder!r}")
        return self.placeholder

    def read_file(self, path: str) -> str | None:
        """Read a file through the text source."""
        return self.source.read_file(path)

    def run_command(self, cmd: list[str]) -> str | None:
        """Run a command through the text source."""
        return self.source.run_command(cmd)

    def first_line_starting(self, text: str, prefix: str) -> str | None:
        """Return the first line of text that starts with prefix."""
        for line in text.splitlines():
            if line.startswith(prefix):
                return line
        return None
