"""
Core orchestration module for Fumofetch.

Runs every probe once and packages the results into a FetchReport.
"""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any

from fumofetch.config import Config
from fumofetch.probes import get_all_probes
from fumofetch.sources import TextSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchReport:
    """Display-ready facts about the host, one per report line."""

    username: str
    hostname: str
    os_name: str
    kernel_version: str
    uptime: str
    shell: str
    terminal: str | None
    package_summary: str
    cpu_model: str
    gpu_name: str
    gpu_driver: str
    memory_used: str
    memory_total: str

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary."""
        return asdict(self)


class FetchCore:
    """
    Main orchestrator for a fetch run.

    Runs the registered probes sequentially against a single text source.
    """

    def __init__(self, config: Config | None = None, source: TextSource | None = None):
        self.config = config or Config()
        self.source = source or TextSource(command_timeout=self.config.command_timeout)
        self.probes = get_all_probes()

    def collect(self) -> FetchReport:
        """
        Run all probes and build the report.

        Returns:
            FetchReport with every field populated.

        Raises:
            FatalProbeError: If the kernel version or user name cannot be
                determined at all.
        """
        values: dict[str, Any] = {}

        logger.info(f"Running {len(self.probes)} probes")

        for name, probe_cls in self.probes.items():
            start = time.perf_counter()
            values[name] = probe_cls(self.source).probe()
            duration = (time.perf_counter() - start) * 1000
            logger.debug(f"Probe '{name}' returned {values[name]!r} in {duration:.2f}ms")

        gpu_name, gpu_driver = values.pop("gpu")
        memory_used, memory_total = values.pop("memory")

        return FetchReport(
            gpu_name=gpu_name,
            gpu_driver=gpu_driver,
            memory_used=memory_used,
            memory_total=memory_total,
            **values,
        )


def run_fetch(config: Config | None = None) -> FetchReport:
    """
    Convenience function to gather a report with default sources.

    Args:
        config: Optional configuration. Uses defaults if not provided.

    Returns:
        The fetch report.
    """
    return FetchCore(config).collect()
