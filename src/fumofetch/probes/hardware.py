"""
Hardware probes.

CPU model from /proc/cpuinfo and memory usage from /proc/meminfo.
"""

from __future__ import annotations

from fumofetch.probes.base import BaseProbe


def format_memory_size(size_kb: int) -> str:
    """
    Format a kibibyte count as MB or GB with two decimals.

    Values above 1024 MB are shown in GB.
    """
    size_mb = size_kb / 1024

    if size_mb > 1024:
        return f"{size_mb / 1024:.2f} GB"
    return f"{size_mb:.2f} MB"


class CPUProbe(BaseProbe):
    """Reads the first CPU model name."""

    name = "cpu_model"
    description = "CPU model from /proc/cpuinfo"
    placeholder = "Unknown CPU"

    def probe(self) -> str | None:
        return self.first_of([self._from_cpuinfo])

    def _from_cpuinfo(self) -> str | None:
        content = self.read_file("/proc/cpuinfo")
        if content is None:
            return None

        line = self.first_line_starting(content, "model name")
        if line is None:
            return None

        parts = line.split(":")
        if len(parts) < 2:
            return "Unknown"
        return parts[1].strip()


class MemoryProbe(BaseProbe):
    """
    Reads total and available memory.

    A missing or malformed /proc/meminfo is not reported as Unknown: the
    counters stay at zero and both values render as "0.00 MB".
    """

    name = "memory"
    description = "Used and total memory from /proc/meminfo"
    placeholder = None

    def probe(self) -> tuple[str, str]:
        total, available = self._read_meminfo()
        used = max(total - available, 0)
        return format_memory_size(used), format_memory_size(total)

    def _read_meminfo(self) -> tuple[int, int]:
        total = 0
        available = 0

        content = self.read_file("/proc/meminfo")
        if content is None:
            return total, available

        for line in content.splitlines():
            if line.startswith("MemTotal:"):
                total = self._parse_kb(line, total)
            elif line.startswith("MemAvailable:"):
                available = self._parse_kb(line, available)

        return total, available

    def _parse_kb(self, line: str, default: int) -> int:
        fields = line.split()
        if len(fields) < 2:
            return default
        try:
            return int(fields[1])
        except ValueError:
            self.logger.debug(f"Unparsable meminfo line: {line!r}")
            return default
