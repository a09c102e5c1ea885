"""
Field probes for Fumofetch.

Each probe is responsible for fetching one fact about the host. Probes are
independent of each other and run in registry order.
"""

from __future__ import annotations

from fumofetch.probes.base import UNKNOWN, BaseProbe, FatalProbeError, FetchError
from fumofetch.probes.gpu import (
    AMDDriverProbe,
    GPUProbe,
    IntelDriverProbe,
    NvidiaDriverProbe,
)
from fumofetch.probes.hardware import CPUProbe, MemoryProbe
from fumofetch.probes.packages import PackagesProbe
from fumofetch.probes.system import (
    HostnameProbe,
    KernelProbe,
    OSNameProbe,
    ShellProbe,
    TerminalProbe,
    UptimeProbe,
    UserProbe,
)

# Registry of all probes, in the order they are run
PROBES: dict[str, type[BaseProbe]] = {
    "hostname": HostnameProbe,
    "os_name": OSNameProbe,
    "kernel_version": KernelProbe,
    "uptime": UptimeProbe,
    "shell": ShellProbe,
    "terminal": TerminalProbe,
    "package_summary": PackagesProbe,
    "cpu_model": CPUProbe,
    "gpu": GPUProbe,
    "memory": MemoryProbe,
    "username": UserProbe,
}


def get_all_probes() -> dict[str, type[BaseProbe]]:
    """Return all registered probes."""
    return PROBES.copy()


__all__ = [
    "UNKNOWN",
    "BaseProbe",
    "FetchError",
    "FatalProbeError",
    "HostnameProbe",
    "OSNameProbe",
    "KernelProbe",
    "UptimeProbe",
    "ShellProbe",
    "TerminalProbe",
    "UserProbe",
    "PackagesProbe",
    "CPUProbe",
    "MemoryProbe",
    "GPUProbe",
    "NvidiaDriverProbe",
    "AMDDriverProbe",
    "IntelDriverProbe",
    "get_all_probes",
    "PROBES",
]
