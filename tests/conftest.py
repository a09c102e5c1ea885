"""
Pytest fixtures and configuration for Fumofetch tests.

Provides a fake text source with canned file contents, command outputs,
paths and environment, plus sample outputs of the tools probes read.
"""

from __future__ import annotations

import pytest

from fumofetch.core import FetchReport
from fumofetch.sources import TextSource


class FakeSource(TextSource):
    """
    Text source answering from dictionaries instead of the host.

    Commands missing from `commands` behave as not invocable; files missing
    from `files` as unreadable.
    """

    def __init__(
        self,
        files: dict[str, str] | None = None,
        commands: dict[str, str] | None = None,
        paths: list[str] | None = None,
        env: dict[str, str] | None = None,
    ):
        super().__init__()
        self.files = files or {}
        self.commands = commands or {}
        self.paths = set(paths or [])
        self.env = env or {}
        self.calls: list[str] = []

    def read_file(self, path: str) -> str | None:
        return self.files.get(path)

    def run_command(self, cmd: list[str]) -> str | None:
        key = " ".join(cmd)
        self.calls.append(key)
        return self.commands.get(key)

    def path_exists(self, path: str) -> bool:
        return path in self.paths or path in self.files

    def getenv(self, name: str) -> str | None:
        return self.env.get(name)


@pytest.fixture
def fake_source():
    """Factory for FakeSource instances."""
    return FakeSource


# Test Data Fixtures - File Contents
@pytest.fixture
def sample_os_release_content():
    """Sample content for /etc/os-release file."""
    return """NAME="Ubuntu"
VERSION="22.04.3 LTS (Jammy Jellyfish)"
ID=ubuntu
ID_LIKE=debian
PRETTY_NAME="Ubuntu 22.04"
VERSION_ID="22.04"
HOME_URL="https://www.ubuntu.com/"
"""


@pytest.fixture
def sample_cpuinfo_content():
    """Sample content for /proc/cpuinfo file."""
    return """processor	: 0
vendor_id	: GenuineIntel
cpu family	: 6
model		: 142
model name	: Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz
stepping	: 11
cpu MHz		: 1992.000

processor	: 1
vendor_id	: GenuineIntel
model name	: Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz
"""


@pytest.fixture
def sample_meminfo_content():
    """Sample content for /proc/meminfo file."""
    return """MemTotal:        8000000 kB
MemFree:          500000 kB
MemAvailable:    2000000 kB
Buffers:          120000 kB
Cached:          1500000 kB
SwapTotal:       2097148 kB
"""


# Test Data Fixtures - Command Outputs
@pytest.fixture
def sample_lspci_intel_output():
    """Sample lspci output on an Intel laptop."""
    return """00:00.0 Host bridge: Intel Corporation Xeon E3-1200 v6/7th Gen Core Processor Host Bridge/DRAM Registers (rev 0c)
00:02.0 VGA compatible controller: Intel Corporation UHD Graphics 620 (rev 02)
00:14.0 USB controller: Intel Corporation Sunrise Point-LP USB 3.0 xHCI Controller (rev 21)"""


@pytest.fixture
def sample_lspci_nvidia_output():
    """Sample lspci output on a desktop with an NVIDIA card."""
    return """00:00.0 Host bridge: Advanced Micro Devices, Inc. [AMD] Starship/Matisse Root Complex
01:00.0 VGA compatible controller: NVIDIA Corporation GA104 [GeForce RTX 3070] (rev a1)
01:00.1 Audio device: NVIDIA Corporation GA104 High Definition Audio Controller (rev a1)"""


@pytest.fixture
def sample_lspci_amd_output():
    """Sample lspci output on a machine with an AMD card."""
    return """00:00.0 Host bridge: Advanced Micro Devices, Inc. [AMD] Family 17h Root Complex
0a:00.0 VGA compatible controller: Advanced Micro Devices, Inc. [AMD/ATI] Navi 21 [Radeon RX 6800] (rev c1)"""


@pytest.fixture
def sample_modinfo_i915_output():
    """Sample output from modinfo i915."""
    return """filename:       /lib/modules/6.5.0/kernel/drivers/gpu/drm/i915/i915.ko
license:        GPL and additional rights
description:    Intel Graphics
author:         Intel Corporation
version:        1.6.0
firmware:       i915/tgl_guc_70.bin"""


@pytest.fixture
def sample_glxinfo_output():
    """Sample glxinfo output excerpt."""
    return """name of display: :0
display: :0  screen: 0
direct rendering: Yes
OpenGL vendor string: Intel
OpenGL renderer string: Mesa Intel(R) UHD Graphics 620 (KBL GT2)
OpenGL core profile version string: 4.6 (Core Profile) Mesa 23.2.1-1ubuntu3"""


@pytest.fixture
def sample_report():
    """Sample fetch report for rendering tests."""
    return FetchReport(
        username="reimu",
        hostname="shrine",
        os_name="Ubuntu 22.04",
        kernel_version="6.5.0-14-generic",
        uptime="1h 1m",
        shell="bash",
        terminal="xterm-256color",
        package_summary="1873 (apt)",
        cpu_model="Intel(R) Core(TM) i7-8565U CPU @ 1.80GHz",
        gpu_name="Intel Corporation UHD Graphics 620 (rev 02)",
        gpu_driver="i915 1.6.0",
        memory_used="5.72 GB",
        memory_total="7.63 GB",
    )
