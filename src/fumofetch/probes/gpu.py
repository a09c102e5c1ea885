"""
GPU model and driver probes.

The GPU model is found with lspci, then nvidia-smi, then lshw. The driver
version is looked up by a vendor-specific sub-probe chosen from the match.
"""

from __future__ import annotations

from fumofetch.probes.base import UNKNOWN, BaseProbe

GPU_CLASS_KEYWORDS = ("vga", "display", "3d", "graphics")

AMD_KEYWORDS = ("amd", "radeon", "ati")


class DriverProbe(BaseProbe):
    """Shared helpers for the vendor driver sub-probes."""

    name = "gpu_driver"
    description = "GPU driver version"

    def modinfo_version(self, module: str) -> str | None:
        """Return the `version:` field reported by `modinfo <module>`."""
        output = self.run_command(["modinfo", module])
        if output is None:
            return None

        line = self.first_line_starting(output, "version:")
        if line is None:
            return None
        return line.split(":")[1].strip()

    def loaded_module_version(self, module: str, label: str) -> str | None:
        """Return "<label> <version>" if the kernel module is loaded."""
        if not self.source.path_exists(f"/sys/module/{module}"):
            return None

        version = self.modinfo_version(module)
        if version is None:
            return None
        return f"{label} {version}"

    def mesa_version(self) -> str | None:
        """Return the first Mesa version string printed by glxinfo."""
        output = self.run_command(["glxinfo"])
        if output is None:
            return None

        for line in output.splitlines():
            idx = line.find("Mesa")
            if idx != -1:
                return line[idx:].strip()
        return None


class NvidiaDriverProbe(DriverProbe):
    """NVIDIA driver version from nvidia-smi, then modinfo."""

    name = "nvidia_driver"

    def probe(self) -> str | None:
        return self.first_of([self._from_nvidia_smi, lambda: self.modinfo_version("nvidia")])

    def _from_nvidia_smi(self) -> str | None:
        output = self.run_command(
            ["nvidia-smi", "--query-gpu=driver_version", "--format=csv,noheader"]
        )
        if output is None:
            return None

        version = output.strip()
        return version or None


class AMDDriverProbe(DriverProbe):
    """AMD driver version from amdgpu, then radeon, then Mesa."""

    name = "amd_driver"

    def probe(self) -> str | None:
        return self.first_of(
            [
                lambda: self.loaded_module_version("amdgpu", "AMDGPU"),
                lambda: self.loaded_module_version("radeon", "Radeon"),
                self.mesa_version,
            ]
        )


class IntelDriverProbe(DriverProbe):
    """Intel driver version from i915, then Mesa."""

    name = "intel_driver"

    def probe(self) -> str | None:
        return self.first_of(
            [
                lambda: self.loaded_module_version("i915", "i915"),
                self.mesa_version,
            ]
        )


class GPUProbe(BaseProbe):
    """
    Detects the GPU model and its driver version.

    Returns a (name, driver) pair; ("Unknown GPU", "Unknown") when no tool
    reports a display device.
    """

    name = "gpu"
    description = "GPU model and driver from lspci, nvidia-smi or lshw"
    placeholder = None

    def probe(self) -> tuple[str, str]:
        found = self.first_of([self._from_lspci, self._from_nvidia_smi, self._from_lshw])
        if found is None:
            return "Unknown GPU", UNKNOWN
        return found

    def _from_lspci(self) -> tuple[str, str] | None:
        output = self.run_command(["lspci"])
        if output is None:
            return None

        for line in output.splitlines():
            line_lower = line.lower()
            if not any(keyword in line_lower for keyword in GPU_CLASS_KEYWORDS):
                continue

            parts = line.split(":")
            if len(parts) < 3:
                continue
            return parts[2].strip(), self._driver_for(line_lower)

        return None

    def _from_nvidia_smi(self) -> tuple[str, str] | None:
        output = self.run_command(["nvidia-smi", "--query-gpu=name", "--format=csv,noheader"])
        if not output:
            return None
        return output.strip(), self._sub_probe(NvidiaDriverProbe)

    def _from_lshw(self) -> tuple[str, str] | None:
        output = self.run_command(["lshw", "-C", "display"])
        if output is None:
            return None

        for line in output.splitlines():
            if "product:" in line:
                return line.split(":")[1].strip(), self._sub_probe(AMDDriverProbe)
        return None

    def _driver_for(self, line_lower: str) -> str:
        """Pick the driver sub-probe matching the vendor named in an lspci line."""
        if "nvidia" in line_lower:
            return self._sub_probe(NvidiaDriverProbe)
        elif any(keyword in line_lower for keyword in AMD_KEYWORDS):
            return self._sub_probe(AMDDriverProbe)
        elif "intel" in line_lower:
            return self._sub_probe(IntelDriverProbe)
        return UNKNOWN

    def _sub_probe(self, probe_cls: type[DriverProbe]) -> str:
        return probe_cls(self.source).probe()
