"""
System identity probes.

Hostname, OS name, kernel, uptime, shell, terminal and the current user.
"""

from __future__ import annotations

import math

from fumofetch.probes.base import BaseProbe, FatalProbeError


def format_uptime(total_seconds: int) -> str:
    """
    Format a number of seconds as a compact uptime string.

    Examples: 90000 -> "1d 1h 0m", 3661 -> "1h 1m", 59 -> "0m".
    """
    days = total_seconds // 86400
    hours = (total_seconds % 86400) // 3600
    minutes = (total_seconds % 3600) // 60

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    elif hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


class HostnameProbe(BaseProbe):
    """Reads the static hostname."""

    name = "hostname"
    description = "Hostname from /etc/hostname"

    def probe(self) -> str | None:
        return self.first_of([self._from_etc_hostname])

    def _from_etc_hostname(self) -> str | None:
        content = self.read_file("/etc/hostname")
        if content is None:
            return None
        return content.strip()


class OSNameProbe(BaseProbe):
    """Reads the distribution's pretty name."""

    name = "os_name"
    description = "PRETTY_NAME from /etc/os-release"
    placeholder = "Linux"

    def probe(self) -> str | None:
        return self.first_of([self._from_os_release])

    def _from_os_release(self) -> str | None:
        content = self.read_file("/etc/os-release")
        if content is None:
            return None

        line = self.first_line_starting(content, "PRETTY_NAME=")
        if line is None:
            return None
        return line.replace("PRETTY_NAME=", "", 1).strip('"')


class KernelProbe(BaseProbe):
    """
    Reads the running kernel release via `uname -r`.

    Unlike the other probes this one has no placeholder: if uname cannot be
    run at all the whole fetch is aborted.
    """

    name = "kernel_version"
    description = "Kernel release from uname -r"
    placeholder = None

    def probe(self) -> str | None:
        output = self.run_command(["uname", "-r"])
        if output is None:
            raise FatalProbeError("Failed to get kernel version")
        return output.strip()


class UptimeProbe(BaseProbe):
    """Reads seconds since boot from /proc/uptime."""

    name = "uptime"
    description = "Uptime from /proc/uptime"

    def probe(self) -> str | None:
        return self.first_of([self._from_proc_uptime])

    def _from_proc_uptime(self) -> str | None:
        content = self.read_file("/proc/uptime")
        if content is None:
            return None

        fields = content.split()
        if not fields:
            return None

        try:
            seconds = float(fields[0])
        except ValueError:
            self.logger.debug(f"Unparsable uptime: {fields[0]!r}")
            return None

        if not math.isfinite(seconds) or seconds < 0:
            return None
        return format_uptime(int(seconds))


class ShellProbe(BaseProbe):
    """Reports the basename of $SHELL."""

    name = "shell"
    description = "Login shell from $SHELL"

    def probe(self) -> str | None:
        return self.first_of([self._from_env])

    def _from_env(self) -> str | None:
        shell = self.source.getenv("SHELL")
        if shell is None:
            return None
        return shell.split("/")[-1]


class TerminalProbe(BaseProbe):
    """Reports $TERM, or None when it is unset."""

    name = "terminal"
    description = "Terminal type from $TERM"
    placeholder = None

    def probe(self) -> str | None:
        return self.source.getenv("TERM")


class UserProbe(BaseProbe):
    """
    Determines the current user name.

    Tries $USER, then $USERNAME, then `whoami`. Failing to run whoami when
    neither variable is set aborts the fetch.
    """

    name = "username"
    description = "Current user from $USER, $USERNAME or whoami"
    placeholder = None

    def probe(self) -> str | None:
        value = self.first_of(
            [
                lambda: self.source.getenv("USER"),
                lambda: self.source.getenv("USERNAME"),
                self._from_whoami,
            ]
        )
        if value is None:
            raise FatalProbeError("Failed to get username")
        return value

    def _from_whoami(self) -> str | None:
        output = self.run_command(["whoami"])
        if output is None:
            return None
        return output.strip()
