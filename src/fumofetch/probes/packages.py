"""
Installed package count probe.

Counts packages with the first package manager that can be run.
"""

from __future__ import annotations

from fumofetch.probes.base import BaseProbe

# (label, command) pairs in priority order
PACKAGE_MANAGERS: list[tuple[str, list[str]]] = [
    ("apt", ["dpkg", "--get-selections"]),
    ("pacman", ["pacman", "-Q"]),
    ("rpm", ["rpm", "-qa"]),
]


class PackagesProbe(BaseProbe):
    """
    Counts installed packages.

    The first manager whose command can be started wins, whatever its exit
    status: a manager that runs but prints nothing yields "0 (label)".
    """

    name = "package_summary"
    description = "Installed package count from dpkg, pacman or rpm"

    def probe(self) -> str | None:
        return self.first_of(
            [self._counter(label, cmd) for label, cmd in PACKAGE_MANAGERS]
        )

    def _counter(self, label: str, cmd: list[str]):
        def count() -> str | None:
            output = self.run_command(cmd)
            if output is None:
                return None
            return f"{len(output.splitlines())} ({label})"

        return count
