"""
Text-source reader shared by all probes.

Every probe obtains its raw text through a TextSource, either by reading a
file or by running an external command. Tests substitute a fake source with
canned outputs instead of touching the host.
"""

from __future__ import annotations

import logging
import os
import subprocess

logger = logging.getLogger(__name__)


class TextSource:
    """
    Reads files, runs commands and looks up environment variables.

    Failures are reported as None and never raised, so each probe can decide
    whether to fall back or abort.
    """

    def __init__(self, command_timeout: float | None = None):
        self.command_timeout = command_timeout

    def read_file(self, path: str) -> str | None:
        """
        Read a file and return its contents.

        Args:
            path: Path to the file.

        Returns:
            File contents, or None if the file cannot be read.
        """
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            logger.debug(f"Could not read {path}: {e}")
            return None

    def run_command(self, cmd: list[str]) -> str | None:
        """
        Run a command and return its standard output.

        The exit status is not checked: output is returned even when the
        command fails. Invalid UTF-8 is replaced rather than rejected.

        Args:
            cmd: Command and arguments as list.

        Returns:
            Decoded stdout, or None if the command could not be executed.
        """
        try:
            result = subprocess.run(
                cmd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=self.command_timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"Command timed out: {' '.join(cmd)}")
            return None
        except OSError as e:
            logger.debug(f"Command not invocable: {cmd[0]}: {e}")
            return None

        if result.returncode != 0:
            logger.debug(f"Command exited with {result.returncode}: {' '.join(cmd)}")
        return result.stdout.decode("utf-8", errors="replace")

    def path_exists(self, path: str) -> bool:
        """Return True if the path exists."""
        return os.path.exists(path)

    def getenv(self, name: str) -> str | None:
        """Return an environment variable, or None when unset."""
        return os.environ.get(name)
