"""
External process capability: probing and running openers.
"""

import subprocess
import sys
from typing import Dict, Optional, Protocol

from mtg.core.exceptions import LaunchError, UnsupportedPlatformError
from mtg.core.logging import get_logger
from mtg.models import LaunchCommand


logger = get_logger("process")

# Default URL opener per supported platform
OS_OPENERS: Dict[str, str] = {
    "darwin": "open",
    "linux": "xdg-open",
}


def default_opener(platform: Optional[str] = None) -> str:
    """
    Return the OS default opener command.

    Args:
        platform: sys.platform style name (current platform when omitted).

    Raises:
        UnsupportedPlatformError: not macOS or Linux.
    """
    platform = platform or sys.platform
    if platform.startswith("linux"):
        platform = "linux"
    opener = OS_OPENERS.get(platform)
    if opener is None:
        raise UnsupportedPlatformError(platform)
    return opener


class ProcessLauncher(Protocol):
    """Runs external commands on behalf of the dispatcher."""

    def is_executable(self, command: str) -> bool:
        ...

    def run(self, command: LaunchCommand) -> int:
        ...


class SubprocessLauncher:
    """ProcessLauncher backed by subprocess, with output suppressed."""

    def is_executable(self, command: str) -> bool:
        """Probe ``command`` with ``which``."""
        try:
            result = subprocess.run(
                ["which", command],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            logger.debug(f"which probe for {command} failed: {e}")
            return False
        return result.returncode == 0

    def run(self, command: LaunchCommand) -> int:
        """Run the command and wait for it. The exit status is not interpreted."""
        logger.debug(f"Running: {command}")
        try:
            result = subprocess.run(
                command.argv,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise LaunchError(
                f"Could not run '{command.command}': {e}",
                {"command": command.argv},
            ) from e
        logger.debug(f"{command.command} exited with status {result.returncode}")
        return result.returncode
