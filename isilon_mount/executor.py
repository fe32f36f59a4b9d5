"""
External command execution.

Defines the capability the mount workflow uses to run ping, package
managers and mount utilities, so the workflow can be exercised with a fake.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Return code used when an executable cannot be found, as in POSIX shells
COMMAND_NOT_FOUND = 127


@runtime_checkable
class PrivilegedExecutor(Protocol):
    """Protocol for running external commands, optionally with elevated rights."""

    def run(self, args: Sequence[str], quiet: bool = False) -> int:
        """Run a command and return its exit status.

        Args:
            args: Program and arguments.
            quiet: Discard the command's stdout and stderr.
        """
        ...

    def run_privileged(self, args: Sequence[str]) -> int:
        """Run a command with elevated privileges and return its exit status."""
        ...

    def which(self, name: str) -> bool:
        """Return True if an executable called name is on PATH."""
        ...


class SubprocessExecutor:
    """
    Runs commands with subprocess, inheriting the terminal.

    Mount utilities and sudo may ask for passwords, so output is only
    captured away when quiet is requested.
    """

    def __init__(self, sudo: str = "sudo"):
        self.sudo = sudo

    def run(self, args: Sequence[str], quiet: bool = False) -> int:
        args = list(args)
        logger.debug("Running: %s", shlex.join(args))
        output = subprocess.DEVNULL if quiet else None
        try:
            result = subprocess.run(args, stdout=output, stderr=output, check=False)
        except FileNotFoundError:
            logger.warning("Command not found: %s", args[0])
            return COMMAND_NOT_FOUND
        logger.debug("Exit status %d from %s", result.returncode, args[0])
        return result.returncode

    def run_privileged(self, args: Sequence[str]) -> int:
        return self.run([*shlex.split(self.sudo), *args])

    def which(self, name: str) -> bool:
        return shutil.which(name) is not None
