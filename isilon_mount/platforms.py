"""
Platform detection and the per-platform mount strategies.

The strategy is selected once, after detection, and each variant turns a
MountRequest into a call to the operating system's own SMB/CIFS client.
"""

from __future__ import annotations

import enum
import logging
import os
import platform as _platform
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, TextIO

from .errors import (
    InstallFailed,
    MissingEnvironment,
    MountFailed,
    UnsupportedPackageManager,
    UnsupportedPlatform,
    share_path_tips,
)
from .executor import PrivilegedExecutor
from .prompt import Prompter, collect_username
from .request import MountOutcome, MountRequest

logger = logging.getLogger(__name__)

CIFS_HELPER = "mount.cifs"


class Platform(enum.Enum):
    MACOS = "Darwin"
    LINUX = "Linux"
    UNSUPPORTED = "Unsupported"


def detect_platform(system: str | None = None) -> Platform:
    """Map an OS identifier (platform.system() by default) to a Platform."""
    system = system if system is not None else _platform.system()
    if system == "Darwin":
        return Platform.MACOS
    if system == "Linux":
        return Platform.LINUX
    return Platform.UNSUPPORTED


class MountStrategy(Protocol):
    name: str

    def mount(self, request: MountRequest) -> MountOutcome: ...


def _mount_failed(request: MountRequest) -> MountFailed:
    return MountFailed(
        f"Failed to mount {request.remote_path} at {request.local_path}.",
        tips=share_path_tips(request.share_name, request.remote_path),
    )


class MacMountStrategy:
    """Mounts with mount_smbfs, which uses the login keychain or prompts itself."""

    name = "macOS"

    def __init__(self, executor: PrivilegedExecutor, out: TextIO | None = None):
        self.executor = executor
        self.out = out or sys.stdout

    def command(self, request: MountRequest) -> list[str]:
        return [
            "mount_smbfs",
            "-d",
            request.octal_mode,
            "-f",
            request.octal_mode,
            request.remote_path,
            str(request.local_path),
        ]

    def mount(self, request: MountRequest) -> MountOutcome:
        print("→ Detected macOS (Darwin). Using mount_smbfs.", file=self.out)
        status = self.executor.run(self.command(request))
        if status != 0:
            logger.info("mount_smbfs exited with status %d", status)
            raise _mount_failed(request)
        return MountOutcome(request=request, platform=self.name)


class LinuxMountStrategy:
    """
    Mounts with mount -t cifs through sudo.

    Installs cifs-utils first when mount.cifs is missing, then asks for the
    CIFS username. The local login name is passed as both uid and gid.
    """

    name = "Linux"

    def __init__(
        self,
        executor: PrivilegedExecutor,
        prompter: Prompter,
        username: str | None = None,
        environ: Mapping[str, str] | None = None,
        package: str = "cifs-utils",
        out: TextIO | None = None,
    ):
        self.executor = executor
        self.prompter = prompter
        self.username = username
        self.environ = environ if environ is not None else os.environ
        self.package = package
        self.out = out or sys.stdout

    def ensure_cifs_client(self) -> None:
        """
        Install the CIFS client with apt-get or yum if mount.cifs is absent.

        Raises:
            UnsupportedPackageManager: If neither apt-get nor yum is available.
            InstallFailed: If an install step exits non-zero.
        """
        if self.executor.which(CIFS_HELPER):
            return

        print(f"→ {self.package} not found. Attempting installation...", file=self.out)
        if self.executor.which("apt-get"):
            print(f"   • Using apt-get to install {self.package}", file=self.out)
            steps = [
                ["apt-get", "update"],
                ["apt-get", "install", "-y", self.package],
            ]
        elif self.executor.which("yum"):
            print(f"   • Using yum to install {self.package}", file=self.out)
            steps = [["yum", "install", "-y", self.package]]
        else:
            raise UnsupportedPackageManager(
                f"Unsupported package manager. Please install {self.package} manually."
            )

        for step in steps:
            status = self.executor.run_privileged(step)
            if status != 0:
                raise InstallFailed(
                    f"'{' '.join(step)}' failed with status {status}. "
                    f"Please install {self.package} manually."
                )

    def command(self, request: MountRequest, username: str, login: str) -> list[str]:
        options = ",".join(
            [
                f"username={username}",
                f"uid={login}",
                f"gid={login}",
                "domainauto",
                f"file_mode={request.octal_mode}",
                f"dir_mode={request.octal_mode}",
            ]
        )
        return [
            "mount",
            "-t",
            "cifs",
            request.remote_path,
            str(request.local_path),
            "-o",
            options,
        ]

    def mount(self, request: MountRequest) -> MountOutcome:
        print(
            f"→ Detected Linux. Verifying {self.package} ({CIFS_HELPER}) is installed...",
            file=self.out,
        )
        self.ensure_cifs_client()

        username = collect_username(self.prompter, self.username)
        login = self.environ.get("USER", "")
        if not login:
            raise MissingEnvironment("USER not defined, please define")

        status = self.executor.run_privileged(self.command(request, username, login))
        if status != 0:
            logger.info("mount -t cifs exited with status %d", status)
            raise _mount_failed(request)
        return MountOutcome(request=request, platform=self.name)


def select_strategy(
    detected: Platform,
    executor: PrivilegedExecutor,
    prompter: Prompter,
    username: str | None = None,
    system: str | None = None,
    package: str = "cifs-utils",
    out: TextIO | None = None,
) -> MountStrategy:
    """
    Pick the mount strategy for a detected platform.

    Raises:
        UnsupportedPlatform: If the platform is neither macOS nor Linux.
    """
    if detected is Platform.MACOS:
        return MacMountStrategy(executor, out=out)
    if detected is Platform.LINUX:
        return LinuxMountStrategy(executor, prompter, username=username, package=package, out=out)
    system = system if system is not None else _platform.system()
    raise UnsupportedPlatform(f"Unsupported operating system: {system}")


def unmount_command(
    detected: Platform, local_path: Path, system: str | None = None
) -> tuple[list[str], bool]:
    """
    Command that detaches a mount point.

    Returns:
        (args, privileged) for the platform.

    Raises:
        UnsupportedPlatform: On any other operating system.
    """
    if detected is Platform.MACOS:
        return ["umount", str(local_path)], False
    if detected is Platform.LINUX:
        return ["umount", str(local_path)], True
    system = system if system is not None else _platform.system()
    raise UnsupportedPlatform(f"Unsupported operating system: {system}")
