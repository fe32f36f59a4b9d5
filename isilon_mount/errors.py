"""
Failure taxonomy for the mount workflow.

Every failure is terminal: the CLI prints the message (and any tips) on
stderr and exits with the error's exit code.
"""


class MountError(Exception):
    """Base class for all mount workflow failures."""

    kind = "MountError"
    exit_code = 1

    def __init__(self, message: str, tips: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.tips = list(tips or [])


class InvalidInput(MountError):
    """Empty or malformed share name, permission mode, or username."""

    kind = "InvalidInput"
    exit_code = 2


class NetworkUnreachable(MountError):
    """The share host did not answer the reachability probe."""

    kind = "NetworkUnreachable"
    exit_code = 3


class UnsupportedPlatform(MountError):
    """The operating system is neither macOS nor Linux."""

    kind = "UnsupportedPlatform"
    exit_code = 4


class UnsupportedPackageManager(MountError):
    """The CIFS client is missing and neither apt-get nor yum is available."""

    kind = "UnsupportedPackageManager"
    exit_code = 5


class InstallFailed(MountError):
    """The package manager ran but could not install the CIFS client."""

    kind = "InstallFailed"
    exit_code = 5


class MissingEnvironment(MountError):
    """A required environment value (the login name in $USER) is empty."""

    kind = "MissingEnvironment"
    exit_code = 6


class MountFailed(MountError):
    """The platform mount utility exited non-zero."""

    kind = "MountFailed"
    exit_code = 7


class MountPointUnavailable(MountError):
    """The local mount point could not be created."""

    kind = "MountPointUnavailable"
    exit_code = 8


def share_path_tips(share_name: str, remote_path: str) -> list[str]:
    """
    Remediation hints shown after network and mount failures.

    Args:
        share_name: The share name the user entered.
        remote_path: The full UNC path derived from it.

    Returns:
        Lines to print below the error message.
    """
    return [
        "Confirm VPN is connected and retry.",
        f"Verify the share name and case are correct: {share_name}",
        f"Verify this exact share exists and you have access: {remote_path}",
        "If unsure, ask Isilon admins for the exact share path.",
    ]
