import logging
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_LOCAL_ROOT, DEFAULT_MODE, DEFAULT_REMOTE_PREFIX
from .errors import MountPointUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MountRequest:
    share_name: str
    local_mode: str  # 3-digit octal, e.g. "775"
    remote_path: str  # UNC path, e.g. //host/dept/share
    local_path: Path
    remote_host: str

    @property
    def octal_mode(self) -> str:
        """Mode in the leading-zero form mount utilities expect (e.g. 0775)."""
        return f"0{self.local_mode}"


@dataclass(frozen=True)
class MountOutcome:
    request: MountRequest
    platform: str
    mounted: bool = True


def host_from_unc(unc_path: str) -> str:
    """Strip the leading '//' and everything from the next '/' onward."""
    stripped = unc_path[2:] if unc_path.startswith("//") else unc_path
    return stripped.split("/", 1)[0]


def derive_paths(
    share_name: str,
    local_mode: str = DEFAULT_MODE,
    remote_prefix: str = DEFAULT_REMOTE_PREFIX,
    local_root: str = DEFAULT_LOCAL_ROOT,
) -> MountRequest:
    """
    Build the remote and local locations for a validated share name.

    Args:
        share_name: Validated share name (no '/', not '.' or '..').
        local_mode: Validated 3-digit octal mode.
        remote_prefix: UNC prefix the share name is appended to.
        local_root: Directory (may start with '~') holding local mount points.

    Returns:
        MountRequest with remote path, local path and remote host filled in.
    """
    remote_path = remote_prefix + share_name
    local_path = Path(local_root).expanduser() / share_name
    return MountRequest(
        share_name=share_name,
        local_mode=local_mode,
        remote_path=remote_path,
        local_path=local_path,
        remote_host=host_from_unc(remote_path),
    )


def ensure_local_directory(path: Path) -> bool:
    """
    Create the mount point and any missing parents.

    Returns:
        True if the directory was created, False if it already existed.

    Raises:
        MountPointUnavailable: If the path exists as a file or cannot be created.
    """
    if path.is_dir():
        return False
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise MountPointUnavailable(
            f"Cannot create mount point {path}: {e.strerror or e}"
        ) from e
    logger.debug("Created mount point %s", path)
    return True
