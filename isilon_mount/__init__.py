__version__ = "0.1.0"

# Public API exports
from .config import (
    AppConfig,
    LinuxConfig,
    LogConfig,
    NetworkConfig,
    ShareConfig,
    load_config,
)
from .errors import (
    InstallFailed,
    InvalidInput,
    MissingEnvironment,
    MountError,
    MountFailed,
    NetworkUnreachable,
    UnsupportedPackageManager,
    UnsupportedPlatform,
)
from .executor import PrivilegedExecutor, SubprocessExecutor
from .network import check_reachability
from .orchestrator import MountOrchestrator, State
from .platforms import (
    LinuxMountStrategy,
    MacMountStrategy,
    MountStrategy,
    Platform,
    detect_platform,
    select_strategy,
)
from .prompt import (
    TerminalPrompter,
    collect_local_mode,
    collect_share_name,
    collect_username,
)
from .request import MountOutcome, MountRequest, derive_paths, ensure_local_directory

__all__ = [
    "__version__",
    # Configuration
    "AppConfig",
    "ShareConfig",
    "NetworkConfig",
    "LinuxConfig",
    "LogConfig",
    "load_config",
    # Errors
    "MountError",
    "InvalidInput",
    "NetworkUnreachable",
    "UnsupportedPlatform",
    "UnsupportedPackageManager",
    "InstallFailed",
    "MissingEnvironment",
    "MountFailed",
    # Input and paths
    "TerminalPrompter",
    "collect_share_name",
    "collect_local_mode",
    "collect_username",
    "MountRequest",
    "MountOutcome",
    "derive_paths",
    "ensure_local_directory",
    # Execution
    "PrivilegedExecutor",
    "SubprocessExecutor",
    "check_reachability",
    # Platforms
    "Platform",
    "MountStrategy",
    "MacMountStrategy",
    "LinuxMountStrategy",
    "detect_platform",
    "select_strategy",
    # Workflow
    "MountOrchestrator",
    "State",
]
