"""
Mount workflow.

Runs the steps of a single mount strictly in order: collect and validate
input, derive paths, create the mount point, probe the host, pick the
platform strategy and mount. Any step may raise a MountError, which ends
the run.
"""

import enum
import logging
import sys
from typing import TextIO

from .config import AppConfig
from .errors import NetworkUnreachable, share_path_tips
from .executor import PrivilegedExecutor
from .network import check_reachability
from .platforms import detect_platform, select_strategy
from .prompt import Prompter, collect_local_mode, collect_share_name
from .request import MountOutcome, derive_paths, ensure_local_directory

logger = logging.getLogger(__name__)


class State(enum.Enum):
    INIT = "Init"
    INPUT_COLLECTED = "InputCollected"
    PATHS_DERIVED = "PathsDerived"
    DIRECTORY_ENSURED = "DirectoryEnsured"
    REACHABILITY_VERIFIED = "ReachabilityVerified"
    PLATFORM_DISPATCHED = "PlatformDispatched"
    MOUNT_SUCCEEDED = "MountSucceeded"


class MountOrchestrator:
    def __init__(
        self,
        config: AppConfig,
        prompter: Prompter,
        executor: PrivilegedExecutor,
        system: str | None = None,
        out: TextIO | None = None,
    ):
        self.config = config
        self.prompter = prompter
        self.executor = executor
        self.system = system
        self.out = out or sys.stdout
        self.state = State.INIT

    def _advance(self, state: State) -> None:
        logger.debug("%s -> %s", self.state.value, state.value)
        self.state = state

    def _say(self, message: str) -> None:
        print(message, file=self.out)

    def run(
        self,
        share_name: str | None = None,
        local_mode: str | None = None,
        username: str | None = None,
    ) -> MountOutcome:
        """
        Mount one share.

        Args:
            share_name: Pre-filled share name; prompted for when None.
            local_mode: Pre-filled 3-digit octal mode; prompted for when None.
            username: Pre-filled CIFS username (Linux only); prompted for when None.

        Returns:
            MountOutcome for the mounted share.

        Raises:
            MountError: Any validation, network, platform or mount failure.
        """
        share_cfg = self.config.share

        name = collect_share_name(self.prompter, share_name)
        mode = collect_local_mode(self.prompter, local_mode, default=share_cfg.default_mode)
        self._advance(State.INPUT_COLLECTED)

        request = derive_paths(
            name,
            mode,
            remote_prefix=share_cfg.remote_prefix,
            local_root=share_cfg.local_root,
        )
        logger.info("Mounting %s at %s", request.remote_path, request.local_path)
        self._advance(State.PATHS_DERIVED)

        if not request.local_path.is_dir():
            self._say(f"→ Creating mount point directory: {request.local_path}")
        ensure_local_directory(request.local_path)
        self._advance(State.DIRECTORY_ENSURED)

        self._say(f"→ Checking network reachability to {request.remote_host}...")
        reachable = check_reachability(
            request.remote_host,
            self.executor,
            timeout_seconds=self.config.network.ping_timeout_seconds,
            system=self.system,
        )
        if not reachable:
            raise NetworkUnreachable(
                f"Unable to reach {request.remote_host}. "
                "Please ensure you're connected to VPN or network.",
                tips=share_path_tips(request.share_name, request.remote_path),
            )
        self._advance(State.REACHABILITY_VERIFIED)

        strategy = select_strategy(
            detect_platform(self.system),
            self.executor,
            self.prompter,
            username=username,
            system=self.system,
            package=self.config.linux.package,
            out=self.out,
        )
        self._advance(State.PLATFORM_DISPATCHED)

        outcome = strategy.mount(request)
        self._advance(State.MOUNT_SUCCEEDED)
        return outcome
