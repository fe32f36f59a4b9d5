"""
isilon-mount - Main Entry Point

This module provides the CLI interface and wires up all components to mount
a CU Anschutz Isilon CIFS/SMB share under ~/mnt on macOS or Linux.
"""

import argparse
import logging
import sys

from .config import load_config
from .errors import MountError
from .executor import SubprocessExecutor
from .logger import setup_logging
from .orchestrator import MountOrchestrator
from .platforms import detect_platform, unmount_command
from .prompt import validate_share_name
from .request import derive_paths

logger = logging.getLogger(__name__)

INTRO = """\
This script mounts a CU Anschutz Isilon CIFS/SMB share under {local_root}.
It will:
  1) Ask for a mount/share name (used for both remote and local paths)
  2) Verify network/VPN reachability
  3) Optionally ask for local file/dir permission mode (default: 775)
  4) Mount {remote_prefix}<name> to {local_root}/<name>
"""


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="isilon-mount - Mount an Isilon CIFS/SMB share under ~/mnt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  isilon-mount
  isilon-mount mount --name LabA --mode 770
  isilon-mount mount --config isilon.ini --verbose
  isilon-mount mount --name LabA --ping-timeout 3 --log-file ~/isilon.log
  isilon-mount unmount --name LabA
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    mount_parser = subparsers.add_parser("mount", help="Mount a share (default)")
    mount_parser.add_argument("--name", help="Share name (skips the prompt)")
    mount_parser.add_argument(
        "--mode", help="Local file/dir mode, 3 octal digits (skips the prompt)"
    )
    mount_parser.add_argument("--username", help="CIFS username on Linux (skips the prompt)")
    mount_parser.add_argument("--config", help="Path to configuration file")
    mount_parser.add_argument(
        "--ping-timeout", type=int, help="Reachability probe timeout in seconds (default: 1)"
    )
    mount_parser.add_argument("--log-file", help="Append log records to this file")
    mount_parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    unmount_parser = subparsers.add_parser("unmount", help="Unmount a share")
    unmount_parser.add_argument("--name", required=True, help="Share name to unmount")
    unmount_parser.add_argument("--config", help="Path to configuration file")
    unmount_parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    return parser.parse_args(argv)


def report_error(error: MountError) -> int:
    print(f"✗ {error.message}", file=sys.stderr)
    if error.tips:
        print("Tips to troubleshoot network/share path issues:", file=sys.stderr)
        for tip in error.tips:
            print(f"  • {tip}", file=sys.stderr)
    return error.exit_code


def cmd_mount(args, prompter=None, executor=None, system=None):
    """
    Handle the mount command.

    Loads configuration, then runs the interactive mount workflow once.
    """
    try:
        config = load_config(
            config_path=getattr(args, "config", None),
            ping_timeout=getattr(args, "ping_timeout", None),
            log_file=getattr(args, "log_file", None),
            debug=getattr(args, "verbose", False),
        )
    except (ValueError, FileNotFoundError) as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging)
    from . import __version__

    logger.info("Starting isilon-mount v%s", __version__)

    if prompter is None:
        from .prompt import TerminalPrompter

        prompter = TerminalPrompter()
    if executor is None:
        executor = SubprocessExecutor(sudo=config.linux.sudo_command)

    print(
        INTRO.format(
            remote_prefix=config.share.remote_prefix,
            local_root=config.share.local_root,
        )
    )
    orchestrator = MountOrchestrator(config, prompter, executor, system=system)
    try:
        outcome = orchestrator.run(
            share_name=getattr(args, "name", None),
            local_mode=getattr(args, "mode", None),
            username=getattr(args, "username", None),
        )
    except MountError as e:
        logger.info("%s in state %s: %s", e.kind, orchestrator.state.value, e.message)
        return report_error(e)
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted")
        return 130

    request = outcome.request
    print(f"✔ Successfully mounted {request.remote_path} at {request.local_path}")
    return 0


def cmd_unmount(args, executor=None, system=None):
    """
    Handle the unmount command.

    Detaches ~/mnt/<name>; the directory itself is left in place.
    """
    try:
        config = load_config(
            config_path=getattr(args, "config", None),
            debug=getattr(args, "verbose", False),
        )
    except (ValueError, FileNotFoundError) as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging)
    if executor is None:
        executor = SubprocessExecutor(sudo=config.linux.sudo_command)

    try:
        name = validate_share_name(args.name)
        request = derive_paths(
            name,
            config.share.default_mode,
            remote_prefix=config.share.remote_prefix,
            local_root=config.share.local_root,
        )
        command, privileged = unmount_command(
            detect_platform(system), request.local_path, system=system
        )
    except MountError as e:
        return report_error(e)

    print(f"→ Unmounting {request.local_path}...")
    try:
        status = executor.run_privileged(command) if privileged else executor.run(command)
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted")
        return 130
    if status != 0:
        print(
            f"✗ Failed to unmount {request.local_path} (exit status {status}).",
            file=sys.stderr,
        )
        return 1

    print(f"✔ Unmounted {request.local_path}")
    return 0


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.command == "unmount":
        return cmd_unmount(args)
    # No subcommand: interactive mount, as when piped from a download
    return cmd_mount(args)


if __name__ == "__main__":
    sys.exit(main() or 0)
