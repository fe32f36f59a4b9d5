import logging
import platform

from .executor import PrivilegedExecutor

logger = logging.getLogger(__name__)


def ping_command(host: str, timeout_seconds: int = 1, system: str | None = None) -> list[str]:
    """
    Build a single-packet ping with a short timeout.

    BSD ping (macOS) takes -W in milliseconds, so the overall -t deadline is
    used there instead.
    """
    system = system if system is not None else platform.system()
    if system == "Darwin":
        return ["ping", "-c", "1", "-t", str(timeout_seconds), host]
    return ["ping", "-c", "1", "-W", str(timeout_seconds), host]


def check_reachability(
    host: str,
    executor: PrivilegedExecutor,
    timeout_seconds: int = 1,
    system: str | None = None,
) -> bool:
    """
    Probe host once.

    Returns:
        True if the host answered the ping, False otherwise.
    """
    status = executor.run(ping_command(host, timeout_seconds, system), quiet=True)
    if status != 0:
        logger.info("Ping to %s failed with status %d", host, status)
        return False
    return True
