"""
Interactive input collection and validation.

Answers are read from the controlling terminal rather than stdin, so the
tool stays safe when it is piped into an interpreter straight from a
download.
"""

import logging
from typing import Protocol

from .config import DEFAULT_MODE, OCTAL_MODE_PATTERN
from .errors import InvalidInput

logger = logging.getLogger(__name__)

SHARE_NAME_PROMPT = "Mount/share name (e.g., LabName, etc.): "
USERNAME_PROMPT = "Isilon/CIFS username (CU Anschutz username): "


class Prompter(Protocol):
    def ask(self, prompt: str) -> str:
        """Show prompt and return one line of input without the newline."""
        ...


class TerminalPrompter:
    """Reads answers from the terminal device, never from stdin."""

    def __init__(self, tty_path: str = "/dev/tty"):
        self.tty_path = tty_path

    def ask(self, prompt: str) -> str:
        try:
            with open(self.tty_path, "a", encoding="utf-8") as tty_out:
                tty_out.write(prompt)
            with open(self.tty_path, encoding="utf-8") as tty_in:
                line = tty_in.readline()
        except OSError as e:
            # No controlling terminal: treat like an empty answer
            logger.debug("Cannot read from %s: %s", self.tty_path, e)
            return ""
        return line.rstrip("\r\n")


def validate_share_name(name: str) -> str:
    """
    Check a share name before it is used in any path.

    Surrounding whitespace is dropped, as a shell `read` would.

    Raises:
        InvalidInput: If the name is empty, contains '/', or is '.' or '..'.
    """
    name = name.strip()
    if not name:
        raise InvalidInput("Mount/share name cannot be empty.")
    if "/" in name or name in (".", ".."):
        raise InvalidInput("Mount name cannot contain '/' and cannot be '.' or '..'.")
    return name


def validate_local_mode(mode: str, default: str = DEFAULT_MODE) -> str:
    """
    Check a 3-digit octal permission mode; a blank answer selects the default.

    Raises:
        InvalidInput: If the value is not exactly three digits 0-7.
    """
    mode = mode.strip()
    if not mode:
        mode = default
    if not OCTAL_MODE_PATTERN.fullmatch(mode):
        raise InvalidInput("Permission mode must be a 3-digit octal value like 775.")
    return mode


def collect_share_name(prompter: Prompter, preset: str | None = None) -> str:
    name = preset if preset is not None else prompter.ask(SHARE_NAME_PROMPT)
    return validate_share_name(name)


def collect_local_mode(
    prompter: Prompter, preset: str | None = None, default: str = DEFAULT_MODE
) -> str:
    mode = preset if preset is not None else prompter.ask(f"Local file/dir mode [{default}]: ")
    return validate_local_mode(mode, default=default)


def collect_username(prompter: Prompter, preset: str | None = None) -> str:
    username = preset if preset is not None else prompter.ask(USERNAME_PROMPT)
    username = username.strip()
    if not username:
        raise InvalidInput("Username cannot be empty.")
    return username
