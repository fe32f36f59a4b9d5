"""
Shared pytest fixtures for isilon-mount tests.

No test touches the real network, sudo, or mount: commands go through
FakeExecutor and answers come from FakePrompter.
"""

from collections.abc import Generator
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from isilon_mount.config import AppConfig, LogConfig, ShareConfig


@dataclass
class FakeExecutor:
    """Records every command instead of running it."""

    available: set[str] = field(default_factory=set)
    statuses: dict[str, int] = field(default_factory=dict)
    calls: list[tuple[list[str], bool]] = field(default_factory=list)

    def _status(self, args: list[str]) -> int:
        # Look up by program name, falling back to the first two words
        key = " ".join(args[:2])
        if key in self.statuses:
            return self.statuses[key]
        return self.statuses.get(args[0], 0)

    def run(self, args, quiet=False):
        args = list(args)
        self.calls.append((args, False))
        return self._status(args)

    def run_privileged(self, args):
        args = list(args)
        self.calls.append((args, True))
        return self._status(args)

    def which(self, name):
        return name in self.available

    def programs(self) -> list[str]:
        return [args[0] for args, _ in self.calls]


class FakePrompter:
    """Answers prompts from a queue and remembers what was asked."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            return ""
        return self.answers.pop(0)


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """Points HOME at a temporary directory so ~/mnt lands under tmp_path."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def app_config(home: Path) -> AppConfig:
    """Default configuration with console logging off."""
    return AppConfig(
        share=ShareConfig(),
        logging=LogConfig(level="DEBUG", file="", console=False),
    )


@pytest.fixture
def tmp_config_file(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Creates a temporary INI configuration file for config tests.

    Returns:
        Path to the temporary config file.
    """
    config_content = """[share]
remote_prefix = //files.example.org/research
local_root = ~/shares
default_mode = 750

[network]
ping_timeout_seconds = 3

[linux]
sudo_command = doas
package = cifs-utils

[logging]
level = INFO
file = isilon.log
console = false
"""
    config_path = tmp_path / "isilon.ini"
    config_path.write_text(config_content, encoding="utf-8")
    yield config_path
