import configparser
import re
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_REMOTE_PREFIX = "//data.ucdenver.pvt/dept/SOM/DBMI/"
DEFAULT_LOCAL_ROOT = "~/mnt"
DEFAULT_MODE = "775"

OCTAL_MODE_PATTERN = re.compile(r"[0-7]{3}")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ShareConfig:
    remote_prefix: str = DEFAULT_REMOTE_PREFIX
    local_root: str = DEFAULT_LOCAL_ROOT  # "~" is expanded when paths are derived
    default_mode: str = DEFAULT_MODE


@dataclass
class NetworkConfig:
    ping_timeout_seconds: int = 1


@dataclass
class LinuxConfig:
    sudo_command: str = "sudo"
    package: str = "cifs-utils"


@dataclass
class LogConfig:
    level: str = "WARNING"
    file: str = ""
    console: bool = True


@dataclass
class AppConfig:
    share: ShareConfig = field(default_factory=ShareConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    linux: LinuxConfig = field(default_factory=LinuxConfig)
    logging: LogConfig = field(default_factory=LogConfig)


def load_config(config_path: str | None = None, **cli_args) -> AppConfig:
    """
    Load configuration from an INI file and/or CLI arguments.
    CLI arguments take precedence over config file.

    Args:
        config_path: Path to the INI configuration file.
        **cli_args: Key-value pairs from command line arguments.

    Returns:
        AppConfig: The populated configuration object.

    Raises:
        FileNotFoundError: If config_path is provided but does not exist.
        ValueError: If a value is malformed (timeout, default mode, remote prefix, log level).
    """
    share_config = {
        "remote_prefix": DEFAULT_REMOTE_PREFIX,
        "local_root": DEFAULT_LOCAL_ROOT,
        "default_mode": DEFAULT_MODE,
    }
    network_config = {
        "ping_timeout_seconds": 1,
    }
    linux_config = {
        "sudo_command": "sudo",
        "package": "cifs-utils",
    }
    log_config = {
        "level": "WARNING",
        "file": "",
        "console": True,
    }

    # Parse INI file if provided
    if config_path is not None:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        parser = configparser.ConfigParser()
        parser.read(config_file, encoding="utf-8")

        # Load [share] section
        if parser.has_section("share"):
            share_section = parser["share"]
            for key in ("remote_prefix", "local_root", "default_mode"):
                if share_section.get(key):
                    share_config[key] = share_section.get(key).strip()

        # Load [network] section
        if parser.has_section("network"):
            net_section = parser["network"]
            if net_section.get("ping_timeout_seconds"):
                try:
                    network_config["ping_timeout_seconds"] = int(
                        net_section.get("ping_timeout_seconds")
                    )
                except ValueError:
                    raise ValueError(
                        f"Invalid ping_timeout_seconds value in config: '{net_section.get('ping_timeout_seconds')}' - must be an integer"
                    )

        # Load [linux] section
        if parser.has_section("linux"):
            linux_section = parser["linux"]
            if linux_section.get("sudo_command"):
                linux_config["sudo_command"] = linux_section.get("sudo_command")
            if linux_section.get("package"):
                linux_config["package"] = linux_section.get("package")

        # Load [logging] section
        if parser.has_section("logging"):
            log_section = parser["logging"]
            if log_section.get("level"):
                log_config["level"] = log_section.get("level")
            if log_section.get("file"):
                log_config["file"] = log_section.get("file")
            if log_section.get("console"):
                log_config["console"] = log_section.get("console", "false").lower() in (
                    "true",
                    "1",
                    "yes",
                )

    # Override with CLI arguments (cli_args take precedence)
    if cli_args.get("ping_timeout") is not None:
        try:
            network_config["ping_timeout_seconds"] = int(cli_args["ping_timeout"])
        except ValueError:
            raise ValueError(
                f"Invalid ping timeout: '{cli_args['ping_timeout']}' - must be an integer"
            )
    if cli_args.get("log_file") is not None:
        log_config["file"] = cli_args["log_file"]
    if cli_args.get("debug"):
        log_config["level"] = "DEBUG"
        log_config["console"] = True

    # Validate
    if not OCTAL_MODE_PATTERN.fullmatch(share_config["default_mode"]):
        raise ValueError(
            f"Invalid default_mode: {share_config['default_mode']}. Must be a 3-digit octal value like 775."
        )
    if network_config["ping_timeout_seconds"] < 1:
        raise ValueError("ping_timeout_seconds must be at least 1")
    if log_config["level"].upper() not in LOG_LEVELS:
        raise ValueError(
            f"Invalid logging level: {log_config['level']}. Must be one of {', '.join(LOG_LEVELS)}."
        )
    log_config["level"] = log_config["level"].upper()

    remote_prefix = share_config["remote_prefix"]
    if not remote_prefix.startswith("//") or len(remote_prefix.strip("/")) == 0:
        raise ValueError(
            f"Invalid remote_prefix: {remote_prefix}. Must be a UNC path like //host/path/."
        )
    if not remote_prefix.endswith("/"):
        remote_prefix += "/"

    return AppConfig(
        share=ShareConfig(
            remote_prefix=remote_prefix,
            local_root=share_config["local_root"],
            default_mode=share_config["default_mode"],
        ),
        network=NetworkConfig(
            ping_timeout_seconds=network_config["ping_timeout_seconds"],
        ),
        linux=LinuxConfig(
            sudo_command=linux_config["sudo_command"],
            package=linux_config["package"],
        ),
        logging=LogConfig(
            level=log_config["level"],
            file=log_config["file"],
            console=log_config["console"],
        ),
    )
