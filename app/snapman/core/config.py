"""snapman configuration and settings.

Configuration is stored in ~/.config/snapman/config.toml. Every key is
optional; a missing file means all defaults.

Example::

    download_dir = "/srv/snaps"
    use_sudo = true
    command_timeout = 900
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from snapman.core.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from snapman.core.paths import get_config_path, get_default_download_dir

logger = logging.getLogger(__name__)

DEFAULT_COMMAND_TIMEOUT = 600
DEFAULT_QUERY_TIMEOUT = 60
DEFAULT_SPINNER = "dots"


class SnapmanConfig(BaseModel):
    """Runtime settings for the snapman menu.

    Attributes:
        download_dir: Directory used for offline snap downloads.
        use_sudo: Prefix state-changing commands with sudo.
        command_timeout: Timeout in seconds for state-changing commands.
        query_timeout: Timeout in seconds for read-only snap queries.
        spinner: Rich spinner name shown while a command runs.
        clear_screen: Clear the terminal before drawing each menu.
    """

    model_config = ConfigDict(extra="forbid")

    download_dir: Path = Field(
        default_factory=get_default_download_dir,
        description="Directory for offline snap downloads",
    )
    use_sudo: Annotated[
        bool,
        Field(description="Run state-changing commands through sudo"),
    ] = True
    command_timeout: Annotated[
        int,
        Field(ge=10, le=3600, description="Timeout for state-changing commands (10-3600)"),
    ] = DEFAULT_COMMAND_TIMEOUT
    query_timeout: Annotated[
        int,
        Field(ge=1, le=300, description="Timeout for read-only queries (1-300)"),
    ] = DEFAULT_QUERY_TIMEOUT
    spinner: Annotated[
        str,
        Field(min_length=1, description="Rich spinner name"),
    ] = DEFAULT_SPINNER
    clear_screen: Annotated[
        bool,
        Field(description="Clear the screen before each menu"),
    ] = True


def load_config(path: Path | None = None) -> SnapmanConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated SnapmanConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    if "download_dir" in data and isinstance(data["download_dir"], str):
        data["download_dir"] = Path(data["download_dir"]).expanduser()

    try:
        return SnapmanConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> SnapmanConfig:
    """Load configuration, falling back to defaults on any problem.

    A missing file is silent. A broken file is logged and the defaults
    are used.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        SnapmanConfig from the file, or defaults.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return SnapmanConfig()
    except ConfigError as e:
        logger.warning("Using default configuration: %s", e)
        return SnapmanConfig()


def save_config(config: SnapmanConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The SnapmanConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    data = config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: SnapmanConfig) -> dict[str, object]:
    """Convert SnapmanConfig to a dictionary for TOML serialization.

    Args:
        config: The SnapmanConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return {
        "download_dir": str(config.download_dir),
        "use_sudo": config.use_sudo,
        "command_timeout": config.command_timeout,
        "query_timeout": config.query_timeout,
        "spinner": config.spinner,
        "clear_screen": config.clear_screen,
    }
