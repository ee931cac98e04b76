"""XDG-compliant path management for snapman.

Configuration follows the XDG Base Directory Specification:
- Config: ~/.config/snapman/

Offline snaps are downloaded to ~/Downloaded_Snaps unless the
configuration points elsewhere.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "snapman"

# Directory name under $HOME used for offline downloads
DEFAULT_DOWNLOAD_DIRNAME = "Downloaded_Snaps"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/snapman/ (or XDG_CONFIG_HOME/snapman/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_config_path() -> Path:
    """Get the main configuration file path.

    Returns:
        Path to ~/.config/snapman/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_default_download_dir() -> Path:
    """Get the default offline download directory.

    Returns:
        Path to ~/Downloaded_Snaps.
    """
    return Path.home() / DEFAULT_DOWNLOAD_DIRNAME


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_download_dir(path: Path) -> Path:
    """Create the offline download directory if it doesn't exist.

    Args:
        path: Download directory taken from the configuration.

    Returns:
        Path to the download directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(path, "download")
