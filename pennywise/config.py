"""Configuration file management for pennywise."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from pennywise.domain.models import Year


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "pennywise" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "query": {},
        "display": {"show_transactions": True},
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary, empty if the file doesn't exist.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return {}

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_section(config: dict[str, Any], name: str) -> dict[str, Any]:
    """Get a config table by name.

    Args:
        config: Configuration dictionary.
        name: Table name (e.g., "query").

    Returns:
        The table, or an empty dict if it is not set.

    Raises:
        ValueError: If the entry exists but is not a table.
    """
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"{name} must be a table, got {section!r}")
    return section


def get_default_year(config_path: Path | None = None) -> Year | None:
    """Get the configured default query year.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Year from [query] default_year, or None if not set.

    Raises:
        ValueError: If [query] is not a table or default_year is not an integer.
    """
    config = load_config(config_path)
    year = get_section(config, "query").get("default_year")

    if year is None:
        return None
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValueError(f"query.default_year must be an integer, got {year!r}")

    return Year(year)


def get_show_transactions(config_path: Path | None = None) -> bool:
    """Get whether commands should print matching transactions.

    Raises:
        ValueError: If [display] is not a table or show_transactions is not a boolean.
    """
    config = load_config(config_path)
    show = get_section(config, "display").get("show_transactions", True)

    if not isinstance(show, bool):
        raise ValueError(f"display.show_transactions must be true or false, got {show!r}")

    return show
