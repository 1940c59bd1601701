"""Configuration file management for cashdrawer.

The config file stores the till between runs:

    [till]
    PENNY = 1.01
    "ONE HUNDRED" = 100.0
"""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from cashdrawer.domain.ledger import Till
from cashdrawer.domain.models import Cents, Denomination
from cashdrawer.domain.money import to_major


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
    return get_xdg_config_home() / "cashdrawer" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with an empty till.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    default_config: dict[str, Any] = {
        "till": {denomination.value: 0.0 for denomination in Denomination},
    }

    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

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


def till_from_config(config: dict[str, Any]) -> Till:
    """Build a till from the [till] table of a config dictionary.

    Raises:
        ValueError: If the table is malformed or holds an unknown denomination
            or a negative amount.
    """
    table = config.get("till", {})
    if not isinstance(table, dict):
        raise ValueError("[till] must be a table of denomination = amount")

    for key, amount in table.items():
        if isinstance(amount, bool) or not isinstance(amount, (int, float, str)):
            raise ValueError(f"Invalid till amount for '{key}': {amount!r}")

    return Till.create(table.items())


def load_till(config_path: Path | None = None) -> Till:
    """Load the saved till.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Till built from the config file.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the till table is invalid.
    """
    return till_from_config(load_config(config_path))


def save_till(till: Till, config_path: Path | None = None) -> None:
    """Replace the saved till, keeping the rest of the config.

    Args:
        till: Till to save.
        config_path: Path to config file. If None, uses default location.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}

    config["till"] = {denomination.value: float(to_major(Cents(cents))) for denomination, cents in till}
    if config_path is None:
        config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(config, config_path)
