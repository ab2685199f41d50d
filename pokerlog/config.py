"""Configuration loading for pokerlog.

Settings live in ``~/.config/pokerlog/config.toml``::

    [storage]
    db_path = "~/.config/pokerlog/pokerlog.db"

    [display]
    currency_symbol = "$"
"""

import logging
from pathlib import Path
from typing import Any, Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "pokerlog"
CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_DB_PATH = CONFIG_DIR / "pokerlog.db"

DEFAULTS: dict[str, dict[str, Any]] = {
    "storage": {"db_path": str(DEFAULT_DB_PATH)},
    "display": {"currency_symbol": "$"},
}


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    Args:
        config_path: Config file to read. Defaults to CONFIG_PATH.

    Returns:
        Configuration dictionary. A missing or unreadable file yields
        the defaults.
    """
    config = {section: dict(values) for section, values in DEFAULTS.items()}
    path = Path(config_path) if config_path else CONFIG_PATH

    if not path.exists():
        return config

    try:
        loaded = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return config

    for section, values in loaded.items():
        if isinstance(values, dict):
            config.setdefault(section, {}).update(values)
    return config


def get_db_path(config: dict, override: Optional[Path] = None) -> Path:
    """Resolve the session database path."""
    if override is not None:
        return Path(override).expanduser()
    return Path(config.get("storage", {}).get("db_path", DEFAULT_DB_PATH)).expanduser()


def get_currency_symbol(config: dict) -> str:
    """Currency symbol used when printing money."""
    return str(config.get("display", {}).get("currency_symbol", "$"))
