"""
Settings resolution for vmsh.

Each setting comes from the command line, the environment, the JSON config
file, or the built-in default, in that order.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from vmsh_lib.common import warn

from .constants import CONFIG_FILE, DEFAULT_MAC, HISTORY_FILE
from .validation import validate_mac


@dataclass
class Settings:
    """Resolved settings for one vmsh session."""
    default_mac: str = DEFAULT_MAC
    history_file: Optional[Path] = HISTORY_FILE  # None = keep history in memory


def load_vmsh_config(config_file: Path = CONFIG_FILE) -> dict:
    """Load vmsh settings from config file."""
    if config_file.exists():
        try:
            with open(config_file) as f:
                data = json.load(f)
            if isinstance(data, dict):
                return data
            warn(f"Ignoring {config_file}: expected a JSON object")
        except (json.JSONDecodeError, IOError) as e:
            warn(f"Ignoring {config_file}: {e}")
    return {}


def _config_value(config: Optional[dict], section: str, key: str):
    """Return config[section][key], or None if either level is missing."""
    if not config:
        return None
    table = config.get(section)
    if table is None:
        return None
    if not isinstance(table, dict):
        warn(f"Ignoring config section '{section}': expected a JSON object")
        return None
    return table.get(key)


def get_default_mac(arg_mac: Optional[str] = None, config: Optional[dict] = None) -> str:
    """Get the default NIC MAC from args, env, config, or default."""
    mac = arg_mac or os.environ.get("VMSH_DEFAULT_MAC")
    if not mac:
        mac = _config_value(config, "nic", "mac")
    if not mac:
        return DEFAULT_MAC
    if not isinstance(mac, str) or not validate_mac(mac):
        warn(f"Invalid default MAC '{mac}', using {DEFAULT_MAC}")
        return DEFAULT_MAC
    return mac.lower()


def get_history_file(arg_file: Optional[Path] = None, config: Optional[dict] = None) -> Path:
    """Get the history file from args, env, config, or default."""
    if arg_file:
        return Path(arg_file)
    if os.environ.get("VMSH_HISTORY"):
        return Path(os.environ["VMSH_HISTORY"]).expanduser()
    history = _config_value(config, "history", "file")
    if not history:
        return HISTORY_FILE
    if not isinstance(history, str):
        warn(f"Invalid history file '{history}', using {HISTORY_FILE}")
        return HISTORY_FILE
    return Path(history).expanduser()


def load_settings(
    config_file: Path = CONFIG_FILE,
    mac: Optional[str] = None,
    history_file: Optional[Path] = None,
    no_history: bool = False,
) -> Settings:
    """
    Resolve all settings for a session.

    Args:
        config_file: JSON config file to read
        mac: Default NIC MAC given on the command line
        history_file: History file given on the command line
        no_history: Keep history in memory only

    Returns:
        Settings with every field resolved
    """
    config = load_vmsh_config(config_file)
    return Settings(
        default_mac=get_default_mac(mac, config),
        history_file=None if no_history else get_history_file(history_file, config),
    )
