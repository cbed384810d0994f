"""
Configuration constants for vmsh.

Paths and default values used across the configuration system.
"""

from pathlib import Path


# Settings and history paths
CONFIG_FILE = Path.home() / ".config" / "vmsh" / "vmsh.json"
HISTORY_FILE = Path.home() / ".vmsh_history"

# MAC given to a NIC created without one
DEFAULT_MAC = "52:54:00:0d:ae:36"
