"""
vmsh_lib.config - Settings and validation for vmsh.

This package contains:
- constants: Default paths and the default NIC MAC
- validation: MAC address and identifier validation
- settings: Settings resolution from args, env, and the JSON config file
"""

from .constants import (
    CONFIG_FILE,
    HISTORY_FILE,
    DEFAULT_MAC,
)

from .validation import (
    validate_mac,
    is_canonical_id,
)

from .settings import (
    Settings,
    load_vmsh_config,
    get_default_mac,
    get_history_file,
    load_settings,
)

__all__ = [
    # Constants
    'CONFIG_FILE',
    'HISTORY_FILE',
    'DEFAULT_MAC',
    # Validation
    'validate_mac',
    'is_canonical_id',
    # Settings
    'Settings',
    'load_vmsh_config',
    'get_default_mac',
    'get_history_file',
    'load_settings',
]
