"""
Validation functions for vmsh input.

MAC address and identifier validation utilities.
"""

import re


MAC_PATTERN = re.compile(r'^[0-9a-fA-F]{2}(:[0-9a-fA-F]{2}){5}$')
CANONICAL_ID_PATTERN = re.compile(r'^(0|[1-9][0-9]*)$')


def validate_mac(mac: str) -> bool:
    """Validate a colon-separated 48-bit MAC address."""
    return bool(MAC_PATTERN.match(mac))


def is_canonical_id(value: str) -> bool:
    """True for a non-negative integer without leading zeros ("0", "7", "42")."""
    return bool(CANONICAL_ID_PATTERN.match(value))
