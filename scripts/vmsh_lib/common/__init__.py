"""
vmsh_lib.common - Shared utilities for vmsh

This module provides:
- colors: ANSI color codes and status-line helpers
"""

from .colors import Colors, warn, error, info

__all__ = [
    'Colors', 'warn', 'error', 'info',
]
