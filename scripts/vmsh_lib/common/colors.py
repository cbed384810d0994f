"""
ANSI color codes and status-line helpers for vmsh.

Status lines are tagged ([!], [ERROR], [i]) and colored only when the
target stream is a terminal.
"""

import sys
from typing import Optional, TextIO


class Colors:
    """ANSI color escape codes for terminal output."""
    RED = "\033[0;31m"
    YELLOW = "\033[1;33m"
    CYAN = "\033[0;36m"
    BOLD = "\033[1m"
    NC = "\033[0m"  # No Color / Reset


def _emit(tag: str, color: str, msg: str, stream: Optional[TextIO]) -> None:
    stream = stream or sys.stdout
    if stream.isatty():
        tag = f"{color}{tag}{Colors.NC}"
    print(f"{tag} {msg}", file=stream)


def warn(msg: str, stream: Optional[TextIO] = None) -> None:
    """Log a warning in yellow, to stderr by default."""
    _emit("[!]", Colors.YELLOW, msg, stream or sys.stderr)


def error(msg: str, stream: Optional[TextIO] = None) -> None:
    """Log an error in red, to stderr by default."""
    _emit("[ERROR]", Colors.RED, msg, stream or sys.stderr)


def info(msg: str, stream: Optional[TextIO] = None) -> None:
    """Log an informational message in cyan."""
    _emit("[i]", Colors.CYAN, msg, stream)
