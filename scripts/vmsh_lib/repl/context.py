"""
REPL context and prompt utilities for vmsh.

This module contains:
- ReplContext: The shell being driven and the consoles it writes to
- get_prompt_text: Generates the prompt string
"""

from dataclasses import dataclass, field

from rich.console import Console

from vmsh_lib.tree import ROOT_LABEL, Shell


def _out_console() -> Console:
    return Console(soft_wrap=True, highlight=False, emoji=False)


def _err_console() -> Console:
    return Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


@dataclass
class ReplContext:
    """Shell plus the consoles results and errors are printed to."""
    shell: Shell = field(default_factory=Shell)
    out: Console = field(default_factory=_out_console)
    err: Console = field(default_factory=_err_console)


def get_prompt_text(ctx: ReplContext) -> str:
    """Generate the prompt string."""
    return f"{ROOT_LABEL}> "
