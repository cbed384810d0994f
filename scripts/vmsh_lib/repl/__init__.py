"""
vmsh_lib.repl - REPL components for vmsh

This package contains the modular components for the interactive shell:
- context: Shell and output consoles, prompt text
- completer: Tab completion over the live tree
- display: Result and error rendering
- loop: Command handling and the main loop
"""

from .context import ReplContext, get_prompt_text
from .completer import TreeCompleter
from .display import render_result, print_result, print_error
from .loop import handle_command, run_repl

__all__ = [
    'ReplContext',
    'get_prompt_text',
    'TreeCompleter',
    'render_result',
    'print_result',
    'print_error',
    'handle_command',
    'run_repl',
]
