"""
Result and error rendering for the vmsh REPL.
"""

from typing import Any

from rich.console import Console

from vmsh_lib.tree import Node, VmshError


def render_value(value: Any) -> str:
    if isinstance(value, Node):
        return value.display()
    return str(value)


def render_result(value: Any) -> list[str]:
    """
    Turn an operator result into output lines.

    A node renders as its display string, a list as one line per element,
    None as nothing, and any other scalar as-is.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [render_value(item) for item in value]
    return [render_value(value)]


def print_result(console: Console, value: Any) -> None:
    for line in render_result(value):
        console.print(line, markup=False, emoji=False)


def print_error(console: Console, err: VmshError) -> None:
    console.print(err.message, style="red", markup=False, emoji=False)
