"""
Tab completion for the vmsh REPL.

This module provides tree-aware command completion using prompt_toolkit.
The first word completes path segments and operators of the node reached so
far; the second word completes operators of the node the first word names.
"""

from prompt_toolkit.completion import Completer, Completion

from vmsh_lib.tree import Shell, VmshError


class TreeCompleter(Completer):
    """Completer walking the live configuration tree."""

    def __init__(self, shell: Shell):
        self.shell = shell

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        words = text.split()

        if not words or (len(words) == 1 and not text.endswith(' ')):
            # Completing the address
            address = words[0] if words else ""
            parent, _, word = address.rpartition("/")
            completions = self._get_address_completions(parent)
        elif len(words) == 1 or (len(words) == 2 and not text.endswith(' ')):
            # Completing the operator
            word = words[1] if len(words) == 2 else ""
            completions = self._get_operator_completions(words[0])
        else:
            return

        for item in completions:
            if item.startswith(word):
                yield Completion(item, start_position=-len(word))

    def _lookup(self, address: str):
        try:
            return self.shell.lookup(address)
        except VmshError:
            return None

    def _get_address_completions(self, address: str) -> list[str]:
        """Child labels and operators of the node at `address`."""
        node = self._lookup(address)
        if node is None:
            return []
        children = [f"{label}/" for label in node.symbols]
        return sorted(children) + node.operator_names()

    def _get_operator_completions(self, address: str) -> list[str]:
        node = self._lookup(address)
        if node is None:
            return []
        return node.operator_names()
