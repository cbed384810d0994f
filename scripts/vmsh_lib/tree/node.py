"""
Node - the addressable building block of the vmsh configuration tree.

This module contains:
- operator: decorator tagging a method as a user-invocable operator
- Node: symbol table, path resolution and operator dispatch

Operator tables are built once per class, when the class is defined, from
the methods tagged with @operator. Subclasses inherit their base operators
and may add new ones or replace a handler by reusing its name.
"""

import weakref
from typing import Any, Callable, Optional

from .errors import ErrorKind, VmshError


def operator(name: str) -> Callable:
    """Mark a method as the handler for operator `name`."""
    def decorate(func: Callable) -> Callable:
        func._operator_name = name
        return func
    return decorate


def _build_operator_table(cls: type) -> dict[str, str]:
    """Collect operator name -> method name over the class MRO."""
    table = {}
    for klass in reversed(cls.__mro__):
        for attr, value in vars(klass).items():
            name = getattr(value, "_operator_name", None)
            if name:
                table[name] = attr
    return table


class Node:
    """An addressable entity owning a symbol table and an operator set."""

    _operators: dict[str, str] = {}
    # Positional constructor arguments accepted after the label
    create_args: tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._operators = _build_operator_table(cls)

    def __init__(self, label: str, parent: Optional["Node"] = None):
        self._label = label
        self._parent = weakref.ref(parent) if parent is not None else None
        self.symbols: dict[str, Node] = {}

    @property
    def label(self) -> str:
        return self._label

    @property
    def parent(self) -> Optional["Node"]:
        return self._parent() if self._parent is not None else None

    def path(self) -> str:
        """Breadcrumb from the root down to this node."""
        parent = self.parent
        if parent is None:
            return self.label
        return f"{parent.path()}/{self.label}"

    def display(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.path()}>"

    # -------------------------------------------------------------------------
    # Symbol table
    # -------------------------------------------------------------------------

    def register_child(self, node: "Node", label: Optional[str] = None) -> "Node":
        """
        Add `node` to the symbol table.

        Args:
            node: Node to register
            label: Symbol name, defaults to the node's own label

        Returns:
            The registered node
        """
        label = node.label if label is None else label
        if label in self.symbols:
            raise VmshError(ErrorKind.DUPLICATE_SYMBOL, f"duplicate symbol '{label}'")
        self.symbols[label] = node
        return node

    def list_children(self) -> list["Node"]:
        return list(self.symbols.values())

    def resolve(self, path: list[str]) -> "Node":
        """Walk `path` left to right through the symbol tables."""
        try:
            if not path:
                return self
            return self._child(path[0]).resolve(path[1:])
        except VmshError as e:
            raise e.prefixed(self.label) from None

    def _child(self, name: str) -> "Node":
        child = self.symbols.get(name)
        if child is None:
            raise VmshError(ErrorKind.NO_SUCH_SYMBOL, f"no such symbol '{name}'")
        return child

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    @classmethod
    def operator_names(cls) -> list[str]:
        return sorted(cls._operators)

    def has_operator(self, name: str) -> bool:
        return name in self._operators

    def dispatch(self, name: Optional[str], *args: str) -> Any:
        """Invoke operator `name` on this node with positional `args`."""
        if not name:
            raise VmshError(ErrorKind.MISSING_OPERATOR, "missing operator")
        attr = self._operators.get(name)
        if attr is None:
            raise VmshError(ErrorKind.UNKNOWN_OPERATOR, f"unknown operator '{name}'")
        return getattr(self, attr)(*args)

    def invoke(self, path: list[str], args: list[str]) -> Any:
        """
        Resolve `path` and dispatch an operator on the node it names.

        With an empty path the first arg is the operator. A single trailing
        segment that is not a symbol but names an operator is used as the
        operator, so "vm/create web1" and "vm create web1" are the same.
        Failures at any depth come back prefixed with each label on the way.
        """
        try:
            if not path:
                return self.dispatch(args[0] if args else None, *args[1:])
            head = path[0]
            if len(path) == 1 and head not in self.symbols and self.has_operator(head):
                return self.dispatch(head, *args)
            return self._child(head).invoke(path[1:], args)
        except VmshError as e:
            raise e.prefixed(self.label) from None

    @operator("label")
    def op_label(self, *args: str) -> str:
        return self.label

    @operator("list")
    def op_list(self, *args: str) -> list["Node"]:
        return self.list_children()

    @operator("destroy")
    def op_destroy(self, *args: str) -> None:
        raise VmshError(ErrorKind.UNDESTROYABLE, "I cannot be destroyed")


Node._operators = _build_operator_table(Node)
