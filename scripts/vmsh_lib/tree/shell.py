"""
Root shell of the vmsh configuration tree.

The shell is the node the interactive loop talks to. It owns the vm, switch
and wire factories and evaluates one command line at a time.
"""

import sys
from typing import Any, Optional

from vmsh_lib.config.constants import DEFAULT_MAC

from .endpoint import Endpoint
from .entities import VM, Switch, Wire
from .errors import ErrorKind, VmshError
from .factory import Factory
from .node import Node, operator


ROOT_LABEL = "vmsh"


def split_path(address: str) -> list[str]:
    """Split a "/"-delimited address into labels, ignoring empty segments."""
    return [segment for segment in address.split("/") if segment]


class Shell(Node):
    """Top-level node and command evaluator."""

    def __init__(self, default_mac: str = DEFAULT_MAC):
        super().__init__(ROOT_LABEL)
        self.default_mac = default_mac
        self.reset()

    def reset(self) -> None:
        """Drop the whole topology and start from empty factories."""
        self.symbols = {}
        self.register_child(Factory("vm", VM, self, default_mac=self.default_mac))
        self.register_child(Factory("switch", Switch, self))
        self.register_child(Factory("wire", Wire, self))

    def evaluate(self, line: str) -> Any:
        """
        Evaluate one command line.

        Args:
            line: "<path> [operator] [args...]" or "<path>/<operator> [args...]"

        Returns:
            Whatever the operator returned

        Raises:
            VmshError: on any user error, message prefixed with the path
        """
        parts = line.split()
        if not parts:
            return self.invoke([], [])
        return self.invoke(split_path(parts[0]), parts[1:])

    def lookup(self, address: str) -> Node:
        """Resolve an address below the root; errors are not root-prefixed."""
        path = split_path(address)
        if not path:
            return self
        return self._child(path[0]).resolve(path[1:])

    def attach(self, wire_path: str, endpoint_path: str, alias: Optional[str] = None) -> Node:
        """Register the endpoint at `endpoint_path` under the wire at `wire_path`."""
        wire = self.lookup(wire_path)
        if not isinstance(wire, Wire):
            raise VmshError(ErrorKind.NOT_A_WIRE, f"'{wire_path}' is not a wire")
        endpoint = self.lookup(endpoint_path)
        if not isinstance(endpoint, Endpoint):
            raise VmshError(ErrorKind.NOT_CONNECTABLE, f"'{endpoint_path}' is not connectable")
        if alias is None:
            alias = ".".join(split_path(endpoint_path))
        try:
            return wire.attach(endpoint, alias)
        except VmshError as e:
            raise e.prefixed("/".join(split_path(wire_path))) from None

    @operator("attach")
    def op_attach(self, *args: str) -> Node:
        if len(args) < 2:
            raise VmshError(ErrorKind.MISSING_ARGUMENT,
                            "usage: attach <wire-path> <endpoint-path> [alias]")
        if len(args) > 3:
            raise VmshError(ErrorKind.WRONG_ARITY,
                            "usage: attach <wire-path> <endpoint-path> [alias]")
        return self.attach(*args)

    @operator("quit")
    def op_quit(self, *args: str) -> None:
        sys.exit(0)
