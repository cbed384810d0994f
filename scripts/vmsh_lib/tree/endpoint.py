"""
Endpoint capability for nodes that can be linked by a wire.

An endpoint pairs with exactly one peer of a different concrete kind. The
association is not ownership: peers never keep each other alive in the tree
and connect/disconnect only touch the caller's side. Wire performs the two
one-directional calls that make a link symmetric.
"""

from typing import Optional

from .errors import ErrorKind, VmshError
from .node import operator


class Endpoint:
    """Mixin giving a Node a single, kind-checked peer."""

    _peer: Optional["Endpoint"] = None

    @property
    def peer(self) -> Optional["Endpoint"]:
        return self._peer

    def connect(self, other: "Endpoint") -> None:
        if type(other) is type(self):
            raise VmshError(
                ErrorKind.INCOMPATIBLE_ENDPOINT,
                f"cannot connect {type(self).__name__.lower()} to {type(other).__name__.lower()}",
            )
        self._peer = other

    def disconnect(self) -> None:
        self._peer = None

    @operator("peer")
    def op_peer(self, *args: str) -> Optional["Endpoint"]:
        return self._peer
