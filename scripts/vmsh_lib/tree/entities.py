"""
Concrete entity kinds of the vmsh topology.

This module contains:
- VM: virtual machine owning nic and disk factories
- NIC: network interface (endpoint) with a MAC address
- Disk: disk backed by a readable file
- Switch: virtual switch owning a port factory
- Port: switch port (endpoint)
- Wire: link between two endpoints attached to it
"""

import os
from typing import Optional

from vmsh_lib.config.constants import DEFAULT_MAC
from vmsh_lib.config.validation import validate_mac

from .endpoint import Endpoint
from .errors import ErrorKind, VmshError
from .factory import Factory
from .node import Node, operator


class NIC(Node, Endpoint):
    """Network interface of a VM."""

    create_args = ("mac",)

    def __init__(self, label: str, parent: Optional[Node] = None,
                 mac: Optional[str] = None, default_mac: str = DEFAULT_MAC):
        if mac is not None and not validate_mac(mac):
            raise VmshError(ErrorKind.INVALID_ADDRESS, f"invalid MAC address '{mac}'")
        super().__init__(label, parent)
        self.mac = (mac or default_mac).lower()

    def display(self) -> str:
        return f"nic/{self.label}: {self.mac}"

    @operator("mac")
    def op_mac(self, *args: str) -> str:
        return self.mac


class Disk(Node):
    """Disk image attached to a VM. The file is checked once, at creation."""

    create_args = ("file",)

    def __init__(self, label: str, parent: Optional[Node] = None, file: Optional[str] = None):
        if not file:
            raise VmshError(ErrorKind.MISSING_ARGUMENT, "missing disk file argument")
        if not os.path.isfile(file) or not os.access(file, os.R_OK):
            raise VmshError(ErrorKind.UNREADABLE_FILE, f"cannot read '{file}'")
        super().__init__(label, parent)
        self.file = file

    def display(self) -> str:
        return f"disk/{self.label}: {self.file}"

    @operator("file")
    def op_file(self, *args: str) -> str:
        return self.file


class VM(Node):
    """Virtual machine."""

    def __init__(self, label: str, parent: Optional[Node] = None, default_mac: str = DEFAULT_MAC):
        super().__init__(label, parent)
        self.register_child(Factory("nic", NIC, self, default_mac=default_mac))
        self.register_child(Factory("disk", Disk, self))

    def display(self) -> str:
        return f"vm/{self.label}"


class Port(Node, Endpoint):
    """Port of a virtual switch."""
    pass


class Switch(Node):
    """Virtual switch."""

    def __init__(self, label: str, parent: Optional[Node] = None):
        super().__init__(label, parent)
        self.register_child(Factory("port", Port, self))


class Wire(Node):
    """
    Link between two endpoints.

    The wire's symbol table holds attached endpoints: aliases to NICs and
    Ports owned elsewhere in the tree. `connect` names two of them.
    """

    def __init__(self, label: str, parent: Optional[Node] = None):
        super().__init__(label, parent)
        self.endpoints: tuple[Endpoint, ...] = ()

    @property
    def connected(self) -> bool:
        return bool(self.endpoints)

    def attach(self, endpoint: Node, alias: str) -> Node:
        """Make `endpoint` reachable from this wire as `alias`."""
        if not isinstance(endpoint, Endpoint):
            raise VmshError(ErrorKind.NOT_CONNECTABLE, f"'{endpoint.label}' is not connectable")
        if not alias or "/" in alias:
            raise VmshError(ErrorKind.INVALID_LABEL, f"invalid label '{alias}'")
        return self.register_child(endpoint, alias)

    def connect(self, names: list[str]) -> None:
        endpoints = []
        for name in names:
            node = self.symbols.get(name)
            if node is None:
                raise VmshError(ErrorKind.INVALID_ENDPOINT, f"invalid endpoint '{name}'")
            if not isinstance(node, Endpoint):
                raise VmshError(ErrorKind.NOT_CONNECTABLE, f"'{name}' is not connectable")
            endpoints.append(node)

        if len(endpoints) != 2:
            raise VmshError(ErrorKind.WRONG_ARITY,
                            f"need exactly 2 endpoints, got {len(endpoints)}")
        if self.connected:
            raise VmshError(ErrorKind.ALREADY_CONNECTED, "wire is already connected")
        for name, node in zip(names, endpoints):
            if node.peer is not None:
                raise VmshError(ErrorKind.ALREADY_CONNECTED, f"'{name}' is already connected")

        first, second = endpoints
        first.connect(second)
        second.connect(first)
        self.endpoints = (first, second)

    def disconnect(self) -> None:
        if not self.connected:
            raise VmshError(ErrorKind.NOT_CONNECTED, "wire is not connected")
        for endpoint in self.endpoints:
            endpoint.disconnect()
        self.endpoints = ()

    @operator("connect")
    def op_connect(self, *names: str) -> "Wire":
        self.connect(list(names))
        return self

    @operator("disconnect")
    def op_disconnect(self, *args: str) -> "Wire":
        self.disconnect()
        return self

    @operator("endpoints")
    def op_endpoints(self, *args: str) -> list[Endpoint]:
        return list(self.endpoints)
