"""
vmsh_lib.tree - The in-memory configuration tree

This package contains the namespace engine and the topology it models:
- errors: VmshError and the ErrorKind taxonomy
- node: Node base class, @operator tagging, path resolution and dispatch
- factory: Factory nodes and id generation
- endpoint: Endpoint capability (pairing with one peer of another kind)
- entities: VM, NIC, Disk, Switch, Port, Wire
- shell: Shell root node and command evaluator
"""

from .errors import ErrorKind, VmshError
from .node import Node, operator
from .factory import Factory
from .endpoint import Endpoint
from .entities import VM, NIC, Disk, Switch, Port, Wire
from .shell import ROOT_LABEL, Shell, split_path

__all__ = [
    'ErrorKind', 'VmshError',
    'Node', 'operator',
    'Factory',
    'Endpoint',
    'VM', 'NIC', 'Disk', 'Switch', 'Port', 'Wire',
    'ROOT_LABEL', 'Shell', 'split_path',
]
