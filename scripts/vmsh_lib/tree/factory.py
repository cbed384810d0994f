"""
Factory nodes manufacture typed children and hand out their ids.
"""

from typing import Optional

from vmsh_lib.config.validation import is_canonical_id

from .errors import ErrorKind, VmshError
from .node import Node, operator


class Factory(Node):
    """A node whose children are all built by `kind`."""

    def __init__(self, label: str, kind: type, parent: Optional[Node] = None, **defaults):
        super().__init__(label, parent)
        self.kind = kind
        self.next_id = 0
        # Keyword arguments passed to every kind constructor (e.g. default MAC)
        self.defaults = defaults

    def next_label(self, requested_id: Optional[str] = None) -> str:
        """
        Pick the label for a new child and advance the counter.

        An omitted id takes the counter. A canonical integer at or above the
        counter is used and moves the counter past it. Anything else is used
        verbatim and leaves the counter alone.
        """
        if requested_id is None:
            label = str(self.next_id)
            self.next_id += 1
            return label

        if not requested_id or "/" in requested_id:
            raise VmshError(ErrorKind.INVALID_LABEL, f"invalid label '{requested_id}'")

        if is_canonical_id(requested_id) and int(requested_id) >= self.next_id:
            self.next_id = int(requested_id) + 1
        return requested_id

    def create(self, requested_id: Optional[str] = None, *args: str) -> Node:
        if len(args) > len(self.kind.create_args):
            usage = " ".join(f"[{name}]" for name in self.kind.create_args)
            raise VmshError(ErrorKind.WRONG_ARITY, f"usage: create [id] {usage}".rstrip())
        label = self.next_label(requested_id)
        child = self.kind(label, self, *args, **self.defaults)
        return self.register_child(child)

    @operator("create")
    def op_create(self, *args: str) -> Node:
        return self.create(*args)
