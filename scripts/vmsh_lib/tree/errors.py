"""
User-facing errors for the vmsh configuration tree.

Every failure a user can cause is a VmshError carrying one ErrorKind. Any
other exception escaping the tree is a defect.
"""

from enum import Enum


class ErrorKind(Enum):
    """Enumerated failure kinds reported to the user."""
    DUPLICATE_SYMBOL = "DuplicateSymbol"
    NO_SUCH_SYMBOL = "NoSuchSymbol"
    MISSING_OPERATOR = "MissingOperator"
    UNKNOWN_OPERATOR = "UnknownOperator"
    MISSING_ARGUMENT = "MissingArgument"
    UNREADABLE_FILE = "UnreadableFile"
    INCOMPATIBLE_ENDPOINT = "IncompatibleEndpoint"
    INVALID_ENDPOINT = "InvalidEndpoint"
    NOT_CONNECTABLE = "NotConnectable"
    WRONG_ARITY = "WrongArity"
    UNDESTROYABLE = "Undestroyable"
    INVALID_LABEL = "InvalidLabel"
    INVALID_ADDRESS = "InvalidAddress"
    ALREADY_CONNECTED = "AlreadyConnected"
    NOT_CONNECTED = "NotConnected"
    NOT_A_WIRE = "NotAWire"


class VmshError(Exception):
    """Raised for any failure caused by user input."""

    def __init__(self, kind: ErrorKind, message: str, located: bool = False):
        super().__init__(message)
        self.kind = kind
        self.message = message
        # True once a node label has been put in front of the message
        self.located = located

    def prefixed(self, label: str) -> "VmshError":
        """
        Return a copy of this error with `label` in front of the message.

        The innermost node joins with ": ", every level above it with "/",
        so a failure three levels down reads "vmsh/vm/web1: ...".
        """
        sep = "/" if self.located else ": "
        return VmshError(self.kind, f"{label}{sep}{self.message}", located=True)

    def __str__(self) -> str:
        return self.message
