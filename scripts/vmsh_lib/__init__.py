"""
vmsh_lib - Library behind the vmsh topology shell

This package contains the in-memory configuration tree of virtual machines,
switches and wires, and the interactive REPL that drives it.
"""

__version__ = "1.0.0"
