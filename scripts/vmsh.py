#!/usr/bin/env python3
"""
vmsh.py - Interactive shell for building a virtual infrastructure topology

Commands address nodes of an in-memory tree of virtual machines, switches
and wires, e.g. `vm/create web1` or `vm/web1/nic/create`. Nothing is
persisted; the topology lives as long as the process.
"""

import argparse
import sys
from pathlib import Path

from vmsh_lib.common import error
from vmsh_lib.config import CONFIG_FILE, load_settings, validate_mac
from vmsh_lib.repl import ReplContext, handle_command, run_repl
from vmsh_lib.tree import Shell


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Virtual topology shell")
    parser.add_argument("--config-file", type=Path, default=CONFIG_FILE,
                        help=f"Settings file (default: {CONFIG_FILE})")
    parser.add_argument("--history-file", type=Path,
                        help="Command history file (default: ~/.vmsh_history)")
    parser.add_argument("--no-history", action="store_true",
                        help="Do not keep command history on disk")
    parser.add_argument("--mac",
                        help="MAC address for NICs created without one")
    parser.add_argument("-c", "--command", action="append", dest="commands",
                        metavar="COMMAND",
                        help="Run COMMAND and exit (may be repeated)")
    return parser


def run_commands(ctx: ReplContext, commands: list[str]) -> int:
    """Run commands non-interactively. Exit status 1 if any of them failed."""
    status = 0
    for cmd in commands:
        if not handle_command(ctx, cmd):
            status = 1
    return status


def main(argv: list[str] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.mac and not validate_mac(args.mac):
        error(f"Invalid MAC address: {args.mac}")
        return 2

    settings = load_settings(
        config_file=args.config_file,
        mac=args.mac,
        history_file=args.history_file,
        no_history=args.no_history,
    )
    ctx = ReplContext(shell=Shell(default_mac=settings.default_mac))

    if args.commands:
        return run_commands(ctx, args.commands)
    return run_repl(ctx, settings.history_file)


if __name__ == "__main__":
    sys.exit(main())
