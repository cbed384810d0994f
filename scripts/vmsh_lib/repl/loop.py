"""
Command handling and main loop of the vmsh REPL.

One line is evaluated at a time. A VmshError is printed to the error console
and the loop carries on; any other exception is a defect and propagates.
The root `quit` operator leaves through SystemExit.
"""

from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from prompt_toolkit.styles import Style

from vmsh_lib.common import Colors, info
from vmsh_lib.tree import VmshError

from .completer import TreeCompleter
from .context import ReplContext, get_prompt_text
from .display import print_error, print_result


VMSH_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
})


def handle_command(ctx: ReplContext, cmd: str) -> bool:
    """
    Evaluate one command line and print its outcome.

    Returns:
        False if the command failed with a user error, True otherwise
    """
    if not cmd.strip():
        return True
    try:
        result = ctx.shell.evaluate(cmd)
    except VmshError as e:
        print_error(ctx.err, e)
        return False
    print_result(ctx.out, result)
    return True


def build_history(history_file: Optional[Path]) -> History:
    if history_file is None:
        return InMemoryHistory()
    history_file.parent.mkdir(parents=True, exist_ok=True)
    return FileHistory(str(history_file))


def run_repl(ctx: ReplContext, history_file: Optional[Path] = None) -> int:
    """Main REPL entry point."""
    print()
    print(f"{Colors.BOLD}vmsh topology shell{Colors.NC}")
    print("Type '<path> list' to explore, 'quit' to exit")
    print()

    if history_file is not None:
        info(f"Command history: {history_file}")

    session = PromptSession(
        history=build_history(history_file),
        completer=TreeCompleter(ctx.shell),
        style=VMSH_STYLE,
    )

    while True:
        try:
            cmd = session.prompt([('class:prompt', get_prompt_text(ctx))])
            handle_command(ctx, cmd)
        except KeyboardInterrupt:
            print()
            continue
        except EOFError:
            print()
            break

    print("Goodbye!")
    return 0
