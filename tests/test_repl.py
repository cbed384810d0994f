from __future__ import annotations

from pathlib import Path

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory, InMemoryHistory
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from vmsh_lib.repl import (
    ReplContext,
    TreeCompleter,
    get_prompt_text,
    handle_command,
    render_result,
    run_repl,
)
from vmsh_lib.repl.loop import build_history
from vmsh_lib.tree import NIC, VM, Shell


def output(console) -> str:
    return console.file.getvalue()


def complete(shell: Shell, text: str) -> list[str]:
    completer = TreeCompleter(shell)
    return [c.text for c in completer.get_completions(Document(text), None)]


# =============================================================================
# Rendering
# =============================================================================

def test_render_result_shapes() -> None:
    vm = VM("web1")
    nic = NIC("0")

    assert render_result(None) == []
    assert render_result(vm) == ["vm/web1"]
    assert render_result([vm, nic]) == ["vm/web1", "nic/0: 52:54:00:0d:ae:36"]
    assert render_result((nic,)) == ["nic/0: 52:54:00:0d:ae:36"]
    assert render_result("0") == ["0"]
    assert render_result([]) == []


def test_prompt_text(repl_ctx: ReplContext) -> None:
    assert get_prompt_text(repl_ctx) == "vmsh> "


# =============================================================================
# Command handling
# =============================================================================

def test_handle_command_prints_result(repl_ctx: ReplContext) -> None:
    assert handle_command(repl_ctx, "vm/create web1") is True
    assert handle_command(repl_ctx, "vm/create web2") is True
    assert handle_command(repl_ctx, "vm/list") is True

    assert output(repl_ctx.out) == "vm/web1\nvm/web2\nvm/web1\nvm/web2\n"
    assert output(repl_ctx.err) == ""


def test_handle_command_prints_error_line(repl_ctx: ReplContext) -> None:
    assert handle_command(repl_ctx, "vm/nope/label") is False

    assert output(repl_ctx.out) == ""
    assert output(repl_ctx.err) == "vmsh/vm: no such symbol 'nope'\n"


def test_handle_command_keeps_brackets_literal(repl_ctx: ReplContext) -> None:
    handle_command(repl_ctx, "vm/create [red]")
    assert output(repl_ctx.out) == "vm/[red]\n"


def test_handle_command_keeps_emoji_codes_literal(repl_ctx: ReplContext) -> None:
    handle_command(repl_ctx, "vm/create a:ok:b")
    handle_command(repl_ctx, "vm/a:ok:b/label")
    handle_command(repl_ctx, "vm/:smile:/label")

    assert output(repl_ctx.out) == "vm/a:ok:b\na:ok:b\n"
    assert output(repl_ctx.err) == "vmsh/vm: no such symbol ':smile:'\n"


def test_handle_command_skips_blank_lines(repl_ctx: ReplContext) -> None:
    assert handle_command(repl_ctx, "   ") is True
    assert output(repl_ctx.out) == ""
    assert output(repl_ctx.err) == ""


def test_handle_command_scalar_result(repl_ctx: ReplContext) -> None:
    handle_command(repl_ctx, "vm/create web1")
    handle_command(repl_ctx, "vm/web1/nic/create")
    handle_command(repl_ctx, "vm/web1/nic/0/label")

    assert output(repl_ctx.out).splitlines()[-1] == "0"


def test_defects_are_not_caught(repl_ctx: ReplContext, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(line: str):
        raise RuntimeError("defect")

    monkeypatch.setattr(repl_ctx.shell, "evaluate", broken)

    with pytest.raises(RuntimeError):
        handle_command(repl_ctx, "vm/list")


def test_quit_propagates(repl_ctx: ReplContext) -> None:
    with pytest.raises(SystemExit):
        handle_command(repl_ctx, "quit")


# =============================================================================
# Completion
# =============================================================================

def test_complete_root(shell: Shell) -> None:
    assert complete(shell, "") == [
        "switch/", "vm/", "wire/", "attach", "destroy", "label", "list", "quit",
    ]
    assert complete(shell, "v") == ["vm/"]
    assert complete(shell, "q") == ["quit"]


def test_complete_path_segments(shell: Shell) -> None:
    shell.evaluate("vm/create web1")
    shell.evaluate("vm/create db1")

    assert complete(shell, "vm/") == ["db1/", "web1/", "create", "destroy", "label", "list"]
    assert complete(shell, "vm/w") == ["web1/"]
    assert complete(shell, "vm/web1/n") == ["nic/"]


def test_complete_operator_word(shell: Shell) -> None:
    shell.evaluate("vm/create web1")

    assert complete(shell, "vm ") == ["create", "destroy", "label", "list"]
    assert complete(shell, "vm cr") == ["create"]
    assert complete(shell, "vm/web1/nic/create 0 ") == []


def test_complete_unknown_path(shell: Shell) -> None:
    assert complete(shell, "router/") == []
    assert complete(shell, "router ") == []


# =============================================================================
# History
# =============================================================================

def test_build_history(tmp_path: Path) -> None:
    assert isinstance(build_history(None), InMemoryHistory)

    history_file = tmp_path / "nested" / "history"
    assert isinstance(build_history(history_file), FileHistory)
    assert history_file.parent.is_dir()


# =============================================================================
# Main loop
# =============================================================================

def drive_repl(ctx: ReplContext, keys: str) -> int:
    with create_pipe_input() as pipe:
        pipe.send_text(keys)
        with create_app_session(input=pipe, output=DummyOutput()):
            return run_repl(ctx)


def test_run_repl_until_end_of_input(repl_ctx: ReplContext, capsys: pytest.CaptureFixture) -> None:
    status = drive_repl(repl_ctx, "vm/create web1\rvm/list\r\x04")

    assert status == 0
    assert output(repl_ctx.out) == "vm/web1\nvm/web1\n"
    assert capsys.readouterr().out.endswith("Goodbye!\n")


def test_run_repl_survives_interrupt_and_errors(
    repl_ctx: ReplContext, capsys: pytest.CaptureFixture
) -> None:
    status = drive_repl(repl_ctx, "vm/cre\x03vm/nope/label\rvm/create web1\r\x04")

    assert status == 0
    assert output(repl_ctx.out) == "vm/web1\n"
    assert output(repl_ctx.err) == "vmsh/vm: no such symbol 'nope'\n"
    assert "Goodbye!" in capsys.readouterr().out
