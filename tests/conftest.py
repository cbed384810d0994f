from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from vmsh_lib.repl import ReplContext
from vmsh_lib.tree import Shell


@pytest.fixture
def shell() -> Shell:
    return Shell()


@pytest.fixture
def disk_image(tmp_path: Path) -> Path:
    """A readable file standing in for a disk image."""
    image = tmp_path / "disk.img"
    image.write_bytes(b"\0" * 512)
    return image


@pytest.fixture
def repl_ctx(shell: Shell) -> ReplContext:
    """REPL context whose consoles write into StringIO buffers."""
    return ReplContext(
        shell=shell,
        out=Console(file=io.StringIO(), soft_wrap=True, highlight=False),
        err=Console(file=io.StringIO(), soft_wrap=True, highlight=False),
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's VMSH_* overrides out of every test."""
    monkeypatch.delenv("VMSH_DEFAULT_MAC", raising=False)
    monkeypatch.delenv("VMSH_HISTORY", raising=False)
