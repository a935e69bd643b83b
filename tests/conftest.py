"""Shared fixtures: a small directory tree, a fake search path and the mv grammar."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from hintline.buffer import InputBuffer
from hintline.executables import ExecutableIndex
from hintline.grammar import CommandGrammar, Flag, FlagArgPair, SingleArg
from hintline.state import ShellContext


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """cwd/
    alpha/inner.txt
    alps/
    beta.txt
    """
    cwd = tmp_path / "cwd"
    (cwd / "alpha").mkdir(parents=True)
    (cwd / "alpha" / "inner.txt").write_text("")
    (cwd / "alps").mkdir()
    (cwd / "beta.txt").write_text("")
    return cwd


@pytest.fixture
def exe_dir(tmp_path: Path) -> Path:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    for name in ("aahhhhh", "cat", "ls", "mv"):
        path = bin_dir / name
        path.write_text("#!/bin/sh\n")
        path.chmod(0o755)
    (bin_dir / "README").write_text("not executable")
    os.chmod(bin_dir / "README", 0o644)
    return bin_dir


@pytest.fixture
def mv_grammar() -> CommandGrammar:
    return CommandGrammar(
        name="mv",
        exe_to="move",
        args=[
            SingleArg(arg_type="path", arg_hint="src", arg_pos=1),
            SingleArg(arg_type="path", arg_hint="dst", arg_pos=2),
        ],
        flags=[Flag(flag_name="-f", flag_to="/Y")],
        arg_flags=[FlagArgPair(flag_name="-h", flag_to="/H", arg_type="executable", arg_hint="cmd")],
    )


@pytest.fixture
def context(tree: Path, exe_dir: Path, mv_grammar: CommandGrammar) -> ShellContext:
    return ShellContext(
        cwd=tree,
        grammars=[mv_grammar],
        executables=ExecutableIndex(str(exe_dir)),
    )


@pytest.fixture
def make_buffer(context: ShellContext):
    """Build an updated buffer holding ``text`` with the caret at the end."""

    def _make(text: str = "", capacity: int | None = None) -> InputBuffer:
        buf = InputBuffer(context, capacity)
        buf.insert_str(text)
        buf.update()
        return buf

    return _make
