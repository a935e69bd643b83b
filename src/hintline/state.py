"""Application state shared by every input buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from hintline.executables import ExecutableIndex
from hintline.grammar import CommandGrammar, grammars_from_config
from hintline.settings import DEFAULT_BUFFER_CAPACITY, ShellSettings


@dataclass
class ShellContext:
    """Built once at startup and handed to the hint providers.

    ``cwd`` may be reassigned by the enclosing application (e.g. after a
    ``cd``); the next update resolves paths against the new value.
    """

    cwd: Path = field(default_factory=Path.cwd)
    grammars: list[CommandGrammar] = field(default_factory=list)
    executables: ExecutableIndex = field(default_factory=ExecutableIndex)
    buffer_capacity: int = DEFAULT_BUFFER_CAPACITY

    def find_grammar(self, name: str) -> CommandGrammar | None:
        """The last grammar registered for trigger ``name``, if any."""
        for grammar in reversed(self.grammars):
            if grammar.name == name:
                return grammar
        return None

    @classmethod
    def from_settings(cls, settings: ShellSettings, cwd: Path | None = None) -> ShellContext:
        return cls(
            cwd=cwd if cwd is not None else Path.cwd(),
            grammars=grammars_from_config(settings.commands),
            executables=ExecutableIndex(settings.search_path),
            buffer_capacity=settings.buffer_capacity,
        )
