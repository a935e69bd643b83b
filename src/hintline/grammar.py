"""Command grammars: the declarative argument shape of a known command.

A grammar says which positional arguments a command takes, which boolean
flags it understands and which flags consume the following token. Grammars
are read-only once validated; the classifier refers to their entries by
index only.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

ArgKind = Literal["path", "executable", "text"]

# --- Grammar entries ---


class SingleArg(BaseModel):
    """A positional argument. ``arg_pos`` is 1-based."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    arg_type: ArgKind = Field(alias="argType")
    arg_hint: str = Field(default="", alias="argHint")
    arg_pos: int = Field(alias="argPos", ge=1)


class Flag(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    flag_name: str = Field(alias="flagName")
    flag_to: str = Field(default="", alias="flagTo")
    execute_before: str | None = Field(default=None, alias="executeBefore")
    execute_after: str | None = Field(default=None, alias="executeAfter")

    @property
    def target(self) -> str:
        return self.flag_to or self.flag_name


class FlagArgPair(BaseModel):
    """A flag whose value is the next token, e.g. ``-o <file>``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    flag_name: str = Field(alias="flagName")
    flag_to: str = Field(default="", alias="flagTo")
    arg_type: ArgKind = Field(alias="argType")
    arg_hint: str = Field(default="", alias="argHint")
    execute_before: str | None = Field(default=None, alias="executeBefore")
    execute_after: str | None = Field(default=None, alias="executeAfter")

    @property
    def target(self) -> str:
        return self.flag_to or self.flag_name


# --- Command grammar ---


class CommandGrammar(BaseModel):
    """Argument shape for one trigger name.

    ``args`` is kept sorted by position and ``flags`` / ``arg_flags`` by
    name, so lookups may binary search later without changing results.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    exe_to: str = Field(default="", alias="exeTo")
    execute_before: str | None = Field(default=None, alias="executeBefore")
    execute_after: str | None = Field(default=None, alias="executeAfter")

    args: list[SingleArg] = Field(default_factory=list, alias="singleArg")
    flags: list[Flag] = Field(default_factory=list, alias="flag")
    arg_flags: list[FlagArgPair] = Field(default_factory=list, alias="flagArgPair")

    @field_validator("args")
    @classmethod
    def _positions_strictly_increasing(cls, args: list[SingleArg]) -> list[SingleArg]:
        ordered = sorted(args, key=lambda a: a.arg_pos)
        for prev, cur in zip(ordered, ordered[1:]):
            if cur.arg_pos <= prev.arg_pos:
                raise ValueError(f"Duplicate argument position: {cur.arg_pos}")
        return ordered

    @field_validator("flags")
    @classmethod
    def _sort_flags(cls, flags: list[Flag]) -> list[Flag]:
        return sorted(flags, key=lambda f: f.flag_name)

    @field_validator("arg_flags")
    @classmethod
    def _sort_arg_flags(cls, arg_flags: list[FlagArgPair]) -> list[FlagArgPair]:
        return sorted(arg_flags, key=lambda f: f.flag_name)

    @property
    def target(self) -> str:
        """What actually gets executed in place of the trigger name."""
        return self.exe_to or self.name


DEFAULT_GRAMMARS: list[dict[str, Any]] = [
    {
        "name": "mv",
        "exeTo": "move",
        "singleArg": [
            {"argType": "path", "argHint": "src", "argPos": 1},
            {"argType": "path", "argHint": "dst", "argPos": 2},
        ],
    },
]


def grammars_from_config(entries: list[dict[str, Any]]) -> list[CommandGrammar]:
    """Validate raw grammar dicts, skipping (and logging) the invalid ones."""
    grammars: list[CommandGrammar] = []
    for entry in entries:
        try:
            grammars.append(CommandGrammar.model_validate(entry))
        except ValidationError as e:
            name = entry.get("name") if isinstance(entry, dict) else entry
            logger.warning("Skipping invalid command grammar %r: %s", name, e)
    return grammars
