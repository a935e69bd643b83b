"""Tests for command grammar validation and config loading."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from hintline.grammar import DEFAULT_GRAMMARS, CommandGrammar, Flag, SingleArg, grammars_from_config


class TestCommandGrammar:
    """Validation and ordering of grammar tables."""

    def test_camel_case_aliases(self) -> None:
        grammar = CommandGrammar.model_validate(
            {
                "name": "tar",
                "exeTo": "bsdtar",
                "executeBefore": "echo $1",
                "singleArg": [{"argType": "path", "argHint": "archive", "argPos": 1}],
                "flag": [{"flagName": "-v", "flagTo": "--verbose"}],
                "flagArgPair": [{"flagName": "-C", "argType": "path", "argHint": "dir"}],
            }
        )
        assert grammar.target == "bsdtar"
        assert grammar.execute_before == "echo $1"
        assert grammar.args[0].arg_hint == "archive"
        assert grammar.flags[0].target == "--verbose"
        assert grammar.arg_flags[0].target == "-C"
        assert grammar.arg_flags[0].arg_type == "path"

    def test_target_defaults_to_name(self) -> None:
        assert CommandGrammar(name="ls").target == "ls"

    def test_args_sorted_by_position(self) -> None:
        grammar = CommandGrammar(
            name="cp",
            args=[
                SingleArg(arg_type="path", arg_pos=2),
                SingleArg(arg_type="text", arg_pos=1),
            ],
        )
        assert [a.arg_pos for a in grammar.args] == [1, 2]

    def test_duplicate_positions_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CommandGrammar(
                name="cp",
                args=[
                    SingleArg(arg_type="path", arg_pos=1),
                    SingleArg(arg_type="path", arg_pos=1),
                ],
            )

    def test_position_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            SingleArg(arg_type="path", arg_pos=0)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SingleArg(arg_type="number", arg_pos=1)

    def test_flags_sorted_by_name(self) -> None:
        grammar = CommandGrammar(name="x", flags=[Flag(flag_name="-z"), Flag(flag_name="-a")])
        assert [f.flag_name for f in grammar.flags] == ["-a", "-z"]

    def test_frozen(self) -> None:
        grammar = CommandGrammar(name="x")
        with pytest.raises(ValidationError):
            grammar.name = "y"


class TestGrammarsFromConfig:
    """Loading grammar dicts from settings."""

    def test_default_grammars(self) -> None:
        grammars = grammars_from_config(DEFAULT_GRAMMARS)
        assert [g.name for g in grammars] == ["mv"]
        assert grammars[0].target == "move"
        assert [a.arg_hint for a in grammars[0].args] == ["src", "dst"]

    def test_invalid_entries_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        entries = [
            {"name": "ok"},
            {"name": "bad", "singleArg": [{"argType": "path", "argPos": 0}]},
            {"exeTo": "nameless"},
        ]
        with caplog.at_level(logging.WARNING, logger="hintline.grammar"):
            grammars = grammars_from_config(entries)
        assert [g.name for g in grammars] == ["ok"]
        assert "Skipping invalid command grammar 'bad'" in caplog.text

    def test_non_dict_entries_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="hintline.grammar"):
            grammars = grammars_from_config([None, "mv", {"name": "ok"}])
        assert [g.name for g in grammars] == ["ok"]
        assert "Skipping invalid command grammar 'mv'" in caplog.text
