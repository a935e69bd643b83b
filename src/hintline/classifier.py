"""Argument classification against command grammars.

Token 0 is always the executable. If it names a known grammar, the rest
of the line is matched left to right against that grammar: flag-argument
pairs first, then boolean flags, then the next positional slot. Each
grammar entry is consumed at most once per line; anything left over is
inert text. Without a grammar every further token is treated as a path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Sequence

from hintline.executables import make_executables_hint, update_executables_hint
from hintline.filesystem import make_directory_hint, resolve_arg_path, update_directory_hint
from hintline.grammar import ArgKind, CommandGrammar, Flag, FlagArgPair
from hintline.hints import Hint
from hintline.state import ShellContext

logger = logging.getLogger(__name__)

TokenRole = Literal["command", "positional", "flag", "flag_pair", "flag_value", "other"]


@dataclass(frozen=True)
class TokenMatch:
    """How one token was classified.

    ``entry`` indexes the grammar table that matched: ``args`` for
    positionals, ``flags`` for flags and ``arg_flags`` for both halves of
    a flag-argument pair.
    """

    kind: ArgKind
    role: TokenRole
    entry: int | None = None
    inlay: str | None = None


def _find_unused(entries: Sequence[Flag | FlagArgPair], token: str, used: set[int]) -> int | None:
    for k, entry in enumerate(entries):
        if k not in used and entry.flag_name == token:
            return k
    return None


def classify_tokens(tokens: Sequence[str], grammar: CommandGrammar | None) -> list[TokenMatch]:
    """Classify every token; the result has one match per token."""
    if not tokens:
        return []

    matches = [TokenMatch("executable", "command")]
    if grammar is None:
        matches.extend(TokenMatch("path", "other") for _ in tokens[1:])
        return matches

    used_pairs: set[int] = set()
    used_flags: set[int] = set()
    used_args: set[int] = set()
    arg_count = 1

    i = 1
    while i < len(tokens):
        token = tokens[i]

        k = _find_unused(grammar.arg_flags, token, used_pairs)
        if k is not None:
            used_pairs.add(k)
            pair = grammar.arg_flags[k]
            matches.append(TokenMatch("text", "flag_pair", k))
            if i + 1 < len(tokens):
                matches.append(TokenMatch(pair.arg_type, "flag_value", k, pair.arg_hint or None))
            i += 2
            continue

        k = _find_unused(grammar.flags, token, used_flags)
        if k is not None:
            used_flags.add(k)
            matches.append(TokenMatch("text", "flag", k))
            i += 1
            continue

        for k, arg in enumerate(grammar.args):
            if k not in used_args and arg.arg_pos == arg_count:
                used_args.add(k)
                arg_count += 1
                matches.append(TokenMatch(arg.arg_type, "positional", k, arg.arg_hint or None))
                break
        else:
            matches.append(TokenMatch("text", "other"))
        i += 1

    return matches


class ArgumentClassifier:
    """Classifies a token list and keeps a table of per-argument hints in sync.

    Hints whose kind did not change are refreshed in place, so typing
    inside an already listed directory never lists it again.
    """

    def __init__(self, context: ShellContext) -> None:
        self._context = context
        self.grammar: CommandGrammar | None = None

    def select_grammar(self, first_token: str) -> CommandGrammar | None:
        grammar = self._context.find_grammar(first_token) if first_token else None
        if grammar is not self.grammar:
            logger.debug(
                "Command grammar: %s -> %s",
                self.grammar.name if self.grammar else None,
                grammar.name if grammar else None,
            )
        self.grammar = grammar
        return grammar

    def classify(self, tokens: Sequence[str]) -> list[TokenMatch]:
        self.select_grammar(tokens[0] if tokens else "")
        return classify_tokens(tokens, self.grammar)

    def refresh_hints(
        self,
        entries: list[tuple[ArgKind, Hint]],
        tokens: Sequence[str],
        matches: Sequence[TokenMatch],
    ) -> None:
        """Bring ``entries`` in line with ``matches``, reusing hints by index."""
        for i, (token, match) in enumerate(zip(tokens, matches)):
            if i < len(entries) and entries[i][0] == match.kind:
                self._update_hint(entries[i][1], token, match)
                continue
            entry = (match.kind, self._make_hint(token, match))
            if i < len(entries):
                entries[i] = entry
            else:
                entries.append(entry)
        del entries[len(matches) :]

    def _make_hint(self, token: str, match: TokenMatch) -> Hint:
        if match.kind == "executable":
            return make_executables_hint(self._context.executables, token, match.inlay)
        if match.kind == "path":
            return make_directory_hint(resolve_arg_path(token, self._context.cwd), match.inlay)
        hint = Hint(inlay=match.inlay)
        hint.closest_match(token)
        return hint

    def _update_hint(self, hint: Hint, token: str, match: TokenMatch) -> None:
        hint.inlay = match.inlay
        if match.kind == "executable":
            update_executables_hint(self._context.executables, token, hint)
        elif match.kind == "path":
            update_directory_hint(resolve_arg_path(token, self._context.cwd), hint)
        else:
            hint.closest_match(token)
