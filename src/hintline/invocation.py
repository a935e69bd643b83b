"""Turning a classified line into the command lines to run.

Flags and the command name are replaced by their aliases. Hook commands
may reference the typed tokens with ``$`` expressions:

    $2      the token at index 2
    $..     every token
    $..2    tokens 0 and 1
    $2..    tokens from index 2 on
    $1..3   tokens 1 and 2
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from hintline.classifier import TokenMatch
from hintline.grammar import CommandGrammar


@dataclass
class Invocation:
    command: str
    before: list[str] = field(default_factory=list)
    after: list[str] = field(default_factory=list)


def _to_index(text: str, default: int, limit: int) -> int | None:
    if not text:
        return default
    if not text.isdigit():
        return None
    return min(int(text), limit)


def _expand_word(word: str, args: Sequence[str]) -> str:
    if not word.startswith("$") or len(word) == 1:
        return word
    ref = word[1:]
    n = len(args)

    if ".." in ref:
        start_text, _, stop_text = ref.partition("..")
        start = _to_index(start_text, 0, n)
        stop = _to_index(stop_text, n, n)
        if start is None or stop is None:
            return word
        return " ".join(args[start:stop])

    index = _to_index(ref, 0, n)
    if index is None:
        return word
    return args[index] if index < n else ""


def expand_hook(template: str, args: Sequence[str]) -> str:
    """Substitute ``$`` references in a hook command."""
    return " ".join(_expand_word(word, args) for word in template.split())


def build_invocation(
    tokens: Sequence[str],
    matches: Sequence[TokenMatch],
    grammar: CommandGrammar | None,
) -> Invocation:
    """Build the literal command line, plus any before/after hooks."""
    if grammar is None:
        return Invocation(command=" ".join(t for t in tokens if t))

    before: list[str] = []
    after: list[str] = []

    def add_hooks(execute_before: str | None, execute_after: str | None) -> None:
        if execute_before:
            before.append(expand_hook(execute_before, tokens))
        if execute_after:
            after.append(expand_hook(execute_after, tokens))

    add_hooks(grammar.execute_before, grammar.execute_after)

    words: list[str] = []
    for token, match in zip(tokens, matches):
        if match.role == "command":
            words.append(grammar.target)
        elif match.role == "flag" and match.entry is not None:
            flag = grammar.flags[match.entry]
            words.append(flag.target)
            add_hooks(flag.execute_before, flag.execute_after)
        elif match.role == "flag_pair" and match.entry is not None:
            pair = grammar.arg_flags[match.entry]
            words.append(pair.target)
            add_hooks(pair.execute_before, pair.execute_after)
        else:
            words.append(token)

    return Invocation(command=" ".join(w for w in words if w), before=before, after=after)
