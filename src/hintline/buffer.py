"""Input buffer - the command line being typed, its cursors and its arguments.

The buffer has a fixed capacity; inserts that would overflow it are
dropped. After every edit the owner calls :meth:`InputBuffer.update`,
which splits the line into argument spans on unquoted spaces and then
reclassifies the arguments and refreshes their hints.

Spans are kept in a flat list of boundaries, two per argument:
argument ``k`` covers ``splits[2 * k]`` to ``splits[2 * k + 1]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Literal

from hintline.classifier import ArgumentClassifier, TokenMatch
from hintline.executables import make_executables_hint
from hintline.grammar import ArgKind, CommandGrammar
from hintline.hints import Hint
from hintline.invocation import Invocation, build_invocation
from hintline.state import ShellContext

logger = logging.getLogger(__name__)

Side = Literal["left", "right", "neither"]


@dataclass
class Cursor:
    position: int = 0
    active: bool = False


class InputBuffer:
    """The live command line.

    The main cursor is the caret and is always active. The secondary
    cursor is only active while a selection exists; the selection is the
    range between the two.
    """

    def __init__(self, context: ShellContext, capacity: int | None = None) -> None:
        self._context = context
        self.capacity: int = capacity if capacity is not None else context.buffer_capacity
        self._chars: list[str] = []

        self.main_cursor = Cursor(0, True)
        self.secondary_cursor = Cursor(0, False)

        self._split_locs: list[int] = []
        self._quote_locs: list[int] = []
        self._current_arg: int = 0

        self._classifier = ArgumentClassifier(context)
        self._matches: list[TokenMatch] = []
        self._argument_hints: list[tuple[ArgKind, Hint]] = []

    # --- Read-only views ---

    def __len__(self) -> int:
        return len(self._chars)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def get_range(self, start: int, stop: int) -> str:
        return "".join(self._chars[start:stop])

    @property
    def splits(self) -> list[int]:
        return list(self._split_locs)

    @property
    def quotes(self) -> list[int]:
        return list(self._quote_locs)

    @property
    def argument_hints(self) -> list[tuple[ArgKind, Hint]]:
        return list(self._argument_hints)

    @property
    def matches(self) -> list[TokenMatch]:
        return list(self._matches)

    @property
    def grammar(self) -> CommandGrammar | None:
        return self._classifier.grammar

    @property
    def current_arg(self) -> int:
        return self._current_arg

    def num_args(self) -> int:
        return len(self._split_locs) // 2

    def arg_locs(self, arg_i: int) -> tuple[int, int]:
        return self._split_locs[arg_i * 2], self._split_locs[arg_i * 2 + 1]

    def arg_locs_iter(self) -> Iterator[tuple[int, int]]:
        for k in range(self.num_args()):
            yield self.arg_locs(k)

    def tokens(self) -> list[str]:
        return [self.get_range(start, stop) for start, stop in self.arg_locs_iter()]

    def first_arg(self) -> str | None:
        if self.num_args() == 0:
            return None
        return self.get_range(*self.arg_locs(0))

    def invocation(self) -> Invocation:
        """The line as the execution layer should run it, aliases substituted."""
        return build_invocation(self.tokens(), self._matches, self.grammar)

    def cursor_range(self) -> tuple[int, int]:
        """The selection as an ordered pair; zero-width at the caret if none."""
        main = self.main_cursor.position
        if not self.secondary_cursor.active:
            return main, main
        secondary = self.secondary_cursor.position
        return (secondary, main) if secondary < main else (main, secondary)

    # --- Completion acceptance ---

    def current_argument(self) -> tuple[str, Hint]:
        """Text and hint of the argument under the caret.

        An index past the end (it can drift after deletes) is clamped to
        the last argument.
        """
        n = min(len(self._argument_hints), self.num_args())
        if n == 0:
            return "", make_executables_hint(self._context.executables, "")
        i = min(self._current_arg, n - 1)
        return self.get_range(*self.arg_locs(i)), self._argument_hints[i][1]

    def set_closest_match(self, arg_i: int, value: str | None) -> None:
        if not 0 <= arg_i < len(self._argument_hints):
            logger.debug("Ignoring closest match for missing argument %d", arg_i)
            return
        self._argument_hints[arg_i][1].last_closest_match = value

    # --- Cursors ---

    def set_main_position(self, position: int) -> None:
        self.main_cursor.position = max(0, min(position, len(self._chars)))

    def set_secondary_position(self, position: int) -> None:
        self.secondary_cursor.position = max(0, min(position, len(self._chars)))
        self.secondary_cursor.active = True

    def unset_secondary_cursor(self) -> None:
        self.secondary_cursor.active = False

    def closest_split(self, position: int) -> tuple[int, Side]:
        """Index of the split location nearest to ``position``.

        The side says where that split lies relative to ``position``;
        ``"neither"`` means ``position`` sits exactly on it. Ties go right.
        """
        splits = self._split_locs
        if not splits:
            return 0, "neither"

        for i, split in enumerate(splits):
            if split == position:
                return i, "neither"
            if split > position:
                break
        else:
            return len(splits) - 1, "left"

        if i == 0:
            return 0, "right"
        if split - position <= position - splits[i - 1]:
            return i, "right"
        return i - 1, "left"

    def _require_active(self, cursor: Cursor, side: Side) -> None:
        if not cursor.active:
            raise RuntimeError("Cursor is not active")
        if side == "neither":
            raise ValueError("Side must be 'left' or 'right'")

    def jump(self, side: Side, cursor: Cursor) -> int:
        """Position of the next split in direction ``side``.

        A cursor already on a split moves on to the one after it, so
        repeated jumps keep advancing. Clamps to 0 and to the length.
        """
        self._require_active(cursor, side)
        splits = self._split_locs
        pos = cursor.position
        if not splits:
            return 0 if side == "left" else len(self._chars)

        i, nearest = self.closest_split(pos)
        if nearest == side:
            return splits[i]

        # Walk past splits at the cursor; empty arguments repeat a location.
        if side == "left":
            while i >= 0 and splits[i] >= pos:
                i -= 1
            return splits[i] if i >= 0 else 0
        while i < len(splits) and splits[i] <= pos:
            i += 1
        return splits[i] if i < len(splits) else len(self._chars)

    def move_n(self, side: Side, n: int, cursor: Cursor) -> int:
        self._require_active(cursor, side)
        if side == "left":
            return max(0, cursor.position - n)
        return min(len(self._chars), cursor.position + n)

    # --- Editing ---

    def insert_char(self, c: str) -> None:
        if len(self._chars) >= self.capacity:
            logger.debug("Buffer full, dropping %r", c)
            return
        pos = self.main_cursor.position
        self._chars[pos:pos] = [c]
        self.main_cursor.position += 1

    def insert_str(self, s: str) -> None:
        """Insert ``s`` at the caret, or nothing at all if it would not fit."""
        if len(self._chars) + len(s) > self.capacity:
            logger.debug("Buffer full, dropping %d characters", len(s))
            return
        pos = self.main_cursor.position
        self._chars[pos:pos] = list(s)
        self.main_cursor.position += len(s)

    def delete_between_cursors(self) -> None:
        """Delete the selection and collapse both cursors to its start.

        Every delete goes through here: callers first place the secondary
        cursor (via :meth:`jump` or :meth:`move_n`) and then call this.
        """
        start, stop = self.cursor_range()
        del self._chars[start:stop]
        self.main_cursor.position = start
        self.secondary_cursor.active = False

    def clear_all(self) -> None:
        self._chars.clear()
        self.main_cursor = Cursor(0, True)
        self.secondary_cursor = Cursor(0, False)
        self._split_locs.clear()
        self._quote_locs.clear()
        self._current_arg = 0
        self._matches = []
        self._argument_hints.clear()
        self._classifier.grammar = None

    # --- Tokenizing ---

    def update(self) -> None:
        """Recompute argument spans, then classifications and hints."""
        self._tokenize()
        tokens = self.tokens()
        self._matches = self._classifier.classify(tokens)
        self._classifier.refresh_hints(self._argument_hints, tokens, self._matches)

    def _tokenize(self) -> None:
        self._split_locs.clear()
        self._quote_locs.clear()

        caret = self.main_cursor.position
        current_arg = 0
        in_quote = False
        last_split = 0
        for i, c in enumerate(self._chars):
            if c == '"':
                in_quote = not in_quote
                self._quote_locs.append(i)
            elif c == " " and not in_quote:
                self._split_locs.append(last_split)
                self._split_locs.append(i)
                if i < caret:
                    current_arg += 1
                last_split = i + 1

        # A trailing space leaves an empty argument open at the end.
        if self._chars:
            self._split_locs.append(last_split)
            self._split_locs.append(len(self._chars))
        self._current_arg = current_arg
