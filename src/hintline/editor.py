"""Line editor - named editing actions on top of an InputBuffer.

The key decoder maps key presses to these methods. Each action leaves the
buffer updated, so spans, classifications and hints are current when the
renderer reads them.
"""

from __future__ import annotations

from hintline.buffer import InputBuffer, Side


class LineEditor:
    """Single-line command editor.

    Deletes set up a selection with the secondary cursor and then call
    :meth:`InputBuffer.delete_between_cursors`. Selections extend from
    the secondary cursor (the anchor) to the main cursor.
    """

    def __init__(self, buffer: InputBuffer) -> None:
        self.buffer = buffer

    # --- Typing ---

    def insert_text(self, text: str) -> None:
        if not text:
            return
        buf = self.buffer
        if buf.secondary_cursor.active:
            buf.delete_between_cursors()
        if len(text) == 1:
            buf.insert_char(text)
        else:
            buf.insert_str(text)
        buf.update()

    def clear(self) -> None:
        self.buffer.clear_all()
        self.buffer.update()

    # --- Deleting ---

    def _delete_towards(self, side: Side, by_word: bool) -> None:
        buf = self.buffer
        if not buf.secondary_cursor.active:
            if by_word:
                target = buf.jump(side, buf.main_cursor)
            else:
                target = buf.move_n(side, 1, buf.main_cursor)
            buf.set_secondary_position(target)
        buf.delete_between_cursors()
        buf.update()

    def backspace(self) -> None:
        self._delete_towards("left", by_word=False)

    def delete_forward(self) -> None:
        self._delete_towards("right", by_word=False)

    def delete_word_backward(self) -> None:
        self._delete_towards("left", by_word=True)

    def delete_word_forward(self) -> None:
        self._delete_towards("right", by_word=True)

    def delete_selection(self) -> None:
        if self.buffer.secondary_cursor.active:
            self.buffer.delete_between_cursors()
            self.buffer.update()

    # --- Moving ---

    def _move(self, position: int, *, select: bool) -> None:
        buf = self.buffer
        if select:
            if not buf.secondary_cursor.active:
                buf.set_secondary_position(buf.main_cursor.position)
        else:
            buf.unset_secondary_cursor()
        buf.set_main_position(position)
        buf.update()

    def cursor_left(self) -> None:
        self._move(self.buffer.move_n("left", 1, self.buffer.main_cursor), select=False)

    def cursor_right(self) -> None:
        self._move(self.buffer.move_n("right", 1, self.buffer.main_cursor), select=False)

    def word_left(self) -> None:
        self._move(self.buffer.jump("left", self.buffer.main_cursor), select=False)

    def word_right(self) -> None:
        self._move(self.buffer.jump("right", self.buffer.main_cursor), select=False)

    def line_start(self) -> None:
        self._move(0, select=False)

    def line_end(self) -> None:
        self._move(len(self.buffer), select=False)

    def select_left(self) -> None:
        self._move(self.buffer.move_n("left", 1, self.buffer.main_cursor), select=True)

    def select_right(self) -> None:
        self._move(self.buffer.move_n("right", 1, self.buffer.main_cursor), select=True)

    def select_word_left(self) -> None:
        self._move(self.buffer.jump("left", self.buffer.main_cursor), select=True)

    def select_word_right(self) -> None:
        self._move(self.buffer.jump("right", self.buffer.main_cursor), select=True)

    # --- Completion ---

    def _current_index(self) -> int | None:
        n = self.buffer.num_args()
        if n == 0:
            return None
        return min(self.buffer.current_arg, n - 1)

    def accept_hint(self) -> bool:
        """Complete the current argument with its closest match.

        Returns False when there is nothing to insert: no match, a match
        that is only the inlay placeholder, or an already complete word.
        """
        buf = self.buffer
        text, hint = buf.current_argument()
        match = hint.last_closest_match
        if not match:
            return False

        partial = text[hint.disregard :]
        # A closing quote stays after the completed name.
        closing = 1 if partial.endswith('"') else 0
        partial = partial[: len(partial) - closing]
        if not partial and match == hint.inlay:
            return False
        if not match.startswith(partial) or len(match) == len(partial):
            return False

        i = self._current_index()
        stop = buf.arg_locs(i)[1] - closing if i is not None else 0
        buf.unset_secondary_cursor()
        buf.set_main_position(stop)
        buf.insert_str(match[len(partial) :])
        buf.update()
        return True

    def accept_candidate(self, value: str) -> bool:
        """Complete the current argument with a candidate picked from a list."""
        i = self._current_index()
        if i is None:
            self.insert_text(value)
            return True
        self.buffer.set_closest_match(i, value)
        return self.accept_hint()
