"""Tests for LineEditor actions."""

from __future__ import annotations

import pytest

from hintline.editor import LineEditor


@pytest.fixture
def editor(make_buffer):
    def _make(text: str = "") -> LineEditor:
        return LineEditor(make_buffer(text))

    return _make


class TestTyping:
    """insert_text and clear."""

    def test_insert_text_updates(self, editor) -> None:
        ed = editor()
        ed.insert_text("mv ")
        assert ed.buffer.text == "mv "
        assert ed.buffer.grammar is not None
        assert ed.buffer.num_args() == 2

    def test_insert_replaces_selection(self, editor) -> None:
        ed = editor("abc def")
        ed.select_word_left()
        assert ed.buffer.cursor_range() == (4, 7)
        ed.insert_text("xyz")
        assert ed.buffer.text == "abc xyz"
        assert ed.buffer.secondary_cursor.active is False

    def test_insert_empty_text(self, editor) -> None:
        ed = editor("abc")
        ed.insert_text("")
        assert ed.buffer.text == "abc"

    def test_clear(self, editor) -> None:
        ed = editor("mv a b")
        ed.clear()
        assert ed.buffer.text == ""
        assert ed.buffer.argument_hints == []


class TestDeleting:
    """Deletes go through the secondary cursor."""

    def test_backspace(self, editor) -> None:
        ed = editor("abc")
        ed.backspace()
        assert ed.buffer.text == "ab"
        assert ed.buffer.main_cursor.position == 2

    def test_backspace_at_start(self, editor) -> None:
        ed = editor("abc")
        ed.line_start()
        ed.backspace()
        assert ed.buffer.text == "abc"

    def test_delete_forward(self, editor) -> None:
        ed = editor("abc")
        ed.line_start()
        ed.cursor_right()
        ed.delete_forward()
        assert ed.buffer.text == "ac"
        assert ed.buffer.main_cursor.position == 1

    def test_delete_word_backward(self, editor) -> None:
        ed = editor("abc def")
        ed.delete_word_backward()
        assert ed.buffer.text == "abc "
        ed.delete_word_backward()
        assert ed.buffer.text == "abc"
        ed.delete_word_backward()
        assert ed.buffer.text == ""

    def test_delete_word_forward(self, editor) -> None:
        ed = editor("abc def")
        ed.line_start()
        ed.delete_word_forward()
        assert ed.buffer.text == " def"
        assert ed.buffer.main_cursor.position == 0

    def test_backspace_with_selection_deletes_it(self, editor) -> None:
        ed = editor("abcdef")
        ed.select_left()
        ed.select_left()
        ed.backspace()
        assert ed.buffer.text == "abcd"

    def test_delete_selection(self, editor) -> None:
        ed = editor("abc")
        ed.select_left()
        ed.select_left()
        assert ed.buffer.cursor_range() == (1, 3)
        ed.delete_selection()
        assert ed.buffer.text == "a"
        ed.delete_selection()
        assert ed.buffer.text == "a"


class TestMoving:
    """Cursor movement and selection extension."""

    def test_word_moves(self, editor) -> None:
        ed = editor("abc def")
        ed.line_start()
        assert ed.buffer.main_cursor.position == 0
        ed.word_right()
        assert ed.buffer.main_cursor.position == 3
        ed.cursor_right()
        assert ed.buffer.main_cursor.position == 4
        ed.word_left()
        assert ed.buffer.main_cursor.position == 3
        ed.line_end()
        assert ed.buffer.main_cursor.position == 7

    def test_moving_clears_selection(self, editor) -> None:
        ed = editor("abc")
        ed.select_left()
        assert ed.buffer.secondary_cursor.active
        ed.cursor_left()
        assert not ed.buffer.secondary_cursor.active
        assert ed.buffer.main_cursor.position == 1

    def test_selection_keeps_anchor(self, editor) -> None:
        ed = editor("abc def")
        ed.line_start()
        ed.select_word_right()
        ed.select_right()
        assert ed.buffer.secondary_cursor.position == 0
        assert ed.buffer.cursor_range() == (0, 4)

    def test_moving_updates_current_arg(self, editor) -> None:
        ed = editor("abc def")
        assert ed.buffer.current_arg == 1
        ed.line_start()
        assert ed.buffer.current_arg == 0


class TestAcceptHint:
    """Completing the current argument."""

    def test_accept_path(self, editor) -> None:
        ed = editor("foo al")
        assert ed.accept_hint() is True
        assert ed.buffer.text == "foo alpha"
        assert ed.buffer.main_cursor.position == 9
        assert ed.accept_hint() is False

    def test_accept_inside_directory(self, editor) -> None:
        ed = editor("foo alpha/i")
        assert ed.accept_hint() is True
        assert ed.buffer.text == "foo alpha/inner.txt"

    def test_accept_inside_closed_quotes(self, editor) -> None:
        ed = editor('foo "alpha/in"')
        assert ed.accept_hint() is True
        assert ed.buffer.text == 'foo "alpha/inner.txt"'
        assert ed.accept_hint() is False

    def test_accept_executable(self, editor) -> None:
        ed = editor("c")
        assert ed.accept_hint() is True
        assert ed.buffer.text == "cat"

    def test_accept_in_middle_of_line(self, editor) -> None:
        ed = editor("foo al bar")
        ed.buffer.set_main_position(5)
        ed.buffer.update()
        assert ed.accept_hint() is True
        assert ed.buffer.text == "foo alpha bar"
        assert ed.buffer.main_cursor.position == 9

    def test_inlay_is_not_inserted(self, editor) -> None:
        ed = editor("mv ")
        assert ed.buffer.current_argument()[1].last_closest_match == "src"
        assert ed.accept_hint() is False
        assert ed.buffer.text == "mv "

    def test_no_match(self, editor) -> None:
        ed = editor("foo zz")
        assert ed.accept_hint() is False
        assert ed.buffer.text == "foo zz"

    def test_accept_candidate(self, editor) -> None:
        ed = editor("foo al")
        assert ed.accept_candidate("alps") is True
        assert ed.buffer.text == "foo alps"

    def test_accept_candidate_on_empty_line(self, editor) -> None:
        ed = editor()
        assert ed.accept_candidate("cat") is True
        assert ed.buffer.text == "cat"
