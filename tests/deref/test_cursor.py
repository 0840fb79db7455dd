"""
Tests for the backtracking text cursor.
"""

import pytest

from tplexpr.deref.cursor import TextCursor


class TestTextCursor:

    def setup_method(self):
        self.cursor = TextCursor("ab c")

    def test_navigation(self):
        assert self.cursor.current() == "a"
        assert self.cursor.peek() == "b"
        assert self.cursor.advance() == "a"
        assert self.cursor.current() == "b"

    def test_end_of_text(self):
        """Test reads past the end return an empty string"""
        cursor = TextCursor("x", position=1)

        assert cursor.is_at_end()
        assert cursor.current() == ""
        assert cursor.advance() == ""
        assert cursor.position == 1

    def test_match_and_take_while(self):
        assert not self.cursor.match("b")
        assert self.cursor.match("a")
        assert self.cursor.take_while(str.isalpha) == "b"
        assert self.cursor.remaining() == " c"

    def test_match_empty_string_never_matches(self):
        cursor = TextCursor("")

        assert not cursor.match("")

    def test_save_restore(self):
        """Test restore returns to the saved position"""
        self.cursor.save_position()
        self.cursor.advance()
        self.cursor.advance()
        self.cursor.restore_position()

        assert self.cursor.position == 0

    def test_discard_keeps_position(self):
        self.cursor.save_position()
        self.cursor.advance()
        self.cursor.discard_saved_position()
        self.cursor.restore_position()

        assert self.cursor.position == 1

    def test_invalid_start_position(self):
        with pytest.raises(IndexError):
            TextCursor("abc", position=5)
