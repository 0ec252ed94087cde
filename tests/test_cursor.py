"""Test the lookahead cursor: peeking, speculative reset, and commit."""

import pytest

from hydrogen.cursor import LookaheadCursor
from hydrogen.errors import CursorError


class TestPeek:
    def test_peek_does_not_move(self):
        cur = LookaheadCursor("abc")
        assert cur.peek() == "a"
        assert cur.peek(2) == "c"
        assert cur.position == 0
        assert cur.peek_next() == "a"

    def test_peek_past_end_is_none(self):
        cur = LookaheadCursor("ab")
        assert cur.peek(2) is None

    def test_peek_on_empty(self):
        cur = LookaheadCursor("")
        assert cur.peek() is None
        assert cur.at_end

    def test_lookahead_clips_at_end(self):
        cur = LookaheadCursor("abc")
        assert cur.lookahead(2) == "ab"
        assert cur.lookahead(10) == "abc"


class TestSpeculation:
    def test_peek_next_steps_forward(self):
        cur = LookaheadCursor("abc")
        assert cur.peek_next() == "a"
        assert cur.peek_next() == "b"
        assert cur.peek_next() == "c"
        assert cur.position == 0

    def test_peek_next_at_end(self):
        cur = LookaheadCursor("a")
        assert cur.peek_next() == "a"
        assert cur.peek_next() is None

    def test_reset_peek(self):
        cur = LookaheadCursor("abc")
        cur.peek_next()
        cur.peek_next()
        cur.reset_peek()
        assert cur.peek_next() == "a"

    def test_reset_never_rewinds_committed(self):
        cur = LookaheadCursor("abc")
        cur.advance(1)
        cur.peek_next()
        cur.reset_peek()
        assert cur.position == 1
        assert cur.peek_next() == "b"


class TestAdvance:
    def test_advance_commits_exact_count(self):
        cur = LookaheadCursor("hello")
        assert cur.advance(3) == "hel"
        assert cur.position == 3
        assert cur.remaining == 2
        assert cur.peek() == "l"

    def test_advance_discards_speculation(self):
        cur = LookaheadCursor("abcd")
        cur.peek_next()
        cur.peek_next()
        cur.peek_next()
        cur.advance(1)
        assert cur.peek_next() == "b"

    def test_advance_to_end(self):
        cur = LookaheadCursor("ab")
        cur.advance(2)
        assert cur.at_end

    def test_advance_past_end_is_contract_violation(self):
        cur = LookaheadCursor("ab")
        with pytest.raises(CursorError):
            cur.advance(3)
        assert cur.position == 0

    def test_negative_advance_rejected(self):
        cur = LookaheadCursor("ab")
        with pytest.raises(CursorError):
            cur.advance(-1)
