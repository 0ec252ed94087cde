"""Lookahead cursor over source text with speculative peeking and explicit commit."""

from __future__ import annotations

from hydrogen.errors import CursorError


class LookaheadCursor:
    """Random-access cursor with a committed position and a speculative one.

    Claim strategies peek ahead as far as they need; the tokenizer commits
    exactly the number of characters the winning strategy matched. A
    ``reset_peek()`` drops speculative progress, never committed input.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._peek_pos = 0

    @property
    def position(self) -> int:
        """Committed offset into the source."""
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._source) - self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._source)

    def peek(self, n: int = 0) -> str | None:
        """Return the n-th uncommitted character without moving anything."""
        idx = self._pos + n
        if 0 <= idx < len(self._source):
            return self._source[idx]
        return None

    def peek_next(self) -> str | None:
        """Return the character at the speculative position and step past it."""
        if self._peek_pos >= len(self._source):
            return None
        ch = self._source[self._peek_pos]
        self._peek_pos += 1
        return ch

    def reset_peek(self) -> None:
        self._peek_pos = self._pos

    def lookahead(self, n: int) -> str:
        """Return up to n uncommitted characters."""
        return self._source[self._pos : self._pos + n]

    def advance(self, n: int) -> str:
        """Commit n characters and return them."""
        if n < 0 or n > self.remaining:
            raise CursorError(
                f"cannot advance {n} characters at offset {self._pos} "
                f"({self.remaining} remaining)"
            )
        text = self._source[self._pos : self._pos + n]
        self._pos += n
        self._peek_pos = self._pos
        return text
