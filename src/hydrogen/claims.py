"""Claim strategies that recognize a prefix of the remaining input as one token.

A strategy is called with a ``LookaheadCursor`` and returns the matched text
or ``None``. Strategies only peek; the tokenizer commits ``len(text)``
characters after a strategy wins, so a failed claim never moves the cursor.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

from hydrogen.cursor import LookaheadCursor


class Claim(Protocol):
    def __call__(self, cursor: LookaheadCursor) -> str | None: ...


@dataclass(frozen=True, slots=True)
class Exact:
    """Match a fixed literal character for character."""

    literal: str

    def __call__(self, cursor: LookaheadCursor) -> str | None:
        if self.literal and cursor.lookahead(len(self.literal)) == self.literal:
            return self.literal
        return None


@dataclass(frozen=True, slots=True)
class Keyword:
    """Match a word that is not immediately followed by a letter.

    ``if(`` claims ``if``; ``ifx`` does not, leaving it to the identifier kind.
    """

    word: str

    @property
    def literal(self) -> str:
        return self.word

    def __call__(self, cursor: LookaheadCursor) -> str | None:
        if Exact(self.word)(cursor) is None:
            return None
        boundary = cursor.peek(len(self.word))
        if boundary is not None and boundary.isalpha():
            return None
        return self.word


@dataclass(frozen=True, slots=True)
class Span:
    """Maximal munch over an anchored regex.

    The candidate grows one character at a time while the whole candidate
    still matches; the first character that breaks the match ends it.
    """

    pattern: str | re.Pattern[str]
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(self.pattern))

    def __call__(self, cursor: LookaheadCursor) -> str | None:
        chars: list[str] = []
        size = 0
        while True:
            ch = cursor.peek_next()
            if ch is None:
                break
            chars.append(ch)
            if self._regex.fullmatch("".join(chars)) is None:
                break
            size += 1

        if size == 0:
            return None
        return "".join(chars[:size])


@dataclass(frozen=True, slots=True)
class Quoted:
    """Match a delimited string literal, quotes included.

    The escape character sets an ``escaped`` flag that any other character
    clears; the first unescaped closing quote ends the literal. Input that
    runs out before the closing quote is not a match.
    """

    quote: str = '"'
    escape: str = "\\"

    def __call__(self, cursor: LookaheadCursor) -> str | None:
        if cursor.peek_next() != self.quote:
            return None

        chars = [self.quote]
        escaped = False
        while True:
            ch = cursor.peek_next()
            if ch is None:
                return None
            chars.append(ch)
            if ch == self.escape:
                escaped = True
            elif ch == self.quote and not escaped:
                return "".join(chars)
            else:
                escaped = False
