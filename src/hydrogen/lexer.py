"""Tokenizer: pulls characters through a lookahead cursor into classified tokens."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum, auto

from hydrogen.cursor import LookaheadCursor
from hydrogen.errors import LexError
from hydrogen.registry import TokenRegistry
from hydrogen.tokens import Position, Token, advance_position

logger = logging.getLogger(__name__)


class _State(Enum):
    SCANNING = auto()
    DONE = auto()
    FAULTED = auto()


class Tokenizer:
    """Lazy iterator of tokens for *source* under *registry*.

    Each step tries the registry's kinds in order and takes the first one
    that claims the current position. When nothing claims it, ``__next__``
    raises ``LexError`` once; the tokenizer is then faulted and yields
    nothing further.
    """

    def __init__(self, source: str, registry: TokenRegistry) -> None:
        self._source = source
        self._registry = registry
        self._cursor = LookaheadCursor(source)
        self._pos = Position(1, 1, 0)
        self._state = _State.SCANNING

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._state is not _State.SCANNING:
            raise StopIteration

        if self._cursor.at_end:
            self._state = _State.DONE
            raise StopIteration

        for kind, claim in self._registry:
            self._cursor.reset_peek()
            text = claim(self._cursor)
            if text:
                return self._emit(kind, text)

        self._state = _State.FAULTED
        raise self._error()

    @property
    def faulted(self) -> bool:
        return self._state is _State.FAULTED

    def _emit(self, kind: Enum, text: str) -> Token:
        start = self._pos
        self._cursor.advance(len(text))
        self._pos = advance_position(start, text)
        return Token(kind, text, start.offset, start.line, start.column)

    def _error(self) -> LexError:
        ch = self._cursor.peek()
        logger.debug("no token kind claims %r at byte offset %d", ch, self._pos.offset)
        return LexError(f"no token kind matches {ch!r}", self._pos, self._source)


def tokenize(source: str, registry: TokenRegistry) -> list[Token]:
    """Convenience function: tokenize source text and return the token list."""
    return list(Tokenizer(source, registry))


def iter_outcomes(source: str, registry: TokenRegistry) -> Iterator[Token | LexError]:
    """Yield every token, then the lexical error (if any) as a value.

    Nothing is yielded after an error, even when valid text follows it.
    """
    tokenizer = Tokenizer(source, registry)
    while True:
        try:
            yield next(tokenizer)
        except StopIteration:
            return
        except LexError as exc:
            yield exc
            return
