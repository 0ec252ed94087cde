"""Pattern combinator engine, interpreting grammar patterns against a token sequence."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum

from hydrogen.ast import RawToken
from hydrogen.grammar import Fragment, GrammarTable
from hydrogen.patterns import Many, OneOf, Opt, Pattern, Rule, Seq, Tok
from hydrogen.tokens import Token

logger = logging.getLogger(__name__)


class TokenCursor:
    """Checkpointable cursor over a lazily pulled token sequence.

    Tokens are pulled from the underlying iterator only when first looked
    at, and kept so that ``reset()`` can return to any earlier mark.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._source: Iterator[Token] = iter(tokens)
        self._buffer: list[Token] = []
        self._exhausted = False
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self.peek() is None

    def token_at(self, index: int) -> Token | None:
        while not self._exhausted and len(self._buffer) <= index:
            try:
                self._buffer.append(next(self._source))
            except StopIteration:
                self._exhausted = True
        if index < len(self._buffer):
            return self._buffer[index]
        return None

    def last(self) -> Token | None:
        """Last token pulled so far."""
        return self._buffer[-1] if self._buffer else None

    def peek(self) -> Token | None:
        return self.token_at(self._pos)

    def advance(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise IndexError("advance past end of token sequence")
        self._pos += 1
        return tok

    def mark(self) -> int:
        return self._pos

    def reset(self, mark: int) -> None:
        self._pos = mark


class PatternEngine:
    """Match patterns against tokens, building AST nodes through the grammar.

    Every failed attempt restores the token cursor to where the attempt
    started, so alternatives always see the same input. The engine also
    records the furthest token it failed to match and which kinds it
    expected there.
    """

    def __init__(self, tokens: Iterable[Token], grammar: GrammarTable) -> None:
        self._cursor = TokenCursor(tokens)
        self._grammar = grammar
        self._active: set[tuple[Enum, int]] = set()
        self.furthest = 0
        self.expected: set[Enum] = set()

    @property
    def cursor(self) -> TokenCursor:
        return self._cursor

    @property
    def at_end(self) -> bool:
        return self._cursor.at_end

    def match(self, pattern: Pattern) -> Fragment | None:
        if isinstance(pattern, Tok):
            return self._match_tok(pattern)
        if isinstance(pattern, Rule):
            return self._match_rule(pattern)
        if isinstance(pattern, Seq):
            return self._match_seq(pattern)
        if isinstance(pattern, OneOf):
            return self._match_one_of(pattern)
        if isinstance(pattern, Opt):
            return self._match_opt(pattern)
        if isinstance(pattern, Many):
            return self._match_many(pattern)
        raise TypeError(f"not a pattern: {pattern!r}")

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def _match_tok(self, pattern: Tok) -> Fragment | None:
        tok = self._cursor.peek()
        if tok is not None and tok.kind == pattern.kind:
            self._cursor.advance()
            return (RawToken(tok),)
        self._expect({pattern.kind})
        return None

    def _match_rule(self, pattern: Rule) -> Fragment | None:
        key = (pattern.kind, self._cursor.position)
        if key in self._active:
            logger.debug("left recursion into %s at token %d", pattern.kind.name, key[1])
            return None
        if pattern.kind not in self._grammar:
            logger.debug("no rule bound to %r", pattern.kind)
            return None

        rule = self._grammar[pattern.kind]
        self._active.add(key)
        try:
            fragment = self.match(rule.pattern)
        finally:
            self._active.discard(key)

        if fragment is None:
            logger.debug("%s failed at token %d", pattern.kind.name, key[1])
            return None
        return (rule.build(fragment),)

    def _match_seq(self, pattern: Seq) -> Fragment | None:
        mark = self._cursor.mark()
        parts: list = []
        for element in pattern.patterns:
            result = self.match(element)
            if result is None:
                self._cursor.reset(mark)
                return None
            parts.extend(result)
        return tuple(parts)

    def _match_one_of(self, pattern: OneOf) -> Fragment | None:
        tok = self._cursor.peek()
        for alternative in pattern.patterns:
            if tok is not None and not self._grammar.can_start(alternative, tok.kind):
                kinds, _ = self._grammar.first(alternative)
                self._expect(kinds)
                continue
            mark = self._cursor.mark()
            result = self.match(alternative)
            if result is not None:
                return result
            self._cursor.reset(mark)
        return None

    def _match_opt(self, pattern: Opt) -> Fragment:
        mark = self._cursor.mark()
        result = self.match(pattern.pattern)
        if result is None:
            self._cursor.reset(mark)
            return ()
        return result

    def _match_many(self, pattern: Many) -> Fragment:
        parts: list = []
        while True:
            mark = self._cursor.mark()
            result = self.match(pattern.pattern)
            if result is None:
                self._cursor.reset(mark)
                break
            parts.extend(result)
            if self._cursor.position == mark:
                # Matched without consuming anything; repeating would loop.
                break
        return tuple(parts)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def _expect(self, kinds: Iterable[Enum]) -> None:
        pos = self._cursor.position
        if pos > self.furthest:
            self.furthest = pos
            self.expected = set(kinds)
        elif pos == self.furthest:
            self.expected.update(kinds)
