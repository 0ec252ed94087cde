"""Parsing entry points: token sequence in, Program AST out."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from hydrogen.ast import Program
from hydrogen.engine import PatternEngine
from hydrogen.errors import ParseError
from hydrogen.grammar import GrammarTable
from hydrogen.lexer import Tokenizer
from hydrogen.patterns import Rule
from hydrogen.registry import TokenRegistry
from hydrogen.tokens import Position, Token, advance_position

logger = logging.getLogger(__name__)


def parse(tokens: Iterable[Token], grammar: GrammarTable | None = None) -> Program | None:
    """Parse trivia-free *tokens* with *grammar*; ``None`` if they are not a program.

    Tokens left over after the start rule stops matching make the whole
    parse fail.
    """
    if grammar is None:
        _, grammar = _hydrogen()
    program, _ = _run(tokens, grammar)
    return program


def parse_source(
    source: str,
    registry: TokenRegistry | None = None,
    grammar: GrammarTable | None = None,
) -> Program:
    """Tokenize, drop trivia, and parse *source*.

    Raises ``LexError`` for the first unclaimable character and
    ``ParseError`` pointing at the furthest token the grammar rejected.
    """
    default_registry, default_grammar = _hydrogen()
    if registry is None:
        registry = default_registry
    if grammar is None:
        grammar = default_grammar
    tokens = registry.significant(Tokenizer(source, registry))
    program, engine = _run(tokens, grammar)
    if program is not None:
        return program
    raise _parse_error(engine, source)


def _hydrogen() -> tuple[TokenRegistry, GrammarTable]:
    """The Hydrogen binding, used when no registry or grammar is given."""
    from hydrogen.language import GRAMMAR, REGISTRY

    return REGISTRY, GRAMMAR


def _run(tokens: Iterable[Token], grammar: GrammarTable) -> tuple[Program | None, PatternEngine]:
    engine = PatternEngine(tokens, grammar)
    fragment = engine.match(Rule(grammar.start))
    if fragment is None:
        return None, engine
    if not engine.at_end:
        leftover = engine.cursor.peek()
        assert leftover is not None
        logger.debug("parse stopped before %s at offset %d", leftover.kind.name, leftover.start)
        return None, engine
    (program,) = fragment
    return program, engine


def _parse_error(engine: PatternEngine, source: str) -> ParseError:
    expected = ", ".join(sorted(kind.name for kind in engine.expected))
    tok = engine.cursor.token_at(engine.furthest)

    if tok is None:
        last = engine.cursor.last()
        if last is None:
            position = Position(1, 1, 0)
        else:
            position = advance_position(last.position, last.text)
        message = "unexpected end of input"
        width = 1
    else:
        position = tok.position
        message = f"unexpected {tok.kind.name} {tok.text!r}"
        width = len(tok.text)

    if expected:
        message += f", expected {expected}"
    return ParseError(message, position, source, width)
