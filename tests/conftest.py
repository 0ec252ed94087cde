"""Shared test fixtures and helpers."""

from __future__ import annotations

from enum import Enum

import pytest

from hydrogen.ast import Program
from hydrogen.language import REGISTRY, TokenKind
from hydrogen.lexer import tokenize
from hydrogen.parser import parse_source
from hydrogen.tokens import Token


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and drops whitespace tokens."""

    def _lex(source: str, keep_whitespace: bool = False) -> list[Token]:
        tokens = tokenize(source, REGISTRY)
        if keep_whitespace:
            return tokens
        return list(REGISTRY.significant(tokens))

    return _lex


@pytest.fixture
def parse_program():
    """Return a helper that parses source and returns a Program."""

    def _parse(source: str) -> Program:
        return parse_source(source)

    return _parse


def assert_kinds(tokens: list[Token], expected: list[Enum]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def make_tokens(*pairs: tuple[TokenKind, str]) -> list[Token]:
    """Build a token list by hand, offsets laid out with single spaces between."""
    tokens = []
    offset = 0
    for kind, text in pairs:
        tokens.append(Token(kind, text, offset, 1, offset + 1))
        offset += len(text) + 1
    return tokens
