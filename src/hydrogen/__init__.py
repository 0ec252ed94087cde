"""Hydrogen: a generic tokenizer and pattern-combinator parsing engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hydrogen.ast import Program

__version__ = "0.1.0"


def parse(source: str) -> Program:
    """Tokenize and parse Hydrogen source text into a Program AST."""
    from hydrogen.parser import parse_source

    return parse_source(source)
