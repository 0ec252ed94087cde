"""AST node types built by the pattern engine."""

from __future__ import annotations

from dataclasses import dataclass

from hydrogen.tokens import Token


@dataclass(frozen=True, slots=True)
class RawToken:
    """Unresolved leaf carrying a matched token up to the parent rule's builder."""

    token: Token

    @property
    def text(self) -> str:
        return self.token.text


@dataclass(frozen=True, slots=True)
class Number:
    """Numeric literal, kept as source text."""

    text: str


@dataclass(frozen=True, slots=True)
class Identifier:
    name: str


@dataclass(frozen=True, slots=True)
class String:
    """String literal including its quotes, escapes unresolved."""

    text: str


@dataclass(frozen=True, slots=True)
class Declaration:
    """``let name = value;``"""

    name: str
    value: Expression


@dataclass(frozen=True, slots=True)
class Exit:
    """``exit(value);``"""

    value: Expression


@dataclass(frozen=True, slots=True)
class Block:
    """Braced statement list."""

    statements: tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class Program:
    """Root node."""

    statements: tuple[Statement, ...]


Expression = Number | Identifier | String
Statement = Declaration | Exit | Block
Node = RawToken | Expression | Statement | Program
