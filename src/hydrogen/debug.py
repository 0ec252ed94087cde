"""Human-readable token and AST dumps for the CLI."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from hydrogen.ast import (
    Block,
    Declaration,
    Exit,
    Identifier,
    Node,
    Number,
    Program,
    RawToken,
    String,
)
from hydrogen.errors import LexError
from hydrogen.tokens import Token


def format_token(token: Token) -> str:
    return f"{token.line}:{token.column} {token.kind.name}({token.text!r})"


def dump_tokens(outcomes: Iterable[Token | LexError], *, file: TextIO = sys.stdout) -> None:
    """Print one line per token outcome, the error (if any) last."""
    for outcome in outcomes:
        if isinstance(outcome, LexError):
            pos = outcome.position
            file.write(f"{pos.line}:{pos.column} error: {outcome.message}\n")
        else:
            file.write(format_token(outcome) + "\n")


def dump_ast(program: Program, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable AST tree to *file*."""
    _dump(program, 0, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump(node: Node, depth: int, f: TextIO) -> None:
    if isinstance(node, Program):
        f.write(f"{_indent(depth)}Program\n")
        for stmt in node.statements:
            _dump(stmt, depth + 1, f)
    elif isinstance(node, Declaration):
        f.write(f"{_indent(depth)}Declaration {node.name}\n")
        _dump(node.value, depth + 1, f)
    elif isinstance(node, Exit):
        f.write(f"{_indent(depth)}Exit\n")
        _dump(node.value, depth + 1, f)
    elif isinstance(node, Block):
        f.write(f"{_indent(depth)}Block\n")
        for stmt in node.statements:
            _dump(stmt, depth + 1, f)
    elif isinstance(node, Number):
        f.write(f"{_indent(depth)}Number({node.text})\n")
    elif isinstance(node, Identifier):
        f.write(f"{_indent(depth)}Identifier({node.name})\n")
    elif isinstance(node, String):
        f.write(f"{_indent(depth)}String({node.text})\n")
    elif isinstance(node, RawToken):
        f.write(f"{_indent(depth)}RawToken({node.text!r})\n")
