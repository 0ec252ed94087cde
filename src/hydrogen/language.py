"""Hydrogen language binding: token kinds in priority order, and the grammar."""

from __future__ import annotations

from enum import Enum, auto

from hydrogen import ast
from hydrogen.ast import RawToken
from hydrogen.claims import Exact, Keyword, Quoted, Span
from hydrogen.grammar import Fragment, GrammarRule, GrammarTable
from hydrogen.patterns import Many, OneOf, Rule, Seq, Tok
from hydrogen.registry import TokenRegistry


class TokenKind(Enum):
    # Symbols
    SemiColon = auto()
    Equals = auto()
    GreaterThan = auto()
    LessThan = auto()
    ParenthesisOpen = auto()
    ParenthesisClose = auto()
    BracesOpen = auto()
    BracesClose = auto()
    BracketsOpen = auto()
    BracketsClose = auto()

    # Keywords
    If = auto()
    Else = auto()
    Not = auto()
    Let = auto()
    Exit = auto()

    # Literals
    Identifier = auto()
    NumberLiteral = auto()
    StringLiteral = auto()
    WhiteSpace = auto()

    Unknown = auto()  # never claimed


IDENTIFIER_PATTERN = r"[_a-zA-Z][_a-zA-Z\d]*"
NUMBER_PATTERN = r"[\d_.,]+"
WHITE_SPACE_PATTERN = r"\s+"

# Priority order: symbols, then keywords, then the variable-length kinds.
# Keywords must come before Identifier or they would never match.
REGISTRY = TokenRegistry(
    TokenKind,
    [
        (TokenKind.SemiColon, Exact(";")),
        (TokenKind.Equals, Exact("=")),
        (TokenKind.GreaterThan, Exact(">")),
        (TokenKind.LessThan, Exact("<")),
        (TokenKind.ParenthesisOpen, Exact("(")),
        (TokenKind.ParenthesisClose, Exact(")")),
        (TokenKind.BracesOpen, Exact("{")),
        (TokenKind.BracesClose, Exact("}")),
        (TokenKind.BracketsOpen, Exact("[")),
        (TokenKind.BracketsClose, Exact("]")),
        (TokenKind.If, Keyword("if")),
        (TokenKind.Else, Keyword("else")),
        (TokenKind.Not, Keyword("not")),
        (TokenKind.Let, Keyword("let")),
        (TokenKind.Exit, Keyword("exit")),
        (TokenKind.Identifier, Span(IDENTIFIER_PATTERN)),
        (TokenKind.NumberLiteral, Span(NUMBER_PATTERN)),
        (TokenKind.StringLiteral, Quoted('"', "\\")),
        (TokenKind.WhiteSpace, Span(WHITE_SPACE_PATTERN)),
    ],
    unclaimed=[TokenKind.Unknown],
    trivia=[TokenKind.WhiteSpace],
)


class NodeKind(Enum):
    Program = auto()
    Statement = auto()
    Declaration = auto()
    Exit = auto()
    Block = auto()
    Expression = auto()
    Number = auto()
    Identifier = auto()
    String = auto()
    BinaryExpression = auto()


def _text(fragment: Fragment) -> str:
    (leaf,) = fragment
    assert isinstance(leaf, RawToken)
    return leaf.text


def _statements(fragment: Fragment) -> tuple[ast.Statement, ...]:
    return tuple(n for n in fragment if not isinstance(n, RawToken))


def _declaration(fragment: Fragment) -> ast.Declaration:
    _let, name, _eq, value, _semi = fragment
    assert isinstance(name, RawToken)
    return ast.Declaration(name.text, value)


def _exit(fragment: Fragment) -> ast.Exit:
    _exit_kw, _open, value, _close, _semi = fragment
    return ast.Exit(value)


T = TokenKind
N = NodeKind

GRAMMAR = GrammarTable(
    NodeKind,
    {
        N.Program: GrammarRule(
            Many(Rule(N.Statement)),
            lambda fragment: ast.Program(tuple(fragment)),
        ),
        N.Statement: GrammarRule(OneOf(Rule(N.Declaration), Rule(N.Exit), Rule(N.Block))),
        N.Declaration: GrammarRule(
            Seq(Tok(T.Let), Tok(T.Identifier), Tok(T.Equals), Rule(N.Expression), Tok(T.SemiColon)),
            _declaration,
        ),
        N.Exit: GrammarRule(
            Seq(
                Tok(T.Exit),
                Tok(T.ParenthesisOpen),
                Rule(N.Expression),
                Tok(T.ParenthesisClose),
                Tok(T.SemiColon),
            ),
            _exit,
        ),
        N.Block: GrammarRule(
            Seq(Tok(T.BracesOpen), Many(Rule(N.Statement)), Tok(T.BracesClose)),
            lambda fragment: ast.Block(_statements(fragment)),
        ),
        N.Expression: GrammarRule(OneOf(Rule(N.Number), Rule(N.Identifier), Rule(N.String))),
        N.Number: GrammarRule(Tok(T.NumberLiteral), lambda f: ast.Number(_text(f))),
        N.Identifier: GrammarRule(Tok(T.Identifier), lambda f: ast.Identifier(_text(f))),
        N.String: GrammarRule(Tok(T.StringLiteral), lambda f: ast.String(_text(f))),
        N.BinaryExpression: GrammarRule(OneOf()),
    },
    start=N.Program,
)
