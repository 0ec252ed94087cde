"""Test parsing Hydrogen statements into AST nodes."""

from hydrogen.ast import Block, Declaration, Exit, Identifier, Number, Program, String
from hydrogen.language import GRAMMAR, REGISTRY
from hydrogen.language import TokenKind as T
from hydrogen.lexer import Tokenizer, tokenize
from hydrogen.parser import parse

from .conftest import make_tokens


def significant(source: str):
    return list(REGISTRY.significant(tokenize(source, REGISTRY)))


class TestDeclaration:
    def test_number_value(self, parse_program):
        program = parse_program("let x = 69;")
        assert program == Program((Declaration("x", Number("69")),))

    def test_identifier_value(self, parse_program):
        program = parse_program("let y = x;")
        assert program.statements[0] == Declaration("y", Identifier("x"))

    def test_string_value(self, parse_program):
        program = parse_program('let s = "hi \\"there\\"";')
        assert program.statements[0] == Declaration("s", String('"hi \\"there\\""'))

    def test_from_token_list(self):
        program = parse(significant("let x = 69;"), GRAMMAR)
        assert program == Program((Declaration("x", Number("69")),))

    def test_missing_semicolon_fails(self):
        tokens = significant("let x = 69;")[:-1]
        assert parse(tokens, GRAMMAR) is None

    def test_missing_value_fails(self):
        assert parse(significant("let x = ;"), GRAMMAR) is None

    def test_hand_built_tokens(self):
        tokens = make_tokens(
            (T.Let, "let"),
            (T.Identifier, "x"),
            (T.Equals, "="),
            (T.NumberLiteral, "69"),
            (T.SemiColon, ";"),
        )
        assert parse(tokens) == Program((Declaration("x", Number("69")),))


class TestExit:
    def test_exit_identifier(self, parse_program):
        program = parse_program("exit(x);")
        assert program.statements == (Exit(Identifier("x")),)

    def test_declaration_then_exit(self, parse_program):
        program = parse_program("\n    let x = 69;\n    exit(x);\n    ")
        assert program.statements == (
            Declaration("x", Number("69")),
            Exit(Identifier("x")),
        )

    def test_exit_without_parens_fails(self):
        assert parse(significant("exit x;")) is None


class TestBlock:
    def test_empty_block(self, parse_program):
        assert parse_program("{}").statements == (Block(()),)

    def test_nested_blocks(self, parse_program):
        program = parse_program("{ let a = 1; { exit(a); } }")
        assert program.statements == (
            Block((Declaration("a", Number("1")), Block((Exit(Identifier("a")),)))),
        )

    def test_unclosed_block_fails(self):
        assert parse(significant("{ let a = 1;")) is None


class TestProgram:
    def test_empty_program(self, parse_program):
        assert parse_program("") == Program(())

    def test_whitespace_only(self, parse_program):
        assert parse_program("  \n\t ") == Program(())

    def test_multiple_statements(self, parse_program):
        program = parse_program("let a = 1; let b = a; exit(b);")
        assert len(program.statements) == 3

    def test_unwired_leading_kind_fails(self):
        assert parse(significant("if x;")) is None

    def test_bare_expression_fails(self):
        assert parse(significant("x;")) is None

    def test_trailing_tokens_fail_whole_program(self):
        assert parse(significant("let a = 1; let")) is None

    def test_lazy_token_source(self):
        tokens = REGISTRY.significant(Tokenizer("let x = 1;", REGISTRY))
        assert parse(tokens) == Program((Declaration("x", Number("1")),))
