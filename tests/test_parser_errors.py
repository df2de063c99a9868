"""Diagnostics and recovery: parsing never aborts and always reaches EOF."""

import pytest

from tests.utils import parse_text
from ast_nodes import *
from tokens import TokenType


def test_let_missing_assign():
    program, errors = parse_text("let x 5;")
    assert errors == ["expected next token to be ASSIGN, got INT instead"]
    # the let is dropped, the trailing `5` is still parsed
    assert len(program.statements) == 1
    assert program.statements[0].expression.value == 5


def test_let_missing_identifier():
    program, errors = parse_text("let = 10;")
    assert errors == [
        "expected next token to be IDENT, got ASSIGN instead",
        "no prefix parse function for ASSIGN found",
    ]


def test_function_parameters_missing_comma(make_parser):
    parser = make_parser("fn(x y) {}")
    program, errors = parser.parse_program()
    assert errors[0] == "expected next token to be RPAREN, got IDENT instead"
    assert parser.cur_token.type == TokenType.EOF
    first = program.statements[0].expression
    assert isinstance(first, ErrorExpression)
    assert first.message == errors[0]


def test_grouped_expression_missing_rparen():
    program, errors = parse_text("(1 + 2")
    assert errors == ["expected next token to be RPAREN, got EOF instead"]
    assert isinstance(program.statements[0].expression, ErrorExpression)


@pytest.mark.parametrize(
    "src, message",
    [
        ("if x { x }", "expected next token to be LPAREN, got IDENT instead"),
        ("if (x { x }", "expected next token to be RPAREN, got LBRACE instead"),
        ("if (x) x", "expected next token to be LBRACE, got IDENT instead"),
        ("if (x) { x } else x", "expected next token to be LBRACE, got IDENT instead"),
        ("fn x", "expected next token to be LPAREN, got IDENT instead"),
        ("fn(x) x", "expected next token to be LBRACE, got IDENT instead"),
        ("fn(1) {}", "expected next token to be IDENT, got INT instead"),
        ("add(1, 2", "expected next token to be RPAREN, got EOF instead"),
    ],
)
def test_missing_tokens_are_reported(make_parser, src, message):
    parser = make_parser(src)
    program, errors = parser.parse_program()
    assert errors[0] == message
    assert isinstance(program.statements[0].expression, ErrorExpression)
    assert parser.cur_token.type == TokenType.EOF


def test_unterminated_block():
    program, errors = parse_text("if (x) { x")
    assert errors == ["expected RBRACE before EOF"]
    assert program.statements[0].expression.consequence.statements[0].expression.value == "x"


def test_no_prefix_handler_for_bare_operator():
    program, errors = parse_text("* 5")
    assert errors[0] == "no prefix parse function for ASTERISK found"
    placeholder = program.statements[0].expression
    assert isinstance(placeholder, ErrorExpression)
    assert not isinstance(placeholder, Identifier)
    assert placeholder.render() == ""


def test_illegal_character_surfaces_as_no_prefix_handler():
    program, errors = parse_text("a @ b")
    assert errors == ["no prefix parse function for ILLEGAL found"]
    assert len(program.statements) == 3
    assert isinstance(program.statements[1].expression, ErrorExpression)
    assert program.statements[2].expression.value == "b"


def test_integer_overflow_is_diagnosed():
    program, errors = parse_text("9223372036854775808")
    assert errors == ["could not parse 9223372036854775808 as integer"]
    assert isinstance(program.statements[0].expression, ErrorExpression)

    program, errors = parse_text("9223372036854775807")
    assert errors == []
    assert program.statements[0].expression.value == 2**63 - 1


def test_recovery_continues_to_later_statements():
    program, errors = parse_text("let = 1; let y = 2; (3; let z = 4;")
    assert len(errors) == 3
    last = program.statements[-1]
    assert isinstance(last, LetStatement)
    assert last.name.value == "z"
    assert last.value.value == 4


def test_errors_accumulate_in_source_order():
    _, errors = parse_text(") ] fn(")
    assert errors[0] == "no prefix parse function for RPAREN found"
    assert errors[1] == "no prefix parse function for ILLEGAL found"
    assert len(errors) >= 3
