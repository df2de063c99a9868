import pytest

from main import lex
from lexer import Lexer
from tokens import Token, TokenType


def test_lexer_single_character_tokens():
    types = [t.type for t in lex("=+(){},;")]
    assert types == [
        TokenType.ASSIGN,
        TokenType.PLUS,
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.COMMA,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


def test_lexer_let_statement():
    assert lex("let five = 5;") == [
        Token(TokenType.LET, "let"),
        Token(TokenType.IDENT, "five"),
        Token(TokenType.ASSIGN, "="),
        Token(TokenType.INT, "5"),
        Token(TokenType.SEMICOLON, ";"),
        Token(TokenType.EOF, ""),
    ]


def test_lexer_recognizes_keywords_and_operators():
    src = """let add = fn(x, y) { x + y; };
!-/*5;
5 < 10 > 5;
if (5 < 10) { return true; } else { return false; }
10 == 10;
10 != 9;
"""
    tokens = lex(src)
    types = [t.type for t in tokens]

    for expected in (
        TokenType.FUNCTION,
        TokenType.BANG,
        TokenType.MINUS,
        TokenType.SLASH,
        TokenType.ASTERISK,
        TokenType.LT,
        TokenType.GT,
        TokenType.IF,
        TokenType.ELSE,
        TokenType.RETURN,
        TokenType.TRUE,
        TokenType.FALSE,
    ):
        assert expected in types

    assert Token(TokenType.EQ, "==") in tokens
    assert Token(TokenType.NOT_EQ, "!=") in tokens
    assert TokenType.ILLEGAL not in types
    assert types[-1] == TokenType.EOF


def test_lexer_two_character_operators_need_lookahead():
    types = [t.type for t in lex("= == ! != =!")]
    assert types == [
        TokenType.ASSIGN,
        TokenType.EQ,
        TokenType.BANG,
        TokenType.NOT_EQ,
        TokenType.ASSIGN,
        TokenType.BANG,
        TokenType.EOF,
    ]


def test_lexer_identifiers_and_integers_are_maximal_runs():
    tokens = lex("foo_bar 12345 letter fnx")
    assert tokens == [
        Token(TokenType.IDENT, "foo_bar"),
        Token(TokenType.INT, "12345"),
        Token(TokenType.IDENT, "letter"),
        Token(TokenType.IDENT, "fnx"),
        Token(TokenType.EOF, ""),
    ]


def test_lexer_digits_end_an_identifier():
    assert [t.literal for t in lex("x1")] == ["x", "1", ""]


def test_lexer_integer_literal_text_is_kept_verbatim():
    tokens = lex("99999999999999999999999")
    assert tokens[0] == Token(TokenType.INT, "99999999999999999999999")


@pytest.mark.parametrize("ch", ["@", "$", "#", "é", "[", "\f"])
def test_lexer_unknown_characters_are_illegal(ch):
    tokens = lex(f"a {ch} b")
    assert tokens[1] == Token(TokenType.ILLEGAL, ch)
    assert tokens[2] == Token(TokenType.IDENT, "b")


def test_lexer_skips_all_whitespace_kinds():
    types = [t.type for t in lex(" \t\r\n1\n\t 2 ")]
    assert types == [TokenType.INT, TokenType.INT, TokenType.EOF]


def test_lexer_keeps_returning_eof():
    lexer = Lexer("x")
    assert lexer.next_token().type == TokenType.IDENT
    for _ in range(3):
        assert lexer.next_token() == Token(TokenType.EOF, "")


def test_lexer_empty_input():
    assert lex("") == [Token(TokenType.EOF, "")]


def test_lexer_iteration_is_lazy_and_forward_only():
    lexer = Lexer("let x = 1;")
    first = next(iter(lexer))
    assert first.type == TokenType.LET
    rest = [t.type for t in lexer]
    assert rest == [
        TokenType.IDENT,
        TokenType.ASSIGN,
        TokenType.INT,
        TokenType.SEMICOLON,
        TokenType.EOF,
    ]


@pytest.mark.parametrize("ch", list("=+-!*/<>,;(){}"))
def test_lexer_one_token_per_punctuation_character(ch):
    src = f"{ch} a{ch}1 {ch}{ch}"
    tokens = lex(src)
    punct = [t for t in tokens if t.literal == ch]
    if ch == "=":
        # the trailing pair lexes as a single `==`
        assert len(punct) == 2
    else:
        assert len(punct) == 4
        assert len(tokens) == 7
