"""
Lexer for the Monkey language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`.
- It recognizes keywords (`fn`, `let`, `true`, `false`, `if`, `else`,
    `return`), identifiers, integer literals, the two-character operators
    `==` and `!=`, single-character operators and punctuation, and skips
    whitespace (space, tab, carriage return, newline).
- Nothing here raises: a character outside the token alphabet becomes an
    `ILLEGAL` token and the parser reports it.

Examples:
    Input:  "let five = 5;"
    Tokens: [LET, IDENT('five'), ASSIGN, INT('5'), SEMICOLON, EOF]

Implementation notes:
- The lexer is a stateful scanner using `self.position`,
    `self.read_position` and `self.current_char`. `current_char` is `None`
    once the input is exhausted.
- `next_token()` can be called indefinitely; after the end of the input it
    keeps returning `EOF`.
- Integer literals keep their decimal text. Converting them to numbers (and
    reporting overflow) is the parser's job.
"""

from __future__ import annotations
from typing import Iterator, List, Optional
from tokens import Token, TokenType, lookup_ident


WHITESPACE = (" ", "\t", "\r", "\n")

SINGLE_CHAR_TOKENS = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "!": TokenType.BANG,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}


def is_letter(ch: Optional[str]) -> bool:
    return ch is not None and ("a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_")


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and "0" <= ch <= "9"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.read_position = 0
        self.current_char: Optional[str] = None
        self.read_char()

    def read_char(self) -> None:
        """Advance to next character."""
        if self.read_position >= len(self.text):
            self.current_char = None
        else:
            self.current_char = self.text[self.read_position]
        self.position = self.read_position
        # Stop moving once past the end so repeated EOF reads stay put.
        if self.read_position <= len(self.text):
            self.read_position += 1

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        if self.read_position < len(self.text):
            return self.text[self.read_position]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char in WHITESPACE:
            self.read_char()

    def read_identifier(self) -> str:
        """Consume the maximal run of letters and underscores."""
        start = self.position
        while is_letter(self.current_char):
            self.read_char()
        return self.text[start : self.position]

    def read_number(self) -> str:
        """Consume the maximal run of decimal digits."""
        start = self.position
        while is_digit(self.current_char):
            self.read_char()
        return self.text[start : self.position]

    def next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        self.skip_whitespace()
        ch = self.current_char

        if ch is None:
            return Token(TokenType.EOF, "")

        # Handle two-character operators first so `==` is not lexed as `=` `=`.
        if ch == "=" and self.peek_char() == "=":
            self.read_char()
            self.read_char()
            return Token(TokenType.EQ, "==")

        if ch == "!" and self.peek_char() == "=":
            self.read_char()
            self.read_char()
            return Token(TokenType.NOT_EQ, "!=")

        token_type = SINGLE_CHAR_TOKENS.get(ch)
        if token_type is not None:
            self.read_char()
            return Token(token_type, ch)

        # Identifiers and keywords return early: the read helpers already
        # leave the cursor on the first character after the run.
        if is_letter(ch):
            ident = self.read_identifier()
            return Token(lookup_ident(ident), ident)

        if is_digit(ch):
            return Token(TokenType.INT, self.read_number())

        self.read_char()
        return Token(TokenType.ILLEGAL, ch)

    def __iter__(self) -> Iterator[Token]:
        """Lazily yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def tokenize(self) -> List[Token]:
        """Return all remaining tokens from the input string."""
        return list(self)
