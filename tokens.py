"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer, the fixed keyword table, and a small `Token` dataclass that holds
a token type and the literal text it was scanned from. Tokens are the atomic
units produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict


class TokenType(Enum):
    # Special
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers and literals
    IDENT = auto()
    INT = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    BANG = auto()
    ASTERISK = auto()
    SLASH = auto()

    # Comparison operators
    LT = auto()
    GT = auto()
    EQ = auto()
    NOT_EQ = auto()

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    TRUE = auto()
    FALSE = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


def lookup_ident(ident: str) -> TokenType:
    """Map an identifier to its keyword token type, or IDENT."""
    return KEYWORDS.get(ident, TokenType.IDENT)


@dataclass
class Token:
    type: TokenType
    literal: str = ""

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.literal)})"
