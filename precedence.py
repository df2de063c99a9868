"""Operator precedence ladder used by the Pratt parser.

Higher values bind tighter. Token kinds without an entry in `PRECEDENCES`
get `Precedence.LOWEST`, which stops the infix loop in
`Parser.parse_expression`.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Dict
from tokens import TokenType


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2  # ==
    LESSGREATER = 3  # > or <
    SUM = 4  # +
    PRODUCT = 5  # *
    PREFIX = 6  # -x or !x
    CALL = 7  # f(x)


PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
}


def get_precedence(token_type: TokenType) -> Precedence:
    return PRECEDENCES.get(token_type, Precedence.LOWEST)
