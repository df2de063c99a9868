"""
Parser for the Monkey language.

Overview and approach:
- This parser is a hand-written Pratt (top-down operator precedence) parser.
    It pulls tokens from a `Lexer` one at a time, keeping the current token
    and a single token of lookahead (`cur_token` / `peek_token`).
- Expression parsing is driven by two dispatch tables keyed by `TokenType`:
    `prefix_parse_fns` (token in prefix position -> expression) and
    `infix_parse_fns` (token in infix position, left expression ->
    expression). Binding strength comes from the ladder in `precedence.py`.

Key points:
- `parse_expression(precedence)` calls the prefix handler for the current
    token, then keeps folding infix operators into the left-hand side while
    the lookahead binds tighter than `precedence`. Infix handlers parse their
    right operand at their own precedence, which makes equal-precedence
    chains fold left (`1 - 2 - 3` is `((1 - 2) - 3)`).
- A `(` in infix position is a call: `CALL` binds tighter than any binary
    operator, so `a + f(b)` attaches the call to `f`.

- Error handling:
    - Structural problems (a missing expected token, a token with no prefix
        handler, an unconvertible integer literal) never raise. They are
        recorded in `self.errors` and an `ErrorExpression` carrying the
        message stands in for the expression that could not be built.
    - `parse_program()` always consumes the input through `EOF` and returns
        the tree together with the diagnostics. `parse()` is the strict
        variant and raises `ParseError` when anything was recorded.

Examples:
    - `1 + (2 + 3) + 4` renders as `((1 + (2 + 3)) + 4)`
    - `add(1, 2 * 3)` renders as `add(1,(2 * 3))`
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
from tokens import Token, TokenType
from lexer import Lexer
from precedence import Precedence, get_precedence
from ast_nodes import *


# Integer literals are limited to the signed 64-bit range.
INT_MAX = 2**63 - 1

PrefixParseFn = Callable[[], Expression]
InfixParseFn = Callable[[Expression], Expression]


class ParseError(SyntaxError):
    """Raised by `Parser.parse()` when diagnostics were recorded."""

    def __init__(self, diagnostics: List[str]):
        super().__init__("; ".join(diagnostics))
        self.diagnostics = list(diagnostics)


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: List[str] = []
        self.cur_token = Token(TokenType.EOF, "")
        self.peek_token = Token(TokenType.EOF, "")

        self.prefix_parse_fns: Dict[TokenType, PrefixParseFn] = {
            TokenType.IDENT: self.parse_identifier,
            TokenType.INT: self.parse_integer_literal,
            TokenType.BANG: self.parse_prefix_expression,
            TokenType.MINUS: self.parse_prefix_expression,
            TokenType.TRUE: self.parse_boolean,
            TokenType.FALSE: self.parse_boolean,
            TokenType.LPAREN: self.parse_grouped_expression,
            TokenType.IF: self.parse_if_expression,
            TokenType.FUNCTION: self.parse_function_literal,
        }
        self.infix_parse_fns: Dict[TokenType, InfixParseFn] = {
            TokenType.PLUS: self.parse_infix_expression,
            TokenType.MINUS: self.parse_infix_expression,
            TokenType.SLASH: self.parse_infix_expression,
            TokenType.ASTERISK: self.parse_infix_expression,
            TokenType.EQ: self.parse_infix_expression,
            TokenType.NOT_EQ: self.parse_infix_expression,
            TokenType.LT: self.parse_infix_expression,
            TokenType.GT: self.parse_infix_expression,
            TokenType.LPAREN: self.parse_call_expression,
        }

        # Read two tokens so cur_token and peek_token are both set.
        self.next_token()
        self.next_token()

    def next_token(self) -> None:
        """Move to next token."""
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def cur_token_is(self, token_type: TokenType) -> bool:
        return self.cur_token.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the lookahead has the given type, else record an error."""
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self.peek_error(token_type)
        return False

    def peek_error(self, token_type: TokenType) -> None:
        self.errors.append(
            f"expected next token to be {token_type}, got {self.peek_token.type} instead"
        )

    def peek_precedence(self) -> Precedence:
        return get_precedence(self.peek_token.type)

    def cur_precedence(self) -> Precedence:
        return get_precedence(self.cur_token.type)

    def error_expression(self, message: Optional[str] = None) -> ErrorExpression:
        """Build a recovery placeholder.

        With a message, the message is recorded as a new diagnostic. Without
        one, the placeholder reuses the most recent diagnostic (the one
        `expect_peek` just recorded).
        """
        if message is None:
            message = self.errors[-1] if self.errors else "parse error"
        else:
            self.errors.append(message)
        return ErrorExpression(token=self.cur_token, message=message)

    # Statements

    def parse_program(self) -> Tuple[Program, List[str]]:
        """Parse statements until EOF and return the program with diagnostics."""
        program = Program()

        while not self.cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()

        return program, self.errors

    def parse(self) -> Program:
        """Parse a complete program, raising ParseError on any diagnostic."""
        program, errors = self.parse_program()
        if errors:
            raise ParseError(errors)
        return program

    def parse_statement(self) -> Optional[Statement]:
        match self.cur_token.type:
            case TokenType.LET:
                return self.parse_let_statement()
            case TokenType.RETURN:
                return self.parse_return_statement()
            case _:
                return self.parse_expression_statement()

    def parse_let_statement(self) -> Optional[LetStatement]:
        """Parse let statement: let ident = expr [;]"""
        token = self.cur_token

        if not self.expect_peek(TokenType.IDENT):
            return None
        name = Identifier(token=self.cur_token, value=self.cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)

        # The semicolon is optional so single REPL lines parse.
        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        return LetStatement(token=token, name=name, value=value)

    def parse_return_statement(self) -> ReturnStatement:
        """Parse return statement: return expr [;]"""
        token = self.cur_token
        self.next_token()
        return_value = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        return ReturnStatement(token=token, return_value=return_value)

    def parse_expression_statement(self) -> ExpressionStatement:
        token = self.cur_token
        expression = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()

        return ExpressionStatement(token=token, expression=expression)

    def parse_block_statement(self) -> BlockStatement:
        """Parse a block of statements: { statement* }"""
        token = self.cur_token
        statements: List[Statement] = []
        self.next_token()

        while not self.cur_token_is(TokenType.RBRACE):
            if self.cur_token_is(TokenType.EOF):
                self.errors.append("expected RBRACE before EOF")
                break
            stmt = self.parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self.next_token()

        return BlockStatement(token=token, statements=statements)

    # Expressions

    def parse_expression(self, precedence: Precedence) -> Expression:
        """Parse an expression whose operators bind tighter than `precedence`."""
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            left = self.error_expression(
                f"no prefix parse function for {self.cur_token.type} found"
            )
        else:
            left = prefix()

        # Pratt loop: fold operators into `left` while the lookahead binds
        # tighter than the caller's precedence.
        while (
            not self.peek_token_is(TokenType.SEMICOLON)
            and precedence < self.peek_precedence()
        ):
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left

            self.next_token()
            left = infix(left)

        return left

    def parse_identifier(self) -> Expression:
        return Identifier(token=self.cur_token, value=self.cur_token.literal)

    def parse_integer_literal(self) -> Expression:
        literal = self.cur_token.literal
        try:
            value = int(literal)
        except ValueError:
            value = None

        if value is None or value > INT_MAX:
            return self.error_expression(f"could not parse {literal} as integer")

        return IntegerLiteral(token=self.cur_token, value=value)

    def parse_boolean(self) -> Expression:
        return Boolean(token=self.cur_token, value=self.cur_token_is(TokenType.TRUE))

    def parse_prefix_expression(self) -> Expression:
        token = self.cur_token
        self.next_token()
        # The operand binds at PREFIX so `-a * b` is `((-a) * b)`.
        right = self.parse_expression(Precedence.PREFIX)
        return PrefixExpression(token=token, operator=token.literal, right=right)

    def parse_infix_expression(self, left: Expression) -> Expression:
        token = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        return InfixExpression(
            token=token, left=left, operator=token.literal, right=right
        )

    def parse_grouped_expression(self) -> Expression:
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        if not self.expect_peek(TokenType.RPAREN):
            return self.error_expression()
        return expression

    def parse_if_expression(self) -> Expression:
        """Parse if expression: if (cond) { ... } [else { ... }]"""
        token = self.cur_token

        if not self.expect_peek(TokenType.LPAREN):
            return self.error_expression()

        self.next_token()
        condition = self.parse_expression(Precedence.LOWEST)

        if not self.expect_peek(TokenType.RPAREN):
            return self.error_expression()
        if not self.expect_peek(TokenType.LBRACE):
            return self.error_expression()

        consequence = self.parse_block_statement()

        alternative = None
        if self.peek_token_is(TokenType.ELSE):
            self.next_token()
            if not self.expect_peek(TokenType.LBRACE):
                return self.error_expression()
            alternative = self.parse_block_statement()

        return IfExpression(
            token=token,
            condition=condition,
            consequence=consequence,
            alternative=alternative,
        )

    def parse_function_literal(self) -> Expression:
        """Parse function literal: fn (params) { ... }"""
        token = self.cur_token

        if not self.expect_peek(TokenType.LPAREN):
            return self.error_expression()

        parameters = self.parse_function_parameters()
        if parameters is None:
            return self.error_expression()

        if not self.expect_peek(TokenType.LBRACE):
            return self.error_expression()

        body = self.parse_block_statement()
        return FunctionLiteral(token=token, parameters=parameters, body=body)

    def parse_function_parameters(self) -> Optional[List[Identifier]]:
        """Parse `ident, ident, ...)` after the opening parenthesis."""
        identifiers: List[Identifier] = []

        if self.peek_token_is(TokenType.RPAREN):
            self.next_token()
            return identifiers

        if not self.expect_peek(TokenType.IDENT):
            return None
        identifiers.append(Identifier(token=self.cur_token, value=self.cur_token.literal))

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            if not self.expect_peek(TokenType.IDENT):
                return None
            identifiers.append(
                Identifier(token=self.cur_token, value=self.cur_token.literal)
            )

        if not self.expect_peek(TokenType.RPAREN):
            return None

        return identifiers

    def parse_call_expression(self, function: Expression) -> Expression:
        token = self.cur_token
        arguments = self.parse_expression_list(TokenType.RPAREN)
        if arguments is None:
            return self.error_expression()
        return CallExpression(token=token, function=function, arguments=arguments)

    def parse_expression_list(self, end: TokenType) -> Optional[List[Expression]]:
        """Parse a comma-separated list of expressions terminated by `end`."""
        items: List[Expression] = []

        if self.peek_token_is(end):
            self.next_token()
            return items

        self.next_token()
        items.append(self.parse_expression(Precedence.LOWEST))

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            self.next_token()
            items.append(self.parse_expression(Precedence.LOWEST))

        if not self.expect_peek(end):
            return None

        return items
