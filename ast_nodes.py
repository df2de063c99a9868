"""AST node definitions for the Monkey language.

This module defines the concrete AST node dataclasses built by the parser.
Each node is a dataclass that carries the relevant information (an operator,
child nodes, names) plus the `Token` it was parsed from, so that literal
text can be reconstructed. The `NodeType` enum identifies node kinds and is
used by the pretty-printer, the JSON dump and the Graphviz renderer.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and the originating token.
- Nodes form a strict tree: every child is owned by exactly one parent.
    Nodes are built bottom-up by the parser and never mutated afterwards.
- The closed sets of statement and expression variants are spelled out as
    the `Statement` and `Expression` unions; consumers dispatch on them with
    `match`.
- `ErrorExpression` is the recovery placeholder the parser substitutes when
    it cannot build a real expression. It carries the diagnostic text.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Union
from tokens import Token


class NodeType(Enum):
    IDENTIFIER = auto()
    INT_LITERAL = auto()
    BOOL_LITERAL = auto()
    PREFIX = auto()
    INFIX = auto()
    IF_EXPR = auto()
    BLOCK = auto()
    FUNC_LITERAL = auto()
    CALL = auto()
    ERROR = auto()
    LET_STMT = auto()
    RETURN_STMT = auto()
    EXPR_STMT = auto()
    PROGRAM = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    token: Optional[Token] = None

    def token_literal(self) -> str:
        return self.token.literal if self.token is not None else ""

    def render(self) -> str:
        """Canonical one-line source text for this node."""
        from pretty_printer import PrettyPrinter

        return PrettyPrinter.render(self)


# Expression Nodes
@dataclass
class Identifier(ASTNode):
    type: NodeType = NodeType.IDENTIFIER
    value: str = ""


@dataclass
class IntegerLiteral(ASTNode):
    type: NodeType = NodeType.INT_LITERAL
    value: int = 0


@dataclass
class Boolean(ASTNode):
    type: NodeType = NodeType.BOOL_LITERAL
    value: bool = False


@dataclass
class PrefixExpression(ASTNode):
    type: NodeType = NodeType.PREFIX
    operator: str = ""
    right: Optional[Expression] = None


@dataclass
class InfixExpression(ASTNode):
    type: NodeType = NodeType.INFIX
    left: Optional[Expression] = None
    operator: str = ""
    right: Optional[Expression] = None


@dataclass
class BlockStatement(ASTNode):
    type: NodeType = NodeType.BLOCK
    statements: List[Statement] = field(default_factory=list)


@dataclass
class IfExpression(ASTNode):
    type: NodeType = NodeType.IF_EXPR
    condition: Optional[Expression] = None
    consequence: BlockStatement = field(default_factory=BlockStatement)
    # None means there was no `else`; an empty block means `else {}`.
    alternative: Optional[BlockStatement] = None


@dataclass
class FunctionLiteral(ASTNode):
    type: NodeType = NodeType.FUNC_LITERAL
    parameters: List[Identifier] = field(default_factory=list)
    body: BlockStatement = field(default_factory=BlockStatement)


@dataclass
class CallExpression(ASTNode):
    type: NodeType = NodeType.CALL
    function: Optional[Expression] = None
    arguments: List[Expression] = field(default_factory=list)


@dataclass
class ErrorExpression(ASTNode):
    type: NodeType = NodeType.ERROR
    message: str = ""


# Statement Nodes
@dataclass
class LetStatement(ASTNode):
    type: NodeType = NodeType.LET_STMT
    name: Identifier = field(default_factory=Identifier)
    value: Optional[Expression] = None


@dataclass
class ReturnStatement(ASTNode):
    type: NodeType = NodeType.RETURN_STMT
    return_value: Optional[Expression] = None


@dataclass
class ExpressionStatement(ASTNode):
    type: NodeType = NodeType.EXPR_STMT
    expression: Optional[Expression] = None


# Program Node
@dataclass
class Program(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: List[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""


Expression = Union[
    Identifier,
    IntegerLiteral,
    Boolean,
    PrefixExpression,
    InfixExpression,
    IfExpression,
    BlockStatement,
    FunctionLiteral,
    CallExpression,
    ErrorExpression,
]

Statement = Union[LetStatement, ReturnStatement, ExpressionStatement]
