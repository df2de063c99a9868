"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node type
and key fields; source tokens are reduced to their literal text.
"""

from typing import Any, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    match node:
        # literals
        case Identifier(value=v):
            return {"node_type": "Identifier", "value": v}
        case IntegerLiteral(value=v):
            return {"node_type": "IntegerLiteral", "value": v}
        case Boolean(value=v):
            return {"node_type": "Boolean", "value": v}
        # expressions
        case PrefixExpression(operator=op, right=right):
            return {
                "node_type": "Prefix",
                "operator": op,
                "right": ast_to_json(right),
            }
        case InfixExpression(left=left, operator=op, right=right):
            return {
                "node_type": "Infix",
                "operator": op,
                "left": ast_to_json(left),
                "right": ast_to_json(right),
            }
        case IfExpression(condition=cond, consequence=cons, alternative=alt):
            return {
                "node_type": "If",
                "condition": ast_to_json(cond),
                "consequence": ast_to_json(cons),
                "alternative": ast_to_json(alt),
            }
        case BlockStatement(statements=stmts):
            return {
                "node_type": "Block",
                "statements": [ast_to_json(s) for s in stmts],
            }
        case FunctionLiteral(parameters=params, body=body):
            return {
                "node_type": "FunctionLiteral",
                "parameters": [p.value for p in params],
                "body": ast_to_json(body),
            }
        case CallExpression(function=func, arguments=args):
            return {
                "node_type": "Call",
                "function": ast_to_json(func),
                "arguments": [ast_to_json(a) for a in args],
            }
        case ErrorExpression(message=msg):
            return {"node_type": "Error", "message": msg}
        # statements and the program
        case LetStatement(name=name, value=value):
            return {
                "node_type": "Let",
                "name": name.value,
                "value": ast_to_json(value),
            }
        case ReturnStatement(return_value=value):
            return {"node_type": "Return", "return_value": ast_to_json(value)}
        case ExpressionStatement(expression=expr):
            return {"node_type": "ExpressionStatement", "expression": ast_to_json(expr)}
        case Program(statements=stmts):
            return {
                "node_type": "Program",
                "statements": [ast_to_json(s) for s in stmts],
            }

    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")
