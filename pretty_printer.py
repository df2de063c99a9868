"""Pretty-printer for the AST.

Provides two renderings:

- `PrettyPrinter.render(node)` returns the canonical one-line source text of
    a node. Every prefix and infix expression is wrapped in parentheses, so
    the text shows exactly how the parser grouped operators, e.g.
    `1 + 2 * 3` renders as `(1 + (2 * 3))`. Re-parsing the rendered text of
    an expression gives back the same rendering.
- `PrettyPrinter.print_ast(node, indent, prefix)` renders the tree as a
    readable multi-line string for debugging and the CLI.

Examples:
    PrettyPrinter.render(program)
    PrettyPrinter.print_ast(program)
"""

from __future__ import annotations
from typing import Optional
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def render(node: Optional[ASTNode]) -> str:
        """Return the canonical one-line source text of a node."""
        if node is None:
            return ""

        _r = PrettyPrinter.render

        match node:
            case Identifier(value=v):
                return v
            case IntegerLiteral() | Boolean():
                return node.token_literal()
            case PrefixExpression(operator=op, right=right):
                return f"({op}{_r(right)})"
            case InfixExpression(left=left, operator=op, right=right):
                return f"({_r(left)} {op} {_r(right)})"
            case IfExpression(condition=cond, consequence=cons, alternative=alt):
                out = f"if{_r(cond)} {_r(cons)}"
                if alt is not None:
                    out += f" else {_r(alt)}"
                return out
            case BlockStatement(statements=stmts):
                return "".join(_r(s) for s in stmts)
            case FunctionLiteral(parameters=params, body=body):
                params_s = ",".join(_r(p) for p in params)
                return f"{node.token_literal()}({params_s}){_r(body)}"
            case CallExpression(function=func, arguments=args):
                args_s = ",".join(_r(a) for a in args)
                return f"{_r(func)}({args_s})"
            case ErrorExpression():
                return ""
            case LetStatement(name=name, value=value):
                return f"{node.token_literal()} {_r(name)} = {_r(value)};"
            case ReturnStatement(return_value=value):
                return f"{node.token_literal()} {_r(value)};"
            case ExpressionStatement(expression=expr):
                return _r(expr)
            case Program(statements=stmts):
                return "".join(_r(s) for s in stmts)
            case _:
                raise TypeError(f"Cannot render node of type {type(node).__name__}")

    @staticmethod
    def print_ast(node: Optional[ASTNode], indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case Identifier(value=v):
                lines.append(f"{indent_str}{prefix}Identifier({v})")

            case IntegerLiteral(value=v):
                lines.append(f"{indent_str}{prefix}IntegerLiteral({v})")

            case Boolean(value=v):
                lines.append(f"{indent_str}{prefix}Boolean({str(v).lower()})")

            case PrefixExpression(operator=op, right=right):
                lines.append(f"{indent_str}{prefix}Prefix({op})")
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case InfixExpression(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}Infix({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case IfExpression(condition=cond, consequence=cons, alternative=alt):
                lines.append(f"{indent_str}{prefix}If")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                lines.append(PrettyPrinter.print_ast(cons, indent + 4, "then: "))
                if alt is not None:
                    lines.append(PrettyPrinter.print_ast(alt, indent + 4, "else: "))

            case BlockStatement(statements=stmts):
                lines.append(f"{indent_str}{prefix}Block")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case FunctionLiteral(parameters=params, body=body):
                names = ", ".join(p.value for p in params)
                lines.append(f"{indent_str}{prefix}FunctionLiteral(params=[{names}])")
                lines.append(PrettyPrinter.print_ast(body, indent + 4, "body: "))

            case CallExpression(function=func, arguments=args):
                lines.append(f"{indent_str}{prefix}Call")
                lines.append(PrettyPrinter.print_ast(func, indent + 2, "function: "))
                for i, arg in enumerate(args):
                    lines.append(PrettyPrinter.print_ast(arg, indent + 4, f"arg[{i}]: "))

            case ErrorExpression(message=msg):
                lines.append(f"{indent_str}{prefix}Error({msg})")

            case LetStatement(name=name, value=value):
                lines.append(f"{indent_str}{prefix}Let({name.value})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ReturnStatement(return_value=value):
                lines.append(f"{indent_str}{prefix}Return")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ExpressionStatement(expression=expr):
                lines.append(f"{indent_str}{prefix}ExpressionStatement")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case Program(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)
