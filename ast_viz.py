"""Graphviz visualization helpers for ASTs.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Layout: every AST node becomes one box labelled with its kind and its
leaf data (name, value or operator). Edges run from parent to child and are
labelled with the field the child sits in (`left`, `arg[0]`, ...). Error
placeholders are highlighted.
"""

from typing import List, Optional, Tuple
from graphviz import Digraph
from ast_nodes import *


def _node_label(node: ASTNode) -> str:
    """Return a short label for a single node (children excluded)."""
    match node:
        case Identifier(value=v):
            return f"Identifier\n{v}"
        case IntegerLiteral(value=v):
            return f"IntegerLiteral\n{v}"
        case Boolean():
            return f"Boolean\n{node.token_literal()}"
        case PrefixExpression(operator=op) | InfixExpression(operator=op):
            kind = "Prefix" if node.type == NodeType.PREFIX else "Infix"
            return f"{kind}\n{op}"
        case FunctionLiteral(parameters=params):
            return f"FunctionLiteral\n({', '.join(p.value for p in params)})"
        case LetStatement(name=name):
            return f"Let\n{name.value}"
        case ErrorExpression(message=msg):
            return f"Error\n{msg}"
        case IfExpression():
            return "If"
        case BlockStatement():
            return "Block"
        case CallExpression():
            return "Call"
        case ReturnStatement():
            return "Return"
        case ExpressionStatement():
            return "ExpressionStatement"
        case Program():
            return "Program"
    return type(node).__name__


def _children(node: ASTNode) -> List[Tuple[str, Optional[ASTNode]]]:
    """Return (edge label, child) pairs in source order."""
    match node:
        case PrefixExpression(right=right):
            return [("right", right)]
        case InfixExpression(left=left, right=right):
            return [("left", left), ("right", right)]
        case IfExpression(condition=cond, consequence=cons, alternative=alt):
            out = [("condition", cond), ("then", cons)]
            if alt is not None:
                out.append(("else", alt))
            return out
        case BlockStatement(statements=stmts) | Program(statements=stmts):
            return [(f"stmt[{i}]", s) for i, s in enumerate(stmts)]
        case FunctionLiteral(body=body):
            return [("body", body)]
        case CallExpression(function=func, arguments=args):
            return [("function", func)] + [
                (f"arg[{i}]", a) for i, a in enumerate(args)
            ]
        case LetStatement(value=value):
            return [("value", value)]
        case ReturnStatement(return_value=value):
            return [("value", value)]
        case ExpressionStatement(expression=expr):
            return [("expression", expr)]
    return []


def render_ast_dot(node: ASTNode) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontsize="10")

    counter = 0
    stack: List[Tuple[Optional[str], str, ASTNode]] = [(None, "", node)]
    while stack:
        parent_id, edge_label, current = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        if isinstance(current, ErrorExpression):
            dot.node(node_id, label=_node_label(current), style="filled", fillcolor="#ffefef")
        else:
            dot.node(node_id, label=_node_label(current))
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=edge_label)

        # Push in reverse so children are numbered left to right.
        for label, child in reversed(_children(current)):
            if child is not None:
                stack.append((node_id, label, child))

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(program, 'out/ast', fmt='png') will create
    out/ast.png (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
