from __future__ import annotations
import json
from typing import List, Optional, Tuple
from lexer import Lexer
from tokens import Token
from ast_nodes import Program
from parser import Parser, ParseError
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render


PROMPT = ">> "


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_text(text: str) -> Tuple[Program, List[str]]:
    """Parse source text into a program and its diagnostics."""
    parser = Parser(Lexer(text))
    return parser.parse_program()


def print_parser_errors(errors: List[str]) -> None:
    print("Parser errors:")
    for msg in errors:
        print(f"\t{msg}")


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_render: bool = True,
    print_tree: bool = False,
    strict: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> bool:
    """Process a single program: lex, parse and optionally print stages.

    Flags control which parts are printed. Returns True when the program
    parsed without diagnostics.
    """
    try:
        if print_tokens:
            tokens = lex(text)
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens[:50]):
                print(f"  {i:3}: {token}")
            if len(tokens) > 50:
                print(f"  ... and {len(tokens) - 50} more")

        parser = Parser(Lexer(text))
        if strict:
            program = parser.parse()
            errors: List[str] = []
        else:
            program, errors = parser.parse_program()

        if print_render:
            print(program.render())

        if print_tree:
            print("\nAST:")
            print(PrettyPrinter.print_ast(program))

        if errors:
            print_parser_errors(errors)

        if dump_ast_path:
            try:
                with open(dump_ast_path, "w", encoding="utf-8") as fh:
                    json.dump(ast_to_json(program), fh, indent=2)
                print(f"Wrote AST JSON to {dump_ast_path}")
            except OSError as e:
                print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

        # Optionally render visualization via Graphviz
        if viz_path:
            try:
                write_and_render(program, viz_path, fmt=viz_format)
                print(f"Wrote AST visualization to {viz_path}.{viz_format}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}")

        return not errors

    except ParseError as e:
        print(f"Syntax Error: {e}")
        return False


def interactive_mode(print_tokens: bool = False, print_tree: bool = False) -> None:
    """Run the interactive shell, reading one line at a time from stdin.

    Each line gets a fresh lexer/parser pair. The literal input `exit` ends
    the loop.
    """
    print("Monkey parser shell (type 'exit' to quit)")

    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print("\nExiting...")
            break

        if line.strip() == "exit":
            print("Goodbye!")
            break

        if not line.strip():
            continue

        process_program(line, print_tokens=print_tokens, print_tree=print_tree)


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(
        description="Parse Monkey source from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive shell mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-render",
        dest="print_render",
        action="store_false",
        help="Do not print the rendered program",
    )
    parser.add_argument(
        "--print-tree",
        dest="print_tree",
        action="store_true",
        help="Print the AST as an indented tree",
    )
    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Treat any parser diagnostic as a syntax error",
    )

    # default behavior: print the rendered program only
    parser.set_defaults(
        print_tokens=False,
        print_render=True,
        print_tree=False,
        strict=False,
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args()

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_tree=args.print_tree)
    elif args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            sys.exit(1)

        ok = process_program(
            text,
            print_tokens=args.print_tokens,
            print_render=args.print_render,
            print_tree=args.print_tree,
            strict=args.strict,
            dump_ast_path=args.dump_ast,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
        )
        sys.exit(0 if ok else 1)
    else:
        parser.print_help()
