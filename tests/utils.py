from lexer import Lexer
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source text into (program, diagnostics)."""
    return Parser(Lexer(text)).parse_program()


def render(text: str) -> str:
    """Parse source text and return the rendered program, asserting no diagnostics."""
    program, errors = parse_text(text)
    assert errors == [], errors
    return program.render()
