"""Tests for the command-line helpers and the interactive shell."""

import json

import main
from main import interactive_mode, lex, parse_text, process_program
from tokens import TokenType


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_lex_and_parse_text_helpers():
    assert lex("x")[-1].type == TokenType.EOF
    program, errors = parse_text("1 + 2")
    assert errors == []
    assert program.render() == "(1 + 2)"


def test_process_program_prints_render(capsys):
    ok = process_program("add( 1, 2 * 3, 4 + 5);")
    assert ok is True
    out = capsys.readouterr().out
    assert "add(1,(2 * 3),(4 + 5))" in out


def test_process_program_reports_diagnostics(capsys):
    ok = process_program("let = 5;")
    assert ok is False
    out = capsys.readouterr().out
    assert "Parser errors:" in out
    assert "expected next token to be IDENT, got ASSIGN instead" in out


def test_process_program_strict_mode(capsys):
    ok = process_program("fn(x y) {}", strict=True)
    assert ok is False
    assert "Syntax Error:" in capsys.readouterr().out


def test_process_program_dumps_json(tmp_path, capsys):
    out_file = tmp_path / "ast.json"
    process_program("let x = 1;", print_render=False, dump_ast_path=str(out_file))
    data = json.loads(out_file.read_text(encoding="utf-8"))
    assert data["statements"][0]["name"] == "x"


def test_process_program_prints_tokens_and_tree(capsys):
    process_program("x", print_tokens=True, print_tree=True)
    out = capsys.readouterr().out
    assert "Tokens (2):" in out
    assert "Identifier(x)" in out


def test_interactive_mode_parses_each_line(monkeypatch, capsys):
    _feed(monkeypatch, ["1 + (2 + 3) + 4", "", "if (x < y) { x } else { y }", "exit", "never"])
    interactive_mode()
    out = capsys.readouterr().out
    assert "((1 + (2 + 3)) + 4)" in out
    assert "if(x < y) x else y" in out
    assert "Goodbye!" in out


def test_interactive_mode_stops_on_eof(monkeypatch, capsys):
    _feed(monkeypatch, ["let x = 1"])
    interactive_mode()
    out = capsys.readouterr().out
    assert "let x = 1;" in out
    assert "Exiting..." in out
    assert main.PROMPT == ">> "
