import json

import pytest

from main import lex, main, parse_program, parse_text, process_program
from tokens import TokenType


def test_lex_ends_with_eof():
    tokens = lex("let x = 1;")
    assert tokens[-1].type == TokenType.EOF
    assert len(tokens) == 6


def test_parse_program_returns_tree_and_errors():
    program, errors = parse_program("let x 1; y;")
    assert errors == ["expected next token to be ASSIGN, got INT instead"]
    assert str(program) == "y"


def test_parse_text_strict_raises_syntax_error():
    with pytest.raises(SyntaxError) as excinfo:
        parse_text("let = ;")
    assert "expected next token to be IDENT" in str(excinfo.value)


def test_parse_text_non_strict_returns_partial_tree():
    program = parse_text("let a = 1; )", strict=False)
    assert str(program) == "let a = 1;"


def test_process_program_prints_ast_and_succeeds(capsys):
    status = process_program("let x = 1 + 2;", print_tokens=True, print_surface=True)
    out = capsys.readouterr().out

    assert status == 0
    assert "Tokens (8):" in out
    assert "Let(x)" in out
    assert "let x = (1 + 2);" in out
    assert "Parse succeeded" in out


def test_process_program_reports_errors(capsys):
    status = process_program("let x 5;", print_ast=False)
    out = capsys.readouterr().out

    assert status == 1
    assert "Parser errors (1):" in out
    assert "expected next token to be ASSIGN, got INT instead" in out


def test_main_dumps_ast_json(tmp_path, capsys):
    out_file = tmp_path / "ast.json"
    status = main(["--expr", "[1, 2][0]", "--no-ast", "--dump-ast", str(out_file)])

    assert status == 0
    data = json.loads(out_file.read_text(encoding="utf-8"))
    assert data["statements"][0]["expression"]["node_type"] == "IndexExpression"
    assert "Wrote AST JSON" in capsys.readouterr().out


def test_main_reads_file(tmp_path, capsys):
    src = tmp_path / "prog.txt"
    src.write_text("return true;", encoding="utf-8")
    assert main(["--file", str(src)]) == 0
    assert "Return" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "missing.txt")]) == 1
    assert "Failed to read file" in capsys.readouterr().out
