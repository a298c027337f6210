from lexer import Lexer
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_with_errors(text: str):
    """Lex+parse a source text, returning (program, errors)."""
    parser = Parser(Lexer(text))
    program = parser.parse_program()
    return program, parser.errors


def parse_text(text: str):
    """Convenience: lex+parse a source text and assert it parsed cleanly."""
    program, errors = parse_with_errors(text)
    assert errors == [], f"unexpected parser errors: {errors}"
    return program
