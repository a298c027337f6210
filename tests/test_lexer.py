import pytest

from lexer import Lexer
from tests.utils import lex
from tokens import Token, TokenType, lookup_ident


def test_lexer_recognizes_operators_and_delimiters():
    tokens = lex("=+(){}[],;-!*/<>")
    types = [t.type for t in tokens]

    assert types == [
        TokenType.ASSIGN,
        TokenType.PLUS,
        TokenType.LPAREN,
        TokenType.RPAREN,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.LBRACKET,
        TokenType.RBRACKET,
        TokenType.COMMA,
        TokenType.SEMICOLON,
        TokenType.MINUS,
        TokenType.BANG,
        TokenType.ASTERISK,
        TokenType.SLASH,
        TokenType.LT,
        TokenType.GT,
        TokenType.EOF,
    ]


def test_lexer_full_program():
    src = """let five = 5;
let add = fn(x, y) {
  x + y;
};
let result = add(five, 10);
if (5 < 10) { return true; } else { return false; }
10 == 10; 10 != 9;
"foobar" "foo bar"
[1, 2];
"""
    expected = [
        (TokenType.LET, "let"),
        (TokenType.IDENT, "five"),
        (TokenType.ASSIGN, "="),
        (TokenType.INT, "5"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.LET, "let"),
        (TokenType.IDENT, "add"),
        (TokenType.ASSIGN, "="),
        (TokenType.FUNCTION, "fn"),
        (TokenType.LPAREN, "("),
        (TokenType.IDENT, "x"),
        (TokenType.COMMA, ","),
        (TokenType.IDENT, "y"),
        (TokenType.RPAREN, ")"),
        (TokenType.LBRACE, "{"),
        (TokenType.IDENT, "x"),
        (TokenType.PLUS, "+"),
        (TokenType.IDENT, "y"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.RBRACE, "}"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.LET, "let"),
        (TokenType.IDENT, "result"),
        (TokenType.ASSIGN, "="),
        (TokenType.IDENT, "add"),
        (TokenType.LPAREN, "("),
        (TokenType.IDENT, "five"),
        (TokenType.COMMA, ","),
        (TokenType.INT, "10"),
        (TokenType.RPAREN, ")"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.IF, "if"),
        (TokenType.LPAREN, "("),
        (TokenType.INT, "5"),
        (TokenType.LT, "<"),
        (TokenType.INT, "10"),
        (TokenType.RPAREN, ")"),
        (TokenType.LBRACE, "{"),
        (TokenType.RETURN, "return"),
        (TokenType.TRUE, "true"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.RBRACE, "}"),
        (TokenType.ELSE, "else"),
        (TokenType.LBRACE, "{"),
        (TokenType.RETURN, "return"),
        (TokenType.FALSE, "false"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.RBRACE, "}"),
        (TokenType.INT, "10"),
        (TokenType.EQ, "=="),
        (TokenType.INT, "10"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.INT, "10"),
        (TokenType.NOT_EQ, "!="),
        (TokenType.INT, "9"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.STRING, "foobar"),
        (TokenType.STRING, "foo bar"),
        (TokenType.LBRACKET, "["),
        (TokenType.INT, "1"),
        (TokenType.COMMA, ","),
        (TokenType.INT, "2"),
        (TokenType.RBRACKET, "]"),
        (TokenType.SEMICOLON, ";"),
        (TokenType.EOF, ""),
    ]

    assert [(t.type, t.literal) for t in lex(src)] == expected


def test_keywords_lookup():
    assert lookup_ident("fn") == TokenType.FUNCTION
    assert lookup_ident("return") == TokenType.RETURN
    assert lookup_ident("lets") == TokenType.IDENT
    assert lookup_ident("If") == TokenType.IDENT


def test_identifier_run_stops_at_digits():
    tokens = lex("foo_bar x1")
    assert tokens[0] == Token(TokenType.IDENT, "foo_bar")
    assert tokens[1] == Token(TokenType.IDENT, "x")
    assert tokens[2] == Token(TokenType.INT, "1")


def test_eq_and_bang_at_end_of_input():
    assert [t.type for t in lex("=")] == [TokenType.ASSIGN, TokenType.EOF]
    assert [t.type for t in lex("!")] == [TokenType.BANG, TokenType.EOF]
    assert [t.type for t in lex("!==")] == [
        TokenType.NOT_EQ,
        TokenType.ASSIGN,
        TokenType.EOF,
    ]


def test_illegal_characters_do_not_stop_scanning():
    tokens = lex("a @ b $")
    assert [(t.type, t.literal) for t in tokens] == [
        (TokenType.IDENT, "a"),
        (TokenType.ILLEGAL, "@"),
        (TokenType.IDENT, "b"),
        (TokenType.ILLEGAL, "$"),
        (TokenType.EOF, ""),
    ]


def test_empty_string_literal():
    assert lex('""')[0] == Token(TokenType.STRING, "")


def test_unterminated_string_runs_to_end_and_reports():
    lexer = Lexer('let s = "abc')
    tokens = lexer.tokenize()

    assert tokens[-2] == Token(TokenType.STRING, "abc")
    assert tokens[-1].type == TokenType.EOF
    assert len(lexer.errors) == 1
    assert "unterminated string literal" in lexer.errors[0]
    assert "line 1, column 9" in lexer.errors[0]


def test_whitespace_kinds_are_skipped():
    tokens = lex(" \t\r\n 7 \n")
    assert tokens == [Token(TokenType.INT, "7"), Token(TokenType.EOF, "")]


def test_eof_is_returned_forever():
    lexer = Lexer("x")
    assert lexer.next_token().type == TokenType.IDENT
    for _ in range(3):
        assert lexer.next_token() == Token(TokenType.EOF, "")


@pytest.mark.parametrize(
    "src",
    [
        "",
        "   ",
        "let x = 5;",
        '"unterminated',
        "@#$%^&",
        "fn(a,b){a+b}(1,2)[0] != !-5",
        "\n\n\t",
    ],
)
def test_token_count_bounded_by_input_length(src):
    lexer = Lexer(src)
    calls = 0
    while True:
        calls += 1
        assert calls <= len(src) + 1
        if lexer.next_token().type == TokenType.EOF:
            break
    assert lexer.next_token().type == TokenType.EOF
