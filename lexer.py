"""
Lexer for the interpreted language front end.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a stream of `Token` objects defined
    in `tokens.py`, one token per call to `next_token()`.
- It recognizes keywords (`fn`, `let`, `true`, `false`, `if`, `else`,
    `return`), identifiers, integer literals, double-quoted string literals,
    single-character operators and delimiters, and the two-character
    operators `==` and `!=`. Whitespace is skipped before every token.

Examples:
    Input:  "let add = fn(a, b) { a + b; };"
    Tokens: [LET, IDENT('add'), ASSIGN, FUNCTION, LPAREN, IDENT('a'), ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- `=` and `!` look one character ahead so `==` and `!=` are not split in two.
    Lookahead returns `None` past the end of the input.
- Identifiers are scanned and then mapped to keywords using `tokens.KEYWORDS`.
- Integer literals keep their digit text; conversion to a number is left to
    the parser so out-of-range values are reported there.
- Unrecognized characters become `ILLEGAL` tokens and scanning continues.
    The lexer never raises; an unterminated string literal is returned as a
    `STRING` token holding the rest of the input and a diagnostic is appended
    to `self.errors`.

Every call advances past at least one character unless the input is
exhausted, after which `EOF` is returned on every call.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType, lookup_ident

WHITESPACE = (" ", "\t", "\n", "\r")

SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}


def is_letter(ch: Optional[str]) -> bool:
    return ch is not None and (("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_")


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and "0" <= ch <= "9"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None
        self.errors: List[str] = []

    def error(self, message: str, line: int, column: int) -> None:
        self.errors.append(f"Lexical error at line {line}, column {column}: {message}")

    def advance(self) -> None:
        """Advance to next character."""
        # Maintain `self.pos`, `self.current_char`, and update `line`/`column`
        # counters. Newlines reset the column and increment the line number.
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char in WHITESPACE:
            self.advance()

    def integer(self) -> str:
        """Scan a run of digits and return its text."""
        start = self.pos
        while is_digit(self.current_char):
            self.advance()
        return self.text[start : self.pos]

    def identifier(self) -> str:
        """Scan an identifier or keyword."""
        start = self.pos
        while is_letter(self.current_char):
            self.advance()
        return self.text[start : self.pos]

    def string(self) -> str:
        """Scan a string literal; the quotes are not part of the result."""
        start_line, start_col = self.line, self.column
        self.advance()  # opening quote
        start = self.pos

        while self.current_char is not None and self.current_char != '"':
            self.advance()

        value = self.text[start : self.pos]
        if self.current_char is None:
            self.error("unterminated string literal", start_line, start_col)
        else:
            self.advance()  # closing quote
        return value

    def next_token(self) -> Token:
        """Return the next token, or EOF once the input is exhausted."""
        self.skip_whitespace()

        ch = self.current_char
        if ch is None:
            return Token(TokenType.EOF, "")

        if ch == "=":
            if self.peek_char() == "=":
                self.advance()
                self.advance()
                return Token(TokenType.EQ, "==")
            self.advance()
            return Token(TokenType.ASSIGN, "=")

        if ch == "!":
            if self.peek_char() == "=":
                self.advance()
                self.advance()
                return Token(TokenType.NOT_EQ, "!=")
            self.advance()
            return Token(TokenType.BANG, "!")

        token_type = SINGLE_CHAR_TOKENS.get(ch)
        if token_type is not None:
            self.advance()
            return Token(token_type, ch)

        if ch == '"':
            return Token(TokenType.STRING, self.string())

        if is_letter(ch):
            ident = self.identifier()
            return Token(lookup_ident(ident), ident)

        if is_digit(ch):
            return Token(TokenType.INT, self.integer())

        self.advance()
        return Token(TokenType.ILLEGAL, ch)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, ending with one EOF."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
