"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small immutable `Token` dataclass holding a token type and
its literal text. Tokens are the atomic units produced by the lexer and
consumed by the parser; syntax tree nodes keep the token they were built
from so the original literal text is available for rendering.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict


class TokenType(Enum):
    # Identifiers and literals
    IDENT = auto()
    INT = auto()
    STRING = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    SLASH = auto()
    BANG = auto()

    EQ = auto()
    NOT_EQ = auto()
    LT = auto()
    GT = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    COMMA = auto()
    SEMICOLON = auto()

    # Keywords
    LET = auto()
    RETURN = auto()
    FUNCTION = auto()
    IF = auto()
    ELSE = auto()
    TRUE = auto()
    FALSE = auto()

    # Special
    EOF = auto()
    ILLEGAL = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    type: TokenType
    literal: str = ""

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.literal)})"


KEYWORDS: Dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


def lookup_ident(ident: str) -> TokenType:
    """Map identifier-shaped text to its keyword type, or IDENT."""
    return KEYWORDS.get(ident, TokenType.IDENT)
