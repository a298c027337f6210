"""
Parser for the interpreted language front end.

Overview and approach:
- This parser is a hand-written recursive-descent parser for statements and
    a Pratt (precedence-climbing) parser for expressions. It pulls tokens from
    a `Lexer` on demand and keeps exactly two of them: `cur_token` and
    `peek_token`. Tokens are never pushed back.

Key points:
- Expression parsing:
    - Every token type that can start an expression has a prefix handler in
        `self.prefix_parse_fns`; every token type that can follow a left
        operand has an infix handler in `self.infix_parse_fns` and an entry
        in `PRECEDENCES`.
    - `parse_expression(precedence)` parses a prefix expression, then keeps
        binding infix operators while the peek token's precedence is strictly
        greater than `precedence`. Binary operators parse their right operand
        at their own precedence, which makes them left-associative.
    - Calls `f(x)` and index expressions `a[i]` are infix handlers with the
        two highest precedences, so they act as postfix operators.

- Statement parsing:
    - `let` and `return` statements, blocks, and expression statements (whose
        trailing semicolon is optional).

- Errors:
    - Nothing raises. Problems are recorded as messages in `self.errors`,
        the construct being parsed yields `None`, and `synchronize()` skips
        the rest of the failed statement (up to its `;`, a token starting a
        new statement, or the closing `}` of the enclosing block) before
        parsing resumes. Diagnostics produced by the lexer are folded into
        the same list as tokens are pulled.

Examples:
    - `-a * b` parses to `((-a) * b)`
    - `a + b * c` parses to `(a + (b * c))`
    - `add(1, 2)[0]` parses to `(add(1, 2)[0])`
"""

from __future__ import annotations
from enum import IntEnum
from typing import Callable, Dict, List, Optional
from tokens import Token, TokenType
from lexer import Lexer
from ast_nodes import *

# Signed 64-bit integer range for integer literals.
INT64_MAX = 2**63 - 1


class Precedence(IntEnum):
    LOWEST = 1
    EQUALS = 2  # ==
    LESSGREATER = 3  # > or <
    SUM = 4  # +
    PRODUCT = 5  # *
    PREFIX = 6  # -X or !X
    CALL = 7  # myFunction(X)
    INDEX = 8  # array[index]


PRECEDENCES: Dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
    TokenType.LBRACKET: Precedence.INDEX,
}

# Token types that may close a let/return statement in place of `;`.
STATEMENT_BOUNDARIES = (TokenType.EOF, TokenType.RBRACE)

# Token types that start a statement; error recovery stops in front of them.
STATEMENT_STARTS = (TokenType.LET, TokenType.RETURN)

PrefixParseFn = Callable[[], Optional[Expression]]
InfixParseFn = Callable[[Expression], Optional[Expression]]


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.errors: List[str] = []

        self.cur_token = Token(TokenType.EOF, "")
        self.peek_token = Token(TokenType.EOF, "")

        self.prefix_parse_fns: Dict[TokenType, PrefixParseFn] = {
            TokenType.IDENT: self.parse_identifier,
            TokenType.INT: self.parse_integer_literal,
            TokenType.STRING: self.parse_string_literal,
            TokenType.TRUE: self.parse_boolean,
            TokenType.FALSE: self.parse_boolean,
            TokenType.BANG: self.parse_prefix_expression,
            TokenType.MINUS: self.parse_prefix_expression,
            TokenType.LPAREN: self.parse_grouped_expression,
            TokenType.IF: self.parse_if_expression,
            TokenType.FUNCTION: self.parse_function_literal,
            TokenType.LBRACKET: self.parse_array_literal,
        }

        self.infix_parse_fns: Dict[TokenType, InfixParseFn] = {
            TokenType.PLUS: self.parse_infix_expression,
            TokenType.MINUS: self.parse_infix_expression,
            TokenType.ASTERISK: self.parse_infix_expression,
            TokenType.SLASH: self.parse_infix_expression,
            TokenType.EQ: self.parse_infix_expression,
            TokenType.NOT_EQ: self.parse_infix_expression,
            TokenType.LT: self.parse_infix_expression,
            TokenType.GT: self.parse_infix_expression,
            TokenType.LPAREN: self.parse_call_expression,
            TokenType.LBRACKET: self.parse_index_expression,
        }

        # Fill cur_token and peek_token.
        self.next_token()
        self.next_token()

    # Token buffer

    def next_token(self) -> None:
        """Shift the peek token into place and pull a new one from the lexer."""
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()
        if self.lexer.errors:
            self.errors.extend(self.lexer.errors)
            self.lexer.errors.clear()

    def cur_token_is(self, token_type: TokenType) -> bool:
        return self.cur_token.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the peek token has the given type, else record an error."""
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self.peek_error(token_type)
        return False

    def peek_error(self, token_type: TokenType) -> None:
        self.errors.append(
            f"expected next token to be {token_type}, got {self.peek_token.type} instead"
        )

    def no_prefix_parse_fn_error(self, token_type: TokenType) -> None:
        self.errors.append(f"no prefix parse function for {token_type} found")

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.cur_token.type, Precedence.LOWEST)

    # Program and statements

    def parse_program(self) -> Program:
        """Parse a complete program (sequence of statements)."""
        program = Program()

        while not self.cur_token_is(TokenType.EOF):
            stmt = self.parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            else:
                self.synchronize()
            self.next_token()

        return program

    def synchronize(self, closer: Optional[TokenType] = None) -> bool:
        """Skip the remaining tokens of a statement that failed to parse.

        Leaves `cur_token` on the last token to discard: the statement's own
        `;`, or the token right before a `let`/`return` or before `closer`.
        Braces opened while skipping are matched, so a `;` or `}` inside a
        nested block does not stop the skip. Returns True when `cur_token`
        is already the unmatched `closer`, which the caller must not step
        over.
        """
        depth = 0
        while not self.cur_token_is(TokenType.EOF):
            match self.cur_token.type:
                case TokenType.LBRACE:
                    depth += 1
                case TokenType.RBRACE if depth > 0:
                    depth -= 1
                case TokenType.RBRACE if closer == TokenType.RBRACE:
                    return True
                case TokenType.SEMICOLON if depth == 0:
                    return False

            if depth == 0 and (
                self.peek_token.type in STATEMENT_STARTS
                or (closer is not None and self.peek_token_is(closer))
            ):
                return False
            self.next_token()

        return False

    def parse_statement(self) -> Optional[Statement]:
        match self.cur_token.type:
            case TokenType.LET:
                return self.parse_let_statement()
            case TokenType.RETURN:
                return self.parse_return_statement()
            case _:
                return self.parse_expression_statement()

    def expect_statement_end(self) -> bool:
        """Consume the `;` closing a let/return statement.

        A missing semicolon is accepted right before end of input or a
        closing brace.
        """
        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()
            return True
        if self.peek_token.type in STATEMENT_BOUNDARIES:
            return True
        self.peek_error(TokenType.SEMICOLON)
        return False

    def parse_let_statement(self) -> Optional[LetStatement]:
        """Parse let statement: let ident = expr ;"""
        token = self.cur_token

        if not self.expect_peek(TokenType.IDENT):
            return None
        name = Identifier(token=self.cur_token, value=self.cur_token.literal)

        if not self.expect_peek(TokenType.ASSIGN):
            return None

        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)

        if value is None:
            # The right-hand side error is already recorded. Keep the binding
            # when the statement still ends cleanly; the `;` may be the very
            # token the expression failed on.
            if self.peek_token_is(TokenType.SEMICOLON):
                self.next_token()
            if self.cur_token.type in (TokenType.SEMICOLON, TokenType.EOF):
                return LetStatement(token=token, name=name, value=None)
            return None

        if not self.expect_statement_end():
            return None
        return LetStatement(token=token, name=name, value=value)

    def parse_return_statement(self) -> Optional[ReturnStatement]:
        """Parse return statement: return expr? ;"""
        token = self.cur_token

        return_value = None
        if not self.peek_token_is(TokenType.SEMICOLON) and (
            self.peek_token.type not in STATEMENT_BOUNDARIES
        ):
            self.next_token()
            return_value = self.parse_expression(Precedence.LOWEST)
            if return_value is None:
                if self.peek_token_is(TokenType.SEMICOLON):
                    self.next_token()
                return None

        if not self.expect_statement_end():
            return None
        return ReturnStatement(token=token, return_value=return_value)

    def parse_expression_statement(self) -> Optional[ExpressionStatement]:
        token = self.cur_token
        expression = self.parse_expression(Precedence.LOWEST)

        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()
        if expression is None:
            return None
        return ExpressionStatement(token=token, expression=expression)

    def parse_block_statement(self) -> Optional[BlockStatement]:
        """Parse a block of statements: { statement* }"""
        block = BlockStatement(token=self.cur_token)
        self.next_token()

        while not self.cur_token_is(TokenType.RBRACE):
            if self.cur_token_is(TokenType.EOF):
                self.errors.append(
                    f"expected next token to be {TokenType.RBRACE}, got {TokenType.EOF} instead"
                )
                return None
            stmt = self.parse_statement()
            if stmt is not None:
                block.statements.append(stmt)
            elif self.synchronize(TokenType.RBRACE):
                continue
            self.next_token()

        return block

    # Pratt loop

    def parse_expression(self, precedence: Precedence) -> Optional[Expression]:
        """Parse an expression whose operators bind tighter than `precedence`."""
        prefix = self.prefix_parse_fns.get(self.cur_token.type)
        if prefix is None:
            self.no_prefix_parse_fn_error(self.cur_token.type)
            return None
        left = prefix()

        while left is not None and precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.type)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)

        return left

    # Prefix handlers

    def parse_identifier(self) -> Expression:
        return Identifier(token=self.cur_token, value=self.cur_token.literal)

    def parse_integer_literal(self) -> Optional[Expression]:
        literal = self.cur_token.literal
        try:
            value = int(literal, 10)
        except ValueError:
            value = None
        if value is None or value > INT64_MAX:
            self.errors.append(f"could not parse {literal!r} as integer")
            return None
        return IntegerLiteral(token=self.cur_token, value=value)

    def parse_string_literal(self) -> Expression:
        return StringLiteral(token=self.cur_token, value=self.cur_token.literal)

    def parse_boolean(self) -> Expression:
        return Boolean(token=self.cur_token, value=self.cur_token_is(TokenType.TRUE))

    def parse_prefix_expression(self) -> Optional[Expression]:
        token = self.cur_token
        self.next_token()
        right = self.parse_expression(Precedence.PREFIX)
        if right is None:
            return None
        return PrefixExpression(token=token, operator=token.literal, right=right)

    def parse_grouped_expression(self) -> Optional[Expression]:
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        if expression is None:
            return None
        if not self.expect_peek(TokenType.RPAREN):
            return None
        return expression

    def parse_if_expression(self) -> Optional[Expression]:
        """Parse if expression: if (expr) { ... } else { ... }"""
        token = self.cur_token

        if not self.expect_peek(TokenType.LPAREN):
            return None
        self.next_token()
        condition = self.parse_expression(Precedence.LOWEST)
        if condition is None:
            return None
        if not self.expect_peek(TokenType.RPAREN):
            return None

        if not self.expect_peek(TokenType.LBRACE):
            return None
        consequence = self.parse_block_statement()
        if consequence is None:
            return None

        alternative = None
        if self.peek_token_is(TokenType.ELSE):
            self.next_token()
            if not self.expect_peek(TokenType.LBRACE):
                return None
            alternative = self.parse_block_statement()
            if alternative is None:
                return None

        return IfExpression(
            token=token,
            condition=condition,
            consequence=consequence,
            alternative=alternative,
        )

    def parse_function_literal(self) -> Optional[Expression]:
        """Parse function literal: fn (params) { ... }"""
        token = self.cur_token

        if not self.expect_peek(TokenType.LPAREN):
            return None
        parameters = self.parse_function_parameters()
        if parameters is None:
            return None

        if not self.expect_peek(TokenType.LBRACE):
            return None
        body = self.parse_block_statement()
        if body is None:
            return None

        return FunctionLiteral(token=token, parameters=parameters, body=body)

    def parse_function_parameters(self) -> Optional[List[Identifier]]:
        identifiers: List[Identifier] = []

        if self.peek_token_is(TokenType.RPAREN):
            self.next_token()
            return identifiers

        if not self.expect_peek(TokenType.IDENT):
            return None
        identifiers.append(Identifier(token=self.cur_token, value=self.cur_token.literal))

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            if not self.expect_peek(TokenType.IDENT):
                return None
            identifiers.append(
                Identifier(token=self.cur_token, value=self.cur_token.literal)
            )

        if not self.expect_peek(TokenType.RPAREN):
            return None
        return identifiers

    def parse_array_literal(self) -> Optional[Expression]:
        token = self.cur_token
        elements = self.parse_expression_list(TokenType.RBRACKET)
        if elements is None:
            return None
        return ArrayLiteral(token=token, elements=elements)

    def parse_expression_list(self, end: TokenType) -> Optional[List[Expression]]:
        """Parse a comma-separated expression list closed by `end`."""
        items: List[Expression] = []

        if self.peek_token_is(end):
            self.next_token()
            return items

        self.next_token()
        item = self.parse_expression(Precedence.LOWEST)
        if item is None:
            return None
        items.append(item)

        while self.peek_token_is(TokenType.COMMA):
            self.next_token()
            self.next_token()
            item = self.parse_expression(Precedence.LOWEST)
            if item is None:
                return None
            items.append(item)

        if not self.expect_peek(end):
            return None
        return items

    # Infix handlers

    def parse_infix_expression(self, left: Expression) -> Optional[Expression]:
        token = self.cur_token
        precedence = self.cur_precedence()
        self.next_token()
        right = self.parse_expression(precedence)
        if right is None:
            return None
        return InfixExpression(
            token=token, left=left, operator=token.literal, right=right
        )

    def parse_call_expression(self, function: Expression) -> Optional[Expression]:
        token = self.cur_token
        arguments = self.parse_expression_list(TokenType.RPAREN)
        if arguments is None:
            return None
        return CallExpression(token=token, function=function, arguments=arguments)

    def parse_index_expression(self, left: Expression) -> Optional[Expression]:
        token = self.cur_token
        self.next_token()
        index = self.parse_expression(Precedence.LOWEST)
        if index is None:
            return None
        if not self.expect_peek(TokenType.RBRACKET):
            return None
        return IndexExpression(token=token, left=left, index=index)
