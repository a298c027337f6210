"""Syntax tree node definitions for the interpreted language.

This module defines the concrete node dataclasses built by the parser and
consumed read-only by a downstream evaluator. Each node is a dataclass that
carries the token it was built from (for its literal text) and the relevant
child nodes. The `NodeType` enum identifies node kinds so consumers can
dispatch on `node.type` or pattern-match on the node classes.

Conventions:
- All node dataclasses inherit from `ASTNode` through one of the two
    capability bases, `Statement` or `Expression`. `Program` is the root and
    is neither.
- `token_literal()` returns the literal of the node's representative token.
- `str(node)` produces the canonical rendering of the node, e.g.
    `(1 + (2 * 3))` for `1 + 2 * 3`. The rendering makes precedence explicit
    and is used by tests; it is not meant to be lexed again in general
    (string literals and blocks lose their delimiters).

Limits:
- Rendering a chain of infix operators along the left operand (what
    `a + b + c + ...` parses to) is iterative. Every other nesting (prefix
    operators, parenthesized right operands, nested calls, arrays and
    blocks) recurses once per level, as do `PrettyPrinter.print_ast` and
    `ast_to_json`, so trees nested more deeply than Python's recursion
    limit (about 1000 levels by default) raise `RecursionError` there.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, List
from tokens import Token


class NodeType(Enum):
    PROGRAM = auto()
    LET_STMT = auto()
    RETURN_STMT = auto()
    EXPR_STMT = auto()
    BLOCK = auto()
    IDENTIFIER = auto()
    INT_LITERAL = auto()
    STRING_LITERAL = auto()
    BOOL_LITERAL = auto()
    PREFIX = auto()
    INFIX = auto()
    IF_EXPR = auto()
    FUNCTION_LITERAL = auto()
    CALL = auto()
    ARRAY_LITERAL = auto()
    INDEX = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType
    token: Optional[Token] = None

    def token_literal(self) -> str:
        return self.token.literal if self.token is not None else ""


@dataclass
class Statement(ASTNode):
    pass


@dataclass
class Expression(ASTNode):
    pass


def _join(nodes: List[ASTNode]) -> str:
    return ", ".join(str(n) for n in nodes)


# Expression Nodes
@dataclass
class Identifier(Expression):
    type: NodeType = NodeType.IDENTIFIER
    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass
class IntegerLiteral(Expression):
    type: NodeType = NodeType.INT_LITERAL
    value: int = 0

    def __str__(self) -> str:
        return self.token_literal() or str(self.value)


@dataclass
class StringLiteral(Expression):
    type: NodeType = NodeType.STRING_LITERAL
    value: str = ""

    def __str__(self) -> str:
        return self.value


@dataclass
class Boolean(Expression):
    type: NodeType = NodeType.BOOL_LITERAL
    value: bool = False

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass
class PrefixExpression(Expression):
    type: NodeType = NodeType.PREFIX
    operator: str = ""
    right: Expression = field(default_factory=lambda: Identifier())

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass
class InfixExpression(Expression):
    type: NodeType = NodeType.INFIX
    left: Expression = field(default_factory=lambda: Identifier())
    operator: str = ""
    right: Expression = field(default_factory=lambda: Identifier())

    def __str__(self) -> str:
        # Left-associative chains nest down the left operand; walk that spine
        # with a loop so long sums render without deep recursion.
        chain = []
        node: Expression = self
        while isinstance(node, InfixExpression):
            chain.append(node)
            node = node.left
        out = str(node)
        for infix in reversed(chain):
            out = f"({out} {infix.operator} {infix.right})"
        return out


@dataclass
class IfExpression(Expression):
    type: NodeType = NodeType.IF_EXPR
    condition: Expression = field(default_factory=lambda: Boolean())
    consequence: BlockStatement = field(default_factory=lambda: BlockStatement())
    alternative: Optional[BlockStatement] = None

    def __str__(self) -> str:
        out = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            out += f"else {self.alternative}"
        return out


@dataclass
class FunctionLiteral(Expression):
    type: NodeType = NodeType.FUNCTION_LITERAL
    parameters: List[Identifier] = field(default_factory=list)
    body: BlockStatement = field(default_factory=lambda: BlockStatement())

    def __str__(self) -> str:
        return f"fn({_join(self.parameters)}){self.body}"


@dataclass
class CallExpression(Expression):
    type: NodeType = NodeType.CALL
    function: Expression = field(default_factory=lambda: Identifier())
    arguments: List[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.function}({_join(self.arguments)})"


@dataclass
class ArrayLiteral(Expression):
    type: NodeType = NodeType.ARRAY_LITERAL
    elements: List[Expression] = field(default_factory=list)

    def __str__(self) -> str:
        return f"[{_join(self.elements)}]"


@dataclass
class IndexExpression(Expression):
    type: NodeType = NodeType.INDEX
    left: Expression = field(default_factory=lambda: Identifier())
    index: Expression = field(default_factory=lambda: IntegerLiteral())

    def __str__(self) -> str:
        return f"({self.left}[{self.index}])"


# Statement Nodes
@dataclass
class LetStatement(Statement):
    type: NodeType = NodeType.LET_STMT
    name: Identifier = field(default_factory=lambda: Identifier())
    # None only when the right-hand side could not be parsed
    value: Optional[Expression] = None

    def __str__(self) -> str:
        value = str(self.value) if self.value is not None else ""
        return f"let {self.name} = {value};"


@dataclass
class ReturnStatement(Statement):
    type: NodeType = NodeType.RETURN_STMT
    return_value: Optional[Expression] = None

    def __str__(self) -> str:
        value = str(self.return_value) if self.return_value is not None else ""
        return f"return {value};"


@dataclass
class ExpressionStatement(Statement):
    type: NodeType = NodeType.EXPR_STMT
    expression: Optional[Expression] = None

    def __str__(self) -> str:
        return str(self.expression) if self.expression is not None else ""


@dataclass
class BlockStatement(Statement):
    type: NodeType = NodeType.BLOCK
    statements: List[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


# Program Node
@dataclass
class Program(ASTNode):
    type: NodeType = NodeType.PROGRAM
    statements: List[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)
