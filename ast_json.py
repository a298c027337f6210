"""Convert syntax tree nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the node. Every dict carries a
`node_type` key naming the node class plus the node's own fields. The
conversion recurses once per tree level.
"""

from typing import Any, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    match node:
        # literals
        case Identifier():
            return {"node_type": "Identifier", "value": node.value}
        case IntegerLiteral():
            return {"node_type": "IntegerLiteral", "value": node.value}
        case StringLiteral():
            return {"node_type": "StringLiteral", "value": node.value}
        case Boolean():
            return {"node_type": "Boolean", "value": node.value}
        # expressions
        case PrefixExpression():
            return {
                "node_type": "PrefixExpression",
                "operator": node.operator,
                "right": ast_to_json(node.right),
            }
        case InfixExpression():
            return {
                "node_type": "InfixExpression",
                "operator": node.operator,
                "left": ast_to_json(node.left),
                "right": ast_to_json(node.right),
            }
        case IfExpression():
            return {
                "node_type": "IfExpression",
                "condition": ast_to_json(node.condition),
                "consequence": ast_to_json(node.consequence),
                "alternative": ast_to_json(node.alternative),
            }
        case FunctionLiteral():
            return {
                "node_type": "FunctionLiteral",
                "parameters": [p.value for p in node.parameters],
                "body": ast_to_json(node.body),
            }
        case CallExpression():
            return {
                "node_type": "CallExpression",
                "function": ast_to_json(node.function),
                "arguments": [ast_to_json(a) for a in node.arguments],
            }
        case ArrayLiteral():
            return {
                "node_type": "ArrayLiteral",
                "elements": [ast_to_json(e) for e in node.elements],
            }
        case IndexExpression():
            return {
                "node_type": "IndexExpression",
                "left": ast_to_json(node.left),
                "index": ast_to_json(node.index),
            }
        # statements and the root
        case LetStatement():
            return {
                "node_type": "LetStatement",
                "name": node.name.value,
                "value": ast_to_json(node.value),
            }
        case ReturnStatement():
            return {
                "node_type": "ReturnStatement",
                "return_value": ast_to_json(node.return_value),
            }
        case ExpressionStatement():
            return {
                "node_type": "ExpressionStatement",
                "expression": ast_to_json(node.expression),
            }
        case BlockStatement():
            return {
                "node_type": "BlockStatement",
                "statements": [ast_to_json(s) for s in node.statements],
            }
        case Program():
            return {
                "node_type": "Program",
                "statements": [ast_to_json(s) for s in node.statements],
            }

    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")
