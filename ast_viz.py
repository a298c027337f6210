"""Graphviz visualization helpers for syntax trees.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). Optionally `write_and_render` can write the file to disk.

Node layout: each syntax node is rendered as an HTML-like table node with
the node kind in bold and, where it has one, its operator, name or value
underneath. Edges point from parent to child and are labelled with the
child's field name (`left`, `arg[0]`, `stmt[2]`, ...).
"""

from typing import List, Optional, Tuple
import html
from graphviz import Digraph
from ast_nodes import *


def _detail(node: ASTNode) -> str:
    """Return the short text shown under the node kind, if any."""
    match node:
        case Identifier() | IntegerLiteral() | Boolean():
            return str(node)
        case StringLiteral():
            return repr(node.value)
        case PrefixExpression() | InfixExpression():
            return node.operator
        case LetStatement():
            return node.name.value
        case FunctionLiteral():
            return "(" + ", ".join(p.value for p in node.parameters) + ")"
    return ""


def _children(node: ASTNode) -> List[Tuple[str, ASTNode]]:
    """Return (edge label, child) pairs in source order."""
    match node:
        case Program() | BlockStatement():
            return [(f"stmt[{i}]", s) for i, s in enumerate(node.statements)]
        case LetStatement():
            return [("value", node.value)] if node.value is not None else []
        case ReturnStatement():
            if node.return_value is None:
                return []
            return [("value", node.return_value)]
        case ExpressionStatement():
            if node.expression is None:
                return []
            return [("expression", node.expression)]
        case PrefixExpression():
            return [("right", node.right)]
        case InfixExpression():
            return [("left", node.left), ("right", node.right)]
        case IfExpression():
            out = [("condition", node.condition), ("then", node.consequence)]
            if node.alternative is not None:
                out.append(("else", node.alternative))
            return out
        case FunctionLiteral():
            return [("body", node.body)]
        case CallExpression():
            out = [("function", node.function)]
            out.extend((f"arg[{i}]", a) for i, a in enumerate(node.arguments))
            return out
        case ArrayLiteral():
            return [(f"elem[{i}]", e) for i, e in enumerate(node.elements)]
        case IndexExpression():
            return [("left", node.left), ("index", node.index)]
    return []


def _node_html(node: ASTNode) -> str:
    kind = html.escape(type(node).__name__)
    detail = html.escape(_detail(node))
    # Avoid empty FONT elements which some Graphviz versions reject
    detail_row = ""
    if detail:
        detail_row = f'<TR><TD><FONT POINT-SIZE="10">{detail}</FONT></TD></TR>'
    return (
        f'<<TABLE BORDER="0" CELLBORDER="1" CELLSPACING="0">'
        f"<TR><TD><B>{kind}</B></TD></TR>{detail_row}</TABLE>>"
    )


def render_ast_dot(root: ASTNode, title: Optional[str] = None) -> Digraph:
    """Return a graphviz.Digraph for the tree rooted at `root`.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    if title:
        dot.attr(label=title)

    # Depth-first walk with an explicit stack.
    counter = 0
    stack: List[Tuple[ASTNode, Optional[str], str]] = [(root, None, "")]
    while stack:
        node, parent_id, edge_label = stack.pop()
        node_id = f"n{counter}"
        counter += 1
        dot.node(node_id, label=_node_html(node), shape="plaintext")
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=edge_label)
        # push in reverse so children are emitted left to right
        for label, child in reversed(_children(node)):
            stack.append((child, node_id, label))

    return dot


def write_and_render(
    root: ASTNode,
    out_path: str,
    fmt: str = "svg",
    title: Optional[str] = None,
) -> None:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(program, 'out/ast', fmt='png') will create
    out/ast.png (requires Graphviz)."""
    dot = render_ast_dot(root, title=title)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
