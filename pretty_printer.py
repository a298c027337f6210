"""Pretty-printer for the syntax tree.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders a
syntax tree into a readable multi-line string. The printer is intentionally
simple and intended for debugging, tests and development. The canonical
one-line rendering of a node is `str(node)`. The printer recurses once per
tree level, so it is limited by the interpreter recursion limit.

Examples:
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print a syntax tree and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case IntegerLiteral(value=v):
                lines.append(f"{indent_str}{prefix}IntegerLiteral({v})")

            case StringLiteral(value=v):
                lines.append(f"{indent_str}{prefix}StringLiteral({v!r})")

            case Boolean(value=v):
                lines.append(f"{indent_str}{prefix}Boolean({str(node)})")

            case Identifier(value=n):
                lines.append(f"{indent_str}{prefix}Identifier({n})")

            case PrefixExpression(operator=op, right=right):
                lines.append(f"{indent_str}{prefix}Prefix({op})")
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case InfixExpression(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}Infix({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case IfExpression(condition=cond, consequence=then_b, alternative=else_b):
                lines.append(f"{indent_str}{prefix}If")
                lines.append(PrettyPrinter.print_ast(cond, indent + 4, "condition: "))
                lines.append(PrettyPrinter.print_ast(then_b, indent + 4, "then: "))
                if else_b is not None:
                    lines.append(PrettyPrinter.print_ast(else_b, indent + 4, "else: "))

            case FunctionLiteral(parameters=params, body=body):
                names = ", ".join(p.value for p in params)
                lines.append(f"{indent_str}{prefix}FunctionLiteral(params=[{names}])")
                lines.append(PrettyPrinter.print_ast(body, indent + 4, "body: "))

            case CallExpression(function=func, arguments=args):
                lines.append(f"{indent_str}{prefix}Call")
                lines.append(PrettyPrinter.print_ast(func, indent + 2, "function: "))
                for i, arg in enumerate(args):
                    lines.append(PrettyPrinter.print_ast(arg, indent + 4, f"arg[{i}]: "))

            case ArrayLiteral(elements=elems):
                lines.append(f"{indent_str}{prefix}ArrayLiteral")
                for i, elem in enumerate(elems):
                    lines.append(PrettyPrinter.print_ast(elem, indent + 4, f"elem[{i}]: "))

            case IndexExpression(left=left, index=idx):
                lines.append(f"{indent_str}{prefix}Index")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(idx, indent + 2, "index: "))

            case LetStatement(name=name, value=value):
                init_str = "" if value is not None else " = <missing>"
                lines.append(f"{indent_str}{prefix}Let({name.value}{init_str})")
                if value is not None:
                    lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ReturnStatement(return_value=value):
                lines.append(f"{indent_str}{prefix}Return")
                if value is not None:
                    lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case ExpressionStatement(expression=expr):
                lines.append(f"{indent_str}{prefix}ExpressionStatement")
                if expr is not None:
                    lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case BlockStatement(statements=stmts):
                lines.append(f"{indent_str}{prefix}Block")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case Program(statements=stmts):
                lines.append(f"{indent_str}{prefix}Program")
                for i, stmt in enumerate(stmts):
                    lines.append(PrettyPrinter.print_ast(stmt, indent + 4, f"stmt[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)
