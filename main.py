from __future__ import annotations
import json
import sys
from typing import List, Optional, Tuple
from lexer import Lexer
from tokens import Token
from ast_nodes import Program
from parser import Parser
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_program(text: str) -> Tuple[Program, List[str]]:
    """Parse source text, returning the tree and the collected diagnostics."""
    parser = Parser(Lexer(text))
    program = parser.parse_program()
    return program, parser.errors


def parse_text(text: str, strict: bool = True) -> Program:
    """Parse source text; with `strict`, raise SyntaxError if anything was reported."""
    program, errors = parse_program(text)
    if strict and errors:
        raise SyntaxError("\n".join(errors))
    return program


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    print_surface: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> int:
    """Process a single program: lex, parse and optionally print stages.

    Returns 0 when the program parsed without errors and 1 otherwise. The
    tree built so far is still printed when errors were reported.
    """
    if print_tokens:
        tokens = lex(text)
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens[:50]):
            print(f"  {i:3}: {token}")
        if len(tokens) > 50:
            print(f"  ... and {len(tokens) - 50} more")

    program, errors = parse_program(text)

    if print_ast:
        print("\nAST:")
        print(PrettyPrinter.print_ast(program))

    if print_surface:
        print("\nRendered:")
        for stmt in program.statements:
            print(f"  {stmt}")

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(program), fh, indent=2)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(program, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    if errors:
        print(f"\n✗ Parser errors ({len(errors)}):")
        for msg in errors:
            print(f"  {msg}")
        return 1

    if print_ast:
        print("\n✓ Parse succeeded")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Lex and parse a program and print its syntax tree"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--expr", "-e", dest="expr", help="Source text to process directly"
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--surface",
        dest="print_surface",
        action="store_true",
        help="Print the canonical rendering of each statement",
    )
    parser.set_defaults(print_tokens=False, print_ast=True, print_surface=False)
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args(argv)

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1
    elif args.expr is not None:
        text = args.expr
    else:
        parser.print_help()
        return 0

    return process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        print_surface=args.print_surface,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
    )


if __name__ == "__main__":
    sys.exit(main())
