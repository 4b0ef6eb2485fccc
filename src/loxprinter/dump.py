import sys
from typing import Sequence, TextIO

from lark.exceptions import LarkError

from .frontend.ast_statements import Statement
from .frontend.parser import ParseError, parse_program
from .printer import print_ast
from .writer import IndentingWriter, indented_output, surrounding_box_title


def render_program(statements: Sequence[Statement]) -> list[str]:
    return [print_ast(statement) for statement in statements]


def render_source(source: str) -> list[str]:
    return render_program(parse_program(source))


def dump_source(
    source: str,
    writer: IndentingWriter | None = None,
    with_title_box: bool = False,
) -> list[str]:
    """Print one Lisp form per top-level declaration and return the lines."""
    writer = writer or IndentingWriter()
    statements = parse_program(source)

    writer.debugln(f"[program: {len(statements)} declarations]")
    lines: list[str] = []
    with indented_output(writer):
        for index, statement in enumerate(statements):
            writer.debugln(f"[{index}: {type(statement).__name__}]")
            lines.append(print_ast(statement))

    if with_title_box:
        with surrounding_box_title(writer):
            writer.println("SYNTAX TREE")

    for line in lines:
        writer.println(line)

    return lines


def dump_for_cli(
    source: str,
    writer: IndentingWriter | None = None,
    stderr: TextIO | None = None,
) -> list[str] | None:
    stream = stderr if stderr is not None else sys.stderr

    try:
        return dump_source(source, writer)
    except (LarkError, ParseError) as error:
        print(f"Syntax error: {error}", file=stream)
        return None
