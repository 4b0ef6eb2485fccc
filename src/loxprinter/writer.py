import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

# DEBUG = True
DEBUG = False

DIVISION_LINE_SIZE = 80


class IndentingWriter:
    """Line-oriented output with a debug channel that only speaks when DEBUG is on."""

    def __init__(self, indent_size: int = 3, stream: TextIO | None = None) -> None:
        self._indent_size = indent_size
        self._depth = 0
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved on each write so that redirected stdout (e.g. under pytest) is honored.
        return self._stream if self._stream is not None else sys.stdout

    def debugln(self, message: str) -> None:
        if DEBUG:
            self._write_line(message)

    def println(self, message: str) -> None:
        self._write_line(message)

    def indent(self) -> None:
        if DEBUG:
            self._depth += 1

    def dedent(self) -> None:
        if DEBUG:
            self._depth -= 1

    def print_division_line(self) -> None:
        self.stream.write("-" * DIVISION_LINE_SIZE + "\n")

    def _write_line(self, message: str) -> None:
        margin = " " * self._indent_size * self._depth if DEBUG else ""
        self.stream.write(f"{margin}{message}\n")


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()


@contextmanager
def surrounding_box_title(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.print_division_line()
    try:
        yield
    finally:
        output_writer.print_division_line()
