"""Interactive calculator over six named 4x4 matrices."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from labkit.matrix import Matrix

MAX_ARGS = 20
MATRIX_NAMES = ("A_MAT", "B_MAT", "C_MAT", "D_MAT", "E_MAT", "F_MAT")
PROMPT = "\nEnter command: "

_WHITESPACE = " \t\n\v\f\r"
_COMMAND = re.compile(r"[ \t\n\v\f\r]*([^ \t\n\v\f\r]+)(.*)", re.DOTALL)
_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _atof(text: str) -> float:
    """Parse the leading float of text, or 0.0 when there is none."""
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def split_args(text: str) -> list[str]:
    """Split on commas, dropping empty fields and trimming whitespace."""
    return [token.strip(_WHITESPACE) for token in text.split(",") if token][:MAX_ARGS]


class Calculator:
    """Executes matrix commands against the named matrices."""

    def __init__(self) -> None:
        self.matrices: dict[str, Matrix] = {name: Matrix() for name in MATRIX_NAMES}
        self.stopped = False

    def execute(self, line: str) -> str:
        """Run one command line and return the text it produces."""
        match = _COMMAND.match(line.split("\n", 1)[0])
        if match is None:
            return "Invalid command format.\n"
        command, rest = match.groups()
        if command == "stop":
            self.stopped = True
            return "Program terminated.\n"
        handlers: dict[str, Callable[[list[str]], str]] = {
            "read_mat": self._read_mat,
            "print_mat": self._print_mat,
            "add_mat": lambda args: self._binary(args, Matrix.add),
            "sub_mat": lambda args: self._binary(args, Matrix.sub),
            "mul_mat": lambda args: self._binary(args, Matrix.mul),
            "mul_scalar": self._mul_scalar,
            "trans_mat": self._trans_mat,
        }
        handler = handlers.get(command)
        if handler is None:
            return "Undefined command name\n"
        return handler(split_args(rest))

    def run(self, lines: Iterable[str], out: TextIO) -> bool:
        """Process lines until 'stop' or exhaustion; return whether stopped."""
        out.write(PROMPT)
        for raw in lines:
            out.write(f"You entered: {raw}")
            line = raw.split("\n", 1)[0]
            if line.strip(_WHITESPACE):
                out.write(self.execute(line))
                if self.stopped:
                    return True
            out.write(PROMPT)
        out.write("EOF encountered without 'stop' command.\n")
        return False

    def _read_mat(self, args: list[str]) -> str:
        if not args:
            return "Missing matrix name\n"
        target = self.matrices.get(args[0])
        if target is None:
            return "Undefined matrix name\n"
        target.read(_atof(arg) for arg in args[1:])
        return ""

    def _print_mat(self, args: list[str]) -> str:
        if len(args) != 1:
            return "Incorrect number of arguments\n"
        target = self.matrices.get(args[0])
        if target is None:
            return "Undefined matrix name\n"
        return target.format()

    def _binary(self, args: list[str], operation: Callable[[Matrix, Matrix], Matrix]) -> str:
        if len(args) != 3:
            return "Incorrect number of arguments\n"
        result_name, left_name, right_name = args
        if not all(name in self.matrices for name in args):
            return "Undefined matrix name\n"
        self.matrices[result_name] = operation(
            self.matrices[left_name], self.matrices[right_name]
        )
        return ""

    def _mul_scalar(self, args: list[str]) -> str:
        if len(args) != 3:
            return "Incorrect number of arguments\n"
        result_name, scalar, source_name = args
        if result_name not in self.matrices or source_name not in self.matrices:
            return "Undefined matrix name\n"
        self.matrices[result_name] = self.matrices[source_name].scaled(_atof(scalar))
        return ""

    def _trans_mat(self, args: list[str]) -> str:
        if len(args) != 2:
            return "Incorrect number of arguments\n"
        result_name, source_name = args
        if result_name not in self.matrices or source_name not in self.matrices:
            return "Undefined matrix name\n"
        self.matrices[result_name] = self.matrices[source_name].transposed()
        return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on standard input and output."""
    Calculator().run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())