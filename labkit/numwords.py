"""Spell out the integers 0 to 99 found in a text stream."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterator, Sequence
from contextlib import ExitStack
from typing import TextIO

PROG = "numwords"

ONES = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")

_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def number_to_words(num: int) -> str:
    """Return the English words for a number between 0 and 99."""
    if not 0 <= num <= 99:
        raise ValueError(f"number out of range 0-99: {num}")
    if num < 20:
        return ONES[num]
    tens, ones = divmod(num, 10)
    return TENS[tens] if ones == 0 else f"{TENS[tens]} {ONES[ones]}"


def _integers(text: str) -> Iterator[int]:
    position = 0
    while (match := _INT.match(text, position)) is not None:
        yield int(match.group(1))
        position = match.end()


def convert(stream: TextIO) -> Iterator[str]:
    """Yield words for each in-range integer until the first non-integer."""
    for number in _integers(stream.read()):
        if 0 <= number <= 99:
            yield number_to_words(number)


def main(argv: Sequence[str] | None = None) -> int:
    """Convert numbers from an input file (or stdin) to an output file (or stdout)."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 2:
        print(
            f"Error: too many arguments. Usage: {PROG} [input_file] [output_file]",
            file=sys.stderr,
        )
        return 1
    with ExitStack() as stack:
        source: TextIO = sys.stdin
        sink: TextIO = sys.stdout
        if args:
            try:
                source = stack.enter_context(open(args[0], encoding="utf-8"))
            except OSError as exc:
                print(f"Error opening input file '{args[0]}': {exc.strerror}", file=sys.stderr)
                return 1
        if len(args) == 2:
            try:
                sink = stack.enter_context(open(args[1], "w", encoding="utf-8"))
            except OSError as exc:
                print(f"Error opening output file '{args[1]}': {exc.strerror}", file=sys.stderr)
                return 1
        for words in convert(source):
            sink.write(words + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())