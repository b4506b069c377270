"""Check whether a line of text is a palindrome, ignoring whitespace."""

from __future__ import annotations

import sys
from collections.abc import Sequence

MAX_LEN = 80

_WHITESPACE = " \t\n\v\f\r"


def is_palindrome(text: str) -> bool:
    """Compare characters case-sensitively, skipping whitespace."""
    chars = [c for c in text if c not in _WHITESPACE]
    return chars == chars[::-1]


def main(argv: Sequence[str] | None = None) -> int:
    """Read one line from standard input and print 1 if it is a palindrome, else 0."""
    print("Enter a string: ", end="")
    line = sys.stdin.readline(MAX_LEN)
    if not line:
        return 1
    text = line.split("\n", 1)[0]
    print(f"You entered: {text}")
    print(int(is_palindrome(text)))
    return 0


if __name__ == "__main__":
    sys.exit(main())