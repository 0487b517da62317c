"""Convert a binary numeral to decimal using a stack."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from nodekit.stack import Stack


def binary_to_decimal(text: str) -> int:
    """Return the value of the binary numeral ``text``.

    Digits are pushed in reading order, then popped so the least significant
    digit comes first and is weighted by increasing powers of two.
    """
    digits = Stack()
    for char in text:
        if char not in "01":
            raise ValueError(f"not a binary digit: {char!r}")
        digits.push(int(char))

    result = 0
    weight = 1
    while not digits.is_empty():
        result += digits.pop() * weight
        weight *= 2
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a binary number and print its decimal value."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        text = args[0]
    else:
        print("Enter a binary number: ", end="", flush=True)
        tokens = sys.stdin.readline().split()
        if not tokens:
            print("no binary number given", file=sys.stderr)
            return 1
        text = tokens[0]

    try:
        value = binary_to_decimal(text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Decimal: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())