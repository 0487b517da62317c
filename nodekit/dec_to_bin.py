"""Convert a decimal number to binary using a stack."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from nodekit.stack import Stack


def decimal_to_binary(number: int) -> str:
    """Return the binary digits of ``number``, most significant first.

    Numbers of zero or less have no digits and give an empty string.
    """
    remainders = Stack()
    while number > 0:
        remainders.push(number % 2)
        number //= 2
    return "".join(str(bit) for bit in remainders)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a decimal number and print its binary digits."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        text = args[0]
    else:
        print("Enter Decimal Number: ", end="", flush=True)
        tokens = sys.stdin.readline().split()
        if not tokens:
            print("no decimal number given", file=sys.stderr)
            return 1
        text = tokens[0]

    try:
        number = int(text)
    except ValueError:
        print(f"not a decimal number: {text!r}", file=sys.stderr)
        return 1

    bits = decimal_to_binary(number)
    print("Binary: " + "".join(f"{bit} " for bit in bits))
    return 0


if __name__ == "__main__":
    sys.exit(main())