"""Hamming code generation with even parity check bits."""

from __future__ import annotations

import sys
from functools import reduce
from operator import xor

MAX_INFO_BITS = 26


def check_bit_count(k: int) -> int:
    """Return the number of check bits needed for k information bits."""
    if k < 0:
        raise ValueError("bit count cannot be negative")
    r = 2
    while k + 1 > 2**r - r:
        r += 1
    return r


def is_check_position(position: int, r: int) -> bool:
    """Tell whether a 1-based position holds a check bit when r are used."""
    if position < 1 or position > 2 ** (r - 1):
        return False
    return position & (position - 1) == 0


def hamming_encode(bits: str) -> str:
    """Return the Hamming code word for a string of information bits."""
    if not bits:
        raise ValueError("no information bits")
    if len(bits) > MAX_INFO_BITS:
        raise ValueError(f"at most {MAX_INFO_BITS} information bits are supported")
    if set(bits) - {"0", "1"}:
        raise ValueError("information bits must be 0 or 1")
    r = check_bit_count(len(bits))
    length = len(bits) + r
    data = iter(bits)
    checks = [pos for pos in range(1, length + 1) if is_check_position(pos, r)]
    code = {
        pos: 0 if pos in checks else int(next(data)) for pos in range(1, length + 1)
    }
    for check in checks:
        code[check] = reduce(
            xor,
            (bit for pos, bit in code.items() if pos not in checks and pos & check),
            0,
        )
    return "".join(str(code[pos]) for pos in range(1, length + 1))


def main(argv: list[str] | None = None) -> int:
    """Read information bits from standard input and print the code word."""
    words = sys.stdin.read().split()
    if not words:
        print("no information bits", file=sys.stderr)
        return 1
    try:
        print(hamming_encode(words[0][:MAX_INFO_BITS]))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())