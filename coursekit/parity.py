"""Odd and even parity bits for bit strings."""

from __future__ import annotations

import sys


def _ones_odd(bits: str) -> bool:
    return bits.count("1") % 2 == 1


def odd_parity(bits: str) -> str:
    """Append the bit that makes the number of ones odd."""
    if not bits:
        return bits
    return bits + ("0" if _ones_odd(bits) else "1")


def even_parity(bits: str) -> str:
    """Append the bit that makes the number of ones even."""
    if not bits:
        return bits
    return bits + ("1" if _ones_odd(bits) else "0")


def main(argv: list[str] | None = None) -> int:
    """Read one line of bits and print its odd and even parity forms."""
    bits = sys.stdin.readline().rstrip("\n")
    print(f"odd: {odd_parity(bits)}")
    print(f"even:{even_parity(bits)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())