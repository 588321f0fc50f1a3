"""Cyclic redundancy check encoding of bit strings."""

from __future__ import annotations

import sys


def parse_bits(text: str) -> tuple[int, int]:
    """Return the value of a bit string and its length; non-'1' chars are 0."""
    value = 0
    for char in text:
        value = (value << 1) | (char == "1")
    return value, len(text)


def crc_encode(info: str, poly: str) -> int:
    """Return the codeword: info bits followed by the CRC remainder."""
    info_value, info_len = parse_bits(info)
    poly_value, poly_len = parse_bits(poly)
    if not poly.startswith("1"):
        raise ValueError("generator polynomial must start with 1")
    if info_len < poly_len:
        raise ValueError("information bits must be at least as long as the polynomial")
    degree = poly_len - 1
    remainder = info_value << degree
    for shift in reversed(range(info_len)):
        if remainder >> (shift + degree) & 1:
            remainder ^= poly_value << shift
    return (info_value << degree) | remainder


def format_binary(value: int) -> str:
    """Return the binary digits of value without leading zeros."""
    return format(value, "b")


def main(argv: list[str] | None = None) -> int:
    """Prompt for information bits and a polynomial, print the codeword."""
    try:
        info = input("Enter the information bits:")
        poly = input("Enter the POLY:")
        code = crc_encode(info, poly)
    except EOFError:
        print("\nunexpected end of input", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nerror: {exc}", file=sys.stderr)
        return 1
    print(f"The CRC code:{format_binary(code)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())