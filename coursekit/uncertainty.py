"""Measurement uncertainty: type A, type B and combined, from data files."""

from __future__ import annotations

import argparse
import math
import re
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, Sequence, Union

MIN_MEASUREMENTS = 5
CONFIDENCE = "P=(0.683)"

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

NonPositivePolicy = Union[bool, Callable[[float], bool]]


class UncertaintyError(Exception):
    """Raised when the input data cannot be used for the calculation."""


class Distribution(Enum):
    """Assumed error distribution, numbered as the menu offers them."""

    NORMAL = 1
    UNIFORM = 2
    TRIANGULAR = 3
    ARCSINE = 4

    def coefficient(self) -> float:
        """Return the confidence coefficient C that divides the instrument error."""
        return {
            Distribution.NORMAL: 3.0,
            Distribution.UNIFORM: math.sqrt(3.0),
            Distribution.TRIANGULAR: math.sqrt(6.0),
            Distribution.ARCSINE: math.sqrt(2.0),
        }[self]


@dataclass(frozen=True)
class Measurements:
    """Measured values that all carry the same number of decimal places."""

    values: tuple[float, ...]
    decimals: int

    def mean(self) -> float:
        """Return the arithmetic mean of the values."""
        if not self.values:
            raise UncertaintyError("data.txt没有数据!")
        return sum(self.values) / len(self.values)


def _numbers(text: str) -> Iterator[str]:
    for match in _NUMBER_RE.finditer(text):
        yield match.group()


def _decimal_places(token: str) -> int:
    if "." not in token:
        return 0
    return len(token) - token.index(".") - 1


def parse_measurements(
    text: str, allow_nonpositive: NonPositivePolicy = False
) -> Measurements:
    """Parse measured values, skipping anything that is not a number.

    ``allow_nonpositive`` is either a flag or a callable asked once, on the
    first non-positive value; a true answer stops further sign checks.
    """
    values: list[float] = []
    decimals = 0
    checking = True
    for token in _numbers(text):
        value = float(token)
        if checking and value <= 0:
            allowed = (
                allow_nonpositive(value)
                if callable(allow_nonpositive)
                else allow_nonpositive
            )
            if not allowed:
                raise UncertaintyError("data.txt的数据中有非正数")
            checking = False
        places = _decimal_places(token)
        if not values:
            decimals = places
        elif places != decimals:
            raise UncertaintyError(
                f"{value:f}的小数位数与前一个测量值不同,请检查data.txt"
            )
        values.append(value)
    return Measurements(tuple(values), decimals)


def check_size(count: int) -> None:
    """Raise unless there are at least five measurements."""
    if count == 0:
        raise UncertaintyError("data.txt没有数据!")
    if count < MIN_MEASUREMENTS:
        raise UncertaintyError("data.txt数据少于5个!")


def read_unit(path: str | Path) -> str:
    """Return the unit of measurement: the first line of the unit file."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        raise UncertaintyError(f"{path.name}打开失败!") from None
    if not content:
        raise UncertaintyError(f"{path.name}没有数据!")
    return content.splitlines()[0] if content.splitlines() else ""


def read_delta(text: str) -> float:
    """Return the instrument error: the last number in the text."""
    delta = 0.0
    for token in _numbers(text):
        delta = float(token)
    if delta == 0:
        raise UncertaintyError("delta.txt没有数据")
    return delta


def round_uncertainty(value: float) -> tuple[float, int]:
    """Round an uncertainty up to its first significant decimal digit.

    A leading digit of 1 or 2 keeps one more digit. Returns the rounded
    value and the number of decimal places to print it with.
    """
    text = f"{value:f}"
    point = text.index(".")
    fraction = text[point:]
    position = next(
        (i for i, digit in enumerate(fraction[1:], start=1) if digit != "0"), None
    )
    if position is None:
        raise UncertaintyError("不确定度过小,无法保留小数")
    digit = int(fraction[position])
    if digit in (1, 2):
        following = int(text[position + 1])
        rounded = digit * 10.0 ** -position + (following + 1) * 10.0 ** -(position + 1)
        return rounded, position + 1
    return (digit + 1) * 10.0 ** -position, position


def type_a(values: Sequence[float], mean: float) -> tuple[float, int]:
    """Return the rounded type A uncertainty and its decimal places."""
    count = len(values)
    if count < 2:
        raise UncertaintyError("data.txt数据少于5个!")
    total = sum((value - mean) ** 2 for value in values)
    return round_uncertainty(math.sqrt(total / count / (count - 1)))


def type_b(delta: float, distribution: Distribution) -> tuple[float, int]:
    """Return the rounded type B uncertainty and its decimal places."""
    return round_uncertainty(delta / distribution.coefficient())


def combined(a: float, b: float) -> float:
    """Return the combined uncertainty of type A and type B parts."""
    return math.sqrt(a * a + b * b)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        raise UncertaintyError(f"{path.name}打开失败") from None


def _read_choice() -> int | None:
    try:
        return int(input().strip())
    except ValueError:
        return None


def _confirm_nonpositive(value: float) -> bool:
    print("data.txt的数据中有非正数")
    while True:
        print("是否继续?\n1:Yes\n2:No")
        choice = _read_choice()
        if choice == 1:
            return True
        if choice == 2:
            return False
        print("无效输入!")


def _ask_distribution() -> Distribution:
    while True:
        print("选择置信系数:")
        print("1:3\n2:sqrt(3)\n3:sqrt(6)\n4:sqrt(2)")
        choice = _read_choice()
        try:
            return Distribution(choice)
        except ValueError:
            print("无效输入!")


def main(argv: list[str] | None = None) -> int:
    """Compute the uncertainty from unit.txt, data.txt and delta.txt."""
    parser = argparse.ArgumentParser(
        prog="uncertainty", description="Compute measurement uncertainty."
    )
    parser.add_argument(
        "directory", nargs="?", default=".", help="directory holding the data files"
    )
    args = parser.parse_args(argv)
    base = Path(args.directory)
    try:
        unit = read_unit(base / "unit.txt")
        measurements = parse_measurements(
            _read_text(base / "data.txt"), _confirm_nonpositive
        )
        check_size(len(measurements.values))
        mean = measurements.mean()
        a, decimals = type_a(measurements.values, mean)
        print(f"A类不确定度={a:.{decimals}f}")
        delta = read_delta(_read_text(base / "delta.txt"))
        b, decimals = type_b(delta, _ask_distribution())
        print(f"B类不确定度={b:.{decimals}f}")
        u = combined(a, b)
        print(f"总不确定度={u:.{decimals}f}")
    except UncertaintyError as exc:
        print(exc)
        return 1
    except EOFError:
        print("输入意外结束", file=sys.stderr)
        return 1
    print(f"d = {mean:.{decimals}f}±{u:.{decimals}f}{unit} {CONFIDENCE}")
    return 0


if __name__ == "__main__":
    sys.exit(main())