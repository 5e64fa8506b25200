"""Small numeric exercises: a truth table, a minimum, a piecewise function, a quiz, a series."""

from __future__ import annotations

import math
import sys
from collections import deque
from typing import TextIO

_QUIZ_SCORES = {1: 0, 2: 2, 3: 0}

_QUESTION = (
    "Система программного обеспечения, что управляет работой всех "
    "структурных узлов компьютера, называеться\n"
    "1) Автоматизированная\n"
    "2) Операционная\n"
    "3) Интеллектуальная\n"
    "Введите номер правильного ответа: "
)


def truth_table() -> list[tuple[int, int, int, int]]:
    """Return rows (x, y, z, value) of ``!(!x and y) or (x and !z)`` in binary order."""
    rows = []
    for number in range(8):
        x, y, z = bool(number & 4), bool(number & 2), bool(number & 1)
        value = (not (not x and y)) or (x and not z)
        rows.append((int(x), int(y), int(z), int(value)))
    return rows


def smallest(a: int, b: int, c: int) -> int:
    """Return the smallest of three numbers."""
    if a <= b and a <= c:
        return a
    return b if b <= c else c


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _cos(value: float) -> float:
    return math.nan if math.isinf(value) else math.cos(value)


def _log(value: float) -> float:
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    return math.log(value)


def _sqrt(value: float) -> float:
    if math.isnan(value) or value < 0:
        return math.nan
    return math.sqrt(value)


def piecewise(x: float, a: float, b: float, z: float) -> float:
    """Evaluate the piecewise function y(x); undefined results are NaN."""
    if x <= 5 * a:
        return 2.5 * b * b + a * x - 4.5 * _cos(x * z)
    if x > b:
        base = a * a - 5.4 * x
        return base * base * base + _log(x * z)
    return _sqrt(6.5 * b * b + (a - x * x * x * z))


def function_values(x: float) -> tuple[float, float, float]:
    """Return y(x) for the three fixed parameter sets."""
    a = 0.5
    return (
        piecewise(x, a, 4.5, _exp(a * x)),
        piecewise(x, a, 3.7, _exp(2 * a * x)),
        piecewise(x, a, 2.7, _exp(2.5 * a * x)),
    )


def quiz_score(answer: int) -> int:
    """Return the score for an answer number; raise ValueError for an unknown one."""
    try:
        return _QUIZ_SCORES[answer]
    except KeyError:
        raise ValueError(f"no answer numbered {answer}") from None


def log_series(x: float, n: int) -> float:
    """Return the partial sum x - x^2/2 + x^3/3 - ... up to the n-th term."""
    return sum((-1) ** (i - 1) * x**i / i for i in range(1, n + 1))


class _Tokens:
    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._items: deque[str] = deque()

    def next(self) -> str:
        while not self._items:
            line = self._stream.readline()
            if not line:
                raise EOFError("end of input")
            self._items.extend(line.split())
        return self._items.popleft()


def _format_float(value: float) -> str:
    return f"{value:.6f}"


def main(argv: list[str] | None = None) -> int:
    """Run all five exercises, reading their input from standard input."""
    out = sys.stdout
    tokens = _Tokens(sys.stdin)

    out.write("Task1\n")
    out.write("X\tY\tZ\t!(!X and Y) or (X and !Z)\n")
    for row in truth_table():
        out.write("\t".join(str(cell) for cell in row) + "\n")
    out.write("\n")

    out.write("Task2\n")
    a, b, c = (int(tokens.next()) for _ in range(3))
    out.write(f"{smallest(a, b, c)}\n\n")

    out.write("Task3\n")
    x = float(tokens.next())
    for value in function_values(x):
        out.write(_format_float(value) + "\n")
    out.write("\n")

    out.write("Task4\n")
    out.write(_QUESTION)
    while True:
        try:
            score = quiz_score(int(tokens.next()))
            break
        except ValueError:
            out.write("Введите корректный номер варианта ответа\n")
    out.write(f"Score = {score}\n\n")

    out.write("Task5\n")
    x = float(tokens.next())
    n = int(tokens.next())
    out.write(f"Цикл с предусловием = {_format_float(log_series(x, n))}\n")
    out.write(f"Цикл с постусловием = {_format_float(log_series(x, max(n, 1)))}\n")
    out.write(f"Цикл с параметром   = {_format_float(log_series(x, n))}\n")
    out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())