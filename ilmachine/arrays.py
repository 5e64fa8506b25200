"""Integer arrays and ragged matrices read from text: minimum and normalisation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from ilmachine.textio import TokenReader

_MASK64 = (1 << 64) - 1
_SIGN64 = 1 << 63


def _wrap64(value: int) -> int:
    """Reduce an integer to the signed 64-bit range, wrapping on overflow."""
    value &= _MASK64
    return value - (1 << 64) if value & _SIGN64 else value


def array_min(values: Iterable[int]) -> int | None:
    """Return the smallest value, or None if there are none."""
    return min(values, default=None)


def read_array(reader: TokenReader) -> list[int]:
    """Read a count followed by that many integers.

    A value that cannot be read is taken as 0.
    """
    size = reader.read_size()
    result = []
    for _ in range(size):
        value = reader.read_int()
        result.append(0 if value is None else value)
    return result


def format_array(values: Iterable[int]) -> str:
    """Render values as one line, each followed by a space."""
    return "".join(f"{value} " for value in values) + "\n"


def matrix_min(rows: Iterable[Iterable[int]]) -> int | None:
    """Return the smallest value across all rows, or None if every row is empty."""
    minima = (row_min for row in rows if (row_min := array_min(row)) is not None)
    return min(minima, default=None)


def normalize_matrix(rows: Iterable[Iterable[int]], offset: int) -> list[list[int]]:
    """Return a copy with ``offset`` subtracted from every value (64-bit wrapping)."""
    return [[_wrap64(value - offset) for value in row] for row in rows]


def read_matrix(reader: TokenReader) -> list[list[int]]:
    """Read a row count followed by that many counted rows."""
    return [read_array(reader) for _ in range(reader.read_size())]


def format_matrix(rows: Sequence[Iterable[int]]) -> str:
    """Render a matrix under an ``Array:`` heading, one row per line."""
    return "\nArray:\n" + "".join(format_array(row) for row in rows)


def main(argv: list[str] | None = None) -> int:
    """Read a matrix from standard input and print it shifted by its minimum."""
    parser = argparse.ArgumentParser(
        prog="ilmachine-arrays",
        description="Normalise a ragged integer matrix read from standard input.",
    )
    parser.add_argument(
        "--single",
        action="store_true",
        help="read one counted array and print its minimum instead",
    )
    args = parser.parse_args(argv)
    reader = TokenReader(sys.stdin)
    out = sys.stdout

    if args.single:
        smallest = array_min(read_array(reader))
        out.write("None\n" if smallest is None else f"{smallest}\n")
        return 0

    rows = read_matrix(reader)
    smallest = matrix_min(rows)
    if smallest is None:
        out.write("Min. value not found\n")
    else:
        out.write(format_matrix(normalize_matrix(rows, smallest)))
    return 0


if __name__ == "__main__":
    sys.exit(main())