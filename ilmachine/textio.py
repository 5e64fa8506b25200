"""Whitespace-separated number reading from a text stream."""

from __future__ import annotations

import re
from collections import deque
from typing import TextIO

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_SIGNED = re.compile(r"[+-]?\d+")
_UNSIGNED = re.compile(r"\+?\d+")


class TokenReader:
    """Reads numbers from a text stream one token at a time.

    A number is matched at the start of the next token; whatever follows it
    in the same token stays in the input for the next read. A token that does
    not start with a number is left unread.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: deque[str] = deque()

    def _peek(self) -> str | None:
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                return None
            self._tokens.extend(line.split())
        return self._tokens[0]

    def _take(self, pattern: re.Pattern[str]) -> int | None:
        token = self._peek()
        if token is None:
            return None
        match = pattern.match(token)
        if match is None:
            return None
        rest = token[match.end():]
        if rest:
            self._tokens[0] = rest
        else:
            self._tokens.popleft()
        return int(match.group())

    def read_int(self) -> int | None:
        """Return the next signed 64-bit integer, or None at end of input or on a non-number."""
        value = self._take(_SIGNED)
        if value is None:
            return None
        return max(INT64_MIN, min(INT64_MAX, value))

    def _read_unsigned(self) -> int:
        if self._peek() is None:
            raise EOFError("end of input while reading a number")
        value = self._take(_UNSIGNED)
        if value is None:
            raise ValueError(f"expected a non-negative number, got {self._peek()!r}")
        return min(UINT64_MAX, value)

    def read_size(self) -> int:
        """Return the next non-negative count.

        Raises EOFError at end of input and ValueError on anything else.
        """
        return self._read_unsigned()

    def read_uint(self) -> int:
        """Return the next unsigned 64-bit integer.

        Raises EOFError at end of input and ValueError on anything else.
        """
        return self._read_unsigned()