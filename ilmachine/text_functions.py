"""Word counting, character search, string comparison and int-or-string values."""

from __future__ import annotations

import re
import sys

_SEPARATORS = re.compile(r"[ \t\n]+")


def count_words(text: str) -> int:
    """Count words separated by spaces, tabs and newlines."""
    return sum(1 for word in _SEPARATORS.split(text) if word)


def find_char(text: str, char: str) -> int:
    """Return the position of the first occurrence of a character, or -1."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    return text.find(char)


def compare(first: str, second: str) -> int:
    """Compare strings: 0 if equal, 1 if the first is greater, -1 otherwise."""
    return (first > second) - (first < second)


def describe(value: int | str) -> str:
    """Return ``"int"`` for an integer and the text itself for a string."""
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"expected int or str, got {type(value).__name__}")
    return "int" if isinstance(value, int) else value


def main(argv: list[str] | None = None) -> int:
    """Show the string functions on fixed examples."""
    out = sys.stdout

    text = "  abc  absc\tcasd\ndasd\n"
    out.write(f"String: {text}\n")
    out.write(f"Words in string = {count_words(text)}\n\n")

    text = "asfbdksyb"
    char = "s"
    out.write(f"String: {text}\n")
    out.write(f"Position of char '{char}' = {find_char(text, char)}\n\n")

    first, second = "abc", "de"
    out.write(f"String 1: {first}\nString 2: {second}\n")
    out.write(f"Concatenated strings = {first + second}\n\n")

    first, second = "adsasd", "dasd"
    out.write(f"String 1: {first}\nString 2: {second}\n")
    first = second
    out.write(f"Copied string2 to string1 = {first}\n\n")

    first, second = "asdf", "asdf0"
    out.write(f"String 1: {first}\nString 2: {second}\n")
    out.write(f"Compared strings = {compare(first, second)}\n\n")

    out.write(describe("adsfa") + "\n")
    out.write(describe(213123) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())