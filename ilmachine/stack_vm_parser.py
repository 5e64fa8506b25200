"""Parsing of stack-machine programs and the command that runs them."""

from __future__ import annotations

import argparse
import re
import sys
from collections import deque
from os import PathLike

from ilmachine.il_instructions import ArgType
from ilmachine.stack_vm import (
    Instruction,
    OpCode,
    StackOverflowError,
    StackUnderflowError,
    lookup,
    run_program,
)
from ilmachine.textio import INT64_MAX, INT64_MIN, TokenReader

COMMANDS_LIMIT = 100

_INT = re.compile(r"[+-]?\d+")


class ParseError(ValueError):
    """Raised when a program text cannot be parsed."""


class _Tokens:
    """Whitespace tokens with the ability to take a leading integer off a token."""

    def __init__(self, text: str) -> None:
        self._items = deque(text.split())

    def word(self) -> str | None:
        return self._items.popleft() if self._items else None

    def integer(self) -> int | None:
        if not self._items:
            return None
        match = _INT.match(self._items[0])
        if match is None:
            return None
        rest = self._items[0][match.end():]
        if rest:
            self._items[0] = rest
        else:
            self._items.popleft()
        return max(INT64_MIN, min(INT64_MAX, int(match.group())))


def parse_program(text: str, limit: int = COMMANDS_LIMIT) -> list[Instruction]:
    """Parse program text into instructions.

    Each command is a mnemonic, followed by an integer where the command
    takes one. Parsing stops after the first ``stop``.
    """
    tokens = _Tokens(text)
    program: list[Instruction] = []

    while (word := tokens.word()) is not None:
        opcode = lookup(word)
        if opcode is None:
            raise ParseError(f"Command not found: {word}")
        arg = tokens.integer()
        if opcode.info.argtype is ArgType.I64 and arg is None:
            raise ParseError(f"Missing argument for command: {word}")
        if len(program) >= limit:
            raise ParseError(
                "Command stack overflow. Stop command not found.\n"
                f"Current limit: {limit} commands"
            )
        if opcode.info.argtype is ArgType.I64:
            program.append(Instruction(opcode, arg))
            continue
        program.append(Instruction(opcode))
        if opcode is OpCode.STOP:
            break
    return program


def load_program(path: str | PathLike[str], limit: int = COMMANDS_LIMIT) -> list[Instruction]:
    """Read and parse a program file."""
    with open(path, encoding="utf-8") as handle:
        return parse_program(handle.read(), limit)


def main(argv: list[str] | None = None) -> int:
    """Load a stack-machine program file and run it with standard input."""
    parser = argparse.ArgumentParser(
        prog="ilmachine-stack",
        description="Run a stack-machine program.",
    )
    parser.add_argument("path", nargs="?", default="commands.txt", help="program file")
    parser.add_argument(
        "--limit", type=int, default=COMMANDS_LIMIT, help="maximum number of commands"
    )
    args = parser.parse_args(argv)
    out = sys.stdout

    try:
        program = load_program(args.path, args.limit)
    except FileNotFoundError:
        out.write("File not found\n")
        return 0
    except ParseError as error:
        out.write(f"{error}\n")
        return 0

    out.write("Readed file\n")
    try:
        run_program(program, TokenReader(sys.stdin), out)
    except (StackUnderflowError, StackOverflowError) as error:
        out.write(f"{error}\n")
        return 0
    except ZeroDivisionError as error:
        out.write(f"{error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())