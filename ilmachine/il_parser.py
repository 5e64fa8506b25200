"""Parsing of accumulator-machine programs with labels."""

from __future__ import annotations

import re
import warnings
from collections import deque
from dataclasses import replace
from os import PathLike

from ilmachine.il_instructions import ArgType, Instruction, OpCode, lookup
from ilmachine.textio import INT64_MAX, INT64_MIN

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

    Parsing stops after the first RET. Labels are words ending in ``:`` and
    name the position of the next instruction. Jumps to unknown labels keep
    operand 0 and produce a warning.
    """
    tokens = _Tokens(text)
    program: list[Instruction] = []
    labels: dict[str, int] = {}
    jumps: list[tuple[int, str]] = []

    def append(instruction: Instruction) -> None:
        if len(program) >= limit:
            raise ParseError(
                "Command stack overflow. Stop command not found.\n"
                f"Current limit: {limit} commands"
            )
        program.append(instruction)

    while (word := tokens.word()) is not None:
        opcode = lookup(word)
        if opcode is None:
            if word.endswith(":"):
                labels[word[:-1]] = len(program)
                tokens.integer()
                continue
            raise ParseError(f"Command not found: {word}")

        argtype = opcode.info.argtype
        if argtype is ArgType.STR:
            label = tokens.word()
            if label is None:
                raise ParseError(f"Missing argument for command: {word}")
            append(Instruction(opcode))
            jumps.append((len(program) - 1, label))
            continue

        arg = tokens.integer()
        if argtype is ArgType.I64:
            if arg is None:
                raise ParseError(f"Missing argument for command: {word}")
            append(Instruction(opcode, arg))
            continue

        append(Instruction(opcode))
        if opcode is OpCode.RET:
            break

    connected = 0
    for index, name in jumps:
        target = labels.get(name)
        if target is not None:
            program[index] = replace(program[index], arg=target)
            connected += 1
    if connected != len(jumps):
        warnings.warn(f"Only {connected} jumpers connected", stacklevel=2)
    return program


def load_program(path: str | PathLike[str], limit: int = COMMANDS_LIMIT) -> list[Instruction]:
    """Read and parse a program file."""
    with open(path, encoding="utf-8") as handle:
        return parse_program(handle.read(), limit)