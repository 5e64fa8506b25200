"""Stack machine: instruction set and interpreter."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TextIO

from ilmachine.bounded_stack import BoundedStack, StackEmptyError, StackFullError
from ilmachine.il_instructions import ArgType
from ilmachine.textio import TokenReader

STACK_CAPACITY = 10

_MASK64 = (1 << 64) - 1


def _wrap64(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value >> 63 else value


class StackUnderflowError(IndexError):
    """Raised when an instruction needs more values than the stack holds."""


class StackOverflowError(OverflowError):
    """Raised when an instruction would grow the stack past its capacity."""


@dataclass(frozen=True)
class InstructionInfo:
    """Static description of an opcode."""

    mnemonic: str
    argtype: ArgType
    affects_ip: bool
    stack_min: int
    stack_delta: int


class OpCode(IntEnum):
    """Opcodes of the stack machine."""

    PUSH = 0
    POP = auto()
    SWAP = auto()
    DUP = auto()
    IADD = auto()
    ISUB = auto()
    IMUL = auto()
    IDIV = auto()
    IMOD = auto()
    INEG = auto()
    IPRINT = auto()
    IREAD = auto()
    ICMP = auto()
    JZ = auto()
    JMP = auto()
    STOP = auto()

    @property
    def info(self) -> InstructionInfo:
        """Return the static description of this opcode."""
        return INSTRUCTIONS[self]


INSTRUCTIONS: dict[OpCode, InstructionInfo] = {
    OpCode.PUSH: InstructionInfo("push", ArgType.I64, False, 0, 1),
    OpCode.POP: InstructionInfo("pop", ArgType.NOARG, False, 1, 0),
    OpCode.SWAP: InstructionInfo("swap", ArgType.NOARG, False, 2, 0),
    OpCode.DUP: InstructionInfo("dup", ArgType.NOARG, False, 1, 0),
    OpCode.IADD: InstructionInfo("iadd", ArgType.NOARG, False, 2, 0),
    OpCode.ISUB: InstructionInfo("isub", ArgType.NOARG, False, 2, 0),
    OpCode.IMUL: InstructionInfo("imul", ArgType.NOARG, False, 2, 0),
    OpCode.IDIV: InstructionInfo("idiv", ArgType.NOARG, False, 2, 0),
    OpCode.IMOD: InstructionInfo("imod", ArgType.NOARG, False, 2, 0),
    OpCode.INEG: InstructionInfo("ineg", ArgType.NOARG, False, 1, 0),
    OpCode.IPRINT: InstructionInfo("iprint", ArgType.NOARG, False, 1, 0),
    OpCode.IREAD: InstructionInfo("iread", ArgType.NOARG, False, 0, 1),
    OpCode.ICMP: InstructionInfo("icmp", ArgType.NOARG, False, 2, 0),
    OpCode.JZ: InstructionInfo("jz", ArgType.I64, True, 0, 0),
    OpCode.JMP: InstructionInfo("jmp", ArgType.I64, True, 0, 0),
    OpCode.STOP: InstructionInfo("stop", ArgType.NOARG, True, 0, 0),
}

_BY_MNEMONIC: dict[str, OpCode] = {info.mnemonic: op for op, info in INSTRUCTIONS.items()}


@dataclass(frozen=True)
class Instruction:
    """One decoded instruction: an opcode and its integer operand."""

    opcode: OpCode
    arg: int = 0


def lookup(mnemonic: str) -> OpCode | None:
    """Return the opcode with this exact mnemonic, or None if there is none."""
    return _BY_MNEMONIC.get(mnemonic)


def _add(a: int, b: int) -> int:
    return _wrap64(a + b)


def _sub(a: int, b: int) -> int:
    return _wrap64(a - b)


def _mul(a: int, b: int) -> int:
    return _wrap64(a * b)


def _div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("Division by zero")
    quotient = abs(a) // abs(b)
    return _wrap64(quotient if (a < 0) == (b < 0) else -quotient)


def _mod(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("Division by zero")
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _cmp(a: int, b: int) -> int:
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


class StackMachine:
    """Executes instructions against a bounded data stack.

    Binary operations take ``a`` from the top of the stack and ``b`` from
    below it and push the result of ``a op b``.
    """

    def __init__(
        self,
        program: Iterable[Instruction],
        reader: TokenReader | None = None,
        output: TextIO | None = None,
        capacity: int = STACK_CAPACITY,
    ) -> None:
        self.program = tuple(program)
        self.reader = reader
        self.output = sys.stdout if output is None else output
        self.stack = BoundedStack(capacity)
        self.ip = 0
        self._halted = False

    @property
    def running(self) -> bool:
        """True until STOP runs or the instruction pointer leaves the program."""
        return not self._halted and 0 <= self.ip < len(self.program)

    def step(self) -> None:
        """Execute the instruction at the instruction pointer."""
        if not self.running:
            raise RuntimeError("machine is not running")
        instruction = self.program[self.ip]
        info = instruction.opcode.info
        if info.stack_min > len(self.stack):
            raise StackUnderflowError("Stack underflow")
        if info.stack_delta + len(self.stack) > self.stack.capacity:
            raise StackOverflowError("Stack overflow")
        try:
            _HANDLERS[instruction.opcode](self, instruction.arg)
        except StackEmptyError as error:
            raise StackUnderflowError(str(error)) from error
        except StackFullError as error:
            raise StackOverflowError(str(error)) from error
        if not info.affects_ip:
            self.ip += 1

    def run(self) -> None:
        """Execute until the machine stops."""
        while self.running:
            self.step()

    def _input(self) -> TokenReader:
        if self.reader is None:
            self.reader = TokenReader(sys.stdin)
        return self.reader

    def _binary(self, operation: Callable[[int, int], int]) -> None:
        a = self.stack.pop()
        b = self.stack.pop()
        self.stack.push(operation(a, b))

    def _push(self, arg: int) -> None:
        self.stack.push(arg)

    def _pop(self, arg: int) -> None:
        self.stack.pop()

    def _swap(self, arg: int) -> None:
        first = self.stack.pop()
        second = self.stack.pop()
        self.stack.push(first)
        self.stack.push(second)

    def _dup(self, arg: int) -> None:
        value = self.stack.pop()
        self.stack.push(value)
        self.stack.push(value)

    def _iadd(self, arg: int) -> None:
        self._binary(_add)

    def _isub(self, arg: int) -> None:
        self._binary(_sub)

    def _imul(self, arg: int) -> None:
        self._binary(_mul)

    def _idiv(self, arg: int) -> None:
        self._binary(_div)

    def _imod(self, arg: int) -> None:
        self._binary(_mod)

    def _ineg(self, arg: int) -> None:
        self.stack.push(_wrap64(-self.stack.pop()))

    def _iprint(self, arg: int) -> None:
        self.output.write(f"{self.stack.pop()}\n")

    def _iread(self, arg: int) -> None:
        value = self._input().read_int()
        self.stack.push(0 if value is None else value)

    def _icmp(self, arg: int) -> None:
        self._binary(_cmp)

    def _jz(self, arg: int) -> None:
        value = self.stack.pop()
        self.ip = self.ip + arg if value == 0 else self.ip + 1
        self.stack.push(value)

    def _jmp(self, arg: int) -> None:
        self.ip += arg if arg > 0 else 1

    def _stop(self, arg: int) -> None:
        self._halted = True


_HANDLERS: dict[OpCode, Callable[[StackMachine, int], None]] = {
    OpCode.PUSH: StackMachine._push,
    OpCode.POP: StackMachine._pop,
    OpCode.SWAP: StackMachine._swap,
    OpCode.DUP: StackMachine._dup,
    OpCode.IADD: StackMachine._iadd,
    OpCode.ISUB: StackMachine._isub,
    OpCode.IMUL: StackMachine._imul,
    OpCode.IDIV: StackMachine._idiv,
    OpCode.IMOD: StackMachine._imod,
    OpCode.INEG: StackMachine._ineg,
    OpCode.IPRINT: StackMachine._iprint,
    OpCode.IREAD: StackMachine._iread,
    OpCode.ICMP: StackMachine._icmp,
    OpCode.JZ: StackMachine._jz,
    OpCode.JMP: StackMachine._jmp,
    OpCode.STOP: StackMachine._stop,
}


def run_program(
    program: Iterable[Instruction],
    reader: TokenReader | None = None,
    output: TextIO | None = None,
) -> StackMachine:
    """Run a program to completion and return the stopped machine."""
    machine = StackMachine(program, reader, output)
    machine.run()
    return machine