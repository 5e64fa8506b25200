"""Accumulator machine that executes parsed programs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from ilmachine.il_instructions import ArgType, Instruction, OpCode
from ilmachine.il_parser import COMMANDS_LIMIT, ParseError, load_program

_MASK64 = (1 << 64) - 1


def _wrap64(value: int) -> int:
    value &= _MASK64
    return value - (1 << 64) if value >> 63 else value


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return _wrap64(quotient if (a < 0) == (b < 0) else -quotient)


class Machine:
    """Executes instructions against a single typed accumulator."""

    def __init__(self, program: Iterable[Instruction], output: TextIO | None = None) -> None:
        self.program = tuple(program)
        self.output = sys.stdout if output is None else output
        self.ip = 0
        self.acc = 0
        self.acc_type = ArgType.NOARG
        self._halted = False

    @property
    def running(self) -> bool:
        """True until RET runs or the instruction pointer leaves the program."""
        return not self._halted and 0 <= self.ip < len(self.program)

    def step(self) -> None:
        """Execute the instruction at the instruction pointer."""
        if not self.running:
            raise RuntimeError("machine is not running")
        instruction = self.program[self.ip]
        _HANDLERS[instruction.opcode](self, instruction.arg)
        if not instruction.opcode.info.affects_ip:
            self.ip += 1

    def run(self) -> None:
        """Execute until the machine stops."""
        while self.running:
            self.step()

    def _emit(self, value: int) -> None:
        self.output.write(f"{value}\n")

    def _is_true(self) -> bool:
        return self.acc_type is ArgType.BOOL and self.acc == 1

    def _is_false(self) -> bool:
        return self.acc_type is ArgType.BOOL and self.acc == 0

    def _inverted(self) -> int:
        if self.acc_type is ArgType.I64:
            return _wrap64(-self.acc)
        if self.acc_type is ArgType.BOOL:
            return int(not self.acc)
        return 0

    def _set_bool(self, value: bool | int) -> None:
        self.acc = int(value)
        self.acc_type = ArgType.BOOL

    def _ld(self, arg: int) -> None:
        self.acc = arg
        self.acc_type = ArgType.I64

    def _ldn(self, arg: int) -> None:
        self.acc = _wrap64(-arg)
        self.acc_type = ArgType.I64

    def _st(self, arg: int) -> None:
        self._emit(self.acc)

    def _stn(self, arg: int) -> None:
        if self.acc_type is ArgType.I64:
            self._emit(self._inverted())

    def _s(self, arg: int) -> None:
        if self._is_true():
            self.output.write("TRUE\n")

    def _r(self, arg: int) -> None:
        if self._is_false():
            self.output.write("FALSE\n")

    def _and(self, arg: int) -> None:
        self._set_bool(bool(self.acc) and bool(arg))

    def _andn(self, arg: int) -> None:
        self._set_bool(bool(self.acc) and not arg)

    def _or(self, arg: int) -> None:
        self._set_bool(bool(self.acc) or bool(arg))

    def _orn(self, arg: int) -> None:
        self._set_bool(bool(self.acc) or not arg)

    def _xor(self, arg: int) -> None:
        self._set_bool(self.acc ^ arg)

    def _xorn(self, arg: int) -> None:
        self._set_bool(self.acc ^ int(not arg))

    def _not(self, arg: int) -> None:
        self.acc = self._inverted()

    def _add(self, arg: int) -> None:
        self.acc = _wrap64(self.acc + arg)

    def _sub(self, arg: int) -> None:
        self.acc = _wrap64(self.acc - arg)

    def _mul(self, arg: int) -> None:
        self.acc = _wrap64(self.acc * arg)

    def _div(self, arg: int) -> None:
        if arg == 0:
            raise ZeroDivisionError("Division by zero")
        self.acc = _truncating_div(self.acc, arg)

    def _gt(self, arg: int) -> None:
        self._set_bool(self.acc > arg)

    def _ge(self, arg: int) -> None:
        self._set_bool(self.acc >= arg)

    def _eq(self, arg: int) -> None:
        self._set_bool(self.acc == arg)

    def _ne(self, arg: int) -> None:
        self._set_bool(self.acc != arg)

    def _le(self, arg: int) -> None:
        self._set_bool(self.acc <= arg)

    def _lt(self, arg: int) -> None:
        self._set_bool(self.acc < arg)

    def _jmp(self, arg: int) -> None:
        self.ip = arg

    def _jmpc(self, arg: int) -> None:
        self.ip = arg if self._is_true() else self.ip + 1

    def _jmpcn(self, arg: int) -> None:
        self.ip = arg if self._is_false() else self.ip + 1

    def _ret(self, arg: int) -> None:
        self._halted = True


_HANDLERS: dict[OpCode, Callable[[Machine, int], None]] = {
    OpCode.LD: Machine._ld,
    OpCode.LDN: Machine._ldn,
    OpCode.ST: Machine._st,
    OpCode.STN: Machine._stn,
    OpCode.S: Machine._s,
    OpCode.R: Machine._r,
    OpCode.AND: Machine._and,
    OpCode.ANDN: Machine._andn,
    OpCode.OR: Machine._or,
    OpCode.ORN: Machine._orn,
    OpCode.XOR: Machine._xor,
    OpCode.XORN: Machine._xorn,
    OpCode.NOT: Machine._not,
    OpCode.ADD: Machine._add,
    OpCode.SUB: Machine._sub,
    OpCode.MUL: Machine._mul,
    OpCode.DIV: Machine._div,
    OpCode.GT: Machine._gt,
    OpCode.GE: Machine._ge,
    OpCode.EQ: Machine._eq,
    OpCode.NE: Machine._ne,
    OpCode.LE: Machine._le,
    OpCode.LT: Machine._lt,
    OpCode.JMP: Machine._jmp,
    OpCode.JMPC: Machine._jmpc,
    OpCode.JMPCN: Machine._jmpcn,
    OpCode.RET: Machine._ret,
}


def run_program(program: Iterable[Instruction], output: TextIO | None = None) -> Machine:
    """Run a program to completion and return the stopped machine."""
    machine = Machine(program, output)
    machine.run()
    return machine


def main(argv: list[str] | None = None) -> int:
    """Load a program file and run it."""
    parser = argparse.ArgumentParser(
        prog="ilmachine",
        description="Run an accumulator-machine program.",
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
        run_program(program, out)
    except ZeroDivisionError as error:
        out.write(f"{error}\n")
        return 1
    out.write("Program finished\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())