"""Instruction set of the accumulator machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class ArgType(Enum):
    """Kind of operand an instruction takes, also used to tag the accumulator."""

    NOARG = auto()
    I64 = auto()
    BOOL = auto()
    STR = auto()


@dataclass(frozen=True)
class InstructionInfo:
    """Static description of an opcode."""

    mnemonic: str
    argtype: ArgType
    affects_ip: bool


class OpCode(IntEnum):
    """Opcodes of the accumulator machine."""

    LD = 0
    LDN = auto()
    ST = auto()
    STN = auto()
    S = auto()
    R = auto()
    AND = auto()
    ANDN = auto()
    OR = auto()
    ORN = auto()
    XOR = auto()
    XORN = auto()
    NOT = auto()
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    GT = auto()
    GE = auto()
    EQ = auto()
    NE = auto()
    LE = auto()
    LT = auto()
    JMP = auto()
    JMPC = auto()
    JMPCN = auto()
    RET = auto()

    @property
    def info(self) -> InstructionInfo:
        """Return the static description of this opcode."""
        return INSTRUCTIONS[self]


_NOARG = {OpCode.ST, OpCode.STN, OpCode.S, OpCode.R, OpCode.NOT, OpCode.RET}
_LABELLED = {OpCode.JMP, OpCode.JMPC, OpCode.JMPCN}


def _describe(opcode: OpCode) -> InstructionInfo:
    if opcode in _LABELLED:
        argtype = ArgType.STR
    elif opcode in _NOARG:
        argtype = ArgType.NOARG
    else:
        argtype = ArgType.I64
    affects_ip = opcode in _LABELLED or opcode is OpCode.RET
    return InstructionInfo(opcode.name, argtype, affects_ip)


INSTRUCTIONS: dict[OpCode, InstructionInfo] = {op: _describe(op) for op in OpCode}

_BY_MNEMONIC: dict[str, OpCode] = {info.mnemonic: op for op, info in INSTRUCTIONS.items()}


@dataclass(frozen=True)
class Instruction:
    """One decoded instruction: an opcode and its integer operand."""

    opcode: OpCode
    arg: int = 0


def lookup(mnemonic: str) -> OpCode | None:
    """Return the opcode with this exact mnemonic, or None if there is none."""
    return _BY_MNEMONIC.get(mnemonic)