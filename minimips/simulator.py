"""Decoding, disassembly and execution of 32-bit MIPS instruction words."""

import sys
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from typing import Optional, TextIO

from minimips.cpu import MipsState
from minimips.instructions import (
    execute_add,
    execute_addi,
    execute_and,
    execute_lui,
    execute_lw,
    execute_mult,
    execute_or,
    execute_sll,
    execute_slt,
    execute_slti,
    execute_sub,
    execute_sw,
    execute_syscall,
)
from minimips.util import binary_to_int

_R_TYPE = 0x00
_FUNCT_SYSCALL = 0x0C
_V0_REGISTER = 2
_EXIT_CODE = 10


class UnknownInstructionError(Exception):
    """An instruction word carries an opcode or funct that is not supported."""


@dataclass(frozen=True)
class Instruction:
    """The fields of one instruction word; immediate is sign-extended."""

    opcode: int
    rs: int
    rt: int
    rd: int
    shamt: int
    funct: int
    immediate: int

    @property
    def is_exit_candidate(self) -> bool:
        """True for a syscall instruction."""
        return self.opcode == _R_TYPE and self.funct == _FUNCT_SYSCALL


def decode(word: int) -> Instruction:
    """Split an instruction word into its fields."""
    word &= 0xFFFFFFFF
    raw_immediate = word & 0xFFFF
    immediate = raw_immediate - 0x10000 if raw_immediate & 0x8000 else raw_immediate
    return Instruction(
        opcode=(word >> 26) & 0x3F,
        rs=(word >> 21) & 0x1F,
        rt=(word >> 16) & 0x1F,
        rd=(word >> 11) & 0x1F,
        shamt=(word >> 6) & 0x1F,
        funct=word & 0x3F,
        immediate=immediate,
    )


def disassemble(word: int) -> str:
    """Render an instruction word as assembly text."""
    ins = decode(word)
    if ins.opcode == _R_TYPE:
        match ins.funct:
            case 0x20:
                return f"add R{ins.rd}, R{ins.rs}, R{ins.rt}"
            case 0x22:
                return f"sub R{ins.rd}, R{ins.rs}, R{ins.rt}"
            case 0x18:
                return f"mult R{ins.rs}, R{ins.rt}"
            case 0x24:
                return f"and R{ins.rd}, R{ins.rs}, R{ins.rt}"
            case 0x25:
                return f"or R{ins.rd}, R{ins.rs}, R{ins.rt}"
            case 0x00:
                return f"sll R{ins.rd}, R{ins.rt}, {ins.shamt}"
            case 0x2A:
                return f"slt R{ins.rd}, R{ins.rs}, R{ins.rt}"
            case 0x0C:
                return "syscall"
            case _:
                return f"Tipo R desconhecido (funct: 0x{ins.funct:X})"
    match ins.opcode:
        case 0x08:
            return f"addi R{ins.rt}, R{ins.rs}, {ins.immediate}"
        case 0x23:
            return f"lw R{ins.rt}, {ins.immediate}(R{ins.rs})"
        case 0x2B:
            return f"sw R{ins.rt}, {ins.immediate}(R{ins.rs})"
        case 0x0F:
            return f"lui R{ins.rt}, {ins.immediate}"
        case 0x0A:
            return f"slti R{ins.rt}, R{ins.rs}, {ins.immediate}"
        case _:
            return f"Tipo I/J desconhecido (opcode: 0x{ins.opcode:X})"


def execute(
    word: int,
    state: MipsState,
    memory: MutableSequence[int],
    out: Optional[TextIO] = None,
) -> None:
    """Decode an instruction word and apply it to the state and memory."""
    ins = decode(word)
    if ins.opcode == _R_TYPE:
        match ins.funct:
            case 0x20:
                execute_add(state, ins.rd, ins.rs, ins.rt)
            case 0x22:
                execute_sub(state, ins.rd, ins.rs, ins.rt)
            case 0x18:
                execute_mult(state, ins.rs, ins.rt)
            case 0x24:
                execute_and(state, ins.rd, ins.rs, ins.rt)
            case 0x25:
                execute_or(state, ins.rd, ins.rs, ins.rt)
            case 0x00:
                execute_sll(state, ins.rd, ins.rt, ins.shamt)
            case 0x2A:
                execute_slt(state, ins.rd, ins.rs, ins.rt)
            case 0x0C:
                execute_syscall(state, out)
            case _:
                raise UnknownInstructionError(
                    f"Erro: Funct 0x{ins.funct:X} nao reconhecido para Tipo R."
                )
        return
    match ins.opcode:
        case 0x08:
            execute_addi(state, ins.rt, ins.rs, ins.immediate)
        case 0x23:
            execute_lw(state, memory, ins.rt, ins.immediate, ins.rs)
        case 0x2B:
            execute_sw(state, memory, ins.rt, ins.immediate, ins.rs)
        case 0x0F:
            execute_lui(state, ins.rt, ins.immediate)
        case 0x0A:
            execute_slti(state, ins.rt, ins.rs, ins.immediate)
        case _:
            raise UnknownInstructionError(
                f"Erro: Opcode 0x{ins.opcode:X} nao reconhecido."
            )


def step(
    program: Sequence[str],
    state: MipsState,
    memory: MutableSequence[int],
    out: Optional[TextIO] = None,
) -> bool:
    """Fetch, decode and execute the instruction at the program counter.

    The program counter is advanced before execution, so it has moved on even
    when execution raises. Returns False once an exit syscall has run.
    """
    stream = sys.stdout if out is None else out
    text = program[state.pc]
    word = binary_to_int(text)
    print(f"Executando [PC={state.pc}]: {text} -> {disassemble(word)}", file=stream)
    state.pc += 1
    execute(word, state, memory, stream)
    ins = decode(word)
    return not (ins.is_exit_candidate and state.registers[_V0_REGISTER] == _EXIT_CODE)