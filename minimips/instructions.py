"""Execution of the individual MIPS instructions on a processor state."""

import sys
from collections.abc import MutableSequence, Sequence
from typing import Optional, TextIO

from minimips.cpu import MipsState

_HI_REGISTER = 1
_LO_REGISTER = 2
_V0_REGISTER = 2
_A0_REGISTER = 4


class MemoryAccessError(Exception):
    """A load or store addressed a word outside data memory."""


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


def _word_index(state: MipsState, rs: int, immediate: int, size: int, mnemonic: str) -> int:
    """Word index for R[rs] + immediate; the byte address is divided by 4 toward zero."""
    address = _to_int32(state.registers[rs] + immediate)
    quotient = abs(address) // 4
    index = (-quotient if address < 0 else quotient) & 0xFFFFFFFF
    if index >= size:
        raise MemoryAccessError(f"Erro: Acesso invalido a memoria em {mnemonic}!")
    return index


def execute_add(state: MipsState, rd: int, rs: int, rt: int) -> None:
    """R[rd] = R[rs] + R[rt]."""
    regs = state.registers
    regs[rd] = _to_int32(regs[rs] + regs[rt])


def execute_addi(state: MipsState, rt: int, rs: int, immediate: int) -> None:
    """R[rt] = R[rs] + immediate."""
    regs = state.registers
    regs[rt] = _to_int32(regs[rs] + immediate)


def execute_sub(state: MipsState, rd: int, rs: int, rt: int) -> None:
    """R[rd] = R[rs] - R[rt]."""
    regs = state.registers
    regs[rd] = _to_int32(regs[rs] - regs[rt])


def execute_mult(state: MipsState, rs: int, rt: int) -> None:
    """Multiply R[rs] by R[rt]; the high word goes to R1, the low word to R2."""
    regs = state.registers
    product = regs[rs] * regs[rt]
    regs[_HI_REGISTER] = _to_int32(product >> 32)
    regs[_LO_REGISTER] = _to_int32(product & 0xFFFFFFFF)


def execute_and(state: MipsState, rd: int, rs: int, rt: int) -> None:
    """R[rd] = R[rs] & R[rt]."""
    regs = state.registers
    regs[rd] = _to_int32(regs[rs] & regs[rt])


def execute_or(state: MipsState, rd: int, rs: int, rt: int) -> None:
    """R[rd] = R[rs] | R[rt]."""
    regs = state.registers
    regs[rd] = _to_int32(regs[rs] | regs[rt])


def execute_sll(state: MipsState, rd: int, rt: int, shamt: int) -> None:
    """R[rd] = R[rt] << shamt, keeping 32 bits."""
    regs = state.registers
    regs[rd] = _to_int32(regs[rt] << shamt)


def execute_lw(state: MipsState, memory: Sequence[int], rt: int, immediate: int, rs: int) -> None:
    """Load the word at byte address R[rs] + immediate into R[rt]."""
    index = _word_index(state, rs, immediate, len(memory), "LW")
    state.registers[rt] = memory[index]


def execute_sw(
    state: MipsState, memory: MutableSequence[int], rt: int, immediate: int, rs: int
) -> None:
    """Store R[rt] at byte address R[rs] + immediate."""
    index = _word_index(state, rs, immediate, len(memory), "SW")
    memory[index] = state.registers[rt]


def execute_lui(state: MipsState, rt: int, immediate: int) -> None:
    """R[rt] = immediate << 16."""
    state.registers[rt] = _to_int32(immediate << 16)


def execute_slt(state: MipsState, rd: int, rs: int, rt: int) -> None:
    """R[rd] = 1 if R[rs] < R[rt] (signed) else 0."""
    regs = state.registers
    regs[rd] = 1 if regs[rs] < regs[rt] else 0


def execute_slti(state: MipsState, rt: int, rs: int, immediate: int) -> None:
    """R[rt] = 1 if R[rs] < immediate (signed) else 0."""
    regs = state.registers
    regs[rt] = 1 if regs[rs] < immediate else 0


def execute_syscall(state: MipsState, out: Optional[TextIO] = None) -> None:
    """Perform the system call selected by $v0 (R2), writing its output to out."""
    stream = sys.stdout if out is None else out
    code = state.registers[_V0_REGISTER]
    if code == 1:
        print(f"IMPRIMIR_INTEIRO: {state.registers[_A0_REGISTER]}", file=stream)
    elif code == 4:
        print("IMPRIMIR_STRING: (nao implementado)", file=stream)
    elif code == 10:
        print("Syscall SAIR executada.", file=stream)
    else:
        print(f"Erro: Syscall com codigo {code} nao reconhecido.", file=stream)