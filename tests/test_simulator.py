import io

import pytest

from minimips.cpu import MipsState, new_memory
from minimips.instructions import MemoryAccessError
from minimips.simulator import (
    Instruction,
    UnknownInstructionError,
    decode,
    disassemble,
    execute,
    step,
)


def r_type(rs, rt, rd, shamt, funct):
    return (rs << 21) | (rt << 16) | (rd << 11) | (shamt << 6) | funct


def i_type(opcode, rs, rt, immediate):
    return (opcode << 26) | (rs << 21) | (rt << 16) | (immediate & 0xFFFF)


def bits(word):
    return format(word, "032b")


def test_decode_r_type_fields():
    ins = decode(r_type(5, 6, 7, 3, 0x20))
    assert ins == Instruction(opcode=0, rs=5, rt=6, rd=7, shamt=3, funct=0x20, immediate=ins.immediate)
    assert (ins.rs, ins.rt, ins.rd, ins.shamt, ins.funct) == (5, 6, 7, 3, 0x20)


def test_decode_sign_extends_immediate():
    assert decode(i_type(0x08, 1, 2, -5)).immediate == -5
    assert decode(i_type(0x08, 1, 2, 100)).immediate == 100
    assert decode(i_type(0x08, 1, 2, -5)).opcode == 0x08


@pytest.mark.parametrize(
    "word, text",
    [
        (r_type(1, 2, 3, 0, 0x20), "add R3, R1, R2"),
        (r_type(1, 2, 3, 0, 0x22), "sub R3, R1, R2"),
        (r_type(1, 2, 0, 0, 0x18), "mult R1, R2"),
        (r_type(1, 2, 3, 0, 0x24), "and R3, R1, R2"),
        (r_type(1, 2, 3, 0, 0x25), "or R3, R1, R2"),
        (r_type(0, 2, 3, 4, 0x00), "sll R3, R2, 4"),
        (r_type(1, 2, 3, 0, 0x2A), "slt R3, R1, R2"),
        (r_type(0, 0, 0, 0, 0x0C), "syscall"),
        (i_type(0x08, 1, 2, -5), "addi R2, R1, -5"),
        (i_type(0x23, 1, 2, 8), "lw R2, 8(R1)"),
        (i_type(0x2B, 1, 2, 8), "sw R2, 8(R1)"),
        (i_type(0x0F, 0, 2, 1), "lui R2, 1"),
        (i_type(0x0A, 1, 2, 9), "slti R2, R1, 9"),
        (r_type(0, 0, 0, 0, 0x3F), "Tipo R desconhecido (funct: 0x3F)"),
        (i_type(0x3F, 0, 0, 0), "Tipo I/J desconhecido (opcode: 0x3F)"),
    ],
)
def test_disassemble(word, text):
    assert disassemble(word) == text


def test_execute_addi_then_add():
    state = MipsState()
    memory = new_memory()
    execute(i_type(0x08, 0, 1, 20), state, memory)
    execute(i_type(0x08, 0, 2, -7), state, memory)
    execute(r_type(1, 2, 3, 0, 0x20), state, memory)
    assert state.registers[1] == 20
    assert state.registers[2] == -7
    assert state.registers[3] == state.registers[1] + state.registers[2]


def test_execute_store_then_load_round_trip():
    state = MipsState()
    memory = new_memory()
    execute(i_type(0x08, 0, 5, 1234), state, memory)
    execute(i_type(0x2B, 0, 5, 40), state, memory)
    execute(i_type(0x23, 0, 6, 40), state, memory)
    assert state.registers[6] == 1234
    assert 1234 in memory


def test_execute_unknown_opcode_raises():
    with pytest.raises(UnknownInstructionError, match="Opcode 0x3F"):
        execute(i_type(0x3F, 0, 0, 0), MipsState(), new_memory())


def test_execute_unknown_funct_raises():
    with pytest.raises(UnknownInstructionError, match="Funct 0x3F"):
        execute(r_type(0, 0, 0, 0, 0x3F), MipsState(), new_memory())


def test_execute_syscall_writes_to_out():
    state = MipsState()
    state.registers[2] = 1
    state.registers[4] = 42
    out = io.StringIO()
    execute(r_type(0, 0, 0, 0, 0x0C), state, new_memory(), out)
    assert out.getvalue() == "IMPRIMIR_INTEIRO: 42\n"


def test_step_traces_and_advances_pc():
    word = i_type(0x08, 0, 3, 9)
    program = [bits(word)]
    state = MipsState()
    out = io.StringIO()
    assert step(program, state, new_memory(), out) is True
    assert state.pc == 1
    assert state.registers[3] == 9
    assert out.getvalue() == f"Executando [PC=0]: {bits(word)} -> addi R3, R0, 9\n"


def test_step_reports_exit_syscall():
    program = [bits(i_type(0x08, 0, 2, 10)), bits(r_type(0, 0, 0, 0, 0x0C))]
    state = MipsState()
    memory = new_memory()
    out = io.StringIO()
    assert step(program, state, memory, out) is True
    assert step(program, state, memory, out) is False
    assert "Syscall SAIR executada." in out.getvalue()


def test_step_advances_pc_before_failing_load():
    program = [bits(i_type(0x23, 0, 1, 0x7FFC))]
    state = MipsState()
    with pytest.raises(MemoryAccessError):
        step(program, state, new_memory(), io.StringIO())
    assert state.pc == 1