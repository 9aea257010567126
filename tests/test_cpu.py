from minimips.cpu import MEMORY_SIZE, NUM_REGISTERS, MipsState, new_memory


def test_new_state_is_zeroed():
    state = MipsState()
    assert len(state.registers) == NUM_REGISTERS
    assert not any(state.registers)
    assert state.pc == 0


def test_states_do_not_share_registers():
    first = MipsState()
    second = MipsState()
    first.registers[3] = 9
    assert second.registers[3] == 0


def test_reset_clears_registers_and_pc():
    state = MipsState()
    state.registers[7] = 123
    state.registers[31] = -5
    state.pc = 12
    state.reset()
    assert state.registers == [0] * NUM_REGISTERS
    assert state.pc == 0


def test_new_memory_size_and_contents():
    memory = new_memory()
    assert len(memory) == MEMORY_SIZE
    assert not any(memory)


def test_format_registers_header_and_footer():
    text = MipsState().format_registers()
    assert text.startswith("\n--- Estado dos Registradores ---\n")
    assert text.endswith("-" * 32 + "\n")


def test_format_registers_shows_pc_and_values():
    state = MipsState()
    state.pc = 7
    state.registers[5] = -1
    state.registers[31] = 255
    text = state.format_registers()
    assert f"PC: {state.pc}\n" in text
    assert "R5: -1 (0xFFFFFFFF)\t" in text
    assert "R31: 255 (0xFF)\t" in text


def test_format_registers_four_per_row():
    text = MipsState().format_registers()
    rows = [line for line in text.splitlines() if line.startswith("R")]
    assert len(rows) * 4 == NUM_REGISTERS
    assert all(row.count("\t") == 4 for row in rows)
    assert text.count("\t") == NUM_REGISTERS