"""Processor state: the register file, program counter and data memory."""

from dataclasses import dataclass, field

NUM_REGISTERS = 32
MEMORY_SIZE = 1024


def _zeroed_registers() -> list[int]:
    return [0] * NUM_REGISTERS


@dataclass
class MipsState:
    """The 32 general registers and the program counter."""

    registers: list[int] = field(default_factory=_zeroed_registers)
    pc: int = 0

    def reset(self) -> None:
        """Clear every register and the program counter."""
        self.registers = _zeroed_registers()
        self.pc = 0

    def format_registers(self) -> str:
        """Render the program counter and registers, four per row."""
        parts = ["\n--- Estado dos Registradores ---\n", f"PC: {self.pc & 0xFFFFFFFF}\n"]
        for number, value in enumerate(self.registers, start=1):
            parts.append(f"R{number - 1}: {value} (0x{value & 0xFFFFFFFF:X})\t")
            if number % 4 == 0:
                parts.append("\n")
        parts.append("-" * 32 + "\n")
        return "".join(parts)


def new_memory() -> list[int]:
    """Return a zero-filled data memory of MEMORY_SIZE words."""
    return [0] * MEMORY_SIZE