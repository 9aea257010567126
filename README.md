# minimips

minimips is a small simulator for a subset of the MIPS instruction set. It
loads a program written as 32-bit binary strings, prints the assembly form of
each instruction as it runs, and keeps 32 registers, a program counter and a
1024-word data memory. Its menu and messages are in Portuguese.

## Installing

    pip install .

## Running

    minimips

The command takes no options besides `-h`/`--help`. It reads menu choices from
standard input and opens this menu:

1. Carregar Programa Binario: asks for a file name and loads it
2. Executar Passo a Passo: runs one instruction, then shows the registers
3. Executar Programa Completo: runs until the end of the program or an exit
   syscall, then shows the registers
4. Exibir Registradores e PC: shows the registers and the program counter
5. Sair: quits

The menu also ends when standard input runs out. Any other choice prints
`Opcao invalida!`. If a file cannot be opened, the error goes to standard
error and the current program stays loaded.

### Program files

A program file is plain text with one instruction per line, written as 32
characters of `0` and `1`. Lines are read in pieces of at most 32 characters;
every piece of exactly 32 characters becomes an instruction and shorter
pieces are skipped. At most 256 instructions are loaded. Loading a program
resets the registers and the program counter (data memory is kept).

Example program (put 5 in R4, put 1 in R2, then print R4 with syscall 1):

    00100000000001000000000000000101
    00100000000000100000000000000001
    00000000000000000000000000001100

Once the program counter is past the last instruction, the program has to be
loaded again to run it again.

## Supported instructions

| Type | Instructions                                               |
|------|------------------------------------------------------------|
| R    | `add`, `sub`, `mult`, `and`, `or`, `sll`, `slt`, `syscall` |
| I    | `addi`, `lw`, `sw`, `lui`, `slti`                          |

Register values are signed 32-bit integers and arithmetic wraps around.

- `mult` writes the high word of the product to R1 and the low word to R2.
- `lw` and `sw` take a byte address, R[rs] + immediate, and divide it by 4 to
  index the word memory. An address outside memory raises
  `MemoryAccessError`; the menu prints its message and carries on.
- The syscall code comes from R2: `1` prints the integer in R4, `4` prints a
  note that string printing is not available, `10` prints an exit message and
  stops a full run, and any other code prints an error message.
- An unknown opcode or funct raises `UnknownInstructionError` when executed;
  `disassemble` returns a text naming the unknown field instead.

## Using it as a library

    import io

    from minimips.cpu import MipsState, new_memory
    from minimips.simulator import decode, disassemble, step

    program = ["00100000000001000000000000000101"]
    state = MipsState()
    memory = new_memory()
    out = io.StringIO()

    print(disassemble(int(program[0], 2)))   # addi R4, R0, 5
    running = step(program, state, memory, out)
    print(state.registers[4])                # 5
    print(state.format_registers())

- `minimips.util.binary_to_int(text)` parses a binary numeral into an unsigned
  32-bit value.
- `minimips.cpu.MipsState` holds `registers` and `pc`; `reset()` clears them
  and `format_registers()` renders them as text. `new_memory()` returns 1024
  zeroed words.
- `minimips.instructions` has one `execute_*` function per instruction.
- `minimips.simulator.decode(word)` returns an `Instruction` with its fields
  and a sign-extended immediate; `execute(word, state, memory, out)` applies
  one word; `step(...)` fetches the instruction at the program counter,
  prints a trace line, advances the counter before executing, and returns
  `False` after an exit syscall.
- `minimips.cli.load_program(path)` reads a program file as described above,
  and `run_menu(stdin, stdout)` drives the menu on any text streams.

## What it does not do

There are no branch or jump instructions, so programs run straight through
from first instruction to last. There are no separate HI/LO registers, no
assembler for textual assembly, and syscall 4 does not print strings.

## Tests

    pip install .[test]
    pytest