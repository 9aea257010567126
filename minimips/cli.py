"""Interactive menu for loading and running binary MIPS programs."""

import argparse
import sys
from collections.abc import Iterator
from typing import Optional, TextIO

from minimips.cpu import MipsState, new_memory
from minimips.instructions import MemoryAccessError
from minimips.simulator import UnknownInstructionError, step

MAX_INSTRUCTIONS = 256
INSTRUCTION_WIDTH = 32

_MENU = (
    "\n--- Mini Simulador MIPS ---\n"
    "1. Carregar Programa Binario\n"
    "2. Executar Passo a Passo\n"
    "3. Executar Programa Completo\n"
    "4. Exibir Registradores e PC\n"
    "5. Sair\n"
    "Escolha uma opcao: "
)
_NOT_LOADED = "Nenhum programa carregado!"
_FINISHED = "Fim do programa. Para re-executar, carregue o programa novamente (Opcao 1)."
_EXECUTION_ERRORS = (UnknownInstructionError, MemoryAccessError)


def _line_chunks(text: str) -> Iterator[str]:
    """Yield pieces as a reader taking at most 32 characters per line read would."""
    start = 0
    while start < len(text):
        newline = text.find("\n", start)
        end = len(text) if newline == -1 else newline + 1
        line = text[start:end]
        start = end
        while line:
            yield line[:INSTRUCTION_WIDTH]
            line = line[INSTRUCTION_WIDTH:]


def load_program(path) -> list[str]:
    """Read up to 256 instructions of exactly 32 characters from a text file."""
    with open(path, encoding="latin-1", newline="") as handle:
        text = handle.read()
    program: list[str] = []
    for chunk in _line_chunks(text):
        if len(program) >= MAX_INSTRUCTIONS:
            break
        candidate = chunk.split("\n", 1)[0]
        if len(candidate) == INSTRUCTION_WIDTH:
            program.append(candidate)
    return program


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_menu(stdin: TextIO, stdout: TextIO) -> None:
    """Drive the simulator from menu choices read on stdin until exit or end of input."""
    state = MipsState()
    memory = new_memory()
    program: list[str] = []
    loaded = False
    tokens = _tokens(stdin)

    def say(message: str) -> None:
        print(message, file=stdout)

    def run_step() -> bool:
        try:
            return step(program, state, memory, stdout)
        except _EXECUTION_ERRORS as error:
            say(str(error))
            return True

    while True:
        stdout.write(_MENU)
        token = next(tokens, None)
        if token is None:
            return
        try:
            option = int(token)
        except ValueError:
            option = 0

        if option == 1:
            stdout.write("Digite o nome do arquivo de programa (.txt): ")
            name = next(tokens, None)
            if name is None:
                return
            try:
                new_program = load_program(name)
            except OSError as error:
                print(f"Erro ao abrir o arquivo: {error.strerror or error}", file=sys.stderr)
                continue
            program = new_program
            state.reset()
            loaded = True
            say(f"Programa carregado com {len(program)} instrucoes.")
        elif option in (2, 3):
            if not loaded:
                say(_NOT_LOADED)
                continue
            if state.pc >= len(program):
                say(_FINISHED)
                continue
            if option == 2:
                run_step()
            else:
                while state.pc < len(program):
                    if not run_step():
                        break
                say("\n--- Execucao Finalizada ---")
            stdout.write(state.format_registers())
        elif option == 4:
            stdout.write(state.format_registers())
        elif option == 5:
            say("Saindo do simulador...")
            return
        else:
            say("Opcao invalida!")


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive simulator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="minimips", description="Interactive MIPS instruction simulator."
    )
    parser.parse_args(argv)
    run_menu(sys.stdin, sys.stdout)
    return 0