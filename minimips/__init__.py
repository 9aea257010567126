"""A small simulator for a subset of the MIPS instruction set, with an interactive menu."""

__version__ = "0.1.0"