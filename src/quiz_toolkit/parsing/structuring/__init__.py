"""
Module: parsing.structuring

Purpose:
    Turns the classified line stream into question builders.

Key Modules:
    - assembler: Idle/InQuestion state machine folded over the lines
"""

from .assembler import AssemblerState, ParserInvariantError, assemble

__all__ = ["AssemblerState", "ParserInvariantError", "assemble"]
