"""Macro pre-assembler that expands mcro/mcroend blocks in assembly sources."""

__version__ = "0.1.0"
__all__ = ["macro_table", "pre_assembler", "cli"]