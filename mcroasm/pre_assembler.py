"""Macro expansion: turns a ``.as`` source file into a ``.am`` file."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from pathlib import Path

from .macro_table import MacroTable

MAX_MACRO_NAME = 31
MAX_MACRO_LINES = 100
MAX_LINE_LENGTH = 81

_ENCODING = "latin-1"

RESERVED_WORDS = frozenset(
    {
        "mov", "cmp", "add", "sub", "not", "clr", "lea", "inc", "dec",
        "jmp", "bne", "red", "prn", "jsr", "rts", "stop",
        ".data", ".string", ".mat", ".entry", ".extern",
        "r0", "r1", "r2", "r3", "r4", "r5", "r6", "r7",
    }
)


class LineType(enum.Enum):
    IGNORE = enum.auto()
    MACRO_DEF_START = enum.auto()
    MACRO_DEF_END = enum.auto()
    MACRO_CONTENT = enum.auto()
    MACRO_CALL = enum.auto()
    REGULAR = enum.auto()


class PreAssemblyError(Exception):
    """Raised when a source file cannot be pre-assembled."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return f"Error: {self.message}"
        return f"Error on line {self.line_number}: {self.message}"


def is_reserved_word(name: str) -> bool:
    """Return True if ``name`` is an instruction, directive or register."""
    return name in RESERVED_WORDS


def determine_line_type(
    line: str, in_macro: bool, macros: MacroTable
) -> tuple[LineType, str | None]:
    """Classify a line; return its type and its first word (None if blank)."""
    words = line.split()
    if not words:
        return LineType.IGNORE, None
    first = words[0]
    if in_macro:
        if first == "mcroend":
            return LineType.MACRO_DEF_END, first
        return LineType.MACRO_CONTENT, first
    if first.startswith(";"):
        return LineType.IGNORE, first
    if first == "mcro":
        return LineType.MACRO_DEF_START, first
    if first in macros:
        return LineType.MACRO_CALL, first
    return LineType.REGULAR, first


def expand_macros(lines: Iterable[str]) -> list[str]:
    """Expand macro definitions and calls, returning the output lines."""
    macros = MacroTable()
    output: list[str] = []
    in_macro = False
    name = ""
    body: list[str] = []

    for line_number, line in enumerate(lines, start=1):
        line_type, first_word = determine_line_type(line, in_macro, macros)

        if line_type is LineType.MACRO_DEF_START:
            in_macro = True
            words = line.split()
            name = words[1] if len(words) > 1 else ""
            body = []
            if is_reserved_word(name):
                raise PreAssemblyError(
                    f"Macro name '{name}' is a reserved word.", line_number
                )
            if name in macros:
                raise PreAssemblyError(
                    f"Duplicate definition of macro '{name}'.", line_number
                )
        elif line_type is LineType.MACRO_DEF_END:
            in_macro = False
            macros.add(name, body)
        elif line_type is LineType.MACRO_CONTENT:
            if len(body) >= MAX_MACRO_LINES:
                raise PreAssemblyError(f"Macro '{name}' is too long.", line_number)
            body.append(line)
        elif line_type is LineType.MACRO_CALL:
            output.extend(macros.find(first_word).lines)
        else:
            output.append(line)

    return output


def _read_chunks(stream: Iterable[str]) -> Iterator[str]:
    """Yield lines no longer than MAX_LINE_LENGTH - 1 characters each."""
    limit = MAX_LINE_LENGTH - 1
    for line in stream:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def pre_assemble_file(filename: str | Path) -> Path:
    """Expand ``<filename>.as`` into ``<filename>.am`` and return the output path.

    On error no output file is left behind.
    """
    input_path = Path(f"{filename}.as")
    output_path = Path(f"{filename}.am")

    try:
        with input_path.open("r", encoding=_ENCODING) as source:
            try:
                expanded = expand_macros(_read_chunks(source))
            except PreAssemblyError:
                output_path.unlink(missing_ok=True)
                raise
    except OSError as exc:
        raise PreAssemblyError(
            f"Failed to open input file '{input_path}'."
        ) from exc

    try:
        with output_path.open("w", encoding=_ENCODING) as target:
            target.writelines(expanded)
    except OSError as exc:
        raise PreAssemblyError(
            f"Failed to create output file '{output_path}'."
        ) from exc

    return output_path