# mcroasm

`mcroasm` is the macro stage of an assembler for a small teaching assembly
language. It reads source files with the `.as` extension, expands every
`mcro ... mcroend` block and writes the result next to the input with the
`.am` extension.

## Installation

```
pip install .
```

## Command line

Pass one or more base names, without the extension:

```
mcroasm program1 program2
```

For each name `NAME`, the file `NAME.as` is read and `NAME.am` is written.
Progress and errors are printed on standard output. A file that fails
pre-assembly has no `.am` file left behind, and the remaining files are
still processed. Run with no arguments to see the usage line; the command
then exits with status 1, otherwise with status 0.

## Macro syntax

```
mcro load_pair
    mov r1, r2
    add r3, r4
mcroend

load_pair
stop
```

- A definition starts with a line whose first word is `mcro`, followed by
  the macro name, and ends with a line whose first word is `mcroend`.
- A line whose first word is a macro defined earlier in the file is replaced
  by the macro's body, line for line. The rest of that line is dropped, and a
  macro name after a label (`main: load_pair`) is not expanded.
- Lines inside a definition are stored exactly as written, comments included.
- Comment lines (first word starting with `;`), blank lines and all other
  lines are copied unchanged.
- A macro may hold at most 100 lines.
- Input lines longer than 80 characters are split into pieces of at most
  80 characters, each handled as a line of its own.

Pre-assembly stops with an error when a macro name is a reserved word (an
instruction such as `mov` or `stop`, a directive such as `.data`, or a
register `r0` to `r7`), when a macro is defined twice, when a macro body is
too long, or when the input file cannot be read or the output file cannot be
written.

## Library use

```python
from mcroasm.pre_assembler import expand_macros, pre_assemble_file, PreAssemblyError

source = ["mcro twice\n", "inc r1\n", "inc r1\n", "mcroend\n", "twice\n"]
print("".join(expand_macros(source)))

try:
    output_path = pre_assemble_file("program")  # reads program.as, writes program.am
except PreAssemblyError as error:
    print(error)  # e.g. "Error on line 3: Duplicate definition of macro 'twice'."
```

`PreAssemblyError` carries `message` and `line_number` (None for file
errors). `determine_line_type(line, in_macro, macros)` classifies a single
line and returns a `LineType` together with the line's first word, and
`is_reserved_word(name)` tells whether a name is reserved.

`mcroasm.macro_table.MacroTable` holds `Macro` definitions by name and can be
used on its own:

```python
from mcroasm.macro_table import MacroTable

table = MacroTable()
table.add("twice", ["inc r1\n", "inc r1\n"])
assert "twice" in table
print(table.find("twice").lines)
```

## What it does not do

`mcroasm` only expands macros. It does not go on to assemble the `.am`
output: it builds no symbol table, assigns no addresses, checks no
instructions or operands, and writes no object, entry or extern files.