"""Command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .pre_assembler import PreAssemblyError, pre_assemble_file


def main(argv: Sequence[str] | None = None) -> int:
    """Pre-assemble each named file (given without the ``.as`` extension)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: mcroasm <file1> <file2> ...")
        return 1

    for name in args:
        print(f"--- Processing file: {name}.as ---")
        try:
            pre_assemble_file(name)
        except PreAssemblyError as exc:
            print(exc)
            print(
                f"Stopping process for {name}.as due to errors in Pre-Assembly.\n"
            )
        else:
            print(f"Pre-assembly for {name}.as completed successfully.\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())