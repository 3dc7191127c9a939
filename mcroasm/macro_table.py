"""Storage for macros collected during pre-assembly."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Macro:
    """A named macro and the source lines it expands to."""

    name: str
    lines: tuple[str, ...]


class MacroTable:
    """Macros by name. Adding a name again replaces the earlier definition."""

    def __init__(self) -> None:
        self._macros: dict[str, Macro] = {}

    def add(self, name: str, lines: Iterable[str]) -> Macro:
        """Store a macro and return it."""
        macro = Macro(name, tuple(lines))
        self._macros[name] = macro
        return macro

    def find(self, name: str) -> Macro | None:
        """Return the macro called ``name``, or None if there is none."""
        return self._macros.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._macros

    def __len__(self) -> int:
        return len(self._macros)

    def __iter__(self) -> Iterator[Macro]:
        return iter(self._macros.values())