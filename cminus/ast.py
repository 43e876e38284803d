"""Abstract syntax tree nodes produced by the parser."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class Node:
    """A syntax tree node with a kind name, an optional value and children.

    Children may contain ``None`` for optional parts of the grammar; such
    entries are skipped when the tree is printed.
    """

    name: str
    value: str | None = None
    children: list[Node | None] = field(default_factory=list)

    def _lines(self, indent: int) -> Iterator[str]:
        label = f"{self.name}: {self.value}" if self.value else self.name
        yield "  " * indent + label
        for child in self.children:
            if child is not None:
                yield from child._lines(indent + 1)

    def render(self, indent: int = 0) -> str:
        """Return the tree as text, two spaces of indentation per level."""
        return "".join(line + "\n" for line in self._lines(indent))

    def dump(self, indent: int = 0, file: TextIO | None = None) -> None:
        """Write the rendered tree to ``file`` (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.render(indent))