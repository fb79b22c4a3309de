"""
Queryable wrapper around the elements extracted from one document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .models import CustomProtocol, Element, ElementKind

_EQUATION_KINDS = (ElementKind.EQUATION, ElementKind.GRAPH_EQUATION)
_MATH_KINDS = (ElementKind.INLINE_MATH, ElementKind.BLOCK_MATH)


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing extended markdown.

    Attributes:
        source: The original, unmodified input
        stripped_source: The input with HTML comments removed
        elements: Extracted elements ordered by start offset
    """

    source: str
    stripped_source: str
    elements: tuple[Element, ...] = ()

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def by_kind(self, kind: ElementKind) -> list[Element]:
        return [e for e in self.elements if e.kind == kind]

    def by_protocol(self, name: str) -> list[CustomProtocol]:
        """Custom protocol elements for ``name``, compared case-insensitively."""
        return [e for e in self.elements if e.is_protocol(name)]

    @property
    def equations(self) -> list[Element]:
        """Solvable and graphable equations, in document order."""
        return [e for e in self.elements if e.kind in _EQUATION_KINDS]

    @property
    def custom_protocol(self) -> list[CustomProtocol]:
        return self.by_kind(ElementKind.CUSTOM_PROTOCOL)

    @property
    def math(self) -> list[Element]:
        """Inline and block math, in document order."""
        return [e for e in self.elements if e.kind in _MATH_KINDS]

    @property
    def protocols(self) -> frozenset[str]:
        return frozenset(e.protocol for e in self.custom_protocol)

    @property
    def has_non_text_elements(self) -> bool:
        return any(e.kind != ElementKind.TEXT for e in self.elements)
