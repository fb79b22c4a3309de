"""
Element variants produced by the extraction engine.

Each syntax form has its own frozen dataclass, so a math element can never
carry a protocol and a text element can never carry a display value. All
variants expose the same read-only view (kind, content, display, protocol,
start, end) for code that handles elements generically.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ElementKind(str, Enum):
    EQUATION = "equation"
    GRAPH_EQUATION = "graph_equation"
    CUSTOM_PROTOCOL = "custom_protocol"
    INLINE_MATH = "inline_math"
    BLOCK_MATH = "block_math"
    TEXT = "text"


class _SpanMixin:
    """Offset helpers shared by every element variant."""

    start: int
    end: int

    @property
    def span(self) -> tuple[int, int]:
        return self.start, self.end

    def is_protocol(self, name: str) -> bool:
        return False


@dataclass(frozen=True)
class Equation(_SpanMixin):
    """Solvable equation, or graphable equation when ``graphable`` is set."""

    equation: str
    display: str
    start: int
    end: int
    graphable: bool = False

    @property
    def kind(self) -> ElementKind:
        return ElementKind.GRAPH_EQUATION if self.graphable else ElementKind.EQUATION

    @property
    def content(self) -> str:
        return self.equation

    @property
    def protocol(self) -> None:
        return None


@dataclass(frozen=True)
class CustomProtocol(_SpanMixin):
    """
    A tagged embed such as ``[[Simulation:pendulum]]`` or ``![Demo](video:x)``.

    The protocol token is lowercased on construction so lookups are stable
    regardless of how the author capitalised it.
    """

    protocol: str
    value: str
    start: int
    end: int
    alt: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "protocol", self.protocol.lower())

    @property
    def kind(self) -> ElementKind:
        return ElementKind.CUSTOM_PROTOCOL

    @property
    def content(self) -> str:
        return self.value

    @property
    def display(self) -> str | None:
        return self.alt

    def is_protocol(self, name: str) -> bool:
        if not name:
            return False
        return self.protocol == name.lower()


@dataclass(frozen=True)
class Math(_SpanMixin):
    body: str
    start: int
    end: int
    is_block: bool = False

    @property
    def kind(self) -> ElementKind:
        return ElementKind.BLOCK_MATH if self.is_block else ElementKind.INLINE_MATH

    @property
    def content(self) -> str:
        return self.body

    @property
    def display(self) -> None:
        return None

    @property
    def protocol(self) -> None:
        return None


@dataclass(frozen=True)
class Text(_SpanMixin):
    # Never emitted by parse(); available to callers that represent the
    # gaps between extracted elements.
    body: str
    start: int
    end: int

    @property
    def kind(self) -> ElementKind:
        return ElementKind.TEXT

    @property
    def content(self) -> str:
        return self.body

    @property
    def display(self) -> None:
        return None

    @property
    def protocol(self) -> None:
        return None


Element = Union[Equation, CustomProtocol, Math, Text]
