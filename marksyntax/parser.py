"""
Extraction engine for extended markdown syntax.

Scans raw markdown with the compiled patterns, resolves overlaps between
them, decodes captured values and returns a ParseResult. Unrecognized or
malformed syntax is treated as prose: no function in this module raises on
any string input.

Example:
    >>> result = parse("Newton: ![$F = ma$](eq:F=m*a) and $E = mc^2$")
    >>> [e.content for e in result.equations]
    ['F=m*a']
"""

from __future__ import annotations

import logging
import re
from bisect import bisect_left
from typing import Iterator
from urllib.parse import unquote

from . import patterns
from .models import CustomProtocol, Equation, Math
from .result import ParseResult

logger = logging.getLogger(__name__)

Span = tuple[int, int]


def strip_comments(text: str) -> str:
    """Remove every ``<!-- ... -->`` region and nothing else."""
    if not text:
        return ""
    return patterns.COMMENT.sub("", text)


# Per-match builders. The markdown inline processors call these too, so
# decoding and precedence rules live in one place.


def equation_from_match(match: re.Match) -> Equation:
    tag = match.group(2).lower()
    return Equation(
        equation=unquote(match.group(3)),
        display=match.group(1) or "",
        start=match.start(),
        end=match.end(),
        graphable=tag == "grapheq",
    )


def protocol_image_from_match(match: re.Match) -> CustomProtocol | None:
    """
    Build a custom protocol element from an image-style match.

    Returns None when the token is reserved for equations; those matches
    belong to the equation pattern exclusively.
    """
    protocol = match.group(2).lower()
    if protocol in patterns.RESERVED_PROTOCOLS:
        return None

    return CustomProtocol(
        protocol=protocol,
        value=unquote(match.group(3)),
        alt=match.group(1) or None,
        start=match.start(),
        end=match.end(),
    )


def protocol_bracket_from_match(match: re.Match) -> CustomProtocol:
    # Bracket values are taken verbatim, never percent-decoded
    return CustomProtocol(
        protocol=match.group(1),
        value=match.group(2),
        start=match.start(),
        end=match.end(),
    )


def math_from_match(match: re.Match, is_block: bool = False) -> Math:
    return Math(
        body=match.group(1).strip(),
        start=match.start(),
        end=match.end(),
        is_block=is_block,
    )


def _overlaps(start: int, end: int, exclusions: list[Span], starts: list[int]) -> bool:
    # Equation spans come from finditer, so they are sorted and disjoint: only
    # the last span starting before ``end`` can reach past ``start``.
    index = bisect_left(starts, end) - 1
    return index >= 0 and exclusions[index][1] > start


def _scan_equations(text: str) -> list[Equation]:
    return [equation_from_match(m) for m in patterns.EQUATION.finditer(text)]


def _iter_custom_protocol(text: str, exclusions: list[Span]) -> Iterator[CustomProtocol]:
    """
    Yield custom protocol elements lazily, image style first, then bracket style.

    Candidates that intersect an equation span are dropped for both forms,
    so equations always win an overlap. ``exclusions`` must be in document
    order, as produced by the equation scan.
    """
    starts = [excl_start for excl_start, _ in exclusions]

    for match in patterns.PROTOCOL_IMAGE.finditer(text):
        element = protocol_image_from_match(match)
        if element is None:
            continue
        if _overlaps(element.start, element.end, exclusions, starts):
            logger.debug(f"Dropping '{element.protocol}' tag at {element.start}: overlaps an equation")
            continue
        yield element

    for match in patterns.PROTOCOL_BRACKET.finditer(text):
        if _overlaps(match.start(), match.end(), exclusions, starts):
            continue
        yield protocol_bracket_from_match(match)


def _scan_math(text: str) -> list[Math]:
    elements = [math_from_match(m, is_block=True) for m in patterns.BLOCK_MATH.finditer(text)]
    elements.extend(math_from_match(m) for m in patterns.INLINE_MATH.finditer(text))
    return elements


def parse(text: str) -> ParseResult:
    """
    Parse markdown and extract every extended-syntax element.

    Args:
        text: Raw markdown text

    Returns:
        ParseResult with elements sorted by start offset. Offsets always
        refer to ``text``, never to the comment-stripped copy.
    """
    text = text or ""
    stripped = strip_comments(text)

    equations = _scan_equations(text)
    exclusions = [e.span for e in equations]

    elements = list(equations)
    elements.extend(_iter_custom_protocol(text, exclusions))
    elements.extend(_scan_math(text))

    # list.sort is stable, so ties keep scan order
    elements.sort(key=lambda e: e.start)

    logger.debug(
        f"Extracted {len(elements)} elements "
        f"({len(equations)} equations) from {len(text)} characters"
    )
    return ParseResult(source=text, stripped_source=stripped, elements=tuple(elements))


def extract_equations(text: str) -> list[Equation]:
    return parse(text).equations


def extract_custom_protocol(text: str) -> list[CustomProtocol]:
    return parse(text).custom_protocol


def extract_math(text: str) -> list[Math]:
    return parse(text).math


def get_protocols(text: str) -> frozenset[str]:
    """Distinct protocol names used in ``text``, lowercased."""
    if not text:
        return frozenset()
    exclusions = [e.span for e in _scan_equations(text)]
    return frozenset(e.protocol for e in _iter_custom_protocol(text, exclusions))


# Existence checks. These avoid building the element list but agree with
# parse() for every input, e.g. has_equations(t) == bool(parse(t).equations).


def has_equations(text: str) -> bool:
    return bool(text) and patterns.EQUATION.search(text) is not None


def has_math(text: str) -> bool:
    if not text:
        return False
    return (
        patterns.BLOCK_MATH.search(text) is not None
        or patterns.INLINE_MATH.search(text) is not None
    )


def has_custom_protocol(text: str) -> bool:
    if not text:
        return False
    exclusions = [e.span for e in _scan_equations(text)]
    return next(_iter_custom_protocol(text, exclusions), None) is not None


def has_protocol(text: str, name: str) -> bool:
    """
    Whether ``text`` contains a custom protocol tag named ``name``.

    ``name`` is compared as a plain lowercased string and is never compiled
    into a pattern, so regex metacharacters in it match nothing special.
    """
    if not text or not name:
        return False
    exclusions = [e.span for e in _scan_equations(text)]
    return any(e.is_protocol(name) for e in _iter_custom_protocol(text, exclusions))


def has_any_extended_syntax(text: str) -> bool:
    return has_equations(text) or has_custom_protocol(text) or has_math(text)
