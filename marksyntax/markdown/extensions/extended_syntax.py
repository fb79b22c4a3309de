# marksyntax/markdown/extensions/extended_syntax.py
"""
A Markdown extension that recognizes the extended syntax inline:
- Equations ``![$F=ma$](eq:F=m*a)`` become ``<equation display=".." graphable="false">``
- Image protocol tags ``![Demo](video:x.mp4)`` become ``<custom protocol="video" alt="Demo">``
- Bracket protocol tags ``[[Simulation:pendulum]]`` become ``<custom protocol="simulation">``
- ``$$...$$`` and ``$...$`` become ``<latex type="block">`` and ``<latex type="inline">``

Notes:
- Each processor reuses the compiled pattern from marksyntax.patterns and
  delegates value decoding to marksyntax.parser, so rendering and extraction
  cannot disagree.
- Node text is an AtomicString; LaTeX such as ``a_1 * b_2`` must not be
  re-parsed as emphasis.
"""

import logging
import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor
from markdown.util import AtomicString

from marksyntax import parser, patterns
from marksyntax.models import CustomProtocol, Equation, Math

logger = logging.getLogger(__name__)

# Above "escape" (180) and the link/image processors, below "backtick" (190).
# Equations must run before the generic protocol form, protocols before math
# so a "$" inside an alt text is not consumed as inline math.
EQUATION_PRIORITY = 189
PROTOCOL_IMAGE_PRIORITY = 188
PROTOCOL_BRACKET_PRIORITY = 187
BLOCK_MATH_PRIORITY = 186
INLINE_MATH_PRIORITY = 185


def element_to_node(element) -> etree.Element:
    """Convert an extracted element to a generic tagged node."""
    if isinstance(element, Equation):
        node = etree.Element("equation")
        node.set("display", element.display)
        node.set("graphable", "true" if element.graphable else "false")
    elif isinstance(element, CustomProtocol):
        node = etree.Element("custom")
        node.set("protocol", element.protocol)
        if element.alt:
            node.set("alt", element.alt)
    elif isinstance(element, Math):
        node = etree.Element("latex")
        node.set("type", "block" if element.is_block else "inline")
    else:
        raise TypeError(f"Unsupported element type: {type(element).__name__}")

    node.text = AtomicString(element.content)
    return node


class _PatternTableProcessor(InlineProcessor):
    """Inline processor bound to one compiled pattern from the table."""

    compiled_pattern = None

    def __init__(self, md=None):
        super().__init__(self.compiled_pattern.pattern, md)
        # Keep the shared compiled object (and its flags) instead of the
        # recompiled copy InlineProcessor builds from the source string.
        self.compiled_re = self.compiled_pattern

    def build(self, match):
        raise NotImplementedError

    def handleMatch(self, m, data):
        element = self.build(m)
        if element is None:
            return None, None, None
        return element_to_node(element), m.start(0), m.end(0)


class EquationInlineProcessor(_PatternTableProcessor):
    compiled_pattern = patterns.EQUATION

    def build(self, match):
        return parser.equation_from_match(match)


class ProtocolImageInlineProcessor(_PatternTableProcessor):
    # Refuses reserved tokens (eq, grapheq): the builder returns None and
    # the match is left to the equation processor.
    compiled_pattern = patterns.PROTOCOL_IMAGE

    def build(self, match):
        return parser.protocol_image_from_match(match)


class ProtocolBracketInlineProcessor(_PatternTableProcessor):
    compiled_pattern = patterns.PROTOCOL_BRACKET

    def build(self, match):
        return parser.protocol_bracket_from_match(match)


class BlockMathInlineProcessor(_PatternTableProcessor):
    compiled_pattern = patterns.BLOCK_MATH

    def build(self, match):
        return parser.math_from_match(match, is_block=True)


class InlineMathInlineProcessor(_PatternTableProcessor):
    compiled_pattern = patterns.INLINE_MATH

    def build(self, match):
        return parser.math_from_match(match)


class ExtendedSyntaxExtension(Extension):
    def __init__(self, **kwargs):
        # Defaults can be overridden via extension_configs
        self.config = {
            "equations": [True, "Recognize eq: and grapheq: equations"],
            "protocols": [True, "Recognize image and bracket protocol tags"],
            "math": [True, "Recognize $...$ and $$...$$ math"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        registered = []

        if self.getConfig("equations"):
            md.inlinePatterns.register(
                EquationInlineProcessor(md), "marksyntax_equation", EQUATION_PRIORITY
            )
            registered.append("equation")

        if self.getConfig("protocols"):
            md.inlinePatterns.register(
                ProtocolImageInlineProcessor(md),
                "marksyntax_protocol_image",
                PROTOCOL_IMAGE_PRIORITY,
            )
            md.inlinePatterns.register(
                ProtocolBracketInlineProcessor(md),
                "marksyntax_protocol_bracket",
                PROTOCOL_BRACKET_PRIORITY,
            )
            registered.extend(["protocol_image", "protocol_bracket"])

        if self.getConfig("math"):
            md.inlinePatterns.register(
                BlockMathInlineProcessor(md), "marksyntax_block_math", BLOCK_MATH_PRIORITY
            )
            md.inlinePatterns.register(
                InlineMathInlineProcessor(md), "marksyntax_inline_math", INLINE_MATH_PRIORITY
            )
            registered.extend(["block_math", "inline_math"])

        logger.debug(f"Registered extended syntax processors: {', '.join(registered) or 'none'}")


def makeExtension(**kwargs):
    return ExtendedSyntaxExtension(**kwargs)
