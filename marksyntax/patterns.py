"""
Compiled patterns for the extended markdown syntax.

    ![$F = ma$](eq:F=m*a)          → equation
    ![$y = x^2$](grapheq:y=x^2)    → graphable equation
    ![Demo](video:wave.mp4)        → custom protocol (image style)
    [[Simulation:pendulum]]        → custom protocol (bracket style)
    $$\\int_0^1 x^2 dx$$            → block math
    $E = mc^2$                     → inline math
    <!-- ... -->                   → comment (stripped, never an element)

Flags are written inline so the pattern source can be reused by the
markdown inline processors without losing case-insensitivity.
"""

import re

# Group 1: display, group 2: tag (eq|grapheq), group 3: raw value
EQUATION = re.compile(r"(?i)!\[([^\]]*)\]\((eq|grapheq):([^)]+)\)")

# Group 1: alt, group 2: protocol token, group 3: raw value
PROTOCOL_IMAGE = re.compile(r"!\[([^\]]*)\]\(([A-Za-z][A-Za-z0-9_]*):([^)]+)\)")

# Group 1: protocol token, group 2: value (taken verbatim)
PROTOCOL_BRACKET = re.compile(r"\[\[([A-Za-z][A-Za-z0-9_]*):([^\]]+)\]\]")

BLOCK_MATH = re.compile(r"\$\$([^$]+)\$\$")

# Look-around keeps inline matches out of $$...$$ delimiters
INLINE_MATH = re.compile(r"(?<!\$)\$([^$\n]+)\$(?!\$)")

COMMENT = re.compile(r"<!--[\s\S]*?-->")

# Protocol tokens owned by the equation pattern
RESERVED_PROTOCOLS = frozenset({"eq", "grapheq"})
