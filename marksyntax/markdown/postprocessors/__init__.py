# marksyntax/markdown/postprocessors/__init__.py

from .math_markup import math_markup_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    math_markup_default,  # Turn <latex> nodes into MathJax spans with copy buttons
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
