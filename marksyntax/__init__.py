"""
Extraction of extended markdown syntax: equations, protocol tags and math.
"""

from .models import CustomProtocol, Element, ElementKind, Equation, Math, Text
from .parser import (
    extract_custom_protocol,
    extract_equations,
    extract_math,
    get_protocols,
    has_any_extended_syntax,
    has_custom_protocol,
    has_equations,
    has_math,
    has_protocol,
    parse,
    strip_comments,
)
from .result import ParseResult

__all__ = [
    'CustomProtocol',
    'Element',
    'ElementKind',
    'Equation',
    'Math',
    'ParseResult',
    'Text',
    'extract_custom_protocol',
    'extract_equations',
    'extract_math',
    'get_protocols',
    'has_any_extended_syntax',
    'has_custom_protocol',
    'has_equations',
    'has_math',
    'has_protocol',
    'parse',
    'strip_comments',
]
