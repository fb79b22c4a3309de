# marksyntax/markdown/preprocessors/__init__.py

from .comment_stripper import comment_stripper_default

PREPROCESSORS = [
    comment_stripper_default,  # Drop <!-- --> regions before conversion
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
