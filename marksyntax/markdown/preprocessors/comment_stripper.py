"""
Preprocessor that removes HTML comments from markdown before rendering.

Converts:
    Hello <!-- draft note --> World      → Hello  World

Uses the same pattern as ParseResult.stripped_source, so the rendered
document and the extraction result agree on what is commented out.
"""

from marksyntax.parser import strip_comments


def strip_html_comments(text: str, context: dict) -> str:
    """
    Remove comment regions unless the context asks to keep them.

    Args:
        text: Markdown text
        context: May contain 'keep_comments' (bool)

    Returns:
        Markdown with comments removed
    """
    if context.get("keep_comments"):
        return text
    return strip_comments(text)


def comment_stripper_default(text: str, context: dict) -> str:
    """
    Default configuration for comment_stripper.

    Register this in PREPROCESSORS.
    """
    return strip_html_comments(text, context)
