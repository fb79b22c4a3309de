# marksyntax/markdown/renderer.py

import logging

import markdown

from .config import get_markdown_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline using Python-Markdown

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data
    """
    context = context or {}

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text or "", context)

    # Markdown conversion; a fresh instance per call keeps renders independent
    config = get_markdown_config()
    md = markdown.Markdown(
        extensions=config["extensions"],
        extension_configs=config.get("extension_configs", {}),
        output_format=config.get("output_format", "html"),
    )
    html = md.convert(text)
    logger.debug(f"Rendered {len(text)} characters of markdown to {len(html)} characters of HTML")

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html
