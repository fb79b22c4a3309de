# marksyntax/markdown/postprocessors/sanitizer.py

import logging
from functools import lru_cache

import bleach

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache bleach configuration for better performance."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "sup",
            "sub",
            "del",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "hr",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            # tables
            "table",
            "thead",
            "tbody",
            "tr",
            "th",
            "td",
            # media
            "img",
            # extended syntax nodes from the extended_syntax extension
            "equation",
            "custom",
            "latex",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title"],
        "a": ["href", "title", "rel"],
        "img": ["src", "alt", "title", "width", "height"],
        "code": ["class"],
        "pre": ["class"],
        "th": ["colspan", "rowspan", "scope"],
        "td": ["colspan", "rowspan"],
        "ol": ["start", "type"],
        "equation": ["display", "graphable"],
        "custom": ["protocol", "alt"],
        "latex": ["type"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return allowed_tags, allowed_attrs, allowed_protocols


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.
    This is the FIRST post-processor and should run before any other HTML modifications,
    so the markup added later (math spans, copy buttons) is never escaped.

    Disallowed tags such as <script> are escaped, not dropped. Comments are
    removed unless the context sets 'keep_comments'.
    """
    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    sanitized = bleach.clean(
        html,
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=False,  # Escape disallowed tags instead of removing their text
        strip_comments=not context.get("keep_comments"),
    )
    if sanitized != html:
        logger.debug("Sanitizer changed rendered HTML")
    return sanitized
