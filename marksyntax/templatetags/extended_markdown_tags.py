# marksyntax/templatetags/extended_markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from marksyntax.markdown.renderer import render_markdown
from marksyntax.parser import has_any_extended_syntax

register = template.Library()


@register.filter(name="extended_markdown")
def extended_markdown_filter(value):
    """Render markdown; output is marked safe only after the bleach sanitizer ran"""
    return mark_safe(render_markdown(value))


@register.filter(name="has_extended_syntax")
def has_extended_syntax_filter(value):
    """True when the text uses equations, protocol tags or math"""
    return has_any_extended_syntax(str(value or ""))


@register.simple_tag(takes_context=True)
def extended_markdown_with_context(context, value):
    """Template tag that passes template context to processors"""
    processor_context = {
        "keep_comments": bool(context.get("keep_comments")),
        "math_copy_buttons": context.get("math_copy_buttons", True),
    }
    return mark_safe(render_markdown(value, context=processor_context))
