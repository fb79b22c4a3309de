# marksyntax/markdown/postprocessors/math_markup.py

from bs4 import BeautifulSoup, NavigableString, Tag

COPY_ICON_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 448 512"><path d="M433.941 65.941l-51.882-51.882A48 48 0 0 0 '
    "348.118 0H176c-26.51 0-48 21.49-48 48v48H48c-26.51 0-48 21.49-48 48v320c0 26.51 21.49 48 48 48h224c26.51 0 48-21.49 "
    "48-48v-48h80c26.51 0 48-21.49 48-48V99.882a48 48 0 0 0-14.059-33.941zM266 464H54a6 6 0 0 1-6-6V150a6 6 0 0 1 6-6h74v224c0 "
    "26.51 21.49 48 48 48h96v42a6 6 0 0 1-6 6zm128-96H182a6 6 0 0 1-6-6V54a6 6 0 0 1 6-6h106v88c0 13.255 10.745 24 24 24h88v202a6 "
    "6 0 0 1-6 6zm6-256h-64V48h9.632c1.591 0 3.117.632 4.243 1.757l48.368 48.368a6 6 0 0 1 1.757 4.243V112z\"></path></svg>"
)


def _latex_source(node: Tag) -> str:
    """
    Recover the LaTeX written between the dollar signs.

    Code spans win over math, so "$a `b` c$" reaches us with a <code> child;
    put the backticks back instead of flattening it to "a b c".
    """
    parts = []
    for child in node.children:
        if isinstance(child, NavigableString):
            parts.append(str(child))
        elif child.name == "code":
            parts.append(f"`{child.get_text()}`")
        else:
            parts.append(child.get_text())
    return "".join(parts)


def _build_button_bar(soup: BeautifulSoup, latex_source: str):
    bar = soup.new_tag("span", attrs={"class": "block-button-bar"})
    button = soup.new_tag(
        "button",
        attrs={
            "type": "button",
            "class": "copy",
            "tabindex": "-1",
            "title": f"Copy LaTeX source of this equation to clipboard: {latex_source}",
            "data-latex": latex_source,
        },
    )
    button.append(BeautifulSoup(COPY_ICON_SVG, "html.parser"))
    bar.append(button)
    bar.append(soup.new_tag("span", attrs={"class": "scratchpad"}))
    return bar


def render_math_markup(html: str, context: dict) -> str:
    """
    Rewrite <latex> nodes emitted by the extended syntax extension as MathJax markup.

    Inline math becomes:
    <span class="math inline">\\(LaTeX source\\)</span>

    Block math becomes:
    <span class="math display">
      \\[LaTeX source\\]
      <span class="block-button-bar"><button class="copy" ...>...</button>...</span>
    </span>

    Block math gets the copy button bar unless the context sets
    'math_copy_buttons' to False.
    """
    soup = BeautifulSoup(html, "html.parser")
    add_buttons = context.get("math_copy_buttons", True)

    for node in soup.find_all("latex"):
        latex_source = _latex_source(node)

        # Empty bodies (e.g. "$$  $$") have nothing to typeset
        if not latex_source.strip():
            node.decompose()
            continue

        is_block = node.get("type") == "block"
        span = soup.new_tag("span", attrs={"class": "math display" if is_block else "math inline"})
        if is_block:
            span.string = f"\\[{latex_source}\\]"
            if add_buttons:
                span.append(_build_button_bar(soup, latex_source))
        else:
            span.string = f"\\({latex_source}\\)"

        node.replace_with(span)

    return str(soup)


def math_markup_default(html: str, context: dict) -> str:
    """Default instance of math markup postprocessor"""
    return render_math_markup(html, context)
