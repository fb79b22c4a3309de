import markdown
import pytest
from bs4 import BeautifulSoup

from marksyntax import patterns
from marksyntax.markdown.extensions.extended_syntax import (
    ExtendedSyntaxExtension,
    ProtocolImageInlineProcessor,
    element_to_node,
    makeExtension,
)
from marksyntax.models import Text


def convert(text, **config):
    html = markdown.markdown(text, extensions=[ExtendedSyntaxExtension(**config)])
    return BeautifulSoup(html, "html.parser")


def test_equation_node():
    soup = convert("![$F = ma$](eq:F=m*a)")
    node = soup.find("equation")

    assert node.get_text() == "F=m*a"
    assert node["display"] == "$F = ma$"
    assert node["graphable"] == "false"
    assert soup.find("custom") is None
    assert soup.find("img") is None


def test_graph_equation_node_is_decoded():
    node = convert("![$y$](grapheq:y=x%5E2)").find("equation")

    assert node["graphable"] == "true"
    assert node.get_text() == "y=x^2"


def test_protocol_nodes_keep_decoding_asymmetry():
    image = convert("![](video:path%2Fto%2Ffile.mp4)").find("custom")
    bracket = convert("[[Video:a%2Fb]]").find("custom")

    assert image["protocol"] == "video"
    assert image.get_text() == "path/to/file.mp4"
    assert not image.has_attr("alt")
    assert bracket["protocol"] == "video"
    assert bracket.get_text() == "a%2Fb"


def test_protocol_node_alt():
    node = convert("![Demo](simulation:pendulum)").find("custom")
    assert node["alt"] == "Demo"


def test_math_nodes():
    soup = convert("Energy $E = mc^2$\n\n$$a*b*c$$")
    nodes = soup.find_all("latex")

    assert [(n["type"], n.get_text()) for n in nodes] == [
        ("inline", "E = mc^2"),
        ("block", "a*b*c"),
    ]
    assert soup.find("em") is None


def test_code_spans_are_left_alone():
    soup = convert("`$x$` and `[[Video:a]]`")

    assert soup.find("latex") is None
    assert soup.find("custom") is None
    assert [c.get_text() for c in soup.find_all("code")] == ["$x$", "[[Video:a]]"]


def test_disabled_math():
    soup = convert("$x$ [[Video:a]]", math=False)

    assert soup.find("latex") is None
    assert soup.find("custom") is not None


def test_protocol_image_adapter_refuses_reserved_tokens():
    processor = ProtocolImageInlineProcessor()
    data = "![$x$](eq:x=1)"
    match = processor.compiled_re.search(data)

    assert processor.handleMatch(match, data) == (None, None, None)


def test_adapters_share_the_compiled_patterns():
    assert ProtocolImageInlineProcessor().compiled_re is patterns.PROTOCOL_IMAGE


def test_text_elements_have_no_node():
    with pytest.raises(TypeError):
        element_to_node(Text(body="x", start=0, end=1))


def test_make_extension_accepts_config():
    extension = makeExtension(protocols=False)

    assert isinstance(extension, ExtendedSyntaxExtension)
    assert extension.getConfig("protocols") is False
