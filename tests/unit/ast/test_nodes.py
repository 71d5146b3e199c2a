#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_nodes.py
"""Unit tests for leaf content nodes.

Tests cover:
- Text nodes (headings, paragraphs, preformatted text)
- Links and images
- Void elements under both closing styles
- Raw passthrough and custom Node subclasses

"""

import pytest

from htmlkit.ast import (
    Container,
    Heading,
    HorizontalRule,
    HtmlTag,
    Image,
    LineBreak,
    Link,
    Node,
    Paragraph,
    Preformatted,
    Raw,
    TextContent,
)
from htmlkit.exceptions import ValidationError
from htmlkit.options import RenderOptions

XHTML = RenderOptions(void_element_style="xhtml")


class Comment(Node):
    """A user-defined node used to check extensibility."""

    def __init__(self, text):
        self.text = text

    def render(self, options=None):
        return f"<!-- {self.text} -->"


@pytest.mark.unit
class TestNodeBase:
    """Tests for the Node base class."""

    def test_cannot_instantiate_abstract(self):
        """Test that Node itself is abstract."""
        with pytest.raises(TypeError):
            Node()

    def test_str_renders(self):
        """Test that str() returns the rendered markup."""
        assert str(Paragraph("hi")) == "<p>hi</p>"

    def test_custom_node(self):
        """Test that a custom node renders through its own method."""
        assert Comment("note").render() == "<!-- note -->"

    def test_custom_node_inside_container(self):
        """Test that custom nodes are accepted as children."""
        assert Container().with_html(Comment("hi")).render() == "<div><!-- hi --></div>"


@pytest.mark.unit
class TestTextContent:
    """Tests for TextContent and its subclasses."""

    def test_generic_text_content(self):
        """Test a paired tag around text."""
        node = TextContent(HtmlTag.SPAN, "inline", [("class", "x")])
        assert node.render() == '<span class="x">inline</span>'

    def test_tag_from_string(self):
        """Test that a tag string is converted to HtmlTag."""
        assert TextContent("code", "x = 1").tag is HtmlTag.CODE_TEXT

    def test_heading(self):
        """Test a heading with an id."""
        assert Heading(1, "header", [("id", "main-header")]).render() == '<h1 id="main-header">header</h1>'

    def test_heading_level_property(self):
        """Test the level property."""
        assert Heading(4, "x").level == 4

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_invalid_level(self, level):
        """Test that out-of-range levels raise."""
        with pytest.raises(ValidationError):
            Heading(level, "x")

    def test_paragraph_with_class(self):
        """Test a paragraph with a class attribute."""
        assert Paragraph("Sample Text", [("class", "red-text")]).render() == '<p class="red-text">Sample Text</p>'

    def test_preformatted_keeps_whitespace(self):
        """Test that preformatted content is written verbatim."""
        text = "line 1\n    line 2\n"
        assert Preformatted(text).render() == f"<pre>{text}</pre>"

    def test_non_string_content(self):
        """Test that non-string content is converted with str()."""
        assert Paragraph(42).render() == "<p>42</p>"

    def test_nested_node_content(self):
        """Test that a node as content is rendered recursively."""
        node = Paragraph(Link("https://example.com", "here"))
        assert node.render() == '<p><a href="https://example.com">here</a></p>'

    def test_content_not_escaped(self):
        """Test that content is inserted without escaping."""
        assert Paragraph("<b>bold</b>").render() == "<p><b>bold</b></p>"

    def test_empty_content(self):
        """Test rendering with empty content."""
        assert Paragraph().render() == "<p></p>"


@pytest.mark.unit
class TestLink:
    """Tests for Link nodes."""

    def test_basic_link(self):
        """Test a link without extra attributes."""
        assert Link("rust-lang.org", "Rust Home").render() == '<a href="rust-lang.org">Rust Home</a>'

    def test_href_comes_first(self):
        """Test that href precedes other attributes."""
        link = Link("/docs", "Docs", [("class", "nav"), ("target", "_blank")])
        assert link.render() == '<a href="/docs" class="nav" target="_blank">Docs</a>'


@pytest.mark.unit
class TestVoidElements:
    """Tests for image, line break and horizontal rule nodes."""

    def test_image(self):
        """Test an image with src and alt."""
        assert Image("myimage.png", "test image").render() == '<img src="myimage.png" alt="test image">'

    def test_image_extra_attributes(self):
        """Test that extra attributes follow src and alt."""
        image = Image("a.png", "A", [("width", 100)])
        assert image.render() == '<img src="a.png" alt="A" width="100">'

    def test_image_xhtml(self):
        """Test self-closing syntax under the xhtml style."""
        assert Image("a.png", "A").render(XHTML) == '<img src="a.png" alt="A"/>'

    def test_line_break(self):
        """Test line break rendering in both styles."""
        assert LineBreak().render() == "<br>"
        assert LineBreak().render(XHTML) == "<br/>"

    def test_horizontal_rule(self):
        """Test horizontal rule rendering with attributes."""
        assert HorizontalRule([("class", "sep")]).render() == '<hr class="sep">'
        assert HorizontalRule().render(XHTML) == "<hr/>"


@pytest.mark.unit
class TestRaw:
    """Tests for Raw passthrough."""

    def test_raw_verbatim(self):
        """Test that raw markup is emitted unchanged."""
        assert Raw("<em>x</em> & y").render() == "<em>x</em> & y"

    def test_raw_ignores_options(self):
        """Test that options do not affect raw content."""
        assert Raw("<br>").render(XHTML) == "<br>"
