#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_elements.py
"""Unit tests for the generic HtmlElement."""

import logging

import pytest

from htmlkit.ast import HtmlElement, HtmlTag, Paragraph
from htmlkit.exceptions import InvalidChildError
from htmlkit.options import RenderOptions


@pytest.mark.unit
class TestHtmlElementRendering:
    """Tests for HtmlElement rendering."""

    def test_mixed_children(self):
        """Test text and element children in order."""
        element = (
            HtmlElement(HtmlTag.PARAGRAPH_TEXT)
            .with_child("First")
            .with_child(HtmlElement(HtmlTag.LINE_BREAK))
            .with_child("Second")
        )
        assert element.render() == "<p>First<br>Second</p>"

    def test_empty_paired_tag(self):
        """Test that an empty non-void element still has a closing tag."""
        assert HtmlElement(HtmlTag.DIV).render() == "<div></div>"

    def test_void_xhtml(self):
        """Test a void element under the xhtml style."""
        element = HtmlElement(HtmlTag.IMAGE, [("src", "a.png")])
        assert element.render(RenderOptions(void_element_style="xhtml")) == '<img src="a.png"/>'

    def test_initial_children(self):
        """Test seeding children through the constructor."""
        element = HtmlElement(HtmlTag.SPAN, children=["a", Paragraph("b")])
        assert element.render() == "<span>a<p>b</p></span>"

    def test_nested_elements(self):
        """Test deeply nested generic elements."""
        quote = HtmlElement(HtmlTag.BLOCKQUOTE).with_child(
            HtmlElement(HtmlTag.CITE).with_child("Someone")
        )
        assert quote.render() == "<blockquote><cite>Someone</cite></blockquote>"

    def test_container_helpers_available(self):
        """Test that the HtmlContainer helpers work on elements."""
        element = HtmlElement(HtmlTag.FIGURE).with_image("a.png", "A").with_paragraph("caption")
        assert element.render() == '<figure><img src="a.png" alt="A"><p>caption</p></figure>'


@pytest.mark.unit
class TestHtmlElementChildren:
    """Tests for child validation."""

    def test_void_rejects_child(self):
        """Test that void elements refuse children."""
        with pytest.raises(InvalidChildError, match="void element <br>"):
            HtmlElement(HtmlTag.LINE_BREAK).add_child("text")

    def test_void_rejects_child_in_constructor(self):
        """Test that seeding a void element with children fails."""
        with pytest.raises(InvalidChildError):
            HtmlElement(HtmlTag.HORIZONTAL_RULE, children=["x"])

    def test_invalid_child_type(self):
        """Test that non-node, non-string children are rejected."""
        with pytest.raises(InvalidChildError):
            HtmlElement(HtmlTag.DIV).add_child(3.14)


@pytest.mark.unit
class TestHtmlElementAttributes:
    """Tests for additive and replacing attribute methods."""

    def test_add_attribute_is_additive(self):
        """Test that add_attribute keeps earlier attributes."""
        element = HtmlElement(HtmlTag.DIV).with_attribute("id", "x").with_attribute("class", "y")
        assert element.render() == '<div id="x" class="y"></div>'

    def test_add_attribute_overwrites_value(self):
        """Test that a repeated name takes the new value."""
        element = HtmlElement(HtmlTag.DIV).with_attribute("id", "x").with_attribute("id", "z")
        assert element.render() == '<div id="z"></div>'

    def test_set_attributes_replaces(self):
        """Test that set_attributes discards earlier attributes."""
        element = HtmlElement(HtmlTag.DIV, [("id", "x")]).with_attributes([("class", "y")])
        assert element.render() == '<div class="y"></div>'

    def test_repr(self):
        """Test the debugging representation."""
        assert repr(HtmlElement(HtmlTag.SPAN, children=["a"])) == "HtmlElement(SPAN, children=1)"

    def test_set_attributes_logs_replacement(self, caplog):
        """Test that replacing a non-empty set is logged at debug level."""
        element = HtmlElement(HtmlTag.SPAN, [("id", "x"), ("class", "y")])
        with caplog.at_level(logging.DEBUG, logger="htmlkit.ast.elements"):
            element.set_attributes([("id", "z")])
        assert "Replacing 2 attribute(s) on <span>" in caplog.text

    def test_add_attribute_not_logged(self, caplog):
        """Test that additive updates do not log a replacement."""
        element = HtmlElement(HtmlTag.SPAN, [("id", "x")])
        with caplog.at_level(logging.DEBUG, logger="htmlkit.ast.elements"):
            element.add_attribute("class", "y")
        assert caplog.text == ""
