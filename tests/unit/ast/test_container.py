#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_container.py
"""Unit tests for Container and the HtmlContainer helpers.

Tests cover:
- Rendering of every container kind
- List item wrapping for ol and ul
- Chaining and mutating helper forms
- Attribute replacement
- Child coercion

"""

import logging

import pytest

from htmlkit.ast import (
    Container,
    ContainerType,
    HtmlContainer,
    HtmlElement,
    HtmlTag,
    Image,
    Paragraph,
    Table,
    TableCell,
)
from htmlkit.exceptions import InvalidChildError
from htmlkit.options import RenderOptions

NESTED_CONTENT = (
    '<h1 id="main-header">header</h1>'
    '<img src="myimage.png" alt="test image">'
    '<a href="rust-lang.org">Rust Home</a>'
    '<p class="red-text">Sample Text</p>'
    '<pre class="code">Text</pre>'
)

NESTED_LIST_CONTENT = (
    '<li><h1 id="main-header">header</h1></li>'
    '<li><img src="myimage.png" alt="test image"></li>'
    '<li><a href="rust-lang.org">Rust Home</a></li>'
    '<li><p class="red-text">Sample Text</p></li>'
    '<li><pre class="code">Text</pre></li>'
)


def build_nested(container_type):
    return (
        Container(container_type)
        .with_header(1, "header", [("id", "main-header")])
        .with_image("myimage.png", "test image")
        .with_link("rust-lang.org", "Rust Home")
        .with_paragraph("Sample Text", [("class", "red-text")])
        .with_preformatted("Text", [("class", "code")])
    )


@pytest.mark.unit
class TestContainerRendering:
    """Tests for container rendering."""

    def test_default_is_div(self):
        """Test that containers default to div."""
        assert Container().render() == "<div></div>"

    def test_div_with_header(self):
        """Test a div containing a heading with an id."""
        container = Container(ContainerType.DIV).with_header(1, "header", [("id", "main-header")])
        assert container.render() == '<div><h1 id="main-header">header</h1></div>'

    @pytest.mark.parametrize(
        "container_type,tag",
        [
            (ContainerType.ARTICLE, "article"),
            (ContainerType.DIV, "div"),
            (ContainerType.MAIN, "main"),
            (ContainerType.SECTION, "section"),
        ],
    )
    def test_nested_content(self, container_type, tag):
        """Test every leaf kind inside non-list containers."""
        assert build_nested(container_type).render() == f"<{tag}>{NESTED_CONTENT}</{tag}>"

    @pytest.mark.parametrize("container_type,tag", [(ContainerType.ORDERED_LIST, "ol"), (ContainerType.UNORDERED_LIST, "ul")])
    def test_nested_list_content(self, container_type, tag):
        """Test that list containers wrap each child in li."""
        assert build_nested(container_type).render() == f"<{tag}>{NESTED_LIST_CONTENT}</{tag}>"

    def test_list_wrapping_does_not_modify_children(self):
        """Test that stored children carry no li wrapper."""
        container = Container(ContainerType.UNORDERED_LIST).with_paragraph("a")
        container.render()
        assert container.children == [Paragraph("a")]

    def test_empty_list(self):
        """Test an empty list renders without items."""
        assert Container(ContainerType.ORDERED_LIST).render() == "<ol></ol>"

    def test_nested_list_wraps_inner_container_once(self):
        """Test that a nested list is itself wrapped in one li."""
        inner = Container(ContainerType.UNORDERED_LIST).with_paragraph("x")
        outer = Container(ContainerType.ORDERED_LIST).with_container(inner)
        assert outer.render() == "<ol><li><ul><li><p>x</p></li></ul></li></ol>"

    def test_container_with_attributes(self):
        """Test attributes on the container tag."""
        container = Container(ContainerType.ARTICLE, [("id", "article1")])
        assert container.render() == '<article id="article1"></article>'

    def test_options_pass_through(self):
        """Test that render options reach nested void elements."""
        container = Container().with_html(Container().with_line_break())
        assert container.render(RenderOptions(void_element_style="xhtml")) == "<div><div><br/></div></div>"


@pytest.mark.unit
class TestContainerHelpers:
    """Tests for the add_* and with_* helper forms."""

    def test_add_returns_none(self):
        """Test that mutating helpers return None."""
        container = Container()
        assert container.add_paragraph("x") is None
        assert container.render() == "<div><p>x</p></div>"

    def test_with_returns_self(self):
        """Test that chaining helpers return the same object."""
        container = Container()
        assert container.with_paragraph("x") is container

    def test_add_table(self):
        """Test nesting a table."""
        container = Container().with_table(Table.from_rows([[1]]))
        assert container.render() == "<div><table><thead></thead><tbody><tr><td>1</td></tr></tbody></table></div>"

    def test_line_break_and_rule(self):
        """Test the void element helpers."""
        container = Container().with_line_break().with_horizontal_rule()
        assert container.render() == "<div><br><hr></div>"

    def test_raw(self):
        """Test inserting raw markup."""
        assert Container().with_raw("<!-- c -->").render() == "<div><!-- c --></div>"

    def test_string_child_is_raw(self):
        """Test that a plain string child is inserted verbatim."""
        assert Container().with_html("text & more").render() == "<div>text & more</div>"

    def test_invalid_child(self):
        """Test that a non-node child is rejected."""
        with pytest.raises(InvalidChildError) as exc_info:
            Container().add_html(42)
        assert exc_info.value.parent == "div"
        assert "int" in str(exc_info.value)

    def test_image_helper(self):
        """Test that the image helper builds an Image node."""
        container = Container().with_image("a.png", "A")
        assert container.children == [Image("a.png", "A")]

    def test_chaining_annotated_with_self(self):
        """Test that every chaining helper is annotated to return its receiver type."""
        chaining = [name for name in vars(HtmlContainer) if name.startswith("with_")]
        assert chaining
        for name in chaining:
            assert getattr(HtmlContainer, name).__annotations__["return"] == "Self", name

    @pytest.mark.parametrize(
        "receiver",
        [Container(), HtmlElement(HtmlTag.DIV), TableCell()],
        ids=["container", "element", "cell"],
    )
    def test_chaining_keeps_receiver(self, receiver):
        """Test that chained helpers return the same object for every implementer."""
        result = receiver.with_paragraph("a").with_line_break().with_raw("b")
        assert result is receiver
        assert type(result) is type(receiver)


@pytest.mark.unit
class TestContainerAttributes:
    """Tests for attribute replacement on containers."""

    def test_set_attributes_replaces(self):
        """Test that the last call wins."""
        container = Container().with_attributes([("id", "a")]).with_attributes([("class", "b")])
        assert container.render() == '<div class="b"></div>'

    def test_set_attributes_logs_replacement(self, caplog):
        """Test that replacing a non-empty set is logged at debug level."""
        container = Container(attributes=[("id", "a")])
        with caplog.at_level(logging.DEBUG, logger="htmlkit.ast.container"):
            container.set_attributes([("id", "b")])
        assert "Replacing 1 attribute(s) on <div>" in caplog.text

    def test_set_attributes_on_empty_is_silent(self, caplog):
        """Test that the first assignment logs nothing."""
        with caplog.at_level(logging.DEBUG, logger="htmlkit.ast.container"):
            Container().set_attributes([("id", "a")])
        assert caplog.text == ""

    def test_repr(self):
        """Test the debugging representation."""
        assert repr(Container(ContainerType.NAV).with_paragraph("x")) == "Container(NAV, children=1)"
