#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/ast/container.py
"""Containers: nodes that hold an ordered list of child nodes.

:class:`HtmlContainer` is the "add child" contract shared by every node that
accepts children (containers, generic elements, table cells and the page
body). Implementers supply ``add_html``; the mixin derives the convenience
methods from it. Each convenience exists in two forms:

- ``add_*`` mutates the receiver in place and returns None
- ``with_*`` does the same and returns the receiver, for chaining

"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from htmlkit.ast.attributes import AttributePairs, Attributes
from htmlkit.ast.nodes import (
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    Node,
    Paragraph,
    Preformatted,
    Raw,
    coerce_child,
)
from htmlkit.ast.tags import ContainerType
from htmlkit.constants import LIST_ITEM_TAG
from htmlkit.options import RenderOptions

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

if TYPE_CHECKING:
    from htmlkit.ast.table import Table

logger = logging.getLogger(__name__)


class HtmlContainer(ABC):
    """Mixin for nodes that accept child nodes.

    Examples
    --------
        >>> Container(ContainerType.ARTICLE).with_header(2, "Hello").with_paragraph("World").render()
        '<article><h2>Hello</h2><p>World</p></article>'

    """

    @abstractmethod
    def add_html(self, html: Node | str) -> None:
        """Append a child node (a plain string is inserted as raw markup)."""

    def with_html(self, html: Node | str) -> Self:
        """Append a child node and return self."""
        self.add_html(html)
        return self

    def add_container(self, container: Container) -> None:
        """Nest another container inside this one."""
        self.add_html(container)

    def with_container(self, container: Container) -> Self:
        self.add_container(container)
        return self

    def add_table(self, table: Table) -> None:
        """Nest a table inside this container."""
        self.add_html(table)

    def with_table(self, table: Table) -> Self:
        self.add_table(table)
        return self

    def add_header(self, level: int, text: Any, attributes: AttributePairs | Attributes | None = None) -> None:
        """Add an ``<h1>``-``<h6>`` heading.

        Raises
        ------
        ValidationError
            If ``level`` is outside 1-6

        """
        self.add_html(Heading(level, text, attributes))

    def with_header(self, level: int, text: Any, attributes: AttributePairs | Attributes | None = None) -> Self:
        self.add_header(level, text, attributes)
        return self

    def add_paragraph(self, text: Any, attributes: AttributePairs | Attributes | None = None) -> None:
        """Add a ``<p>`` element."""
        self.add_html(Paragraph(text, attributes))

    def with_paragraph(self, text: Any, attributes: AttributePairs | Attributes | None = None) -> Self:
        self.add_paragraph(text, attributes)
        return self

    def add_preformatted(self, text: Any, attributes: AttributePairs | Attributes | None = None) -> None:
        """Add a ``<pre>`` element."""
        self.add_html(Preformatted(text, attributes))

    def with_preformatted(self, text: Any, attributes: AttributePairs | Attributes | None = None) -> Self:
        self.add_preformatted(text, attributes)
        return self

    def add_link(self, href: Any, text: Any, attributes: AttributePairs | Attributes | None = None) -> None:
        """Add an ``<a>`` element."""
        self.add_html(Link(href, text, attributes))

    def with_link(self, href: Any, text: Any, attributes: AttributePairs | Attributes | None = None) -> Self:
        self.add_link(href, text, attributes)
        return self

    def add_image(self, src: Any, alt: Any, attributes: AttributePairs | Attributes | None = None) -> None:
        """Add an ``<img>`` element."""
        self.add_html(Image(src, alt, attributes))

    def with_image(self, src: Any, alt: Any, attributes: AttributePairs | Attributes | None = None) -> Self:
        self.add_image(src, alt, attributes)
        return self

    def add_line_break(self) -> None:
        """Add a ``<br>`` element."""
        self.add_html(LineBreak())

    def with_line_break(self) -> Self:
        self.add_line_break()
        return self

    def add_horizontal_rule(self) -> None:
        """Add an ``<hr>`` element."""
        self.add_html(HorizontalRule())

    def with_horizontal_rule(self) -> Self:
        self.add_horizontal_rule()
        return self

    def add_raw(self, content: Any) -> None:
        """Add literal markup, inserted without escaping."""
        self.add_html(Raw(str(content)))

    def with_raw(self, content: Any) -> Self:
        self.add_raw(content)
        return self


class Container(HtmlContainer, Node):
    """A block container such as ``div``, ``article`` or a list.

    Children render in the order they were added. For ``ol`` and ``ul``
    containers each child is wrapped in ``<li>`` while rendering; the stored
    children are never modified.

    Parameters
    ----------
    container_type : ContainerType, default = ContainerType.DIV
        Kind of container, which determines the tag
    attributes : Attributes or pairs, optional
        Attributes for the container tag

    Examples
    --------
        >>> Container(ContainerType.UNORDERED_LIST).with_paragraph("a").with_paragraph("b").render()
        '<ul><li><p>a</p></li><li><p>b</p></li></ul>'

    """

    def __init__(
        self,
        container_type: ContainerType = ContainerType.DIV,
        attributes: AttributePairs | Attributes | None = None,
    ):
        """Create an empty container."""
        self.container_type = ContainerType(container_type)
        self.attributes = Attributes.from_pairs(attributes)
        self.children: list[Node] = []

    def add_html(self, html: Node | str) -> None:
        self.children.append(coerce_child(self.container_type.tag, html))

    def set_attributes(self, attributes: AttributePairs | Attributes | None) -> None:
        """Replace all attributes of this container.

        Each call overrides the previous one; attributes are not merged.

        """
        if self.attributes:
            logger.debug("Replacing %d attribute(s) on <%s>", len(self.attributes), self.container_type.tag)
        self.attributes = Attributes.from_pairs(attributes)

    def with_attributes(self, attributes: AttributePairs | Attributes | None) -> Container:
        self.set_attributes(attributes)
        return self

    def render(self, options: RenderOptions | None = None) -> str:
        tag = self.container_type.tag
        parts = [f"<{tag}{self.attributes}>"]
        if self.container_type.is_list:
            for child in self.children:
                parts.append(f"<{LIST_ITEM_TAG}>{child.render(options)}</{LIST_ITEM_TAG}>")
        else:
            parts.extend(child.render(options) for child in self.children)
        parts.append(f"</{tag}>")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Container({self.container_type.name}, children={len(self.children)})"
