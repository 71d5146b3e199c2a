#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/ast/elements.py
"""Generic tag element with arbitrary children.

:class:`HtmlElement` gives full control over the tag, attributes and a mix
of node and raw-text children, for markup the fixed-shape nodes do not
cover.

"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from htmlkit.ast.attributes import AttributePairs, Attributes
from htmlkit.ast.container import HtmlContainer
from htmlkit.ast.nodes import Node, coerce_child
from htmlkit.ast.tags import HtmlTag
from htmlkit.exceptions import InvalidChildError
from htmlkit.options import RenderOptions, resolve_options

logger = logging.getLogger(__name__)


class HtmlElement(HtmlContainer, Node):
    """A structured HTML element with a tag, attributes and children.

    Children may be nodes or plain strings; strings are inserted verbatim.
    Void tags (``br``, ``img``, ``hr``, ...) render without a closing tag
    and refuse children.

    Parameters
    ----------
    tag : HtmlTag
        Tag to render
    attributes : Attributes or pairs, optional
        Initial attributes
    children : iterable of Node or str, optional
        Initial children

    Examples
    --------
        >>> HtmlElement(HtmlTag.PARAGRAPH_TEXT).with_child("First").with_child(
        ...     HtmlElement(HtmlTag.LINE_BREAK)
        ... ).with_child("Second").render()
        '<p>First<br>Second</p>'

    """

    def __init__(
        self,
        tag: HtmlTag,
        attributes: AttributePairs | Attributes | None = None,
        children: Iterable[Node | str] | None = None,
    ):
        """Create an element, optionally seeded with attributes and children."""
        self.tag = HtmlTag(tag)
        self.attributes = Attributes.from_pairs(attributes)
        self.children: list[Node] = []
        for child in children or ():
            self.add_child(child)

    def add_child(self, child: Node | str) -> None:
        """Append a child node or raw string.

        Raises
        ------
        InvalidChildError
            If this is a void element, or ``child`` is not a Node or str

        """
        if self.tag.is_void:
            raise InvalidChildError(
                self.tag.tag, child, message=f"Content not permitted on void element <{self.tag.tag}>"
            )
        self.children.append(coerce_child(self.tag.tag, child))

    def with_child(self, child: Node | str) -> HtmlElement:
        self.add_child(child)
        return self

    def add_html(self, html: Node | str) -> None:
        self.add_child(html)

    def add_attribute(self, name: Any, value: Any) -> None:
        """Set one attribute, keeping the others.

        A name that is already present keeps its position and takes the new
        value.

        """
        self.attributes.add(name, value)

    def with_attribute(self, name: Any, value: Any) -> HtmlElement:
        self.add_attribute(name, value)
        return self

    def set_attributes(self, attributes: AttributePairs | Attributes | None) -> None:
        """Replace all attributes of this element."""
        if self.attributes:
            logger.debug("Replacing %d attribute(s) on <%s>", len(self.attributes), self.tag.tag)
        self.attributes = Attributes.from_pairs(attributes)

    def with_attributes(self, attributes: AttributePairs | Attributes | None) -> HtmlElement:
        self.set_attributes(attributes)
        return self

    def render(self, options: RenderOptions | None = None) -> str:
        tag = self.tag.tag
        if self.tag.is_void:
            return f"<{tag}{self.attributes}{resolve_options(options).void_close}"
        inner = "".join(child.render(options) for child in self.children)
        return f"<{tag}{self.attributes}>{inner}</{tag}>"

    def __repr__(self) -> str:
        return f"HtmlElement({self.tag.name}, children={len(self.children)})"
