#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/ast/nodes.py
"""Node base class and leaf content nodes.

Every renderable value in htmlkit derives from :class:`Node` and implements
a single operation, ``render``, which returns the node's markup. Leaf nodes
defined here own their attributes and an inline content slot but never
accept children.

Node Hierarchy
--------------
Leaf nodes defined in this module:
    - Raw (unescaped passthrough)
    - TextContent, Heading, Paragraph, Preformatted
    - Link, Image
    - LineBreak, HorizontalRule

Composite nodes live in :mod:`htmlkit.ast.container`,
:mod:`htmlkit.ast.elements` and :mod:`htmlkit.ast.table`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from htmlkit.ast.attributes import AttributePairs, Attributes
from htmlkit.ast.tags import HtmlTag
from htmlkit.exceptions import InvalidChildError
from htmlkit.options import RenderOptions, resolve_options


class Node(ABC):
    """Base class for everything that renders to HTML.

    Subclass this and implement :meth:`render` to add a custom element; the
    result can be placed anywhere a built-in node is accepted.

    Examples
    --------
        >>> from htmlkit.ast import Container
        >>> class Comment(Node):
        ...     def __init__(self, text):
        ...         self.text = text
        ...     def render(self, options=None):
        ...         return f"<!-- {self.text} -->"
        >>> Container().with_html(Comment("hi")).render()
        '<div><!-- hi --></div>'

    """

    @abstractmethod
    def render(self, options: RenderOptions | None = None) -> str:
        """Render this node to an HTML string.

        Parameters
        ----------
        options : RenderOptions or None, default = None
            Options inherited from the parent. Composite nodes must pass
            them on to their children unchanged.

        Returns
        -------
        str
            Compact HTML markup

        """

    def __str__(self) -> str:
        return self.render()


def coerce_child(parent: str, child: Any) -> Node:
    """Return ``child`` as a node, wrapping plain strings in :class:`Raw`.

    Raises
    ------
    InvalidChildError
        If ``child`` is neither a Node nor a str.

    """
    if isinstance(child, Node):
        return child
    if isinstance(child, str):
        return Raw(child)
    raise InvalidChildError(parent, child)


def render_content(content: Any, options: RenderOptions | None) -> str:
    """Render an inline content slot: nested nodes recurse, anything else is ``str()``."""
    if isinstance(content, Node):
        return content.render(options)
    return str(content)


@dataclass
class Raw(Node):
    """Literal markup inserted into the output exactly as given.

    Parameters
    ----------
    content : str
        Markup to emit. It is not escaped.

    """

    content: str

    def render(self, options: RenderOptions | None = None) -> str:
        return str(self.content)


@dataclass
class TextContent(Node):
    """A paired tag wrapped around a single inline content slot.

    Parameters
    ----------
    tag : HtmlTag
        Tag to render
    content : Node or any
        Inline content. A node is rendered recursively; any other value is
        converted with ``str()``. Whitespace is kept verbatim.
    attributes : Attributes or pairs, optional
        Attributes for the tag

    """

    tag: HtmlTag
    content: Any = ""
    attributes: Attributes = field(default_factory=Attributes)

    def __post_init__(self) -> None:
        self.tag = HtmlTag(self.tag)
        self.attributes = Attributes.from_pairs(self.attributes)

    def render(self, options: RenderOptions | None = None) -> str:
        tag = self.tag.tag
        return f"<{tag}{self.attributes}>{render_content(self.content, options)}</{tag}>"


class Heading(TextContent):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level, 1 through 6
    content : Node or any
        Heading text or nested node
    attributes : Attributes or pairs, optional
        Attributes for the heading tag

    Raises
    ------
    ValidationError
        If ``level`` is outside 1-6

    """

    def __init__(self, level: int, content: Any = "", attributes: AttributePairs | Attributes | None = None):
        """Create a heading of the given level."""
        super().__init__(HtmlTag.heading(level), content, attributes)

    @property
    def level(self) -> int:
        """Return the heading level."""
        return int(self.tag.tag[1:])


class Paragraph(TextContent):
    """Paragraph (``<p>``) node."""

    def __init__(self, content: Any = "", attributes: AttributePairs | Attributes | None = None):
        """Create a paragraph."""
        super().__init__(HtmlTag.PARAGRAPH_TEXT, content, attributes)


class Preformatted(TextContent):
    """Preformatted text (``<pre>``) node."""

    def __init__(self, content: Any = "", attributes: AttributePairs | Attributes | None = None):
        """Create a preformatted block."""
        super().__init__(HtmlTag.PREFORMATTED_TEXT, content, attributes)


@dataclass
class Link(Node):
    """Hyperlink (``<a>``) node.

    The ``href`` attribute is always written first, followed by any extra
    attributes.

    Parameters
    ----------
    href : str
        Link target
    content : Node or any
        Link text or nested node
    attributes : Attributes or pairs, optional
        Additional attributes

    """

    href: Any
    content: Any = ""
    attributes: Attributes = field(default_factory=Attributes)

    def __post_init__(self) -> None:
        self.attributes = Attributes.from_pairs(self.attributes)

    def render(self, options: RenderOptions | None = None) -> str:
        return f'<a href="{self.href}"{self.attributes}>{render_content(self.content, options)}</a>'


class VoidElement(Node):
    """Base class for elements with no content and no closing tag.

    Subclasses set ``tag_name`` and may override :meth:`leading_attributes` to
    emit required attributes ahead of the free-form attribute set. The
    closing syntax comes from ``RenderOptions.void_close``.

    """

    tag_name: str
    attributes: Attributes

    def leading_attributes(self) -> str:
        """Return attribute markup written before ``attributes``."""
        return ""

    def render(self, options: RenderOptions | None = None) -> str:
        close = resolve_options(options).void_close
        return f"<{self.tag_name}{self.leading_attributes()}{self.attributes}{close}"


@dataclass
class Image(VoidElement):
    """Image (``<img>``) node.

    Parameters
    ----------
    src : str
        Image source URL
    alt : str
        Alternative text
    attributes : Attributes or pairs, optional
        Additional attributes, written after ``src`` and ``alt``

    """

    src: Any
    alt: Any = ""
    attributes: Attributes = field(default_factory=Attributes)
    tag_name = HtmlTag.IMAGE.tag

    def __post_init__(self) -> None:
        self.attributes = Attributes.from_pairs(self.attributes)

    def leading_attributes(self) -> str:
        return f' src="{self.src}" alt="{self.alt}"'


@dataclass
class LineBreak(VoidElement):
    """Manual line break (``<br>``)."""

    attributes: Attributes = field(default_factory=Attributes)
    tag_name = HtmlTag.LINE_BREAK.tag

    def __post_init__(self) -> None:
        self.attributes = Attributes.from_pairs(self.attributes)


@dataclass
class HorizontalRule(VoidElement):
    """Thematic break (``<hr>``)."""

    attributes: Attributes = field(default_factory=Attributes)
    tag_name = HtmlTag.HORIZONTAL_RULE.tag

    def __post_init__(self) -> None:
        self.attributes = Attributes.from_pairs(self.attributes)
