#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/ast/tags.py
"""Tag enumerations.

:class:`HtmlTag` is the closed set of tags usable with
:class:`~htmlkit.ast.elements.HtmlElement`; :class:`ContainerType` is the
smaller set of block containers accepted by
:class:`~htmlkit.ast.container.Container`. Every member maps to exactly one
tag string.

"""

from __future__ import annotations

from enum import Enum

from htmlkit.constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL, VOID_ELEMENTS
from htmlkit.exceptions import ValidationError


class HtmlTag(str, Enum):
    """A subset of the elements listed in the MDN HTML element reference."""

    ADDRESS = "address"
    ARTICLE = "article"
    ASIDE = "aside"
    BLOCKQUOTE = "blockquote"
    CANVAS = "canvas"
    CITE = "cite"
    CODE_TEXT = "code"
    DESCRIPTION_LIST = "dl"
    DESCRIPTION_LIST_DESCRIPTION = "dd"
    DESCRIPTION_LIST_TERM = "dt"
    DIV = "div"
    FIGCAPTION = "figcaption"
    FIGURE = "figure"
    FOOTER = "footer"
    HEADER = "header"
    HEADING1 = "h1"
    HEADING2 = "h2"
    HEADING3 = "h3"
    HEADING4 = "h4"
    HEADING5 = "h5"
    HEADING6 = "h6"
    HEADING_GROUP = "hgroup"
    HORIZONTAL_RULE = "hr"
    IFRAME = "iframe"
    IMAGE = "img"
    INLINE_QUOTE = "q"
    LINE_BREAK = "br"
    LINK = "a"
    LIST_ELEMENT = "li"
    MAIN = "main"
    NAVIGATION = "nav"
    ORDERED_LIST = "ol"
    PARAGRAPH_TEXT = "p"
    PREFORMATTED_TEXT = "pre"
    SECTION = "section"
    SPAN = "span"
    TABLE = "table"
    TABLE_BODY = "tbody"
    TABLE_CAPTION = "caption"
    TABLE_CELL = "td"
    TABLE_COLUMN = "col"
    TABLE_COLUMN_GROUP = "colgroup"
    TABLE_FOOTER = "tfoot"
    TABLE_HEADER = "thead"
    TABLE_HEADER_CELL = "th"
    TABLE_ROW = "tr"
    UNORDERED_LIST = "ul"
    VIDEO = "video"

    @property
    def tag(self) -> str:
        """Return the markup tag name."""
        return self.value

    @property
    def is_void(self) -> bool:
        """Return True when this tag never has a closing tag or children."""
        return self.value in VOID_ELEMENTS

    @classmethod
    def heading(cls, level: int) -> HtmlTag:
        """Return the heading tag for ``level``.

        Raises
        ------
        ValidationError
            If ``level`` is not between 1 and 6.

        """
        if not isinstance(level, int) or not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL:
            raise ValidationError(
                f"Heading level must be {MIN_HEADING_LEVEL}-{MAX_HEADING_LEVEL}, got {level!r}",
                parameter_name="level",
                parameter_value=level,
            )
        return cls(f"h{level}")

    def __str__(self) -> str:
        return self.value


class ContainerType(str, Enum):
    """Block containers that can hold other nodes."""

    ADDRESS = "address"
    ARTICLE = "article"
    ASIDE = "aside"
    DIV = "div"
    FOOTER = "footer"
    HEADER = "header"
    MAIN = "main"
    NAV = "nav"
    SECTION = "section"
    ORDERED_LIST = "ol"
    UNORDERED_LIST = "ul"

    @property
    def tag(self) -> str:
        """Return the markup tag name."""
        return self.value

    @property
    def is_list(self) -> bool:
        """Return True for ``ol`` and ``ul``, whose children render inside ``li``."""
        return self in (ContainerType.ORDERED_LIST, ContainerType.UNORDERED_LIST)

    def __str__(self) -> str:
        return self.value
