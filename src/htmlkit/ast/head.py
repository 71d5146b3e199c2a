#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/ast/head.py
"""Nodes that belong in a document's ``<head>``.

These are normally created through the ``add_*`` helpers on
:class:`~htmlkit.page.HtmlPage` rather than directly.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from htmlkit.ast.attributes import Attributes
from htmlkit.ast.nodes import Node, VoidElement
from htmlkit.options import RenderOptions


@dataclass
class Title(Node):
    """Document ``<title>``."""

    content: Any

    def render(self, options: RenderOptions | None = None) -> str:
        return f"<title>{self.content}</title>"


@dataclass
class Meta(VoidElement):
    """A ``<meta>`` tag made up entirely of its attributes."""

    attributes: Attributes = field(default_factory=Attributes)
    tag_name = "meta"

    def __post_init__(self) -> None:
        self.attributes = Attributes.from_pairs(self.attributes)


@dataclass
class HeadLink(VoidElement):
    """A ``<link>`` to an external resource such as a stylesheet.

    Parameters
    ----------
    href : str
        Resource URL
    rel : str
        Relationship, e.g. ``"stylesheet"`` or ``"icon"``
    attributes : Attributes or pairs, optional
        Additional attributes, written after ``href`` and ``rel``

    """

    href: Any
    rel: Any
    attributes: Attributes = field(default_factory=Attributes)
    tag_name = "link"

    def __post_init__(self) -> None:
        self.attributes = Attributes.from_pairs(self.attributes)

    def leading_attributes(self) -> str:
        return f' href="{self.href}" rel="{self.rel}"'


@dataclass
class ScriptLink(Node):
    """A ``<script>`` that loads code from ``src``."""

    src: Any
    attributes: Attributes = field(default_factory=Attributes)

    def __post_init__(self) -> None:
        self.attributes = Attributes.from_pairs(self.attributes)

    def render(self, options: RenderOptions | None = None) -> str:
        return f'<script src="{self.src}"{self.attributes}></script>'


@dataclass
class ScriptLiteral(Node):
    """An inline ``<script>`` whose code is written verbatim."""

    code: Any

    def render(self, options: RenderOptions | None = None) -> str:
        return f"<script>{self.code}</script>"


@dataclass
class Style(Node):
    """An inline ``<style>`` block."""

    css: Any
    attributes: Attributes = field(default_factory=Attributes)

    def __post_init__(self) -> None:
        self.attributes = Attributes.from_pairs(self.attributes)

    def render(self, options: RenderOptions | None = None) -> str:
        return f"<style{self.attributes}>{self.css}</style>"
