#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/ast/__init__.py
"""Node tree for HTML generation.

The module consists of several components:

- attributes: the ordered attribute set owned by each node
- tags: tag and container-kind enumerations
- nodes: the Node base class and leaf content nodes
- container: the add-child contract and block containers
- elements: a generic element with arbitrary children
- table: tables, rows, cells and row groups
- head: nodes for the document head

Examples
--------
    >>> from htmlkit.ast import Container, ContainerType
    >>> Container(ContainerType.DIV).with_header(1, "header", [("id", "main-header")]).render()
    '<div><h1 id="main-header">header</h1></div>'

"""

from __future__ import annotations

from htmlkit.ast.attributes import AttributePairs, Attributes
from htmlkit.ast.container import Container, HtmlContainer
from htmlkit.ast.elements import HtmlElement
from htmlkit.ast.head import HeadLink, Meta, ScriptLink, ScriptLiteral, Style, Title
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
    TextContent,
    VoidElement,
)
from htmlkit.ast.table import Table, TableCaption, TableCell, TableCellType, TableRow, TableSection
from htmlkit.ast.tags import ContainerType, HtmlTag

__all__ = [
    # Attributes
    "AttributePairs",
    "Attributes",
    # Tags
    "ContainerType",
    "HtmlTag",
    # Nodes
    "Node",
    "Raw",
    "TextContent",
    "Heading",
    "Paragraph",
    "Preformatted",
    "Link",
    "VoidElement",
    "Image",
    "LineBreak",
    "HorizontalRule",
    # Containers
    "HtmlContainer",
    "Container",
    "HtmlElement",
    # Tables
    "Table",
    "TableCaption",
    "TableCell",
    "TableCellType",
    "TableRow",
    "TableSection",
    # Head
    "HeadLink",
    "Meta",
    "ScriptLink",
    "ScriptLiteral",
    "Style",
    "Title",
]
