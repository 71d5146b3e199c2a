"""htmlkit - build HTML documents from a tree of typed nodes.

htmlkit composes pages from small node objects: leaves such as headings,
paragraphs, links and images; containers such as ``div`` or lists; tables
with header, body and footer row groups; and a page root with separate
head and body regions. Calling ``render()`` on any node returns its compact
HTML.

Nothing is escaped automatically. Pass untrusted text through
:func:`escape_html` before adding it to a node.

Examples
--------
Building a page:

    >>> from htmlkit import Container, ContainerType, HtmlPage, Table
    >>> page = (
    ...     HtmlPage()
    ...     .with_title("My Page")
    ...     .with_header(1, "Main Content:")
    ...     .with_container(
    ...         Container(ContainerType.ARTICLE, [("id", "article1")])
    ...         .with_header(2, "Hello, World", [("id", "article-head")])
    ...         .with_paragraph("This is a simple HTML demo")
    ...     )
    ... )
    >>> html = page.render()

Tables from 2-D data:

    >>> table = Table.from_rows([[1, 2, 3], [4, 5, 6]]).with_header_row(["A", "B", "C"])
    >>> table.render().startswith("<table><thead><tr><th>A</th>")
    True

"""

from __future__ import annotations

from htmlkit.ast import (
    Attributes,
    Container,
    ContainerType,
    Heading,
    HorizontalRule,
    HtmlContainer,
    HtmlElement,
    HtmlTag,
    Image,
    LineBreak,
    Link,
    Node,
    Paragraph,
    Preformatted,
    Raw,
    Table,
    TableCell,
    TableCellType,
    TableRow,
    TextContent,
)
from htmlkit.exceptions import HtmlKitError, InvalidChildError, InvalidOptionsError, ValidationError
from htmlkit.logging_utils import configure_logging
from htmlkit.options import RenderOptions
from htmlkit.page import HtmlPage
from htmlkit.utils.escape import escape_html
from htmlkit.versions import HtmlVersion

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Nodes
    "Attributes",
    "Container",
    "ContainerType",
    "Heading",
    "HorizontalRule",
    "HtmlContainer",
    "HtmlElement",
    "HtmlTag",
    "Image",
    "LineBreak",
    "Link",
    "Node",
    "Paragraph",
    "Preformatted",
    "Raw",
    "Table",
    "TableCell",
    "TableCellType",
    "TableRow",
    "TextContent",
    # Document
    "HtmlPage",
    "HtmlVersion",
    "RenderOptions",
    # Utilities
    "configure_logging",
    "escape_html",
    # Exceptions
    "HtmlKitError",
    "InvalidChildError",
    "InvalidOptionsError",
    "ValidationError",
]
