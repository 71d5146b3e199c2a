#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/ast/table.py
"""HTML tables built from rows of values or hand-made rows.

The quickest way to build a table is :meth:`Table.from_rows` with a 2-D
sequence, which places every value in a ``<td>`` in the body. Header and
footer rows can then be added. For per-cell attributes or rich cell content
build :class:`TableRow` and :class:`TableCell` objects directly and add them
with the ``add_custom_*_row`` methods.

Row lengths are never checked against each other.

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Iterable

from htmlkit.ast.attributes import AttributePairs, Attributes
from htmlkit.ast.container import HtmlContainer
from htmlkit.ast.nodes import Node, Raw, coerce_child, render_content
from htmlkit.ast.tags import HtmlTag
from htmlkit.options import RenderOptions

logger = logging.getLogger(__name__)


class TableCellType(str, Enum):
    """Kinds of table cell."""

    DATA = "td"
    HEADER = "th"

    @property
    def tag(self) -> str:
        """Return the markup tag name."""
        return self.value


class TableCell(HtmlContainer, Node):
    """A single ``<td>`` or ``<th>`` cell.

    Cells are containers, so any of the ``add_*`` helpers can fill them.

    Parameters
    ----------
    cell_type : TableCellType, default = TableCellType.DATA
        Data or header cell
    attributes : Attributes or pairs, optional
        Attributes for the cell tag
    content : Node or any, optional
        Initial content. Nodes are added as children; other values are
        converted with ``str()`` and inserted as raw text.

    Examples
    --------
        >>> TableCell(TableCellType.HEADER, [("id", "h")]).with_paragraph("Hi").render()
        '<th id="h"><p>Hi</p></th>'

    """

    def __init__(
        self,
        cell_type: TableCellType = TableCellType.DATA,
        attributes: AttributePairs | Attributes | None = None,
        content: Any = None,
    ):
        """Create a cell with optional attributes and initial content."""
        self.cell_type = TableCellType(cell_type)
        self.attributes = Attributes.from_pairs(attributes)
        self.children: list[Node] = []
        if content is not None:
            self.add_html(content if isinstance(content, Node) else Raw(str(content)))

    def add_html(self, html: Node | str) -> None:
        self.children.append(coerce_child(self.cell_type.tag, html))

    def set_attributes(self, attributes: AttributePairs | Attributes | None) -> None:
        """Replace all attributes of this cell."""
        if self.attributes:
            logger.debug("Replacing %d attribute(s) on <%s>", len(self.attributes), self.cell_type.tag)
        self.attributes = Attributes.from_pairs(attributes)

    def with_attributes(self, attributes: AttributePairs | Attributes | None) -> TableCell:
        self.set_attributes(attributes)
        return self

    def render(self, options: RenderOptions | None = None) -> str:
        tag = self.cell_type.tag
        inner = "".join(child.render(options) for child in self.children)
        return f"<{tag}{self.attributes}>{inner}</{tag}>"


class TableRow(Node):
    """A ``<tr>`` row of cells.

    Parameters
    ----------
    attributes : Attributes or pairs, optional
        Attributes for the row tag
    cells : iterable of TableCell, optional
        Initial cells

    Examples
    --------
        >>> TableRow([("id", "r")]).with_cell(TableCell(TableCellType.HEADER, content="H")).with_cell(
        ...     TableCell(content=1)
        ... ).render()
        '<tr id="r"><th>H</th><td>1</td></tr>'

    """

    def __init__(
        self,
        attributes: AttributePairs | Attributes | None = None,
        cells: Iterable[TableCell] | None = None,
    ):
        """Create a row with optional attributes and cells."""
        self.attributes = Attributes.from_pairs(attributes)
        self.cells: list[TableCell] = list(cells or ())

    @classmethod
    def from_values(cls, values: Iterable[Any], cell_type: TableCellType = TableCellType.DATA) -> TableRow:
        """Build a row with one cell per value, each holding ``str(value)``."""
        return cls(cells=[TableCell(cell_type, content=str(value)) for value in values])

    def add_cell(self, cell: TableCell) -> None:
        """Append a cell to this row."""
        self.cells.append(cell)

    def with_cell(self, cell: TableCell) -> TableRow:
        self.add_cell(cell)
        return self

    def set_attributes(self, attributes: AttributePairs | Attributes | None) -> None:
        """Replace all attributes of this row."""
        if self.attributes:
            logger.debug("Replacing %d attribute(s) on <tr>", len(self.attributes))
        self.attributes = Attributes.from_pairs(attributes)

    def with_attributes(self, attributes: AttributePairs | Attributes | None) -> TableRow:
        self.set_attributes(attributes)
        return self

    def render(self, options: RenderOptions | None = None) -> str:
        inner = "".join(cell.render(options) for cell in self.cells)
        return f"<tr{self.attributes}>{inner}</tr>"


class TableSection(Node):
    """A row group: ``<thead>``, ``<tbody>`` or ``<tfoot>``.

    Parameters
    ----------
    tag : HtmlTag
        One of TABLE_HEADER, TABLE_BODY, TABLE_FOOTER
    attributes : Attributes or pairs, optional
        Attributes for the group tag

    """

    def __init__(self, tag: HtmlTag, attributes: AttributePairs | Attributes | None = None):
        """Create an empty row group."""
        self.tag = HtmlTag(tag)
        self.attributes = Attributes.from_pairs(attributes)
        self.rows: list[TableRow] = []

    @property
    def is_empty(self) -> bool:
        """Return True when the group has neither attributes nor rows."""
        return not self.attributes and not self.rows

    def add_row(self, row: TableRow) -> None:
        self.rows.append(row)

    def set_attributes(self, attributes: AttributePairs | Attributes | None) -> None:
        """Replace all attributes of this row group."""
        if self.attributes:
            logger.debug("Replacing %d attribute(s) on <%s>", len(self.attributes), self.tag.tag)
        self.attributes = Attributes.from_pairs(attributes)

    def render(self, options: RenderOptions | None = None) -> str:
        tag = self.tag.tag
        inner = "".join(row.render(options) for row in self.rows)
        return f"<{tag}{self.attributes}>{inner}</{tag}>"


class TableCaption(Node):
    """A ``<caption>`` for a table.

    Parameters
    ----------
    content : Node or any
        Caption text or nested node
    attributes : Attributes or pairs, optional
        Attributes for the caption tag

    """

    def __init__(self, content: Any, attributes: AttributePairs | Attributes | None = None):
        """Create a caption."""
        self.content = content
        self.attributes = Attributes.from_pairs(attributes)

    def render(self, options: RenderOptions | None = None) -> str:
        return f"<caption{self.attributes}>{render_content(self.content, options)}</caption>"


class Table(Node):
    """An HTML ``<table>`` with header, body and footer row groups.

    The header and body groups are always emitted. The footer is emitted
    only when it has rows or attributes, and the caption only when one was
    set; both follow the body.

    Parameters
    ----------
    attributes : Attributes or pairs, optional
        Attributes for the table tag

    Examples
    --------
        >>> Table.from_rows([[1, 2], [3, 4]]).with_header_row(["A", "B"]).render()
        '<table><thead><tr><th>A</th><th>B</th></tr></thead><tbody><tr><td>1</td><td>2</td></tr><tr><td>3</td><td>4</td></tr></tbody></table>'

    """

    def __init__(self, attributes: AttributePairs | Attributes | None = None):
        """Create a table with empty header and body."""
        self.attributes = Attributes.from_pairs(attributes)
        self.thead = TableSection(HtmlTag.TABLE_HEADER)
        self.tbody = TableSection(HtmlTag.TABLE_BODY)
        self.tfoot = TableSection(HtmlTag.TABLE_FOOTER)
        self.caption: TableCaption | None = None

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> Table:
        """Build a table whose body holds one row per inner sequence.

        Parameters
        ----------
        rows : iterable of iterables
            Row values; each value becomes a ``<td>`` holding ``str(value)``

        Returns
        -------
        Table
            A table with an empty header

        """
        table = cls()
        for row in rows:
            table.add_body_row(row)
        return table

    # Attributes

    def set_attributes(self, attributes: AttributePairs | Attributes | None) -> None:
        """Replace the attributes of the ``<table>`` tag."""
        if self.attributes:
            logger.debug("Replacing %d table attribute(s)", len(self.attributes))
        self.attributes = Attributes.from_pairs(attributes)

    def with_attributes(self, attributes: AttributePairs | Attributes | None) -> Table:
        self.set_attributes(attributes)
        return self

    def set_thead_attributes(self, attributes: AttributePairs | Attributes | None) -> None:
        """Replace the attributes of the ``<thead>`` tag."""
        self.thead.set_attributes(attributes)

    def with_thead_attributes(self, attributes: AttributePairs | Attributes | None) -> Table:
        self.set_thead_attributes(attributes)
        return self

    def set_tbody_attributes(self, attributes: AttributePairs | Attributes | None) -> None:
        """Replace the attributes of the ``<tbody>`` tag."""
        self.tbody.set_attributes(attributes)

    def with_tbody_attributes(self, attributes: AttributePairs | Attributes | None) -> Table:
        self.set_tbody_attributes(attributes)
        return self

    def set_tfoot_attributes(self, attributes: AttributePairs | Attributes | None) -> None:
        """Replace the attributes of the ``<tfoot>`` tag.

        Setting any attribute makes the footer appear even without rows.

        """
        self.tfoot.set_attributes(attributes)

    def with_tfoot_attributes(self, attributes: AttributePairs | Attributes | None) -> Table:
        self.set_tfoot_attributes(attributes)
        return self

    # Rows

    def add_header_row(self, values: Iterable[Any]) -> None:
        """Add a row of ``<th>`` cells to the header."""
        self.add_custom_header_row(TableRow.from_values(values, TableCellType.HEADER))

    def with_header_row(self, values: Iterable[Any]) -> Table:
        self.add_header_row(values)
        return self

    def add_custom_header_row(self, row: TableRow) -> None:
        """Add a prebuilt row to the header."""
        self.thead.add_row(row)

    def with_custom_header_row(self, row: TableRow) -> Table:
        self.add_custom_header_row(row)
        return self

    def add_body_row(self, values: Iterable[Any]) -> None:
        """Add a row of ``<td>`` cells to the body."""
        self.add_custom_body_row(TableRow.from_values(values))

    def with_body_row(self, values: Iterable[Any]) -> Table:
        self.add_body_row(values)
        return self

    def add_custom_body_row(self, row: TableRow) -> None:
        """Add a prebuilt row to the body."""
        self.tbody.add_row(row)

    def with_custom_body_row(self, row: TableRow) -> Table:
        self.add_custom_body_row(row)
        return self

    def add_footer_row(self, values: Iterable[Any]) -> None:
        """Add a row of ``<td>`` cells to the footer."""
        self.add_custom_footer_row(TableRow.from_values(values))

    def with_footer_row(self, values: Iterable[Any]) -> Table:
        self.add_footer_row(values)
        return self

    def add_custom_footer_row(self, row: TableRow) -> None:
        """Add a prebuilt row to the footer."""
        self.tfoot.add_row(row)

    def with_custom_footer_row(self, row: TableRow) -> Table:
        self.add_custom_footer_row(row)
        return self

    # Caption

    def set_caption(self, content: Any, attributes: AttributePairs | Attributes | None = None) -> None:
        """Set the table caption, replacing any previous one."""
        self.caption = TableCaption(content, attributes)

    def with_caption(self, content: Any, attributes: AttributePairs | Attributes | None = None) -> Table:
        self.set_caption(content, attributes)
        return self

    def render(self, options: RenderOptions | None = None) -> str:
        parts = [
            f"<table{self.attributes}>",
            self.thead.render(options),
            self.tbody.render(options),
        ]
        if not self.tfoot.is_empty:
            parts.append(self.tfoot.render(options))
        if self.caption is not None:
            parts.append(self.caption.render(options))
        parts.append("</table>")
        return "".join(parts)
