#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/page.py
"""The HTML document root.

:class:`HtmlPage` keeps two independent node lists, one for ``<head>`` and
one for ``<body>``, and frames them with a doctype and an opening ``<html>``
tag. Every helper on the page builds a node and routes it to one of the two
regions.

"""

from __future__ import annotations

import logging
from typing import Any

from htmlkit.ast.attributes import AttributePairs, Attributes
from htmlkit.ast.container import HtmlContainer
from htmlkit.ast.head import HeadLink, Meta, ScriptLink, ScriptLiteral, Style, Title
from htmlkit.ast.nodes import Node, coerce_child
from htmlkit.exceptions import InvalidOptionsError
from htmlkit.options import RenderOptions
from htmlkit.versions import HtmlVersion

logger = logging.getLogger(__name__)


class HtmlPage(HtmlContainer, Node):
    """A complete HTML document.

    Body content is added through the container helpers (``add_paragraph``,
    ``add_table``, ...); head content through ``add_title``, ``add_meta``,
    ``add_stylesheet`` and friends, or directly with :meth:`add_head`.

    Parameters
    ----------
    version : HtmlVersion or str, default = HtmlVersion.HTML5
        Dialect providing the doctype and opening ``<html>`` tag
    options : RenderOptions or None, default = None
        Options used when :meth:`render` is called without any. Defaults to
        the options of ``version``.

    Examples
    --------
        >>> HtmlPage().with_title("My Page").with_paragraph("Header Text").render()
        '<!DOCTYPE html><html><head><title>My Page</title></head><body><p>Header Text</p></body></html>'

    """

    def __init__(self, version: HtmlVersion | str = HtmlVersion.HTML5, options: RenderOptions | None = None):
        """Create an empty page for the given dialect."""
        if options is not None and not isinstance(options, RenderOptions):
            raise InvalidOptionsError("HtmlPage", RenderOptions, type(options))
        self.head: list[Node] = []
        self.body: list[Node] = []
        self._options = options
        self.set_version(version)

    @property
    def options(self) -> RenderOptions:
        """Return the options used by :meth:`render` when none are passed."""
        return self._options if self._options is not None else self.version.render_options

    # Dialect

    def set_version(self, version: HtmlVersion | str) -> None:
        """Switch dialect, replacing the doctype and opening ``<html>`` tag."""
        version = version if isinstance(version, HtmlVersion) else HtmlVersion.from_name(version)
        logger.debug("Using HTML version %s", version.value)
        self.version = version
        self.doctype = version.doctype
        self.html_tag = version.html_tag

    def with_version(self, version: HtmlVersion | str) -> HtmlPage:
        self.set_version(version)
        return self

    def set_doctype(self, doctype: str) -> None:
        """Replace the doctype declaration with an arbitrary string."""
        self.doctype = doctype

    def with_doctype(self, doctype: str) -> HtmlPage:
        self.set_doctype(doctype)
        return self

    def set_html_tag(self, html_tag: str) -> None:
        """Replace the opening ``<html ...>`` tag with an arbitrary string."""
        self.html_tag = html_tag

    def with_html_tag(self, html_tag: str) -> HtmlPage:
        self.set_html_tag(html_tag)
        return self

    # Regions

    def add_html(self, html: Node | str) -> None:
        """Append a node to the body."""
        self.body.append(coerce_child("body", html))

    def add_head(self, html: Node | str) -> None:
        """Append a node to the head."""
        self.head.append(coerce_child("head", html))

    def with_head(self, html: Node | str) -> HtmlPage:
        self.add_head(html)
        return self

    # Head helpers

    def add_title(self, title: Any) -> None:
        """Add a ``<title>`` to the head."""
        self.add_head(Title(title))

    def with_title(self, title: Any) -> HtmlPage:
        self.add_title(title)
        return self

    def add_meta(self, attributes: AttributePairs | Attributes) -> None:
        """Add a ``<meta>`` tag built from ``attributes`` to the head."""
        self.add_head(Meta(attributes))

    def with_meta(self, attributes: AttributePairs | Attributes) -> HtmlPage:
        self.add_meta(attributes)
        return self

    def add_head_link(self, href: Any, rel: Any, attributes: AttributePairs | Attributes | None = None) -> None:
        """Add a ``<link>`` tag to the head."""
        self.add_head(HeadLink(href, rel, attributes))

    def with_head_link(self, href: Any, rel: Any, attributes: AttributePairs | Attributes | None = None) -> HtmlPage:
        self.add_head_link(href, rel, attributes)
        return self

    def add_stylesheet(self, href: Any) -> None:
        """Link an external stylesheet."""
        self.add_head_link(href, "stylesheet")

    def with_stylesheet(self, href: Any) -> HtmlPage:
        self.add_stylesheet(href)
        return self

    def add_script_link(self, src: Any, attributes: AttributePairs | Attributes | None = None) -> None:
        """Add a ``<script src=...>`` tag to the head."""
        self.add_head(ScriptLink(src, attributes))

    def with_script_link(self, src: Any, attributes: AttributePairs | Attributes | None = None) -> HtmlPage:
        self.add_script_link(src, attributes)
        return self

    def add_script_literal(self, code: Any) -> None:
        """Add an inline ``<script>`` to the head."""
        self.add_head(ScriptLiteral(code))

    def with_script_literal(self, code: Any) -> HtmlPage:
        self.add_script_literal(code)
        return self

    def add_style(self, css: Any, attributes: AttributePairs | Attributes | None = None) -> None:
        """Add an inline ``<style>`` block to the head."""
        self.add_head(Style(css, attributes))

    def with_style(self, css: Any, attributes: AttributePairs | Attributes | None = None) -> HtmlPage:
        self.add_style(css, attributes)
        return self

    def render(self, options: RenderOptions | None = None) -> str:
        """Render the whole document.

        Parameters
        ----------
        options : RenderOptions or None, default = None
            Overrides the page's own options for this call

        Returns
        -------
        str
            The document, with no added whitespace

        """
        options = options if options is not None else self.options
        head = "".join(node.render(options) for node in self.head)
        body = "".join(node.render(options) for node in self.body)
        return f"{self.doctype}{self.html_tag}<head>{head}</head><body>{body}</body></html>"

    def __repr__(self) -> str:
        return f"HtmlPage({self.version.name}, head={len(self.head)}, body={len(self.body)})"
