#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/versions.py
"""Markup dialects.

An :class:`HtmlVersion` bundles the doctype, the attributes of the opening
``<html>`` tag, and the void-element closing style of one markup standard.

"""

from __future__ import annotations

from enum import Enum

from htmlkit.ast.attributes import Attributes
from htmlkit.constants import (
    DEFAULT_XML_LANG,
    DOCTYPE_HTML4,
    DOCTYPE_HTML5,
    DOCTYPE_XHTML1_0,
    DOCTYPE_XHTML1_1,
    XHTML1_1_SCHEMA_LOCATION,
    XHTML_NAMESPACE,
    XML_SCHEMA_INSTANCE_NAMESPACE,
)
from htmlkit.exceptions import ValidationError
from htmlkit.options import RenderOptions

_DOCTYPES = {
    "html5": DOCTYPE_HTML5,
    "html4": DOCTYPE_HTML4,
    "xhtml1_0": DOCTYPE_XHTML1_0,
    "xhtml1_1": DOCTYPE_XHTML1_1,
}


class HtmlVersion(str, Enum):
    """Supported markup standards.

    Examples
    --------
        >>> HtmlVersion.XHTML1_0.html_tag
        '<html xmlns="http://www.w3.org/1999/xhtml">'

    """

    HTML5 = "html5"
    HTML4 = "html4"
    XHTML1_0 = "xhtml1_0"
    XHTML1_1 = "xhtml1_1"

    @classmethod
    def from_name(cls, name: str) -> HtmlVersion:
        """Look up a version by name, ignoring case and ``.``/``-`` separators.

        Raises
        ------
        ValidationError
            If ``name`` is not a known version

        """
        key = str(name).strip().lower().replace(".", "_").replace("-", "_")
        try:
            return cls(key)
        except ValueError as e:
            valid = ", ".join(member.value for member in cls)
            raise ValidationError(
                f"Unknown HTML version {name!r}; expected one of: {valid}",
                parameter_name="version",
                parameter_value=name,
                original_error=e,
            ) from e

    @property
    def is_xhtml(self) -> bool:
        """Return True for the XML-flavored dialects."""
        return self in (HtmlVersion.XHTML1_0, HtmlVersion.XHTML1_1)

    @property
    def doctype(self) -> str:
        """Return the doctype declaration for this version."""
        return _DOCTYPES[self.value]

    @property
    def html_attributes(self) -> Attributes:
        """Return the attributes placed on the opening ``<html>`` tag."""
        if self is HtmlVersion.XHTML1_0:
            return Attributes([("xmlns", XHTML_NAMESPACE)])
        if self is HtmlVersion.XHTML1_1:
            return Attributes(
                [
                    ("xmlns", XHTML_NAMESPACE),
                    ("xmlns:xsi", XML_SCHEMA_INSTANCE_NAMESPACE),
                    ("xsi:schemaLocation", XHTML1_1_SCHEMA_LOCATION),
                    ("xml:lang", DEFAULT_XML_LANG),
                ]
            )
        return Attributes()

    @property
    def html_tag(self) -> str:
        """Return the complete opening ``<html>`` tag."""
        return f"<html{self.html_attributes}>"

    @property
    def render_options(self) -> RenderOptions:
        """Return render options matching this dialect's void-element syntax."""
        return RenderOptions(void_element_style="xhtml" if self.is_xhtml else "html")
