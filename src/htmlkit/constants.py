#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the htmlkit library.

This module centralizes the fixed markup strings used across htmlkit, such
as doctype declarations and namespace URIs, and the set of void element
tags.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Document Framing - Doctype strings
3. Namespaces - XML namespace and schema URIs for XHTML dialects
4. Elements - Tag sets with special rendering rules
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

# How void elements such as <img> and <br> are closed
VoidElementStyle = Literal["html", "xhtml"]

# =============================================================================
# Document Framing
# =============================================================================

DOCTYPE_HTML5 = "<!DOCTYPE html>"
DOCTYPE_HTML4 = (
    '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" "http://www.w3.org/TR/HTML4/loose.dtd">'
)
DOCTYPE_XHTML1_0 = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
    '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">'
)
DOCTYPE_XHTML1_1 = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" "http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">'
)

# =============================================================================
# Namespaces
# =============================================================================

XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
XML_SCHEMA_INSTANCE_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XHTML1_1_SCHEMA_LOCATION = "http://www.w3.org/MarkUp/SCHEMA/xhtml11.xsd"
DEFAULT_XML_LANG = "en"

# =============================================================================
# Elements
# =============================================================================

# Elements that never have a closing tag or children
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

DEFAULT_VOID_ELEMENT_STYLE: VoidElementStyle = "html"

# Wrapper applied to each child of <ol> and <ul> containers
LIST_ITEM_TAG = "li"

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6
