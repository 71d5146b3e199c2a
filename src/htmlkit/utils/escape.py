#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/utils/escape.py
"""Text escaping for safe insertion into HTML.

The node tree never escapes anything on its own; content and attribute
values are written exactly as given. Call :func:`escape_html` on untrusted
text before handing it to a node.

"""

from __future__ import annotations

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }
)


def escape_html(text: str) -> str:
    """Replace HTML special characters with their named entities.

    Converts ``& < > " '`` and leaves every other character untouched, so
    the result is safe both as element content and inside a quoted
    attribute value.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_html("My <p> element!")
        'My &lt;p&gt; element!'

    """
    if not text:
        return text
    return text.translate(_HTML_ESCAPES)
