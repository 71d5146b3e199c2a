#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/options.py
"""Rendering options shared by every node in a tree.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy instead of mutating an instance.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any, get_args

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from htmlkit.constants import DEFAULT_VOID_ELEMENT_STYLE, VoidElementStyle


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Options applied while a tree is rendered.

    Nodes receive these options from their parent during ``render`` and pass
    them on unchanged, so one setting governs the whole tree.

    Parameters
    ----------
    void_element_style : {"html", "xhtml"}, default = "html"
        How void elements (``img``, ``br``, ``hr``, ``meta``, ``link``) are
        closed. ``"html"`` writes ``<br>``, ``"xhtml"`` writes ``<br/>``.

    Examples
    --------
        >>> from htmlkit.ast import Image
        >>> Image("a.png", "A").render(RenderOptions(void_element_style="xhtml"))
        '<img src="a.png" alt="A"/>'

    """

    void_element_style: VoidElementStyle = field(
        default=DEFAULT_VOID_ELEMENT_STYLE,
        metadata={"help": "Closing syntax for void elements: 'html' (<br>) or 'xhtml' (<br/>)"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``void_element_style`` is not a recognized style.

        """
        if self.void_element_style not in get_args(VoidElementStyle):
            raise ValueError(f"void_element_style must be 'html' or 'xhtml', got {self.void_element_style!r}")

    @property
    def void_close(self) -> str:
        """Return the characters that close a void element's tag."""
        return "/>" if self.void_element_style == "xhtml" else ">"


DEFAULT_RENDER_OPTIONS = RenderOptions()


def resolve_options(options: RenderOptions | None) -> RenderOptions:
    """Return ``options`` or the shared default instance when it is None."""
    return DEFAULT_RENDER_OPTIONS if options is None else options
