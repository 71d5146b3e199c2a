#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/htmlkit/ast/attributes.py
"""Attribute collections attached to nodes.

An :class:`Attributes` instance is owned by exactly one node and renders to
the fragment that sits between a tag name and its closing ``>``.

"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping, Tuple, Union

AttributePairs = Union[Mapping[Any, Any], Iterable[Tuple[Any, Any]]]


class Attributes:
    """Ordered set of HTML attributes.

    Names are unique. Pairs render in insertion order; adding a name that is
    already present replaces its value in place, so a given sequence of
    pairs always renders the same way.

    Values are written verbatim. No quote or ampersand escaping is done
    here, so untrusted values must be passed through
    :func:`htmlkit.utils.escape_html` first.

    Parameters
    ----------
    pairs : mapping or iterable of (name, value), optional
        Initial attributes. Names and values are converted with ``str()``.

    Examples
    --------
        >>> attrs = Attributes([("id", "main"), ("class", "wide")])
        >>> attrs.render()
        ' id="main" class="wide"'
        >>> Attributes().render()
        ''

    """

    __slots__ = ("_values",)

    def __init__(self, pairs: AttributePairs | None = None):
        """Create an attribute set from optional initial pairs."""
        self._values: dict[str, str] = {}
        if pairs is not None:
            items = pairs.items() if isinstance(pairs, Mapping) else pairs
            for name, value in items:
                self.add(name, value)

    @classmethod
    def empty(cls) -> Attributes:
        """Return a new attribute set with no attributes."""
        return cls()

    @classmethod
    def from_pairs(cls, pairs: AttributePairs | Attributes | None) -> Attributes:
        """Build an attribute set from pairs, or copy an existing set.

        Parameters
        ----------
        pairs : mapping, iterable of (name, value), Attributes, or None
            Source attributes. ``None`` gives an empty set.

        Returns
        -------
        Attributes
            A new set that shares no state with ``pairs``

        """
        if isinstance(pairs, Attributes):
            return pairs.copy()
        return cls(pairs)

    def add(self, name: Any, value: Any) -> None:
        """Set ``name`` to ``value``, replacing any existing value."""
        self._values[str(name)] = str(value)

    def get(self, name: Any, default: str | None = None) -> str | None:
        """Return the value of ``name`` or ``default`` when absent."""
        return self._values.get(str(name), default)

    def copy(self) -> Attributes:
        """Return an independent copy of this set."""
        clone = Attributes()
        clone._values = dict(self._values)
        return clone

    def render(self) -> str:
        """Render as `` name="value"`` fragments, one per attribute."""
        return "".join(f' {name}="{value}"' for name, value in self._values.items())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Attributes({list(self._values.items())!r})"

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._values.items())

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __contains__(self, name: object) -> bool:
        return str(name) in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return list(self._values.items()) == list(other._values.items())

    __hash__ = None  # type: ignore[assignment]
