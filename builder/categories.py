"""Selector part categories and combinators.

Category declaration order is the order parts must appear in a compound
selector::

    element#id.class[attr]:pseudo-class::pseudo-element
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Kinds of simple selector that make up a compound selector."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this category in the required ordering (0-based)."""
        return _ORDER.index(self)

    def fragment(self, value: str) -> str:
        """Render ``value`` as a selector fragment of this category."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


class Combinator(str, Enum):
    """CSS combinators joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


_ORDER: tuple[Category, ...] = tuple(Category)

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}

# May appear at most once in a row; the rest repeat freely.
SINGLETON_CATEGORIES: frozenset[Category] = frozenset(
    {Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT}
)
