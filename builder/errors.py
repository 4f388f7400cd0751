"""Exceptions raised while building a selector."""

from __future__ import annotations

from builder.categories import Category


class SelectorError(ValueError):
    """Base class for invalid selector construction.

    A chain that raised is unusable; start a new one from the builder.
    """


class DuplicateCategoryError(SelectorError):
    """A singleton category (element, id, pseudo-element) was repeated."""

    def __init__(self, category: Category) -> None:
        self.category = category
        super().__init__(
            "Element, id and pseudo-element should not occur more than once "
            "inside the selector"
        )


class OutOfOrderError(SelectorError):
    """A category was appended after a higher-ranked one."""

    def __init__(self, previous: Category, category: Category) -> None:
        self.previous = previous
        self.category = category
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )
