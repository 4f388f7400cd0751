"""Immutable selector snapshots.

Each chained call returns a new :class:`SelectorSnapshot`; nothing is ever
mutated, so a snapshot can be shared or branched from freely::

    base = SelectorSnapshot().element("div")
    base.class_("a").stringify()   # 'div.a'
    base.class_("b").stringify()   # 'div.b'
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from builder.categories import Category, Combinator
from builder.validation import validate_transition


@dataclass(frozen=True)
class SelectorSnapshot:
    """Selector text built so far plus the category of its last part."""

    text: str = ""
    last_category: Category | None = None

    @property
    def last_rank(self) -> int:
        """Rank of the last part, or -1 when empty or after a combination."""
        if self.last_category is None:
            return -1
        return self.last_category.rank

    def append(self, category: Category, value: str) -> SelectorSnapshot:
        """Return a new snapshot with ``value`` appended as ``category``.

        Raises:
            DuplicateCategoryError: A singleton category repeats back-to-back.
            OutOfOrderError: ``category`` ranks below the last part.
        """
        validate_transition(self.last_category, category)
        return replace(
            self,
            text=self.text + category.fragment(value),
            last_category=category,
        )

    def element(self, value: str) -> SelectorSnapshot:
        return self.append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorSnapshot:
        return self.append(Category.ID, value)

    def class_(self, value: str) -> SelectorSnapshot:
        return self.append(Category.CLASS, value)

    def attr(self, value: str) -> SelectorSnapshot:
        return self.append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorSnapshot:
        return self.append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorSnapshot:
        return self.append(Category.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        """Return the selector text. Has no side effects."""
        return self.text

    def __str__(self) -> str:
        return self.text


def combine(
    left: SelectorSnapshot,
    combinator: Union[Combinator, str],
    right: SelectorSnapshot,
) -> SelectorSnapshot:
    """Join two selectors with a combinator surrounded by single spaces.

    The result carries no category, so any part may follow it. A plain
    string combinator is inserted verbatim.
    """
    if isinstance(combinator, Combinator):
        symbol = combinator.value
    else:
        symbol = combinator
    return SelectorSnapshot(text=f"{left.stringify()} {symbol} {right.stringify()}")
