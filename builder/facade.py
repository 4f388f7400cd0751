"""Stateless entry point for building selectors.

Every method starts a fresh chain, so one shared builder can serve any
number of independent chains::

    css_selector_builder.id("main").class_("container").stringify()
    # '#main.container'
"""

from __future__ import annotations

from typing import Union

from builder.categories import Combinator
from builder.snapshot import SelectorSnapshot, combine


class CssSelectorBuilder:
    """Facade that hands out new :class:`SelectorSnapshot` chains."""

    def element(self, value: str) -> SelectorSnapshot:
        return SelectorSnapshot().element(value)

    def id(self, value: str) -> SelectorSnapshot:
        return SelectorSnapshot().id(value)

    def class_(self, value: str) -> SelectorSnapshot:
        return SelectorSnapshot().class_(value)

    def attr(self, value: str) -> SelectorSnapshot:
        return SelectorSnapshot().attr(value)

    def pseudo_class(self, value: str) -> SelectorSnapshot:
        return SelectorSnapshot().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorSnapshot:
        return SelectorSnapshot().pseudo_element(value)

    def combine(
        self,
        left: SelectorSnapshot,
        combinator: Union[Combinator, str],
        right: SelectorSnapshot,
    ) -> SelectorSnapshot:
        return combine(left, combinator, right)

    def stringify(self) -> str:
        """Text of an empty selector; the builder itself holds no parts."""
        return SelectorSnapshot().stringify()


css_selector_builder = CssSelectorBuilder()
