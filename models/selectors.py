"""Selector expression types as Pydantic v2 models with discriminated union."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from builder.categories import Category, Combinator


class SelectorPart(BaseModel):
    """One simple selector, e.g. ``{"category": "class", "value": "active"}``."""

    model_config = ConfigDict(extra="forbid")

    category: Category
    value: str


class CompoundSelector(BaseModel):
    """Simple selectors concatenated in order, e.g. ``a.nav:hover``."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["compound"] = "compound"
    parts: list[SelectorPart]


class CombinedSelector(BaseModel):
    """Two selector expressions joined by a combinator."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["combined"] = "combined"
    left: SelectorExpr
    combinator: Combinator
    right: SelectorExpr


SelectorExpr = Annotated[
    Union[CompoundSelector, CombinedSelector],
    Field(discriminator="type"),
]

CombinedSelector.model_rebuild()


class SelectorRequest(BaseModel):
    """Request body for ``POST /selectors``."""

    model_config = ConfigDict(extra="forbid")

    selector: SelectorExpr


class SelectorResponse(BaseModel):
    """Rendered selector text."""

    selector: str


class ErrorResponse(BaseModel):
    """Body returned when a selector is rejected."""

    error: str
    detail: str


# ---------------------------------------------------------------------------
# Helper factory functions
# ---------------------------------------------------------------------------


def part(category: Category | str, value: str) -> SelectorPart:
    """Create a SelectorPart."""
    return SelectorPart(category=Category(category), value=value)


def compound(*parts: SelectorPart) -> CompoundSelector:
    """Create a compoundSelector from parts in order."""
    return CompoundSelector(parts=list(parts))


def combined(
    left: CompoundSelector | CombinedSelector,
    combinator: Combinator | str,
    right: CompoundSelector | CombinedSelector,
) -> CombinedSelector:
    """Create a combinedSelector."""
    return CombinedSelector(
        left=left,
        combinator=Combinator(combinator),
        right=right,
    )
