"""Rectangle model with computed area."""

from __future__ import annotations

from typing import Any, Sequence, Union

from pydantic import BaseModel, ConfigDict

Number = Union[int, float]


class Rectangle(BaseModel):
    """Axis-aligned rectangle. Dimensions are not range-checked.

    Accepts positional arguments, so ``Rectangle(10, 20)`` works as well as
    ``Rectangle(width=10, height=20)``.
    """

    model_config = ConfigDict(extra="forbid")

    width: Number
    height: Number

    def __init__(self, width: Number, height: Number, **data: Any) -> None:
        super().__init__(width=width, height=height, **data)

    def get_area(self) -> Number:
        return self.width * self.height

    @classmethod
    def from_values(cls, values: Sequence[Any]) -> Rectangle:
        """Build from ``[width, height]``, for use with ``from_json``."""
        width, height = values
        return cls(width, height)


class RectangleResponse(BaseModel):
    """Rectangle dimensions plus area, returned by ``POST /rectangles``."""

    width: Number
    height: Number
    area: Number


def rectangle(width: Number, height: Number) -> Rectangle:
    """Create a Rectangle."""
    return Rectangle(width, height)
