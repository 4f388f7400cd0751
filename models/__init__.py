"""Public re-exports of all model types."""

from models.rectangle import Rectangle, RectangleResponse, rectangle
from models.selectors import (
    CombinedSelector,
    CompoundSelector,
    ErrorResponse,
    SelectorExpr,
    SelectorPart,
    SelectorRequest,
    SelectorResponse,
    combined,
    compound,
    part,
)

__all__ = [
    # Selector expressions
    "SelectorPart",
    "CompoundSelector",
    "CombinedSelector",
    "SelectorExpr",
    # Selector factories
    "part",
    "compound",
    "combined",
    # Rectangles
    "Rectangle",
    "rectangle",
    # Request/Response
    "SelectorRequest",
    "SelectorResponse",
    "RectangleResponse",
    "ErrorResponse",
]
