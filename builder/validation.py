"""Pure ordering and uniqueness checks for selector parts."""

from __future__ import annotations

from builder.categories import SINGLETON_CATEGORIES, Category
from builder.errors import DuplicateCategoryError, OutOfOrderError, SelectorError


def check_transition(
    previous: Category | None, current: Category
) -> SelectorError | None:
    """Return the error appending ``current`` after ``previous`` would cause.

    Returns ``None`` when the transition is allowed. Only the immediately
    preceding category is considered, so a duplicate singleton separated by
    other parts is reported as an ordering error instead.
    """
    if previous is None:
        return None
    if current is previous and current in SINGLETON_CATEGORIES:
        return DuplicateCategoryError(current)
    if current.rank < previous.rank:
        return OutOfOrderError(previous, current)
    return None


def validate_transition(previous: Category | None, current: Category) -> None:
    """Raise the error from :func:`check_transition`, if any."""
    error = check_transition(previous, current)
    if error is not None:
        raise error
