"""Immutable fluent CSS selector builder."""

from builder.categories import SINGLETON_CATEGORIES, Category, Combinator
from builder.errors import DuplicateCategoryError, OutOfOrderError, SelectorError
from builder.facade import CssSelectorBuilder, css_selector_builder
from builder.snapshot import SelectorSnapshot, combine
from builder.validation import check_transition, validate_transition

__all__ = [
    # Categories
    "Category",
    "Combinator",
    "SINGLETON_CATEGORIES",
    # Errors
    "SelectorError",
    "DuplicateCategoryError",
    "OutOfOrderError",
    # Building
    "SelectorSnapshot",
    "CssSelectorBuilder",
    "css_selector_builder",
    "combine",
    # Validation
    "check_transition",
    "validate_transition",
]
