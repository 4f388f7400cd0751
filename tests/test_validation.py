"""Tests for categories and the transition check."""

import pytest

from builder.categories import SINGLETON_CATEGORIES, Category, Combinator
from builder.errors import DuplicateCategoryError, OutOfOrderError
from builder.validation import check_transition, validate_transition


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


class TestCategory:
    def test_ranks_follow_declaration_order(self):
        assert [c.rank for c in Category] == [0, 1, 2, 3, 4, 5]
        assert Category.ELEMENT.rank < Category.PSEUDO_ELEMENT.rank

    @pytest.mark.parametrize(
        "category,expected",
        [
            (Category.ELEMENT, "div"),
            (Category.ID, "#div"),
            (Category.CLASS, ".div"),
            (Category.ATTRIBUTE, "[div]"),
            (Category.PSEUDO_CLASS, ":div"),
            (Category.PSEUDO_ELEMENT, "::div"),
        ],
    )
    def test_fragment(self, category, expected):
        assert category.fragment("div") == expected

    def test_lookup_by_name(self):
        assert Category("pseudo-class") is Category.PSEUDO_CLASS

    def test_singletons(self):
        assert SINGLETON_CATEGORIES == {
            Category.ELEMENT,
            Category.ID,
            Category.PSEUDO_ELEMENT,
        }

    def test_combinator_symbols(self):
        assert [c.value for c in Combinator] == [" ", ">", "+", "~"]


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


class TestCheckTransition:
    @pytest.mark.parametrize("category", list(Category))
    def test_anything_allowed_first(self, category):
        assert check_transition(None, category) is None

    @pytest.mark.parametrize(
        "category", [Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS]
    )
    def test_repeatable_categories(self, category):
        assert check_transition(category, category) is None

    @pytest.mark.parametrize("category", sorted(SINGLETON_CATEGORIES, key=lambda c: c.rank))
    def test_singleton_repeat(self, category):
        error = check_transition(category, category)
        assert isinstance(error, DuplicateCategoryError)
        assert error.category is category

    def test_forward_step(self):
        assert check_transition(Category.ID, Category.PSEUDO_ELEMENT) is None

    def test_backward_step(self):
        error = check_transition(Category.CLASS, Category.ID)
        assert isinstance(error, OutOfOrderError)
        assert error.previous is Category.CLASS
        assert error.category is Category.ID

    def test_check_does_not_raise(self):
        # Returns the error instead of raising it.
        error = check_transition(Category.PSEUDO_ELEMENT, Category.ELEMENT)
        assert isinstance(error, OutOfOrderError)


class TestValidateTransition:
    def test_valid_returns_none(self):
        assert validate_transition(Category.ELEMENT, Category.ID) is None

    def test_invalid_raises(self):
        with pytest.raises(OutOfOrderError):
            validate_transition(Category.ATTRIBUTE, Category.CLASS)
