"""Render selector expression models through the builder.

Lets callers describe a selector as data (see ``models.selectors``) and still
get the builder's ordering and uniqueness checks.
"""

from __future__ import annotations

from builder.snapshot import SelectorSnapshot, combine
from models.selectors import CombinedSelector, CompoundSelector


def compose(expr: CompoundSelector | CombinedSelector) -> SelectorSnapshot:
    """Build a snapshot from a compound or combined selector expression.

    Raises:
        SelectorError: If any compound breaks ordering or uniqueness.
    """
    if isinstance(expr, CombinedSelector):
        return combine(compose(expr.left), expr.combinator, compose(expr.right))

    snapshot = SelectorSnapshot()
    for p in expr.parts:
        snapshot = snapshot.append(p.category, p.value)
    return snapshot
