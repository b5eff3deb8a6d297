"""
shapecheck negation engine

Negated groups are derived, never hand-written: for every predicate P in
a group the negated group holds P' with

    P'(subject, *args) == not P(subject, *args)

This includes the category-mismatch branch. A predicate that answers
False because it does not apply to the subject answers True once negated.
"""

from __future__ import annotations

import functools
from typing import Any

from .model import GroupDefinition, PredicateFn


def complement(predicate: PredicateFn) -> PredicateFn:
    """
    Return the exact logical complement of predicate.

    The complement of a complement is the original function.
    """
    original = getattr(predicate, "__complement_of__", None)
    if original is not None:
        return original

    @functools.wraps(predicate)
    def negated(subject: Any, *args: Any, **kwargs: Any) -> bool:
        return not predicate(subject, *args, **kwargs)

    negated.__complement_of__ = predicate  # type: ignore[attr-defined]
    return negated


def negate(group: GroupDefinition) -> GroupDefinition:
    """Derive the mirror group: same name, same methods, every result inverted."""
    return GroupDefinition(
        name=group.name,
        predicates={
            name: complement(predicate)
            for name, predicate in group.predicates.items()
        },
        description=group.description,
        negated=not group.negated,
    )
