"""
shapecheck checker assembly

Merges an ordered list of positive groups and an ordered list of negative
groups, bound to one subject, into a single Checker.

Merge rule: groups are applied in list order and a later group's method
replaces an earlier one of the same name. The same rule applies to the
negated merge.

Two entry points:

    build(subject, ["object-methods"], ["object-methods"])

    (
        checker_for(subject)
        .include("object-methods", "array-extra-methods")
        .mirrored()
        .build()
    )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from shapecheck.checker import BoundPredicate, Checker, CheckView
from shapecheck.options import DEFAULT_OPTIONS, CheckerOptions
from shapecheck.registry.groups import DEFAULT_REGISTRY, GroupRegistry
from shapecheck.core.model import GroupDefinition
from shapecheck.validation import validate_group_names

logger = logging.getLogger(__name__)


def _merge(
    subject: Any,
    names: Sequence[str],
    resolve: Callable[[str], GroupDefinition],
) -> Dict[str, BoundPredicate]:
    methods: Dict[str, BoundPredicate] = {}
    for name in names:
        methods.update(resolve(name).bind(subject))
    return methods


def build(
    subject: Any,
    positive: Sequence[str],
    negative: Optional[Sequence[str]] = None,
    *,
    registry: Optional[GroupRegistry] = None,
    options: Optional[CheckerOptions] = None,
) -> Checker:
    """
    Assemble a checker for subject.

    Args:
        subject: The value under test, held by reference
        positive: Group names merged into the checker's own methods
        negative: Group names merged into checker.not_ (default: positive)
        registry: Where group names are resolved (default registry if None)
        options: Assembly options (DEFAULT_OPTIONS if None)

    Raises:
        CheckerConfigurationError: If any group name is unknown
    """
    registry = registry or DEFAULT_REGISTRY
    options = options or DEFAULT_OPTIONS
    positive = tuple(positive) if not isinstance(positive, str) else positive
    if negative is None:
        negative = positive
    negative = tuple(negative) if not isinstance(negative, str) else negative

    validate_group_names(registry, positive, negative)

    methods = _merge(subject, positive, registry.resolve)

    def negated_view() -> CheckView:
        return CheckView(
            subject,
            _merge(subject, negative, registry.resolve_negated),
            negative,
        )

    logger.debug(
        "Assembled checker for %s from %s (negated: %s)",
        type(subject).__name__,
        ", ".join(positive) or "no groups",
        ", ".join(negative) or "no groups",
    )
    return Checker(
        subject,
        methods,
        positive,
        negative,
        negated_view,
        cache_negation=options.cache_negation,
    )


@dataclass
class _BuilderState:
    """Internal state for the builder."""

    subject: Any = None
    positive: List[str] = field(default_factory=list)
    negative: Optional[List[str]] = None
    registry: Optional[GroupRegistry] = None
    options: Optional[CheckerOptions] = None


class CheckerBuilder:
    """
    Fluent builder for checkers.

    Usage:
        checker = (
            CheckerBuilder(subject)
            .include("string-methods")
            .negate("string-methods", "array-extra-methods")
            .with_options(CheckerOptions(cache_negation=False))
            .build()
        )

    Without negate() or mirrored() the negated view mirrors the
    positive groups.
    """

    def __init__(self, subject: Any) -> None:
        self._state = _BuilderState(subject=subject)

    # ========== Groups ==========

    def include(self, *names: str) -> "CheckerBuilder":
        """Append groups to the positive merge."""
        self._state.positive.extend(names)
        return self

    def negate(self, *names: str) -> "CheckerBuilder":
        """Append groups to the negated merge."""
        if self._state.negative is None:
            self._state.negative = []
        self._state.negative.extend(names)
        return self

    def mirrored(self) -> "CheckerBuilder":
        """Negate exactly the positive groups (the default)."""
        self._state.negative = None
        return self

    # ========== Resolution and options ==========

    def using(self, registry: GroupRegistry) -> "CheckerBuilder":
        """Resolve group names in registry instead of the default one."""
        self._state.registry = registry
        return self

    def with_options(self, options: CheckerOptions) -> "CheckerBuilder":
        """Set assembly options."""
        self._state.options = options
        return self

    # ========== Build ==========

    def build(self) -> Checker:
        """
        Build the checker.

        Raises:
            CheckerConfigurationError: If any group name is unknown
        """
        return build(
            self._state.subject,
            self._state.positive,
            self._state.negative,
            registry=self._state.registry,
            options=self._state.options,
        )

    def copy(self) -> "CheckerBuilder":
        """Create a copy of this builder with the same state."""
        new_builder = CheckerBuilder(self._state.subject)
        new_builder._state = _BuilderState(
            subject=self._state.subject,
            positive=list(self._state.positive),
            negative=(
                list(self._state.negative)
                if self._state.negative is not None
                else None
            ),
            registry=self._state.registry,
            options=self._state.options,
        )
        return new_builder


# Convenience function for starting a checker
def checker_for(subject: Any) -> CheckerBuilder:
    """Start building a checker for subject."""
    return CheckerBuilder(subject)
