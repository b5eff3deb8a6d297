"""
shapecheck adapters

The two ways callers reach the engine:

- wrap(value): every group, whatever the value is. Predicates that do not
  apply answer False (and True under not_), so wrap(42) is all False.
- check(value): only the groups bound to the value's Category.

check() takes the place of a process-wide accessor installed on builtin
types. Category to group selection lives in a CategoryBindings table
instead, and each category can be bound at most once per table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from shapecheck.assembly import build
from shapecheck.checker import Checker
from shapecheck.core.model import Category, categorize
from shapecheck.options import CheckerOptions
from shapecheck.registry.groups import (
    ARRAY_EXTRA_METHODS,
    FUNCTION_METHODS,
    NULL_METHODS,
    OBJECT_METHODS,
    STRING_METHODS,
    GroupRegistry,
)

logger = logging.getLogger(__name__)


WRAP_GROUPS: Tuple[str, ...] = (
    OBJECT_METHODS,
    STRING_METHODS,
    FUNCTION_METHODS,
    ARRAY_EXTRA_METHODS,
    NULL_METHODS,
)


class CategoryAlreadyBoundError(Exception):
    """Raised when a category is bound to groups a second time."""

    def __init__(self, category: Category, binding: "CategoryBinding"):
        self.category = category
        self.binding = binding
        super().__init__(
            f"Category '{category.value}' is already bound to "
            f"{', '.join(binding.positive) or 'no groups'}"
        )


@dataclass(frozen=True)
class CategoryBinding:
    """The positive and negative group names selected for one category."""

    positive: Tuple[str, ...]
    negative: Tuple[str, ...]


class CategoryBindings:
    """
    Category -> group selection table.

    Bindings are set up once; rebinding a category is a configuration
    error, not something to resolve at lookup time.
    """

    def __init__(self) -> None:
        self._bindings: Dict[Category, CategoryBinding] = {}

    def bind(
        self,
        category: Category,
        positive: Sequence[str],
        negative: Optional[Sequence[str]] = None,
    ) -> None:
        """
        Bind a category to group names.

        Raises:
            CategoryAlreadyBoundError: If the category is already bound.
        """
        category = Category(category)
        if category in self._bindings:
            raise CategoryAlreadyBoundError(category, self._bindings[category])

        positive = tuple(positive)
        binding = CategoryBinding(
            positive=positive,
            negative=tuple(negative) if negative is not None else positive,
        )
        self._bindings[category] = binding
        logger.debug(
            "Bound category %s to %s", category.value, ", ".join(binding.positive)
        )

    def get(self, category: Category) -> CategoryBinding:
        """
        Get the binding for a category.

        Raises:
            KeyError: If the category was never bound.
        """
        return self._bindings[Category(category)]

    def is_bound(self, category: Category) -> bool:
        """Check if a category has a binding."""
        return Category(category) in self._bindings

    def categories(self) -> Tuple[Category, ...]:
        """Bound categories in binding order."""
        return tuple(self._bindings)


def default_bindings() -> CategoryBindings:
    """The standard category selection."""
    bindings = CategoryBindings()
    bindings.bind(Category.OBJECT, [OBJECT_METHODS])
    bindings.bind(Category.ARRAY, [OBJECT_METHODS, ARRAY_EXTRA_METHODS])
    bindings.bind(Category.STRING, [STRING_METHODS])
    bindings.bind(Category.FUNCTION, [FUNCTION_METHODS])
    bindings.bind(Category.NULL, [NULL_METHODS])
    # Numbers, booleans and the like get the object checks, all False.
    bindings.bind(Category.OTHER, [OBJECT_METHODS])
    return bindings


DEFAULT_BINDINGS = default_bindings()


# ========== Explicit factory ==========


def wrap(
    value: Any,
    *,
    registry: Optional[GroupRegistry] = None,
    options: Optional[CheckerOptions] = None,
) -> Checker:
    """Checker over every built-in group, bound to value."""
    return build(value, WRAP_GROUPS, WRAP_GROUPS, registry=registry, options=options)


# ========== Per-category accessors ==========


def _check_as(
    category: Category,
    value: Any,
    bindings: Optional[CategoryBindings],
    registry: Optional[GroupRegistry],
    options: Optional[CheckerOptions],
) -> Checker:
    binding = (bindings or DEFAULT_BINDINGS).get(category)
    return build(
        value, binding.positive, binding.negative, registry=registry, options=options
    )


def check(
    value: Any,
    *,
    bindings: Optional[CategoryBindings] = None,
    registry: Optional[GroupRegistry] = None,
    options: Optional[CheckerOptions] = None,
) -> Checker:
    """Checker over the groups bound to the value's category."""
    return _check_as(categorize(value), value, bindings, registry, options)


def check_object(
    value: Any,
    *,
    bindings: Optional[CategoryBindings] = None,
    registry: Optional[GroupRegistry] = None,
    options: Optional[CheckerOptions] = None,
) -> Checker:
    """Checker with the object groups, whatever value is."""
    return _check_as(Category.OBJECT, value, bindings, registry, options)


def check_array(
    value: Any,
    *,
    bindings: Optional[CategoryBindings] = None,
    registry: Optional[GroupRegistry] = None,
    options: Optional[CheckerOptions] = None,
) -> Checker:
    """Checker with the array groups, whatever value is."""
    return _check_as(Category.ARRAY, value, bindings, registry, options)


def check_string(
    value: Any,
    *,
    bindings: Optional[CategoryBindings] = None,
    registry: Optional[GroupRegistry] = None,
    options: Optional[CheckerOptions] = None,
) -> Checker:
    """Checker with the string groups, whatever value is."""
    return _check_as(Category.STRING, value, bindings, registry, options)


def check_function(
    value: Any,
    *,
    bindings: Optional[CategoryBindings] = None,
    registry: Optional[GroupRegistry] = None,
    options: Optional[CheckerOptions] = None,
) -> Checker:
    """Checker with the function groups, whatever value is."""
    return _check_as(Category.FUNCTION, value, bindings, registry, options)
