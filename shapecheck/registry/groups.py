"""
Group Registry

A group is a named bundle of primitive predicates scoped to one subject
category. Groups are pure data selections: they carry no logic beyond
referencing the predicates in shapecheck.core.predicates.

The registry provides:
- Group resolution (name -> GroupDefinition)
- Negated group resolution (name -> negate(GroupDefinition)), cached
- Registration of additional groups
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from shapecheck.core import predicates
from shapecheck.core.model import GroupDefinition
from shapecheck.core.negation import negate

logger = logging.getLogger(__name__)


OBJECT_METHODS = "object-methods"
ARRAY_EXTRA_METHODS = "array-extra-methods"
STRING_METHODS = "string-methods"
FUNCTION_METHODS = "function-methods"
NULL_METHODS = "null-methods"


class GroupNotFoundError(Exception):
    """Raised when a referenced group cannot be resolved."""

    def __init__(self, name: str, known: Optional[Iterable[str]] = None):
        self.name = name
        self.known = list(known or [])
        msg = f"Predicate group not found: {name}"
        if self.known:
            msg += f" (known: {', '.join(self.known)})"
        super().__init__(msg)


class DuplicateGroupError(Exception):
    """Raised when registering a group name that is already taken."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Predicate group already registered: {name}")


def default_groups() -> List[GroupDefinition]:
    """The built-in groups, in registration order."""
    return [
        GroupDefinition(
            name=OBJECT_METHODS,
            description="Key and value checks for object-like subjects",
            predicates={
                "contains_keys": predicates.contains_keys,
                "has_keys": predicates.has_keys,
                "contains_values": predicates.contains_values,
                "has_values": predicates.has_values,
                "has_value_type": predicates.has_value_type,
            },
        ),
        GroupDefinition(
            name=ARRAY_EXTRA_METHODS,
            description="Extra checks for lists and tuples",
            predicates={"has_length": predicates.has_length},
        ),
        GroupDefinition(
            name=STRING_METHODS,
            description="Length and word checks for strings",
            predicates={
                "has_length": predicates.has_length,
                "has_words_count": predicates.has_words_count,
            },
        ),
        GroupDefinition(
            name=FUNCTION_METHODS,
            description="Signature checks for callables",
            predicates={"has_params_count": predicates.has_params_count},
        ),
        GroupDefinition(
            name=NULL_METHODS,
            description="None check",
            predicates={"is_null": predicates.is_null},
        ),
    ]


class GroupRegistry:
    """
    Central registry for predicate group resolution.

    A fresh registry holds the built-in groups unless empty=True.
    """

    def __init__(self, groups: Optional[Iterable[GroupDefinition]] = None,
                 empty: bool = False) -> None:
        self._groups: Dict[str, GroupDefinition] = {}
        self._negated_cache: Dict[str, GroupDefinition] = {}

        if not empty:
            for group in default_groups():
                self.register(group)
        for group in groups or []:
            self.register(group)

    def resolve(self, name: str) -> GroupDefinition:
        """
        Resolve a group name to its definition.

        Raises:
            GroupNotFoundError: If no group has that name.
        """
        try:
            return self._groups[name]
        except (KeyError, TypeError):
            raise GroupNotFoundError(name, self.names()) from None

    def resolve_negated(self, name: str) -> GroupDefinition:
        """
        Resolve a group name to its negated definition.

        Raises:
            GroupNotFoundError: If no group has that name.
        """
        group = self.resolve(name)
        if name in self._negated_cache:
            return self._negated_cache[name]

        negated = negate(group)
        self._negated_cache[name] = negated
        return negated

    def register(self, group: GroupDefinition, replace: bool = False) -> None:
        """
        Register a group definition.

        Raises:
            DuplicateGroupError: If the name is taken and replace is False.
        """
        if group.name in self._groups and not replace:
            raise DuplicateGroupError(group.name)

        self._groups[group.name] = group
        self._negated_cache.pop(group.name, None)
        logger.debug(
            "Registered predicate group %s with methods %s",
            group.name,
            ", ".join(group.method_names),
        )

    def exists(self, name: str) -> bool:
        """Check if a group is registered."""
        try:
            return name in self._groups
        except TypeError:
            return False

    def names(self) -> List[str]:
        """List registered group names in registration order."""
        return list(self._groups)

    def clear_cache(self) -> None:
        """Clear the negated group cache."""
        self._negated_cache.clear()


DEFAULT_REGISTRY = GroupRegistry()
