"""
Assembly validation

Checks the group names handed to assembly before anything is bound.
An unknown group name never comes from subject data: it means an adapter
or caller is misconfigured, so it is reported as an error rather than
folded into a boolean.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from shapecheck.registry.groups import GroupRegistry


class CheckerConfigurationError(ValueError):
    """Raised when assembly is asked for groups the registry does not know."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        msg = "Checker configuration is invalid:\n- " + "\n- ".join(errors)
        super().__init__(msg)


def validate_group_names(
    registry: GroupRegistry,
    positive: Sequence[Any],
    negative: Sequence[Any],
) -> None:
    """
    Ensure every positive and negative group name resolves.

    Raises:
        CheckerConfigurationError: Listing every unknown name.
    """
    errors: List[str] = []

    if isinstance(positive, str):
        errors.append(f"positive groups must be a sequence of names, got {positive!r}")
        positive = ()
    if isinstance(negative, str):
        errors.append(f"negative groups must be a sequence of names, got {negative!r}")
        negative = ()

    for name in positive:
        if not registry.exists(name):
            errors.append(f"unknown positive group {name!r}")
    for name in negative:
        if not registry.exists(name):
            errors.append(f"unknown negative group {name!r}")

    if errors:
        raise CheckerConfigurationError(errors)
