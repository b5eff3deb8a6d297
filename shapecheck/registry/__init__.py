"""shapecheck registry of predicate groups."""

from .groups import (
    ARRAY_EXTRA_METHODS,
    DEFAULT_REGISTRY,
    FUNCTION_METHODS,
    NULL_METHODS,
    OBJECT_METHODS,
    STRING_METHODS,
    DuplicateGroupError,
    GroupNotFoundError,
    GroupRegistry,
    default_groups,
)
from shapecheck.core.model import GroupDefinition

__all__ = [
    "ARRAY_EXTRA_METHODS",
    "DEFAULT_REGISTRY",
    "FUNCTION_METHODS",
    "NULL_METHODS",
    "OBJECT_METHODS",
    "STRING_METHODS",
    "DuplicateGroupError",
    "GroupDefinition",
    "GroupNotFoundError",
    "GroupRegistry",
    "default_groups",
]
