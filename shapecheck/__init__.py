"""
shapecheck: ad-hoc structural questions about arbitrary values

A small predicate-composition engine. Each question is a named boolean
predicate bound to one subject value; predicates compose into a single
checker plus its exact logical negation.

    >>> from shapecheck import wrap
    >>> wrap({"a": 1, "b": 2}).has_keys(["a", "b"])
    True
    >>> wrap({"a": 1, "b": 2}).not_.contains_keys(["c"])
    True
"""

__version__ = "0.1.0"

from .core.model import Category, ValueKind, categorize
from .core.negation import complement, negate
from .registry.groups import (
    DEFAULT_REGISTRY,
    DuplicateGroupError,
    GroupDefinition,
    GroupNotFoundError,
    GroupRegistry,
)
from .checker import Checker, CheckView
from .options import DEFAULT_OPTIONS, CheckerOptions
from .validation import CheckerConfigurationError, validate_group_names
from .assembly import CheckerBuilder, build, checker_for
from .serialize import to_dict, to_json
from .adapters import (
    DEFAULT_BINDINGS,
    CategoryAlreadyBoundError,
    CategoryBinding,
    CategoryBindings,
    check,
    check_array,
    check_function,
    check_object,
    check_string,
    wrap,
)

__all__ = [
    # Model
    "Category",
    "ValueKind",
    "categorize",
    # Negation
    "complement",
    "negate",
    # Registry
    "DEFAULT_REGISTRY",
    "DuplicateGroupError",
    "GroupDefinition",
    "GroupNotFoundError",
    "GroupRegistry",
    # Checker
    "Checker",
    "CheckView",
    "CheckerOptions",
    "DEFAULT_OPTIONS",
    # Assembly
    "CheckerBuilder",
    "CheckerConfigurationError",
    "build",
    "checker_for",
    "validate_group_names",
    # Adapters
    "CategoryAlreadyBoundError",
    "CategoryBinding",
    "CategoryBindings",
    "DEFAULT_BINDINGS",
    "check",
    "check_array",
    "check_function",
    "check_object",
    "check_string",
    "wrap",
    # Introspection
    "to_dict",
    "to_json",
]
