"""shapecheck core: value model, primitive predicates and negation."""

from .model import Category, GroupDefinition, PredicateFn, ValueKind, categorize
from .negation import complement, negate
from . import predicates

__all__ = [
    "Category",
    "GroupDefinition",
    "PredicateFn",
    "ValueKind",
    "categorize",
    "complement",
    "negate",
    "predicates",
]
