"""
Checker introspection

Describes a checker's layout (which groups, which methods) as plain data
so it can be logged, diffed or asserted on. The subject itself is never
serialized, only its category and type name.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from .checker import Checker
from .core.model import categorize


def to_dict(checker: Checker) -> Dict[str, Any]:
    """
    Describe a checker as a dictionary.

    Building the description materialises the negated view.
    """
    negated = checker.not_
    return {
        "category": categorize(checker.subject).value,
        "subject_type": type(checker.subject).__name__,
        "groups": list(checker.groups),
        "negated_groups": list(checker.negated_groups),
        "methods": list(checker.names),
        "negated_methods": list(negated.names),
    }


def to_json(checker: Checker, indent: int = 2) -> str:
    """
    Describe a checker as JSON.

    Args:
        checker: The checker to describe
        indent: Indentation level for pretty-printing

    Returns:
        JSON string representation
    """
    return json.dumps(to_dict(checker), indent=indent)
