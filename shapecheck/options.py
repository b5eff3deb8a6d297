"""
Checker configuration.

There is no environment or file configuration: options are passed
explicitly to assembly and adapters.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckerOptions:
    """
    Assembly options.

    cache_negation: materialise the negated view once, on first access.
        When False the view is rebuilt on every access. Both are exact
        since predicates read the subject at call time either way.
    """

    cache_negation: bool = True


DEFAULT_OPTIONS = CheckerOptions()
