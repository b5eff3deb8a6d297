"""
shapecheck checkers

A CheckView is an immutable namespace of predicates already bound to one
subject. A Checker is the positive view plus a derived negated view,
reachable as checker.not_ or ~checker:

    checker.has_keys(["a"]) == (not checker.not_.has_keys(["a"]))

The subject is held by reference. Mutating it elsewhere is visible to
later predicate calls on the same checker.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Iterator, List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


BoundPredicate = Callable[..., bool]


class CheckView:
    """An immutable namespace of predicates bound to one subject."""

    def __init__(
        self,
        subject: Any,
        methods: Mapping[str, BoundPredicate],
        groups: Sequence[str] = (),
    ) -> None:
        object.__setattr__(self, "_subject", subject)
        object.__setattr__(self, "_methods", MappingProxyType(dict(methods)))
        object.__setattr__(self, "_groups", tuple(groups))

    @property
    def subject(self) -> Any:
        """The bound subject (same object, not a copy)."""
        return self._subject

    @property
    def groups(self) -> Tuple[str, ...]:
        """Group names merged into this view, in merge order."""
        return self._groups

    @property
    def names(self) -> Tuple[str, ...]:
        """Available method names."""
        return tuple(self._methods)

    def __getattr__(self, name: str) -> BoundPredicate:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._methods[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no check named {name!r}"
            ) from None

    def __getitem__(self, name: str) -> BoundPredicate:
        return self._methods[name]

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)

    def __dir__(self) -> List[str]:
        return sorted(set(super().__dir__()) | set(self._methods))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {type(self._subject).__name__} "
            f"[{', '.join(self._methods)}]>"
        )


class Checker(CheckView):
    """
    Positive checks for one subject plus their exact negation.

    The negated view is built on first access to not_. With caching
    enabled the same view is returned afterwards, otherwise it is rebuilt
    on every access.
    """

    def __init__(
        self,
        subject: Any,
        methods: Mapping[str, BoundPredicate],
        groups: Sequence[str],
        negated_groups: Sequence[str],
        negated_factory: Callable[[], CheckView],
        cache_negation: bool = True,
    ) -> None:
        super().__init__(subject, methods, groups)
        object.__setattr__(self, "_negated_groups", tuple(negated_groups))
        object.__setattr__(self, "_negated_factory", negated_factory)
        object.__setattr__(self, "_cache_negation", cache_negation)
        object.__setattr__(self, "_negated", None)

    @property
    def negated_groups(self) -> Tuple[str, ...]:
        """Group names merged into the negated view, in merge order."""
        return self._negated_groups

    @property
    def not_(self) -> CheckView:
        """The negated view: every method answers the opposite."""
        cached: Optional[CheckView] = self._negated
        if cached is not None:
            return cached

        view = self._negated_factory()
        logger.debug(
            "Materialised negated view over %s for %s",
            ", ".join(self._negated_groups) or "no groups",
            type(self._subject).__name__,
        )
        if self._cache_negation:
            object.__setattr__(self, "_negated", view)
        return view

    def __invert__(self) -> CheckView:
        return self.not_

    def __getattr__(self, name: str) -> Any:
        # getattr(checker, "not") for callers that spell it literally
        if name == "not":
            return self.not_
        return super().__getattr__(name)
