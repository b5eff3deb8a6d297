"""
shapecheck value model

Closed-world enumerations shared by the engine:

- Category: which predicate groups an adapter selects for a subject
- ValueKind: the kind tags understood by has_value_type

and the GroupDefinition that bundles predicates under a name.

Predicates never consult Category. They carry their own guards so that a
checker built over every group (see adapters.wrap) behaves uniformly.
"""

from __future__ import annotations

import collections.abc
import functools
import types
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from numbers import Number, Real
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Optional, Tuple


PredicateFn = Callable[..., bool]


# ---------- Enums (closed-world) ----------


class Category(str, Enum):
    """
    Conceptual classification of a subject.

    OBJECT: mappings and plain instances (own attributes are keys)
    ARRAY: lists and tuples
    STRING: str
    FUNCTION: any other callable
    NULL: None
    OTHER: numbers, booleans, bytes, sets, ...
    """

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    FUNCTION = "function"
    NULL = "null"
    OTHER = "other"


class ValueKind(str, Enum):
    """Kind tags accepted by has_value_type."""

    STRING = "string"
    NUMBER = "number"
    FUNCTION = "function"
    ARRAY = "array"

    @classmethod
    def lookup(cls, kind: Any) -> Optional["ValueKind"]:
        """
        Resolve a kind tag without raising.

        Accepts a ValueKind, its string value, or one of the types
        str, int, float, list, tuple, function types and
        collections.abc.Callable. Anything else is None.
        """
        if isinstance(kind, ValueKind):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind.lower())
            except ValueError:
                return None
        if isinstance(kind, type):
            return _TYPE_ALIASES.get(kind)
        return None

    def matches(self, value: Any) -> bool:
        """Check whether value is of this kind."""
        if self is ValueKind.STRING:
            return isinstance(value, str)
        if self is ValueKind.NUMBER:
            return isinstance(value, Real) and not isinstance(value, bool)
        if self is ValueKind.FUNCTION:
            return callable(value)
        return isinstance(value, (list, tuple))


_TYPE_ALIASES = {
    str: ValueKind.STRING,
    int: ValueKind.NUMBER,
    float: ValueKind.NUMBER,
    list: ValueKind.ARRAY,
    tuple: ValueKind.ARRAY,
    types.FunctionType: ValueKind.FUNCTION,
    types.BuiltinFunctionType: ValueKind.FUNCTION,
    types.MethodType: ValueKind.FUNCTION,
    collections.abc.Callable: ValueKind.FUNCTION,
}


def categorize(value: Any) -> Category:
    """
    Classify a value for adapter group selection.

    Order matters: a callable mapping is still an OBJECT, and a class
    (callable, with a __dict__) is a FUNCTION.
    """
    if value is None:
        return Category.NULL
    if isinstance(value, str):
        return Category.STRING
    if isinstance(value, Mapping):
        return Category.OBJECT
    if isinstance(value, (list, tuple)):
        return Category.ARRAY
    if callable(value):
        return Category.FUNCTION
    if isinstance(value, (Number, bytes, bytearray)):
        return Category.OTHER
    if own_attributes(value) is not None:
        return Category.OBJECT
    return Category.OTHER


_UNSET = object()


def own_attributes(value: Any) -> Optional[Dict[str, Any]]:
    """
    The attributes an instance holds itself, or None if it holds none.

    Reads __dict__ and every __slots__ entry along the MRO; slots that
    were never assigned are left out.
    """
    attributes = getattr(value, "__dict__", None)
    slots = _slot_names(type(value))
    if not isinstance(attributes, dict) and not slots:
        return None

    own: Dict[str, Any] = {}
    for name in slots:
        slot_value = getattr(value, name, _UNSET)
        if slot_value is not _UNSET:
            own[name] = slot_value
    if isinstance(attributes, dict):
        own.update(attributes)
    return own


def _slot_names(cls: type) -> List[str]:
    names: List[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


# ---------- Groups ----------


@dataclass(frozen=True)
class GroupDefinition:
    """
    A named bundle of predicates scoped to one subject category.

    Predicates are stored unbound, keyed by the method name they take on
    a checker. Binding to a subject happens at assembly time.
    """

    name: str
    predicates: Mapping[str, PredicateFn] = field(default_factory=dict, hash=False)
    description: Optional[str] = None

    # True for groups produced by negation.negate
    negated: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "predicates", MappingProxyType(dict(self.predicates))
        )

    @property
    def method_names(self) -> Tuple[str, ...]:
        """Method names in declaration order."""
        return tuple(self.predicates)

    def bind(self, subject: Any) -> Dict[str, Callable[..., bool]]:
        """Bind every predicate to subject, by reference."""
        return {
            name: _bind(predicate, subject)
            for name, predicate in self.predicates.items()
        }


def _bind(predicate: PredicateFn, subject: Any) -> Callable[..., bool]:
    @functools.wraps(predicate)
    def bound(*args: Any, **kwargs: Any) -> bool:
        return predicate(subject, *args, **kwargs)

    return bound
