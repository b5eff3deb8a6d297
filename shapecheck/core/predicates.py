"""
shapecheck primitive predicates

Every predicate has the shape predicate(subject, *args) -> bool and is
total: if the subject is not of the category the predicate understands,
or an argument has the wrong shape, the answer is False. Predicates never
raise and never return anything but a bool.

Object-like subjects are mappings, lists/tuples and plain instances:

    subject              own keys              own values
    -------------------  --------------------  ----------------------
    Mapping              subject.keys()        subject.values()
    list / tuple         0 .. len(subject)-1   the elements
    plain instance       attribute names       attribute values

Plain instances contribute their __dict__ and any assigned __slots__.
Strings, callables, None, numbers and booleans are not object-like.
"""

from __future__ import annotations

import inspect
import math
import re
from collections.abc import Iterable, Mapping
from numbers import Integral, Number
from typing import Any, List, Optional, Tuple

from .model import ValueKind, own_attributes


_WORD_SEPARATOR = re.compile(r"[\n ]")

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


# ---------- Guards ----------


def _own_entries(subject: Any) -> Optional[Tuple[List[Any], List[Any]]]:
    """Return (keys, values) of an object-like subject, or None."""
    if subject is None or isinstance(subject, (str, bytes, bytearray)):
        return None
    if isinstance(subject, Mapping):
        return list(subject.keys()), list(subject.values())
    if isinstance(subject, (list, tuple)):
        return list(range(len(subject))), list(subject)
    if callable(subject) or isinstance(subject, Number):
        return None
    attributes = own_attributes(subject)
    if attributes is None:
        return None
    return list(attributes.keys()), list(attributes.values())


def _as_list(items: Any) -> Optional[List[Any]]:
    if isinstance(items, Iterable):
        return list(items)
    return None


def _distinct(items: List[Any]) -> List[Any]:
    # Order-preserving and works for unhashable entries.
    unique: List[Any] = []
    for item in items:
        if not any(_equal(item, seen) for seen in unique):
            unique.append(item)
    return unique


def _equal(left: Any, right: Any) -> bool:
    """== that answers False instead of raising."""
    if left is right:
        return True
    try:
        return bool(left == right)
    except Exception:
        return False


def _is_count(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _strictly_equal(left: Any, right: Any) -> bool:
    """
    Identity, or value equality for scalars of the same family.

    Booleans only equal themselves, and NaN equals NaN.
    """
    if left is right:
        return True
    if isinstance(left, bool) or isinstance(right, bool):
        return False
    if isinstance(left, Number) and isinstance(right, Number):
        if _is_nan(left) and _is_nan(right):
            return True
        return _equal(left, right)
    if isinstance(left, str) and isinstance(right, str):
        return left == right
    if isinstance(left, bytes) and isinstance(right, bytes):
        return left == right
    return False


def _is_nan(value: Number) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _includes(haystack: List[Any], needle: Any) -> bool:
    return any(_strictly_equal(candidate, needle) for candidate in haystack)


# ---------- Object predicates ----------


def contains_keys(subject: Any, keys: Any) -> bool:
    """Every requested key (duplicates ignored) is an own key of subject."""
    entries = _own_entries(subject)
    requested = _as_list(keys)
    if entries is None or requested is None:
        return False
    own_keys = entries[0]
    return all(
        any(_equal(own_key, key) for own_key in own_keys)
        for key in _distinct(requested)
    )


def has_keys(subject: Any, keys: Any) -> bool:
    """
    Subject has exactly the requested keys.

    The key count is compared against the raw length of keys, so a
    request with duplicates never matches even though contains_keys
    would.
    """
    entries = _own_entries(subject)
    requested = _as_list(keys)
    if entries is None or requested is None:
        return False
    return len(entries[0]) == len(requested) and contains_keys(subject, requested)


def contains_values(subject: Any, values: Any) -> bool:
    """Every requested value appears among the own values of subject."""
    entries = _own_entries(subject)
    requested = _as_list(values)
    if entries is None or requested is None:
        return False
    own_values = entries[1]
    return all(_includes(own_values, value) for value in requested)


def has_values(subject: Any, values: Any) -> bool:
    """Subject has exactly as many values as requested, all of them present."""
    entries = _own_entries(subject)
    requested = _as_list(values)
    if entries is None or requested is None:
        return False
    return len(entries[1]) == len(requested) and contains_values(subject, requested)


def has_value_type(subject: Any, key: Any, kind: Any) -> bool:
    """
    The own property key exists and its value is of the given kind.

    kind may be a ValueKind, its string value, or one of str, int,
    float, list, tuple, a function type or collections.abc.Callable.
    Unknown kinds are never matched.
    """
    entries = _own_entries(subject)
    value_kind = ValueKind.lookup(kind)
    if entries is None or value_kind is None:
        return False
    for own_key, value in zip(*entries):
        if _equal(own_key, key):
            return value_kind.matches(value)
    return False


# ---------- Sequence / string predicates ----------


def has_length(subject: Any, length: Any) -> bool:
    """Subject is a list, tuple or str of the given length."""
    if not isinstance(subject, (str, list, tuple)) or not _is_count(length):
        return False
    return len(subject) == length


def has_words_count(subject: Any, count: Any) -> bool:
    """
    Subject is a str with the given number of words.

    Words are separated by spaces and newlines; runs of separators
    produce no empty words.
    """
    if not isinstance(subject, str) or not _is_count(count):
        return False
    words = [word for word in _WORD_SEPARATOR.split(subject) if word]
    return len(words) == count


# ---------- Callable predicates ----------


def has_params_count(subject: Any, count: Any) -> bool:
    """
    Subject is callable and declares count leading required positionals.

    Counting stops at the first parameter that has a default, is
    variadic, or is keyword-only.
    """
    if not callable(subject) or not _is_count(count):
        return False
    try:
        signature = inspect.signature(subject)
    except (TypeError, ValueError):
        # No introspectable signature (some builtins).
        return False
    return _leading_positionals(signature) == count


def _leading_positionals(signature: inspect.Signature) -> int:
    total = 0
    for parameter in signature.parameters.values():
        if parameter.kind not in _POSITIONAL_KINDS:
            break
        if parameter.default is not inspect.Parameter.empty:
            break
        total += 1
    return total


# ---------- Null ----------


def is_null(subject: Any) -> bool:
    """Subject is None."""
    return subject is None
