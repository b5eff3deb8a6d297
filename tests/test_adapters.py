"""
Tests for the adapters: wrap(), check() and the per-category accessors

wrap() exposes every group whatever the value is; check() picks the
groups bound to the value's category.
"""

from fractions import Fraction

import pytest

from shapecheck import (
    DEFAULT_BINDINGS,
    Category,
    CategoryAlreadyBoundError,
    CategoryBindings,
    CheckerOptions,
    ValueKind,
    categorize,
    check,
    check_array,
    check_function,
    check_object,
    check_string,
    wrap,
)
from shapecheck.adapters import WRAP_GROUPS


ALL_METHODS = {
    "contains_keys": (["a"],),
    "has_keys": (["a"],),
    "contains_values": ([1],),
    "has_values": ([1],),
    "has_value_type": ("a", ValueKind.NUMBER),
    "has_length": (1,),
    "has_words_count": (1,),
    "has_params_count": (1,),
    "is_null": (),
}


class Record:
    def __init__(self):
        self.name = "r"


class SlottedRecord:
    __slots__ = ("name",)

    def __init__(self):
        self.name = "r"


class TestWrap:
    """The explicit factory."""

    def test_exposes_every_method(self):
        assert set(wrap(1).names) == set(ALL_METHODS)
        assert set(wrap(1).not_.names) == set(ALL_METHODS)
        assert wrap(1).groups == WRAP_GROUPS

    def test_number_is_all_false(self):
        """wrap(42): every predicate False, every negation True."""
        checker = wrap(42)
        for name, args in ALL_METHODS.items():
            assert getattr(checker, name)(*args) is False
            assert getattr(checker.not_, name)(*args) is True

    def test_null_isolation(self):
        """wrap(None) only answers True to is_null."""
        checker = wrap(None)
        assert checker.is_null() is True
        assert checker.not_.is_null() is False
        for name, args in ALL_METHODS.items():
            if name == "is_null":
                continue
            assert getattr(checker, name)(*args) is False
            assert getattr(checker.not_, name)(*args) is True

    def test_key_exactness(self):
        checker = wrap({"a": 1, "b": 2})
        assert checker.has_keys(["a", "b"]) is True
        assert checker.has_keys(["a"]) is False
        assert checker.contains_keys(["a"]) is True

    def test_containment_implication(self):
        """has_keys implies contains_keys, not conversely."""
        checker = wrap({"a": 1, "b": 2})
        for keys in (["a"], ["a", "b"], ["b", "a"], ["c"], [], ["a", "a"]):
            if checker.has_keys(keys):
                assert checker.contains_keys(keys)
        assert checker.contains_keys(["a"]) and not checker.has_keys(["a"])

    def test_duplicate_keys(self):
        """Raw request length is compared by has_keys."""
        checker = wrap({"a": 1})
        assert checker.has_keys(["a", "a"]) is False
        assert checker.contains_keys(["a", "a"]) is True

    def test_word_counting(self):
        assert wrap("a  b c").has_words_count(3) is True

    def test_params_with_default(self):
        def fn(a, b, c=1):
            return a + b + c

        assert wrap(fn).has_params_count(2) is True
        assert wrap(fn).has_params_count(3) is False

    def test_length_duality(self):
        assert wrap([1, 2, 3]).has_length(3) is True
        assert wrap([1, 2, 3]).not_.has_length(3) is False
        assert wrap("abc").has_length(3) is True
        assert wrap(5).has_length(3) is False
        assert wrap(5).not_.has_length(3) is True

    @pytest.mark.parametrize(
        "subject",
        [None, 0, "", "one two", [1], {"a": 1}, Record(), SlottedRecord(), len, (1, "a")],
        ids=repr,
    )
    def test_exact_negation(self, subject):
        checker = wrap(subject)
        for name, args in ALL_METHODS.items():
            positive = getattr(checker, name)(*args)
            assert positive is (not getattr(checker.not_, name)(*args))

    def test_slotted_instance(self):
        """Slotted attributes are own keys."""
        checker = check(SlottedRecord())
        assert checker.groups == ("object-methods",)
        assert checker.has_keys(["name"]) is True
        assert checker.not_.has_keys(["name"]) is False

    def test_options(self):
        checker = wrap({}, options=CheckerOptions(cache_negation=False))
        assert checker.not_ is not checker.not_


class TestCategorize:
    """Category classification used by check()."""

    @pytest.mark.parametrize(
        "value, category",
        [
            (None, Category.NULL),
            ("x", Category.STRING),
            ({"a": 1}, Category.OBJECT),
            (Record(), Category.OBJECT),
            (SlottedRecord(), Category.OBJECT),
            ([1], Category.ARRAY),
            ((1,), Category.ARRAY),
            (len, Category.FUNCTION),
            (lambda: None, Category.FUNCTION),
            (Record, Category.FUNCTION),
            (1, Category.OTHER),
            (1.5, Category.OTHER),
            (True, Category.OTHER),
            (b"x", Category.OTHER),
            (Fraction(1, 3), Category.OTHER),
            ({1, 2}, Category.OTHER),
        ],
    )
    def test_categories(self, value, category):
        assert categorize(value) is category


class TestCheck:
    """The per-category accessor."""

    def test_object(self):
        checker = check({"a": 1})
        assert checker.groups == ("object-methods",)
        assert checker.has_keys(["a"]) is True
        assert "has_length" not in checker

    def test_array(self):
        """Arrays get the object checks plus has_length."""
        checker = check([1, 2])
        assert checker.groups == ("object-methods", "array-extra-methods")
        assert checker.has_length(2) is True
        assert checker.contains_keys([0, 1]) is True
        assert checker.not_.has_length(2) is False

    def test_string(self):
        checker = check("hello world")
        assert checker.groups == ("string-methods",)
        assert checker.has_words_count(2) is True
        assert checker.not_.has_length(11) is False

    def test_function(self):
        checker = check(lambda a: a)
        assert checker.names == ("has_params_count",)
        assert checker.has_params_count(1) is True

    def test_null(self):
        assert check(None).is_null() is True

    def test_other(self):
        """Numbers get the object checks, which all answer False."""
        checker = check(3)
        assert checker.groups == ("object-methods",)
        assert checker.contains_keys([]) is False
        assert checker.not_.contains_keys([]) is True

    def test_fresh_checker_per_call(self):
        value = {"a": 1}
        assert check(value) is not check(value)

    def test_explicit_accessors(self):
        """Per-category accessors ignore the value's actual category."""
        assert check_object([1]).groups == ("object-methods",)
        assert check_array({}).has_length(0) is False
        assert check_string(5).has_words_count(0) is False
        assert check_string(5).not_.has_words_count(0) is True
        assert check_function("f").names == ("has_params_count",)


class TestCategoryBindings:
    """Category to group selection."""

    def test_default_bindings(self):
        assert set(DEFAULT_BINDINGS.categories()) == set(Category)

    def test_rebinding_fails(self):
        """Binding a category twice is a configuration error."""
        bindings = CategoryBindings()
        bindings.bind(Category.STRING, ["string-methods"])
        with pytest.raises(CategoryAlreadyBoundError) as exc_info:
            bindings.bind(Category.STRING, ["null-methods"])
        assert exc_info.value.category is Category.STRING
        assert "string-methods" in str(exc_info.value)

    def test_negative_defaults_to_positive(self):
        bindings = CategoryBindings()
        bindings.bind("array", ["object-methods"])
        binding = bindings.get(Category.ARRAY)
        assert binding.negative == binding.positive == ("object-methods",)
        assert bindings.is_bound(Category.ARRAY) is True
        assert bindings.is_bound(Category.NULL) is False

    def test_unbound_category(self):
        with pytest.raises(KeyError):
            CategoryBindings().get(Category.NULL)

    def test_custom_bindings_with_check(self):
        """check() honours caller-supplied bindings."""
        bindings = CategoryBindings()
        bindings.bind(Category.STRING, ["string-methods", "null-methods"], ["null-methods"])
        checker = check("x", bindings=bindings)
        assert checker.is_null() is False
        assert checker.not_.names == ("is_null",)
