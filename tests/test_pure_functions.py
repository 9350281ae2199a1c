"""
Tests for optional-value helpers, status-class predicates and assertions.
"""

import pytest

from tea_util.core.optional import (
    default_string,
    default_number,
    empty,
    equal_string,
    equal_number,
    is_unset,
)
from tea_util.core.status import is_2xx, is_3xx, is_4xx, is_5xx
from tea_util.core.assertions import (
    assert_as_map,
    assert_as_number,
    assert_as_boolean,
    assert_as_string,
)
from tea_util.exceptions import TypeAssertionError


class TestOptionalHelpers:
    @pytest.mark.parametrize("real,default,expected", [
        ("value", "fallback", "value"),
        ("", "fallback", ""),
        (None, "fallback", "fallback"),
        (None, None, None),
    ])
    def test_default_string(self, real, default, expected):
        assert default_string(real, default) == expected

    @pytest.mark.parametrize("real,default,expected", [
        (5, 10, 5),
        (0, 10, 0),
        (None, 10, 10),
        (1.5, 2, 1.5),
    ])
    def test_default_number(self, real, default, expected):
        assert default_number(real, default) == expected

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        ("", True),
        (" ", False),
        ("tea", False),
    ])
    def test_empty(self, value, expected):
        assert empty(value) is expected

    @pytest.mark.parametrize("first,second,expected", [
        ("a", "a", True),
        ("a", "b", False),
        (None, "", True),
        (None, None, True),
        (None, "a", False),
    ])
    def test_equal_string(self, first, second, expected):
        assert equal_string(first, second) is expected

    @pytest.mark.parametrize("first,second,expected", [
        (1, 1, True),
        (1, 2, False),
        (None, 0, True),
        (None, None, True),
        (None, 3, False),
    ])
    def test_equal_number(self, first, second, expected):
        assert equal_number(first, second) is expected

    @pytest.mark.parametrize("value,expected", [
        (None, True),
        (0, False),
        ("", False),
        (False, False),
        ({}, False),
    ])
    def test_is_unset(self, value, expected):
        assert is_unset(value) is expected


class TestStatusClasses:
    PREDICATES = (is_2xx, is_3xx, is_4xx, is_5xx)

    @pytest.mark.parametrize("code,expected_index", [
        (200, 0),
        (204, 0),
        (299, 0),
        (300, 1),
        (304, 1),
        (400, 2),
        (404, 2),
        (499, 2),
        (500, 3),
        (503, 3),
        (599, 3),
    ])
    def test_single_class(self, code, expected_index):
        results = [predicate(code) for predicate in self.PREDICATES]
        assert results[expected_index] is True
        assert results.count(True) == 1

    @pytest.mark.parametrize("code", [None, 0, 100, 199, 600, -200])
    def test_outside_known_classes(self, code):
        assert not any(predicate(code) for predicate in self.PREDICATES)

    def test_predicates_partition_codes(self):
        for code in range(0, 700):
            assert sum(predicate(code) for predicate in self.PREDICATES) <= 1


class TestAssertions:
    def test_assert_as_map(self):
        value = {"a": 1}
        assert assert_as_map(value) is value

    @pytest.mark.parametrize("value", [[1], "map", None, 1])
    def test_assert_as_map_rejects(self, value):
        with pytest.raises(TypeAssertionError) as exc_info:
            assert_as_map(value)
        assert "is not a map" in str(exc_info.value)

    @pytest.mark.parametrize("value", [0, -3, 2**40])
    def test_assert_as_number(self, value):
        assert assert_as_number(value) == value

    @pytest.mark.parametrize("value", [True, False, 1.0, "1", None])
    def test_assert_as_number_rejects(self, value):
        with pytest.raises(TypeAssertionError):
            assert_as_number(value)

    @pytest.mark.parametrize("value", [True, False])
    def test_assert_as_boolean(self, value):
        assert assert_as_boolean(value) is value

    @pytest.mark.parametrize("value", [0, 1, "true", None])
    def test_assert_as_boolean_rejects(self, value):
        with pytest.raises(TypeAssertionError):
            assert_as_boolean(value)

    def test_assert_as_string(self):
        assert assert_as_string("") == ""

    @pytest.mark.parametrize("value", [b"bytes", 1, None])
    def test_assert_as_string_rejects(self, value):
        with pytest.raises(TypeAssertionError) as exc_info:
            assert_as_string(value)
        assert exc_info.value.details["expected"] == "string"
        assert exc_info.value.details["actual"] == type(value).__name__

    def test_assertion_error_is_type_error(self):
        with pytest.raises(TypeError):
            assert_as_string(42)
