# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from decimal import Decimal

import pytest

from jsondime.values import (
    type_tag, is_container, values_equal, value_to_str,
    NULL, BOOLEAN, NUMBER, STRING, ARRAY, OBJECT,
)


def test_type_tag():
    assert type_tag(None) == NULL
    assert type_tag(True) == BOOLEAN
    assert type_tag(False) == BOOLEAN
    assert type_tag(0) == NUMBER
    assert type_tag(1.5) == NUMBER
    assert type_tag(Decimal("2.5")) == NUMBER
    assert type_tag("") == STRING
    assert type_tag([]) == ARRAY
    assert type_tag(()) == ARRAY
    assert type_tag({}) == OBJECT


def test_type_tag_rejects_non_json():
    with pytest.raises(TypeError):
        type_tag(object())
    with pytest.raises(TypeError):
        type_tag({1, 2})


def test_is_container():
    assert is_container([1])
    assert is_container({})
    assert not is_container("abc")
    assert not is_container(None)


def test_values_equal_is_type_aware():
    assert values_equal(1, 1.0)
    assert not values_equal(True, 1)
    assert not values_equal(False, 0)
    assert not values_equal(None, False)
    assert not values_equal("1", 1)


def test_values_equal_structural():
    assert values_equal([1, [2, {"a": 3}]], [1, [2, {"a": 3}]])
    assert not values_equal([1, 2], [2, 1])
    assert not values_equal([1], [1, 1])
    # Key order is irrelevant
    assert values_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
    assert not values_equal({"a": 1}, {"a": 1, "b": None})
    assert not values_equal({"a": [True]}, {"a": [1]})


def test_value_to_str_scalars():
    assert value_to_str(None) == "null"
    assert value_to_str(True) == "true"
    assert value_to_str(False) == "false"
    assert value_to_str("text") == "text"


def test_value_to_str_numbers():
    assert value_to_str(1) == "1"
    assert value_to_str(1.0) == "1"
    assert value_to_str(-3.0) == "-3"
    assert value_to_str(0.5) == "0.5"
    assert value_to_str(0.1) == "0.1"
    assert value_to_str(float("inf")) == "Infinity"
    assert value_to_str(float("-inf")) == "-Infinity"
    assert value_to_str(float("nan")) == "NaN"
    assert value_to_str(Decimal("2.50")) == "2.5"
    assert value_to_str(Decimal("4.000")) == "4"


def test_value_to_str_containers():
    assert value_to_str([1, "a", None]) == '[1,"a",null]'
    assert value_to_str({"b": 1, "a": [True]}) == '{"a":[true],"b":1}'
    assert value_to_str({"b": 1, "a": 2}) == value_to_str({"a": 2, "b": 1})
