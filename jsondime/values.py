# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""The JSON value model shared by diff, merge and patch.

Values are the plain Python objects produced by a JSON parser:
None, bool, int/float/Decimal, str, list (or tuple) and dict.
"""

from decimal import Decimal
import json
import math


NULL = "null"
BOOLEAN = "boolean"
NUMBER = "number"
STRING = "string"
ARRAY = "array"
OBJECT = "object"

container_tags = (ARRAY, OBJECT)


def type_tag(value):
    "Return the coarse type tag of a JSON value."
    if value is None:
        return NULL
    # bool must be checked before int, it is a subclass
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, (list, tuple)):
        return ARRAY
    if isinstance(value, dict):
        return OBJECT
    raise TypeError("Not a JSON value: {!r} of type {}".format(
        value, type(value).__name__))


def is_container(value):
    return type_tag(value) in container_tags


def values_equal(a, b):
    """Structural, type aware equality of two JSON values.

    Booleans never equal numbers, and numbers compare by value
    (1 == 1.0). Object key order is irrelevant.
    """
    ta = type_tag(a)
    tb = type_tag(b)
    if ta != tb:
        return False
    if ta == ARRAY:
        return len(a) == len(b) and all(
            values_equal(x, y) for x, y in zip(a, b))
    if ta == OBJECT:
        if set(a) != set(b):
            return False
        return all(values_equal(a[k], b[k]) for k in a)
    return a == b


def _number_to_str(value):
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "Infinity" if value > 0 else "-Infinity"
        if value == value.to_integral_value() and abs(value) < Decimal("1e21"):
            return str(int(value))
        return str(value.normalize())
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def value_to_str(value):
    """Canonical string form of a value, used for type-insensitive comparison.

    null, true and false render as in JSON. Integral numbers below 1e21
    render without a fractional part, so 1.0 and 1 both give "1".
    Other floats use the shortest round-trip representation.
    Containers render as compact JSON with sorted keys.
    """
    tag = type_tag(value)
    if tag == NULL:
        return "null"
    if tag == BOOLEAN:
        return "true" if value else "false"
    if tag == NUMBER:
        return _number_to_str(value)
    if tag == STRING:
        return value
    return json.dumps(value, sort_keys=True, separators=(",", ":"),
                      default=_json_default)


def _json_default(obj):
    if isinstance(obj, Decimal):
        return float(obj)
    raise TypeError("Not a JSON value: {!r}".format(obj))
