# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import pytest

from jsondime import diff, diff_stats, filter_diffs, to_patch, DiffOptions, DiffType, Path
from jsondime.diff_format import validate_diff, DiffEntry
from jsondime.log import DiffFormatError

from .utils import summarize, only_unchanged


ADDED = DiffType.ADDED
DELETED = DiffType.DELETED
MODIFIED = DiffType.MODIFIED
UNCHANGED = DiffType.UNCHANGED


example_values = [
    None,
    True,
    3,
    2.5,
    "text",
    [],
    {},
    [1, "two", [3.0]],
    {"a": 1, "b": {"c": [True, None]}},
    {"deep": [{"x": [{"y": "z"}]}]},
]


@pytest.mark.parametrize("value", example_values)
def test_diff_identical_values_only_unchanged(value):
    d = diff(value, copy.deepcopy(value))
    assert only_unchanged(d)
    assert to_patch(d) == []


def test_diff_identical_one_record_per_leaf():
    d = diff({"a": 1, "b": [1, 2], "c": {"d": None}},
             {"a": 1, "b": [1, 2], "c": {"d": None}})
    assert summarize(d) == [
        (UNCHANGED, "$.a"),
        (UNCHANGED, "$.b[0]"),
        (UNCHANGED, "$.b[1]"),
        (UNCHANGED, "$.c.d"),
    ]


def test_diff_empty_containers_give_no_records():
    assert diff({}, {}) == []
    assert diff([], []) == []
    assert diff({"a": []}, {"a": []}) == []


def test_diff_scalars_at_root():
    assert summarize(diff(1, 1)) == [(UNCHANGED, "$")]
    d = diff(1, 2)
    assert summarize(d) == [(MODIFIED, "$")]
    assert d[0].before == 1
    assert d[0].after == 2


def test_diff_null_handling():
    d = diff(None, 5)
    assert summarize(d) == [(ADDED, "$")]
    assert d[0].after == 5
    assert "before" not in d[0]

    d = diff({"a": 1}, None)
    assert summarize(d) == [(DELETED, "$")]
    assert d[0].before == {"a": 1}
    assert "after" not in d[0]

    assert summarize(diff(None, None)) == [(UNCHANGED, "$")]

    # A null value on one side counts as absent
    d = diff({"a": None}, {"a": "x"})
    assert summarize(d) == [(ADDED, "$.a")]


def test_diff_type_mismatch_is_a_leaf():
    d = diff({"a": [1, 2]}, {"a": {"0": 1}})
    assert summarize(d) == [(MODIFIED, "$.a")]
    assert d[0].before == [1, 2]
    assert d[0].after == {"0": 1}

    assert summarize(diff(1, "1")) == [(MODIFIED, "$")]
    assert summarize(diff(True, 1)) == [(MODIFIED, "$")]


def test_diff_numbers_compare_by_value():
    assert summarize(diff(1, 1.0)) == [(UNCHANGED, "$")]


def test_diff_arrays_positional():
    d = diff([1, 2, 3], [1, 3])
    assert summarize(d) == [
        (UNCHANGED, "$[0]"),
        (MODIFIED, "$[1]"),
        (DELETED, "$[2]"),
    ]

    d = diff([1], [1, 2, 3])
    assert summarize(d) == [
        (UNCHANGED, "$[0]"),
        (ADDED, "$[1]"),
        (ADDED, "$[2]"),
    ]
    assert [r.after for r in d[1:]] == [2, 3]


def test_diff_objects_key_order():
    d = diff({"b": 1, "a": 2, "x": 0}, {"y": 5, "a": 3, "b": 1})
    assert summarize(d) == [
        (UNCHANGED, "$.b"),
        (MODIFIED, "$.a"),
        (DELETED, "$.x"),
        (ADDED, "$.y"),
    ]


def test_diff_nested_paths():
    a = {"users": [{"name": "x", "roles": ["r1"]}]}
    b = {"users": [{"name": "x", "roles": ["r1", "r2"]}]}
    d = diff(a, b)
    assert summarize(d) == [
        (UNCHANGED, "$.users[0].name"),
        (UNCHANGED, "$.users[0].roles[0]"),
        (ADDED, "$.users[0].roles[1]"),
    ]
    assert d[-1].path == Path(["users", 0, "roles", 1])


def test_diff_concrete_scenario():
    d = diff({"a": 1, "b": [1, 2]}, {"a": 1, "b": [1, 2, 3]})
    assert summarize(d) == [
        (UNCHANGED, "$.a"),
        (UNCHANGED, "$.b[0]"),
        (UNCHANGED, "$.b[1]"),
        (ADDED, "$.b[2]"),
    ]
    assert d[-1].after == 3
    assert to_patch(filter_diffs(d)) == [{"op": "add", "path": "/b/2", "value": 3}]


def test_diff_stats_sum_to_length():
    d = diff({"a": 1, "b": [1, 2], "c": "x"}, {"a": 2, "b": [1], "e": 1})
    stats = diff_stats(d)
    assert sum(stats.values()) == len(d)
    assert stats == {"added": 1, "deleted": 2, "modified": 1, "unchanged": 1}


def test_diff_ignore_keys_at_every_level():
    a = {"ts": 1, "x": {"ts": 2, "v": 1}, "l": [{"ts": 3}]}
    b = {"ts": 9, "x": {"ts": 8, "v": 1}, "l": [{"ts": 7}]}
    d = diff(a, b, DiffOptions(ignore_keys=["ts"]))
    assert summarize(d) == [(UNCHANGED, "$.x.v")]

    # Ignored keys present on one side only are skipped as well
    d = diff({"ts": 1}, {}, DiffOptions(ignore_keys="ts"))
    assert d == []


def test_diff_ignore_case():
    assert summarize(diff("Foo", "foo")) == [(MODIFIED, "$")]
    assert summarize(diff("Foo", "foo", DiffOptions(ignore_case=True))) == [(UNCHANGED, "$")]
    # casefold handles more than lower()
    assert summarize(diff("STRASSE", "straße", DiffOptions(ignore_case=True))) == [(UNCHANGED, "$")]
    # Records keep the original values
    d = diff({"k": "Foo"}, {"k": "foo"}, DiffOptions(ignore_case=True))
    assert d[0].before == "Foo"
    assert d[0].after == "foo"


def test_diff_ignore_whitespace():
    opts = DiffOptions(ignore_whitespace=True)
    assert summarize(diff("  a   b\n", "a b", opts)) == [(UNCHANGED, "$")]
    assert summarize(diff("ab", "a b", opts)) == [(MODIFIED, "$")]
    assert summarize(diff("a b", "a  b")) == [(MODIFIED, "$")]


def test_diff_ignore_type():
    opts = DiffOptions(ignore_type=True)
    assert summarize(diff(1, "1", opts)) == [(UNCHANGED, "$")]
    assert summarize(diff(1.0, "1", opts)) == [(UNCHANGED, "$")]
    assert summarize(diff(True, "true", opts)) == [(UNCHANGED, "$")]
    assert summarize(diff(True, 1, opts)) == [(MODIFIED, "$")]
    assert summarize(diff("TRUE", True, opts)) == [(MODIFIED, "$")]
    opts = DiffOptions(ignore_type=True, ignore_case=True)
    assert summarize(diff("TRUE", True, opts)) == [(UNCHANGED, "$")]


def test_diff_ignore_type_containers_never_expanded():
    opts = DiffOptions(ignore_type=True)
    assert summarize(diff([1], "[1]", opts)) == [(UNCHANGED, "$")]
    assert summarize(diff([1], {"0": 1}, opts)) == [(MODIFIED, "$")]


def test_diff_ignore_key_order_has_no_effect():
    a = {"a": 1, "b": 2}
    b = {"b": 2, "a": 1}
    assert diff(a, b, DiffOptions(ignore_key_order=False)) == diff(a, b)
    assert DiffOptions(ignore_key_order=False) == DiffOptions()


def test_diff_with_base_path():
    d = diff({"x": 1}, {"x": 2}, path="$.root[3]")
    assert summarize(d) == [(MODIFIED, "$.root[3].x")]


def test_diff_does_not_modify_input():
    a = {"a": [1, 2], "b": {"c": 1}}
    b = {"a": [2], "b": {"d": 1}}
    a_copy = copy.deepcopy(a)
    b_copy = copy.deepcopy(b)
    diff(a, b)
    assert a == a_copy
    assert b == b_copy


def test_diff_records_are_valid():
    d = diff({"a": 1}, {"b": 1})
    validate_diff(d)
    assert all(isinstance(r, DiffEntry) for r in d)


def test_validate_diff_rejects_bad_records():
    with pytest.raises(DiffFormatError):
        validate_diff({})
    with pytest.raises(DiffFormatError):
        validate_diff([{"path": Path(), "type": "added", "after": 1}])
    with pytest.raises(DiffFormatError):
        validate_diff([DiffEntry(path="$", type="added", after=1)])
    with pytest.raises(DiffFormatError):
        validate_diff([DiffEntry(path=Path(), type="added", before=1, after=1)])
    with pytest.raises(DiffFormatError):
        validate_diff([DiffEntry(path=Path(), type="moved", after=1)])


def test_diff_options_repr_and_copy():
    opts = DiffOptions(ignore_case=True, ignore_keys=["a"])
    assert copy.copy(opts) == opts
    assert copy.copy(opts) is not opts
    assert "ignore_case=True" in repr(opts)
    assert opts.is_ignored_key("a")
    assert not opts.is_ignored_key("b")
