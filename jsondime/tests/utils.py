# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jsondime import diff, to_patch, apply_patch, DiffType
from jsondime.diff_format import validate_diff, is_valid_patch


def check_diff_and_patch(a, b):
    "Check that apply_patch(a, to_patch(diff(a,b))) reproduces b."
    d = diff(a, b)
    validate_diff(d)
    ops = to_patch(d)
    assert is_valid_patch(ops)
    assert apply_patch(a, ops) == b


def check_symmetric_diff_and_patch(a, b):
    "Check that diff and patch reproduce b from a and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def summarize(records):
    "Reduce records to (type, canonical path) pairs for compact asserts."
    return [(r.type, str(r.path)) for r in records]


def only_unchanged(records):
    return all(r.type == DiffType.UNCHANGED for r in records)
