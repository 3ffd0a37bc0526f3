# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .. import log
from ..paths import Path
from ..values import type_tag, values_equal, ARRAY, OBJECT
from .decisions import as_decision_map
from .strategies import MergeStrategy, validate_strategy


__all__ = ["merge", "smart_merge", "manual_merge"]


def merge(left, right, strategy=MergeStrategy.SMART_MERGE, decisions=None):
    """Merge two json-like values into one with the given strategy.

    use-left and use-right return one side as is. smart-merge unions
    objects, concatenates arrays without repeating left items, and
    lets right win every other conflict. manual works like smart-merge
    on objects and per array index, but first consults decisions,
    a map from Path (or canonical path string) to merge decision.

    The result may share unchanged subtrees with the inputs.
    """
    validate_strategy(strategy)
    if strategy == MergeStrategy.USE_LEFT:
        return left
    elif strategy == MergeStrategy.USE_RIGHT:
        return right
    elif strategy == MergeStrategy.SMART_MERGE:
        return smart_merge(left, right)
    else:
        decisions = as_decision_map(decisions)
        log.debug("Manual merge with %d decisions", len(decisions))
        return manual_merge(left, right, decisions)


def smart_merge(left, right):
    "Merge preferring right on conflicts, see merge."
    if left is None:
        return right
    if right is None:
        return left

    tl = type_tag(left)
    tr = type_tag(right)
    if tl != tr or tl not in (ARRAY, OBJECT):
        # Type conflicts and scalars: right wins
        return right

    if tl == ARRAY:
        # Only items already in left are skipped, duplicates within right are kept
        extra = [x for x in right if not any(values_equal(x, y) for y in left)]
        return list(left) + extra

    result = dict(left)
    for key, value in right.items():
        if key in left:
            result[key] = smart_merge(left[key], value)
        else:
            result[key] = value
    return result


def manual_merge(left, right, decisions, path=None):
    "Merge following per-path decisions, see merge."
    if path is None:
        path = Path()

    decision = decisions.get(path)
    if decision is not None:
        if decision.strategy == MergeStrategy.USE_LEFT:
            return left
        elif decision.strategy == MergeStrategy.USE_RIGHT:
            return right
        elif decision.has_value():
            return decision.value

    if left is None:
        return right
    if right is None:
        return left

    tl = type_tag(left)
    tr = type_tag(right)
    if tl != tr or tl not in (ARRAY, OBJECT):
        return right

    if tl == ARRAY:
        result = []
        for i in range(max(len(left), len(right))):
            if i >= len(left):
                result.append(right[i])
            elif i >= len(right):
                result.append(left[i])
            else:
                result.append(manual_merge(left[i], right[i], decisions, path.child(i)))
        return result

    result = {}
    keys = list(left)
    keys.extend(k for k in right if k not in left)
    for key in keys:
        if key not in left:
            result[key] = right[key]
        elif key not in right:
            result[key] = left[key]
        else:
            result[key] = manual_merge(left[key], right[key], decisions, path.child(key))
    return result
