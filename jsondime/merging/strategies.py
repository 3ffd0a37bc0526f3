# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


class MergeStrategy:
    "Collection of valid merge strategy names."
    USE_LEFT = "use-left"
    USE_RIGHT = "use-right"
    SMART_MERGE = "smart-merge"
    MANUAL = "manual"


merge_strategies = (
    MergeStrategy.USE_LEFT,
    MergeStrategy.USE_RIGHT,
    MergeStrategy.SMART_MERGE,
    MergeStrategy.MANUAL,
    )


def validate_strategy(strategy):
    if strategy not in merge_strategies:
        raise ValueError("Unknown merge strategy %r, expected one of %r" % (
            strategy, merge_strategies))
    return strategy
