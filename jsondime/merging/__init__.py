# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .decisions import MergeDecision, MergeDecisionBuilder
from .generic import merge
from .strategies import MergeStrategy, merge_strategies

__all__ = [
    "merge",
    "MergeStrategy", "merge_strategies",
    "MergeDecision", "MergeDecisionBuilder",
    ]
