# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, DiffOptions
from .diff_format import DiffType, PatchOp
from .diff_utils import diff_stats, filter_diffs, find_next_diff, build_diff_report
from .history import NavigationHistory
from .merging import merge, MergeStrategy
from .paths import Path
from .patching import to_patch, apply_patch


__all__ = [
    "__version__",
    "diff", "DiffOptions", "DiffType", "Path",
    "diff_stats", "filter_diffs", "find_next_diff", "build_diff_report",
    "NavigationHistory",
    "merge", "MergeStrategy",
    "to_patch", "apply_patch", "PatchOp",
    ]
