# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime

from .diff_format import DiffType, diff_types
from .log import DiffFormatError
from .paths import as_path


def diff_stats(records):
    "Count diff records by type."
    stats = {t: 0 for t in diff_types}
    for r in records:
        try:
            stats[r.type] += 1
        except KeyError:
            raise DiffFormatError("Unknown diff type '{}'.".format(r.type))
    return stats


def filter_diffs(records, types=None):
    """Return the records of the given types as a new list.

    Without types, all records except unchanged ones are returned.
    """
    if not types:
        return [r for r in records if r.type != DiffType.UNCHANGED]
    if isinstance(types, str):
        types = (types,)
    return [r for r in records if r.type in types]


def find_next_diff(records, current_path=None, direction="next"):
    """Find the change after (or before) the one at current_path.

    Only changed records are visited, wrapping around at both ends.
    Returns None if there are no changes.
    """
    if direction not in ("next", "prev"):
        raise ValueError("direction must be 'next' or 'prev', not %r" % (direction,))
    changed = filter_diffs(records)
    if not changed:
        return None
    current = None
    if current_path is not None:
        current_path = as_path(current_path)
        for i, r in enumerate(changed):
            if r.path == current_path:
                current = i
                break
    if direction == "next":
        i = 0 if current is None else current + 1
        return changed[i % len(changed)]
    else:
        i = -1 if current is None else current - 1
        return changed[i]


def to_report_record(r):
    "Convert a diff record to its report form with a canonical text path."
    out = {"path": str(r.path), "type": r.type}
    if "before" in r:
        out["leftValue"] = r.before
    if "after" in r:
        out["rightValue"] = r.after
    return out


def build_diff_report(records, left_label="left", right_label="right",
                      timestamp=None):
    """Build the exported diff report document.

    Only changed records are listed under differences, with paths in
    canonical form ($.a[0]) unlike the pointer paths of patches.
    """
    if timestamp is None:
        timestamp = datetime.datetime.now(datetime.timezone.utc)
    if isinstance(timestamp, datetime.datetime):
        timestamp = timestamp.isoformat()
    return {
        "timestamp": timestamp,
        "leftLabel": left_label,
        "rightLabel": right_label,
        "statistics": diff_stats(records),
        "differences": [to_report_record(r) for r in filter_diffs(records)],
    }
