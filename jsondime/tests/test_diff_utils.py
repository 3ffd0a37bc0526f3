# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import datetime
import json

import pytest

from jsondime import diff, diff_stats, filter_diffs, build_diff_report, DiffType
from jsondime.diff_format import DiffEntry
from jsondime.diff_utils import find_next_diff, to_report_record
from jsondime.log import DiffFormatError
from jsondime.paths import Path


@pytest.fixture
def records():
    return diff(
        {"a": 1, "b": [1, 2], "c": "x", "d": True},
        {"a": 1, "b": [1, 3, 4], "d": True, "e": None},
    )


def test_diff_stats(records):
    assert diff_stats(records) == {
        "added": 2,
        "deleted": 1,
        "modified": 1,
        "unchanged": 3,
    }
    assert diff_stats([]) == {"added": 0, "deleted": 0, "modified": 0, "unchanged": 0}


def test_diff_stats_unknown_type():
    with pytest.raises(DiffFormatError):
        diff_stats([DiffEntry(path=Path(), type="renamed")])


def test_filter_diffs_default_drops_unchanged(records):
    changed = filter_diffs(records)
    assert [str(r.path) for r in changed] == ["$.b[1]", "$.b[2]", "$.c", "$.e"]
    assert all(r.type != DiffType.UNCHANGED for r in changed)


def test_filter_diffs_by_type(records):
    assert [str(r.path) for r in filter_diffs(records, [DiffType.ADDED])] == ["$.b[2]", "$.e"]
    assert [str(r.path) for r in filter_diffs(records, DiffType.DELETED)] == ["$.c"]
    assert len(filter_diffs(records, [DiffType.UNCHANGED, DiffType.MODIFIED])) == 4


def test_filter_diffs_does_not_mutate(records):
    before = list(records)
    result = filter_diffs(records)
    assert records == before
    assert result is not records
    assert filter_diffs(records, diff_types_all()) == records


def diff_types_all():
    return [DiffType.ADDED, DiffType.DELETED, DiffType.MODIFIED, DiffType.UNCHANGED]


def test_find_next_diff(records):
    nxt = find_next_diff(records)
    assert str(nxt.path) == "$.b[1]"
    nxt = find_next_diff(records, nxt.path)
    assert str(nxt.path) == "$.b[2]"
    # Wraps around at the end
    assert str(find_next_diff(records, "$.e").path) == "$.b[1]"
    # An unchanged or unknown path starts over
    assert str(find_next_diff(records, "$.a").path) == "$.b[1]"


def test_find_prev_diff(records):
    assert str(find_next_diff(records, direction="prev").path) == "$.e"
    assert str(find_next_diff(records, "$.c", "prev").path) == "$.b[2]"
    assert str(find_next_diff(records, "$.b[1]", "prev").path) == "$.e"


def test_find_next_diff_from_path_text_with_control_chars():
    d = diff({"a\n": 1, "b": 1}, {"a\n": 2, "b": 2})
    assert str(d[0].path) == '$["a\\n"]'
    assert find_next_diff(d, str(d[0].path)) is d[1]
    assert find_next_diff(d, str(d[1].path)) is d[0]


def test_find_next_diff_without_changes():
    assert find_next_diff(diff({"a": 1}, {"a": 1})) is None
    assert find_next_diff([]) is None


def test_find_next_diff_bad_direction(records):
    with pytest.raises(ValueError):
        find_next_diff(records, direction="up")


def test_to_report_record():
    r = diff({"a": [1]}, {"a": [2]})[0]
    assert to_report_record(r) == {
        "path": "$.a[0]", "type": "modified", "leftValue": 1, "rightValue": 2}
    r = diff({}, {"x.y": None})[0]
    assert to_report_record(r) == {
        "path": '$["x.y"]', "type": "added", "rightValue": None}


def test_build_diff_report(records, report_validator):
    ts = datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc)
    report = build_diff_report(records, "old.json", "new.json", timestamp=ts)
    report_validator.validate(report)
    assert report["timestamp"] == "2024-01-02T03:04:05+00:00"
    assert report["leftLabel"] == "old.json"
    assert report["rightLabel"] == "new.json"
    assert report["statistics"] == diff_stats(records)
    assert [d["path"] for d in report["differences"]] == ["$.b[1]", "$.b[2]", "$.c", "$.e"]
    assert report["differences"][2] == {"path": "$.c", "type": "deleted", "leftValue": "x"}
    # The report is plain json
    assert json.loads(json.dumps(report)) == report


def test_build_diff_report_default_timestamp(report_validator):
    report = build_diff_report(diff([1], [2]))
    report_validator.validate(report)
    ts = datetime.datetime.fromisoformat(report["timestamp"])
    assert ts.tzinfo is not None
    assert report["leftLabel"] == "left"
    assert report["rightLabel"] == "right"
