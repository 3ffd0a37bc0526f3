# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import (
    rec_added, rec_deleted, rec_modified, rec_unchanged, validate_diff)
from ..paths import Path, as_path
from ..values import (
    type_tag, values_equal, value_to_str, ARRAY, OBJECT, STRING)

from .config import DiffOptions

__all__ = ["diff"]


def compare_scalars(a, b, options):
    """Compare two leaf values under the given options.

    Also used for values of different types, which can only
    compare equal through their string forms with ignore_type.
    """
    if values_equal(a, b):
        return True
    if options.ignore_type:
        return (options.normalize_string(value_to_str(a)) ==
                options.normalize_string(value_to_str(b)))
    if type_tag(a) == STRING and type_tag(b) == STRING:
        return options.normalize_string(a) == options.normalize_string(b)
    return False


def diff(a, b, options=None, path=None):
    """Compute the per-location differences of two json-like values.

    Returns a flat list of diff records in depth-first order.
    Containers with matching types are not recorded themselves,
    their children are.
    """
    if options is None:
        options = DiffOptions()
    path = Path() if path is None else as_path(path)

    d = diff_values(a, b, path, options)

    # We can turn this off for performance after the library has been well tested:
    validate_diff(d)

    return d


def diff_values(a, b, path, options):
    # Null and absent values take priority over all other rules
    if a is None:
        if b is None:
            return [rec_unchanged(path, a, b)]
        return [rec_added(path, b)]
    if b is None:
        return [rec_deleted(path, a)]

    ta = type_tag(a)
    tb = type_tag(b)

    if ta != tb:
        # Type changes are always leaf records, never expanded
        if options.ignore_type and compare_scalars(a, b, options):
            return [rec_unchanged(path, a, b)]
        return [rec_modified(path, a, b)]

    if ta == ARRAY:
        return diff_arrays(a, b, path, options)
    if ta == OBJECT:
        return diff_objects(a, b, path, options)

    if compare_scalars(a, b, options):
        return [rec_unchanged(path, a, b)]
    return [rec_modified(path, a, b)]


def diff_arrays(a, b, path, options):
    """Compare two arrays position by position.

    Reordered items show up as modifications, items are never
    matched by content.
    """
    records = []
    for i in range(max(len(a), len(b))):
        subpath = path.child(i)
        if i >= len(a):
            records.append(rec_added(subpath, b[i]))
        elif i >= len(b):
            records.append(rec_deleted(subpath, a[i]))
        else:
            records.extend(diff_values(a[i], b[i], subpath, options))
    return records


def diff_objects(a, b, path, options):
    """Compare two objects key by key.

    Keys are visited in the order of a, followed by keys only
    found in b in their order. Ignored keys are skipped entirely.
    """
    keys = [k for k in a if not options.is_ignored_key(k)]
    keys.extend(k for k in b if k not in a and not options.is_ignored_key(k))

    records = []
    for key in keys:
        subpath = path.child(key)
        if key not in b:
            records.append(rec_deleted(subpath, a[key]))
        elif key not in a:
            records.append(rec_added(subpath, b[key]))
        else:
            records.extend(diff_values(a[key], b[key], subpath, options))
    return records
