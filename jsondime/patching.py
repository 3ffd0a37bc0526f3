# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
from collections import defaultdict
import re

from . import log
from .diff_format import (
    DiffEntry, DiffType, PatchOp, op_add, op_remove, op_replace,
    validate_patch, validate_patch_entry)
from .log import DiffFormatError, InvalidPatchTarget, UnsupportedPatchOperation
from .paths import Path, pointer_to_tokens


__all__ = ["to_patch", "apply_patch", "patch_to_json", "patch_from_json"]


_array_index = re.compile(r"^(0|[1-9][0-9]*)$")


def _rebase_path(path, removed):
    """Shift array indices in path down by earlier removals in the same array.

    removed maps the path of an array to the original indices
    already removed from it by previous patch entries.
    """
    segments = list(path)
    for k, s in enumerate(path):
        if isinstance(s, int):
            shift = sum(1 for i in removed.get(path[:k], ()) if i < s)
            segments[k] = s - shift
    return Path(segments)


def to_patch(records):
    """Convert diff records to a list of add/remove/replace patch entries.

    Unchanged records are dropped, the order of records is kept.
    Array indices in the pointers account for the removals made
    by earlier entries, so the patch can be applied in sequence.
    A change to a top level "" key targets the root pointer '/'
    and replaces the whole document when applied.
    """
    ops = []
    removed = defaultdict(list)
    for r in records:
        t = r.type
        if t == DiffType.UNCHANGED:
            continue
        pointer = _rebase_path(r.path, removed).to_pointer()
        if t == DiffType.ADDED:
            ops.append(op_add(pointer, r.after))
        elif t == DiffType.DELETED:
            ops.append(op_remove(pointer))
            if r.path and isinstance(r.path[-1], int):
                removed[r.path[:-1]].append(r.path[-1])
        elif t == DiffType.MODIFIED:
            ops.append(op_replace(pointer, r.after))
        else:
            raise DiffFormatError("Unknown diff type '{}'.".format(t))
    return ops


def _array_slot(container, token, pointer):
    if token == "-":
        return len(container)
    if not _array_index.match(token):
        raise InvalidPatchTarget(
            "Invalid array index {!r} in {!r}".format(token, pointer))
    return int(token)


def _walk(obj, tokens, pointer, create):
    "Walk to the container holding the last token, optionally creating objects."
    for token in tokens:
        if isinstance(obj, dict):
            if token not in obj:
                if not create:
                    raise InvalidPatchTarget(
                        "Missing key {!r} in {!r}".format(token, pointer))
                obj[token] = {}
            obj = obj[token]
        elif isinstance(obj, list):
            index = _array_slot(obj, token, pointer)
            if index >= len(obj):
                raise InvalidPatchTarget(
                    "Index {} out of range in {!r}".format(index, pointer))
            obj = obj[index]
        else:
            raise InvalidPatchTarget(
                "Cannot walk into {} value at {!r} in {!r}".format(
                    type(obj).__name__, token, pointer))
    return obj


def patch_set(obj, tokens, value, pointer, create=True):
    "Set value at the location of tokens. Returns the (possibly new) root."
    if not tokens:
        return copy.deepcopy(value)
    parent = _walk(obj, tokens[:-1], pointer, create)
    key = tokens[-1]
    if isinstance(parent, dict):
        parent[key] = copy.deepcopy(value)
    elif isinstance(parent, list):
        index = _array_slot(parent, key, pointer)
        if index < len(parent):
            parent[index] = copy.deepcopy(value)
        elif index == len(parent):
            parent.append(copy.deepcopy(value))
        else:
            # Arrays are never extended with gaps
            raise InvalidPatchTarget(
                "Index {} past the end of array of length {} in {!r}".format(
                    index, len(parent), pointer))
    else:
        raise InvalidPatchTarget(
            "Cannot set {!r} on {} value in {!r}".format(
                key, type(parent).__name__, pointer))
    return obj


def patch_remove(obj, tokens, pointer):
    "Remove the value at the location of tokens. Returns the (possibly new) root."
    if not tokens:
        return None
    parent = _walk(obj, tokens[:-1], pointer, False)
    key = tokens[-1]
    if isinstance(parent, dict):
        if key in parent:
            del parent[key]
        else:
            log.debug("Nothing to remove at %r", pointer)
    elif isinstance(parent, list):
        index = _array_slot(parent, key, pointer)
        if index < len(parent):
            del parent[index]
        else:
            log.debug("Nothing to remove at %r", pointer)
    else:
        raise InvalidPatchTarget(
            "Cannot remove {!r} from {} value in {!r}".format(
                key, type(parent).__name__, pointer))
    return obj


def apply_patch_entry(obj, e):
    "Apply one patch entry to obj in place. Returns the (possibly new) root."
    validate_patch_entry(e)
    op = e["op"]
    pointer = e["path"]
    tokens = pointer_to_tokens(pointer)
    if op == PatchOp.ADD:
        return patch_set(obj, tokens, e["value"], pointer, create=True)
    elif op == PatchOp.REPLACE:
        return patch_set(obj, tokens, e["value"], pointer, create=False)
    elif op == PatchOp.REMOVE:
        return patch_remove(obj, tokens, pointer)
    raise UnsupportedPatchOperation(
        "Patch op '{}' is not supported.".format(op))


def apply_patch(obj, ops):
    """Produce a patched version of obj by applying patch entries in order.

    The input is never modified. Application stops at the first
    failing entry by raising a PatchError subclass.
    """
    result = copy.deepcopy(obj)
    for e in ops:
        result = apply_patch_entry(result, e)
    return result


def patch_to_json(ops):
    "Return patch entries as plain dicts ready for json.dump."
    return [dict(e) for e in ops]


def patch_from_json(data):
    "Build validated patch entries from a loaded patch document."
    validate_patch(data)
    return [DiffEntry(e) for e in data]
