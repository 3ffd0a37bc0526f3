# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DiffFormatError
from .paths import Path, pointer_to_tokens


# Sentinel to allow None as a value
Missing = object()


class DiffEntry(dict):
    """For internal usage in jsondime library.

    Minimal class providing attribute access to dict keys.
    Both diff records and patch entries are DiffEntry instances, so
    they serialize directly with json.dump once paths are strings.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class DiffType:
    "Collection of valid values for the type field in diff records."
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    UNCHANGED = "unchanged"


diff_types = (
    DiffType.ADDED,
    DiffType.DELETED,
    DiffType.MODIFIED,
    DiffType.UNCHANGED,
    )


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"


patch_ops = (
    PatchOp.ADD,
    PatchOp.REMOVE,
    PatchOp.REPLACE,
    PatchOp.MOVE,
    PatchOp.COPY,
    PatchOp.TEST,
    )


# Diff records

def rec_added(path, after):
    "Create a diff record for a value only present on the right side."
    return DiffEntry(path=path, type=DiffType.ADDED, after=after)

def rec_deleted(path, before):
    "Create a diff record for a value only present on the left side."
    return DiffEntry(path=path, type=DiffType.DELETED, before=before)

def rec_modified(path, before, after):
    "Create a diff record for a value that differs between the sides."
    return DiffEntry(path=path, type=DiffType.MODIFIED, before=before, after=after)

def rec_unchanged(path, before, after):
    "Create a diff record for a value considered equal on both sides."
    return DiffEntry(path=path, type=DiffType.UNCHANGED, before=before, after=after)


# Patch entries

def op_add(path, value):
    "Create a patch entry to set value at pointer path."
    return DiffEntry(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create a patch entry to remove the value at pointer path."
    return DiffEntry(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create a patch entry to replace the value at pointer path."
    return DiffEntry(op=PatchOp.REPLACE, path=path, value=value)

def op_move(from_path, path):
    return DiffEntry({"op": PatchOp.MOVE, "from": from_path, "path": path})

def op_copy(from_path, path):
    return DiffEntry({"op": PatchOp.COPY, "from": from_path, "path": path})

def op_test(path, value):
    return DiffEntry(op=PatchOp.TEST, path=path, value=value)


def validate_diff(records):
    """Check that records is a list of well formed diff records.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(records, list):
        raise DiffFormatError("Diff must be a list.")
    for r in records:
        validate_diff_record(r)


def validate_diff_record(r):
    if not isinstance(r, DiffEntry):
        raise DiffFormatError("Diff record '{}' is not a diff type.".format(r))
    if not isinstance(r.get("path"), Path):
        raise DiffFormatError("Diff record path must be a Path, not '{}'.".format(
            r.get("path")))
    t = r.get("type")
    if t == DiffType.ADDED:
        if "before" in r or "after" not in r:
            raise DiffFormatError("Added record needs only an after value.")
    elif t == DiffType.DELETED:
        if "after" in r or "before" not in r:
            raise DiffFormatError("Deleted record needs only a before value.")
    elif t in (DiffType.MODIFIED, DiffType.UNCHANGED):
        if "before" not in r or "after" not in r:
            raise DiffFormatError("{} record needs both values.".format(t))
    else:
        raise DiffFormatError("Unknown diff type '{}'.".format(t))


def is_valid_patch(ops):
    """Checks whether a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(ops)
    except DiffFormatError:
        return False
    return True


def validate_patch(ops):
    """Check that ops is a list of well formed patch entries.

    Raises a DiffFormatError (or its MalformedPath subclass) if not.
    """
    if not isinstance(ops, list):
        raise DiffFormatError("Patch must be a list.")
    for e in ops:
        validate_patch_entry(e)


def validate_patch_entry(e):
    if not isinstance(e, dict):
        raise DiffFormatError("Patch entry '{}' is not an object.".format(e))
    op = e.get("op")
    if op not in patch_ops:
        raise DiffFormatError("Unknown patch op '{}'.".format(op))
    # Raises MalformedPath
    pointer_to_tokens(e.get("path"))
    if op in (PatchOp.ADD, PatchOp.REPLACE, PatchOp.TEST):
        if "value" not in e:
            raise DiffFormatError("Patch op '{}' needs a value.".format(op))
    elif op in (PatchOp.MOVE, PatchOp.COPY):
        if "from" not in e:
            raise DiffFormatError("Patch op '{}' needs a from path.".format(op))
        pointer_to_tokens(e["from"])
