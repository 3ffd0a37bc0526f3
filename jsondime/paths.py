# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Addressing of locations inside a JSON value.

A Path is a tuple of segments, str for object fields and int for
array indices. It has two textual forms:

 - the canonical form used in diff reports: ``$.a.b[2].c``
 - the pointer form used in patches: ``/a/b/2/c``
"""

import json
import re

from .log import MalformedPath


ROOT = "$"

_simple_name = re.compile(r"[^.\[\]\s\"']+")

_token = re.compile(r"""
    \.(?P<name>[^.\[\]\s"']+)
  | \[(?P<index>0|[1-9][0-9]*)\]
  | \[(?P<quoted>"(?:[^"\\]|\\.)*")\]
""", re.VERBOSE)

_bad_escape = re.compile(r"~(?![01])")


def _check_segment(s):
    if isinstance(s, bool) or not isinstance(s, (int, str)):
        raise TypeError("Path segments must be str or int, got {!r}".format(s))
    if isinstance(s, int) and s < 0:
        raise ValueError("Path indices must be non-negative, got {}".format(s))


class Path(tuple):
    """Immutable path from the root of a value to one location in it."""

    __slots__ = ()

    def __new__(cls, segments=()):
        if isinstance(segments, str):
            raise TypeError("Use Path.parse() to build a Path from text")
        segments = tuple(segments)
        for s in segments:
            _check_segment(s)
        return super(Path, cls).__new__(cls, segments)

    @classmethod
    def parse(cls, text):
        """Parse the canonical form, e.g. '$.a[0]["b.c"]'."""
        if not isinstance(text, str) or not text.startswith(ROOT):
            raise MalformedPath("Path must start with {!r}: {!r}".format(ROOT, text))
        segments = []
        pos = len(ROOT)
        while pos < len(text):
            m = _token.match(text, pos)
            if m is None:
                raise MalformedPath(
                    "Cannot tokenize path {!r} at offset {}".format(text, pos))
            if m.group("name") is not None:
                segments.append(m.group("name"))
            elif m.group("index") is not None:
                segments.append(int(m.group("index")))
            else:
                try:
                    segments.append(json.loads(m.group("quoted")))
                except ValueError:
                    raise MalformedPath(
                        "Invalid quoted field in path {!r}".format(text))
            pos = m.end()
        return cls(segments)

    def child(self, key):
        "Return the path extended by one field name or index."
        return Path(tuple(self) + (key,))

    @property
    def parent(self):
        if not self:
            return None
        return Path(self[:-1])

    def to_pointer(self):
        """Return the pointer form of this path, '/' for the root.

        A top level empty field name also gives '/', so it cannot be
        told apart from the root.
        """
        if not self:
            return "/"
        return "".join("/" + escape_pointer_segment(s) for s in self)

    def __str__(self):
        parts = [ROOT]
        for s in self:
            if isinstance(s, int):
                parts.append("[%d]" % s)
            elif _simple_name.fullmatch(s):
                parts.append("." + s)
            else:
                parts.append("[%s]" % json.dumps(s))
        return "".join(parts)

    def __repr__(self):
        return "Path(%r)" % str(self)


def as_path(path):
    "Coerce a Path, canonical string or sequence of segments to a Path."
    if isinstance(path, Path):
        return path
    if isinstance(path, str):
        return Path.parse(path)
    return Path(path)


def escape_pointer_segment(segment):
    return str(segment).replace("~", "~0").replace("/", "~1")


def unescape_pointer_segment(segment):
    if _bad_escape.search(segment):
        raise MalformedPath("Invalid escape in pointer segment {!r}".format(segment))
    return segment.replace("~1", "/").replace("~0", "~")


def pointer_to_tokens(pointer):
    """Split a pointer into unescaped string tokens.

    Both '/' and '' address the root and give no tokens.
    """
    if not isinstance(pointer, str):
        raise MalformedPath("Pointer must be a string, got {!r}".format(pointer))
    if pointer in ("", "/"):
        return []
    if not pointer.startswith("/"):
        raise MalformedPath("Pointer must start with '/': {!r}".format(pointer))
    return [unescape_pointer_segment(s) for s in pointer[1:].split("/")]
