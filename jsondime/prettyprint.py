# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
from difflib import unified_diff
import hashlib
import json
import os
import re
import sys

import colorama

from .diff_format import DiffType, PatchOp
from .diff_utils import diff_stats
from .log import DiffFormatError
from .values import type_tag


# Indentation offset in pretty-print
IND = "  "

# Max line width used some placed in pretty-print
MAXWIDTH = 78


DIFF_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            show_unchanged=False,
            ):
        self.out = out
        self.use_color = use_color
        self.show_unchanged = show_unchanged

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def builtin_diff_render(a, b, config):
    gen = unified_diff(
        a.splitlines(False),
        b.splitlines(False),
        lineterm='')
    uni = []
    for line in gen:
        if line.startswith('+'):
            uni.append("%s%s%s" % (config.ADD, line[1:], config.RESET))
        elif line.startswith('-'):
            uni.append("%s%s%s" % (config.REMOVE, line[1:], config.RESET))
        elif line.startswith(' '):
            uni.append("%s%s%s" % (config.KEEP, line[1:], config.RESET))
        elif line.startswith('@'):
            uni.append(line)
        else:
            # Don't think this will happen?
            uni.append("%s%s%s" % (config.KEEP, line[1:], config.RESET))
    return '\n'.join(uni)


def diff_render(a, b, config=DefaultConfig):
    "Render a line based diff of two multiline strings, without file headers."
    diff = builtin_diff_render(a, b, config)
    return "".join(diff.splitlines(True)[2:]) + "\n"


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if isinstance(filename, str) and os.path.exists(filename):
        t = os.path.getmtime(filename)
        dt = datetime.datetime.fromtimestamp(t)
        return dt.isoformat(str(" "))
    else:
        return "(no timestamp)"


def hash_string(s):
    return hashlib.md5(s.encode("utf8")).hexdigest()

_base64 = re.compile(
    r'^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?$',
    re.MULTILINE | re.UNICODE)

def _trim_base64(s):
    """Trim and hash base64 strings"""
    if len(s) > 64 and _base64.match(s.replace('\n', '')):
        h = hash_string(s)
        s = '%s...<snip base64, md5=%s...>' % (s[:8], h[:16])
    return s


def format_value(v):
    "Format simple value for printing as json. Snips base64 strings."
    if isinstance(v, str):
        v = _trim_base64(v)
        if "\n" in v:
            # Keep multiline strings readable
            return v
    return json.dumps(v, ensure_ascii=False, default=str)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Calls out to generic formatters based on value
    type for dicts, lists, and multiline strings.
    Uses format_value for simple values.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        pretty_print_multiline(format_value(value), prefix, config)


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_diff_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if isinstance(v, dict) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, (), prefix+IND, config)
    elif isinstance(v, list) and v:
        pretty_print_key(k, prefix, config)
        pretty_print_list(v, prefix+IND, config)
    else:
        vstr = v if isinstance(v, str) else format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_multiline(text, prefix="", config=DefaultConfig):
    assert isinstance(text, str), 'expected string argument'

    # Preprend prefix to lines, letting lines keep their own newlines
    lines = text.splitlines(True)
    for line in lines:
        config.out.write(prefix + line)

    # If the final line doesn't have a newline,
    # make sure we still start a new line
    if not text.endswith("\n"):
        config.out.write("\n")


def pretty_print_list(li, prefix="", config=DefaultConfig):
    listr = json.dumps(li, ensure_ascii=False, default=str)
    if len(listr) < MAXWIDTH - len(prefix) and "\\n" not in listr:
        config.out.write("%s%s\n" % (prefix, listr))
    else:
        for k, v in enumerate(li):
            pretty_print_item("item[%d]" % k, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        pretty_print_item(k, v, prefix, config)


def pretty_print_diff_record(r, config=DefaultConfig):
    "Pretty-print a single diff record."
    path = str(r.path)
    t = r.type

    if t == DiffType.UNCHANGED:
        if not config.show_unchanged:
            return
        pretty_print_diff_action("unchanged", path, config)
        pretty_print_value(r.after, config.KEEP, config)

    elif t == DiffType.ADDED:
        pretty_print_diff_action("added", path, config)
        pretty_print_value(r.after, config.ADD, config)

    elif t == DiffType.DELETED:
        pretty_print_diff_action("deleted", path, config)
        pretty_print_value(r.before, config.REMOVE, config)

    elif t == DiffType.MODIFIED:
        aval = r.before
        bval = r.after
        ta = type_tag(aval)
        tb = type_tag(bval)
        if ta != tb:
            typechange = " (type changed from %s to %s)" % (ta, tb)
        else:
            typechange = ""
        pretty_print_diff_action("modified" + typechange, path, config)
        if (isinstance(aval, str) and isinstance(bval, str) and
                ("\n" in aval or "\n" in bval)):
            # Delegate multiline diff formatting
            config.out.write(diff_render(aval, bval, config))
        else:
            pretty_print_value(aval, config.REMOVE, config)
            pretty_print_value(bval, config.ADD, config)

    else:
        raise DiffFormatError("Unknown diff type {}".format(t))

    config.out.write(DIFF_ENTRY_END + config.RESET)


def pretty_print_diff(records, config=DefaultConfig):
    "Pretty-print a list of diff records in order."
    for r in records:
        pretty_print_diff_record(r, config)


def pretty_print_diff_stats(records, config=DefaultConfig):
    stats = diff_stats(records)
    config.out.write("%s%d added, %d deleted, %d modified, %d unchanged%s\n" % (
        config.INFO, stats[DiffType.ADDED], stats[DiffType.DELETED],
        stats[DiffType.MODIFIED], stats[DiffType.UNCHANGED], config.RESET))


json_diff_header = """\
jsondime diff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_json_diff(afn, bfn, records, config=DefaultConfig):
    """Pretty-print the diff of two json documents

    Parameters
    ----------

    afn: str
        Filename or label of the left document
    bfn: str
        Filename or label of the right document
    records: list
        The diff records from comparing the two documents
    config: PrettyPrintConfig
        Config object determining what gets printed and where
    """
    if any(r.type != DiffType.UNCHANGED for r in records) or config.show_unchanged:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(json_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_diff(records, config)
        pretty_print_diff_stats(records, config)


def pretty_print_patch(ops, config=DefaultConfig):
    "Pretty-print a list of patch entries."
    for e in ops:
        op = e["op"]
        if op == PatchOp.REMOVE:
            pretty_print_diff_action("remove", e["path"], config)
        elif op in (PatchOp.MOVE, PatchOp.COPY):
            pretty_print_diff_action("%s from %s to" % (op, e["from"]), e["path"], config)
        else:
            pretty_print_diff_action(op, e["path"], config)
            prefix = config.KEEP if op == PatchOp.TEST else config.ADD
            pretty_print_value(e["value"], prefix, config)
        config.out.write(config.RESET)
