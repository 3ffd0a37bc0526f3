# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import ConfigBackedParser, add_generic_args, add_transform_args
from .transforms import sort_object_keys, remove_empty_values, convert_key_case
from .utils import read_json, setup_std_streams


_description = """Show a json document in terminal.
Optionally normalize it first by sorting keys,
removing empty values or converting key case.
"""


def transform_document(doc, args):
    "Apply the transforms selected in args to doc, returning a new document."
    if args.remove_empty:
        doc = remove_empty_values(
            doc, remove_null=True, remove_empty_string=True,
            remove_empty_object=True, remove_empty_array=True)
    if args.key_case:
        doc = convert_key_case(doc, args.key_case)
    if args.sort_keys:
        doc = sort_object_keys(doc)
    return doc


def main_show(args):

    if len(args.document) == 1 and args.document[0] == "-":
        files = [sys.stdin]
    else:
        for fn in args.document:
            if not os.path.exists(fn):
                print("Missing file {}".format(fn))
                return 1
        files = args.document
        if not files:
            print("Missing filenames.")
            return 1

    for fn in files:
        doc = transform_document(read_json(fn), args)

        if len(args.document) > 1:
            # 'more' prints filenames with colons, should be good enough for us as well
            print(":"*14)
            print(fn)
            print(":"*14)
        print(json.dumps(doc, indent=2, separators=(",", ": "),
                         ensure_ascii=False))

    return 0


def _build_arg_parser(prog="jsondime-show"):
    """Creates an argument parser for the jsondime-show command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    parser.add_argument("document", nargs="*", help="json filename(s) or - to read from stdin")
    add_transform_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
