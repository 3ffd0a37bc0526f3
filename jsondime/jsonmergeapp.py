# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_merge_args, add_filename_args,
    )
from .log import logger, DiffFormatError
from .merging import merge
from .merging.decisions import as_decision_map
from .merging.strategies import MergeStrategy
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams

_description = ('Merge two json documents "left" and "right" into one. '
                'Without a strategy, objects are unioned, arrays concatenated '
                'and right wins conflicts.')


def main_merge(args):
    lfn = args.left
    rfn = args.right
    mfn = args.out
    strategy = args.merge_strategy

    for fn in (lfn, rfn, args.decisions):
        if fn and not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            logger.error("Cannot find file '%s'", fn)
            return 1

    if args.decisions and strategy != MergeStrategy.MANUAL:
        logger.warning("Decisions are only used by the manual strategy, "
                       "ignoring %s", args.decisions)

    l = read_json(lfn)
    r = read_json(rfn)

    decisions = None
    if args.decisions and strategy == MergeStrategy.MANUAL:
        try:
            decisions = as_decision_map(read_json(args.decisions))
        except DiffFormatError as e:
            logger.error("Invalid decisions in %s: %s", args.decisions, e)
            return 1

    merged = merge(l, r, strategy, decisions)

    if mfn:
        write_json(merged, mfn)
        logger.info("Merge result written to %s", mfn)
    else:
        # Write merged document to terminal
        print(json.dumps(merged, indent=2, separators=(",", ": "),
                         ensure_ascii=False))
    return 0


def _build_arg_parser(prog="jsondime-merge"):
    """Creates an argument parser for the jsondime-merge command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_merge_args(parser)
    add_filename_args(parser, ['left', 'right'])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the merged output is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_merge(arguments)


if __name__ == "__main__":
    sys.exit(main())
