# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_prettyprint_args, add_filename_args,
    ConfigBackedParser, diff_options_from_args, prettyprint_config_from_args,
    )
from .diff_utils import build_diff_report
from .diffing import diff
from .log import logger
from .patching import to_patch, patch_to_json
from .prettyprint import pretty_print_json_diff
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Compute the structural difference between two json documents."


def main_diff(args):
    """Main handler of diff CLI"""
    left = args.left
    right = args.right

    # Check that if args are filenames they either exist, or are
    # explicitly marked as missing (added/removed):
    for fn in (left, right):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            logger.error("Cannot find file '%s'", fn)
            return 1

    a = read_json(left)
    b = read_json(right)

    records = diff(a, b, diff_options_from_args(args))

    if args.report or args.patch:
        if args.report:
            report = build_diff_report(
                records,
                left_label=args.left_label or left,
                right_label=args.right_label or right)
            write_json(report, args.report)
            logger.info("Diff report written to %s", args.report)
        if args.patch:
            write_json(patch_to_json(to_patch(records)), args.patch)
            logger.info("Patch written to %s", args.patch)
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_json_diff(
            args.left_label or left, args.right_label or right, records, config)

    return 0


def _build_arg_parser(prog="jsondime-diff"):
    """Creates an argument parser for the jsondime-diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["left", "right"])

    parser.add_argument(
        '--show-unchanged',
        action='store_true',
        default=False,
        help="also print the values that are considered equal.")
    parser.add_argument(
        '--left-label',
        default=None,
        help="label of the left document in output. Defaults to its filename.")
    parser.add_argument(
        '--right-label',
        default=None,
        help="label of the right document in output. Defaults to its filename.")
    parser.add_argument(
        '--report',
        default=None,
        metavar='FILE',
        help="if supplied, a json diff report is written to this file "
             "instead of printing the diff.")
    parser.add_argument(
        '--patch',
        default=None,
        metavar='FILE',
        help="if supplied, the diff is written to this file as a list "
             "of add/remove/replace patch operations.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
