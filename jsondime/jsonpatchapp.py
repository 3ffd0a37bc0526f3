# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args,
    add_prettyprint_args, prettyprint_config_from_args,
    )
from .log import logger, DiffFormatError, PatchError
from .patching import apply_patch, patch_from_json
from .prettyprint import pretty_print_patch
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Apply a patch from jsondime diff to a json document."


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.output

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            logger.error("Cannot find file '%s'", fn)
            return 1

    before = read_json(base_filename)
    ops = read_json(patch_filename)
    if ops is None:
        # An absent patch changes nothing
        ops = []

    try:
        ops = patch_from_json(ops)
        after = apply_patch(before, ops)
    except (PatchError, DiffFormatError) as e:
        logger.error("Failed to apply patch %s: %s", patch_filename, e)
        return 1

    if args.dry_run:
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_patch(ops, config)
        return 0

    if output_filename:
        write_json(after, output_filename)
        logger.info("Patched document written to %s", output_filename)
    else:
        print(json.dumps(after, indent=2, separators=(",", ": "),
                         ensure_ascii=False))

    return 0


def _build_arg_parser(prog="jsondime-patch"):
    """Creates an argument parser for the jsondime-patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["base", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    parser.add_argument(
        '-n', '--dry-run',
        action="store_true",
        default=False,
        help="check that the patch applies and print its entries "
             "instead of the patched document.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
