# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .diffing import DiffOptions
from .log import init_logging, set_jsondime_log_level
from .merging.strategies import merge_strategies
from .transforms import key_cases


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsondime_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_jsondime_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        elif v is None:
            output[k] = '<unset>'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jsondime commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that compare documents.
    """
    comparison = parser.add_argument_group(
        title='comparison',
        description='Set how values are compared.')
    comparison.add_argument(
        '--ignore-case',
        action='store_true', default=False,
        help="compare strings without regard to case.")
    comparison.add_argument(
        '--ignore-type',
        action='store_true', default=False,
        help="compare values of different types by their string forms, "
             "so that 1 and \"1\" are considered equal.")
    comparison.add_argument(
        '--ignore-whitespace',
        action='store_true', default=False,
        help="collapse and strip whitespace in strings before comparing.")
    comparison.add_argument(
        '-k', '--ignore-key',
        dest='ignore_keys',
        action='append', default=[],
        metavar='KEY',
        help="leave object key KEY out of the comparison at every level. "
             "Can be given multiple times.")


def add_merge_args(parser):
    """Adds a set of arguments for commands that perform merges.
    """
    parser.add_argument(
        '-s', '--strategy', '--merge-strategy',
        dest='merge_strategy',
        default="smart-merge",
        choices=merge_strategies,
        help="the merge strategy to use.")
    parser.add_argument(
        '--decisions',
        default=None,
        help="a json file with a list of {path, strategy, value} decisions, "
             "used by the manual strategy.")


def add_transform_args(parser):
    """Adds arguments for normalizing a document before use.
    """
    parser.add_argument(
        '--sort-keys',
        action='store_true', default=False,
        help="sort object keys recursively.")
    parser.add_argument(
        '--remove-empty',
        action='store_true', default=False,
        help="remove null values, empty strings, empty objects and empty arrays.")
    parser.add_argument(
        '--key-case',
        default=None,
        choices=key_cases,
        help="convert object keys to the given case.")


filename_help = {
    "left":   "The left (original) json filename.",
    "right":  "The right (modified) json filename.",
    "base":   "The json filename to patch.",
    "patch":  "The patch filename, output from jsondime diff --patch.",
    "document": "The json filename.",
    }


def add_filename_args(parser, names):
    """Add the left, right, base, and patch positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def diff_options_from_args(arguments):
    return DiffOptions(
        ignore_case=getattr(arguments, 'ignore_case', False),
        ignore_type=getattr(arguments, 'ignore_type', False),
        ignore_whitespace=getattr(arguments, 'ignore_whitespace', False),
        ignore_keys=getattr(arguments, 'ignore_keys', None),
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        show_unchanged=getattr(arguments, 'show_unchanged', False),
        **kwargs
    )
