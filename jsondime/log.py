# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class DiffFormatError(ValueError):
    """A diff record, patch entry or merge decision is not well formed."""
    pass


class MalformedPath(DiffFormatError):
    """A canonical path or a pointer path could not be tokenized."""
    pass


class PatchError(ValueError):
    """Base class for failures while applying a patch."""
    pass


class UnsupportedPatchOperation(PatchError):
    pass


class InvalidPatchTarget(PatchError):
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for jsondime entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all jsondime loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_jsondime_log_level(level, set_main=True):
    """Set a log level for jsondime loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('jsondime')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
