# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class DiffNodeFormatError(ValueError):
    pass


class DocumentError(ValueError):
    """Base class for recoverable, user-facing document errors.

    `side` names the offending input ("left" or "right"),
    or is None when the error concerns both.
    """
    def __init__(self, message, side=None):
        super(DocumentError, self).__init__(message)
        self.message = message
        self.side = side


class DocumentParseError(DocumentError):
    pass


class RootShapeError(DocumentError):
    pass


class BothRequiredError(DocumentError):
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for jsontapose entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all jsontapose loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_jsontapose_log_level(level, set_main=True):
    """Set a log level for jsontapose loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('jsontapose')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
