#!/usr/bin/env python

import io
import logging
import sys

logger = logging.getLogger('qsortlib')

def _lines(value, args, sep):
    output = io.StringIO()
    print(value, *args, sep=sep, end='', file=output)
    return output.getvalue().splitlines() or ['']

def debug(value, *args, sep=' ', prefix="#", log=None):
    ""
    log = log or logger
    if not log.isEnabledFor(logging.DEBUG):
        return
    for line in _lines(value, args, sep):
        log.debug(prefix + line)

def info(value, *args, sep=' ', prefix="#", log=None):
    ""
    log = log or logger
    if not log.isEnabledFor(logging.INFO):
        return
    for line in _lines(value, args, sep):
        log.info(prefix + line)

_handler = None

def setup(level=logging.DEBUG, stream=None):
    """Send the package log to stream (stderr by default).

    Calling it again reuses the handler it attached before.
    """
    global _handler
    if _handler is not None and _handler in logger.handlers:
        _handler.setStream(stream or sys.stderr)
    else:
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter('%(name)s: %(message)s'))
        logger.addHandler(_handler)
    logger.setLevel(level)
    return _handler
