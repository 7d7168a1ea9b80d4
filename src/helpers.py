"""
Some helper functions
"""

# encoding: utf-8

import logging
import math
import traceback


def log_traceback(level=logging.DEBUG):
    """
    Log current exception traceback line by line
    """
    for line in traceback.format_exc().split('\n'):
        if line:
            logging.log(level, line.rstrip())


def one_line(exc):
    """
    Squash (possibly multiline) error text into a single line
    """
    return ' '.join(str(exc).split()) or exc.__class__.__name__


def libpq_seconds(timeout):
    """
    libpq connect_timeout accepts whole seconds only, 0 means wait forever
    """
    return max(1, math.ceil(float(timeout)))


def to_milliseconds(timeout):
    return int(float(timeout) * 1000)
