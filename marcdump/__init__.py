"""
Part of marcdump
Copyright (c) 2026 marcdump contributors
MIT License https://opensource.org/licenses/mit-license.php
Code policy PEP8 https://www.python.org/dev/peps/pep-0008/
"""

import logging
import sys

import pymarc

__version__ = '0.1.0'


def open_reader(handle, force_utf8=False):
    "Build a MARC21 reader on an open binary handle"
    return pymarc.MARCReader(
        handle,
        to_unicode=True,
        force_utf8=force_utf8
    )


def is_control_field(field):
    """Ask pymarc if a field is a control field (00X tags), we do not guess
    from the tag here."""
    return field.is_control_field()


def setup_logging(verbosity=0):
    "Send log messages to stderr, more verbose with each -v"
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        stream=sys.stderr,
        format='%(message)s',
        level=level,
        force=True
    )
