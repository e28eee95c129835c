"""
Part of marcdump
Copyright (c) 2026 marcdump contributors
MIT License https://opensource.org/licenses/mit-license.php
Code policy PEP8 https://www.python.org/dev/peps/pep-0008/
"""

""" Dump MARC21 records as text, optionally only the records matching a
selector and only some of their fields.

    marcdump -m 10 -s '650_a=Fiction' -f 245:650 records.mrc
"""
import argparse
import enum
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from pymarc.exceptions import PymarcException

import marcdump
from marcdump.errors import (
    DecodeError,
    IndexNotSupported,
    MarcDumpError,
    OpenError,
    UsageError,
)
from marcdump.match import matches
from marcdump.projection import FieldProjection, parse_projection
from marcdump.render import render_record
from marcdump.selector import SelectorSpec, parse_selector

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    RENDER = 'render'
    BUILD_INDEX = 'build-index'


class State(enum.Enum):
    READING = 'reading'
    DONE = 'done'
    LIMIT_REACHED = 'limit-reached'
    DECODE_ERROR = 'decode-error'


@dataclass(frozen=True)
class DumpConfig:
    marc_file: str
    # None, no limit
    max_matches: Optional[int] = None
    selector: SelectorSpec = field(default_factory=SelectorSpec)
    projection: FieldProjection = field(default_factory=FieldProjection)
    action: Action = Action.RENDER
    index_file: Optional[str] = None
    lookup_index: Optional[str] = None
    align: bool = True
    force_utf8: bool = False


@dataclass
class DumpResult:
    state: State = State.READING
    read: int = 0
    matched: int = 0
    error: Optional[DecodeError] = None


def records(reader):
    """Yield records from a pymarc reader, raise DecodeError on the first
    bad one, there is no safe way to jump to the next record after it."""
    position = 0
    while True:
        position += 1
        try:
            r = next(reader)
        except StopIteration:
            return
        except (PymarcException, UnicodeDecodeError, ValueError) as e:
            raise DecodeError(position, e) from e
        if r is None:
            # pymarc keeps the failure instead of raising
            cause = getattr(reader, 'current_exception', None)
            raise DecodeError(position, cause or "unreadable record")
        yield r


def dump(reader, config, out):
    """Loop on records, render the matching ones until the end of the
    stream or max_matches. A decode error stops the loop, the result keeps
    it in .error for the caller."""
    result = DumpResult()
    limit = config.max_matches or None
    try:
        for r in records(reader):
            result.read += 1
            if not matches(config.selector, r):
                continue
            render_record(r, out, config.projection, config.align)
            result.matched += 1
            if limit is not None and result.matched == limit:
                result.state = State.LIMIT_REACHED
                return result
    except DecodeError as e:
        result.state = State.DECODE_ERROR
        result.error = e
        return result
    result.state = State.DONE
    return result


def run(config, out=None):
    """Execute the action asked in config, raise MarcDumpError when the
    run fails."""
    if out is None:
        out = sys.stdout
    if config.action == Action.BUILD_INDEX:
        raise IndexNotSupported(config.index_file)
    elif config.action != Action.RENDER:
        raise UsageError(f"unknown action {config.action}")
    if config.lookup_index:
        logger.warning(
            "index \"%s\" ignored, records are scanned in file order",
            config.lookup_index
        )
    try:
        handle = open(config.marc_file, 'rb')
    except OSError as e:
        raise OpenError(config.marc_file, e.strerror or e) from e
    with handle:
        reader = marcdump.open_reader(handle, config.force_utf8)
        result = dump(reader, config, out)
    logger.info(
        "%d records read, %d matched (%s)",
        result.read, result.matched, result.state.value
    )
    if result.state == State.DECODE_ERROR:
        raise result.error
    return result


class ArgumentParser(argparse.ArgumentParser):
    """Usage errors end with exit code 1"""

    def error(self, message):
        raise UsageError(message)


def max_count(text):
    try:
        count = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a count: \"{text}\"")
    if count < 0:
        raise argparse.ArgumentTypeError(f"not a count: \"{text}\"")
    return count


def build_parser():
    parser = ArgumentParser(
        prog='marcdump',
        description='Dump records of a MARC21 file as text',
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument('marc_file', nargs=1,
    help='A file of MARC21 records')
    parser.add_argument('-m', dest='max_matches', type=max_count, default=None,
    help='Maximum number of matching records to dump (0 or absent, no limit)')
    parser.add_argument('-s', dest='selector', default='',
    help='Select records: FIELD[_SUBFIELD][=PATTERN], ex: 020_a=^978')
    parser.add_argument('-f', dest='fields', default='',
    help='Colon separated tags of the fields to dump, ex: 245:650')
    parser.add_argument('-mkindex', dest='index_file', default=None,
    help='Name of an index file to generate (not implemented)')
    parser.add_argument('-index', dest='lookup_index', default=None,
    help='Name of an index file to use (ignored, file is scanned)')
    parser.add_argument('-tabs', dest='align', action='store_false',
    help='Separate columns with a tab, no alignment')
    parser.add_argument('-utf8', dest='force_utf8', action='store_true',
    help='Decode records as UTF-8 whatever the leader says')
    parser.add_argument('-v', dest='verbose', action='count', default=0,
    help='More messages on stderr (-v, -vv)')
    return parser


def parse_config(argv=None):
    """Command line to DumpConfig, selector and fields checked here,
    before any file is opened."""
    args = build_parser().parse_args(argv)
    action = Action.RENDER
    if args.index_file:
        action = Action.BUILD_INDEX
    return DumpConfig(
        marc_file=args.marc_file[0],
        max_matches=args.max_matches or None,
        selector=parse_selector(args.selector),
        projection=parse_projection(args.fields),
        action=action,
        index_file=args.index_file,
        lookup_index=args.lookup_index,
        align=args.align,
        force_utf8=args.force_utf8,
    ), args.verbose


def main(argv=None) -> int:
    marcdump.setup_logging()
    try:
        config, verbose = parse_config(argv)
        marcdump.setup_logging(verbose)
        logger.debug("selector: %s", config.selector)
        run(config)
    except UsageError as e:
        build_parser().print_usage(sys.stderr)
        logger.error("Error: %s", e)
        return 1
    except MarcDumpError as e:
        logger.error("Error: %s", e)
        return 1
    except BrokenPipeError:
        # output closed early, ex: | head
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    return 0


if __name__ == '__main__':
    sys.exit(main())
