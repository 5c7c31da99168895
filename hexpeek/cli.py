#!/usr/bin/env python3
"""
Command-line interface for hexpeek.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import DEFAULT_WORD_SIZE, DumpConfig, parse_number
from .dumper import dump_file
from .errors import EXIT_OK, HexDumpError
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hexpeek',
        description='Hex dump of a binary file with repeated zero lines collapsed',
    )
    parser.add_argument('filename', type=Path, help='Input filename')
    parser.add_argument('--show-zero-lines', '--show-empty-lines', dest='show_zero_lines',
                        action='store_true', help='Do not skip all zero lines')
    parser.add_argument('-w', '--word-size', type=int, default=DEFAULT_WORD_SIZE, metavar='BYTES',
                        help=f'Number of bytes in a "word" (default: {DEFAULT_WORD_SIZE})')
    parser.add_argument('-o', '--offset', metavar='BYTES',
                        help="Offset from which to start reading file (hexadecimal value prefix with '0x')")
    parser.add_argument('-l', '--limit', metavar='BYTES',
                        help="Offset at which to stop reading file (hexadecimal value prefix with '0x')")
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages to stderr')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def config_from_args(args: argparse.Namespace) -> DumpConfig:
    """Build a validated DumpConfig from parsed arguments."""
    offset = parse_number(args.offset, 'offset') if args.offset is not None else None
    limit = parse_number(args.limit, 'limit') if args.limit is not None else 0
    return DumpConfig(
        word_size=args.word_size,
        offset=offset,
        limit=limit,
        show_zero_lines=args.show_zero_lines,
    ).validate()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = config_from_args(args)
        dump_file(args.filename, config, sys.stdout)
    except HexDumpError as e:
        logger.error("%s", e)
        return e.exit_code

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
