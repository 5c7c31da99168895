"""
Hex dump driver: reads windows, collapses zero runs and renders lines.
"""

import logging
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from .binary_reader import BinaryReader
from .config import DumpConfig
from .formatter import format_line, format_offset, hex_field_width
from .zero_run import ZeroRunTracker

logger = logging.getLogger(__name__)

# printed when output does not start at the beginning or stops before the end
PARTIAL_MARKER = '**'
# printed in place of one or more elided zero lines
ELISION_MARKER = '*'


class HexDumper:
    """Turns the windows of a BinaryReader into hex dump output lines."""

    def __init__(self, config: DumpConfig):
        self.config = config.validate()
        self.hex_width = hex_field_width(config.word_size, config.line_width)

    def iter_lines(self, reader: BinaryReader) -> Iterator[str]:
        """
        Yield output lines for an open reader.

        The reader must already be positioned at the configured offset.
        """
        config = self.config
        tracker = ZeroRunTracker(config.skip_zero_lines, config.line_width)

        if config.offset is not None:
            yield PARTIAL_MARKER

        for window in reader.windows():
            if tracker.classify(window):
                continue
            if tracker.take_marker():
                yield ELISION_MARKER
            yield str(format_line(window, config.word_size, self.hex_width))

        run_flushed = tracker.take_marker()
        if run_flushed:
            yield ELISION_MARKER

        if reader.truncated:
            # an elided run hides where the limit stopped the dump
            if run_flushed:
                yield format_offset(reader.offset)
            yield PARTIAL_MARKER
        else:
            yield format_offset(reader.offset)

    def dump(self, reader: BinaryReader, out: Optional[TextIO] = None) -> int:
        """Write all lines for an open reader; returns the number of lines written."""
        out = out if out is not None else sys.stdout
        count = 0
        for line in self.iter_lines(reader):
            out.write(line + '\n')
            count += 1
        return count


def dump_file(path: Union[str, Path], config: DumpConfig, out: Optional[TextIO] = None) -> int:
    """
    Dump a file to a text stream.

    Args:
        path: File to dump
        config: Word size, offset, limit and zero line settings
        out: Output stream (default: stdout)

    Returns:
        Number of lines written

    Raises:
        OpenError: if the file cannot be opened
        SeekError: if the configured offset cannot be reached
        InvalidArgumentError: if the configuration is unusable
    """
    dumper = HexDumper(config)
    with BinaryReader(path, limit=config.limit, line_width=config.line_width) as reader:
        if config.offset is not None:
            reader.seek(config.offset)
        count = dumper.dump(reader, out)
    logger.debug("dumped %s: %d lines, ended at %#x", path, count, reader.offset)
    return count
