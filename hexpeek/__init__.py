"""
hexpeek - hex dump of binary files with zero line elision.
"""

__version__ = '0.3.0'

from .binary_reader import BinaryReader, ByteWindow, Cursor
from .config import DEFAULT_WORD_SIZE, LINE_WIDTH, DumpConfig, parse_number
from .dumper import HexDumper, dump_file
from .errors import HexDumpError, InvalidArgumentError, OpenError, ParseError, ReadError, SeekError
from .formatter import RenderedLine, format_line, hex_field_width
from .zero_run import ZeroRunTracker
