"""
Rendering of byte windows as hex dump lines.

A line looks like::

    00000010  4141 4141 4141 4141 4141 4141 4141 4141  |AAAAAAAAAAAAAAAA|

Every word in the hex field is followed by one space, and the field is
padded to the width of a full line so the ASCII column stays aligned on a
short final line.
"""

from dataclasses import dataclass
from typing import Iterator

from .binary_reader import ByteWindow
from .config import LINE_WIDTH


def words_per_line(word_size: int, line_width: int = LINE_WIDTH) -> int:
    """Number of word groups in a full line; a short last group counts as one."""
    return -(-line_width // word_size)


def hex_field_width(word_size: int, line_width: int = LINE_WIDTH) -> int:
    """
    Width the hex field is padded to, one separator space per word included.

    Same as ``word_size * 2 * words + words`` when the word size divides the
    line width, and still wide enough for a short last word when it does not.
    """
    return 2 * line_width + words_per_line(word_size, line_width)


def iter_words(data: bytes, word_size: int) -> Iterator[bytes]:
    for i in range(0, len(data), word_size):
        yield data[i:i + word_size]


def word_as_hex(word: bytes) -> str:
    """Two zero-padded lowercase hex digits per byte."""
    return ''.join(f'{b:02x}' for b in word)


def printable_ascii(data: bytes) -> str:
    """Printable ASCII bytes as themselves, everything else as '.'."""
    return ''.join(chr(b) if 0x20 <= b < 0x7f else '.' for b in data)


def format_offset(offset: int) -> str:
    return f'{offset:08x}'


@dataclass(frozen=True)
class RenderedLine:
    offset: int
    hex_field: str
    ascii_field: str
    hex_width: int

    def __str__(self) -> str:
        return f'{format_offset(self.offset)}  {self.hex_field:<{self.hex_width}} |{self.ascii_field}|'


def format_line(window: ByteWindow, word_size: int, hex_width: int) -> RenderedLine:
    """
    Render one window.

    Args:
        window: Bytes to render and their starting offset
        word_size: Bytes per hex word
        hex_width: Padded width of the hex field, see hex_field_width()
    """
    hex_field = ''.join(word_as_hex(word) + ' ' for word in iter_words(window.data, word_size))
    return RenderedLine(
        offset=window.offset,
        hex_field=hex_field,
        ascii_field=printable_ascii(window.data),
        hex_width=hex_width,
    )
