"""
Windowed binary file reader.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union

from .config import LINE_WIDTH
from .errors import OpenError, ReadError, SeekError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ByteWindow:
    """A chunk of up to one line width of bytes and where it starts."""

    data: bytes
    offset: int

    @property
    def n(self) -> int:
        return len(self.data)

    @property
    def end(self) -> int:
        return self.offset + len(self.data)


@dataclass
class Cursor:
    """Bytes consumed from the logical start, and the optional cutoff (0 = none)."""

    offset: int = 0
    limit: int = 0

    def next_read_size(self, line_width: int) -> int:
        """Size of the next read so the offset lands exactly on the limit."""
        if self.limit and self.offset + line_width >= self.limit:
            return max(self.limit - self.offset, 0)
        return line_width

    @property
    def at_limit(self) -> bool:
        return bool(self.limit) and self.offset >= self.limit


class BinaryReader:
    """Reads a binary file one fixed-size window at a time."""

    def __init__(self, source: Union[str, Path, BinaryIO], limit: int = 0, line_width: int = LINE_WIDTH):
        """
        Initialize binary reader.

        Args:
            source: Path to the binary file, or an already open binary stream
            limit: Offset at which reading stops (0 = read to end of file)
            line_width: Bytes per window
        """
        if isinstance(source, (str, Path)):
            self.file_path = Path(source)
            self.file: Optional[BinaryIO] = None
            self._owns_file = True
        else:
            self.file_path = Path(str(getattr(source, 'name', '<stream>')))
            self.file = source
            self._owns_file = False
        self.line_width = line_width
        self.cursor = Cursor(limit=limit)
        self.truncated = False
        self.read_failed = False

    def __enter__(self):
        """Context manager entry."""
        if self._owns_file:
            try:
                self.file = open(self.file_path, 'rb')
            except OSError as e:
                raise OpenError(self.file_path, e.strerror or e) from e
            logger.debug("opened %s", self.file_path)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if self.file and self._owns_file:
            self.file.close()
            self.file = None

    def _require_open(self) -> BinaryIO:
        if not self.file:
            raise RuntimeError("File not open. Use as context manager.")
        return self.file

    @property
    def offset(self) -> int:
        return self.cursor.offset

    def get_file_size(self) -> Optional[int]:
        """Get total file size, or None when the stream cannot seek."""
        f = self._require_open()
        if not f.seekable():
            return None
        pos = f.tell()
        size = f.seek(0, os.SEEK_END)
        f.seek(pos)
        return size

    def seek(self, position: int) -> int:
        """
        Move to an absolute position before the first read.

        The cursor offset starts counting at the seek target.

        Raises:
            SeekError: if the position is outside the file or the seek fails
        """
        f = self._require_open()
        try:
            if position < 0:
                raise ValueError("negative position")
            size = self.get_file_size()
            if size is None:
                raise OSError("stream is not seekable")
            if position > size:
                raise ValueError(f"past end of file ({size} bytes)")
            pos = f.seek(position, os.SEEK_SET)
        except (OSError, ValueError) as e:
            raise SeekError(position, self.file_path, e) from e
        self.cursor.offset = pos
        logger.debug("seeked to %#x", pos)
        return pos

    def _read(self, count: int) -> bytes:
        try:
            return self._require_open().read(count)
        except OSError as e:
            self.read_failed = True
            logger.warning("%s", ReadError(self.cursor.offset, e))
            return b''

    def windows(self) -> Iterator[ByteWindow]:
        """
        Yield successive windows until end of file or the limit.

        A read error ends the iteration like end of file does. When the
        limit stops iteration, ``truncated`` tells whether data remained.
        """
        while not self.cursor.at_limit:
            count = self.cursor.next_read_size(self.line_width)
            data = self._read(count)
            if not data:
                return
            window = ByteWindow(data, self.cursor.offset)
            self.cursor.offset = window.end
            yield window

        # probe one byte to learn whether the limit cut the file short
        self.truncated = bool(self._read(1))
        logger.debug("limit %#x reached, truncated=%s", self.cursor.limit, self.truncated)
