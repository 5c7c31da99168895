"""
Dump settings and numeric option parsing.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError, ParseError

LINE_WIDTH = 16
DEFAULT_WORD_SIZE = 2

_HEX_PREFIX = '0x'
_DECIMAL_DIGITS = re.compile(r'[0-9]+')
_HEX_DIGITS = re.compile(r'[0-9a-fA-F]+')


def parse_number(text: str, what: str = 'number') -> int:
    """
    Parse a decimal literal, or a hexadecimal one when prefixed with '0x'.

    Args:
        text: Literal from the command line
        what: Name of the option, used in the error message

    Raises:
        ParseError: if the literal is empty or holds an invalid digit
    """
    if text.startswith(_HEX_PREFIX):
        digits, pattern, base = text[len(_HEX_PREFIX):], _HEX_DIGITS, 16
    else:
        digits, pattern, base = text, _DECIMAL_DIGITS, 10

    if not digits:
        raise ParseError(what, text, "cannot parse integer from empty string")
    if not pattern.fullmatch(digits):
        raise ParseError(what, text, "invalid digit found in string")
    return int(digits, base)


@dataclass
class DumpConfig:
    """Settings for a single dump run."""

    word_size: int = DEFAULT_WORD_SIZE
    offset: Optional[int] = None
    limit: int = 0
    show_zero_lines: bool = False
    line_width: int = LINE_WIDTH

    @property
    def skip_zero_lines(self) -> bool:
        return not self.show_zero_lines

    @property
    def start(self) -> int:
        """Position the first window is read from."""
        return self.offset or 0

    def validate(self) -> 'DumpConfig':
        """Reject values that parse but cannot drive a dump."""
        if self.word_size < 1:
            raise InvalidArgumentError(f"invalid word size {self.word_size}: must be at least 1")
        if self.line_width < 1:
            raise InvalidArgumentError(f"invalid line width {self.line_width}: must be at least 1")
        if self.offset is not None and self.offset < 0:
            raise InvalidArgumentError(f"invalid offset value {self.offset}: must not be negative")
        if self.limit < 0:
            raise InvalidArgumentError(f"invalid limit value {self.limit}: must not be negative")
        # limit counts from the start of the file, not from the offset
        if self.limit and self.limit <= self.start:
            raise InvalidArgumentError(
                f"invalid limit value {self.limit:#x}: must be past offset {self.start:#x}"
            )
        return self
