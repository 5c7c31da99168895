"""
Errors raised while dumping a file.

Every fatal error carries the process exit code the command line tool
reports it with.
"""

EXIT_OK = 0
EXIT_OPEN_FAILED = 2
EXIT_BAD_VALUE = 3


class HexDumpError(Exception):
    """Base class for hexpeek errors."""

    exit_code = EXIT_BAD_VALUE


# raised when the input file cannot be opened
class OpenError(HexDumpError):
    exit_code = EXIT_OPEN_FAILED

    def __init__(self, path, reason):
        super().__init__(f"could not open {path}: {reason}")
        self.path = path
        self.reason = reason


# raised when the starting offset cannot be reached
class SeekError(HexDumpError):
    exit_code = EXIT_BAD_VALUE

    def __init__(self, position: int, path, reason):
        super().__init__(f"could not seek to pos {position} on file {path}: {reason}")
        self.position = position
        self.path = path
        self.reason = reason


class ParseError(HexDumpError, ValueError):
    """An offset or limit literal is not a decimal or 0x-prefixed hex integer."""

    exit_code = EXIT_BAD_VALUE

    def __init__(self, what: str, literal: str, reason: str):
        super().__init__(f"invalid {what} value '{literal}': {reason}")
        self.what = what
        self.literal = literal
        self.reason = reason


class InvalidArgumentError(HexDumpError, ValueError):
    """A well-formed option value that cannot be used (e.g. word size 0)."""

    exit_code = EXIT_BAD_VALUE


# reads are non-fatal; this only formats the warning
class ReadError(HexDumpError):
    exit_code = EXIT_BAD_VALUE

    def __init__(self, offset: int, reason):
        super().__init__(f"while reading buffer at offset {offset:#x}: {reason}")
        self.offset = offset
        self.reason = reason
