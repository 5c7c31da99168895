"""Shared pytest fixtures for hexpeek tests."""

import io
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


@pytest.fixture
def make_file(tmp_path):
    """Write bytes to a file in the temp dir and return its path."""
    def _make(data: bytes, name: str = "test.bin") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _make


@pytest.fixture
def counting_bytes():
    """Bytes 00 01 02 ... of the requested length."""
    return lambda n: bytes(i & 0xff for i in range(n))


class FailingStream(io.BytesIO):
    """Stream that fails after a number of successful reads."""

    def __init__(self, data, good_reads):
        super().__init__(data)
        self.good_reads = good_reads

    def read(self, size=-1):
        if self.good_reads == 0:
            raise OSError(5, "Input/output error")
        self.good_reads -= 1
        return super().read(size)


@pytest.fixture
def failing_stream():
    """Factory for in-memory streams whose reads start failing."""
    return FailingStream
