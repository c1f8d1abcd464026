"""
pytest configuration and fixtures.
"""

import io
from pathlib import Path
from typing import Callable
import pytest

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from publicset.core.connection import ClientConnection


@pytest.fixture
def docroot(tmp_path: Path) -> Path:
    """Document root with one small file and one subdirectory."""
    (tmp_path / "index.html").write_bytes(b"hi")
    (tmp_path / "a.txt").write_bytes(b"alpha\n")
    (tmp_path / "subdir").mkdir()
    return tmp_path


@pytest.fixture
def make_client() -> Callable[[bytes], ClientConnection]:
    """Factory for a connection reading the given bytes, writing to BytesIO."""
    def factory(request: bytes) -> ClientConnection:
        return ClientConnection(input=io.BytesIO(request), output=io.BytesIO())
    return factory


class BrokenStream(io.RawIOBase):
    """Stream whose reads and writes fail like a reset socket."""

    def readable(self) -> bool:
        return True

    def writable(self) -> bool:
        return True

    def readline(self, size: int = -1) -> bytes:
        raise ConnectionResetError("connection reset by peer")

    def write(self, data) -> int:
        raise BrokenPipeError("broken pipe")


class ShortStream(io.BytesIO):
    """Accepts the first `limit` writes, then fails like a closed socket."""

    def __init__(self, limit: int):
        super().__init__()
        self.limit = limit

    def write(self, data) -> int:
        if self.limit <= 0:
            raise BrokenPipeError("broken pipe")
        self.limit -= 1
        return super().write(data)


@pytest.fixture
def broken_stream() -> BrokenStream:
    return BrokenStream()


@pytest.fixture
def short_stream() -> Callable[[int], ShortStream]:
    """Factory for an output stream that breaks after N writes."""
    return ShortStream
