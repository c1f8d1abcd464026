"""
=============================================================================
CLIENT CONNECTION
=============================================================================

Wraps the pair of byte streams connected to the client.

=============================================================================
WHERE DO THE STREAMS COME FROM?
=============================================================================

The responder never opens a socket itself. A superserver (inetd, xinetd,
s6-tcpserver, systemd socket activation with Accept=yes) accepts the TCP
connection and starts one process per client with the socket wired to
stdin and stdout:

    ┌─────────┐   TCP    ┌─────────────┐  fork/exec   ┌───────────────┐
    │ Client  │ ───────► │ superserver │ ───────────► │  publicset    │
    └─────────┘          └─────────────┘              │ stdin = sock  │
                                                      │ stdout = sock │
                                                      └───────────────┘

For tests the same class wraps two io.BytesIO objects.

=============================================================================
ERROR MODEL
=============================================================================

Read and write failures are returned as values, never raised:

    read_line()    ""     at end of stream or on a read error
    write()        False  if the bytes could not be written
    send_stream()  False  if the copy stopped early

The caller decides what a failure means. Anything unexpected (bad
arguments, failures outside the stream itself) still raises.

=============================================================================
"""

import logging
import shutil
import time
import uuid
from dataclasses import dataclass, field
from typing import BinaryIO


logger = logging.getLogger(__name__)


# I/O failures that mean "the client is gone". ValueError covers
# operations on a stream that was already closed.
STREAM_ERRORS = (OSError, ValueError)


@dataclass
class ClientConnection:
    """
    A client connection made of an input and an output byte stream.

    Attributes:
        input: Readable binary stream carrying the request.
        output: Writable binary stream for the response.
        id: Short identifier used in log messages.
        buffer_size: Chunk size for copying files to the output.
        bytes_read: Total bytes consumed from the input.
        bytes_written: Total bytes written to the output.
    """

    input: BinaryIO
    output: BinaryIO

    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    created_at: float = field(default_factory=time.time)
    buffer_size: int = 64 * 1024
    bytes_read: int = 0
    bytes_written: int = 0

    @property
    def age(self) -> float:
        """Get connection age in seconds."""
        return time.time() - self.created_at

    # =========================================================================
    # READING
    # =========================================================================

    def read_line(self) -> str:
        """
        Read one line from the client.

        The trailing "\\n" is removed. A line that is nothing but "\\r"
        (the CRLF blank line ending an HTTP header block) comes back as
        "". Other lines keep their "\\r", which whitespace tokenizing
        ignores.

        Bytes are decoded as ISO-8859-1 so every byte sequence maps to
        some string and decoding never fails.

        Returns:
            The line, or "" at end of stream.
        """
        try:
            raw = self.input.readline()
        except STREAM_ERRORS as e:
            logger.warning(f"[{self.id}] Read failed: {e}")
            return ""

        self.bytes_read += len(raw)
        line = raw.decode("iso-8859-1")
        if line.endswith("\n"):
            line = line[:-1]
        if line == "\r":
            line = ""
        return line

    def drain(self) -> int:
        """
        Discard request lines up to the blank line or end of stream.

        Returns:
            Number of non-empty lines discarded.
        """
        count = 0
        while True:
            line = self.read_line()
            if not line:
                break
            logger.debug(f"[{self.id}] Discarding: {line.rstrip()}")
            count += 1
        return count

    # =========================================================================
    # WRITING
    # =========================================================================

    def write(self, data: bytes) -> bool:
        """
        Write bytes to the client.

        Returns:
            True if the write succeeded, False if the stream failed.
        """
        try:
            self.output.write(data)
        except STREAM_ERRORS as e:
            logger.warning(f"[{self.id}] Write failed: {e}")
            return False
        self.bytes_written += len(data)
        return True

    def send_stream(self, source: BinaryIO) -> bool:
        """
        Copy a readable binary stream to the client verbatim.

        Only failures on the client side are turned into False. A read
        error on the source is not the client's fault and propagates.

        Args:
            source: Stream to copy until EOF.

        Returns:
            True if everything was written.
        """
        sink = _ClientSink(self)
        try:
            shutil.copyfileobj(source, sink, self.buffer_size)
        except _ClientWriteError:
            return False
        return True

    def flush(self) -> bool:
        """Flush the output stream. Returns False if that failed."""
        try:
            self.output.flush()
        except STREAM_ERRORS as e:
            logger.warning(f"[{self.id}] Flush failed: {e}")
            return False
        return True


class _ClientWriteError(Exception):
    """Raised inside send_stream to stop a copy when the client fails."""


class _ClientSink:
    """File-like adapter routing copyfileobj writes through ClientConnection.write."""

    def __init__(self, conn: ClientConnection):
        self._conn = conn

    def write(self, data: bytes) -> int:
        if not self._conn.write(data):
            raise _ClientWriteError()
        return len(data)
