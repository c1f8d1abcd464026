"""
=============================================================================
RESPONDER
=============================================================================

Sequences one request/response exchange.

=============================================================================
LIFECYCLE
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   1. process_command()   read request line → (status, path)          │
    │   2. drain()             discard header lines up to the blank line   │
    │   3. report_status()     status line, Date, Connection: close        │
    │   4. send_file()         entity headers + body (200 only)            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Step 2 runs for every outcome, so the request is fully read before the
response starts. Some clients treat a connection closed with unread
request bytes as reset and drop the response.

=============================================================================
USAGE
=============================================================================

    # Core function, any pair of binary streams
    client = ClientConnection(input=sys.stdin.buffer, output=sys.stdout.buffer)
    serve(client, Path("/srv/public"))

    # Configured responder (what the CLI uses)
    responder = Responder(ResponderConfig(docroot="/srv/public"))
    responder.handle(sys.stdin.buffer, sys.stdout.buffer)

=============================================================================
"""

import logging
from pathlib import Path
from typing import BinaryIO, Optional

from .config import ResponderConfig
from .core.connection import ClientConnection
from .handlers.static import process_command
from .http.response import report_status, send_file


logger = logging.getLogger(__name__)


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def serve(client: ClientConnection, docroot: Optional[Path]) -> bool:
    """
    Handle one request on a client connection.

    Args:
        client: Connection to the client.
        docroot: Document root, or None when none is configured.

    Returns:
        True if a file was sent, False for error responses or when the
        entity headers could not be written.
    """
    status, path = process_command(client, docroot)

    discarded = client.drain()
    if discarded:
        logger.debug(f"[{client.id}] Drained {discarded} header line(s)")

    report_status(client, status)
    return send_file(client, path)


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure logging on stderr.

    stdout carries the HTTP response, so nothing may ever be logged there.
    """
    numeric = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    logging.getLogger("publicset").setLevel(numeric)


class Responder:
    """
    A configured single-shot responder.

    Resolves the document root once at construction and then handles
    exactly one exchange per handle() call.
    """

    def __init__(self, config: Optional[ResponderConfig] = None):
        self.config = config or ResponderConfig()
        self.config.validate()
        self.docroot = self.config.resolve_docroot()

    def handle(self, input: BinaryIO, output: BinaryIO) -> bool:
        """
        Serve one request read from input, writing the response to output.

        Returns:
            The result of serve().
        """
        client = ClientConnection(
            input=input,
            output=output,
            buffer_size=self.config.buffer_size,
        )
        try:
            return serve(client, self.docroot)
        finally:
            client.flush()
            logger.debug(
                f"[{client.id}] Done: {client.bytes_read} bytes in, "
                f"{client.bytes_written} bytes out, {client.age * 1000:.1f}ms"
            )
