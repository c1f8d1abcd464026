"""
=============================================================================
STATIC FILE COMMAND PROCESSOR
=============================================================================

Reads the request line and decides which status to answer with and
which file (if any) to send.

=============================================================================
VALIDATION ORDER
=============================================================================

Checks run in a fixed order and the first failing one decides the
result. The order is part of the observable behavior: a server without
a document root answers 500 even to garbage, and "POST /.. HTTP/9" is a
501, not a 400 or a 505.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   read request line                                                  │
    │          │                                                           │
    │          ▼                                                           │
    │   docroot configured? ──── no ───► 500 Internal Server Error        │
    │          │                                                           │
    │          ▼                                                           │
    │   method is GET? ───────── no ───► 501 Not Implemented              │
    │          │                                                           │
    │          ▼                                                           │
    │   path valid, not "/.."? ─ no ───► 400 Bad Request                  │
    │          │                                                           │
    │          ▼                                                           │
    │   HTTP/1.0 or HTTP/1.1? ── no ───► 505 HTTP Version Not Supported   │
    │          │                                                           │
    │          ▼                                                           │
    │   regular file exists? ─── no ───► 404 Not Found                    │
    │          │                                                           │
    │          ▼                                                           │
    │   200 Ok + resolved path                                             │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The request line is always consumed, even when the docroot check fails
before looking at it.

=============================================================================
PATH TRAVERSAL
=============================================================================

The path grammar allows no "/" after the leading one, so only entries
directly inside the document root can be named. The single extra guard
rejects the literal "/..", the parent directory. Names like "/..." or
"/..hidden" are ordinary filenames and are allowed.

Symbolic links inside the document root are followed. Whoever places
them there decides what is published.

=============================================================================
"""

import logging
from pathlib import Path
from typing import NamedTuple, Optional

from ..core.connection import ClientConnection
from ..http.request import matches, tokenize
from ..http.status_codes import HTTPStatus


logger = logging.getLogger(__name__)


PARENT_DIRECTORY = "/.."


class Outcome(NamedTuple):
    """
    Result of processing one request line.

    Attributes:
        status: Status code to report.
        path: File to send. Only set when status is 200.
    """

    status: HTTPStatus
    path: Optional[Path] = None


def process_command(client: ClientConnection, docroot: Optional[Path]) -> Outcome:
    """
    Read the request line and map it to an Outcome.

    Args:
        client: Connection positioned at the start of the request.
        docroot: Document root, or None when none is configured.

    Returns:
        Outcome with the status to report and the resolved file for 200.

    Raises:
        OSError: If the filesystem check itself fails for a reason other
                 than "does not exist" (see pathlib.Path.is_file).
    """
    line = client.read_line()

    if docroot is None:
        return _fail(client, line, HTTPStatus.INTERNAL_SERVER_ERROR)

    request = tokenize(line)

    if request.method is None or not matches(request.method, "method"):
        return _fail(client, line, HTTPStatus.NOT_IMPLEMENTED)

    if (request.path is None
            or not matches(request.path, "path")
            or request.path == PARENT_DIRECTORY):
        return _fail(client, line, HTTPStatus.BAD_REQUEST)

    if request.protocol is None or not matches(request.protocol, "protocol"):
        return _fail(client, line, HTTPStatus.HTTP_VERSION_NOT_SUPPORTED)

    full_path = docroot / request.path[1:]
    if not full_path.is_file():
        return _fail(client, line, HTTPStatus.NOT_FOUND)

    logger.info(f'[{client.id}] "{request}" {HTTPStatus.OK.value}')
    return Outcome(HTTPStatus.OK, full_path)


def _fail(client: ClientConnection, line: str, status: HTTPStatus) -> Outcome:
    """Log a rejected request line and build the error Outcome."""
    logger.info(f'[{client.id}] "{line.rstrip()}" {status.value}')
    return Outcome(status)
