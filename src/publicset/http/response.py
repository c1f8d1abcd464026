"""
=============================================================================
HTTP RESPONSE EMITTER
=============================================================================

Writes HTTP/1.0 responses to a client connection.

=============================================================================
RESPONSE ANATOMY
=============================================================================

A response is written in two independent steps:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │  ┌─ report_status() ──────────────────────────────────────────────┐ │
    │  │    HTTP/1.0 200 Ok\r\n                                          │ │
    │  │    Date: Thu, 15 Jan 2026 12:30:45 GMT\r\n                      │ │
    │  │    Connection: close\r\n                                        │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ send_file() (200 only) ───────────────────────────────────────┐ │
    │  │    Last-Modified: Wed, 14 Jan 2026 08:00:00 GMT\r\n             │ │
    │  │    Content-Type: application/octet-stream\r\n                   │ │
    │  │    \r\n                                                         │ │
    │  │    <file bytes until EOF>                                       │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Error responses stop after the status block. There is no blank line and
no body, and closing the connection ends the message.

=============================================================================
NO CONTENT-LENGTH
=============================================================================

HTTP/1.0 allows the server to mark the end of the body by closing the
connection. Every response says "Connection: close", so the body is simply
streamed until the file is exhausted. No chunking, no ranges.

The status line always says HTTP/1.0, even when the client asked with
HTTP/1.1. A server must not claim a higher minor version than it
implements.

=============================================================================
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Union

from ..core.connection import ClientConnection
from .status_codes import reason_for


logger = logging.getLogger(__name__)


PROTOCOL = "HTTP/1.0"
CONTENT_TYPE = "application/octet-stream"


# =============================================================================
# DATE FORMATTING
# =============================================================================
#
# Explicit English tables. strftime("%a") and "%b" follow the process
# locale (LC_TIME), which would produce "Do, 15 Jan" under de_DE.
#
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_http_date(instant: Union[datetime, float, int]) -> str:
    """
    Format a point in time as an HTTP-date (RFC 1123 form).

    Format: Wdy, DD Mon YYYY HH:MM:SS GMT
    Example: Thu, 15 Jan 2026 12:30:45 GMT

    Args:
        instant: Aware datetime (converted to UTC), naive datetime
                 (assumed to already be UTC), or a POSIX timestamp.

    Returns:
        Formatted date string. Fractional seconds are dropped.
    """
    if isinstance(instant, datetime):
        dt = instant if instant.tzinfo is None else instant.astimezone(timezone.utc)
    else:
        dt = datetime.fromtimestamp(instant, tz=timezone.utc)

    return (
        f"{_DAYS[dt.weekday()]}, "
        f"{dt.day:02d} {_MONTHS[dt.month - 1]} {dt.year:04d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"
    )


def request_date() -> str:
    """HTTP-date for the current time."""
    return format_http_date(datetime.now(timezone.utc))


# =============================================================================
# SERIALIZATION
# =============================================================================

def status_line(code: int) -> str:
    """
    Build the status line (without CRLF).

        >>> status_line(404)
        'HTTP/1.0 404 Not Found'
    """
    return f"{PROTOCOL} {int(code)} {reason_for(code)}"


def header_block(headers: Dict[str, str], first_line: Optional[str] = None,
                 terminate: bool = False) -> bytes:
    """
    Serialize header lines, each ending in CRLF.

    Args:
        headers: Header name to value, written in insertion order.
        first_line: Optional line written before the headers.
        terminate: Append the empty line that ends the header section.

    Returns:
        ISO-8859-1 encoded bytes.
    """
    lines = [] if first_line is None else [first_line]
    lines.extend(f"{name}: {value}" for name, value in headers.items())
    if terminate:
        lines.append("")
    return "".join(f"{line}\r\n" for line in lines).encode("iso-8859-1")


# =============================================================================
# EMITTERS
# =============================================================================

def report_status(client: ClientConnection, code: int) -> bool:
    """
    Write the status line and the headers every response carries.

    Args:
        client: Connection to write to.
        code: Status code from the command processor.

    Returns:
        True if the write succeeded.
    """
    data = header_block(
        {"Date": request_date(), "Connection": "close"},
        first_line=status_line(code),
    )
    return client.write(data)


def send_file(client: ClientConnection, path: Optional[Path]) -> bool:
    """
    Write the entity headers and the file content.

    =====================================================================
    RESULT
    =====================================================================

        path is None          → False, nothing written
        header write fails    → False, body not attempted
        header write succeeds → True, body streamed

    The result reports the header write only. A client that hangs up
    halfway through the body has still received a well-formed start of
    response; the failed copy is logged.

    =====================================================================

    Args:
        client: Connection to write to.
        path: Resolved file from a 200 outcome, or None.

    Returns:
        Whether the headers were written.

    Raises:
        OSError: If the file cannot be stat'ed or opened. These are
                 process-level faults, not client errors.
    """
    if path is None:
        return False

    headers = {
        "Last-Modified": format_http_date(path.stat().st_mtime),
        "Content-Type": CONTENT_TYPE,
    }
    if not client.write(header_block(headers, terminate=True)):
        return False

    with path.open("rb") as source:
        if not client.send_stream(source):
            logger.warning(f"[{client.id}] Body truncated: {path}")
    return True
