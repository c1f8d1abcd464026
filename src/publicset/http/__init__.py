"""
=============================================================================
HTTP PROTOCOL COMPONENTS
=============================================================================

    status_codes.py  Status registry (code → reason phrase)
    request.py       Request line tokenizing and pattern matching
    response.py      Date formatting and response emission

=============================================================================
"""

from .status_codes import HTTPStatus, STATUS_PHRASES, reason_for
from .request import PATTERNS, RequestLine, matches, tokenize
from .response import (
    format_http_date,
    header_block,
    report_status,
    send_file,
    status_line,
)

__all__ = [
    # Status codes
    "HTTPStatus",
    "STATUS_PHRASES",
    "reason_for",
    # Request line
    "PATTERNS",
    "RequestLine",
    "matches",
    "tokenize",
    # Response
    "format_http_date",
    "header_block",
    "report_status",
    "send_file",
    "status_line",
]
