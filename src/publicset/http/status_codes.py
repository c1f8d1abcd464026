"""
=============================================================================
HTTP STATUS CODES
=============================================================================

The complete set of status codes this responder can send.

=============================================================================
WHY ONLY SIX?
=============================================================================

The command processor only ever decides between a handful of outcomes,
each tied to one step of request validation:

    ┌───────┬────────────────────────────┬──────────────────────────────┐
    │ Code  │ Reason phrase              │ Produced when                │
    ├───────┼────────────────────────────┼──────────────────────────────┤
    │  200  │ Ok                         │ File found and servable      │
    │  400  │ Bad Request                │ Path missing or malformed    │
    │  404  │ Not Found                  │ No regular file at the path  │
    │  500  │ Internal Server Error      │ No document root configured  │
    │  501  │ Not Implemented            │ Method is not GET            │
    │  505  │ HTTP Version Not Supported │ Protocol not HTTP/1.0 or 1.1 │
    └───────┴────────────────────────────┴──────────────────────────────┘

Note the reason phrase for 200 is "Ok", not "OK". Reason phrases are
informational (RFC 1945 section 6.1.1) and clients must not depend on them.

=============================================================================
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class HTTPStatus(IntEnum):
    """
    Status codes known to the responder.

    IntEnum, so members compare equal to plain integers:

        >>> HTTPStatus.NOT_FOUND == 404
        True
        >>> HTTPStatus.NOT_FOUND.phrase
        'Not Found'
    """

    OK = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    HTTP_VERSION_NOT_SUPPORTED = 505

    @property
    def phrase(self) -> str:
        """Reason phrase for the status line."""
        return STATUS_PHRASES[self]


# =============================================================================
# REASON PHRASES
# =============================================================================
#
#   HTTP/1.0 404 Not Found
#            ─── ─────────
#             │      │
#             │      └── Reason phrase (from this table)
#             └───────── Status code
#
# Built once at import and exposed read-only.
#
# =============================================================================

STATUS_PHRASES: Mapping[int, str] = MappingProxyType({
    HTTPStatus.OK: "Ok",
    HTTPStatus.BAD_REQUEST: "Bad Request",
    HTTPStatus.NOT_FOUND: "Not Found",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Internal Server Error",
    HTTPStatus.NOT_IMPLEMENTED: "Not Implemented",
    HTTPStatus.HTTP_VERSION_NOT_SUPPORTED: "HTTP Version Not Supported",
})


def reason_for(code: int) -> str:
    """
    Get the reason phrase for a status code.

    Args:
        code: One of the codes in HTTPStatus (plain ints work too).

    Returns:
        The reason phrase.

    Raises:
        KeyError: If the code is not in the registry. Callers only ever
                  pass codes produced by the command processor.
    """
    return STATUS_PHRASES[code]
