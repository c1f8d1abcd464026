"""
=============================================================================
CORE I/O
=============================================================================

Low-level plumbing between the responder and its client. The only
component is ClientConnection, a wrapper around the input and output
byte streams handed to the process by its superserver.

=============================================================================
"""

from .connection import ClientConnection, STREAM_ERRORS

__all__ = [
    "ClientConnection",  # Duplex byte stream with value-returning I/O
    "STREAM_ERRORS",     # Exceptions treated as "client went away"
]
