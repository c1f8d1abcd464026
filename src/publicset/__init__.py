"""
=============================================================================
PUBLICSET - Single-Shot HTTP/1.0 Static File Responder
=============================================================================

Answers exactly one HTTP GET request read from stdin by writing a file
from a document root to stdout, then exits. Meant to be started once per
connection by a superserver (inetd, xinetd, s6-tcpserver, ...).

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    publicset/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # CLI entry point (python -m publicset)
    ├── server.py            # serve() orchestrator and Responder
    ├── config.py            # ResponderConfig dataclass
    ├── core/
    │   └── connection.py    # ClientConnection over two byte streams
    ├── http/
    │   ├── status_codes.py  # Status registry
    │   ├── request.py       # Request line matcher
    │   └── response.py      # Date formatter and response emitter
    └── handlers/
        └── static.py        # Command processor (request → outcome)

=============================================================================
QUICK START
=============================================================================

    import io
    from pathlib import Path
    from publicset import ClientConnection, serve

    client = ClientConnection(
        input=io.BytesIO(b"GET /index.html HTTP/1.0\\r\\n\\r\\n"),
        output=io.BytesIO(),
    )
    serve(client, Path("/srv/public"))

=============================================================================
"""

__version__ = "1.0.0"

from .config import ResponderConfig
from .core.connection import ClientConnection
from .handlers.static import Outcome, process_command
from .server import Responder, serve

__all__ = [
    "ClientConnection",
    "Outcome",
    "Responder",
    "ResponderConfig",
    "process_command",
    "serve",
    "__version__",
]
