"""
=============================================================================
PUBLICSET CLI ENTRY POINT
=============================================================================

    # Serve files from /srv/public for the client on stdin/stdout
    publicset /srv/public

    # Same, as a module
    python -m publicset /srv/public

    # Try it by hand
    printf 'GET /index.html HTTP/1.0\\r\\n\\r\\n' | publicset /srv/public

=============================================================================
SUPERSERVER EXAMPLES
=============================================================================

    # /etc/inetd.conf
    http stream tcp nowait www /usr/local/bin/publicset publicset /srv/public

    # s6 / ucspi
    s6-tcpserver 0.0.0.0 80 publicset /srv/public

=============================================================================
EXIT STATUS
=============================================================================

    0   Request handled, whatever HTTP status the client got
    2   Internal failure. "BUG:<message>" is written to stderr and the
        response may be incomplete.

=============================================================================
"""

import argparse
import logging
import sys
from typing import BinaryIO, Optional, Sequence

from . import __version__
from .config import LOG_LEVELS, ResponderConfig
from .server import Responder, setup_logging


logger = logging.getLogger("publicset")


EXIT_OK = 0
EXIT_BUG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="publicset",
        description="Answer one HTTP/1.0 GET request on stdin/stdout with a file from DOCROOT",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  publicset /srv/public                     # Serve from /srv/public
  publicset -l INFO /srv/public             # Log one access line to stderr
  publicset                                 # No docroot: every request gets 500
        """
    )

    parser.add_argument(
        "docroot",
        nargs="?",
        default=None,
        help="Directory to serve files from (default: $PUBLICSET_DOCROOT)"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level on stderr (default: $PUBLICSET_LOG_LEVEL or WARNING)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"publicset {__version__}"
    )

    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:]).
        stdin: Request stream (default: sys.stdin.buffer).
        stdout: Response stream (default: sys.stdout.buffer).

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    try:
        config = ResponderConfig.from_env()
        if args.docroot is not None:
            config.docroot = args.docroot
        if args.log_level is not None:
            config.log_level = args.log_level

        setup_logging(config.log_level)
        responder = Responder(config)
        responder.handle(
            stdin if stdin is not None else sys.stdin.buffer,
            stdout if stdout is not None else sys.stdout.buffer,
        )
    except Exception as e:
        logger.debug("Unhandled failure", exc_info=True)
        print(f"BUG:{e}", file=sys.stderr)
        return EXIT_BUG

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
