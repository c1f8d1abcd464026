"""
=============================================================================
RESPONDER CONFIGURATION
=============================================================================

Configuration for one responder process.

=============================================================================
SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   1. Defaults        ResponderConfig()                               │
    │   2. Environment     ResponderConfig.from_env()                      │
    │   3. Command line    publicset [--log-level LEVEL] [DOCROOT]         │
    │                                                                      │
    │   Later sources override earlier ones.                               │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The environment matters because superservers usually start the
responder with a fixed argument vector, while variables can be set per
service (e.g. "env = PUBLICSET_LOG_LEVEL=INFO" in xinetd).

=============================================================================
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ResponderConfig:
    """
    Responder configuration.

    Example:
        config = ResponderConfig(docroot="/srv/public", log_level="INFO")
        config.validate()
        docroot = config.resolve_docroot()
    """

    docroot: Optional[str] = None
    """
    Directory files are served from.
    None, or anything that is not an existing directory, makes every
    request fail with 500.
    """

    log_level: str = "WARNING"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    Logs go to stderr. WARNING keeps a superserver's log quiet;
    INFO adds one access line per request.
    """

    buffer_size: int = 64 * 1024
    """
    Chunk size in bytes used when copying a file to the client.
    """

    @classmethod
    def from_env(cls) -> "ResponderConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        PUBLICSET_DOCROOT       Document root (default: none)
        PUBLICSET_LOG_LEVEL     Logging level (default: WARNING)
        PUBLICSET_BUFFER_SIZE   Copy chunk size in bytes (default: 65536)

        =====================================================================
        """
        return cls(
            docroot=os.getenv("PUBLICSET_DOCROOT") or None,
            log_level=os.getenv("PUBLICSET_LOG_LEVEL", "WARNING"),
            buffer_size=int(os.getenv("PUBLICSET_BUFFER_SIZE", str(64 * 1024))),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        A bad docroot is not an error here: it is reported to the client
        as 500 instead.

        Raises:
            ValueError: On an unknown log level or a tiny buffer size.
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. "
                f"Must be one of {', '.join(LOG_LEVELS)}."
            )

        if self.buffer_size < 1024:
            raise ValueError("buffer_size must be >= 1024")

    def resolve_docroot(self) -> Optional[Path]:
        """
        Turn the configured docroot into an absolute directory path.

        Returns:
            The absolute path, or None if no docroot was given or it does
            not name an existing directory.
        """
        if not self.docroot:
            logger.warning("No document root configured, answering 500")
            return None

        path = Path(self.docroot)
        if not path.is_dir():
            logger.warning(f"Document root is not a directory: {self.docroot}")
            return None

        return path.absolute()
