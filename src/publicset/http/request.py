"""
=============================================================================
HTTP REQUEST LINE MATCHER
=============================================================================

Splits an HTTP/1.0 request line into tokens and checks each token against
a small declarative pattern.

=============================================================================
REQUEST LINE ANATOMY
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │    GET /index.html HTTP/1.0\r\n                                     │
    │    ─┬─ ─────┬───── ────┬───                                         │
    │     │       │          │                                             │
    │   Method   Path     Protocol                                         │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Only the request line matters. Header lines that follow it are drained
and discarded by the server.

=============================================================================
PATTERNS
=============================================================================

    method    GET                  exact, case-insensitive
    path      /[-.\\w]+             slash, then letters/digits/_/-/.
    protocol  HTTP/1\\.[01]         HTTP/1.0 or HTTP/1.1

The path grammar has no "/" after the leading one, so only files directly
inside the document root are reachable. Query strings and percent-escapes
are not part of the grammar either.

Each pattern must match the WHOLE token (fullmatch), so "GETX" is not a
GET and "/a b" never survives tokenizing anyway.

=============================================================================
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


# =============================================================================
# COMPILED PATTERNS
# =============================================================================
#
# Compiled once at import. re.ASCII keeps \w to [A-Za-z0-9_] so that
# non-ASCII letters are rejected regardless of the interpreter's defaults.
#
_FLAGS = re.IGNORECASE | re.ASCII

# Token separators for the request line: ASCII space, tab, LF, VT, FF and CR.
# str.split() would also split on \x1c-\x1f, \x85 and \xa0 after the
# ISO-8859-1 decode.
_WHITESPACE = " \t\n\v\f\r"
_SEPARATORS = re.compile(r"[ \t\n\v\f\r]+")

PATTERNS: Mapping[str, "re.Pattern[str]"] = MappingProxyType({
    "method": re.compile(r"GET", _FLAGS),
    "path": re.compile(r"/[-.\w]+", _FLAGS),
    "protocol": re.compile(r"HTTP/1\.[01]", _FLAGS),
})


def matches(token: str, pattern_name: str) -> bool:
    """
    Check a token against one of the named patterns.

    Args:
        token: The token to check.
        pattern_name: "method", "path" or "protocol".

    Returns:
        True if the whole token matches, ignoring case.

    Raises:
        KeyError: For an unknown pattern name.
    """
    return PATTERNS[pattern_name].fullmatch(token) is not None


@dataclass(frozen=True)
class RequestLine:
    """
    The tokens of one request line.

    Any token may be None when the line was too short. Extra tokens
    after the protocol are ignored.
    """

    method: Optional[str] = None
    path: Optional[str] = None
    protocol: Optional[str] = None

    def __str__(self) -> str:
        return " ".join(t for t in (self.method, self.path, self.protocol) if t)


def tokenize(line: str) -> RequestLine:
    """
    Split a request line on whitespace.

    Runs of ASCII whitespace (space, tab, CR, LF, VT, FF) separate
    tokens. Other bytes, such as a non-breaking space, stay inside the
    token they appear in.

        >>> tokenize("GET /a.txt HTTP/1.0\\r")
        RequestLine(method='GET', path='/a.txt', protocol='HTTP/1.0')
        >>> tokenize("GET")
        RequestLine(method='GET', path=None, protocol=None)
    """
    stripped = line.strip(_WHITESPACE)
    tokens = _SEPARATORS.split(stripped, maxsplit=3)[:3] if stripped else []
    tokens += [None] * (3 - len(tokens))
    return RequestLine(*tokens)
