"""Error kinds raised by the identifier core.

Every failure surfaces as an exception to the caller. The core never
retries (hashing is deterministic) and never logs; deciding whether to
skip, abort, or collect is left to the caller.
"""

from __future__ import annotations

from enum import Enum


class IdentifierError(Exception):
    """Base class for all identifier-core failures."""


class InvalidInputError(IdentifierError, ValueError):
    """Raised for inputs the core refuses to hash or encode.

    Examples: duplicate directory entry names, entry names containing NUL,
    qualifier keys outside ``[A-Za-z0-9_]``.
    """


class ResourceLimitError(IdentifierError):
    """Raised when content exceeds the configured size ceiling."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Content of {size} bytes exceeds the {limit}-byte limit")
        self.size = size
        self.limit = limit


class ParseErrorKind(str, Enum):
    """Which part of the identifier grammar was violated."""

    MALFORMED = "malformed"
    MALFORMED_QUALIFIER = "malformed_qualifier"


class ParseError(IdentifierError, ValueError):
    """Raised when text does not match the identifier grammar."""

    kind: ParseErrorKind = ParseErrorKind.MALFORMED

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"{reason}: {text!r}")
        self.text = text
        self.reason = reason


class MalformedIdentifierError(ParseError):
    """The core ``namespace:version:type:digest`` part is invalid."""

    kind = ParseErrorKind.MALFORMED


class MalformedQualifierError(ParseError):
    """The ``;key=value`` suffix is invalid."""

    kind = ParseErrorKind.MALFORMED_QUALIFIER
