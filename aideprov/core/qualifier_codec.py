"""Encoding and decoding of the ``;key=value`` qualifier suffix.

Grammar::

    qualified := identifier (";" key "=" value)*
    key       := 1*(ALPHA / DIGIT / "_")
    value     := percent-escaped UTF-8 text

Values are escaped byte-wise: everything outside ``A-Z a-z 0-9 _ . - ~``
becomes ``%XX``. Qualifier order is whatever the caller gave and survives
a round trip.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING
from urllib.parse import quote, unquote_to_bytes

from aideprov.core.errors import InvalidInputError, MalformedQualifierError
from aideprov.models.identifiers import QUALIFIER_KEY_RE, Identifier

if TYPE_CHECKING:
    from aideprov.core.identifier_codec import IdentifierCodec

_VALUE_RE = re.compile(r"(?:[^%=;]|%[0-9A-Fa-f]{2})*")


def encode_value(value: str) -> str:
    """Percent-encode a qualifier value (UTF-8, nothing reserved left raw)."""
    return quote(value, safe="")


def decode_value(raw: str, *, text: str = "") -> str:
    """Percent-decode a qualifier value, rejecting anything ambiguous."""
    if not _VALUE_RE.fullmatch(raw):
        raise MalformedQualifierError(
            text or raw, f"Unescaped reserved character in value {raw!r}"
        )
    try:
        value = unquote_to_bytes(raw).decode("utf-8")
    except UnicodeDecodeError:
        raise MalformedQualifierError(
            text or raw, f"Value {raw!r} is not percent-encoded UTF-8"
        ) from None
    if not value:
        raise MalformedQualifierError(text or raw, "Empty qualifier value")
    return value


class QualifierCodec:
    """Attaches qualifiers to identifiers and splits them off again.

    Parameters
    ----------
    codec:
        The identifier codec used to render the core part.
    """

    def __init__(self, codec: IdentifierCodec) -> None:
        self._codec = codec

    def encode(self, qualifiers: Mapping[str, str]) -> str:
        """Render qualifiers as ``;k=v;k=v`` (empty string for none)."""
        parts = []
        for key, value in qualifiers.items():
            if not isinstance(key, str) or not QUALIFIER_KEY_RE.fullmatch(key):
                raise InvalidInputError(f"Invalid qualifier key {key!r}")
            if not isinstance(value, str) or not value:
                raise InvalidInputError(
                    f"Qualifier {key!r} needs a non-empty string value"
                )
            parts.append(f";{key}={encode_value(value)}")
        return "".join(parts)

    def attach(self, identifier: Identifier, qualifiers: Mapping[str, str]) -> str:
        """Return ``identifier``'s core form followed by ``qualifiers``.

        The map given here replaces any qualifiers the identifier already
        carries.
        """
        return self._codec.format_core(identifier) + self.encode(qualifiers)

    def detach(self, text: str) -> tuple[str, dict[str, str]]:
        """Split ``text`` into its core string and ordered qualifier map.

        The core string is returned verbatim; validating it is the
        identifier codec's job.
        """
        core, sep, suffix = text.partition(";")
        qualifiers: dict[str, str] = {}
        if not sep:
            return core, qualifiers

        for segment in suffix.split(";"):
            if not segment:
                raise MalformedQualifierError(text, "Empty qualifier segment")
            key, eq, raw = segment.partition("=")
            if not eq:
                raise MalformedQualifierError(
                    text, f"Qualifier segment {segment!r} has no '='"
                )
            if not QUALIFIER_KEY_RE.fullmatch(key):
                raise MalformedQualifierError(text, f"Invalid qualifier key {key!r}")
            if key in qualifiers:
                raise MalformedQualifierError(text, f"Duplicate qualifier key {key!r}")
            qualifiers[key] = decode_value(raw, text=text)
        return core, qualifiers
