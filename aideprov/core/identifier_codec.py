"""Textual identifier grammar and its round-trip codec.

Grammar (ASCII)::

    identifier := namespace ":" version ":" type ":" digest
    namespace  := "swh"
    version    := 1*DIGIT
    type       := "cnt" | "dir" | "rev" | "rel" | "snp"
    digest     := 40 HEXDIG            (lowercase only)

An identifier may be followed by a qualifier suffix (see
``qualifier_codec``). Uppercase hex is rejected rather than normalized so
third-party identifiers round-trip bit for bit.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field

from aideprov.core.errors import MalformedIdentifierError, ParseError
from aideprov.core.qualifier_codec import QualifierCodec
from aideprov.models.identifiers import Identifier, ObjectType

_VERSION_RE = re.compile(r"[0-9]+")
_DIGEST_RE = re.compile(r"[0-9a-f]{40}")
_TYPE_TAGS = {t.value: t for t in ObjectType}


class IdentifierCodec(BaseModel):
    """Formats and parses identifiers for one namespace and schema version.

    The codec is an immutable value: construct it once and pass it to
    whoever needs it. All methods are pure.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = "swh"
    schema_version: int = Field(default=1, gt=0)

    @property
    def qualifier_codec(self) -> QualifierCodec:
        return QualifierCodec(self)

    # ------------------------------------------------------------------
    # Format
    # ------------------------------------------------------------------

    def format_core(self, identifier: Identifier) -> str:
        """Render ``namespace:version:type:digest`` without qualifiers."""
        return ":".join(
            [
                self.namespace,
                str(self.schema_version),
                identifier.object_type.value,
                identifier.digest.lower(),
            ]
        )

    def format(self, identifier: Identifier) -> str:
        """Render an identifier, including any qualifiers it carries."""
        return self.format_core(identifier) + self.qualifier_codec.encode(
            identifier.qualifiers
        )

    # ------------------------------------------------------------------
    # Parse
    # ------------------------------------------------------------------

    def parse_core(self, text: str) -> Identifier:
        """Parse an unqualified identifier. Any suffix is malformed."""
        parts = text.split(":")
        if len(parts) != 4:
            raise MalformedIdentifierError(
                text, f"Expected 4 ':'-separated fields, got {len(parts)}"
            )
        namespace, version, tag, digest = parts

        if namespace != self.namespace:
            raise MalformedIdentifierError(
                text, f"Namespace must be {self.namespace!r}"
            )
        if not _VERSION_RE.fullmatch(version):
            raise MalformedIdentifierError(text, "Version is not numeric")
        if version != str(self.schema_version):
            raise MalformedIdentifierError(
                text, f"Unsupported schema version {version}"
            )
        object_type = _TYPE_TAGS.get(tag)
        if object_type is None:
            raise MalformedIdentifierError(text, f"Unknown object type {tag!r}")
        if not _DIGEST_RE.fullmatch(digest):
            raise MalformedIdentifierError(
                text, "Digest must be exactly 40 lowercase hex characters"
            )

        return Identifier(
            namespace=self.namespace,
            schema_version=self.schema_version,
            object_type=object_type,
            digest=digest,
        )

    def parse(self, text: str) -> Identifier:
        """Parse a qualified or unqualified identifier string."""
        if not isinstance(text, str):
            raise MalformedIdentifierError(repr(text), "Identifier must be a string")
        core, sep, _ = text.partition(";")
        identifier = self.parse_core(core)
        if not sep:
            return identifier
        _, qualifiers = self.qualifier_codec.detach(text)
        return Identifier(
            namespace=identifier.namespace,
            schema_version=identifier.schema_version,
            object_type=identifier.object_type,
            digest=identifier.digest,
            qualifiers=qualifiers,
        )

    def is_valid(self, text: str) -> bool:
        """True if ``text`` parses under this codec."""
        try:
            self.parse(text)
        except ParseError:
            return False
        return True


DEFAULT_CODEC = IdentifierCodec()
