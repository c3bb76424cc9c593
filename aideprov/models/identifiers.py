"""Identifier value models (swh:1 scheme).

Identifiers are frozen values: produced once per input and compared or
stored by their canonical string form.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    GetCoreSchemaHandler,
    field_validator,
    model_serializer,
    model_validator,
)
from pydantic_core import core_schema

QUALIFIER_KEY_RE = re.compile(r"[A-Za-z0-9_]+")


class ObjectType(str, Enum):
    """Closed set of object types, each with a fixed 3-character tag."""

    CONTENT = "cnt"
    DIRECTORY = "dir"
    REVISION = "rev"
    RELEASE = "rel"
    SNAPSHOT = "snp"


class QualifierKey(str, Enum):
    """Well-known qualifier keys. Any key matching the grammar is accepted."""

    ORIGIN = "origin"
    VISIT = "visit"
    ANCHOR = "anchor"
    PATH = "path"
    LINES = "lines"


class Qualifiers(Mapping[str, str]):
    """Read-only qualifier map that keeps insertion order.

    Hashable, so identifiers carrying qualifiers can be set members and
    dict keys. Equality ignores order, like ``dict``.
    """

    __slots__ = ("_items",)

    def __init__(
        self, items: Mapping[str, str] | Iterable[tuple[str, str]] = ()
    ) -> None:
        self._items = dict(items)

    def __getitem__(self, key: str) -> str:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __repr__(self) -> str:
        return f"Qualifiers({self._items!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_before_validator_function(
            _mapping_as_dict,
            core_schema.no_info_after_validator_function(
                cls,
                core_schema.dict_schema(
                    core_schema.str_schema(), core_schema.str_schema()
                ),
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(dict),
        )


def _mapping_as_dict(value: Any) -> Any:
    return dict(value) if isinstance(value, Mapping) else value


class Identifier(BaseModel):
    """A content-derived identifier: ``swh:1:<type>:<digest>[;k=v...]``.

    ``digest`` is always 40 lowercase hex characters (160-bit SHA-1).
    ``qualifiers`` keep insertion order; they annotate the identifier but
    are not part of its digest.

    Identifiers serialize as their canonical string, and validating a
    string parses it (``swh`` namespace, schema version 1).
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = "swh"
    schema_version: int = Field(default=1, gt=0)
    object_type: ObjectType
    digest: str = Field(pattern=r"^[0-9a-f]{40}$")
    qualifiers: Qualifiers = Field(default_factory=Qualifiers)

    @model_validator(mode="before")
    @classmethod
    def _parse_text(cls, data: Any) -> Any:
        if not isinstance(data, str):
            return data
        from aideprov.core.identifier_codec import DEFAULT_CODEC

        parsed = DEFAULT_CODEC.parse(data)
        return {name: getattr(parsed, name) for name in cls.model_fields}

    @field_validator("qualifiers")
    @classmethod
    def _check_qualifiers(cls, value: Qualifiers) -> Qualifiers:
        for key, val in value.items():
            if not QUALIFIER_KEY_RE.fullmatch(key):
                raise ValueError(f"invalid qualifier key {key!r}")
            if not val:
                raise ValueError(f"empty value for qualifier {key!r}")
        return value

    @model_serializer
    def _as_text(self) -> str:
        return str(self)

    @property
    def digest_bytes(self) -> bytes:
        """The 20 raw bytes behind the hex digest."""
        return bytes.fromhex(self.digest)

    @property
    def is_qualified(self) -> bool:
        return bool(self.qualifiers)

    def core(self) -> Identifier:
        """Return this identifier with its qualifiers dropped."""
        if not self.qualifiers:
            return self
        return Identifier(
            namespace=self.namespace,
            schema_version=self.schema_version,
            object_type=self.object_type,
            digest=self.digest,
        )

    def __str__(self) -> str:
        from aideprov.core.identifier_codec import IdentifierCodec

        return IdentifierCodec(
            namespace=self.namespace, schema_version=self.schema_version
        ).format(self)
