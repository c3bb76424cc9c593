"""Merkle composition: named child identifiers -> ``swh:1:dir`` identifier.

The manifest is the git tree encoding restricted to two modes::

    <mode> SP <name> NUL <20 raw digest bytes>     (one record per entry)

Records are sorted by the raw bytes of the entry name (UTF-8, with
undecodable on-disk bytes passed through). The sort is part of the hash
contract: any other ordering yields a different digest.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from aideprov.core.errors import InvalidInputError
from aideprov.core.hasher import sha1_git
from aideprov.models.identifiers import Identifier, ObjectType
from aideprov.models.tree import DirectoryEntry

DIRECTORY_MODE = b"40000"
FILE_MODE = b"100644"


def name_bytes(name: str) -> bytes:
    """On-disk bytes of an entry name.

    Names decoded by ``os.scandir`` carry undecodable bytes as surrogate
    escapes; they are hashed as the raw bytes, as git does.
    """
    try:
        return name.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raise InvalidInputError(
            f"Entry name {name!r} cannot be encoded as bytes"
        ) from None


def tree_manifest(entries: Iterable[DirectoryEntry]) -> bytes:
    """Build the canonical, sorted manifest for a set of entries.

    Raises ``InvalidInputError`` if two entries share a name once both are
    NFC-normalized.
    """
    entries = list(entries)
    seen: dict[str, str] = {}
    for entry in entries:
        normalized = unicodedata.normalize("NFC", entry.name)
        if normalized in seen:
            raise InvalidInputError(
                f"Duplicate entry name {entry.name!r} "
                f"(collides with {seen[normalized]!r})"
            )
        seen[normalized] = entry.name

    keyed = sorted(((name_bytes(e.name), e) for e in entries), key=lambda p: p[0])
    records = []
    for raw_name, entry in keyed:
        mode = DIRECTORY_MODE if entry.is_composite else FILE_MODE
        records.append(
            mode + b" " + raw_name + b"\x00" + entry.identifier.digest_bytes
        )
    return b"".join(records)


class TreeAddresser:
    """Folds child identifiers into a directory identifier.

    Stateless: each call is a pure function of the entries passed in, so
    one instance may be shared across threads.
    """

    def __init__(self, *, namespace: str = "swh", schema_version: int = 1) -> None:
        self._namespace = namespace
        self._schema_version = schema_version

    def address_tree(self, entries: Iterable[DirectoryEntry]) -> Identifier:
        """Return the directory identifier for ``entries`` (any order)."""
        digest = sha1_git("tree", tree_manifest(entries))
        return Identifier(
            namespace=self._namespace,
            schema_version=self._schema_version,
            object_type=ObjectType.DIRECTORY,
            digest=digest.hex(),
        )
