"""aideprov: content-derived identifiers for AI model provenance.

Computes ``swh:1`` identifiers (SWHIDs) for files, directory trees and
training snapshots, and records lineage edges between them:
  - Leaf hashing with git blob framing (ContentAddresser)
  - Merkle directory composition with canonical byte-wise ordering
    (TreeAddresser, DirectoryWalker)
  - Strict identifier grammar and percent-escaped qualifiers
    (IdentifierCodec, QualifierCodec)
  - Provenance edges between identifiers (LineageRecorder)
"""

__version__ = "0.1.0"
__description__ = "Content-derived SWHID identifiers for AI model provenance"

from aideprov.core import (
    DEFAULT_CODEC,
    ContentAddresser,
    DirectoryWalker,
    IdentifierCodec,
    LineageRecorder,
    QualifierCodec,
    TreeAddresser,
)
from aideprov.models import DirectoryEntry, Identifier, LineageEdge, ObjectType

__all__ = [
    "ContentAddresser",
    "TreeAddresser",
    "IdentifierCodec",
    "QualifierCodec",
    "LineageRecorder",
    "DirectoryWalker",
    "DEFAULT_CODEC",
    "Identifier",
    "ObjectType",
    "DirectoryEntry",
    "LineageEdge",
    "__version__",
]
