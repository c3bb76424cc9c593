"""aideprov data models: all Pydantic v2, all frozen (immutable)."""

from aideprov.models.artifacts import ModelFileInfo, ModelPackage, TrainingSnapshot
from aideprov.models.identifiers import (
    Identifier,
    ObjectType,
    QualifierKey,
    Qualifiers,
)
from aideprov.models.lineage import LineageEdge, ModelLineage, RelationType
from aideprov.models.tree import DirectoryEntry, WalkFailure, WalkResult

__all__ = [
    # identifiers
    "ObjectType",
    "QualifierKey",
    "Qualifiers",
    "Identifier",
    # tree
    "DirectoryEntry",
    "WalkFailure",
    "WalkResult",
    # lineage
    "RelationType",
    "LineageEdge",
    "ModelLineage",
    # artifacts
    "ModelFileInfo",
    "ModelPackage",
    "TrainingSnapshot",
]
