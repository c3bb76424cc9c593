"""Lineage edge models: pure relations between identifiers."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from aideprov.models.identifiers import Identifier


class RelationType(str, Enum):
    """Well-known relation types. The set is open: any string is allowed."""

    DERIVED_FROM = "derived_from"
    CREATED_BY = "created_by"
    TRAINED_WITH = "trained_with"
    FINE_TUNED_FROM = "fine_tuned_from"


class LineageEdge(BaseModel):
    """A directed edge ``from_identifier --relation_type--> to_identifier``.

    Identifiers are held by value; the edge owns nothing it references.
    """

    model_config = ConfigDict(frozen=True)

    from_identifier: Identifier
    to_identifier: Identifier
    relation_type: str
    role: str = ""


class ModelLineage(BaseModel):
    """Lineage record for a derived AI model."""

    model_config = ConfigDict(frozen=True)

    derived_model: Identifier
    relationships: list[LineageEdge]
    provenance_type: str = "ai_model_lineage"
