"""Lineage edges between identifiers for provenance graphs.

Pure construction: edges are returned to the caller, who owns storage.
"""

from __future__ import annotations

from aideprov.core.errors import InvalidInputError
from aideprov.core.identifier_codec import DEFAULT_CODEC, IdentifierCodec
from aideprov.models.identifiers import Identifier
from aideprov.models.lineage import LineageEdge, ModelLineage, RelationType


class LineageRecorder:
    """Builds ``LineageEdge`` values, validating identifiers via the codec."""

    def __init__(self, codec: IdentifierCodec = DEFAULT_CODEC) -> None:
        self._codec = codec

    def _coerce(self, value: Identifier | str) -> Identifier:
        if isinstance(value, Identifier):
            return value
        return self._codec.parse(value)

    def record(
        self,
        from_id: Identifier | str,
        to_id: Identifier | str,
        relation_type: RelationType | str,
        role: str = "",
    ) -> LineageEdge:
        """Return the edge ``from_id --relation_type--> to_id``.

        String identifiers are parsed first; parse errors propagate.
        """
        relation = (
            relation_type.value
            if isinstance(relation_type, RelationType)
            else relation_type
        )
        if not isinstance(relation, str) or not relation:
            raise InvalidInputError("relation_type must be a non-empty string")
        return LineageEdge(
            from_identifier=self._coerce(from_id),
            to_identifier=self._coerce(to_id),
            relation_type=relation,
            role=role,
        )

    def model_lineage(
        self,
        derived: Identifier | str,
        base_model: Identifier | str,
        training_code: Identifier | str,
    ) -> ModelLineage:
        """Lineage of a derived model: its base model and training code."""
        derived_id = self._coerce(derived)
        return ModelLineage(
            derived_model=derived_id,
            relationships=[
                self.record(
                    derived_id, base_model, RelationType.DERIVED_FROM, role="base_model"
                ),
                self.record(
                    derived_id, training_code, RelationType.CREATED_BY, role="training_code"
                ),
            ],
        )
