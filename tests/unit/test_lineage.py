"""Tests for LineageRecorder: pure edge construction."""

from __future__ import annotations

import pytest

from aideprov.core.errors import InvalidInputError, MalformedIdentifierError
from aideprov.core.lineage import LineageRecorder
from aideprov.models.identifiers import Identifier, ObjectType
from aideprov.models.lineage import ModelLineage, RelationType

DERIVED = "swh:1:dir:1111111111111111111111111111111111111111"
BASE = "swh:1:dir:2222222222222222222222222222222222222222"
CODE = "swh:1:rev:3333333333333333333333333333333333333333"


@pytest.fixture
def recorder() -> LineageRecorder:
    return LineageRecorder()


class TestRecord:
    def test_from_strings(self, recorder: LineageRecorder):
        edge = recorder.record(DERIVED, BASE, "derived_from")
        assert str(edge.from_identifier) == DERIVED
        assert str(edge.to_identifier) == BASE
        assert edge.relation_type == "derived_from"
        assert edge.role == ""

    def test_from_identifiers(self, recorder: LineageRecorder):
        a = Identifier(object_type=ObjectType.CONTENT, digest="a" * 40)
        b = Identifier(object_type=ObjectType.CONTENT, digest="b" * 40)
        edge = recorder.record(a, b, RelationType.TRAINED_WITH)
        assert edge.from_identifier == a
        assert edge.relation_type == "trained_with"

    def test_open_relation_types(self, recorder: LineageRecorder):
        edge = recorder.record(DERIVED, BASE, "quantized_from")
        assert edge.relation_type == "quantized_from"

    def test_qualified_identifiers_kept(self, recorder: LineageRecorder):
        edge = recorder.record(DERIVED + ";path=%2Fw.bin", BASE, "fine_tuned_from")
        assert edge.from_identifier.qualifiers == {"path": "/w.bin"}

    def test_invalid_identifier_propagates(self, recorder: LineageRecorder):
        with pytest.raises(MalformedIdentifierError):
            recorder.record("swh:1:dir:XYZ", BASE, "derived_from")

    def test_empty_relation_rejected(self, recorder: LineageRecorder):
        with pytest.raises(InvalidInputError):
            recorder.record(DERIVED, BASE, "")

    def test_edge_is_frozen(self, recorder: LineageRecorder):
        edge = recorder.record(DERIVED, BASE, "derived_from")
        with pytest.raises(Exception):
            edge.relation_type = "created_by"


class TestModelLineage:
    def test_relationships(self, recorder: LineageRecorder):
        lineage = recorder.model_lineage(DERIVED, BASE, CODE)
        assert str(lineage.derived_model) == DERIVED
        assert lineage.provenance_type == "ai_model_lineage"
        assert [(e.relation_type, e.role, str(e.to_identifier)) for e in lineage.relationships] == [
            ("derived_from", "base_model", BASE),
            ("created_by", "training_code", CODE),
        ]
        assert all(str(e.from_identifier) == DERIVED for e in lineage.relationships)

    def test_json_serializable(self, recorder: LineageRecorder):
        payload = recorder.model_lineage(DERIVED, BASE, CODE).model_dump(mode="json")
        assert payload["derived_model"] == DERIVED
        assert payload["relationships"][0]["to_identifier"] == BASE
        assert payload["relationships"][1]["to_identifier"] == CODE

    def test_json_round_trip(self, recorder: LineageRecorder):
        lineage = recorder.model_lineage(DERIVED, BASE, CODE)
        assert ModelLineage.model_validate_json(lineage.model_dump_json()) == lineage
