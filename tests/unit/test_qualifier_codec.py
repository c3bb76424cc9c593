"""Tests for QualifierCodec: escaping, ordering, and malformed suffixes."""

from __future__ import annotations

import pytest

from aideprov.core.errors import InvalidInputError, MalformedQualifierError
from aideprov.core.identifier_codec import IdentifierCodec
from aideprov.core.qualifier_codec import QualifierCodec, decode_value, encode_value
from aideprov.models.identifiers import Identifier, ObjectType

DIGEST = "94a9ed024d3859793618152ea559a168bbcbb5e2"
CORE = f"swh:1:dir:{DIGEST}"


@pytest.fixture
def qualifiers(codec: IdentifierCodec) -> QualifierCodec:
    return codec.qualifier_codec


class TestAttach:
    def test_reference_vector(self, codec: IdentifierCodec, qualifiers: QualifierCodec):
        identifier = codec.parse(CORE)
        qualified = qualifiers.attach(
            identifier, {"origin": "https://example.org/m", "path": "/weights.bin"}
        )
        assert qualified == (
            f"{CORE};origin=https%3A%2F%2Fexample.org%2Fm;path=%2Fweights.bin"
        )

    def test_caller_order_preserved(self, codec: IdentifierCodec, qualifiers: QualifierCodec):
        identifier = codec.parse(CORE)
        qualified = qualifiers.attach(identifier, {"path": "p", "origin": "o"})
        assert qualified == f"{CORE};path=p;origin=o"

    def test_empty_map_gives_core(self, codec: IdentifierCodec, qualifiers: QualifierCodec):
        assert qualifiers.attach(codec.parse(CORE), {}) == CORE

    def test_replaces_carried_qualifiers(self, qualifiers: QualifierCodec):
        identifier = Identifier(
            object_type=ObjectType.DIRECTORY, digest=DIGEST, qualifiers={"visit": "v"}
        )
        assert qualifiers.attach(identifier, {"path": "p"}) == f"{CORE};path=p"

    def test_core_rendered_by_given_codec(self):
        codec = IdentifierCodec(schema_version=2)
        identifier = codec.parse(f"swh:2:dir:{DIGEST}")
        qualified = QualifierCodec(codec).attach(identifier, {"path": "p"})
        assert qualified == f"swh:2:dir:{DIGEST};path=p"

    @pytest.mark.parametrize("value", [";", "=", "%", "a;b=c%d"])
    def test_reserved_characters_escaped(self, value: str):
        encoded = encode_value(value)
        assert ";" not in encoded
        assert "=" not in encoded
        assert encoded.count("%") == sum(value.count(c) for c in ";=%")

    def test_utf8_escaped_bytewise(self):
        assert encode_value("ü") == "%C3%BC"

    @pytest.mark.parametrize("key", ["", "bad-key", "sp ace", "a=b", "ü"])
    def test_invalid_key_rejected(self, codec: IdentifierCodec, qualifiers: QualifierCodec, key: str):
        with pytest.raises(InvalidInputError):
            qualifiers.attach(codec.parse(CORE), {key: "v"})

    def test_empty_value_rejected(self, codec: IdentifierCodec, qualifiers: QualifierCodec):
        with pytest.raises(InvalidInputError):
            qualifiers.attach(codec.parse(CORE), {"origin": ""})


class TestDetach:
    def test_unqualified(self, qualifiers: QualifierCodec):
        assert qualifiers.detach(CORE) == (CORE, {})

    def test_decodes_left_to_right(self, qualifiers: QualifierCodec):
        core, parsed = qualifiers.detach(f"{CORE};b=2;a=%2F1;c=%C3%BC")
        assert core == CORE
        assert list(parsed.items()) == [("b", "2"), ("a", "/1"), ("c", "ü")]

    def test_lowercase_escapes_accepted(self, qualifiers: QualifierCodec):
        _, parsed = qualifiers.detach(f"{CORE};path=%2fa")
        assert parsed == {"path": "/a"}

    def test_round_trip(self, codec: IdentifierCodec, qualifiers: QualifierCodec):
        identifier = codec.parse(CORE)
        q = {
            "origin": "https://example.org/ü?x=1&y=2",
            "path": "/dir with space/file;v=1%",
            "lines": "9-15",
            "anchor": "swh:1:rev:" + DIGEST,
        }
        core, parsed = qualifiers.detach(qualifiers.attach(identifier, q))
        assert core == codec.format(identifier)
        assert list(parsed.items()) == list(q.items())

    @pytest.mark.parametrize(
        "suffix",
        [
            ";origin",              # no '='
            ";",                    # empty segment
            ";a=1;",                # trailing empty segment
            ";a=1;;b=2",            # empty middle segment
            ";=value",              # empty key
            ";bad-key=1",           # disallowed key character
            ";a=b=c",               # raw '=' in value
            ";a=%zz",               # bad escape
            ";a=100%",              # dangling '%'
            ";a=%FF",               # not UTF-8
            ";a=",                  # empty value
            ";a=1;a=2",             # duplicate key
        ],
    )
    def test_malformed(self, qualifiers: QualifierCodec, suffix: str):
        with pytest.raises(MalformedQualifierError):
            qualifiers.detach(CORE + suffix)

    def test_decode_value_direct(self):
        assert decode_value("a%3Bb%3Dc%25") == "a;b=c%"
