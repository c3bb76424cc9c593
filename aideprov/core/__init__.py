"""Identifier core: hashing, tree composition, text codecs, lineage."""

from aideprov.core.content_addresser import ContentAddresser, detect_model_format
from aideprov.core.directory_walker import DirectoryWalker
from aideprov.core.errors import (
    IdentifierError,
    InvalidInputError,
    MalformedIdentifierError,
    MalformedQualifierError,
    ParseError,
    ParseErrorKind,
    ResourceLimitError,
)
from aideprov.core.identifier_codec import DEFAULT_CODEC, IdentifierCodec
from aideprov.core.lineage import LineageRecorder
from aideprov.core.qualifier_codec import QualifierCodec
from aideprov.core.tree_addresser import TreeAddresser

__all__ = [
    "ContentAddresser",
    "TreeAddresser",
    "IdentifierCodec",
    "QualifierCodec",
    "DEFAULT_CODEC",
    "LineageRecorder",
    "DirectoryWalker",
    "detect_model_format",
    # errors
    "IdentifierError",
    "InvalidInputError",
    "ResourceLimitError",
    "ParseError",
    "ParseErrorKind",
    "MalformedIdentifierError",
    "MalformedQualifierError",
]
