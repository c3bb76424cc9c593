"""Leaf hashing: raw bytes -> ``swh:1:cnt`` identifier.

The digest is SHA-1 over ``b"blob " + len + NUL + data``, the same framing
git uses for blobs, so the empty byte string maps to
``swh:1:cnt:e69de29bb2d1d6434b8b29ae775ad8c2e48c5391``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from aideprov.core.errors import InvalidInputError, ResourceLimitError
from aideprov.core.hasher import canonical_json_bytes, sha1_git, sha1_hex
from aideprov.models.artifacts import ModelFileInfo, TrainingSnapshot
from aideprov.models.identifiers import Identifier, ObjectType

MODEL_FORMATS: dict[str, str] = {
    ".bin": "pytorch",
    ".pth": "pytorch",
    ".pt": "pytorch",
    ".safetensors": "safetensors",
    ".h5": "tensorflow",
    ".pb": "tensorflow",
    ".onnx": "onnx",
    ".tflite": "tensorflow_lite",
    ".json": "config",
}


def detect_model_format(filename: str) -> str:
    """Guess the serialization format of a model file from its extension."""
    return MODEL_FORMATS.get(Path(filename).suffix.lower(), "unknown")


class ContentAddresser:
    """Hashes single byte sequences into content identifiers.

    Parameters
    ----------
    max_content_bytes:
        Optional size ceiling. Larger inputs raise ``ResourceLimitError``
        before any hashing happens. ``None`` means unlimited.
    namespace, schema_version:
        Copied onto every identifier produced.
    """

    def __init__(
        self,
        max_content_bytes: int | None = None,
        *,
        namespace: str = "swh",
        schema_version: int = 1,
    ) -> None:
        self._max_content_bytes = max_content_bytes
        self._namespace = namespace
        self._schema_version = schema_version

    @property
    def max_content_bytes(self) -> int | None:
        return self._max_content_bytes

    def _check_size(self, size: int) -> None:
        if self._max_content_bytes is not None and size > self._max_content_bytes:
            raise ResourceLimitError(size, self._max_content_bytes)

    def _identifier(self, object_type: ObjectType, digest: str) -> Identifier:
        return Identifier(
            namespace=self._namespace,
            schema_version=self._schema_version,
            object_type=object_type,
            digest=digest,
        )

    # ------------------------------------------------------------------
    # Leaf content
    # ------------------------------------------------------------------

    def address_content(self, data: bytes) -> Identifier:
        """Return the content identifier of ``data``."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidInputError(
                f"Content must be bytes, got {type(data).__name__}"
            )
        payload = bytes(data)
        self._check_size(len(payload))
        return self._identifier(ObjectType.CONTENT, sha1_git("blob", payload).hex())

    def address_file(self, path: Path) -> Identifier:
        """Read a file's raw bytes and address them.

        The size limit is checked against ``stat()`` first so oversized files
        are never read. OS errors propagate unchanged.
        """
        path = Path(path)
        self._check_size(path.stat().st_size)
        return self.address_content(path.read_bytes())

    def describe_model_file(self, path: Path) -> ModelFileInfo:
        """Identifier plus size, format and mtime for a model file."""
        path = Path(path)
        stat = path.stat()
        return ModelFileInfo(
            swhid=self.address_file(path),
            filename=path.name,
            size_bytes=stat.st_size,
            model_format=detect_model_format(path.name),
            last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )

    # ------------------------------------------------------------------
    # Training snapshots
    # ------------------------------------------------------------------

    def address_training_snapshot(self, snapshot: TrainingSnapshot) -> Identifier:
        """Return a snapshot identifier for a training run.

        The digest is SHA-1 over the canonical JSON of the snapshot fields,
        so key order and whitespace in the inputs never matter.
        """
        payload = canonical_json_bytes(snapshot.model_dump(mode="json"))
        return self._identifier(ObjectType.SNAPSHOT, sha1_hex(payload))
