"""Digest framing helpers shared by the content and tree addressers.

Objects are framed the way git frames them before hashing::

    <kind> <decimal length> NUL <payload>

and digested with SHA-1, which keeps identifiers interoperable with the
Software Heritage ``swh:1`` scheme.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def git_object_header(kind: str, length: int) -> bytes:
    """Return the ``b"<kind> <length>\\0"`` header for a framed object."""
    return f"{kind} {length}".encode("ascii") + b"\x00"


def sha1_git(kind: str, payload: bytes) -> bytes:
    """Raw 20-byte SHA-1 of ``payload`` framed with a ``kind`` header."""
    h = hashlib.sha1()
    h.update(git_object_header(kind, len(payload)))
    h.update(payload)
    return h.digest()


def sha1_hex(data: bytes) -> str:
    """Return the SHA-1 hex digest of raw bytes (no framing)."""
    return hashlib.sha1(data).hexdigest()


def canonical_json_bytes(obj: Any) -> bytes:
    """Produce canonical JSON bytes: deterministic, sorted, compact.

    - sorted keys
    - no whitespace separators (",", ":")
    - ensure_ascii=True
    - UTF-8 encoding
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")
