"""Canonical byte encoding and hashing helpers.

Two textual forms exist for a byte sequence:

- the *canonical* form written into metadata documents: ``0x`` followed by
  lowercase hex, except that an empty sequence is the empty string;
- the *display* form used in logs and diagnostics: always ``0x`` prefixed,
  so an empty sequence displays as ``0x``.

The two forms disagree on empty input and must not be interchanged.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

CODE_HASH_SIZE = 32


def serialize_as_byte_str(data: bytes) -> str:
    """Return the canonical hex string for ``data``.

    Empty input yields ``""`` without the ``0x`` prefix.
    """
    if not data:
        return ""
    return f"0x{bytes(data).hex()}"


def display_bytes(data: bytes) -> str:
    """Return the ``0x``-prefixed display form of ``data``."""
    return f"0x{bytes(data).hex()}"


def blake2_256(data: bytes) -> bytes:
    """Return the 32-byte BLAKE2b digest of raw bytes."""
    return hashlib.blake2b(data, digest_size=CODE_HASH_SIZE).digest()


def canonical_json_bytes(obj: Any, indent: int | None = None) -> bytes:
    """Produce deterministic JSON bytes for a metadata document.

    Key order is preserved rather than sorted: the document layout
    (``metadataVersion``, ``source``, ``contract``, ...) is part of the
    output contract.
    - compact separators when ``indent`` is None
    - ensure_ascii=False, UTF-8 encoding
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        obj, indent=indent, separators=separators, ensure_ascii=False
    ).encode("utf-8")
