"""Canonical hashing helpers for artifact fingerprints and certificate digests."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

from artcert.models.certificates import Certificate

FINGERPRINT_LENGTH = 32

_CHUNK_SIZE = 1 << 16


def canonical_json_bytes(obj: Any) -> bytes:
    """Produce canonical JSON bytes — deterministic, sorted, compact.

    - sorted keys
    - no whitespace separators (",", ":")
    - ensure_ascii=True
    - UTF-8 encoding
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def fingerprint_bytes(data: bytes) -> bytes:
    """Return the 32-byte SHA-256 fingerprint of raw artifact bytes."""
    return hashlib.sha256(data).digest()


def fingerprint_file(path: Path) -> bytes:
    """Fingerprint a file (e.g. a reference photograph or scan) in chunks."""
    digest = hashlib.sha256()
    with Path(path).open("rb") as fh:
        for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.digest()


def parse_fingerprint(value: str) -> bytes:
    """Decode a hex fingerprint, with or without a ``sha256:`` prefix.

    The length is not checked here; the registry reports a wrong length
    as an invalid fingerprint.

    Raises
    ------
    ValueError
        If *value* is not valid hex.
    """
    return bytes.fromhex(value.strip().removeprefix("sha256:"))


def certificate_digest(certificate: Certificate) -> str:
    """SHA-256 of a certificate's canonical JSON form.

    Lets a holder compare a printed certificate against the registry copy.
    """
    return sha256_hex(canonical_json_bytes(certificate.model_dump(mode="json")))
