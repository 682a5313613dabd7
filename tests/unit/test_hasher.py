"""Tests for fingerprinting and canonical hashing helpers."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from artcert.core.hasher import (
    FINGERPRINT_LENGTH,
    canonical_json_bytes,
    certificate_digest,
    fingerprint_bytes,
    fingerprint_file,
    parse_fingerprint,
    sha256_hex,
)


class TestCanonicalJson:
    def test_sorted_and_compact(self):
        assert canonical_json_bytes({"b": 1, "a": [1, 2]}) == b'{"a":[1,2],"b":1}'

    def test_key_order_irrelevant(self):
        assert canonical_json_bytes({"x": 1, "y": 2}) == canonical_json_bytes({"y": 2, "x": 1})

    def test_sha256_hex(self):
        assert sha256_hex(b"abc") == hashlib.sha256(b"abc").hexdigest()


class TestFingerprints:
    def test_fingerprint_bytes_length(self):
        assert len(fingerprint_bytes(b"scan")) == FINGERPRINT_LENGTH

    def test_fingerprint_file_matches_bytes(self, tmp_path: Path):
        data = b"reference photograph " * 10_000
        path = tmp_path / "scan.jpg"
        path.write_bytes(data)
        assert fingerprint_file(path) == fingerprint_bytes(data)

    def test_parse_plain_hex(self):
        assert parse_fingerprint("ab" * 32) == b"\xab" * 32

    def test_parse_prefixed_hex(self):
        assert parse_fingerprint("sha256:" + "01" * 32) == b"\x01" * 32

    def test_parse_does_not_check_length(self):
        assert len(parse_fingerprint("0102")) == 2

    def test_parse_rejects_non_hex(self):
        with pytest.raises(ValueError):
            parse_fingerprint("not-hex")


class TestCertificateDigest:
    def test_digest_changes_with_content(self, configured_registry, make_request):
        cid = configured_registry.issue_certificate("ST1TEST", make_request()).value
        before = certificate_digest(configured_registry.get_certificate(cid))
        configured_registry.update_certificate("ST1TEST", cid, "Cleaned", "Good", 5)
        after = certificate_digest(configured_registry.get_certificate(cid))
        assert len(before) == 64
        assert before != after
