"""Tests for the JSON snapshot store used by the CLI host."""

from __future__ import annotations

from pathlib import Path

import pytest

from artcert.config import RegistryConfig
from artcert.core.snapshot_store import (
    RegistrySnapshot,
    SnapshotCorruptError,
    SnapshotStore,
)


@pytest.fixture
def store(tmp_path: Path) -> SnapshotStore:
    return SnapshotStore(tmp_path / "nested" / "registry.json")


class TestSnapshotStore:
    def test_missing_file_yields_fresh_state(self, store: SnapshotStore):
        snapshot = store.load(RegistryConfig(authority_principal="ST1AUTH", issuance_fee=9))
        assert store.exists() is False
        assert snapshot.state.authority_principal == "ST1AUTH"
        assert snapshot.state.issuance_fee == 9
        assert snapshot.clock_height == 0
        assert snapshot.fee_transfers == []

    def test_round_trip_preserves_registry(self, store: SnapshotStore, make_request):
        registry, clock, fees = store.open_registry(store.load())
        clock.advance(1000)
        registry.set_registry_contract("ST1TEST", "ST2REG")
        registry.set_provenance_contract("ST1TEST", "ST3PROV")
        cid = registry.issue_certificate("ST1TEST", make_request(fill=4)).unwrap()
        registry.update_certificate("ST1TEST", cid, "Cleaned", "Good", 7)
        store.save(store.capture(registry, clock, fees))

        restored, restored_clock, restored_fees = store.open_registry(store.load())
        assert restored_clock.now() == 1000
        assert restored.get_certificate_count() == 1
        assert restored.get_certificate(cid) == registry.get_certificate(cid)
        assert restored.get_certificate_by_hash(b"\x04" * 32) is not None
        assert restored.get_update_history(cid) == registry.get_update_history(cid)
        assert restored_fees.transfers == fees.transfers

    def test_restored_registry_keeps_enforcing_uniqueness(self, store: SnapshotStore, make_request):
        registry, clock, fees = store.open_registry(store.load())
        clock.advance(1000)
        registry.set_registry_contract("ST1TEST", "ST2REG")
        registry.set_provenance_contract("ST1TEST", "ST3PROV")
        registry.issue_certificate("ST1TEST", make_request(fill=4))
        store.save(store.capture(registry, clock, fees))

        restored, _clock, _fees = store.open_registry(store.load())
        result = restored.issue_certificate("ST1TEST", make_request(fill=4))
        assert result.is_ok is False
        assert restored.issue_certificate("ST1TEST", make_request(fill=5)).unwrap() == 1

    def test_save_leaves_no_temp_file(self, store: SnapshotStore):
        store.save(RegistrySnapshot(state=store.load().state))
        assert store.exists()
        assert list(store.path.parent.iterdir()) == [store.path]

    def test_corrupt_snapshot(self, store: SnapshotStore):
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"state": 5}', encoding="utf-8")
        with pytest.raises(SnapshotCorruptError):
            store.load()
