"""JSON snapshot store for the CLI host.

The registry core keeps its state in memory; this store lets a host that
runs one command per process carry the state, the clock height and the
recorded fee intents between invocations.

Layout: a single JSON document at ``path``, rewritten atomically
(write to ``.tmp`` then rename) on every save.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from artcert.config import RegistryConfig
from artcert.core.collaborators import BlockClock, FeeLedger
from artcert.core.registry import CertificateRegistry
from artcert.core.state import RegistryState
from artcert.models.payments import FeeTransfer

logger = logging.getLogger(__name__)


class SnapshotCorruptError(RuntimeError):
    """Raised when a snapshot file exists but cannot be parsed."""


class RegistrySnapshot(BaseModel):
    """Everything a host needs to rebuild a registry."""

    state: RegistryState
    clock_height: int = 0
    fee_transfers: list[FeeTransfer] = Field(default_factory=list)


class SnapshotStore:
    """Loads and saves ``RegistrySnapshot`` documents.

    Parameters
    ----------
    path:
        Location of the snapshot file.  Parent directories are created
        on first save.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self, cfg: RegistryConfig | None = None) -> RegistrySnapshot:
        """Read the snapshot, or build a fresh one from *cfg* if absent."""
        if not self._path.exists():
            logger.debug("No snapshot at %s; starting fresh.", self._path)
            state = RegistryState.from_config(cfg) if cfg else RegistryState()
            return RegistrySnapshot(state=state)
        try:
            return RegistrySnapshot.model_validate_json(
                self._path.read_text(encoding="utf-8")
            )
        except ValidationError as exc:
            raise SnapshotCorruptError(
                f"Snapshot at {self._path} is not a valid registry snapshot: {exc}"
            ) from exc

    def save(self, snapshot: RegistrySnapshot) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(snapshot.model_dump_json(indent=2), encoding="utf-8")
        tmp.replace(self._path)
        logger.debug("Saved snapshot to %s.", self._path)

    # ------------------------------------------------------------------
    # Registry wiring
    # ------------------------------------------------------------------

    @staticmethod
    def open_registry(
        snapshot: RegistrySnapshot,
    ) -> tuple[CertificateRegistry, BlockClock, FeeLedger]:
        """Wire a live registry around a loaded snapshot."""
        clock = BlockClock(snapshot.clock_height)
        fees = FeeLedger(snapshot.fee_transfers)
        registry = CertificateRegistry(snapshot.state, clock, fees)
        return registry, clock, fees

    @staticmethod
    def capture(
        registry: CertificateRegistry, clock: BlockClock, fees: FeeLedger
    ) -> RegistrySnapshot:
        """Build a snapshot from live registry components."""
        return RegistrySnapshot(
            state=registry.state,
            clock_height=clock.now(),
            fee_transfers=fees.transfers,
        )
