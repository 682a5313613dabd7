"""Shared test fixtures for artcert."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from artcert.core.collaborators import BlockClock, FeeLedger
from artcert.core.registry import CertificateRegistry
from artcert.core.state import RegistryState
from artcert.models.certificates import IssueRequest

AUTHORITY = "ST1TEST"
REGISTRY_ADDRESS = "ST2REG"
PROVENANCE_ADDRESS = "ST3PROV"


@pytest.fixture
def state() -> RegistryState:
    """Provide a fresh registry state with default bootstrap values."""
    return RegistryState(authority_principal=AUTHORITY)


@pytest.fixture
def clock() -> BlockClock:
    """Provide a block clock already past the default acquisition date."""
    return BlockClock(1000)


@pytest.fixture
def fees() -> FeeLedger:
    return FeeLedger()


@pytest.fixture
def registry(
    state: RegistryState, clock: BlockClock, fees: FeeLedger
) -> CertificateRegistry:
    """Provide an unconfigured registry (collaborator addresses unset)."""
    return CertificateRegistry(state, clock, fees)


@pytest.fixture
def configured_registry(registry: CertificateRegistry) -> CertificateRegistry:
    """Provide a registry with both collaborator addresses set."""
    registry.set_registry_contract(AUTHORITY, REGISTRY_ADDRESS)
    registry.set_provenance_contract(AUTHORITY, PROVENANCE_ADDRESS)
    return registry


# ---------------------------------------------------------------------------
# Request factory — shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_request() -> Callable[..., IssueRequest]:
    """Factory fixture: build a valid IssueRequest, overriding any field."""

    def _factory(fill: int = 1, **overrides: Any) -> IssueRequest:
        defaults: dict[str, Any] = {
            "artifact_hash": bytes([fill]) * 32,
            "title": "Mona Lisa",
            "description": "Famous painting",
            "origin": "Italy",
            "condition": "Excellent",
            "material": "Oil on canvas",
            "dimensions": "77x53 cm",
            "weight": 100,
            "artist": "Da Vinci",
            "period": "Renaissance",
            "category": "painting",
            "valuation": 1_000_000,
            "insurance": True,
            "loan_status": False,
            "restoration_history": ("Restored in 2020",),
            "acquisition_date": 1000,
            "expiry": None,
        }
        defaults.update(overrides)
        return IssueRequest(**defaults)

    return _factory
