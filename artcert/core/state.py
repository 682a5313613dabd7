"""Registry state — the single owned state object for one registry instance.

All mutation goes through ``CertificateRegistry``; nothing else writes here.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from artcert.config import RegistryConfig
from artcert.models.certificates import Certificate, CertificateUpdate


class RegistryState(BaseModel):
    """Process-wide registry bookkeeping.

    ``certificates_by_hash`` is keyed by the lowercase hex of the artifact
    fingerprint and always points at an id present in ``certificates``.
    """

    next_certificate_id: int = 0
    max_certificates: int = 10000
    issuance_fee: int = 500
    registry_contract: str | None = None
    provenance_contract: str | None = None
    authority_principal: str = "ST1TEST"
    certificates: dict[int, Certificate] = Field(default_factory=dict)
    certificates_by_hash: dict[str, int] = Field(default_factory=dict)
    certificate_updates: dict[int, CertificateUpdate] = Field(default_factory=dict)
    update_history: dict[int, list[CertificateUpdate]] = Field(default_factory=dict)

    @classmethod
    def from_config(cls, cfg: RegistryConfig) -> RegistryState:
        """Build a fresh state from bootstrap configuration."""
        return cls(
            authority_principal=cfg.authority_principal,
            max_certificates=cfg.max_certificates,
            issuance_fee=cfg.issuance_fee,
        )

    @property
    def collaborators_configured(self) -> bool:
        return bool(self.registry_contract) and bool(self.provenance_contract)
