"""Certificate models — the provenance record and its audit trail."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Category(str, Enum):
    """Closed set of artifact categories a certificate may carry."""

    PAINTING = "painting"
    SCULPTURE = "sculpture"
    ARTIFACT = "artifact"


class IssueRequest(BaseModel):
    """Caller-supplied metadata for a new certificate.

    Deliberately loose: bounds are enforced by the registry's validation
    gate so that every violation maps to its own error code.  ``category``
    is kept as a raw string for the same reason.
    """

    model_config = ConfigDict(frozen=True, ser_json_bytes="hex", val_json_bytes="hex")

    artifact_hash: bytes
    title: str
    description: str = ""
    origin: str = ""
    condition: str = ""
    material: str = ""
    dimensions: str = ""
    weight: int
    artist: str = ""
    period: str = ""
    category: str
    valuation: int
    insurance: bool = False
    loan_status: bool = False
    restoration_history: tuple[str, ...] = ()
    acquisition_date: int
    expiry: int | None = None


class Certificate(BaseModel):
    """A provenance certificate bound to one artifact fingerprint.

    ``artifact_hash``, ``issuer`` and ``certificate_id`` never change after
    issuance.  ``issuance_timestamp`` doubles as the last-modified marker
    once the certificate has been amended.
    """

    model_config = ConfigDict(frozen=True, ser_json_bytes="hex", val_json_bytes="hex")

    certificate_id: int
    artifact_hash: bytes
    title: str
    description: str
    origin: str
    issuance_timestamp: int
    issuer: str
    current_owner: str
    expiry: int | None = None
    condition: str
    material: str
    dimensions: str
    weight: int
    artist: str
    period: str
    status: bool = True
    category: Category
    valuation: int
    insurance: bool = False
    loan_status: bool = False
    restoration_history: tuple[str, ...] = ()
    acquisition_date: int

    @property
    def fingerprint_hex(self) -> str:
        return self.artifact_hash.hex()


class CertificateUpdate(BaseModel):
    """Audit record written by each successful amendment."""

    model_config = ConfigDict(frozen=True)

    update_description: str
    update_condition: str
    update_valuation: int
    update_timestamp: int
    updater: str


class Verification(BaseModel):
    """Outcome of a verification query; "invalid" is data, not a failure."""

    model_config = ConfigDict(frozen=True, ser_json_bytes="hex", val_json_bytes="hex")

    valid: bool
    certificate: Certificate | None = None
