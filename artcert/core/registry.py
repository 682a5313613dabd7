"""Certificate registry — the provenance state machine.

Enforces:
- Authority-only configuration changes
- Ordered validation before any mutation (first failure wins)
- One certificate per artifact fingerprint
- Sequential, never-reused certificate ids
- Issuer-only amendments, each recorded in the audit trail

Writes return ``Ok`` or ``Err``; reads return the value or ``None``.
Calls are expected to be serialized by the host.
"""

from __future__ import annotations

import logging

from artcert.core.collaborators import LogicalClock, PaymentCollaborator
from artcert.core.state import RegistryState
from artcert.core.validation import check_amendment, check_issuance, parse_category
from artcert.models.certificates import (
    Certificate,
    CertificateUpdate,
    IssueRequest,
    Verification,
)
from artcert.models.payments import FeeTransfer
from artcert.models.results import Err, ErrorCode, Ok

logger = logging.getLogger(__name__)


class CertificateRegistry:
    """Issues, amends and answers queries about provenance certificates.

    Parameters
    ----------
    state:
        The registry state to operate on.  Owned by this registry.
    clock:
        Host logical clock, read once per call.
    payments:
        Receives the fee transfer intent emitted by each issuance.
    """

    def __init__(
        self,
        state: RegistryState,
        clock: LogicalClock,
        payments: PaymentCollaborator,
    ) -> None:
        self._state = state
        self._clock = clock
        self._payments = payments

    @property
    def state(self) -> RegistryState:
        """The live registry state, exposed for host persistence only.

        Callers must read certificates through the query methods below.
        Changes made through this object bypass the validation gate.
        """
        return self._state

    # ------------------------------------------------------------------
    # Administrative gate
    # ------------------------------------------------------------------

    def _require_authority(self, caller: str, operation: str) -> Err | None:
        if caller != self._state.authority_principal:
            logger.warning(
                "Rejected %s from %s: not the registry authority.", operation, caller
            )
            return Err.of(ErrorCode.NOT_AUTHORIZED)
        return None

    def set_registry_contract(self, caller: str, address: str) -> Ok[bool] | Err:
        """Point issuance fees and registration at a registry collaborator."""
        if denied := self._require_authority(caller, "set_registry_contract"):
            return denied
        self._state.registry_contract = address
        logger.info("Registry contract set to %s.", address)
        return Ok(value=True)

    def set_provenance_contract(self, caller: str, address: str) -> Ok[bool] | Err:
        if denied := self._require_authority(caller, "set_provenance_contract"):
            return denied
        self._state.provenance_contract = address
        logger.info("Provenance contract set to %s.", address)
        return Ok(value=True)

    def set_issuance_fee(self, caller: str, fee: int) -> Ok[bool] | Err:
        if denied := self._require_authority(caller, "set_issuance_fee"):
            return denied
        self._state.issuance_fee = fee
        logger.info("Issuance fee set to %d.", fee)
        return Ok(value=True)

    def set_max_certificates(self, caller: str, maximum: int) -> Ok[bool] | Err:
        if denied := self._require_authority(caller, "set_max_certificates"):
            return denied
        self._state.max_certificates = maximum
        logger.info("Certificate capacity set to %d.", maximum)
        return Ok(value=True)

    # ------------------------------------------------------------------
    # Issuance
    # ------------------------------------------------------------------

    def issue_certificate(self, caller: str, request: IssueRequest) -> Ok[int] | Err:
        """Validate *request* and create a certificate owned by *caller*.

        On success the issuance fee intent is handed to the payment
        collaborator and the new certificate id is returned.  On failure
        nothing is recorded.
        """
        now = self._clock.now()
        if code := check_issuance(self._state, request, now):
            logger.warning(
                "Rejected issuance by %s: %s (%d).", caller, code.name, code.value
            )
            return Err.of(code)

        state = self._state
        certificate_id = state.next_certificate_id
        # Validated above, cannot be None here
        category = parse_category(request.category)
        certificate = Certificate(
            certificate_id=certificate_id,
            artifact_hash=request.artifact_hash,
            title=request.title,
            description=request.description,
            origin=request.origin,
            issuance_timestamp=now,
            issuer=caller,
            current_owner=caller,
            expiry=request.expiry,
            condition=request.condition,
            material=request.material,
            dimensions=request.dimensions,
            weight=request.weight,
            artist=request.artist,
            period=request.period,
            status=True,
            category=category,
            valuation=request.valuation,
            insurance=request.insurance,
            loan_status=request.loan_status,
            restoration_history=tuple(request.restoration_history),
            acquisition_date=request.acquisition_date,
        )

        self._payments.record_transfer(
            FeeTransfer(
                amount=state.issuance_fee,
                payer=caller,
                payee=state.registry_contract,
                certificate_id=certificate_id,
                recorded_at=now,
            )
        )
        state.certificates[certificate_id] = certificate
        state.certificates_by_hash[certificate.fingerprint_hex] = certificate_id
        state.next_certificate_id = certificate_id + 1

        logger.info(
            "Issued certificate %d for %s to %s.",
            certificate_id, certificate.fingerprint_hex, caller,
        )
        return Ok(value=certificate_id)

    # ------------------------------------------------------------------
    # Amendment
    # ------------------------------------------------------------------

    def update_certificate(
        self,
        caller: str,
        certificate_id: int,
        description: str,
        condition: str,
        valuation: int,
    ) -> Ok[bool] | Err:
        """Replace the mutable fields of a certificate issued by *caller*.

        The latest-update slot is overwritten and the same record is
        appended to the certificate's update history.
        """
        now = self._clock.now()
        current = self._state.certificates.get(certificate_id)
        if current is None:
            code = ErrorCode.NOT_FOUND
        elif current.issuer != caller:
            code = ErrorCode.NOT_AUTHORIZED
        else:
            code = check_amendment(description, condition, valuation)
        if code:
            logger.warning(
                "Rejected update of certificate %d by %s: %s (%d).",
                certificate_id, caller, code.name, code.value,
            )
            return Err.of(code)

        amended = current.model_copy(
            update={
                "description": description,
                "condition": condition,
                "valuation": valuation,
                "issuance_timestamp": now,
            }
        )
        record = CertificateUpdate(
            update_description=description,
            update_condition=condition,
            update_valuation=valuation,
            update_timestamp=now,
            updater=caller,
        )
        self._state.certificates[certificate_id] = amended
        self._state.certificate_updates[certificate_id] = record
        self._state.update_history.setdefault(certificate_id, []).append(record)

        logger.info("Certificate %d updated by %s.", certificate_id, caller)
        return Ok(value=True)

    # ------------------------------------------------------------------
    # Queries (read-only)
    # ------------------------------------------------------------------

    def get_certificate(self, certificate_id: int) -> Certificate | None:
        return self._state.certificates.get(certificate_id)

    def get_certificate_by_hash(self, artifact_hash: bytes) -> Certificate | None:
        """Look up a certificate by its artifact fingerprint."""
        certificate_id = self._state.certificates_by_hash.get(artifact_hash.hex())
        if certificate_id is None:
            return None
        return self._state.certificates.get(certificate_id)

    def verify_certificate(self, certificate_id: int) -> Verification:
        """Report whether *certificate_id* exists, with its details if so."""
        certificate = self._state.certificates.get(certificate_id)
        logger.debug(
            "Verification of certificate %d: %s.",
            certificate_id, "valid" if certificate else "unknown",
        )
        return Verification(valid=certificate is not None, certificate=certificate)

    def get_certificate_count(self) -> int:
        """Total certificates ever issued (also the next id to be assigned)."""
        return self._state.next_certificate_id

    def get_latest_update(self, certificate_id: int) -> CertificateUpdate | None:
        return self._state.certificate_updates.get(certificate_id)

    def get_update_history(self, certificate_id: int) -> list[CertificateUpdate]:
        """All amendments of a certificate, oldest first."""
        return list(self._state.update_history.get(certificate_id, []))
