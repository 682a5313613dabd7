"""Validation gate for registry writes.

Every predicate is evaluated in a fixed order and the first failure wins.
Nothing here mutates state; the registry only writes once the gate
returns ``None``.
"""

from __future__ import annotations

from artcert.core.hasher import FINGERPRINT_LENGTH
from artcert.core.state import RegistryState
from artcert.models.certificates import Category, IssueRequest
from artcert.models.results import ErrorCode

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_ORIGIN_LENGTH = 100
MAX_CONDITION_LENGTH = 50
MAX_MATERIAL_LENGTH = 100
MAX_DIMENSIONS_LENGTH = 50
MAX_ARTIST_LENGTH = 100
MAX_PERIOD_LENGTH = 50
MAX_RESTORATION_ENTRIES = 10


def parse_category(value: str) -> Category | None:
    """Map a raw category string onto the closed set, or ``None``."""
    try:
        return Category(value)
    except ValueError:
        return None


def check_description(description: str) -> ErrorCode | None:
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return ErrorCode.INVALID_DESCRIPTION
    return None


def check_condition(condition: str) -> ErrorCode | None:
    if len(condition) > MAX_CONDITION_LENGTH:
        return ErrorCode.INVALID_CONDITION
    return None


def check_valuation(valuation: int) -> ErrorCode | None:
    if valuation <= 0:
        return ErrorCode.INVALID_VALUATION
    return None


def check_metadata(request: IssueRequest, now: int) -> ErrorCode | None:
    """Field-level predicates for an issuance request, in gate order."""
    if len(request.artifact_hash) != FINGERPRINT_LENGTH:
        return ErrorCode.INVALID_FINGERPRINT
    if not request.title or len(request.title) > MAX_TITLE_LENGTH:
        return ErrorCode.INVALID_METADATA
    if code := check_description(request.description):
        return code
    if len(request.origin) > MAX_ORIGIN_LENGTH:
        return ErrorCode.INVALID_ORIGIN
    if code := check_condition(request.condition):
        return code
    if len(request.material) > MAX_MATERIAL_LENGTH:
        return ErrorCode.INVALID_MATERIAL
    if len(request.dimensions) > MAX_DIMENSIONS_LENGTH:
        return ErrorCode.INVALID_DIMENSIONS
    if request.weight <= 0:
        return ErrorCode.INVALID_WEIGHT
    if len(request.artist) > MAX_ARTIST_LENGTH:
        return ErrorCode.INVALID_ARTIST
    if len(request.period) > MAX_PERIOD_LENGTH:
        return ErrorCode.INVALID_PERIOD
    if parse_category(request.category) is None:
        return ErrorCode.INVALID_CATEGORY
    if code := check_valuation(request.valuation):
        return code
    if len(request.restoration_history) > MAX_RESTORATION_ENTRIES:
        return ErrorCode.INVALID_RESTORATION_HISTORY
    if request.acquisition_date > now:
        return ErrorCode.INVALID_ACQUISITION_DATE
    if request.expiry is not None and request.expiry <= now:
        return ErrorCode.INVALID_EXPIRY
    return None


def check_issuance(
    state: RegistryState, request: IssueRequest, now: int
) -> ErrorCode | None:
    """Run the full issuance gate against *state* at logical time *now*."""
    if state.next_certificate_id >= state.max_certificates:
        return ErrorCode.CAPACITY_EXCEEDED
    if code := check_metadata(request, now):
        return code
    if request.artifact_hash.hex() in state.certificates_by_hash:
        return ErrorCode.ALREADY_EXISTS
    if not state.registry_contract:
        return ErrorCode.REGISTRY_NOT_CONFIGURED
    if not state.provenance_contract:
        return ErrorCode.PROVENANCE_NOT_CONFIGURED
    return None


def check_amendment(
    description: str, condition: str, valuation: int
) -> ErrorCode | None:
    """Bounds for the mutable fields, identical to their issuance predicates."""
    return (
        check_description(description)
        or check_condition(condition)
        or check_valuation(valuation)
    )
