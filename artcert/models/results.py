"""Operation results — every write returns ``Ok`` or ``Err``, never raises.

Error codes are a closed set, one per validation predicate.  The numeric
values are stable and shared with existing registry clients.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ErrorCode(IntEnum):
    """Closed taxonomy of registry failures."""

    NOT_AUTHORIZED = 100
    INVALID_FINGERPRINT = 101
    INVALID_METADATA = 102
    ALREADY_EXISTS = 106
    NOT_FOUND = 107
    REGISTRY_NOT_CONFIGURED = 108
    PROVENANCE_NOT_CONFIGURED = 109
    INVALID_EXPIRY = 111
    INVALID_DESCRIPTION = 112
    INVALID_ORIGIN = 113
    INVALID_CONDITION = 114
    INVALID_MATERIAL = 115
    INVALID_DIMENSIONS = 116
    INVALID_WEIGHT = 117
    INVALID_ARTIST = 118
    INVALID_PERIOD = 119
    CAPACITY_EXCEEDED = 121
    INVALID_CATEGORY = 125
    INVALID_VALUATION = 126
    INVALID_RESTORATION_HISTORY = 129
    INVALID_ACQUISITION_DATE = 130


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NOT_AUTHORIZED: "Caller is not authorized for this operation.",
    ErrorCode.INVALID_FINGERPRINT: "Artifact fingerprint must be exactly 32 bytes.",
    ErrorCode.INVALID_METADATA: "Title is required and must be at most 100 characters.",
    ErrorCode.ALREADY_EXISTS: "A certificate already exists for this fingerprint.",
    ErrorCode.NOT_FOUND: "Certificate not found.",
    ErrorCode.REGISTRY_NOT_CONFIGURED: "Registry contract address is not configured.",
    ErrorCode.PROVENANCE_NOT_CONFIGURED: "Provenance contract address is not configured.",
    ErrorCode.INVALID_EXPIRY: "Expiry must be later than the current time.",
    ErrorCode.INVALID_DESCRIPTION: "Description must be at most 500 characters.",
    ErrorCode.INVALID_ORIGIN: "Origin must be at most 100 characters.",
    ErrorCode.INVALID_CONDITION: "Condition must be at most 50 characters.",
    ErrorCode.INVALID_MATERIAL: "Material must be at most 100 characters.",
    ErrorCode.INVALID_DIMENSIONS: "Dimensions must be at most 50 characters.",
    ErrorCode.INVALID_WEIGHT: "Weight must be positive.",
    ErrorCode.INVALID_ARTIST: "Artist must be at most 100 characters.",
    ErrorCode.INVALID_PERIOD: "Period must be at most 50 characters.",
    ErrorCode.CAPACITY_EXCEEDED: "Maximum number of certificates reached.",
    ErrorCode.INVALID_CATEGORY: "Category must be painting, sculpture or artifact.",
    ErrorCode.INVALID_VALUATION: "Valuation must be positive.",
    ErrorCode.INVALID_RESTORATION_HISTORY: "Restoration history may hold at most 10 entries.",
    ErrorCode.INVALID_ACQUISITION_DATE: "Acquisition date cannot be in the future.",
}


class RegistryError(RuntimeError):
    """Raised by ``Err.unwrap()`` for hosts that prefer exceptions."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        self.code = code
        super().__init__(f"[{code.value}] {code.name}: {message or ERROR_MESSAGES[code]}")


class Ok(BaseModel, Generic[T]):
    """Successful outcome carrying a value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ok"] = "ok"
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


class Err(BaseModel):
    """Failed outcome carrying exactly one error code."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["err"] = "err"
    code: ErrorCode
    message: str = ""

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        raise RegistryError(self.code, self.message)

    @classmethod
    def of(cls, code: ErrorCode) -> Err:
        """Build an ``Err`` with the standard message for *code*."""
        return cls(code=code, message=ERROR_MESSAGES[code])
