"""artcert data models — all Pydantic v2, all frozen (immutable)."""

from artcert.models.certificates import (
    Category,
    Certificate,
    CertificateUpdate,
    IssueRequest,
    Verification,
)
from artcert.models.payments import FeeTransfer
from artcert.models.results import (
    ERROR_MESSAGES,
    Err,
    ErrorCode,
    Ok,
    RegistryError,
)

__all__ = [
    # certificates
    "Category",
    "Certificate",
    "CertificateUpdate",
    "IssueRequest",
    "Verification",
    # payments
    "FeeTransfer",
    # results
    "ERROR_MESSAGES",
    "Err",
    "ErrorCode",
    "Ok",
    "RegistryError",
]
