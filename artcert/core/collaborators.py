"""Host collaborators the registry depends on: a logical clock and a payment sink.

Defines the ``LogicalClock`` and ``PaymentCollaborator`` Protocols that host
backends must satisfy, along with default in-process implementations.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from artcert.models.payments import FeeTransfer

logger = logging.getLogger(__name__)


class ClockError(RuntimeError):
    """Raised when a logical clock would move backwards."""


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class LogicalClock(Protocol):
    """Protocol for the host's monotonic sequence clock (e.g. block height)."""

    def now(self) -> int:
        """Return the current logical time."""
        ...


@runtime_checkable
class PaymentCollaborator(Protocol):
    """Protocol for fee settlement backends.

    The registry only hands over the transfer intent; it never inspects
    whether settlement succeeded.
    """

    def record_transfer(self, transfer: FeeTransfer) -> None:
        """Accept a fee-transfer instruction."""
        ...


# ---------------------------------------------------------------------------
# Default implementations
# ---------------------------------------------------------------------------


class BlockClock:
    """Manually advanced block-height clock.

    Parameters
    ----------
    height:
        Starting height.  Must be non-negative.
    """

    def __init__(self, height: int = 0) -> None:
        if height < 0:
            raise ClockError(f"Clock height cannot be negative: {height}")
        self._height = height

    def now(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """Move the clock forward by *blocks* and return the new height."""
        if blocks < 0:
            raise ClockError(f"Cannot move clock backwards by {-blocks} blocks")
        self._height += blocks
        return self._height

    def set(self, height: int) -> None:
        """Jump to *height*; only forward jumps are allowed."""
        if height < self._height:
            raise ClockError(
                f"Cannot rewind clock from {self._height} to {height}"
            )
        self._height = height


class FeeLedger:
    """In-memory, append-only record of fee transfer intents."""

    def __init__(self, transfers: list[FeeTransfer] | None = None) -> None:
        self._transfers: list[FeeTransfer] = list(transfers or [])

    def record_transfer(self, transfer: FeeTransfer) -> None:
        self._transfers.append(transfer)
        logger.info(
            "Recorded fee transfer of %d from %s to %s (certificate %d).",
            transfer.amount, transfer.payer, transfer.payee, transfer.certificate_id,
        )

    @property
    def transfers(self) -> list[FeeTransfer]:
        return list(self._transfers)

    def total_for(self, payee: str) -> int:
        """Sum of all fees addressed to *payee*."""
        return sum(t.amount for t in self._transfers if t.payee == payee)

    def __len__(self) -> int:
        return len(self._transfers)
