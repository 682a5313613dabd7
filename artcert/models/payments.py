"""Fee transfer intents emitted during issuance."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FeeTransfer(BaseModel):
    """An instruction to move ``amount`` from ``payer`` to ``payee``.

    The registry records the intent only; settlement belongs to the host.
    """

    model_config = ConfigDict(frozen=True)

    amount: int
    payer: str
    payee: str
    certificate_id: int
    recorded_at: int  # logical time of the issuing call
