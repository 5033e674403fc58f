"""Data Transfer Objects for use case output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from payment_gateways.domain.value_objects import GatewayFamily


class PaymentStatus(Enum):
    """Outcome of a single process_payment call."""

    APPROVED = "approved"
    DECLINED = "declined"


@dataclass(frozen=True, slots=True)
class ProcessPaymentResponse:
    """Output DTO for payment processing."""

    family: GatewayFamily
    status: PaymentStatus
    transaction_id: str | None = None

    @property
    def approved(self) -> bool:
        return self.status is PaymentStatus.APPROVED
