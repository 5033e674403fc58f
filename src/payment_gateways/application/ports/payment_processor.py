from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_gateways.domain.value_objects import GatewayFamily


class PaymentProcessor(ABC):
    """Port for transaction processing.

    Contract:
    - process() always succeeds once validation has passed
    - The returned identifier MUST be prefixed with the family's prefix
    - The amount is passed through; no range is enforced
    """

    family: ClassVar[GatewayFamily]

    @abstractmethod
    def process(self, amount: Decimal, card_number: str) -> str:
        """Process a payment and return its opaque transaction identifier.

        Args:
            amount: Currency-scale amount to charge.
            card_number: Card number that already passed validation.

        Returns:
            Family-prefixed identifier, e.g. "MP-1a2b3c4d".
        """
        ...
