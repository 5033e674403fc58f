from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from payment_gateways.domain.value_objects import GatewayFamily


class PaymentValidator(ABC):
    """Port for card validation.

    Contract:
    - validate() MUST return a bool and MUST NOT raise for any string input
    - validate() MUST be idempotent: same card number, same answer
    - An invalid card is a normal negative result, not an error
    """

    family: ClassVar[GatewayFamily]

    @abstractmethod
    def validate(self, card_number: str) -> bool:
        """Return True if the card number satisfies this family's rule."""
        ...
