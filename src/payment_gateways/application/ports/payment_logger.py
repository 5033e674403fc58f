from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from payment_gateways.domain.value_objects import GatewayFamily


class PaymentLogger(ABC):
    """Port for the per-gateway transaction log.

    Contract:
    - log() writes the message together with a capture-time timestamp
    - log() returns nothing and signals no failure
    """

    family: ClassVar[GatewayFamily]

    @abstractmethod
    def log(self, message: str) -> None:
        """Emit a timestamped log line for this gateway."""
        ...
