from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from payment_gateways.application.ports.payment_logger import PaymentLogger
    from payment_gateways.application.ports.payment_processor import PaymentProcessor
    from payment_gateways.application.ports.payment_validator import PaymentValidator
    from payment_gateways.domain.value_objects import GatewayFamily


class PaymentGatewayFactory(ABC):
    """Port for creating one gateway family's components.

    Contract (family cohesion):
    - create_validator(), create_processor() and create_logger() MUST all
      return components whose family equals this factory's family
    - There is no way to ask a factory for another family's component

    Implementations may build components per call or reuse instances;
    components are stateless so both are equivalent.
    """

    family: ClassVar[GatewayFamily]

    @abstractmethod
    def create_validator(self) -> PaymentValidator:
        """Create this family's card validator."""
        ...

    @abstractmethod
    def create_processor(self) -> PaymentProcessor:
        """Create this family's transaction processor."""
        ...

    @abstractmethod
    def create_logger(self) -> PaymentLogger:
        """Create this family's transaction logger."""
        ...
