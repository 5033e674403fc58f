from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import structlog

from payment_gateways.application.dtos import PaymentStatus, ProcessPaymentResponse
from payment_gateways.domain.exceptions import GatewayFamilyMismatchError

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_gateways.application.ports import (
        OutputSink,
        PaymentGatewayFactory,
        PaymentLogger,
        PaymentProcessor,
        PaymentValidator,
    )

logger = structlog.get_logger(__name__)

CARD_INVALID_MESSAGE = "Card invalid"

ComponentT = TypeVar("ComponentT", "PaymentValidator", "PaymentProcessor", "PaymentLogger")


class PaymentService:
    """Orchestrates one payment through a single gateway family.

    Responsibilities:
    - Pull validator, processor and logger from the bound factory
    - Run validate -> process -> log, stopping after a failed validation
    - Refuse any component that does not belong to the factory's family

    The factory is fixed for the lifetime of the service. Processing with a
    different gateway family requires a new PaymentService.
    """

    __slots__ = ("_factory", "_output_sink")

    def __init__(self, factory: PaymentGatewayFactory, output_sink: OutputSink) -> None:
        self._factory = factory
        self._output_sink = output_sink

    @property
    def factory(self) -> PaymentGatewayFactory:
        return self._factory

    def process_payment(self, amount: Decimal, card_number: str) -> ProcessPaymentResponse:
        """Validate, process and log a single payment.

        Args:
            amount: Amount to charge, passed through unchanged.
            card_number: Card number checked against the family's rule.

        Returns:
            ProcessPaymentResponse. DECLINED means the card failed validation
            and neither a processor nor a logger was created.

        Raises:
            GatewayFamilyMismatchError: The factory returned a foreign component.
        """
        family = self._factory.family

        # Step 1: Validate
        validator = self._checked(self._factory.create_validator())
        if not validator.validate(card_number):
            # Step 2: Early exit, nothing else is created
            self._output_sink.write(CARD_INVALID_MESSAGE)
            logger.info(
                "payment_declined",
                gateway=family.value,
                card_last_four=card_number[-4:],
            )
            return ProcessPaymentResponse(family=family, status=PaymentStatus.DECLINED)

        # Step 3: Process
        processor = self._checked(self._factory.create_processor())
        transaction_id = processor.process(amount, card_number)

        # Step 4: Log
        payment_logger = self._checked(self._factory.create_logger())
        payment_logger.log(f"Transaction processed: {transaction_id}")

        logger.info(
            "payment_processed",
            gateway=family.value,
            transaction_id=transaction_id,
        )
        return ProcessPaymentResponse(
            family=family,
            status=PaymentStatus.APPROVED,
            transaction_id=transaction_id,
        )

    def _checked(self, component: ComponentT) -> ComponentT:
        """Return the component if it belongs to the factory's family."""
        if component.family is not self._factory.family:
            raise GatewayFamilyMismatchError(
                f"{type(self._factory).__name__} ({self._factory.family.value}) returned "
                f"{type(component).__name__} ({component.family.value})"
            )
        return component
