from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from payment_gateways.application.dtos import PaymentStatus, ProcessPaymentResponse
from payment_gateways.application.use_cases.process_payment import CARD_INVALID_MESSAGE
from payment_gateways.domain.exceptions import UnsupportedGatewayError
from payment_gateways.domain.value_objects import GatewayFamily, normalize_gateway_name
from payment_gateways.infrastructure.gateways.mercadopago import (
    MercadoPagoLogger,
    MercadoPagoProcessor,
    MercadoPagoValidator,
)
from payment_gateways.infrastructure.gateways.pagseguro import (
    PagSeguroLogger,
    PagSeguroProcessor,
    PagSeguroValidator,
)
from payment_gateways.infrastructure.gateways.stripe import (
    StripeLogger,
    StripeProcessor,
    StripeValidator,
)

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_gateways.application.ports import IdGenerator, OutputSink, TimeProvider

logger = structlog.get_logger(__name__)


class SwitchPaymentService:
    """Payment service that dispatches on a gateway name string.

    Gateway names are matched case-insensitively, ignoring surrounding
    whitespace, the same way GatewayRegistry matches them.

    Every gateway is wired by hand in process_payment(): adding a gateway
    means editing this class, and nothing stops a branch from pairing one
    family's validator with another family's processor. PaymentService
    replaces this with a PaymentGatewayFactory chosen at construction time.
    """

    def __init__(
        self,
        gateway: str,
        output_sink: OutputSink,
        id_generator: IdGenerator,
        time_provider: TimeProvider,
    ) -> None:
        self._gateway = gateway
        self._output_sink = output_sink
        self._id_generator = id_generator
        self._time_provider = time_provider

    def process_payment(self, amount: Decimal, card_number: str) -> ProcessPaymentResponse:
        """Validate, process and log a payment for the named gateway.

        Raises:
            UnsupportedGatewayError: The gateway name matches no branch.
                Raised before any component is created.
        """
        gateway = normalize_gateway_name(self._gateway)

        if gateway == "pagseguro":
            pagseguro_validator = PagSeguroValidator(self._output_sink)
            if not pagseguro_validator.validate(card_number):
                return self._decline(GatewayFamily.PAGSEGURO, card_number)

            pagseguro_processor = PagSeguroProcessor(self._output_sink, self._id_generator)
            pagseguro_result = pagseguro_processor.process(amount, card_number)

            pagseguro_logger = PagSeguroLogger(self._output_sink, self._time_provider)
            pagseguro_logger.log(f"Transaction processed: {pagseguro_result}")
            return self._approve(GatewayFamily.PAGSEGURO, pagseguro_result)

        elif gateway == "mercadopago":
            mercadopago_validator = MercadoPagoValidator(self._output_sink)
            if not mercadopago_validator.validate(card_number):
                return self._decline(GatewayFamily.MERCADOPAGO, card_number)

            mercadopago_processor = MercadoPagoProcessor(self._output_sink, self._id_generator)
            mercadopago_result = mercadopago_processor.process(amount, card_number)

            mercadopago_logger = MercadoPagoLogger(self._output_sink, self._time_provider)
            mercadopago_logger.log(f"Transaction processed: {mercadopago_result}")
            return self._approve(GatewayFamily.MERCADOPAGO, mercadopago_result)

        elif gateway == "stripe":
            stripe_validator = StripeValidator(self._output_sink)
            if not stripe_validator.validate(card_number):
                return self._decline(GatewayFamily.STRIPE, card_number)

            stripe_processor = StripeProcessor(self._output_sink, self._id_generator)
            stripe_result = stripe_processor.process(amount, card_number)

            stripe_logger = StripeLogger(self._output_sink, self._time_provider)
            stripe_logger.log(f"Transaction processed: {stripe_result}")
            return self._approve(GatewayFamily.STRIPE, stripe_result)

        else:
            raise UnsupportedGatewayError(f"Unsupported gateway: {self._gateway}")

    def _decline(self, family: GatewayFamily, card_number: str) -> ProcessPaymentResponse:
        self._output_sink.write(f"{family.display_name}: {CARD_INVALID_MESSAGE}")
        logger.info(
            "payment_declined",
            gateway=family.value,
            card_last_four=card_number[-4:],
        )
        return ProcessPaymentResponse(family=family, status=PaymentStatus.DECLINED)

    def _approve(self, family: GatewayFamily, transaction_id: str) -> ProcessPaymentResponse:
        logger.info("payment_processed", gateway=family.value, transaction_id=transaction_id)
        return ProcessPaymentResponse(
            family=family,
            status=PaymentStatus.APPROVED,
            transaction_id=transaction_id,
        )
