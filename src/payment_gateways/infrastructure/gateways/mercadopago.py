"""MercadoPago gateway family.

Cards must be 16 characters and start with "5" (Mastercard range).
Identifiers are prefixed "MP-"; amounts are shown in reais.
"""

from __future__ import annotations

from payment_gateways.domain.value_objects import GatewayFamily
from payment_gateways.infrastructure.gateways.base import (
    CardRuleValidator,
    ConfiguredGatewayFactory,
    PrefixedIdProcessor,
    TimestampedLogger,
)


class MercadoPagoValidator(CardRuleValidator):
    family = GatewayFamily.MERCADOPAGO
    required_prefix = "5"


class MercadoPagoProcessor(PrefixedIdProcessor):
    family = GatewayFamily.MERCADOPAGO
    transaction_prefix = "MP"
    currency_symbol = "R$"


class MercadoPagoLogger(TimestampedLogger):
    family = GatewayFamily.MERCADOPAGO


class MercadoPagoGatewayFactory(ConfiguredGatewayFactory):
    """Creates MercadoPago validators, processors and loggers."""

    family = GatewayFamily.MERCADOPAGO

    def create_validator(self) -> MercadoPagoValidator:
        return MercadoPagoValidator(self._output_sink)

    def create_processor(self) -> MercadoPagoProcessor:
        return MercadoPagoProcessor(self._output_sink, self._id_generator)

    def create_logger(self) -> MercadoPagoLogger:
        return MercadoPagoLogger(self._output_sink, self._time_provider)
