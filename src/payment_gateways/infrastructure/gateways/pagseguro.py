"""PagSeguro gateway family: length-only card rule, "PAGSEG-" identifiers."""

from __future__ import annotations

from payment_gateways.domain.value_objects import GatewayFamily
from payment_gateways.infrastructure.gateways.base import (
    CardRuleValidator,
    ConfiguredGatewayFactory,
    PrefixedIdProcessor,
    TimestampedLogger,
)


class PagSeguroValidator(CardRuleValidator):
    """Accepts any 16-character card number."""

    family = GatewayFamily.PAGSEGURO


class PagSeguroProcessor(PrefixedIdProcessor):
    family = GatewayFamily.PAGSEGURO
    transaction_prefix = "PAGSEG"
    currency_symbol = "R$"


class PagSeguroLogger(TimestampedLogger):
    family = GatewayFamily.PAGSEGURO


class PagSeguroGatewayFactory(ConfiguredGatewayFactory):
    family = GatewayFamily.PAGSEGURO

    def create_validator(self) -> PagSeguroValidator:
        return PagSeguroValidator(self._output_sink)

    def create_processor(self) -> PagSeguroProcessor:
        return PagSeguroProcessor(self._output_sink, self._id_generator)

    def create_logger(self) -> PagSeguroLogger:
        return PagSeguroLogger(self._output_sink, self._time_provider)
