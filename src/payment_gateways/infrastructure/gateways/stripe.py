"""Stripe gateway family: 16-character cards starting with "4" (Visa range)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from payment_gateways.domain.value_objects import GatewayFamily
from payment_gateways.infrastructure.gateways.base import (
    CardRuleValidator,
    ConfiguredGatewayFactory,
    PrefixedIdProcessor,
    TimestampedLogger,
)

if TYPE_CHECKING:
    from decimal import Decimal


class StripeValidator(CardRuleValidator):
    family = GatewayFamily.STRIPE
    required_prefix = "4"


class StripeProcessor(PrefixedIdProcessor):
    family = GatewayFamily.STRIPE
    transaction_prefix = "STRIPE"
    currency_symbol = "$"

    def format_amount(self, amount: Decimal) -> str:
        # Dollar amounts are written without a space: $300.00
        return f"{self.currency_symbol}{amount:.2f}"


class StripeLogger(TimestampedLogger):
    family = GatewayFamily.STRIPE


class StripeGatewayFactory(ConfiguredGatewayFactory):
    family = GatewayFamily.STRIPE

    def create_validator(self) -> StripeValidator:
        return StripeValidator(self._output_sink)

    def create_processor(self) -> StripeProcessor:
        return StripeProcessor(self._output_sink, self._id_generator)

    def create_logger(self) -> StripeLogger:
        return StripeLogger(self._output_sink, self._time_provider)
