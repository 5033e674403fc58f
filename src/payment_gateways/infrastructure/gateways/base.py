"""Shared building blocks for the mock gateway families.

Each family module subclasses these with its own family tag, card rule,
identifier prefix and currency, then exposes a concrete factory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import structlog

from payment_gateways.application.ports import (
    PaymentGatewayFactory,
    PaymentLogger,
    PaymentProcessor,
    PaymentValidator,
)
from payment_gateways.domain.value_objects import TransactionId
from payment_gateways.infrastructure.id_generator import UuidIdGenerator
from payment_gateways.infrastructure.output_sink import ConsoleOutputSink
from payment_gateways.infrastructure.time_provider import SystemTimeProvider

if TYPE_CHECKING:
    from decimal import Decimal

    from payment_gateways.application.ports import IdGenerator, OutputSink, TimeProvider

logger = structlog.get_logger(__name__)

CARD_NUMBER_LENGTH = 16


class CardRuleValidator(PaymentValidator):
    """Accepts 16-character card numbers starting with required_prefix.

    An empty required_prefix means only the length is checked.
    """

    required_prefix: ClassVar[str] = ""

    def __init__(self, output_sink: OutputSink) -> None:
        self._output_sink = output_sink

    def validate(self, card_number: str) -> bool:
        self._output_sink.write(f"{self.family.display_name}: Validating card...")
        valid = len(card_number) == CARD_NUMBER_LENGTH and card_number.startswith(
            self.required_prefix
        )
        logger.debug(
            "card_validated",
            gateway=self.family.value,
            valid=valid,
            card_last_four=card_number[-4:],
        )
        return valid


class PrefixedIdProcessor(PaymentProcessor):
    """Simulated processor returning "<transaction_prefix>-<token>"."""

    transaction_prefix: ClassVar[str]
    currency_symbol: ClassVar[str]

    def __init__(self, output_sink: OutputSink, id_generator: IdGenerator) -> None:
        self._output_sink = output_sink
        self._id_generator = id_generator

    def process(self, amount: Decimal, card_number: str) -> str:
        self._output_sink.write(
            f"{self.family.display_name}: Processing {self.format_amount(amount)}..."
        )
        transaction_id = TransactionId(
            prefix=self.transaction_prefix,
            token=self._id_generator.next_token(),
        )
        return str(transaction_id)

    def format_amount(self, amount: Decimal) -> str:
        return f"{self.currency_symbol} {amount:.2f}"


class TimestampedLogger(PaymentLogger):
    """Writes "[<Gateway> Log] <timestamp>: <message>" lines."""

    def __init__(self, output_sink: OutputSink, time_provider: TimeProvider) -> None:
        self._output_sink = output_sink
        self._time_provider = time_provider

    def log(self, message: str) -> None:
        timestamp = self._time_provider.now().isoformat(timespec="seconds")
        self._output_sink.write(f"[{self.family.display_name} Log] {timestamp}: {message}")


class ConfiguredGatewayFactory(PaymentGatewayFactory):
    """Base for concrete factories: holds the collaborators components need.

    Omitted collaborators default to stdout, random UUID tokens and the
    system clock. Every create_*() call builds a fresh component.
    """

    def __init__(
        self,
        output_sink: OutputSink | None = None,
        id_generator: IdGenerator | None = None,
        time_provider: TimeProvider | None = None,
    ) -> None:
        self._output_sink = output_sink if output_sink is not None else ConsoleOutputSink()
        self._id_generator = id_generator if id_generator is not None else UuidIdGenerator()
        self._time_provider = time_provider if time_provider is not None else SystemTimeProvider()

    @property
    def output_sink(self) -> OutputSink:
        return self._output_sink

    def __repr__(self) -> str:
        return f"{type(self).__name__}(family={self.family.value!r})"
