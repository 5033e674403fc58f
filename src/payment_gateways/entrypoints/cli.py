"""Command-line demo: one payment per configured gateway."""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from payment_gateways.application.use_cases import PaymentService
from payment_gateways.config import get_settings
from payment_gateways.domain.exceptions import UnsupportedGatewayError
from payment_gateways.infrastructure import (
    ConsoleOutputSink,
    SwitchPaymentService,
    SystemTimeProvider,
    UuidIdGenerator,
)
from payment_gateways.infrastructure.gateways import get_gateway_factory
from payment_gateways.logging_config import configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

    from payment_gateways.application.ports import OutputSink

logger = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2

# (amount, card number) per gateway
DEMO_SCENARIOS: dict[str, tuple[Decimal, str]] = {
    "pagseguro": (Decimal("150.00"), "1234567890123456"),
    "mercadopago": (Decimal("200.00"), "5234567890123456"),
    "stripe": (Decimal("300.00"), "4234567890123456"),
}
DEFAULT_SCENARIO = (Decimal("100.00"), "4234567890123456")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payment-gateways-demo",
        description="Run one mock payment through each configured gateway.",
    )
    parser.add_argument(
        "--switch",
        action="store_true",
        help="dispatch with the string-switch service instead of gateway factories",
    )
    return parser


def run_factory_demo(gateways: Sequence[str], output_sink: OutputSink) -> None:
    output_sink.write("=== Payment System (Abstract Factory) ===")
    for name in gateways:
        output_sink.write("")
        factory = get_gateway_factory(name, output_sink=output_sink)
        service = PaymentService(factory, output_sink)
        amount, card_number = DEMO_SCENARIOS.get(factory.family.value, DEFAULT_SCENARIO)
        service.process_payment(amount, card_number)


def run_switch_demo(gateways: Sequence[str], output_sink: OutputSink) -> None:
    output_sink.write("=== Payment System (switch dispatch) ===")
    id_generator = UuidIdGenerator()
    time_provider = SystemTimeProvider()
    for name in gateways:
        output_sink.write("")
        service = SwitchPaymentService(name, output_sink, id_generator, time_provider)
        amount, card_number = DEMO_SCENARIOS.get(name.lower(), DEFAULT_SCENARIO)
        service.process_payment(amount, card_number)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"error: invalid configuration\n{e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    configure_logging(settings.log_level, format_as_json=settings.log_json)

    output_sink = ConsoleOutputSink()
    demo = run_switch_demo if args.switch else run_factory_demo
    try:
        demo(settings.demo_gateways, output_sink)
    except UnsupportedGatewayError as e:
        logger.error("demo_aborted", reason=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    return EXIT_OK
