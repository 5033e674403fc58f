"""Tests for the factory-based PaymentService.

Tests cover:
- Full validate -> process -> log flow for valid cards
- Early exit after a failed validation (call-count instrumentation)
- Family cohesion enforcement on components returned by the factory
- The bound factory cannot be swapped after construction
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from payment_gateways.application.dtos import PaymentStatus
from payment_gateways.application.ports import (
    PaymentGatewayFactory,
    PaymentLogger,
    PaymentProcessor,
    PaymentValidator,
)
from payment_gateways.application.use_cases import PaymentService
from payment_gateways.domain.exceptions import GatewayFamilyMismatchError
from payment_gateways.domain.value_objects import GatewayFamily
from payment_gateways.infrastructure.gateways import (
    ConfiguredGatewayFactory,
    MercadoPagoGatewayFactory,
    PagSeguroGatewayFactory,
    StripeGatewayFactory,
)
from payment_gateways.infrastructure.id_generator import SequentialIdGenerator
from payment_gateways.infrastructure.output_sink import InMemoryOutputSink
from payment_gateways.infrastructure.time_provider import FixedTimeProvider

VALID_CARDS = {
    PagSeguroGatewayFactory: "1234567890123456",
    MercadoPagoGatewayFactory: "5234567890123456",
    StripeGatewayFactory: "4234567890123456",
}
INVALID_CARDS = {
    PagSeguroGatewayFactory: "123456789012",
    MercadoPagoGatewayFactory: "4234567890123456",
    StripeGatewayFactory: "5234567890123456",
}
PREFIXES = {
    PagSeguroGatewayFactory: "PAGSEG-",
    MercadoPagoGatewayFactory: "MP-",
    StripeGatewayFactory: "STRIPE-",
}

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(params=list(VALID_CARDS), ids=lambda cls: cls.family.value)
def factory_class(request: pytest.FixtureRequest) -> type[ConfiguredGatewayFactory]:
    return request.param


@pytest.fixture
def factory(
    factory_class: type[ConfiguredGatewayFactory],
    output_sink: InMemoryOutputSink,
    id_generator: SequentialIdGenerator,
    time_provider: FixedTimeProvider,
) -> ConfiguredGatewayFactory:
    return factory_class(
        output_sink=output_sink,
        id_generator=id_generator,
        time_provider=time_provider,
    )


@pytest.fixture
def service(factory: ConfiguredGatewayFactory, output_sink: InMemoryOutputSink) -> PaymentService:
    return PaymentService(factory, output_sink)


def mock_factory(
    family: GatewayFamily,
    card_valid: bool,
    processor_family: GatewayFamily | None = None,
    logger_family: GatewayFamily | None = None,
) -> MagicMock:
    """Build a factory whose components are mocks tagged with families."""
    validator = MagicMock(spec=PaymentValidator)
    validator.family = family
    validator.validate.return_value = card_valid

    processor = MagicMock(spec=PaymentProcessor)
    processor.family = processor_family or family
    processor.process.return_value = "MOCK-00000001"

    payment_logger = MagicMock(spec=PaymentLogger)
    payment_logger.family = logger_family or family

    factory = MagicMock(spec=PaymentGatewayFactory)
    factory.family = family
    factory.create_validator.return_value = validator
    factory.create_processor.return_value = processor
    factory.create_logger.return_value = payment_logger
    return factory


# =============================================================================
# Valid Card Tests
# =============================================================================


class TestProcessPaymentApproved:
    """Test the validate, process, log path for accepted cards."""

    def test_returns_approved_with_family_prefixed_id(
        self,
        service: PaymentService,
        factory_class: type[ConfiguredGatewayFactory],
    ) -> None:
        response = service.process_payment(Decimal("150.00"), VALID_CARDS[factory_class])

        assert response.status is PaymentStatus.APPROVED
        assert response.approved is True
        assert response.family is factory_class.family
        assert response.transaction_id == f"{PREFIXES[factory_class]}00000001"

    def test_logs_line_containing_transaction_id(
        self,
        service: PaymentService,
        factory_class: type[ConfiguredGatewayFactory],
        output_sink: InMemoryOutputSink,
    ) -> None:
        response = service.process_payment(Decimal("150.00"), VALID_CARDS[factory_class])

        last_line = output_sink.lines[-1]
        assert last_line.startswith(f"[{factory_class.family.display_name} Log]")
        assert last_line.endswith(f"Transaction processed: {response.transaction_id}")

    def test_runs_validate_process_log_in_order(self) -> None:
        factory = mock_factory(GatewayFamily.STRIPE, card_valid=True)
        service = PaymentService(factory, InMemoryOutputSink())

        service.process_payment(Decimal("300.00"), "4234567890123456")

        assert [c[0] for c in factory.method_calls] == [
            "create_validator",
            "create_processor",
            "create_logger",
        ]
        factory.create_validator.return_value.validate.assert_called_once_with("4234567890123456")
        factory.create_processor.return_value.process.assert_called_once_with(
            Decimal("300.00"), "4234567890123456"
        )
        factory.create_logger.return_value.log.assert_called_once_with(
            "Transaction processed: MOCK-00000001"
        )

    def test_amount_is_passed_through_unchanged(self) -> None:
        factory = mock_factory(GatewayFamily.PAGSEGURO, card_valid=True)
        service = PaymentService(factory, InMemoryOutputSink())

        service.process_payment(Decimal("-0.01"), "1234567890123456")

        factory.create_processor.return_value.process.assert_called_once_with(
            Decimal("-0.01"), "1234567890123456"
        )

    def test_each_call_is_independent(
        self,
        service: PaymentService,
        factory_class: type[ConfiguredGatewayFactory],
    ) -> None:
        first = service.process_payment(Decimal("1.00"), VALID_CARDS[factory_class])
        declined = service.process_payment(Decimal("1.00"), INVALID_CARDS[factory_class])
        second = service.process_payment(Decimal("1.00"), VALID_CARDS[factory_class])

        assert first.approved and second.approved
        assert not declined.approved
        assert first.transaction_id != second.transaction_id


# =============================================================================
# Invalid Card Tests
# =============================================================================


class TestProcessPaymentDeclined:
    """Test the early exit when the validator rejects the card."""

    def test_returns_declined_without_transaction_id(
        self,
        service: PaymentService,
        factory_class: type[ConfiguredGatewayFactory],
    ) -> None:
        response = service.process_payment(Decimal("150.00"), INVALID_CARDS[factory_class])

        assert response.status is PaymentStatus.DECLINED
        assert response.approved is False
        assert response.transaction_id is None

    def test_reports_card_invalid_and_nothing_else(
        self,
        service: PaymentService,
        factory_class: type[ConfiguredGatewayFactory],
        output_sink: InMemoryOutputSink,
    ) -> None:
        service.process_payment(Decimal("150.00"), INVALID_CARDS[factory_class])

        assert output_sink.lines == [
            f"{factory_class.family.display_name}: Validating card...",
            "Card invalid",
        ]

    @pytest.mark.parametrize("family", list(GatewayFamily))
    def test_processor_and_logger_never_created(self, family: GatewayFamily) -> None:
        factory = mock_factory(family, card_valid=False)
        service = PaymentService(factory, InMemoryOutputSink())

        service.process_payment(Decimal("150.00"), "0000")

        factory.create_validator.assert_called_once_with()
        factory.create_processor.assert_not_called()
        factory.create_logger.assert_not_called()
        factory.create_processor.return_value.process.assert_not_called()
        factory.create_logger.return_value.log.assert_not_called()

    def test_does_not_raise(self) -> None:
        factory = mock_factory(GatewayFamily.MERCADOPAGO, card_valid=False)
        service = PaymentService(factory, InMemoryOutputSink())

        response = service.process_payment(Decimal("200.00"), "4234567890123456")

        assert response.status is PaymentStatus.DECLINED


# =============================================================================
# Family Cohesion Tests
# =============================================================================


class TestFamilyCohesionEnforcement:
    """Test components from a foreign family are refused before use."""

    def test_foreign_processor_raises_before_processing(self) -> None:
        factory = mock_factory(
            GatewayFamily.STRIPE,
            card_valid=True,
            processor_family=GatewayFamily.PAGSEGURO,
        )
        service = PaymentService(factory, InMemoryOutputSink())

        with pytest.raises(GatewayFamilyMismatchError, match="pagseguro"):
            service.process_payment(Decimal("300.00"), "4234567890123456")

        factory.create_processor.return_value.process.assert_not_called()
        factory.create_logger.assert_not_called()

    def test_foreign_logger_raises_before_logging(self) -> None:
        factory = mock_factory(
            GatewayFamily.MERCADOPAGO,
            card_valid=True,
            logger_family=GatewayFamily.STRIPE,
        )
        service = PaymentService(factory, InMemoryOutputSink())

        with pytest.raises(GatewayFamilyMismatchError):
            service.process_payment(Decimal("200.00"), "5234567890123456")

        factory.create_logger.return_value.log.assert_not_called()


# =============================================================================
# Factory Binding Tests
# =============================================================================


class TestFactoryBinding:
    """Test the service stays bound to the factory it was built with."""

    def test_exposes_bound_factory(
        self, service: PaymentService, factory: ConfiguredGatewayFactory
    ) -> None:
        assert service.factory is factory

    def test_factory_cannot_be_reassigned(
        self, service: PaymentService, output_sink: InMemoryOutputSink
    ) -> None:
        with pytest.raises(AttributeError):
            service.factory = StripeGatewayFactory(output_sink=output_sink)  # type: ignore[misc]

    def test_has_no_rebind_method(self, service: PaymentService) -> None:
        public = [name for name in dir(service) if not name.startswith("_")]

        assert public == ["factory", "process_payment"]

    def test_switching_family_needs_new_service(self, output_sink: InMemoryOutputSink) -> None:
        stripe = PaymentService(StripeGatewayFactory(output_sink=output_sink), output_sink)
        mercadopago = PaymentService(
            MercadoPagoGatewayFactory(output_sink=output_sink), output_sink
        )

        assert stripe.process_payment(Decimal("1.00"), "4234567890123456").approved
        assert not mercadopago.process_payment(Decimal("1.00"), "4234567890123456").approved


# =============================================================================
# Scenarios
# =============================================================================


class TestScenarios:
    """Test the demo scenarios end to end with real gateway factories."""

    def test_pagseguro_sixteen_digit_card_is_processed(
        self,
        output_sink: InMemoryOutputSink,
        id_generator: SequentialIdGenerator,
        time_provider: FixedTimeProvider,
    ) -> None:
        factory = PagSeguroGatewayFactory(
            output_sink=output_sink,
            id_generator=id_generator,
            time_provider=time_provider,
        )

        response = PaymentService(factory, output_sink).process_payment(
            Decimal("150.00"), "1234567890123456"
        )

        assert response.transaction_id == "PAGSEG-00000001"
        assert output_sink.lines == [
            "PagSeguro: Validating card...",
            "PagSeguro: Processing R$ 150.00...",
            "[PagSeguro Log] 2024-01-15T12:00:00+00:00: Transaction processed: PAGSEG-00000001",
        ]

    def test_mercadopago_visa_card_is_declined(
        self,
        output_sink: InMemoryOutputSink,
        id_generator: SequentialIdGenerator,
    ) -> None:
        factory = MercadoPagoGatewayFactory(output_sink=output_sink, id_generator=id_generator)

        response = PaymentService(factory, output_sink).process_payment(
            Decimal("200.00"), "4234567890123456"
        )

        assert response.transaction_id is None
        assert output_sink.lines == ["MercadoPago: Validating card...", "Card invalid"]
        # No processor ran, so no token was consumed
        assert id_generator.next_token() == "00000001"
