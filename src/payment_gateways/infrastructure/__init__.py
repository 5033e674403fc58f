"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Gateways: The PagSeguro, MercadoPago and Stripe component families and factories
- Output Sinks: Console and in-memory trace output
- Id Generators: Random and sequential transaction tokens
- Time Provider: Clock abstraction for testability
- Switch Payment: The string-switch service wired directly to concrete gateways

Infrastructure adapters implement the ports defined in the application layer.
"""

from payment_gateways.infrastructure.id_generator import SequentialIdGenerator, UuidIdGenerator
from payment_gateways.infrastructure.output_sink import ConsoleOutputSink, InMemoryOutputSink
from payment_gateways.infrastructure.switch_payment import SwitchPaymentService
from payment_gateways.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "ConsoleOutputSink",
    "FixedTimeProvider",
    "InMemoryOutputSink",
    "SequentialIdGenerator",
    "SwitchPaymentService",
    "SystemTimeProvider",
    "UuidIdGenerator",
]
