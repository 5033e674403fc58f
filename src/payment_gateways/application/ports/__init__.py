"""Ports - Abstract interfaces for gateway components and side effects.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete gateways.
"""

from payment_gateways.application.ports.gateway_factory import PaymentGatewayFactory
from payment_gateways.application.ports.id_generator import IdGenerator
from payment_gateways.application.ports.output_sink import OutputSink
from payment_gateways.application.ports.payment_logger import PaymentLogger
from payment_gateways.application.ports.payment_processor import PaymentProcessor
from payment_gateways.application.ports.payment_validator import PaymentValidator
from payment_gateways.application.ports.time_provider import TimeProvider

__all__ = [
    "IdGenerator",
    "OutputSink",
    "PaymentGatewayFactory",
    "PaymentLogger",
    "PaymentProcessor",
    "PaymentValidator",
    "TimeProvider",
]
