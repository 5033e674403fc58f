"""Gateway families - Concrete validators, processors, loggers and their factories."""

from payment_gateways.infrastructure.gateways.base import ConfiguredGatewayFactory
from payment_gateways.infrastructure.gateways.mercadopago import MercadoPagoGatewayFactory
from payment_gateways.infrastructure.gateways.pagseguro import PagSeguroGatewayFactory
from payment_gateways.infrastructure.gateways.registry import (
    GatewayRegistry,
    default_registry,
    get_gateway_factory,
)
from payment_gateways.infrastructure.gateways.stripe import StripeGatewayFactory

__all__ = [
    "ConfiguredGatewayFactory",
    "GatewayRegistry",
    "MercadoPagoGatewayFactory",
    "PagSeguroGatewayFactory",
    "StripeGatewayFactory",
    "default_registry",
    "get_gateway_factory",
]
