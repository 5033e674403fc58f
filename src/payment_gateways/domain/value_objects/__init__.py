"""Value objects - Immutable objects defined by their attributes."""

from payment_gateways.domain.value_objects.gateway_family import (
    GatewayFamily,
    normalize_gateway_name,
)
from payment_gateways.domain.value_objects.transaction_id import TransactionId

__all__ = [
    "GatewayFamily",
    "TransactionId",
    "normalize_gateway_name",
]
