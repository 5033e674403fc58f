from __future__ import annotations

from enum import Enum

_DISPLAY_NAMES = {
    "pagseguro": "PagSeguro",
    "mercadopago": "MercadoPago",
    "stripe": "Stripe",
}


def normalize_gateway_name(name: str) -> str:
    """Canonical form of a gateway name: trimmed and lower-cased."""
    return name.strip().lower()


class GatewayFamily(Enum):
    """The mock payment providers a gateway factory can belong to.

    Each family binds exactly one validator, one processor and one logger
    implementation. The value doubles as the registry key.
    """

    PAGSEGURO = "pagseguro"
    MERCADOPAGO = "mercadopago"
    STRIPE = "stripe"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]
