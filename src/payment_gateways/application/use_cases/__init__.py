"""Use cases - Payment orchestration over gateway components."""

from payment_gateways.application.use_cases.process_payment import PaymentService

__all__ = [
    "PaymentService",
]
