"""Domain exceptions for payment-gateways.

Exception hierarchy:
    DomainException (base)
    ├── Configuration Errors
    │   └── UnsupportedGatewayError
    ├── Validation Errors
    │   └── InvalidTransactionIdError
    └── Invariant Errors
        └── GatewayFamilyMismatchError (invariant violation)

An invalid card is NOT an exception. It is a normal negative validation
result reported as a declined payment.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Configuration Errors
# =============================================================================


class UnsupportedGatewayError(DomainException):
    """Raised when a gateway family is requested by a name nobody supports.

    Raised by the switch-based service before any component is created,
    and by registry lookups. Nothing is partially executed.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidTransactionIdError(DomainException):
    """Raised when a transaction identifier string cannot be parsed.

    A transaction identifier must have the form "<prefix>-<token>" with
    both parts non-empty.
    """


# =============================================================================
# Invariant Errors
# =============================================================================


class GatewayFamilyMismatchError(DomainException):
    """Raised when a factory yields a component from a different family.

    This is an INVARIANT VIOLATION, not a client error. A correct
    PaymentGatewayFactory never returns a foreign component; if raised,
    the factory implementation is wrong.
    """
