from __future__ import annotations

from dataclasses import dataclass

from payment_gateways.domain.exceptions import InvalidTransactionIdError

SEPARATOR = "-"


@dataclass(frozen=True, slots=True)
class TransactionId:
    """Value object for the opaque identifiers processors hand back.

    Rendered as "<prefix>-<token>", e.g. "STRIPE-1a2b3c4d". The prefix names
    the gateway family; uniqueness of the token is not verified.
    """

    prefix: str
    token: str

    def __post_init__(self) -> None:
        if not self.prefix or SEPARATOR in self.prefix:
            raise InvalidTransactionIdError(f"Invalid transaction prefix: {self.prefix!r}")
        if not self.token:
            raise InvalidTransactionIdError("Transaction token cannot be empty")

    def __str__(self) -> str:
        return f"{self.prefix}{SEPARATOR}{self.token}"

    @classmethod
    def from_string(cls, value: str) -> TransactionId:
        """Parse a TransactionId from its rendered form.

        Args:
            value: String such as "MP-1a2b3c4d". Only the first separator splits.

        Returns:
            A TransactionId instance.

        Raises:
            InvalidTransactionIdError: If prefix or token is missing.
        """
        prefix, separator, token = value.partition(SEPARATOR)
        if not separator:
            raise InvalidTransactionIdError(f"Invalid transaction ID: {value}")
        return cls(prefix=prefix, token=token)
