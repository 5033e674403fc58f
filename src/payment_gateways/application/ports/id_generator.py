from __future__ import annotations

from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Port for transaction token generation.

    Contract:
    - next_token() MUST return a non-empty string without "-"
    - Tokens need only be unique enough to display
    """

    @abstractmethod
    def next_token(self) -> str:
        """Return a fresh token for a transaction identifier."""
        ...
