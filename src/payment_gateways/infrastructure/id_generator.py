from __future__ import annotations

from itertools import count
from uuid import uuid4

from payment_gateways.application.ports import IdGenerator

TOKEN_LENGTH = 8


class UuidIdGenerator(IdGenerator):
    """Production generator: the first 8 hex characters of a random UUID."""

    def next_token(self) -> str:
        return uuid4().hex[:TOKEN_LENGTH]


class SequentialIdGenerator(IdGenerator):
    """Deterministic generator for tests: 00000001, 00000002, ..."""

    def __init__(self, start: int = 1) -> None:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._counter = count(start)

    def next_token(self) -> str:
        return f"{next(self._counter):0{TOKEN_LENGTH}d}"
