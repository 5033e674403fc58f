from __future__ import annotations

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Port for human-readable trace output.

    Contract:
    - write() receives one line without a trailing newline
    - Lines from concurrent callers may interleave; atomicity is not required
    """

    @abstractmethod
    def write(self, line: str) -> None:
        """Emit a single line."""
        ...
