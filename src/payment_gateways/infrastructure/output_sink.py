from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from payment_gateways.application.ports import OutputSink

if TYPE_CHECKING:
    from typing import TextIO


class ConsoleOutputSink(OutputSink):
    """Writes lines to a text stream, stdout unless one is given.

    sys.stdout is looked up on every write so redirected or captured
    stdout is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(line, file=stream)


class InMemoryOutputSink(OutputSink):
    """Records lines in memory for tests.

    NOT thread-safe; intended for single-threaded unit tests.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        """Recorded lines, oldest first. Returns a copy."""
        return list(self._lines)

    def write(self, line: str) -> None:
        self._lines.append(line)

    def clear(self) -> None:
        self._lines.clear()
