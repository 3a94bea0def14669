"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol


class LineWrapper(Protocol):
    """Contract for line-wrapping engines."""

    def wrap(self, text: str) -> str:
        """Wrap *text* and return the lines joined by the engine's newline."""
        ...  # pragma: no cover


class SourceReader(Protocol):
    """Contract for reading whole input units.

    Implementations must map all ``OSError`` and decoding failures to
    :class:`~linewrap.exceptions.SourceReadError`.
    """

    def read_stdin(self, encoding: str) -> str:
        """Read standard input to end-of-data and decode it."""
        ...  # pragma: no cover

    def read_file(self, path: str, encoding: str) -> str:
        """Read the whole file at *path* and decode it."""
        ...  # pragma: no cover


class OutputSink(Protocol):
    """Contract for the single destination of wrapped text.

    Implementations must map write failures to
    :class:`~linewrap.exceptions.OutputWriteError`.
    """

    def write(self, text: str) -> None:
        """Append *text* to the destination."""
        ...  # pragma: no cover

    def close(self) -> None:
        """Flush buffered output and release the destination."""
        ...  # pragma: no cover
