"""Infrastructure: reading whole input units from stdin and files.

Implements the :class:`~linewrap.core.protocols.SourceReader` protocol.

Rules
-----
* Every source is read to completion before it is decoded.
* Every ``OSError`` is re-raised as :class:`SourceReadError`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import sys
from pathlib import Path

from linewrap.exceptions import SourceReadError
from linewrap.infra import encodings


class FileSystemSourceReader:
    """Read standard input and files, decoding with the chosen encoding."""

    def read_stdin(self, encoding: str) -> str:
        """Read ``sys.stdin`` until end-of-data."""
        try:
            data = sys.stdin.buffer.read()
        except OSError as exc:
            raise SourceReadError(
                f"Cannot read standard input: {exc.strerror or exc}",
            ) from exc
        return encodings.decode(data, encoding)

    def read_file(self, path: str, encoding: str) -> str:
        """Read the whole file at *path*."""
        try:
            data = Path(path).read_bytes()
        except FileNotFoundError as exc:
            raise SourceReadError(
                f"Cannot read {path}: {exc.strerror}",
                hint='Check the path, or use "-" to read standard input.',
            ) from exc
        except OSError as exc:
            raise SourceReadError(
                f"Cannot read {path}: {exc.strerror or exc}",
            ) from exc
        return encodings.decode(data, encoding)
