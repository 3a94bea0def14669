"""Infrastructure: output sinks for wrapped text.

Two implementations of :class:`~linewrap.core.protocols.OutputSink`:

* :class:`StdoutSink` — writes text to ``sys.stdout`` exactly as the
  platform terminal expects.  No encoding override is ever applied, and
  closing only flushes; stdout stays open for the process.
* :class:`FileSink` — truncates or creates a file and encodes every
  write with the configured ``--encoding``.

Both are context managers so the owner can guarantee the sink is flushed
and closed even when a later source fails.
"""

from __future__ import annotations

import sys
from typing import IO

from linewrap.exceptions import OutputWriteError
from linewrap.infra import encodings


class StdoutSink:
    """Sink backed by the process's standard output.

    Newline translation is switched off on the stream: the terminator
    written by the caller is already the platform's, and translating it
    again would turn ``"\\r\\n"`` into ``"\\r\\r\\n"``.  The encoding is
    left untouched.
    """

    def __init__(self) -> None:
        self._stream: IO[str] = sys.stdout
        reconfigure = getattr(self._stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(newline="")

    def __enter__(self) -> StdoutSink:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def write(self, text: str) -> None:
        try:
            self._stream.write(text)
        except OSError as exc:
            raise OutputWriteError(
                f"Cannot write to standard output: {exc.strerror or exc}",
            ) from exc

    def close(self) -> None:
        """Flush, leaving the underlying stream open."""
        try:
            self._stream.flush()
        except OSError as exc:
            raise OutputWriteError(
                f"Cannot flush standard output: {exc.strerror or exc}",
            ) from exc


class FileSink:
    """Sink backed by a file opened for writing (truncate-or-create)."""

    def __init__(self, path: str, encoding: str) -> None:
        self._path: str = path
        self._encoding: str = encoding
        try:
            self._handle: IO[bytes] = open(path, "wb")  # noqa: SIM115
        except OSError as exc:
            raise OutputWriteError(
                f"Cannot open {path} for writing: {exc.strerror or exc}",
            ) from exc
        self._closed: bool = False

    def __enter__(self) -> FileSink:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    @property
    def path(self) -> str:
        return self._path

    def write(self, text: str) -> None:
        data = encodings.encode(text, self._encoding)
        try:
            self._handle.write(data)
        except OSError as exc:
            raise OutputWriteError(
                f"Cannot write to {self._path}: {exc.strerror or exc}",
            ) from exc

    def close(self) -> None:
        """Flush and close the file (idempotent)."""
        if self._closed:
            return
        self._closed = True
        try:
            self._handle.flush()
        except OSError as exc:
            raise OutputWriteError(
                f"Cannot flush {self._path}: {exc.strerror or exc}",
            ) from exc
        finally:
            self._handle.close()


def open_sink(out_file: str | None, encoding: str) -> StdoutSink | FileSink:
    """Return the sink for this invocation.

    A path selects a :class:`FileSink` using *encoding*; ``None``
    selects :class:`StdoutSink`, which ignores *encoding*.
    """
    if out_file is None:
        return StdoutSink()
    return FileSink(out_file, encoding)
