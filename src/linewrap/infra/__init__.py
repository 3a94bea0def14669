"""Infrastructure layer — external system integration.

This layer wraps all interaction with the operating system (standard
streams, files, terminal size) and the Rich cell-width tables used by
the wrapping engine.  Every raw ``OSError`` must be caught here and
re-raised as a :class:`~linewrap.exceptions.LineWrapError` subclass.

:mod:`linewrap.infra.linewrap_engine` is not re-exported: callers import
it directly so Rich is only loaded once text is actually wrapped.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from linewrap.infra.environment import detect_environment_defaults
from linewrap.infra.sinks import FileSink, StdoutSink, open_sink
from linewrap.infra.sources import FileSystemSourceReader

__all__: list[str] = [
    "FileSink",
    "FileSystemSourceReader",
    "StdoutSink",
    "detect_environment_defaults",
    "open_sink",
]
