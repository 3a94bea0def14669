"""Core / service layer — pure orchestration and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or stream I/O — sources and sinks arrive via protocols.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from linewrap.core.engine_options import build_wrap_options
from linewrap.core.models import (
    EnvironmentDefaults,
    LiteralIndent,
    Overflow,
    RepeatIndent,
    ResolvedConfig,
    TextSource,
    WrapOptions,
)
from linewrap.core.protocols import LineWrapper, OutputSink, SourceReader
from linewrap.core.wrap_service import WrapService

__all__: list[str] = [
    "EnvironmentDefaults",
    "LineWrapper",
    "LiteralIndent",
    "OutputSink",
    "Overflow",
    "RepeatIndent",
    "ResolvedConfig",
    "SourceReader",
    "TextSource",
    "WrapOptions",
    "WrapService",
    "build_wrap_options",
]
