"""Core wrap service — drives the engine over every text source.

This service depends on a :class:`~linewrap.core.protocols.LineWrapper`
and a :class:`~linewrap.core.protocols.SourceReader` injected at
construction time, and writes to an
:class:`~linewrap.core.protocols.OutputSink` passed to :meth:`run`.

Guarantees
----------
* Strictly sequential: source N is read, wrapped, and written before
  source N+1 is read.
* Inline text fragments are processed before positional sources.
* Output is append-only — a failure on a later source leaves earlier
  writes in place.
* Only :class:`~linewrap.exceptions.LineWrapError` subclasses escape
  from reads.
"""

from __future__ import annotations

from linewrap.core.models import STDIN_SENTINEL, ResolvedConfig, TextSource
from linewrap.core.protocols import LineWrapper, OutputSink, SourceReader
from linewrap.exceptions import LineWrapError, SourceReadError


class WrapService:
    """Stateless service that wraps each source and streams the result.

    Parameters
    ----------
    wrapper:
        Any object satisfying the :class:`LineWrapper` protocol.
    reader:
        Any object satisfying the :class:`SourceReader` protocol.
    """

    def __init__(self, wrapper: LineWrapper, reader: SourceReader) -> None:
        self._wrapper: LineWrapper = wrapper
        self._reader: SourceReader = reader

    # ------------------------------------------------------------------
    # Source planning (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def plan_sources(config: ResolvedConfig) -> tuple[TextSource, ...]:
        """Return every unit to wrap, in processing order."""
        planned: list[TextSource] = [
            TextSource(kind="text", value=fragment)
            for fragment in config.text_fragments
        ]
        positionals = config.positional_sources
        if not positionals and not config.text_fragments:
            positionals = (STDIN_SENTINEL,)
        for value in positionals:
            kind = "stdin" if value == STDIN_SENTINEL else "file"
            planned.append(TextSource(kind=kind, value=value))
        return tuple(planned)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, config: ResolvedConfig, sink: OutputSink) -> int:
        """Wrap every planned source into *sink*.

        Each wrapped unit is followed by one write of ``config.newline``.
        The sink is not closed here; its owner closes it.

        Returns
        -------
        int
            Number of units written.

        Raises
        ------
        SourceReadError
            When a source cannot be read.  Units already written stand.
        OutputWriteError
            When the sink rejects a write.
        """
        written = 0
        for source in self.plan_sources(config):
            text = self._load(source, config.encoding)
            sink.write(self._wrapper.wrap(text))
            sink.write(config.newline)
            written += 1
        return written

    # ------------------------------------------------------------------
    # Reader delegation (safe boundary)
    # ------------------------------------------------------------------

    def _load(self, source: TextSource, encoding: str) -> str:
        """Return the full text of *source*."""
        if source.kind == "text":
            return source.value
        try:
            if source.kind == "stdin":
                return self._reader.read_stdin(encoding)
            return self._reader.read_file(source.value, encoding)
        except LineWrapError:
            raise
        except OSError as exc:
            raise SourceReadError(
                f"Cannot read {source.value}: {exc.strerror or exc}",
            ) from exc
