"""CLI application entry point for linewrap.

This module is the **sole error boundary** for the entire application.
It catches :class:`~linewrap.exceptions.LineWrapError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
messages via the console proxy and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — resolution is delegated to
  :mod:`linewrap.cli.options`, wrapping to the core and infrastructure
  layers.
* Diagnostics go to stderr; only wrapped text and the ``--verbose``
  dump go to stdout.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import sys
import traceback
from collections.abc import Sequence

from linewrap.cli import exit_codes
from linewrap.cli.console import console
from linewrap.cli.options import resolve_options
from linewrap.core.models import ResolvedConfig, WrapOptions
from linewrap.exceptions import HelpRequested, LineWrapError, UsageError
from linewrap.infra.environment import detect_environment_defaults


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _dump_options(options: WrapOptions) -> None:
    """Write the resolved engine configuration to stdout."""
    from rich.pretty import pretty_repr

    sys.stdout.write(pretty_repr(options) + "\n")
    sys.stdout.flush()


def _handle_wrap(config: ResolvedConfig) -> int:
    """Wrap every source in *config* into the chosen sink.

    Flow:
    1. Translate the configuration into engine options.
    2. Optionally dump those options (``--verbose``).
    3. Open the sink — the ``--outFile`` path, or stdout.
    4. Wrap text fragments, then positional sources, one at a time.
    5. Close the sink, flushing everything written so far even when a
       source fails.
    """
    from linewrap.core.engine_options import build_wrap_options
    from linewrap.core.wrap_service import WrapService
    from linewrap.infra.linewrap_engine import LineWrap
    from linewrap.infra.sinks import open_sink
    from linewrap.infra.sources import FileSystemSourceReader

    options = build_wrap_options(config)
    if config.verbose:
        _dump_options(options)

    service = WrapService(LineWrap(options), FileSystemSourceReader())
    with open_sink(config.out_file, config.encoding) as sink:
        service.run(config, sink)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the linewrap CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.  Help and invalid command lines return
        :data:`exit_codes.USAGE_ERROR` after writing the help text to
        stderr; runtime failures propagate as exceptions.
    """
    defaults = detect_environment_defaults()
    try:
        config = resolve_options(argv, defaults)
    except HelpRequested as exc:
        console.write(exc.help_text)
        return exit_codes.USAGE_ERROR
    except UsageError as exc:
        console.error(str(exc), exc.hint)
        console.write(exc.help_text)
        return exit_codes.USAGE_ERROR

    return _handle_wrap(config)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Known errors print a one-line message (plus hint); anything else
    prints the full traceback.  Both exit with
    :data:`exit_codes.GENERAL_ERROR`.
    """
    try:
        code = main()
        sys.exit(code)
    except LineWrapError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] Please report this issue.",
        )
        console.write(traceback.format_exc())
        sys.exit(exit_codes.GENERAL_ERROR)
