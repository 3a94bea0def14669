"""Infrastructure: environment-derived defaults.

Probed once per invocation and threaded through the option schema, so
no module-level default is ever mutated.

Rules
-----
* Detection via :func:`shutil.get_terminal_size` only — honours
  ``COLUMNS`` and falls back when stdout is not a terminal.
* No ``print()``.
"""

from __future__ import annotations

import os
import shutil

from linewrap.core.models import EnvironmentDefaults

FALLBACK_WIDTH: int = 80


def detect_terminal_width() -> int:
    """Return the terminal width, or :data:`FALLBACK_WIDTH`."""
    columns = shutil.get_terminal_size(fallback=(FALLBACK_WIDTH, 24)).columns
    return columns if columns > 0 else FALLBACK_WIDTH


def detect_environment_defaults() -> EnvironmentDefaults:
    """Probe the process environment for width and line terminator."""
    return EnvironmentDefaults(
        width=detect_terminal_width(),
        newline=os.linesep,
    )
