"""Custom exception hierarchy for linewrap.

All exceptions that cross layer boundaries must inherit from
:class:`LineWrapError`.  Raw ``OSError`` and codec exceptions must NEVER
propagate beyond the infrastructure layer — they are caught there and
re-raised as a typed subclass defined here.

Hierarchy
---------
LineWrapError
├── UsageError
│   └── HelpRequested
├── SourceReadError
├── OutputWriteError
└── UnsupportedEncodingError
"""

from __future__ import annotations


class LineWrapError(Exception):
    """Base exception for all linewrap errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(LineWrapError):
    """Raised when the command line cannot be resolved into a configuration.

    Carries the full help text so the caller can show the user how the
    command is meant to be invoked.
    """

    def __init__(
        self,
        message: str,
        *,
        help_text: str = "",
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.help_text: str = help_text


class HelpRequested(UsageError):
    """Raised when ``-h/--help`` short-circuits option resolution."""


# --- Input / output --------------------------------------------------------

class SourceReadError(LineWrapError):
    """Raised when standard input or an input file cannot be read."""


class OutputWriteError(LineWrapError):
    """Raised when the output sink cannot be opened, written, or closed."""


class UnsupportedEncodingError(LineWrapError):
    """Raised when an encoding name has no codec mapping."""
