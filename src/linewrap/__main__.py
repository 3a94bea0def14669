"""Allow ``python -m linewrap`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m linewrap`` behaves identically to the ``linewrap`` console
script.
"""

from __future__ import annotations

from linewrap.cli.app import cli

if __name__ == "__main__":
    cli()
