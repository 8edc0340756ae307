"""Allow ``python -m cfov`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m cfov`` behaves identically to the ``fov`` console
script.
"""

from __future__ import annotations

from cfov.cli.app import cli

if __name__ == "__main__":
    cli()
