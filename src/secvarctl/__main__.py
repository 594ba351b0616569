"""Allow ``python -m secvarctl`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m secvarctl`` behaves identically to the ``secvarctl``
console script.
"""

from __future__ import annotations

from secvarctl.cli.app import cli

if __name__ == "__main__":
    cli()
