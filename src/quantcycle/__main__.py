"""Allow ``python -m quantcycle`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m quantcycle`` behaves identically to the ``quantcycle``
console script.
"""

from __future__ import annotations

from quantcycle.cli.app import cli

if __name__ == "__main__":
    cli()
