"""quantcycle — command-line bootstrap for the QuantCycle application.

Parses process arguments, builds the application, and runs its single
asynchronous entry operation behind a CLI error boundary.
"""

from quantcycle.version import __version__

__all__: list[str] = ["__version__"]
