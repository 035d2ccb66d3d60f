"""Allow ``python -m flaq`` invocation.

Runs the ``greet`` demo through the CLI error-boundary entry point so
that ``python -m flaq`` behaves identically to the ``flaq-greet``
console script.
"""

from __future__ import annotations

from flaq.cli.app import cli

if __name__ == "__main__":
    cli()
