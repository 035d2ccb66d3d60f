"""``greet`` — demo program and CLI error boundary for flaq.

The options are declared with struct tags on :class:`GreetOptions` and
parsed with :class:`~flaq.cli.policy.ExitPolicy`, so ``--help`` and bad
options are handled the conventional way.

This module is the only place that translates between the domain world
and the OS process exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from flaq.cli import exit_codes
from flaq.cli.console import console, stdout_console
from flaq.cli.policy import ExitPolicy, report_error
from flaq.core.flagset import FlagSet
from flaq.core.struct_tags import tag
from flaq.exceptions import FlaqError

logger = logging.getLogger(__name__)


@dataclass
class GreetOptions:
    name: str = field(
        default="world",
        metadata=tag("-n, --name string    name of the person to greet"),
    )
    yell: bool = field(
        default=False,
        metadata=tag("    --yell           greet the person loudly"),
    )
    repeat: int = field(
        default=1,
        metadata=tag("-r, --repeat int     number of times to greet"),
    )
    verbose: int = field(
        default=0,
        metadata=tag("-v, --verbose count  log the parsed options"),
    )


def _build_flag_set(opts: GreetOptions) -> FlagSet:
    flags = FlagSet(
        "greet",
        abbreviations=True,
        error_policy=ExitPolicy(),
        usage_line="Usage: greet [options] [name...]",
    )
    flags.struct(opts)
    return flags


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the greet demo.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    opts = GreetOptions()
    flags = _build_flag_set(opts)
    flags.parse(argv)

    if opts.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    logger.debug("options: %s, operands: %s", opts, flags.operands())

    if opts.repeat < 1:
        raise FlaqError(
            f"--repeat must be at least 1, got {opts.repeat}",
            hint="Leave --repeat out to greet once.",
        )

    names = flags.operands() or [opts.name]
    for name in names:
        greeting = f"Hello {name.upper() if opts.yell else name}!"
        for _ in range(opts.repeat):
            stdout_console.print(greeting, markup=False, emoji=False, highlight=False)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except FlaqError as exc:
        report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
