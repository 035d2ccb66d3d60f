"""Process-level error policies.

The core hands every parse error and help request to the flag set's
error policy.  :class:`~flaq.core.flagset.RaisePolicy` (the core default)
returns it to the caller; the policies here are for programs that want
the conventional command-line behaviour without writing it themselves.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn

from flaq.cli import exit_codes
from flaq.cli.console import console, stdout_console
from flaq.exceptions import FlaqError, HelpRequested

if TYPE_CHECKING:
    from flaq.core.flagset import FlagSet


def print_usage(flag_set: FlagSet) -> None:
    """Write the flag set's usage text to standard output."""
    stdout_console.print(
        flag_set.usage(),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
        end="",
    )


def report_error(error: FlaqError, flag_set: FlagSet | None = None) -> None:
    """Write *error* and its hint to standard error."""
    console.print(
        f"Error: {error}", style="bold red", markup=False, emoji=False, highlight=False,
    )
    hint = error.hint
    if hint is None and flag_set is not None and flag_set.lookup("help"):
        program = flag_set.name or "the program"
        hint = f"Run '{program} --help' for usage."
    if hint:
        console.print(
            f"Hint: {hint}", style="yellow", markup=False, emoji=False, highlight=False,
        )


class ExitPolicy:
    """Print and terminate the process.

    Help requests print the usage text to stdout and exit with
    :data:`~flaq.cli.exit_codes.SUCCESS`; parse errors are reported on
    stderr and exit with :data:`~flaq.cli.exit_codes.USAGE_ERROR`.
    """

    def handle(self, error: FlaqError, flag_set: FlagSet) -> NoReturn:
        if isinstance(error, HelpRequested):
            print_usage(flag_set)
            sys.exit(exit_codes.SUCCESS)
        report_error(error, flag_set)
        sys.exit(exit_codes.USAGE_ERROR)


class AbortPolicy:
    """Treat any parse failure as fatal.

    Raises :class:`RuntimeError` chained to the original error, which is
    not meant to be caught.  Help requests still exit cleanly.
    """

    def handle(self, error: FlaqError, flag_set: FlagSet) -> NoReturn:
        if isinstance(error, HelpRequested):
            print_usage(flag_set)
            sys.exit(exit_codes.SUCCESS)
        raise RuntimeError(f"flaq: {error}") from error
