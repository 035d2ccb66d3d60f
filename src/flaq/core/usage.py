"""Help-text rendering.

Pure functions of a sequence of flags: no I/O, no parser state.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable

from flaq.core.models import Flag

MAX_SIGNATURE_WIDTH: int = 25
"""Signatures longer than this overflow their column instead of widening it."""


def flag_usage(flag: Flag) -> str:
    """Render the signature of *flag*, e.g. ``-n, --name <arg>``.

    Flags without a short form are indented so that long names line up
    with those of flags that have one.
    """
    if flag.usage:
        return flag.usage

    usage = "    "
    if flag.short:
        usage = f"-{flag.short}"
        if flag.long:
            usage += ", "
    if flag.long:
        usage += f"--{flag.long}"

    if flag.arg is not None:
        arg_name = flag.arg.name or "arg"
        if flag.long and flag.arg.optional:
            usage += f"=<{arg_name}>"
        elif flag.short and flag.arg.optional:
            usage += f"<{arg_name}>"
        else:
            usage += f" <{arg_name}>"
    return usage


def _sort_key(flag: Flag) -> str:
    return flag.long + flag.short


def format_usage(
    flags: Iterable[Flag],
    *,
    program: str = "",
    usage_line: str = "",
) -> str:
    """Render the full help text for *flags*.

    Parameters
    ----------
    flags:
        Flags in registration order; hidden ones are skipped.
    program:
        Program name for the default usage line.  Defaults to the base
        name of ``sys.argv[0]``.
    usage_line:
        Replaces the default ``Usage: <program> [options]`` header.
    """
    if not usage_line:
        program = program or os.path.basename(sys.argv[0])
        usage_line = f"Usage: {program} [options]\n"
    elif not usage_line.endswith("\n"):
        usage_line += "\n"

    visible = sorted((flag for flag in flags if not flag.hidden), key=_sort_key)
    signatures = [flag_usage(flag) for flag in visible]
    width = min(MAX_SIGNATURE_WIDTH, max((len(sig) for sig in signatures), default=0))

    rows = [
        f"  {signature.ljust(width)}  {flag.description}".rstrip() + "\n"
        for flag, signature in zip(visible, signatures)
    ]
    return usage_line + "\nOptions\n" + "".join(rows)
