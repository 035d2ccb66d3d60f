"""flaq — POSIX/GNU-style command-line option parsing.

Short options (``-x``, clusters like ``-xvf``), long options
(``--name value``, ``--name=value``), optional arguments, abbreviations,
dataclass struct tags and generated help text.

The module-level functions operate on :data:`command_line`, a flag set
bound to ``sys.argv`` that prints help or errors and exits, like a
typical command-line program::

    import flaq

    name = flaq.Var("world")
    flaq.add_string(name, "name", "n", "name of the person to greet")
    flaq.parse()
    print(f"Hello {name.value}!")
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from flaq.cli.policy import AbortPolicy, ExitPolicy
from flaq.core import (
    AttrRef,
    Flag,
    FlagArg,
    FlagSet,
    Parser,
    ParserOptions,
    RaisePolicy,
    Var,
    flag_usage,
    format_usage,
    parse_tag,
    struct_flags,
    tag,
)
from flaq.exceptions import (
    AmbiguousOptionError,
    ConfigurationError,
    FlaqError,
    HelpRequested,
    MissingArgumentError,
    ParseError,
    UnexpectedArgumentError,
    UnknownOptionError,
    ValueParseError,
)
from flaq.version import __version__

command_line: FlagSet = FlagSet(
    os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "",
    error_policy=ExitPolicy(),
)
"""Default flag set used by the module-level functions."""

add = command_line.add
add_string = command_line.add_string
add_bool = command_line.add_bool
add_int = command_line.add_int
add_float = command_line.add_float
add_duration = command_line.add_duration
add_count = command_line.add_count
add_help = command_line.add_help
struct = command_line.struct
lookup = command_line.lookup
next = command_line.next  # noqa: A001
operands = command_line.operands
args = command_line.args
usage = command_line.usage


def parse(argv: Sequence[str] | None = None) -> None:
    """Parse *argv* (default ``sys.argv[1:]``) against :data:`command_line`."""
    command_line.parse(argv)


__all__: list[str] = [
    "AbortPolicy",
    "AmbiguousOptionError",
    "AttrRef",
    "ConfigurationError",
    "ExitPolicy",
    "Flag",
    "FlagArg",
    "FlagSet",
    "FlaqError",
    "HelpRequested",
    "MissingArgumentError",
    "ParseError",
    "Parser",
    "ParserOptions",
    "RaisePolicy",
    "UnexpectedArgumentError",
    "UnknownOptionError",
    "ValueParseError",
    "Var",
    "__version__",
    "add",
    "add_bool",
    "add_count",
    "add_duration",
    "add_float",
    "add_help",
    "add_int",
    "add_string",
    "args",
    "command_line",
    "flag_usage",
    "format_usage",
    "lookup",
    "next",
    "operands",
    "parse",
    "parse_tag",
    "struct",
    "struct_flags",
    "tag",
    "usage",
]
