"""Core layer — flag models, value sinks, the parser and usage rendering.

Rules
-----
* No ``print()`` calls; diagnostics go through :mod:`logging` at debug level.
* No process-level side effects (no ``sys.exit``).
* No imports from ``cli``.
"""

from flaq.core.flags import (
    bool_flag,
    count_flag,
    duration_flag,
    float_flag,
    help_flag,
    int_flag,
    string_flag,
)
from flaq.core.flagset import FlagSet, RaisePolicy
from flaq.core.models import Flag, FlagArg, ParserOptions
from flaq.core.parser import Parser
from flaq.core.protocols import ErrorPolicy, Slot, Value
from flaq.core.struct_tags import TagSpec, parse_tag, struct_flags, tag
from flaq.core.usage import flag_usage, format_usage
from flaq.core.values import AttrRef, Var

__all__: list[str] = [
    "AttrRef",
    "ErrorPolicy",
    "Flag",
    "FlagArg",
    "FlagSet",
    "Parser",
    "ParserOptions",
    "RaisePolicy",
    "Slot",
    "TagSpec",
    "Value",
    "Var",
    "bool_flag",
    "count_flag",
    "duration_flag",
    "flag_usage",
    "float_flag",
    "format_usage",
    "help_flag",
    "int_flag",
    "parse_tag",
    "string_flag",
    "struct_flags",
    "tag",
]
