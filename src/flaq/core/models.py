"""Domain models for flaq.

All models are **frozen** dataclasses.  A :class:`Flag` is immutable
once built; the only mutable thing it refers to is its value sink, whose
bound slot belongs to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from flaq.core.protocols import Value
from flaq.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# Flag argument
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FlagArg:
    """Argument specification of a flag that takes a value."""

    default: str = ""
    """Text bound when the argument is omitted.  Empty means mandatory."""

    name: str = ""
    """Placeholder shown in usage text (``arg`` when empty)."""

    @property
    def optional(self) -> bool:
        return self.default != ""


# ---------------------------------------------------------------------------
# Option descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Flag:
    """A command-line option.

    ``arg`` is ``None`` for flags taking no argument (booleans, counts,
    help).  ``terminal`` flags stop the parse right after being bound.
    ``hidden`` flags are left out of the usage text, and a non-empty
    ``usage`` replaces the rendered signature.
    """

    long: str
    short: str
    description: str
    value: Value
    arg: FlagArg | None = None
    terminal: bool = False
    hidden: bool = False
    usage: str = ""

    def __post_init__(self) -> None:
        if not self.long and not self.short:
            raise ConfigurationError(
                "a flag needs a long or a short name",
                hint=f"description was {self.description!r}",
            )
        if self.short and (len(self.short) != 1 or self.short in "- ="):
            raise ConfigurationError(
                f"invalid short name {self.short!r}",
                hint="Short names are a single character other than '-'.",
            )
        if self.long and (
            self.long.startswith("-")
            or "=" in self.long
            or any(ch.isspace() for ch in self.long)
        ):
            raise ConfigurationError(
                f"invalid long name {self.long!r}",
                hint="Give the long name without dashes, e.g. 'name'.",
            )

    @property
    def takes_argument(self) -> bool:
        return self.arg is not None

    @property
    def requires_argument(self) -> bool:
        return self.arg is not None and not self.arg.optional

    @property
    def display_name(self) -> str:
        """``--long`` when available, else ``-s``."""
        return f"--{self.long}" if self.long else f"-{self.short}"


# ---------------------------------------------------------------------------
# Parser configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Parse-time configuration of a flag set."""

    abbreviations: bool = False
    """Resolve unambiguous prefixes of long names."""

    ordered: bool = False
    """Stop at the first operand; options must come first."""

    disable_help: bool = False
    """Do not add the automatic ``-h, --help`` flag."""
