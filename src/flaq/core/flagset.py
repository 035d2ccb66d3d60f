"""Flag registry, parse entry point and usage rendering.

A :class:`FlagSet` collects flags (directly, through the typed
``add_*`` methods, or from a tagged dataclass), runs a
:class:`~flaq.core.parser.Parser` session over an argument list, and
renders help text.  What a parse failure does to the process is decided
by the injected :class:`~flaq.core.protocols.ErrorPolicy`; the default
:class:`RaisePolicy` simply re-raises so the set stays side-effect free.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import NoReturn

from flaq.core.flags import (
    bool_flag,
    count_flag,
    duration_flag,
    float_flag,
    help_flag,
    int_flag,
    string_flag,
)
from flaq.core.models import Flag, ParserOptions
from flaq.core.parser import Parser
from flaq.core.protocols import ErrorPolicy, Slot
from flaq.core.struct_tags import struct_flags
from flaq.core.usage import format_usage
from flaq.exceptions import FlaqError, HelpRequested, ParseError

logger = logging.getLogger(__name__)


class RaisePolicy:
    """Error policy handing every error back to the caller."""

    def handle(self, error: FlaqError, flag_set: FlagSet) -> NoReturn:
        raise error


class FlagSet:
    """An ordered set of flags and the parse session run against them.

    Parameters
    ----------
    name:
        Program name used in the default usage line.
    abbreviations, ordered, disable_help:
        Parse configuration, see :class:`~flaq.core.models.ParserOptions`.
    error_policy:
        Receives parse errors and help requests.  Defaults to
        :class:`RaisePolicy`.
    usage_line:
        Replaces the ``Usage: <name> [options]`` header.
    usage_func:
        Replaces the whole usage rendering.
    """

    def __init__(
        self,
        name: str = "",
        *,
        abbreviations: bool = False,
        ordered: bool = False,
        disable_help: bool = False,
        error_policy: ErrorPolicy | None = None,
        usage_line: str = "",
        usage_func: Callable[[FlagSet], str] | None = None,
    ) -> None:
        self.name: str = name
        self.options: ParserOptions = ParserOptions(
            abbreviations=abbreviations,
            ordered=ordered,
            disable_help=disable_help,
        )
        self.error_policy: ErrorPolicy = error_policy or RaisePolicy()
        self.usage_line: str = usage_line
        self.usage_func: Callable[[FlagSet], str] | None = usage_func
        self._flags: list[Flag] = []
        self._parser: Parser | None = None

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add(self, flag: Flag) -> Flag:
        """Register *flag* and return it."""
        self._flags.append(flag)
        logger.debug("registered %s", flag.display_name)
        return flag

    def add_string(
        self,
        slot: Slot,
        long: str,
        short: str = "",
        description: str = "",
        *,
        default: str = "",
        arg_name: str = "",
        hidden: bool = False,
    ) -> Flag:
        return self.add(
            string_flag(
                slot, long, short, description,
                default=default, arg_name=arg_name, hidden=hidden,
            )
        )

    def add_int(
        self,
        slot: Slot,
        long: str,
        short: str = "",
        description: str = "",
        *,
        default: str = "",
        arg_name: str = "",
        hidden: bool = False,
    ) -> Flag:
        return self.add(
            int_flag(
                slot, long, short, description,
                default=default, arg_name=arg_name, hidden=hidden,
            )
        )

    def add_float(
        self,
        slot: Slot,
        long: str,
        short: str = "",
        description: str = "",
        *,
        default: str = "",
        arg_name: str = "",
        hidden: bool = False,
    ) -> Flag:
        return self.add(
            float_flag(
                slot, long, short, description,
                default=default, arg_name=arg_name, hidden=hidden,
            )
        )

    def add_duration(
        self,
        slot: Slot,
        long: str,
        short: str = "",
        description: str = "",
        *,
        default: str = "",
        arg_name: str = "",
        hidden: bool = False,
    ) -> Flag:
        return self.add(
            duration_flag(
                slot, long, short, description,
                default=default, arg_name=arg_name, hidden=hidden,
            )
        )

    def add_bool(
        self,
        slot: Slot,
        long: str,
        short: str = "",
        description: str = "",
        *,
        hidden: bool = False,
    ) -> Flag:
        return self.add(bool_flag(slot, long, short, description, hidden=hidden))

    def add_count(
        self,
        slot: Slot,
        long: str,
        short: str = "",
        description: str = "",
        *,
        hidden: bool = False,
    ) -> Flag:
        return self.add(count_flag(slot, long, short, description, hidden=hidden))

    def add_help(
        self,
        long: str = "help",
        short: str = "h",
        description: str = "show this help",
        *,
        hidden: bool = False,
    ) -> Flag:
        return self.add(help_flag(long, short, description, hidden=hidden))

    def struct(self, obj: object) -> list[Flag]:
        """Register one flag per tagged field of dataclass instance *obj*."""
        return [self.add(flag) for flag in struct_flags(obj)]

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def flags(self) -> tuple[Flag, ...]:
        return tuple(self._flags)

    def lookup(self, name: str) -> Flag | None:
        """Return the first flag whose long or short name is *name*."""
        for flag in self._flags:
            if name and name in (flag.long, flag.short):
                return flag
        return None

    def _ensure_help(self) -> None:
        if self.options.disable_help or self.lookup("help") is not None:
            return
        taken = any(flag.short == "h" for flag in self._flags)
        self.add_help(short="" if taken else "h")

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @property
    def parsed(self) -> bool:
        return self._parser is not None

    def parse(self, args: Sequence[str] | None = None) -> None:
        """Parse *args* (``sys.argv[1:]`` when ``None``) in a new session.

        Errors go to the error policy; with the default policy they
        propagate as :class:`~flaq.exceptions.ParseError` or
        :class:`~flaq.exceptions.HelpRequested`.
        """
        if args is None:
            args = sys.argv[1:]
        self._ensure_help()
        self._parser = Parser(
            args,
            abbreviations=self.options.abbreviations,
            ordered=self.options.ordered,
        )
        self._run()

    def resume(self) -> None:
        """Continue parsing the current session, e.g. after :meth:`next`."""
        self._run()

    def _run(self) -> None:
        parser = self._session()
        try:
            parser.parse(self._flags)
        except (ParseError, HelpRequested) as exc:
            logger.debug("parse failed: %s", exc)
            self.error_policy.handle(exc, self)

    def _session(self) -> Parser:
        if self._parser is None:
            raise RuntimeError("FlagSet.parse() has not been called")
        return self._parser

    def next(self) -> str | None:
        """Pop the next unparsed token of the current session."""
        return self._session().next()

    def operands(self) -> list[str]:
        """Non-option arguments, in their original relative order."""
        if self._parser is None:
            return []
        return self._parser.operands()

    args = operands

    # ------------------------------------------------------------------
    # Usage
    # ------------------------------------------------------------------

    def usage(self) -> str:
        """Return the help text, honouring :attr:`usage_func`."""
        self._ensure_help()
        if self.usage_func is not None:
            return self.usage_func(self)
        return format_usage(self._flags, program=self.name, usage_line=self.usage_line)

    def __iter__(self) -> Iterator[Flag]:
        return iter(tuple(self._flags))

    def __len__(self) -> int:
        return len(self._flags)
