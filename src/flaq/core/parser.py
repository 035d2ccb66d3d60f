"""The option-parsing state machine.

A :class:`Parser` owns one parse session: the tokens still to be read
and the operands collected so far.  Each call to :meth:`Parser.parse`
walks the remaining tokens against a sequence of flags and classifies
every token as

* an **operand** (no leading ``-``, or a lone ``-``),
* the **end-of-options marker** ``--``,
* a **long option** ``--name`` / ``--name=value``, or
* a **short option cluster** ``-abc`` / ``-ovalue``.

Scanning stops when the tokens run out, after ``--``, after a terminal
flag, or at the first operand in ordered mode.  Errors abort the call
immediately; nothing is recovered.

Guarantees
----------
* No I/O, no ``print()``; only debug logging.
* Only :class:`~flaq.exceptions.FlaqError` subclasses escape.
* Session state survives between calls, so :meth:`Parser.parse`,
  :meth:`Parser.next` and :meth:`Parser.operands` can be interleaved.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from flaq.core.models import Flag
from flaq.exceptions import (
    AmbiguousOptionError,
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
    ValueParseError,
)

logger = logging.getLogger(__name__)


class Parser:
    """Parser for one argument list.

    Parameters
    ----------
    args:
        Raw tokens, without the program name.
    abbreviations:
        Resolve unambiguous prefixes of long names.
    ordered:
        Stop at the first operand, leaving it and everything after it
        unparsed.
    """

    def __init__(
        self,
        args: Iterable[str],
        *,
        abbreviations: bool = False,
        ordered: bool = False,
    ) -> None:
        self.abbreviations: bool = abbreviations
        self.ordered: bool = ordered
        self._args: list[str] = list(args)
        self._operands: list[str] = []
        self._flags: tuple[Flag, ...] = ()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, flags: Iterable[Flag]) -> None:
        """Parse the remaining tokens against *flags*.

        Raises
        ------
        ParseError
            On unknown, ambiguous or malformed options.
        HelpRequested
            When a help flag is seen.
        """
        self._flags = tuple(flags)
        while self._parse_one():
            pass

    def next(self) -> str | None:
        """Pop the next raw token, or return ``None`` when exhausted."""
        if not self._args:
            return None
        return self._args.pop(0)

    def operands(self) -> list[str]:
        """Collected operands followed by the tokens not parsed yet."""
        return self._operands + self._args

    @property
    def remaining(self) -> list[str]:
        return list(self._args)

    # ------------------------------------------------------------------
    # Token classification
    # ------------------------------------------------------------------

    def _parse_one(self) -> bool:
        """Consume one option token.  Returns whether to keep going."""
        while self._args:
            token = self._args[0]
            if len(token) < 2 or token[0] != "-":
                if self.ordered:
                    logger.debug("operand %r stops ordered parsing", token)
                    return False
                self._operands.append(self._args.pop(0))
                continue

            del self._args[0]
            if token == "--":
                logger.debug("end of options, %d operand(s) left", len(self._args))
                return False

            if token[1] == "-":
                flag = self._parse_long(token[2:])
            else:
                flag = self._parse_short(token[1:])

            if flag.terminal:
                logger.debug("terminal flag %s stops parsing", flag.display_name)
                return False
            return True
        return False

    # ------------------------------------------------------------------
    # Long options
    # ------------------------------------------------------------------

    def _parse_long(self, text: str) -> Flag:
        name, sep, inline = text, "", ""
        idx = text.find("=", 1)
        if idx != -1:
            name, sep, inline = text[:idx], "=", text[idx + 1:]

        option = f"--{name}"
        flag = self._resolve_long(name)

        if sep:
            if flag.arg is None:
                raise UnexpectedArgumentError(option, inline)
            value = inline
        elif flag.arg is None:
            value = ""
        elif flag.arg.optional:
            value = flag.arg.default
        elif self._args:
            value = self._args.pop(0)
        else:
            raise MissingArgumentError(option)

        self._bind(flag, option, value)
        return flag

    def _resolve_long(self, name: str) -> Flag:
        candidates: list[Flag] = []
        for flag in self._flags:
            if not flag.long.startswith(name):
                continue
            if flag.long == name:
                return flag
            if self.abbreviations:
                candidates.append(flag)

        if not candidates:
            raise UnknownOptionError(f"--{name}")
        if len(candidates) > 1:
            raise AmbiguousOptionError(
                f"--{name}", [f"--{flag.long}" for flag in candidates]
            )
        logger.debug("--%s abbreviates --%s", name, candidates[0].long)
        return candidates[0]

    # ------------------------------------------------------------------
    # Short option clusters
    # ------------------------------------------------------------------

    def _parse_short(self, cluster: str) -> Flag:
        while True:
            char, rest = cluster[0], cluster[1:]
            option = f"-{char}"
            flag = self._resolve_short(char)

            if rest:
                if flag.arg is None:
                    self._bind(flag, option, "")
                    if flag.terminal:
                        return flag
                    cluster = rest
                    continue
                # -ovalue: the rest of the cluster is the argument
                self._bind(flag, option, rest)
                return flag

            if flag.requires_argument:
                if not self._args:
                    raise MissingArgumentError(option)
                self._bind(flag, option, self._args.pop(0))
            else:
                self._bind(flag, option, flag.arg.default if flag.arg else "")
            return flag

    def _resolve_short(self, char: str) -> Flag:
        for flag in self._flags:
            if flag.short == char:
                return flag
        raise UnknownOptionError(f"-{char}")

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    @staticmethod
    def _bind(flag: Flag, option: str, text: str) -> None:
        """Hand *text* to the flag's sink, typing any rejection."""
        try:
            flag.value.set(text)
        except ValueError as exc:
            raise ValueParseError(option, text, exc) from exc
        logger.debug("bound %s = %r", option, text)
