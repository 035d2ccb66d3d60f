"""Protocols (interfaces) consumed by the core layer.

The parser only ever talks to these contracts.  Binding targets, value
sinks and error policies are all supplied by the caller and satisfy the
protocols structurally (no explicit inheritance required).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn, Protocol

if TYPE_CHECKING:
    from flaq.core.flagset import FlagSet
    from flaq.exceptions import FlaqError


class Slot(Protocol):
    """Caller-owned storage a flag writes its result into.

    The parser reads and writes :attr:`value` but never owns the
    underlying storage; its lifetime is the caller's responsibility.
    """

    value: Any


class Value(Protocol):
    """Contract for typed value sinks."""

    def set(self, text: str) -> None:
        """Parse *text* and store the result in the bound slot.

        Flags taking no argument receive an empty string.

        Raises
        ------
        ValueError
            When *text* is malformed for this type.
        HelpRequested
            For help sinks, unconditionally.
        """
        ...  # pragma: no cover


class ErrorPolicy(Protocol):
    """Contract for the boundary behaviour applied to parse failures.

    Implementations receive every :class:`~flaq.exceptions.ParseError`
    and :class:`~flaq.exceptions.HelpRequested` raised while parsing.
    They must not return normally: re-raise, raise something else, or
    terminate the process.
    """

    def handle(self, error: FlaqError, flag_set: FlagSet) -> NoReturn:
        ...  # pragma: no cover
