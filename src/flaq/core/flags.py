"""Typed flag constructors.

These plain functions are the primitive registration layer: each one
builds a :class:`~flaq.core.models.Flag` bound to a caller-owned slot.
:class:`~flaq.core.flagset.FlagSet` and the struct-tag scanner are thin
layers on top of them.

Flags taking an argument accept ``default``: when non-empty the
argument becomes optional and this text is parsed whenever it is
omitted.  ``arg_name`` is the placeholder rendered in usage text.
"""

from __future__ import annotations

from flaq.core.models import Flag, FlagArg
from flaq.core.protocols import Slot, Value
from flaq.core.values import (
    BoolValue,
    CountValue,
    DurationValue,
    FloatValue,
    HelpValue,
    IntValue,
    StringValue,
)


def _arg_flag(
    value: Value,
    long: str,
    short: str,
    description: str,
    default: str,
    arg_name: str,
    hidden: bool,
) -> Flag:
    return Flag(
        long=long,
        short=short,
        description=description,
        value=value,
        arg=FlagArg(default=default, name=arg_name),
        hidden=hidden,
    )


def string_flag(
    slot: Slot,
    long: str,
    short: str = "",
    description: str = "",
    *,
    default: str = "",
    arg_name: str = "",
    hidden: bool = False,
) -> Flag:
    """Return a flag binding its argument text to *slot*."""
    return _arg_flag(
        StringValue(slot), long, short, description, default, arg_name, hidden
    )


def int_flag(
    slot: Slot,
    long: str,
    short: str = "",
    description: str = "",
    *,
    default: str = "",
    arg_name: str = "",
    hidden: bool = False,
) -> Flag:
    return _arg_flag(
        IntValue(slot), long, short, description, default, arg_name, hidden
    )


def float_flag(
    slot: Slot,
    long: str,
    short: str = "",
    description: str = "",
    *,
    default: str = "",
    arg_name: str = "",
    hidden: bool = False,
) -> Flag:
    return _arg_flag(
        FloatValue(slot), long, short, description, default, arg_name, hidden
    )


def duration_flag(
    slot: Slot,
    long: str,
    short: str = "",
    description: str = "",
    *,
    default: str = "",
    arg_name: str = "",
    hidden: bool = False,
) -> Flag:
    """Return a flag binding a :class:`datetime.timedelta` to *slot*."""
    return _arg_flag(
        DurationValue(slot), long, short, description, default, arg_name, hidden
    )


def bool_flag(
    slot: Slot,
    long: str,
    short: str = "",
    description: str = "",
    *,
    hidden: bool = False,
) -> Flag:
    """Return a flag setting *slot* to ``True`` when present."""
    return Flag(
        long=long,
        short=short,
        description=description,
        value=BoolValue(slot),
        hidden=hidden,
    )


def count_flag(
    slot: Slot,
    long: str,
    short: str = "",
    description: str = "",
    *,
    hidden: bool = False,
) -> Flag:
    """Return a flag incrementing *slot* on each occurrence (``-vvv``)."""
    return Flag(
        long=long,
        short=short,
        description=description,
        value=CountValue(slot),
        hidden=hidden,
    )


def help_flag(
    long: str = "help",
    short: str = "h",
    description: str = "show this help",
    *,
    hidden: bool = False,
) -> Flag:
    """Return a terminal flag raising :class:`~flaq.exceptions.HelpRequested`."""
    return Flag(
        long=long,
        short=short,
        description=description,
        value=HelpValue(),
        terminal=True,
        hidden=hidden,
    )
