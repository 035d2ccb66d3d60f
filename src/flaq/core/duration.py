"""Duration string parsing.

Durations are written as a possibly signed sequence of decimal numbers,
each with an optional fraction and a mandatory unit suffix, such as
``300ms``, ``-1.5h`` or ``2h45m``.  Valid units are ``ns``, ``us``
(or ``µs``), ``ms``, ``s``, ``m`` and ``h``.  A bare ``0`` is accepted.

The result is a :class:`datetime.timedelta`, so sub-microsecond parts
are rounded to the nearest microsecond.
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

_UNIT_MICROSECONDS: dict[str, Decimal] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # U+00B5 micro sign
    "μs": Decimal(1),  # U+03BC greek mu
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_COMPONENT = re.compile(r"(\d+\.?\d*|\.\d+)([^\d.]+)")


def parse_duration(text: str) -> timedelta:
    """Parse *text* into a :class:`~datetime.timedelta`.

    Raises
    ------
    ValueError
        When *text* is empty, lacks a unit, or uses an unknown unit.
    """
    rest = text
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]

    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {text!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(rest):
        match = _COMPONENT.match(rest, pos)
        if match is None:
            if rest[pos:].replace(".", "", 1).isdigit():
                raise ValueError(f"missing unit in duration {text!r}")
            raise ValueError(f"invalid duration {text!r}")
        number, unit = match.groups()
        if unit not in _UNIT_MICROSECONDS:
            raise ValueError(f"unknown unit {unit!r} in duration {text!r}")
        try:
            total += Decimal(number) * _UNIT_MICROSECONDS[unit]
        except InvalidOperation as exc:
            raise ValueError(f"invalid duration {text!r}") from exc
        pos = match.end()

    try:
        return timedelta(microseconds=sign * int(total.to_integral_value()))
    except OverflowError as exc:
        raise ValueError(f"duration {text!r} out of range") from exc
