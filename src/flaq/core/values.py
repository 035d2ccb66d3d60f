"""Binding targets and typed value sinks.

A value sink wraps a caller-owned :class:`~flaq.core.protocols.Slot`
and knows how to turn the textual argument of a flag into the slot's
type.  Sinks for flags taking no argument ignore the text they get.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from flaq.core.duration import parse_duration
from flaq.core.protocols import Slot
from flaq.exceptions import HelpRequested

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Slots
# ---------------------------------------------------------------------------

class Var(Generic[T]):
    """A mutable cell for a single parsed value.

    Usage::

        name = Var("world")
        flags.add_string(name, "name", "n", "name of the person to greet")
        flags.parse(["--name", "gopher"])
        name.value  # "gopher"
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value: T = value

    def __repr__(self) -> str:
        return f"Var({self.value!r})"


class AttrRef:
    """Slot writing through to ``setattr(obj, name, ...)``."""

    __slots__ = ("_obj", "_name")

    def __init__(self, obj: object, name: str) -> None:
        self._obj = obj
        self._name = name

    @property
    def value(self) -> Any:
        return getattr(self._obj, self._name)

    @value.setter
    def value(self, new: Any) -> None:
        setattr(self._obj, self._name, new)

    def __repr__(self) -> str:
        return f"AttrRef({type(self._obj).__name__}.{self._name})"


# ---------------------------------------------------------------------------
# Value sinks
# ---------------------------------------------------------------------------

class _SlotValue:
    __slots__ = ("slot",)

    def __init__(self, slot: Slot) -> None:
        self.slot = slot

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.slot!r})"


class StringValue(_SlotValue):
    def set(self, text: str) -> None:
        self.slot.value = text


class BoolValue(_SlotValue):
    """Sets the slot to ``True`` whatever the text."""

    def set(self, text: str) -> None:
        self.slot.value = True


class CountValue(_SlotValue):
    """Increments the slot on every occurrence."""

    def set(self, text: str) -> None:
        self.slot.value = (self.slot.value or 0) + 1


class IntValue(_SlotValue):
    """Parses base-prefixed integers (``0x1f``, ``0o17``, ``0b101``) too."""

    def set(self, text: str) -> None:
        try:
            parsed = int(text, 0)
        except ValueError:
            # int(..., 0) refuses leading zeros such as "010"
            parsed = int(text, 10)
        self.slot.value = parsed


class FloatValue(_SlotValue):
    def set(self, text: str) -> None:
        self.slot.value = float(text)


class DurationValue(_SlotValue):
    """Parses ``1h30m``-style text into a :class:`datetime.timedelta`."""

    def set(self, text: str) -> None:
        self.slot.value = parse_duration(text)


class HelpValue:
    """Sink of help flags: always raises :class:`HelpRequested`."""

    __slots__ = ()

    def set(self, text: str) -> None:
        raise HelpRequested()

    def __repr__(self) -> str:
        return "HelpValue()"
