"""Declarative flag registration from dataclass field tags.

A tag is attached through field metadata::

    @dataclass
    class Options:
        name: str = field(default="world", metadata=tag("-n, --name string  name to greet"))
        yell: bool = field(default=False, metadata=tag("    --yell         greet loudly"))

Tag grammar: an optional ``-S,`` short prefix, an optional ``--long``
name, an optional type hint separated from the long name by exactly
one space, then the free-text description.  Without a hint (and always
for short-only tags) the field is bound as a boolean.

Malformed tags and unknown hints raise
:class:`~flaq.exceptions.ConfigurationError` immediately.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable
from dataclasses import dataclass

from flaq.core.flags import (
    bool_flag,
    count_flag,
    duration_flag,
    float_flag,
    int_flag,
    string_flag,
)
from flaq.core.models import Flag
from flaq.core.protocols import Slot
from flaq.core.values import AttrRef
from flaq.exceptions import ConfigurationError

TAG_KEY: str = "flaq"
"""Field-metadata key holding the tag text."""

_SHORT = re.compile(r"-(?P<short>[^\s-])(?:,\s*|\s+|$)")
_LONG = re.compile(r"--(?P<long>[^\s=-][^\s=]*)")
_HINT = re.compile(r" (?P<hint>\S+)(?=\s|$)")

_BUILDERS: dict[str, Callable[[Slot, str, str, str], Flag]] = {
    "": bool_flag,
    "bool": bool_flag,
    "count": count_flag,
    "duration": duration_flag,
    "float": float_flag,
    "float64": float_flag,
    "int": int_flag,
    "string": string_flag,
}


@dataclass(frozen=True, slots=True)
class TagSpec:
    """Parsed form of a tag string."""

    short: str
    long: str
    hint: str
    description: str


def tag(text: str) -> dict[str, str]:
    """Return field metadata carrying the tag *text*."""
    return {TAG_KEY: text}


def parse_tag(text: str) -> TagSpec:
    """Split a tag string into its short, long, hint and description parts.

    Raises
    ------
    ConfigurationError
        If the tag has neither a short nor a long form.
    """
    rest = text.strip()
    short = long = hint = ""

    match = _SHORT.match(rest)
    if match:
        short = match.group("short")
        rest = rest[match.end():]

    match = _LONG.match(rest)
    if match:
        long = match.group("long")
        rest = rest[match.end():]
        match = _HINT.match(rest)
        if match:
            hint = match.group("hint")
            rest = rest[match.end():]

    if not short and not long:
        raise ConfigurationError(
            f"malformed flag tag {text!r}",
            hint="Expected '[-s, ]--long [type] description'.",
        )
    return TagSpec(short=short, long=long, hint=hint, description=rest.strip())


def struct_flags(obj: object) -> list[Flag]:
    """Build one flag per tagged field of the dataclass instance *obj*.

    Each flag writes straight into the field.  Untagged fields are
    skipped.

    Raises
    ------
    ConfigurationError
        If *obj* is not a mutable dataclass instance, a tag is malformed,
        or a tag names an unknown type hint.
    """
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise ConfigurationError(
            f"expected a dataclass instance, got {type(obj).__name__}",
        )
    if type(obj).__dataclass_params__.frozen:  # type: ignore[attr-defined]
        raise ConfigurationError(
            f"cannot bind flags to frozen dataclass {type(obj).__name__}",
            hint="Flags write into the fields; drop frozen=True.",
        )

    flags: list[Flag] = []
    for fld in dataclasses.fields(obj):
        text = fld.metadata.get(TAG_KEY)
        if text is None:
            continue
        spec = parse_tag(text)
        builder = _BUILDERS.get(spec.hint)
        if builder is None:
            raise ConfigurationError(
                f"unknown type hint {spec.hint!r} for field {fld.name!r}",
                hint="Valid hints: " + ", ".join(sorted(h for h in _BUILDERS if h)),
            )
        flags.append(
            builder(AttrRef(obj, fld.name), spec.long, spec.short, spec.description)
        )
    return flags
