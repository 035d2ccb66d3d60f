"""Tests for struct-tag registration (core/struct_tags.py)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

import pytest

from flaq.core.parser import Parser
from flaq.core.struct_tags import TagSpec, parse_tag, struct_flags, tag
from flaq.core.values import BoolValue, CountValue, DurationValue, FloatValue, IntValue, StringValue
from flaq.exceptions import ConfigurationError


# ---------------------------------------------------------------------------
# Tag grammar
# ---------------------------------------------------------------------------

class TestParseTag:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            (
                "-n, --name string  name of the person to greet",
                TagSpec("n", "name", "string", "name of the person to greet"),
            ),
            (
                "    --yell         greet the person loudly",
                TagSpec("", "yell", "", "greet the person loudly"),
            ),
            ("--count count", TagSpec("", "count", "count", "")),
            ("--quiet", TagSpec("", "quiet", "", "")),
            ("-n,--name string who", TagSpec("n", "name", "string", "who")),
            ("-v  verbose output", TagSpec("v", "", "", "verbose output")),
            ("-v", TagSpec("v", "", "", "")),
            ("-t, --timeout duration  how long", TagSpec("t", "timeout", "duration", "how long")),
        ],
    )
    def test_grammar(self, text: str, expected: TagSpec) -> None:
        assert parse_tag(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "just words", "---x"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ConfigurationError):
            parse_tag(text)

    def test_tag_helper(self) -> None:
        assert tag("--x") == {"flaq": "--x"}


# ---------------------------------------------------------------------------
# Field scanning
# ---------------------------------------------------------------------------

@dataclass
class Options:
    name: str = field(default="world", metadata=tag("-n, --name string  name to greet"))
    yell: bool = field(default=False, metadata=tag("    --yell         greet loudly"))
    loud: bool = field(default=False, metadata=tag("--loud bool  explicit bool"))
    level: int = field(default=0, metadata=tag("-l, --level int  level"))
    ratio: float = field(default=0.0, metadata=tag("--ratio float64  ratio"))
    scale: float = field(default=0.0, metadata=tag("--scale float  scale"))
    wait: timedelta = field(default=timedelta(0), metadata=tag("--wait duration  wait"))
    verbose: int = field(default=0, metadata=tag("-v, --verbose count  verbosity"))
    quick: bool = field(default=False, metadata=tag("-q  short only"))
    untagged: str = "kept"


class TestStructFlags:
    def test_sinks_follow_hints(self) -> None:
        flags = {flag.long or flag.short: flag for flag in struct_flags(Options())}
        assert set(flags) == {
            "name", "yell", "loud", "level", "ratio", "scale", "wait", "verbose", "q",
        }
        assert isinstance(flags["name"].value, StringValue)
        assert isinstance(flags["yell"].value, BoolValue)
        assert isinstance(flags["loud"].value, BoolValue)
        assert isinstance(flags["level"].value, IntValue)
        assert isinstance(flags["ratio"].value, FloatValue)
        assert isinstance(flags["scale"].value, FloatValue)
        assert isinstance(flags["wait"].value, DurationValue)
        assert isinstance(flags["verbose"].value, CountValue)
        assert isinstance(flags["q"].value, BoolValue)

    def test_argument_requirements(self) -> None:
        flags = {flag.long or flag.short: flag for flag in struct_flags(Options())}
        assert flags["name"].requires_argument
        assert not flags["yell"].takes_argument
        assert not flags["verbose"].takes_argument

    def test_parse_writes_fields(self) -> None:
        opts = Options()
        parser = Parser(
            ["-n", "gopher", "--yell", "-l3", "--ratio=0.5", "--wait", "2s", "-vvq", "op"]
        )
        parser.parse(struct_flags(opts))
        assert opts.name == "gopher"
        assert opts.yell is True
        assert opts.level == 3
        assert opts.ratio == 0.5
        assert opts.wait == timedelta(seconds=2)
        assert opts.verbose == 2
        assert opts.quick is True
        assert opts.untagged == "kept"
        assert parser.operands() == ["op"]

    def test_unknown_hint_is_fatal(self) -> None:
        @dataclass
        class Bad:
            size: int = field(default=0, metadata=tag("--size int32  size"))

        with pytest.raises(ConfigurationError, match="unknown type hint 'int32'"):
            struct_flags(Bad())

    def test_single_space_description_is_read_as_hint(self) -> None:
        @dataclass
        class Bad:
            yell: bool = field(default=False, metadata=tag("--yell greet loudly"))

        with pytest.raises(ConfigurationError, match="'greet'"):
            struct_flags(Bad())

    @pytest.mark.parametrize("obj", [object(), Options, {"a": 1}])
    def test_requires_dataclass_instance(self, obj: object) -> None:
        with pytest.raises(ConfigurationError):
            struct_flags(obj)

    def test_frozen_dataclass_is_rejected(self) -> None:
        @dataclass(frozen=True)
        class Frozen:
            name: str = field(default="x", metadata=tag("-n, --name string  who"))

        with pytest.raises(ConfigurationError, match="frozen"):
            struct_flags(Frozen())
