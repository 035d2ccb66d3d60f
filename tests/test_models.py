"""Tests for the frozen domain models (core/models.py)."""

from __future__ import annotations

import dataclasses

import pytest

from flaq.core.models import Flag, FlagArg, ParserOptions
from flaq.core.values import BoolValue, StringValue, Var
from flaq.exceptions import ConfigurationError


def _flag(**overrides: object) -> Flag:
    fields: dict[str, object] = {
        "long": "name",
        "short": "n",
        "description": "who",
        "value": StringValue(Var("")),
        "arg": FlagArg(),
    }
    fields.update(overrides)
    return Flag(**fields)  # type: ignore[arg-type]


class TestFlagArg:
    def test_mandatory_by_default(self) -> None:
        assert not FlagArg().optional

    def test_default_makes_optional(self) -> None:
        assert FlagArg(default="x").optional


class TestFlag:
    def test_argument_properties(self) -> None:
        assert _flag().requires_argument
        assert not _flag(arg=FlagArg(default="x")).requires_argument
        assert _flag(arg=FlagArg(default="x")).takes_argument
        no_arg = _flag(arg=None, value=BoolValue(Var(False)))
        assert not no_arg.takes_argument
        assert not no_arg.requires_argument

    def test_display_name(self) -> None:
        assert _flag().display_name == "--name"
        assert _flag(long="").display_name == "-n"

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            _flag().long = "other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"long": "", "short": ""},
            {"short": "ab"},
            {"short": "-"},
            {"short": "="},
            {"long": "--name"},
            {"long": "a=b"},
            {"long": "two words"},
        ],
    )
    def test_invalid_names(self, overrides: dict[str, object]) -> None:
        with pytest.raises(ConfigurationError):
            _flag(**overrides)

    def test_short_only_and_long_only(self) -> None:
        assert _flag(long="").short == "n"
        assert _flag(short="").long == "name"


class TestParserOptions:
    def test_defaults(self) -> None:
        options = ParserOptions()
        assert (options.abbreviations, options.ordered, options.disable_help) == (
            False, False, False,
        )
