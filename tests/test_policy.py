"""Tests for the process-level error policies (cli/policy.py).

Output is captured with ``capsys``; process exits are asserted through
``SystemExit`` codes.
"""

from __future__ import annotations

import pytest

from flaq.cli import exit_codes
from flaq.cli.policy import AbortPolicy, ExitPolicy, print_usage, report_error
from flaq.core.flagset import FlagSet
from flaq.core.values import Var
from flaq.exceptions import FlaqError, ParseError, UnknownOptionError


def _flags(policy: object) -> FlagSet:
    flags = FlagSet("prog", abbreviations=True, error_policy=policy)  # type: ignore[arg-type]
    flags.add_bool(Var(False), "foo-bar", "f", "first")
    flags.add_bool(Var(False), "foo-baz", "", "second")
    return flags


# ---------------------------------------------------------------------------
# ExitPolicy
# ---------------------------------------------------------------------------

class TestExitPolicy:
    def test_help_prints_usage_and_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _flags(ExitPolicy()).parse(["--help"])
        assert exc_info.value.code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert out.startswith("Usage: prog [options]\n")
        assert "--foo-bar" in out

    def test_unknown_option_exits_with_usage_error(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _flags(ExitPolicy()).parse(["--nope"])
        assert exc_info.value.code == exit_codes.USAGE_ERROR
        err = capsys.readouterr().err
        assert "Error: unknown option --nope" in err
        assert "Hint: Run 'prog --help' for usage." in err

    def test_ambiguous_option_shows_candidates(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit):
            _flags(ExitPolicy()).parse(["--foo"])
        err = capsys.readouterr().err
        assert "multiple options matching --foo" in err
        assert "--foo-baz" in err

    def test_valid_arguments_do_not_exit(self) -> None:
        flags = _flags(ExitPolicy())
        flags.parse(["-f", "op"])
        assert flags.operands() == ["op"]


# ---------------------------------------------------------------------------
# AbortPolicy
# ---------------------------------------------------------------------------

class TestAbortPolicy:
    def test_parse_error_becomes_runtime_error(self) -> None:
        with pytest.raises(RuntimeError, match="unknown option -x") as exc_info:
            _flags(AbortPolicy()).parse(["-x"])
        assert isinstance(exc_info.value.__cause__, ParseError)

    def test_help_still_exits_cleanly(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _flags(AbortPolicy()).parse(["-h"])
        assert exc_info.value.code == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------

class TestRendering:
    def test_report_error_without_flag_set(self, capsys: pytest.CaptureFixture[str]) -> None:
        report_error(FlaqError("boom"))
        err = capsys.readouterr().err
        assert "Error: boom" in err
        assert "Hint" not in err

    def test_report_error_prefers_error_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        report_error(FlaqError("boom", hint="try this"), _flags(ExitPolicy()))
        err = capsys.readouterr().err
        assert "Hint: try this" in err
        assert "--help" not in err

    def test_no_help_hint_when_help_disabled(self, capsys: pytest.CaptureFixture[str]) -> None:
        flags = FlagSet("prog", disable_help=True)
        report_error(UnknownOptionError("-x"), flags)
        assert "Hint" not in capsys.readouterr().err

    def test_usage_with_brackets_is_not_treated_as_markup(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        flags = FlagSet("prog", usage_line="Usage: prog [bold]FILE[/bold]")
        print_usage(flags)
        assert "[bold]FILE[/bold]" in capsys.readouterr().out

    def test_emoji_codes_in_descriptions_are_kept(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        flags = FlagSet("prog", error_policy=ExitPolicy())
        flags.add_string(Var(","), "sep", "s", "separator, e.g. :smile: or :x:")
        with pytest.raises(SystemExit):
            flags.parse(["--help"])
        assert ":smile: or :x:" in capsys.readouterr().out

    def test_emoji_codes_in_errors_are_kept(self, capsys: pytest.CaptureFixture[str]) -> None:
        report_error(UnknownOptionError("--:x:"), _flags(ExitPolicy()))
        assert "--:x:" in capsys.readouterr().err
