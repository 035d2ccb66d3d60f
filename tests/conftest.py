"""Shared pytest fixtures and configuration for the flaq test suite.

Guidelines
----------
* Core tests are pure: no process exit, no console output.
* Boundary tests assert on ``SystemExit`` codes and captured output.
* Tests must not depend on the real ``sys.argv``.
"""

from __future__ import annotations

import pytest

from flaq.core.flagset import FlagSet
from flaq.core.values import Var


class Bound:
    """The slots of the standard test flag set."""

    def __init__(self) -> None:
        self.foo: Var[bool] = Var(False)
        self.foo_bar: Var[bool] = Var(False)
        self.bar: Var[str] = Var("")
        self.car: Var[bool] = Var(False)
        self.count: Var[int] = Var(0)


@pytest.fixture
def bound() -> Bound:
    return Bound()


@pytest.fixture
def standard_flags(bound: Bound) -> FlagSet:
    """``-f/--foo``, ``--foo-bar``, ``-b/--bar <arg>``, ``-c/--car``, ``--count``."""
    flags = FlagSet("test", disable_help=True)
    flags.add_bool(bound.foo, "foo", "f")
    flags.add_bool(bound.foo_bar, "foo-bar")
    flags.add_string(bound.bar, "bar", "b")
    flags.add_bool(bound.car, "car", "c")
    flags.add_count(bound.count, "count")
    return flags
