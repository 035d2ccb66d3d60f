"""Custom exception hierarchy for flaq.

Parse-time failures are driven by user input and are never fatal on
their own: the parser raises them and the configured error policy
decides what happens to the process.  :class:`ConfigurationError` is the
odd one out: it flags a programming mistake in how options were
declared and is raised eagerly at registration time.

Hierarchy
---------
FlaqError
├── ParseError
│   ├── UnknownOptionError
│   ├── AmbiguousOptionError
│   ├── MissingArgumentError
│   ├── UnexpectedArgumentError
│   └── ValueParseError
├── HelpRequested
└── ConfigurationError
"""

from __future__ import annotations

from collections.abc import Sequence


class FlaqError(Exception):
    """Base exception for all flaq errors.

    Every error condition maps to a subclass of this exception so that
    error boundaries can render a clean message without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parse errors ----------------------------------------------------------

class ParseError(FlaqError):
    """Raised when the argument list cannot be parsed.

    ``option`` is the option as the user typed it, with its dashes
    (``--name`` or ``-n``).
    """

    def __init__(
        self, message: str, option: str, *, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)
        self.option: str = option


class UnknownOptionError(ParseError):
    """Raised when no registered flag matches a long or short name."""

    def __init__(self, option: str) -> None:
        super().__init__(f"unknown option {option}", option)


class AmbiguousOptionError(ParseError):
    """Raised when an abbreviation matches more than one long name."""

    def __init__(self, option: str, candidates: Sequence[str]) -> None:
        super().__init__(
            f"multiple options matching {option}",
            option,
            hint="Did you mean one of: " + ", ".join(candidates) + "?",
        )
        self.candidates: tuple[str, ...] = tuple(candidates)


class MissingArgumentError(ParseError):
    """Raised when a mandatory argument is not supplied."""

    def __init__(self, option: str) -> None:
        super().__init__(f"missing argument for option {option}", option)


class UnexpectedArgumentError(ParseError):
    """Raised when ``--name=value`` targets a flag taking no argument."""

    def __init__(self, option: str, value: str) -> None:
        super().__init__(
            f"unexpected argument '{value}' for option {option}", option
        )
        self.value: str = value


class ValueParseError(ParseError):
    """Raised when a typed value rejects the text it was given."""

    def __init__(self, option: str, text: str, cause: Exception) -> None:
        super().__init__(
            f"invalid value '{text}' for option {option}: {cause}", option
        )
        self.text: str = text
        self.cause: Exception = cause


# --- Sentinels and programming errors --------------------------------------

class HelpRequested(FlaqError):
    """Raised when a help flag is seen.

    Not a failure: boundary code usually prints the usage text and exits
    with status 0.
    """

    def __init__(self) -> None:
        super().__init__("help requested")


class ConfigurationError(FlaqError):
    """Raised when options are declared incorrectly.

    Examples are an unknown struct-tag type hint or a flag with neither a
    long nor a short name.  This is a bug in the calling program, not bad
    user input, so no error policy ever swallows it.
    """
