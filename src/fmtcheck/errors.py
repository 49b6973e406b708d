"""Exception classes for fmtcheck.

Provides standardized exceptions for error handling throughout fmtcheck.

The scanning core never raises for malformed format strings: a placeholder
that does not parse is treated as literal text. Exceptions are raised only
at the verification boundary (argument count or category mismatch) and
when configuration cannot be loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fmtcheck.location import SourceLocation
    from fmtcheck.matchers import TypeMatcher


class FmtcheckError(Exception):
    """Base exception for all fmtcheck errors.

    Subclass this for specific error categories.
    """

    pass


class FormatMismatchError(FmtcheckError):
    """A format string does not agree with the arguments supplied for it.

    Raised by the verification helpers when a call would format its
    arguments incorrectly.
    """

    def __init__(
        self,
        message: str,
        fmt: str | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize mismatch error with optional format and location.

        Args:
            message: Error description
            fmt: The offending format string (optional)
            location: Where the call was found (optional)
        """
        self.message = message
        self.fmt = fmt
        self.location = location

        prefix = f"{location} " if location is not None else ""
        suffix = f" in format {fmt!r}" if fmt is not None else ""
        super().__init__(f"{prefix}{message}{suffix}")


class ArgumentCountError(FormatMismatchError):
    """Number of supplied arguments differs from the placeholders' demand."""

    def __init__(
        self,
        expected: int,
        actual: int,
        fmt: str | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize argument count error.

        Args:
            expected: Number of arguments the format string demands
            actual: Number of arguments supplied at the call site
            fmt: The offending format string (optional)
            location: Where the call was found (optional)
        """
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"number of arguments passed ({actual}) does not match "
            f"the number of placeholders in the format ({expected})",
            fmt=fmt,
            location=location,
        )


class ArgumentTypeError(FormatMismatchError):
    """An argument's type is not compatible with its placeholder's category."""

    def __init__(
        self,
        position: int,
        expected: TypeMatcher,
        actual: type,
        fmt: str | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize argument type error.

        Args:
            position: Zero-based index of the offending argument
            expected: Category the placeholder demands
            actual: Type of the supplied argument
            fmt: The offending format string (optional)
            location: Where the call was found (optional)
        """
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"argument {position + 1} has type {actual.__name__!r}, "
            f"expected {expected.description}",
            fmt=fmt,
            location=location,
        )


class ConfigError(FmtcheckError):
    """Configuration could not be loaded or is invalid."""

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Description of the problem
            path: Configuration file path (optional)
        """
        self.path = path
        location = f"{path}: " if path else ""
        super().__init__(f"{location}{message}")
