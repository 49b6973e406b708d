"""Verification of supplied arguments against a scanned format string.

The scanner says what a format string demands; this module compares that
with what a call site supplies.

- The argument count is always compared.
- Argument categories are compared when type checking is enabled, using
  ``issubclass`` against the numeric tower (``numbers``) as the host
  type-introspection facility.

``check_arguments`` is the runtime form of the check, meant for tests and
one-shot validation before first use:

    >>> check_arguments("%s has %d items", "cart", 3)
    >>> check_arguments("%d %d", 1)
    Traceback (most recent call last):
    ...
    fmtcheck.errors.ArgumentCountError: number of arguments passed (1) ...

"""

from __future__ import annotations

import numbers
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from fmtcheck.config import get_check_config
from fmtcheck.errors import ArgumentCountError, ArgumentTypeError
from fmtcheck.location import SourceLocation
from fmtcheck.matchers import TypeMatcher
from fmtcheck.scanner import scan
from fmtcheck.utils.logger import get_logger

logger = get_logger(__name__)

# Category -> argument types it accepts. %s, %p and %n accept anything:
# %s renders through str(), Python has no pointers or out-parameters.
ACCEPTED_TYPES: dict[TypeMatcher, tuple[type, ...]] = {
    TypeMatcher.SIGNED_INT: (numbers.Integral,),
    TypeMatcher.UNSIGNED_INT: (numbers.Integral,),
    TypeMatcher.FLOATING: (numbers.Real, Decimal),
    TypeMatcher.CHAR: (str, numbers.Integral),
    TypeMatcher.STRING: (object,),
    TypeMatcher.POINTER: (object,),
    TypeMatcher.UNCONSTRAINED: (object,),
}


def is_compatible(matcher: TypeMatcher, arg_type: type) -> bool:
    """Whether an argument of ``arg_type`` satisfies ``matcher``.

    Example:
        >>> is_compatible(TypeMatcher.SIGNED_INT, int)
        True
        >>> is_compatible(TypeMatcher.SIGNED_INT, str)
        False
    """
    return issubclass(arg_type, ACCEPTED_TYPES[matcher])


@dataclass(frozen=True, slots=True)
class ArgumentMismatch:
    """An argument whose type does not fit its placeholder.

    Attributes:
        position: Zero-based argument index
        expected: Category demanded by the format string
        actual: Type supplied at the call site

    """

    position: int
    expected: TypeMatcher
    actual: type


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """Outcome of comparing a scan result with supplied argument types."""

    expected_count: int
    actual_count: int
    mismatches: tuple[ArgumentMismatch, ...] = ()

    @property
    def count_matches(self) -> bool:
        return self.expected_count == self.actual_count

    @property
    def ok(self) -> bool:
        return self.count_matches and not self.mismatches

    def raise_for_mismatch(
        self,
        fmt: str | None = None,
        location: SourceLocation | None = None,
    ) -> None:
        """Raise the error describing the first problem found, if any.

        Raises:
            ArgumentCountError: If the counts differ
            ArgumentTypeError: If an argument has an incompatible type
        """
        if not self.count_matches:
            raise ArgumentCountError(
                self.expected_count, self.actual_count, fmt=fmt, location=location
            )
        if self.mismatches:
            first = self.mismatches[0]
            raise ArgumentTypeError(
                first.position, first.expected, first.actual, fmt=fmt, location=location
            )


def verify(
    matchers: Sequence[TypeMatcher],
    arg_types: Sequence[type],
    *,
    type_checking: bool | None = None,
) -> VerificationResult:
    """Compare expected categories with the types supplied at a call site.

    Args:
        matchers: Scan result of the format string
        arg_types: Types of the supplied arguments, in call order
        type_checking: Compare categories as well as counts. None uses the
            active CheckConfig.

    Returns:
        VerificationResult. Categories are only compared when the counts
        agree, since positions are meaningless otherwise.
    """
    if type_checking is None:
        type_checking = get_check_config().type_checking

    result_mismatches: list[ArgumentMismatch] = []
    if type_checking and len(matchers) == len(arg_types):
        for position, (matcher, arg_type) in enumerate(zip(matchers, arg_types)):
            if not is_compatible(matcher, arg_type):
                result_mismatches.append(ArgumentMismatch(position, matcher, arg_type))

    return VerificationResult(
        expected_count=len(matchers),
        actual_count=len(arg_types),
        mismatches=tuple(result_mismatches),
    )


def check_arguments(fmt: str, *args: object) -> None:
    """Validate ``args`` against ``fmt`` as a formatting call would see them.

    Raises:
        ArgumentCountError: If the number of arguments differs
        ArgumentTypeError: If an argument's type does not fit its placeholder
    """
    result = verify(scan(fmt), [type(arg) for arg in args])
    if not result.ok:
        logger.debug("format %r rejected for %d argument(s)", fmt, len(args))
    result.raise_for_mismatch(fmt)


__all__ = [
    "ACCEPTED_TYPES",
    "ArgumentMismatch",
    "VerificationResult",
    "check_arguments",
    "is_compatible",
    "verify",
]
