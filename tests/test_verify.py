"""Tests for verifying call-site arguments against a scan result."""

from decimal import Decimal
from fractions import Fraction

import pytest

from fmtcheck import (
    ArgumentCountError,
    ArgumentTypeError,
    CheckConfig,
    FormatMismatchError,
    check_arguments,
    check_config_context,
    is_compatible,
    scan,
    verify,
)
from fmtcheck.matchers import TypeMatcher
from fmtcheck.verify import ArgumentMismatch


class TestCompatibility:
    """Category vs Python type."""

    @pytest.mark.parametrize(
        ("matcher", "arg_type"),
        [
            (TypeMatcher.SIGNED_INT, int),
            (TypeMatcher.SIGNED_INT, bool),
            (TypeMatcher.UNSIGNED_INT, int),
            (TypeMatcher.FLOATING, float),
            (TypeMatcher.FLOATING, int),
            (TypeMatcher.FLOATING, Fraction),
            (TypeMatcher.FLOATING, Decimal),
            (TypeMatcher.CHAR, str),
            (TypeMatcher.CHAR, int),
            (TypeMatcher.STRING, str),
            (TypeMatcher.STRING, object),
            (TypeMatcher.STRING, ValueError),
            (TypeMatcher.POINTER, object),
            (TypeMatcher.UNCONSTRAINED, list),
        ],
    )
    def test_compatible(self, matcher: TypeMatcher, arg_type: type) -> None:
        assert is_compatible(matcher, arg_type) is True

    @pytest.mark.parametrize(
        ("matcher", "arg_type"),
        [
            (TypeMatcher.SIGNED_INT, str),
            (TypeMatcher.SIGNED_INT, float),
            (TypeMatcher.UNSIGNED_INT, type(None)),
            (TypeMatcher.FLOATING, str),
            (TypeMatcher.FLOATING, complex),
            (TypeMatcher.CHAR, float),
            (TypeMatcher.CHAR, bytes),
        ],
    )
    def test_incompatible(self, matcher: TypeMatcher, arg_type: type) -> None:
        assert is_compatible(matcher, arg_type) is False


class TestVerify:
    """verify() compares counts always and categories when enabled."""

    def test_count_check(self) -> None:
        matchers = scan("%d %d")
        assert verify(matchers, [int]).ok is False
        assert verify(matchers, [int, int]).ok is True

    def test_count_fields(self) -> None:
        result = verify(scan("%d %d"), [int])
        assert result.expected_count == 2
        assert result.actual_count == 1
        assert result.count_matches is False

    def test_category_mismatch(self) -> None:
        result = verify(scan("%s is %d"), [str, str])
        assert result.count_matches is True
        assert result.ok is False
        assert result.mismatches == (ArgumentMismatch(1, TypeMatcher.SIGNED_INT, str),)

    def test_type_checking_disabled(self) -> None:
        result = verify(scan("%d"), [str], type_checking=False)
        assert result.ok is True

    def test_type_checking_disabled_by_config(self) -> None:
        with check_config_context(CheckConfig(type_checking=False)):
            assert verify(scan("%d"), [str]).ok is True

    def test_count_mismatch_skips_categories(self) -> None:
        result = verify(scan("%d %d"), [str])
        assert result.mismatches == ()

    def test_empty(self) -> None:
        assert verify((), []).ok is True


class TestRaiseForMismatch:
    def test_ok_does_not_raise(self) -> None:
        verify(scan("%d"), [int]).raise_for_mismatch("%d")

    def test_count_error(self) -> None:
        with pytest.raises(ArgumentCountError) as exc_info:
            verify(scan("%d %d"), [int]).raise_for_mismatch("%d %d")
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    def test_first_type_error_reported(self) -> None:
        result = verify(scan("%d %f"), [str, str])
        with pytest.raises(ArgumentTypeError) as exc_info:
            result.raise_for_mismatch()
        assert exc_info.value.position == 0


class TestCheckArguments:
    """Runtime validation of a call's arguments."""

    def test_matching_call(self) -> None:
        check_arguments("Hello %s, you are %d years old", "Ada", 36)

    def test_star_arguments(self) -> None:
        check_arguments("%*.*f", 10, 2, 3.14159)

    def test_too_few(self) -> None:
        with pytest.raises(ArgumentCountError, match="does not match the number of placeholders"):
            check_arguments("%d %d", 1)

    def test_too_many(self) -> None:
        with pytest.raises(ArgumentCountError):
            check_arguments("no placeholders", 1)

    def test_wrong_category(self) -> None:
        with pytest.raises(ArgumentTypeError) as exc_info:
            check_arguments("%s took %.2f s", "job", "fast")
        error = exc_info.value
        assert error.position == 1
        assert error.expected is TypeMatcher.FLOATING
        assert error.actual is str
        assert error.fmt == "%s took %.2f s"

    def test_errors_share_base(self) -> None:
        with pytest.raises(FormatMismatchError):
            check_arguments("%d")

    def test_escaped_percent(self) -> None:
        check_arguments("100%% of %s", "tests")

    def test_invalid_placeholder_is_literal(self) -> None:
        check_arguments("%Ld")
