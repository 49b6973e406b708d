"""Parser for a single ``%...`` placeholder.

Composes the grammar sub-parsers in order to recognise one
``%[flags][width][.precision][length]specifier`` starting at a cursor.

Only the specifier is mandatory. Flags, width and precision fall back to
"nothing consumed" on no match, and the length modifier falls back to NONE.
A missing or illegal specifier makes the whole placeholder invalid.

Running off the end of the format string is never an error here: every
consumer reports "no match" past the end, which surfaces as an invalid
placeholder.

"""

from __future__ import annotations

from dataclasses import dataclass

from fmtcheck.config import get_check_config
from fmtcheck.matchers import LengthModifier, TypeMatcher
from fmtcheck.parsing.charsets import PERCENT
from fmtcheck.parsing.consumers import consume_character
from fmtcheck.parsing.fields import (
    consume_flags,
    consume_length,
    consume_precision,
    consume_specifier,
    consume_width,
)


@dataclass(frozen=True, slots=True)
class PlaceholderResult:
    """Outcome of one placeholder parse attempt.

    Attributes:
        is_valid: Whether a complete placeholder was recognised
        type_matchers: Argument categories in call order: width argument,
            precision argument, then the value itself
        consumed_length: Characters from the ``%`` through the specifier
            (0 when invalid)
        specifier: Terminal specifier character ("" when invalid)
        length: Length modifier class recognised

    """

    is_valid: bool
    type_matchers: tuple[TypeMatcher, ...] = ()
    consumed_length: int = 0
    specifier: str = ""
    length: LengthModifier = LengthModifier.NONE


# Shared failure value
INVALID_PLACEHOLDER = PlaceholderResult(is_valid=False)


def parse_placeholder(
    source: str,
    pos: int = 0,
    *,
    stacked_flags: bool | None = None,
) -> PlaceholderResult:
    """Parse the placeholder starting at ``pos``.

    Args:
        source: Format string
        pos: Cursor expected to be at a ``%``
        stacked_flags: Accept several consecutive flags. None uses the
            active CheckConfig.

    Returns:
        PlaceholderResult; INVALID_PLACEHOLDER if no placeholder starts here

    Example:
        >>> result = parse_placeholder("%*.*f")
        >>> result.is_valid, result.consumed_length
        (True, 5)
        >>> [m.name for m in result.type_matchers]
        ['UNSIGNED_INT', 'UNSIGNED_INT', 'FLOATING']
    """
    after = consume_character(source, pos, PERCENT)
    if after is None:
        return INVALID_PLACEHOLDER

    if stacked_flags is None:
        stacked_flags = get_check_config().stacked_flags

    after = consume_flags(source, after, stacked=stacked_flags)
    width = consume_width(source, after)
    precision = consume_precision(source, width.pos)
    length = consume_length(source, precision.pos)
    specifier = consume_specifier(source, length.pos, length.allowed)
    if specifier is None:
        return INVALID_PLACEHOLDER

    matchers: list[TypeMatcher] = []
    if width.matcher is not None:
        matchers.append(width.matcher)
    if precision.matcher is not None:
        matchers.append(precision.matcher)
    matchers.append(specifier.matcher)

    return PlaceholderResult(
        is_valid=True,
        type_matchers=tuple(matchers),
        consumed_length=specifier.pos - pos,
        specifier=specifier.specifier,
        length=length.modifier,
    )


__all__ = ["INVALID_PLACEHOLDER", "PlaceholderResult", "parse_placeholder"]
