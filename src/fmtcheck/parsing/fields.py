"""Grammar sub-parsers for one conversion specification.

A placeholder is ``%[flags][width][.precision][length]specifier``. Each
function here consumes one of those elements starting at a cursor and
reports the new cursor plus whatever type information the element implies.
All elements except the specifier are optional: on no match they return
the cursor unchanged.

Order of application is fixed: flags, width, precision, length, specifier.

"""

from __future__ import annotations

from dataclasses import dataclass

from fmtcheck.matchers import ALLOWED_SPECIFIERS, LengthModifier, TypeMatcher, matcher_for
from fmtcheck.parsing.charsets import (
    DIGIT_FIRST,
    DIGIT_LAST,
    FLAG_CHARS,
    LENGTH_CHAR,
    LENGTH_LONG,
    LENGTH_LONG_DOUBLE,
    LENGTH_LONG_LONG,
    LENGTH_OTHER,
    PRECISION_DOT,
    STAR,
)
from fmtcheck.parsing.consumers import (
    consume_character,
    consume_character_from_range,
    consume_character_from_set,
    consume_repeatedly,
    consume_string,
)


@dataclass(frozen=True, slots=True)
class FieldResult:
    """Outcome of the width or precision sub-parser.

    Attributes:
        pos: Cursor after the element (unchanged if absent)
        matcher: UNSIGNED_INT when the value is read from the argument
            list (``*``), else None

    """

    pos: int
    matcher: TypeMatcher | None = None


@dataclass(frozen=True, slots=True)
class LengthResult:
    """Outcome of the length-modifier sub-parser.

    Attributes:
        pos: Cursor after the modifier (unchanged if absent)
        modifier: Length modifier class recognised
        allowed: Specifier characters legal after this modifier

    """

    pos: int
    modifier: LengthModifier
    allowed: frozenset[str]


@dataclass(frozen=True, slots=True)
class SpecifierResult:
    """Outcome of a successful specifier sub-parse."""

    pos: int
    specifier: str
    matcher: TypeMatcher


def consume_flags(source: str, pos: int, *, stacked: bool = True) -> int:
    """Consume flag characters.

    Args:
        source: Format string
        pos: Cursor after the ``%``
        stacked: Consume every consecutive flag (``%-+05d``). When False,
            at most one flag is stripped.

    Returns:
        Cursor after the flags
    """
    if stacked:
        return consume_repeatedly(consume_character_from_set, source, pos, FLAG_CHARS)
    after = consume_character_from_set(source, pos, FLAG_CHARS)
    return pos if after is None else after


def _consume_star_or_digits(source: str, pos: int) -> FieldResult:
    # '*' takes its value from the argument list; digits are literal
    after_star = consume_character(source, pos, STAR)
    if after_star is not None:
        return FieldResult(after_star, TypeMatcher.UNSIGNED_INT)
    return FieldResult(
        consume_repeatedly(consume_character_from_range, source, pos, DIGIT_FIRST, DIGIT_LAST)
    )


def consume_width(source: str, pos: int) -> FieldResult:
    """Consume a field width: ``*`` or a (possibly empty) run of digits."""
    return _consume_star_or_digits(source, pos)


def consume_precision(source: str, pos: int) -> FieldResult:
    """Consume ``.`` followed by ``*`` or a (possibly empty) run of digits.

    Without a leading ``.`` nothing is consumed.
    """
    after_dot = consume_character(source, pos, PRECISION_DOT)
    if after_dot is None:
        return FieldResult(pos)
    return _consume_star_or_digits(source, after_dot)


def consume_length(source: str, pos: int) -> LengthResult:
    """Consume a length modifier, longest match first.

    ``hh`` and ``ll`` are tried before ``h`` and ``l`` so that the
    two-character forms are never split.
    """
    after = consume_string(source, pos, LENGTH_CHAR)
    if after is not None:
        return _length(after, LengthModifier.CHAR)
    after = consume_string(source, pos, LENGTH_LONG_LONG)
    if after is not None:
        return _length(after, LengthModifier.LONG_LONG)
    after = consume_character(source, pos, LENGTH_LONG)
    if after is not None:
        return _length(after, LengthModifier.LONG)
    after = consume_character(source, pos, LENGTH_LONG_DOUBLE)
    if after is not None:
        return _length(after, LengthModifier.LONG_DOUBLE)
    after = consume_character_from_set(source, pos, LENGTH_OTHER)
    if after is not None:
        return _length(after, LengthModifier.OTHER)
    return _length(pos, LengthModifier.NONE)


def _length(pos: int, modifier: LengthModifier) -> LengthResult:
    return LengthResult(pos, modifier, ALLOWED_SPECIFIERS[modifier])


def consume_specifier(
    source: str, pos: int, allowed: frozenset[str]
) -> SpecifierResult | None:
    """Consume the terminal specifier character.

    Args:
        source: Format string
        pos: Cursor after the length modifier
        allowed: Specifiers legal after the preceding length modifier

    Returns:
        SpecifierResult, or None if the character is missing or not legal here
    """
    after = consume_character_from_set(source, pos, allowed)
    if after is None:
        return None
    specifier = source[pos]
    return SpecifierResult(after, specifier, matcher_for(specifier))


__all__ = [
    "FieldResult",
    "LengthResult",
    "SpecifierResult",
    "consume_flags",
    "consume_length",
    "consume_precision",
    "consume_specifier",
    "consume_width",
]
