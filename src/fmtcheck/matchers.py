"""Type matchers and the specifier tables of the printf grammar.

A format string is reduced to an ordered sequence of TypeMatcher values, one
per argument the call must supply. The tables here are static: which
specifiers are legal after each length modifier, and which category each
specifier demands.

Thread Safety:
All tables are module-level frozensets and read-only dicts.
TypeMatcher and LengthModifier are enums (inherently immutable).

"""

from __future__ import annotations

from enum import Enum, auto


class TypeMatcher(Enum):
    """Argument category demanded by one placeholder slot.

    UNCONSTRAINED places no requirement on the argument. It is produced for
    ``%n``, whose argument is a write-back target rather than a value.

    """

    SIGNED_INT = auto()
    UNSIGNED_INT = auto()
    FLOATING = auto()
    CHAR = auto()
    STRING = auto()
    POINTER = auto()
    UNCONSTRAINED = auto()

    @property
    def description(self) -> str:
        """Human readable category name for diagnostics."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[TypeMatcher, str] = {
    TypeMatcher.SIGNED_INT: "signed integer",
    TypeMatcher.UNSIGNED_INT: "unsigned integer",
    TypeMatcher.FLOATING: "floating point number",
    TypeMatcher.CHAR: "character",
    TypeMatcher.STRING: "string",
    TypeMatcher.POINTER: "pointer",
    TypeMatcher.UNCONSTRAINED: "any value",
}


class LengthModifier(Enum):
    """Length modifier class preceding the specifier.

    - NONE: no modifier
    - CHAR: ``hh``
    - LONG_LONG: ``ll``
    - LONG: ``l``
    - LONG_DOUBLE: ``L``
    - OTHER: ``h``, ``j``, ``z`` or ``t``

    """

    NONE = auto()
    CHAR = auto()  # hh
    LONG_LONG = auto()  # ll
    LONG = auto()  # l
    LONG_DOUBLE = auto()  # L
    OTHER = auto()  # h, j, z, t


# Specifier character -> category
SPECIFIER_MATCHERS: dict[str, TypeMatcher] = {
    "d": TypeMatcher.SIGNED_INT,
    "i": TypeMatcher.SIGNED_INT,
    "u": TypeMatcher.UNSIGNED_INT,
    "o": TypeMatcher.UNSIGNED_INT,
    "x": TypeMatcher.UNSIGNED_INT,
    "X": TypeMatcher.UNSIGNED_INT,
    "f": TypeMatcher.FLOATING,
    "F": TypeMatcher.FLOATING,
    "e": TypeMatcher.FLOATING,
    "E": TypeMatcher.FLOATING,
    "g": TypeMatcher.FLOATING,
    "G": TypeMatcher.FLOATING,
    "a": TypeMatcher.FLOATING,
    "A": TypeMatcher.FLOATING,
    "c": TypeMatcher.CHAR,
    "s": TypeMatcher.STRING,
    "p": TypeMatcher.POINTER,
    "n": TypeMatcher.UNCONSTRAINED,
}

SPECIFIERS: frozenset[str] = frozenset(SPECIFIER_MATCHERS)

INTEGER_SPECIFIERS: frozenset[str] = frozenset("diuoxXn")
FLOATING_SPECIFIERS: frozenset[str] = frozenset("fFeEgGaA")

# Length modifier -> specifiers legal after it
ALLOWED_SPECIFIERS: dict[LengthModifier, frozenset[str]] = {
    LengthModifier.NONE: SPECIFIERS,
    LengthModifier.CHAR: INTEGER_SPECIFIERS,
    LengthModifier.LONG_LONG: INTEGER_SPECIFIERS,
    LengthModifier.LONG: INTEGER_SPECIFIERS | frozenset("cs"),
    LengthModifier.LONG_DOUBLE: FLOATING_SPECIFIERS,
    LengthModifier.OTHER: INTEGER_SPECIFIERS,
}


def matcher_for(specifier: str) -> TypeMatcher:
    """Return the category a specifier character demands.

    Characters outside the specifier table map to UNCONSTRAINED.

    Example:
        >>> matcher_for("d")
        <TypeMatcher.SIGNED_INT: 1>
    """
    return SPECIFIER_MATCHERS.get(specifier, TypeMatcher.UNCONSTRAINED)


__all__ = [
    "ALLOWED_SPECIFIERS",
    "FLOATING_SPECIFIERS",
    "INTEGER_SPECIFIERS",
    "LengthModifier",
    "SPECIFIERS",
    "SPECIFIER_MATCHERS",
    "TypeMatcher",
    "matcher_for",
]
