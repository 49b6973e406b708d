"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Reference: C11 7.21.6.1 (fprintf conversion specifications)

Usage:
    from fmtcheck.parsing.charsets import FLAG_CHARS

    if char in FLAG_CHARS:  # O(1) lookup
        ...
"""

# Placeholder start
PERCENT = "%"

# Escaped percent: one literal '%' in output, no argument
ESCAPED_PERCENT = "%%"

# Flags: left-justify, sign, space, alternate form, zero padding
FLAG_CHARS: frozenset[str] = frozenset("+- #0")

# Width/precision read from the argument list
STAR = "*"

# Precision introducer
PRECISION_DOT = "."

# Decimal digit range bounds (inclusive)
DIGIT_FIRST = "0"
DIGIT_LAST = "9"

# Two-character length modifiers, tried before their one-character prefixes
LENGTH_CHAR = "hh"
LENGTH_LONG_LONG = "ll"

# One-character length modifiers
LENGTH_LONG = "l"
LENGTH_LONG_DOUBLE = "L"

# Remaining one-character modifiers: short, intmax_t, size_t, ptrdiff_t
LENGTH_OTHER: frozenset[str] = frozenset("hjzt")
