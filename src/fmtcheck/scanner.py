"""Format scanner with O(n) guaranteed performance.

Walks a format string left to right and collects the argument categories
demanded by every placeholder, in call order.

- ``%%`` is an escaped percent: skipped, contributes nothing
- a valid placeholder contributes its matchers and is skipped whole
- anything else is literal text; scanning resumes one character later

Every step advances the cursor, so scanning terminates after at most
``len(fmt)`` steps and never reads past the end.

Thread Safety:
All functions are pure. Safe to call concurrently on any strings.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from fmtcheck.config import get_check_config
from fmtcheck.matchers import TypeMatcher
from fmtcheck.parsing.charsets import ESCAPED_PERCENT, PERCENT
from fmtcheck.parsing.placeholder import parse_placeholder

# Ordered argument categories for a whole format string
ScanResult = tuple[TypeMatcher, ...]


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A placeholder recognised in a format string.

    Attributes:
        offset: Index of the ``%`` in the format string
        text: Placeholder source text, e.g. ``"%-5.2f"``
        type_matchers: Argument categories this placeholder demands
        specifier: Terminal specifier character

    """

    offset: int
    text: str
    type_matchers: tuple[TypeMatcher, ...]
    specifier: str


def iter_placeholders(
    fmt: str,
    *,
    stacked_flags: bool | None = None,
) -> Iterator[Placeholder]:
    """Yield each valid placeholder of ``fmt`` in order.

    Args:
        fmt: Format string
        stacked_flags: Accept several consecutive flags. None uses the
            active CheckConfig.

    Yields:
        Placeholder records, left to right
    """
    if stacked_flags is None:
        stacked_flags = get_check_config().stacked_flags

    pos = 0
    end = len(fmt)
    while pos < end:
        # Literal text cannot start a placeholder; jump to the next '%'
        pos = fmt.find(PERCENT, pos)
        if pos == -1:
            return
        if fmt.startswith(ESCAPED_PERCENT, pos):
            pos += len(ESCAPED_PERCENT)
            continue
        result = parse_placeholder(fmt, pos, stacked_flags=stacked_flags)
        if not result.is_valid:
            pos += 1
            continue
        yield Placeholder(
            offset=pos,
            text=fmt[pos : pos + result.consumed_length],
            type_matchers=result.type_matchers,
            specifier=result.specifier,
        )
        pos += result.consumed_length


def scan(fmt: str, *, stacked_flags: bool | None = None) -> ScanResult:
    """Return the argument categories ``fmt`` demands, in call order.

    Example:
        >>> [m.name for m in scan("Hello %s, you are %d years old")]
        ['STRING', 'SIGNED_INT']
        >>> scan("%%d")
        ()
    """
    return tuple(
        matcher
        for placeholder in iter_placeholders(fmt, stacked_flags=stacked_flags)
        for matcher in placeholder.type_matchers
    )


def count_arguments(fmt: str, *, stacked_flags: bool | None = None) -> int:
    """Return the number of arguments ``fmt`` demands."""
    return len(scan(fmt, stacked_flags=stacked_flags))


__all__ = ["Placeholder", "ScanResult", "count_arguments", "iter_placeholders", "scan"]
