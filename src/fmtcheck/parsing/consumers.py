"""Character consumers: the primitives of the format grammar.

A consumer tests the text at a cursor and, on success, returns the cursor
just past what it matched. On failure it returns None. Consumers never
allocate substrings and never read past the end of the source: a cursor at
or beyond ``len(source)`` is simply "no match".

All functions are pure. The same (source, pos, ...) always yields the same
result.

Example:
    >>> consume_character("%d", 0, "%")
    1
    >>> consume_character("%d", 0, "d") is None
    True
    >>> consume_repeatedly(consume_character_from_range, "123x", 0, "0", "9")
    3

"""

from __future__ import annotations

from collections.abc import Callable, Collection


def consume_character(source: str, pos: int, character: str) -> int | None:
    """Consume ``character`` at ``pos``."""
    if pos < len(source) and source[pos] == character:
        return pos + 1
    return None


def consume_character_from_range(
    source: str, pos: int, first: str, last: str
) -> int | None:
    """Consume one character in the inclusive range ``first..last``."""
    if pos < len(source) and first <= source[pos] <= last:
        return pos + 1
    return None


def consume_character_from_set(
    source: str, pos: int, characters: Collection[str]
) -> int | None:
    """Consume one character that is a member of ``characters``."""
    if pos < len(source) and source[pos] in characters:
        return pos + 1
    return None


def consume_string(source: str, pos: int, literal: str) -> int | None:
    """Consume ``literal`` if the source continues with it exactly."""
    if source.startswith(literal, pos):
        return pos + len(literal)
    return None


def consume_repeatedly(
    consumer: Callable[..., int | None],
    source: str,
    pos: int,
    *args: object,
) -> int:
    """Apply ``consumer`` greedily and return the last cursor reached.

    Stops when the consumer reports no match or makes no progress, so a
    consumer that matches without advancing cannot loop forever. Zero
    matches is allowed: the starting cursor is returned unchanged.

    Args:
        consumer: Single-character consumer, called as
            ``consumer(source, pos, *args)``
        source: Text being scanned
        pos: Starting cursor
        *args: Extra arguments forwarded to the consumer

    Returns:
        Cursor after the last successful match (>= pos)
    """
    while True:
        next_pos = consumer(source, pos, *args)
        if next_pos is None or next_pos <= pos:
            return pos
        pos = next_pos


__all__ = [
    "consume_character",
    "consume_character_from_range",
    "consume_character_from_set",
    "consume_repeatedly",
    "consume_string",
]
