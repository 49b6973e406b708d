"""Format-string grammar: consumers, sub-parsers and the placeholder parser.

Modules:
- charsets: frozenset character classes of the grammar
- consumers: cursor-based character consumers
- fields: flags, width, precision, length and specifier sub-parsers
- placeholder: one complete ``%...`` placeholder

"""

from fmtcheck.parsing.consumers import (
    consume_character,
    consume_character_from_range,
    consume_character_from_set,
    consume_repeatedly,
    consume_string,
)
from fmtcheck.parsing.placeholder import (
    INVALID_PLACEHOLDER,
    PlaceholderResult,
    parse_placeholder,
)

__all__ = [
    "INVALID_PLACEHOLDER",
    "PlaceholderResult",
    "consume_character",
    "consume_character_from_range",
    "consume_character_from_set",
    "consume_repeatedly",
    "consume_string",
    "parse_placeholder",
]
