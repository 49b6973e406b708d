"""Source location tracking for diagnostics.

Provides SourceLocation dataclass for pointing at a call site in Python
source. Used by the linter and by mismatch errors.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

import ast
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location of a checked call.

    ``lineno`` is 1-indexed, as reported by the ``ast`` module.
    ``col_offset`` is 1-indexed here (``ast`` reports 0-indexed columns;
    ``from_node`` converts).

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        source_file: Path to source file (optional)

    Examples:
            >>> loc = SourceLocation(12, 5, "app/service.py")
            >>> str(loc)
        'app/service.py:12:5'

    """

    lineno: int
    col_offset: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for diagnostics.

        Returns:
            Formatted string like "file.py:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_node(cls, node: ast.AST, source_file: str | None = None) -> SourceLocation:
        """Create a location from an AST node's start position."""
        return cls(
            lineno=getattr(node, "lineno", 0),
            col_offset=getattr(node, "col_offset", -1) + 1,
            source_file=source_file,
        )
