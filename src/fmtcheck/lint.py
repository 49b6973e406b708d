"""Lint pass over Python source for %-format calls.

Finds calls whose format string is a literal and checks the supplied
arguments against it before the program runs:

- ``logger.info("%s took %d ms", name, elapsed)`` and the other configured
  logging methods (format is the first positional argument)
- ``logger.log(level, "%s", name)`` (format is the second)
- ``"%s=%d" % (key, value)``

Calls that cannot be checked statically are skipped: non-literal formats,
starred arguments, mapping-style arguments, and ``%`` applied to a name
that may or may not hold a tuple. Logging calls with no arguments after the
format are skipped too: ``LogRecord.getMessage`` only applies ``%`` when
there are arguments, so the text is logged as-is.

Formats using Python-only conversions (``%r``, ``%a`` as ``ascii()``,
``%(key)s`` mapping keys) are outside the C grammar and are skipped.

Diagnostic codes:
    FMT001  argument count does not match the placeholders
    FMT002  literal argument does not fit its placeholder's category

"""

from __future__ import annotations

import ast
import fnmatch
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from fmtcheck.config import CheckConfig, get_check_config
from fmtcheck.errors import ArgumentCountError, ArgumentTypeError
from fmtcheck.location import SourceLocation
from fmtcheck.parsing.charsets import ESCAPED_PERCENT, PERCENT
from fmtcheck.parsing.fields import (
    consume_flags,
    consume_length,
    consume_precision,
    consume_width,
)
from fmtcheck.scanner import iter_placeholders
from fmtcheck.utils.logger import get_logger
from fmtcheck.verify import is_compatible

logger = get_logger(__name__)

COUNT_MISMATCH = "FMT001"
TYPE_MISMATCH = "FMT002"

# Method whose format string follows a level argument
LOG_METHOD = "log"

# Conversions Python's % operator adds to (or redefines from) printf
PYTHON_CONVERSIONS: frozenset[str] = frozenset("ra")

# Start of a Python mapping key, as in %(name)s
MAPPING_KEY_START = "("

# Literal node -> the type it evaluates to
_LITERAL_TYPES: dict[type[ast.AST], type] = {
    ast.JoinedStr: str,
    ast.List: list,
    ast.ListComp: list,
    ast.Tuple: tuple,
    ast.Dict: dict,
    ast.DictComp: dict,
    ast.Set: set,
    ast.SetComp: set,
}


@dataclass(frozen=True, slots=True)
class LintDiagnostic:
    """A problem found at a format call site."""

    location: SourceLocation
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.code} {self.message}"


def _string_literal(node: ast.expr) -> str | None:
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        return node.value
    return None


def _literal_type(node: ast.expr) -> type | None:
    """Type a literal argument evaluates to, or None if not known statically."""
    if isinstance(node, ast.Constant):
        return type(node.value)
    if isinstance(node, ast.UnaryOp) and isinstance(node.operand, ast.Constant):
        # -1, +2.5, ~0
        return type(node.operand.value)
    return _LITERAL_TYPES.get(type(node))


def _operator_arguments(node: ast.expr) -> list[ast.expr] | None:
    """Arguments supplied by the right operand of ``fmt % operand``."""
    if isinstance(node, ast.Tuple):
        if any(isinstance(elt, ast.Starred) for elt in node.elts):
            return None
        return list(node.elts)
    if isinstance(node, (ast.Dict, ast.DictComp)):
        return None
    if _literal_type(node) is not None:
        return [node]
    return None


def _uses_python_conversion(fmt: str, *, stacked_flags: bool) -> bool:
    """Whether ``fmt`` has a ``%r``, ``%a`` or ``%(key)`` conversion.

    Python renders these through ``repr``/``ascii`` or a mapping, so the
    C categories do not describe them.
    """
    pos = fmt.find(PERCENT)
    while pos != -1:
        if fmt.startswith(ESCAPED_PERCENT, pos):
            pos = fmt.find(PERCENT, pos + len(ESCAPED_PERCENT))
            continue
        cursor = pos + 1
        if fmt.startswith(MAPPING_KEY_START, cursor):
            return True
        cursor = consume_flags(fmt, cursor, stacked=stacked_flags)
        cursor = consume_width(fmt, cursor).pos
        cursor = consume_precision(fmt, cursor).pos
        cursor = consume_length(fmt, cursor).pos
        if cursor < len(fmt) and fmt[cursor] in PYTHON_CONVERSIONS:
            return True
        pos = fmt.find(PERCENT, pos + 1)
    return False


class FormatCallChecker(ast.NodeVisitor):
    """AST visitor collecting diagnostics for literal format calls."""

    def __init__(self, filename: str | None = None, config: CheckConfig | None = None) -> None:
        self.filename = filename
        self.config = config or get_check_config()
        self.diagnostics: list[LintDiagnostic] = []

    def visit_Call(self, node: ast.Call) -> None:
        func = node.func
        if isinstance(func, ast.Attribute):
            if func.attr in self.config.logging_methods:
                self._check_call(node, fmt_index=0)
            elif func.attr == LOG_METHOD:
                self._check_call(node, fmt_index=1)
        self.generic_visit(node)

    def visit_BinOp(self, node: ast.BinOp) -> None:
        if isinstance(node.op, ast.Mod):
            fmt = _string_literal(node.left)
            if fmt is not None:
                args = _operator_arguments(node.right)
                if args is not None:
                    self._check(node, fmt, args)
        self.generic_visit(node)

    def _check_call(self, node: ast.Call, fmt_index: int) -> None:
        positional = node.args
        if len(positional) <= fmt_index:
            return
        # Nothing can be counted past a starred argument
        if any(isinstance(arg, ast.Starred) for arg in positional):
            return
        fmt = _string_literal(positional[fmt_index])
        if fmt is None:
            return
        args = positional[fmt_index + 1 :]
        # LogRecord.getMessage leaves the message untouched without args
        if not args:
            return
        if len(args) == 1 and isinstance(args[0], (ast.Dict, ast.DictComp)):
            return
        self._check(node, fmt, args)

    def _check(self, node: ast.expr, fmt: str, args: list[ast.expr]) -> None:
        if _uses_python_conversion(fmt, stacked_flags=self.config.stacked_flags):
            logger.debug("Skipping format with Python-only conversion: %r", fmt)
            return
        slots = [
            (matcher, placeholder.text)
            for placeholder in iter_placeholders(fmt, stacked_flags=self.config.stacked_flags)
            for matcher in placeholder.type_matchers
        ]
        location = SourceLocation.from_node(node, self.filename)

        if len(slots) != len(args):
            error = ArgumentCountError(len(slots), len(args), fmt=fmt)
            self.diagnostics.append(LintDiagnostic(location, COUNT_MISMATCH, str(error)))
            return
        if not self.config.type_checking:
            return

        for position, ((matcher, text), arg) in enumerate(zip(slots, args)):
            arg_type = _literal_type(arg)
            if arg_type is None or is_compatible(matcher, arg_type):
                continue
            error = ArgumentTypeError(position, matcher, arg_type)
            self.diagnostics.append(
                LintDiagnostic(
                    SourceLocation.from_node(arg, self.filename),
                    TYPE_MISMATCH,
                    f"{error} for placeholder {text!r}",
                )
            )


def lint_source(
    source: str,
    filename: str | None = None,
    *,
    config: CheckConfig | None = None,
) -> list[LintDiagnostic]:
    """Lint Python source text.

    Raises:
        SyntaxError: If the source does not parse
    """
    tree = ast.parse(source, filename=filename or "<string>")
    checker = FormatCallChecker(filename, config)
    checker.visit(tree)
    return checker.diagnostics


def lint_file(path: str | Path, *, config: CheckConfig | None = None) -> list[LintDiagnostic]:
    """Lint one Python file. Unreadable or unparseable files are skipped."""
    path = Path(path)
    try:
        source = path.read_text(encoding="utf-8")
        return lint_source(source, str(path), config=config)
    except (OSError, UnicodeDecodeError, SyntaxError, ValueError) as e:
        logger.warning("Skipping %s: %s", path, e)
        return []


def _is_excluded(path: Path, patterns: Iterable[str]) -> bool:
    posix = path.as_posix()
    return any(fnmatch.fnmatch(posix, pattern) for pattern in patterns)


def iter_python_files(
    paths: Iterable[str | Path],
    exclude: Iterable[str] = (),
) -> Iterator[Path]:
    """Yield ``.py`` files named by or found under ``paths``, sorted per directory."""
    patterns = tuple(exclude)
    for entry in paths:
        path = Path(entry)
        candidates = [path] if path.is_file() else sorted(path.rglob("*.py"))
        for candidate in candidates:
            if _is_excluded(candidate, patterns):
                logger.debug("Excluded %s", candidate)
                continue
            yield candidate


def lint_paths(
    paths: Iterable[str | Path],
    *,
    config: CheckConfig | None = None,
) -> list[LintDiagnostic]:
    """Lint every Python file under ``paths``."""
    config = config or get_check_config()
    diagnostics: list[LintDiagnostic] = []
    file_count = 0
    for path in iter_python_files(paths, config.exclude):
        file_count += 1
        logger.debug("Linting %s", path)
        diagnostics.extend(lint_file(path, config=config))
    logger.info("Linted %d file(s), %d diagnostic(s)", file_count, len(diagnostics))
    return diagnostics


__all__ = [
    "COUNT_MISMATCH",
    "FormatCallChecker",
    "LintDiagnostic",
    "TYPE_MISMATCH",
    "iter_python_files",
    "lint_file",
    "lint_paths",
    "lint_source",
]
