"""
fmtcheck: printf-style format string checking for Python

Scans a format string into the ordered list of argument categories it
demands, and verifies the arguments of a call against that list. Catches
placeholder/argument mismatches in logging calls before they ship.
Zero runtime dependencies.

Quick Start:
    >>> from fmtcheck import scan, check_arguments
    >>> [m.name for m in scan("%*.*f")]
    ['UNSIGNED_INT', 'UNSIGNED_INT', 'FLOATING']
    >>> check_arguments("Hello %s, you are %d years old", "Ada", 36)

Static checking:
    >>> from fmtcheck import lint_source
    >>> for diagnostic in lint_source('log.info("%d %d", 1)'):
    ...     print(diagnostic)
    1:1: FMT001 number of arguments passed (1) does not match ...

Command line:
    fmtcheck src/ tests/
"""

from fmtcheck.config import (
    CheckConfig,
    check_config_context,
    get_check_config,
    load_pyproject_config,
    reset_check_config,
    set_check_config,
)
from fmtcheck.errors import (
    ArgumentCountError,
    ArgumentTypeError,
    ConfigError,
    FmtcheckError,
    FormatMismatchError,
)
from fmtcheck.lint import LintDiagnostic, lint_file, lint_paths, lint_source
from fmtcheck.location import SourceLocation
from fmtcheck.matchers import LengthModifier, TypeMatcher
from fmtcheck.parsing import INVALID_PLACEHOLDER, PlaceholderResult, parse_placeholder
from fmtcheck.scanner import Placeholder, ScanResult, count_arguments, iter_placeholders, scan
from fmtcheck.verify import (
    ArgumentMismatch,
    VerificationResult,
    check_arguments,
    is_compatible,
    verify,
)

__version__ = "0.1.0"

__all__ = [
    # Scanning
    "INVALID_PLACEHOLDER",
    "LengthModifier",
    "Placeholder",
    "PlaceholderResult",
    "ScanResult",
    "TypeMatcher",
    "count_arguments",
    "iter_placeholders",
    "parse_placeholder",
    "scan",
    # Verification
    "ArgumentMismatch",
    "VerificationResult",
    "check_arguments",
    "is_compatible",
    "verify",
    # Linting
    "LintDiagnostic",
    "SourceLocation",
    "lint_file",
    "lint_paths",
    "lint_source",
    # Configuration
    "CheckConfig",
    "check_config_context",
    "get_check_config",
    "load_pyproject_config",
    "reset_check_config",
    "set_check_config",
    # Errors
    "ArgumentCountError",
    "ArgumentTypeError",
    "ConfigError",
    "FmtcheckError",
    "FormatMismatchError",
    # Version
    "__version__",
]
