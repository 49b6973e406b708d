"""Logger helpers for fmtcheck.

Library modules log under the ``fmtcheck`` namespace and never configure
handlers themselves. The command line installs one stderr handler through
``configure_logging``.

Example:
    >>> from fmtcheck.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Linting %s", "app.py")
"""

from __future__ import annotations

import logging

# Root of every fmtcheck logger name
NAMESPACE = "fmtcheck"

CLI_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the fmtcheck namespace.

    ``fmtcheck`` and its dotted children are used as-is; any other name
    is nested under ``fmtcheck.``.

    Example:
        >>> get_logger("plugins").name
        'fmtcheck.plugins'
    """
    if not (name == NAMESPACE or name.startswith(f"{NAMESPACE}.")):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> int:
    """Install the command-line log handler and return the chosen level.

    Default is WARNING, so skipped files are reported. ``verbose`` lowers it
    to DEBUG and ``quiet`` raises it to ERROR; ``verbose`` wins if both are set.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=CLI_FORMAT)
    get_logger(NAMESPACE).setLevel(level)
    return level
