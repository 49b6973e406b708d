"""Command-line entry point: ``fmtcheck [PATH ...]`` or ``python -m fmtcheck``.

Lints Python sources for logging and ``%`` calls whose literal format
string disagrees with the arguments supplied.

Exit status:
    0  no diagnostics
    1  diagnostics reported
    2  usage or configuration error

"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Sequence
from pathlib import Path

from fmtcheck import __version__
from fmtcheck.config import CheckConfig, check_config_context, load_pyproject_config
from fmtcheck.errors import ConfigError
from fmtcheck.lint import lint_paths
from fmtcheck.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = "pyproject.toml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fmtcheck",
        description="Check printf-style format strings against their arguments",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to check (default: current directory)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help=f"TOML file with a [tool.fmtcheck] table (default: ./{DEFAULT_CONFIG_FILE} if present)",
    )
    parser.add_argument(
        "--no-type-check",
        action="store_true",
        help="Only compare argument counts, not argument categories",
    )
    parser.add_argument(
        "--single-flag",
        action="store_true",
        help="Recognise at most one flag character per placeholder",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log files as they are checked")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only print diagnostics")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace) -> CheckConfig:
    """Build the effective config: file settings, then command-line overrides.

    Raises:
        ConfigError: If an explicitly named config file cannot be loaded
    """
    if args.config:
        config = load_pyproject_config(args.config)
    elif Path(DEFAULT_CONFIG_FILE).is_file():
        config = load_pyproject_config(DEFAULT_CONFIG_FILE)
    else:
        config = CheckConfig()

    if args.no_type_check:
        config = dataclasses.replace(config, type_checking=False)
    if args.single_flag:
        config = dataclasses.replace(config, stacked_flags=False)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = resolve_config(args)
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    with check_config_context(config):
        diagnostics = lint_paths(args.paths, config=config)

    for diagnostic in diagnostics:
        print(diagnostic)

    if not args.quiet:
        if diagnostics:
            print(f"\nFound {len(diagnostics)} format problem(s)")
        else:
            print("All format strings match their arguments")
    return 1 if diagnostics else 0


if __name__ == "__main__":
    sys.exit(main())
