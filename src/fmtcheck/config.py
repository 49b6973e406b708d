"""ContextVar-based check configuration for fmtcheck.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per check run, read by the scanner, the verifier and
the linter in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from fmtcheck.config import CheckConfig, check_config_context

    with check_config_context(CheckConfig(type_checking=False)):
        check_arguments("%d", "not checked")

    # Or load from pyproject.toml ([tool.fmtcheck] table)
    config = load_pyproject_config("pyproject.toml")

"""

from __future__ import annotations

import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from fmtcheck.errors import ConfigError

# logging.Logger methods whose first argument is a %-format string
DEFAULT_LOGGING_METHODS: frozenset[str] = frozenset(
    {"debug", "info", "warning", "error", "exception", "critical", "fatal"}
)


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Immutable check configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        type_checking: Compare argument categories, not only argument counts
        stacked_flags: Accept several consecutive flags (``%-+5d``); when
            False only one flag is recognised per placeholder
        logging_methods: Method names the linter treats as logging calls
        exclude: Glob patterns of paths the linter skips

    """

    type_checking: bool = True
    stacked_flags: bool = True
    logging_methods: frozenset[str] = field(default=DEFAULT_LOGGING_METHODS)
    exclude: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> CheckConfig:
        """Create CheckConfig from dictionary.

        Keys may use dashes or underscores (``type-checking`` or
        ``type_checking``). Unknown keys are ignored. List values are
        converted to the field's collection type.

        Args:
            config_dict: Dictionary with config values.

        Returns:
            New CheckConfig instance with values from dict.

        Raises:
            ConfigError: If a value has the wrong type.

        Example:
            >>> config = CheckConfig.from_dict({"type-checking": False})
            >>> config.type_checking
            False

        """
        valid_fields = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = key.replace("-", "_")
            if name not in valid_fields:
                continue
            values[name] = _coerce(name, value)
        return cls(**values)


def _coerce(name: str, value: Any) -> Any:
    if name in ("type_checking", "stacked_flags"):
        if not isinstance(value, bool):
            raise ConfigError(f"'{name}' must be a boolean, got {value!r}")
        return value
    if not isinstance(value, (list, tuple, set, frozenset)) or not all(
        isinstance(v, str) for v in value
    ):
        raise ConfigError(f"'{name}' must be a list of strings, got {value!r}")
    if name == "logging_methods":
        return frozenset(value)
    return tuple(value)


def load_pyproject_config(path: str | Path) -> CheckConfig:
    """Load configuration from the ``[tool.fmtcheck]`` table of a TOML file.

    A file without that table yields the default configuration.

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds bad values.
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(str(e), path=str(path)) from e

    table = data.get("tool", {}).get("fmtcheck", {})
    if not isinstance(table, dict):
        raise ConfigError("[tool.fmtcheck] must be a table", path=str(path))
    try:
        return CheckConfig.from_dict(table)
    except ConfigError as e:
        raise ConfigError(str(e), path=str(path)) from e


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CheckConfig = CheckConfig()

# Thread-local configuration via ContextVar
_check_config: ContextVar[CheckConfig] = ContextVar(
    "check_config",
    default=_DEFAULT_CONFIG,
)


def get_check_config() -> CheckConfig:
    """Get current check configuration (thread-local)."""
    return _check_config.get()


def set_check_config(config: CheckConfig) -> None:
    """Set check configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _check_config.set(config)


def reset_check_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _check_config.set(_DEFAULT_CONFIG)


@contextmanager
def check_config_context(config: CheckConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Useful for tests and isolated checks. Properly restores the previous
    config even if an exception is raised.

    Example:
        >>> with check_config_context(CheckConfig(stacked_flags=False)):
        ...     scan("%-+5d")
        ()

    """
    previous = _check_config.get()
    _check_config.set(config)
    try:
        yield
    finally:
        _check_config.set(previous)


__all__ = [
    "CheckConfig",
    "DEFAULT_LOGGING_METHODS",
    "check_config_context",
    "get_check_config",
    "load_pyproject_config",
    "reset_check_config",
    "set_check_config",
]
