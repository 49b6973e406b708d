"""Tests for utility modules."""

import logging
from collections.abc import Iterator

import pytest

from fmtcheck.utils import configure_logging, get_logger


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        logger = get_logger("mymodule")
        assert logger.name == "fmtcheck.mymodule"

    def test_logger_with_fmtcheck_prefix(self) -> None:
        logger = get_logger("fmtcheck.lint")
        assert logger.name == "fmtcheck.lint"

    def test_logger_name_starting_with_fmtcheck_not_submodule(self) -> None:
        """Names starting with 'fmtcheck' but not submodules should get prefix."""
        logger = get_logger("fmtcheck_other")
        assert logger.name == "fmtcheck.fmtcheck_other"

    def test_logger_exact_fmtcheck_name(self) -> None:
        """The exact name 'fmtcheck' should not get double-prefixed."""
        logger = get_logger("fmtcheck")
        assert logger.name == "fmtcheck"


class TestConfigureLogging:
    """Level selection for the command line."""

    @pytest.fixture(autouse=True)
    def restore_level(self) -> Iterator[None]:
        logger = logging.getLogger("fmtcheck")
        original = logger.level
        yield
        logger.setLevel(original)

    def test_default_is_warning(self) -> None:
        assert configure_logging() == logging.WARNING
        assert logging.getLogger("fmtcheck").level == logging.WARNING

    def test_verbose(self) -> None:
        assert configure_logging(verbose=True) == logging.DEBUG
        assert get_logger("lint").isEnabledFor(logging.DEBUG)

    def test_quiet(self) -> None:
        assert configure_logging(quiet=True) == logging.ERROR
        assert not get_logger("lint").isEnabledFor(logging.WARNING)

    def test_verbose_wins_over_quiet(self) -> None:
        assert configure_logging(verbose=True, quiet=True) == logging.DEBUG
