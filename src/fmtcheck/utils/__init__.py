"""Utility modules for fmtcheck.

Provides:
- logger: get_logger and configure_logging
"""

from fmtcheck.utils.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
