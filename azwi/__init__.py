"""Azure AD workload identity provisioning for Kubernetes service accounts.

Call :func:`setup` once before running phases to install azwi's log handler
(``LOG_FORMAT`` / ``LOG_LEVEL`` are read from the environment).
"""
import logging
from typing import Optional

from azwi.utils.logging import configure_logging

__version__ = "0.1.0"


def setup(log_format: Optional[str] = None, log_level: Optional[str] = None) -> logging.Logger:
    """Configure azwi logging and return the package logger."""
    return configure_logging(log_format, log_level)
