"""Logger module for symcalc

This module provides a structured logging interface that users can replace
with their own implementation.

Usage:
    from symcalc.logger import session_logger

    session_logger.info("Registry built", functions=42)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            pass
"""

import logging

from symcalc.config import get_settings
from symcalc.logger.interface import Logger
from symcalc.logger.structured_logger import StructuredLogger

_log_settings = get_settings().log

# Shared logger instance
session_logger: Logger = StructuredLogger(
    level=getattr(logging, _log_settings.level, logging.INFO),
    log_file=_log_settings.file,
    json_format=_log_settings.json_format,
)

__all__ = [
    "Logger",
    "StructuredLogger",
    "session_logger",
]
