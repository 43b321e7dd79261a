"""
ulidtype Logging

Package-level loggers built on the structured logging configuration in
ulidtype.config.logging. Importing the package leaves the host's logging
untouched; applications that want the structured output call
setup_logging() themselves.
"""

import logging

from .config.logging import get_logger, log_error, log_rejection, setup_logging

logger = get_logger("ulidtype")
logger.addHandler(logging.NullHandler())

codec_logger = get_logger("ulidtype.codec")
types_logger = get_logger("ulidtype.types")

__all__ = [
  "logger",
  "codec_logger",
  "types_logger",
  "get_logger",
  "log_error",
  "log_rejection",
  "setup_logging",
]
