"""
Structured Logging Configuration for ulidtype

This module provides structured logging for the codec and column type.

Key Features:
- Structured JSON output outside development
- Automatic log level management by environment
- Error categorization for cast and decode failures
"""

import json
import logging
import logging.config
import traceback
from datetime import datetime, timezone
from typing import Any

from ulidtype.config.env import EnvConfig

APP_LOGGERS = ["ulidtype", "ulidtype.codec", "ulidtype.types"]


class StructuredFormatter(logging.Formatter):
  """
  JSON formatter producing one searchable object per record.

  - Timestamp in ISO format
  - Consistent field names for filtering
  - Hierarchical component/action structure
  - Metadata preserved as searchable fields
  """

  def format(self, record: logging.LogRecord) -> str:
    # Base log structure
    log_entry = {
      "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
      .replace(tzinfo=None)
      .isoformat()
      + "Z",
      "level": record.levelname,
      "component": getattr(record, "component", record.name),
      "message": record.getMessage(),
    }

    # Add action if specified (for searching specific operations)
    if hasattr(record, "action"):
      log_entry["action"] = record.action

    if hasattr(record, "form"):
      log_entry["form"] = record.form

    # Add error details for ERROR/CRITICAL logs
    if record.levelno >= logging.ERROR:
      if record.exc_info:
        log_entry["error"] = {
          "type": record.exc_info[0].__name__ if record.exc_info[0] else "Unknown",
          "message": str(record.exc_info[1]) if record.exc_info[1] else "",
          "traceback": traceback.format_exception(*record.exc_info),
        }

      if hasattr(record, "error_category"):
        log_entry["error_category"] = record.error_category

    # Add any additional metadata
    if hasattr(record, "metadata"):
      log_entry["metadata"] = record.metadata

    return json.dumps(log_entry, default=str, separators=(",", ":"))


def get_logging_config(environment: str | None = None) -> dict[str, Any]:
  """
  Generate logging configuration based on environment.

  - prod: INFO level, structured output
  - staging: INFO level, structured output
  - test: WARNING level, minimal output for clean test runs
  - dev: DEBUG level, simple console output (unless LOG_LEVEL overrides)
  """
  env = environment or EnvConfig.ENVIRONMENT

  log_level_override = getattr(EnvConfig, "LOG_LEVEL", None)

  if env in ("prod", "staging"):
    default_level = "INFO"
  elif env == "test":
    default_level = "WARNING"  # Quieter tests - only warnings/errors
  else:  # dev
    default_level = log_level_override or "DEBUG"

  handlers = ["console"]

  config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
      "structured": {
        "()": StructuredFormatter,
      },
      "simple": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
    },
    "handlers": {
      "console": {
        "class": "logging.StreamHandler",
        "level": default_level,
        "formatter": "simple" if env == "dev" else "structured",
        "stream": "ext://sys.stderr",
      },
    },
    "loggers": {
      name: {
        "level": default_level,
        "handlers": list(handlers),
        "propagate": False,
      }
      for name in APP_LOGGERS
    },
  }

  return config


def setup_logging(environment: str | None = None) -> None:
  """Initialize structured logging configuration."""
  config = get_logging_config(environment)
  logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
  """Get a logger with structured logging capabilities."""
  return logging.getLogger(name)


def log_error(
  logger: logging.Logger,
  error: Exception,
  component: str,
  action: str,
  error_category: str = "validation",
  metadata: dict[str, Any] | None = None,
) -> None:
  """Log error with structured data for easy searching."""
  logger.error(
    f"Error in {component}.{action}: {error!s}",
    exc_info=(type(error), error, error.__traceback__),
    extra={
      "component": component,
      "action": action,
      "error_category": error_category,
      "metadata": metadata or {},
    },
  )


def log_rejection(
  logger: logging.Logger,
  error: Exception,
  action: str,
  form: str,
) -> None:
  """Log a rejected input at DEBUG level; malformed input is expected."""
  logger.debug(
    f"Rejected {form} input in {action}: {error!s}",
    extra={
      "component": "codec",
      "action": action,
      "form": form,
      "metadata": getattr(error, "details", {}),
    },
  )
