"""
Logging for parliament

The package logger carries only a NullHandler, so nothing is printed unless
the application configures output. setup_logger() attaches a stream handler
for callers who want parliament's debug trail; it also runs at import when
PARLIAMENT_LOG_LEVEL is set.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

LOG_LEVEL_ENV = "PARLIAMENT_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logger(name="parliament", level=None, format_string=None, stream=None):
  """
  Attach a stream handler to a parliament logger and set its level

  Calling it again for the same logger leaves the first configuration alone.

  Args:
    name: Logger name, "parliament" or a child of it
    level: Level name; falls back to PARLIAMENT_LOG_LEVEL, then WARNING
    format_string: Record format for the handler
    stream: Output stream; sys.stderr when omitted

  Returns:
    The configured logger
  """
  log = logging.getLogger(name)
  if any(isinstance(h, logging.StreamHandler) for h in log.handlers):
    return log

  level = level or os.getenv(LOG_LEVEL_ENV, "WARNING")
  handler = logging.StreamHandler(stream or sys.stderr)
  handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
  log.addHandler(handler)
  log.setLevel(level.upper())
  return log


logger = logging.getLogger("parliament")
logger.addHandler(logging.NullHandler())

if os.getenv(LOG_LEVEL_ENV):
  setup_logger()
