"""
LoggingSetup - Host-controlled logging for the widgetfactory package.

Every module logs through logging.getLogger(__name__), so all records flow
into the "widgetfactory" logger. configure_logging() attaches one handler
there and leaves the root logger and the host's own handlers alone;
calling it again replaces the handler it installed previously.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "widgetfactory"
LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'

# Rotation limits for file output (10MB max, keep 5 files)
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

# Marks handlers installed here so reconfiguration only removes our own
_OWNED_ATTR = '_widgetfactory_owned'


def configure_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    handler: Optional[logging.Handler] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Route widget diagnostics (field creation, commits, rejected keystrokes,
    config loading) to a handler chosen by the host application.

    Args:
        verbose: DEBUG when True, WARNING otherwise
        log_file: Write to a rotating file at this path instead of stderr
        handler: Explicit handler; takes precedence over log_file
        propagate: Also pass records on to the host's root handlers

    Returns:
        The configured "widgetfactory" logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = propagate

    for existing in list(package_logger.handlers):
        if getattr(existing, _OWNED_ATTR, False):
            package_logger.removeHandler(existing)
            existing.close()

    if handler is None:
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_file,
                maxBytes=MAX_LOG_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
        else:
            handler = logging.StreamHandler()

    if handler.formatter is None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _OWNED_ATTR, True)
    package_logger.addHandler(handler)

    package_logger.debug(
        "LoggingSetup: level=%s, handler=%s",
        logging.getLevelName(level), type(handler).__name__
    )
    return package_logger
