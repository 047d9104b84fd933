"""
Unified logging helper for the table helper package.

Usage:
    from table_helper.logging_helper import LoggingHelper, LogType

    logger = LoggingHelper.get_logger(LogType.MAIN)
    logger.info("Standard logging")

    LoggingHelper.log_error_with_trace("Render failed", exception)
    LoggingHelper.log_query_value("sortBy", raw_value, "not an integer")
"""

import logging
import os
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


class LogType(Enum):
    """Enum for different log types in the package."""
    MAIN = "table_helper"
    QUERY = "table_helper.query"


def sanitize_log_value(value, max_length: int = 50) -> str:
    """
    Sanitize a value for safe logging to prevent log injection.

    Query string values come straight from the client, so newlines are
    escaped and long values truncated before they reach a log line.
    """
    if not isinstance(value, str):
        value = str(value)
    value = value.replace('\n', '\\n').replace('\r', '\\r')
    if len(value) > max_length:
        value = value[:max_length] + '...'
    return value


class LoggingHelper:
    """
    Manages the package loggers and helper methods for common log patterns.
    """

    _loggers = {}
    _initialized = False
    _log_dir: Optional[Path] = None

    @classmethod
    def initialize(cls, log_dir: Optional[str] = None):
        """
        Initialize all loggers. Called once on import.

        Args:
            log_dir: Optional directory for a rotating log file. Falls back to
                the TABLE_HELPER_LOG_DIR environment variable; console only
                when neither is set.
        """
        if cls._initialized:
            return

        log_dir = log_dir or os.getenv('TABLE_HELPER_LOG_DIR')
        cls._log_dir = Path(log_dir) if log_dir else None

        cls._loggers[LogType.MAIN] = cls._setup_main_logger()
        cls._loggers[LogType.QUERY] = cls._setup_query_logger()

        cls._initialized = True

    @classmethod
    def get_logger(cls, log_type: LogType = LogType.MAIN) -> logging.Logger:
        """
        Get a logger instance by type.

        Args:
            log_type: The type of logger to retrieve

        Returns:
            The requested logger instance
        """
        if not cls._initialized:
            cls.initialize()
        return cls._loggers.get(log_type, cls._loggers[LogType.MAIN])

    # =============================================================================
    # Helper methods for common logging patterns
    # =============================================================================

    @classmethod
    def log_error_with_trace(cls, message: str, exception: Exception,
                             log_type: LogType = LogType.MAIN):
        """
        Log an error with full traceback in a single call.

        Args:
            message: Error message to log
            exception: The exception that occurred
            log_type: Which logger to use
        """
        logger = cls.get_logger(log_type)
        logger.error(f"{message}: {exception}", exc_info=True)

    @classmethod
    def log_query_value(cls, param_name: str, raw_value, reason: str):
        """
        Log an ignored query string value on the QUERY logger.

        Args:
            param_name: Query parameter name
            raw_value: Value as received from the client
            reason: Why the value was ignored
        """
        logger = cls.get_logger(LogType.QUERY)
        logger.debug(
            "Ignoring %s=%s (%s)",
            param_name,
            sanitize_log_value(raw_value),
            reason,
        )

    # =============================================================================
    # Private logger setup methods
    # =============================================================================

    @classmethod
    def _setup_main_logger(cls) -> logging.Logger:
        """Configure and return the main package logger."""
        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()

        logger = logging.getLogger(LogType.MAIN.value)
        logger.setLevel(getattr(logging, log_level, logging.INFO))
        logger.handlers = []
        logger.propagate = False

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
        logger.addHandler(console_handler)

        if cls._log_dir is None:
            return logger

        try:
            cls._log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                cls._log_dir / 'table_helper.log',
                maxBytes=10*1024*1024,  # 10MB
                backupCount=3,
                encoding='utf-8'
            )
            file_handler.setFormatter(
                logging.Formatter('%(asctime)s | %(levelname)s | %(message)s',
                                  datefmt='%Y-%m-%d %H:%M:%S')
            )
            logger.addHandler(file_handler)

        except OSError as e:
            logger.warning(f"Could not create file handler: {e}")

        return logger

    @classmethod
    def _setup_query_logger(cls) -> logging.Logger:
        """Configure the query-state logger (child of the main logger)."""
        logger = logging.getLogger(LogType.QUERY.value)
        logger.handlers = []
        # Inherits level and handlers from the main logger
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

        return logger


LoggingHelper.initialize()
