"""
Standardized error handling utilities for the table helper.

Malformed query input never raises; it degrades to defaults in the state
resolver. The exceptions here cover configuration mistakes made by the
calling code, and the helpers log failures from caller-supplied functions
before letting them propagate.
"""

import os
from typing import Optional, Any, Callable
from table_helper.logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)


class TableHelperError(Exception):
    """Base exception for all table helper errors."""
    pass


class ConfigurationError(TableHelperError):
    """Invalid table or column configuration."""
    pass


class ValidationError(TableHelperError):
    """Invalid configuration value."""
    pass


def log_and_reraise(exc: Exception, message: str) -> None:
    """
    Log an exception with its traceback and re-raise it unchanged.

    Must be called from inside an ``except`` block.

    Args:
        exc: The exception to log
        message: Context for the log line

    Raises:
        The original exception
    """
    LoggingHelper.log_error_with_trace(message, exc)
    raise


def validate_environment_variable(
    var_name: str,
    default: Any,
    validator: Optional[Callable[[Any], bool]] = None,
    converter: Optional[Callable[[str], Any]] = None,
    environ=None
) -> Any:
    """
    Safely get and validate an environment variable.

    Args:
        var_name: Name of the environment variable
        default: Default value if not set or invalid
        validator: Optional validation function
        converter: Optional conversion function (e.g., int, float)
        environ: Optional mapping to read from instead of os.environ

    Returns:
        The validated and converted environment variable value
    """
    source = os.environ if environ is None else environ
    raw_value = source.get(var_name)

    if raw_value is None:
        logger.debug(f"Environment variable {var_name} not set, using default: {default}")
        return default

    if converter:
        try:
            value = converter(raw_value)
        except (ValueError, TypeError, ValidationError) as exc:
            logger.warning(
                f"Invalid {var_name}='{raw_value}': {exc}. Using default: {default}"
            )
            return default
    else:
        value = raw_value

    if validator and not validator(value):
        logger.warning(
            f"Invalid {var_name}='{value}' failed validation. Using default: {default}"
        )
        return default

    logger.debug(f"Using {var_name}={value}")
    return value
