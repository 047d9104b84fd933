"""
Query parameter parsing helpers.

Query input is never trusted and never raises: values that do not parse are
reported as None so the caller can fall back to a default.
"""
import re
from typing import Optional

from table_helper.logging_helper import LoggingHelper

# Pre-compiled regex patterns for performance
_INTEGER_PATTERN = re.compile(r'^\s*[+-]?[0-9]+\s*$')


def parse_int(raw_value) -> Optional[int]:
    """
    Parse a query string value as an integer.

    Accepts optional surrounding whitespace and a leading sign. Rejects
    everything else ('1.5', '1_000', '', None).

    Examples:
        >>> parse_int(' 20 ')
        20
        >>> parse_int('-3')
        -3
        >>> parse_int('abc') is None
        True
    """
    if not isinstance(raw_value, str) or not _INTEGER_PATTERN.match(raw_value):
        return None
    return int(raw_value)


def parse_int_param(request_args, param_name: str) -> Optional[int]:
    """
    Read an integer query parameter.

    Args:
        request_args: Mapping of query parameters (first value per key)
        param_name: Name of the parameter to read

    Returns:
        The parsed integer, or None when the parameter is missing or invalid
    """
    if param_name not in request_args:
        return None

    raw_value = request_args.get(param_name)
    value = parse_int(raw_value)
    if value is None:
        LoggingHelper.log_query_value(param_name, raw_value, 'not an integer')
    return value
