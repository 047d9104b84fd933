"""
Environment configuration for table defaults.

Reads TABLE_* variables (optionally from a .env file) and converts them to
TableOptions keyword arguments. Invalid values are logged and ignored.
"""
from typing import Any, Dict, Tuple

from dotenv import load_dotenv

from table_helper.constants import FALSE_VALUES
from table_helper.error_handler import ValidationError, validate_environment_variable
from table_helper.template.enums import ElementPlacement

CONFIG_KEYS = (
    'TABLE_DEFAULT_TAKE',
    'TABLE_DEFAULT_SKIP',
    'TABLE_PAGE_SIZE_OPTIONS',
    'TABLE_PAGINATION_PLACEMENT',
    'TABLE_SEARCH_PLACEMENT',
    'TABLE_SANITIZE_CELL_HTML',
)


def _is_truthy(value: str) -> bool:
    return value.strip().lower() not in FALSE_VALUES


def _parse_int(value: str) -> int:
    return int(value.strip())


def _parse_page_sizes(value: str) -> Tuple[int, ...]:
    """Parse "10, 20, 50" into (10, 20, 50)."""
    sizes = tuple(int(part) for part in value.split(',') if part.strip())
    if not sizes:
        raise ValidationError("no page sizes given")
    return sizes


def _parse_placement(value: str) -> ElementPlacement:
    try:
        return ElementPlacement(value.strip().lower())
    except ValueError:
        raise ValidationError("expected one of top, bottom, both") from None


def load_table_defaults(environ=None) -> Dict[str, Any]:
    """
    Read table defaults from the environment.

    Args:
        environ: Optional mapping to read instead of os.environ. When omitted,
            a .env file in the working directory is loaded first.

    Returns:
        Dict of TableOptions keyword arguments for the variables that are set
        and valid
    """
    if environ is None:
        load_dotenv()

    readers = {
        'default_take': ('TABLE_DEFAULT_TAKE', _parse_int, lambda v: v > 0),
        'default_skip': ('TABLE_DEFAULT_SKIP', _parse_int, lambda v: v >= 0),
        'page_size_options': ('TABLE_PAGE_SIZE_OPTIONS', _parse_page_sizes,
                              lambda v: all(size > 0 for size in v)),
        'pagination_placement': ('TABLE_PAGINATION_PLACEMENT', _parse_placement, None),
        'search_placement': ('TABLE_SEARCH_PLACEMENT', _parse_placement, None),
        'sanitize_cell_html': ('TABLE_SANITIZE_CELL_HTML', _is_truthy, None),
    }

    values = {}
    for option, (var_name, converter, validator) in readers.items():
        value = validate_environment_variable(var_name, None, validator=validator,
                                              converter=converter, environ=environ)
        if value is not None:
            values[option] = value
    return values
