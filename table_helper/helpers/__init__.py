"""
Helper utilities for query state resolution and data source transformation.
"""

from .validation_helpers import parse_int, parse_int_param
from .request_helpers import RequestContext, overlay_query, set_url_parameters, strip_query
from .table_state import ParamNames, ResolvedQueryState, resolve_query_state
from .search_helpers import apply_search, contains
from .sorting_helpers import apply_sort, link_sort_order, sort_arrow
from .pagination_helpers import (
    PageLink,
    active_page_index,
    apply_pagination,
    generate_page_links,
    last_page_skip
)

__all__ = [
    # Validation helpers
    'parse_int',
    'parse_int_param',
    # Request helpers
    'RequestContext',
    'overlay_query',
    'set_url_parameters',
    'strip_query',
    # Query state
    'ParamNames',
    'ResolvedQueryState',
    'resolve_query_state',
    # Search helpers
    'apply_search',
    'contains',
    # Sorting helpers
    'apply_sort',
    'link_sort_order',
    'sort_arrow',
    # Pagination helpers
    'PageLink',
    'active_page_index',
    'apply_pagination',
    'generate_page_links',
    'last_page_skip',
]
