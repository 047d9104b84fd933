"""
Server-side rendering of sortable, searchable, paginated HTML tables.

The table state (search, sort, page) lives entirely in the query string.

    from table_helper import ColumnSetting, RequestContext, render_table, contains

    def setup(table):
        table.add_col('Title', lambda v: v['title'], lambda v: v['title'],
                      contains(lambda v: v['title']))
        table.add_col('Plays', lambda v: v['plays'], lambda v: v['plays'],
                      None, None, ColumnSetting.DEFAULT_SORT, ColumnSetting.FIRST_SORT_DESC)

    html = render_table(videos, setup, RequestContext(url))
"""

from .error_handler import TableHelperError, ConfigurationError, ValidationError
from .query_builder import ItemQuery
from .helpers import (
    RequestContext,
    ParamNames,
    ResolvedQueryState,
    resolve_query_state,
    set_url_parameters,
    contains
)
from .template import (
    ColumnSetting,
    ElementPlacement,
    ElementAlignment,
    TableColumn,
    TableOptions,
    Table,
    render_table
)

__version__ = '1.0.0'

__all__ = [
    # Errors
    'TableHelperError',
    'ConfigurationError',
    'ValidationError',
    # Data source
    'ItemQuery',
    # Query state
    'RequestContext',
    'ParamNames',
    'ResolvedQueryState',
    'resolve_query_state',
    'set_url_parameters',
    'contains',
    # Configuration and rendering
    'ColumnSetting',
    'ElementPlacement',
    'ElementAlignment',
    'TableColumn',
    'TableOptions',
    'Table',
    'render_table',
]
