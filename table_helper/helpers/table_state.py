"""
Query state resolution.

Turns the current request's query parameters into a ResolvedQueryState:
search term and column, sort column and direction, page size and offset.
Invalid or missing parameters fall back to configured defaults; nothing in
here raises on bad input.
"""
from typing import Any, Dict, Mapping, Optional, Sequence

from table_helper import constants
from table_helper.logging_helper import LoggingHelper, LogType, sanitize_log_value
from table_helper.helpers.validation_helpers import parse_int_param

logger = LoggingHelper.get_logger(LogType.QUERY)


class ParamNames:
    """
    Query parameter names for one table.

    All names are computed once from the table id and never change
    afterwards. With an id, every name is prefixed with ``"<id>-"`` so that
    several tables can live on one page.

    Args:
        table_id: Optional id unique to the table on its page; must be URL safe
    """

    __slots__ = ('prefix', 'search_by', 'search_col', 'sort_by', 'sort_order',
                 'take', 'skip')

    def __init__(self, table_id: Optional[str] = None):
        prefix = f"{table_id}-" if table_id else ''
        set_ = object.__setattr__
        set_(self, 'prefix', prefix)
        set_(self, 'search_by', prefix + constants.SEARCH_BY_PARAM)
        set_(self, 'search_col', prefix + constants.SEARCH_COL_PARAM)
        set_(self, 'sort_by', prefix + constants.SORT_BY_PARAM)
        set_(self, 'sort_order', prefix + constants.SORT_ORDER_PARAM)
        set_(self, 'take', prefix + constants.PAGE_TAKE_PARAM)
        set_(self, 'skip', prefix + constants.PAGE_SKIP_PARAM)

    def __setattr__(self, name, value):
        raise AttributeError("ParamNames is immutable")

    def __repr__(self) -> str:
        return f"ParamNames(prefix={self.prefix!r})"


class ResolvedQueryState:
    """
    View state derived from one request. Immutable.

    Attributes:
        search_term: Active search term, or None when search is inactive
        search_column_index: Column searched, or None when search is inactive
        sort_column_index: Column sorted by; None only for tables without columns
        sort_ascending: Sort direction
        sort_from_url: Whether the sort column came from the query string
        page_size: Items per page (``take``)
        page_skip: Items skipped (``skip``)
    """

    __slots__ = ('search_term', 'search_column_index', 'sort_column_index',
                 'sort_ascending', 'sort_from_url', 'page_size', 'page_skip')

    def __init__(self, search_term: Optional[str], search_column_index: Optional[int],
                 sort_column_index: Optional[int], sort_ascending: bool,
                 page_size: int, page_skip: int, sort_from_url: bool = False):
        values = {
            'search_term': search_term,
            'search_column_index': search_column_index,
            'sort_column_index': sort_column_index,
            'sort_ascending': sort_ascending,
            'sort_from_url': sort_from_url,
            'page_size': page_size,
            'page_skip': page_skip,
        }
        for key, value in values.items():
            object.__setattr__(self, key, value)

    def __setattr__(self, name, value):
        raise AttributeError("ResolvedQueryState is immutable")

    @property
    def search_active(self) -> bool:
        return self.search_column_index is not None

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in self.__slots__}

    def __eq__(self, other):
        if not isinstance(other, ResolvedQueryState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        fields = ', '.join(f"{key}={getattr(self, key)!r}" for key in self.__slots__)
        return f"ResolvedQueryState({fields})"


def find_default_sort_column(columns: Sequence):
    """Return the DEFAULT_SORT column, or the first column, or None."""
    for column in columns:
        if column.is_default_sort:
            return column
    return columns[0] if columns else None


def _find_column(columns: Sequence, index: Optional[int]):
    if index is None or index < 0 or index >= len(columns):
        return None
    return columns[index]


def resolve_search(request_args: Mapping, columns: Sequence, options,
                   param_names: ParamNames):
    """
    Resolve the active search.

    Returns:
        Tuple of (search_term, search_column_index); both None when search
        is not active for this request
    """
    if param_names.search_by not in request_args:
        return None, None

    term = request_args.get(param_names.search_by)
    if not options.search_term_criteria(term):
        return None, None

    index = parse_int_param(request_args, param_names.search_col)
    column = _find_column(columns, index)
    if column is None or not column.searchable:
        LoggingHelper.log_query_value(
            param_names.search_col,
            request_args.get(param_names.search_col, ''),
            'no searchable column with that index',
        )
        return None, None

    return term, column.index


def resolve_sort(request_args: Mapping, columns: Sequence, param_names: ParamNames):
    """
    Resolve the sort column and direction.

    The default column is the DEFAULT_SORT column or the first one. When the
    sort column parameter is present, a valid sortable index overrides the
    default and the direction is descending only for ``desc``. Without it,
    the direction comes from the default column's FIRST_SORT_DESC flag.

    Returns:
        Tuple of (sort_column_index, sort_ascending, sort_from_url)
    """
    column = find_default_sort_column(columns)
    if column is None:
        return None, True, False

    if param_names.sort_by not in request_args:
        return column.index, not column.first_sort_desc, False

    index = parse_int_param(request_args, param_names.sort_by)
    url_column = _find_column(columns, index)
    if url_column is not None and url_column.sortable:
        column = url_column
    elif index is not None:
        LoggingHelper.log_query_value(param_names.sort_by, index,
                                      'no sortable column with that index')

    ascending = request_args.get(param_names.sort_order) != constants.SORT_ORDER_DESC
    return column.index, ascending, True


def resolve_pagination(request_args: Mapping, options, param_names: ParamNames):
    """
    Resolve page size and offset. Values are not bounds checked.

    Returns:
        Tuple of (page_size, page_skip)
    """
    take = parse_int_param(request_args, param_names.take)
    if take is None:
        take = options.default_take

    skip = parse_int_param(request_args, param_names.skip)
    if skip is None:
        skip = options.default_skip

    return take, skip


def resolve_query_state(request_args: Mapping, columns: Sequence, options,
                        param_names: Optional[ParamNames] = None) -> ResolvedQueryState:
    """
    Resolve the full view state for one request.

    Args:
        request_args: Query parameters; a MultiDict or plain mapping whose
            ``get`` returns the first value for a key
        columns: Ordered TableColumn list (index == position)
        options: TableOptions for the table
        param_names: Parameter names for the table; unprefixed when omitted

    Returns:
        ResolvedQueryState
    """
    param_names = param_names or ParamNames()

    search_term, search_column_index = resolve_search(request_args, columns, options,
                                                      param_names)
    sort_column_index, sort_ascending, sort_from_url = resolve_sort(request_args, columns,
                                                                    param_names)
    page_size, page_skip = resolve_pagination(request_args, options, param_names)

    state = ResolvedQueryState(
        search_term=search_term,
        search_column_index=search_column_index,
        sort_column_index=sort_column_index,
        sort_ascending=sort_ascending,
        sort_from_url=sort_from_url,
        page_size=page_size,
        page_skip=page_skip,
    )
    logger.debug(
        "Resolved table state: search=%s col=%s sort=%s %s take=%s skip=%s",
        sanitize_log_value(search_term) if search_term is not None else None,
        search_column_index,
        sort_column_index,
        'asc' if sort_ascending else 'desc',
        page_size,
        page_skip,
    )
    return state
