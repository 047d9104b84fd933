"""
Sorting helpers: apply the resolved sort and compute header sort links.
"""
from table_helper.constants import SORT_ORDER_ASC, SORT_ORDER_DESC


def apply_sort(query, columns, state):
    """
    Order the query by the active sort column.

    Sorting is skipped for tables without columns and when the active column
    has no sort key. Values the key function returns must be comparable with
    each other; a TypeError from mixed types surfaces here.

    Args:
        query: ItemQuery (or compatible) to order
        columns: Ordered TableColumn list
        state: ResolvedQueryState

    Returns:
        The ordered query
    """
    if not columns or state.sort_column_index is None:
        return query

    column = columns[state.sort_column_index]
    if not column.sortable:
        return query

    return query.order_by(column.sort_key, descending=not state.sort_ascending)


def is_active_sort_column(column, state) -> bool:
    return state.sort_column_index == column.index


def link_sort_order(column, state) -> str:
    """
    Direction a header link should request.

    The active column toggles the current direction. Any other column starts
    ascending, or descending when it has FIRST_SORT_DESC.
    """
    if is_active_sort_column(column, state):
        return SORT_ORDER_DESC if state.sort_ascending else SORT_ORDER_ASC
    return SORT_ORDER_DESC if column.first_sort_desc else SORT_ORDER_ASC


def sort_arrow(column, state, options) -> str:
    """Arrow glyph for the active column's current direction; '' otherwise."""
    if not is_active_sort_column(column, state):
        return ''
    return options.ascending_character if state.sort_ascending else options.descending_character
