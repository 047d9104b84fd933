"""
Helper functions for applying the resolved search to a data source.
"""
from typing import Any, Callable, Optional


def apply_search(query, columns, state):
    """
    Filter the query with the active column's search predicate.

    Args:
        query: ItemQuery (or compatible) to filter
        columns: Ordered TableColumn list
        state: ResolvedQueryState

    Returns:
        The filtered query, or the query unchanged when search is inactive
    """
    if not state.search_active:
        return query

    column = columns[state.search_column_index]
    term = state.search_term
    search_fn = column.search_fn
    return query.where(lambda item: search_fn(item, term))


def contains(selector: Callable[[Any], Any], case_sensitive: bool = True):
    """
    Build a substring search predicate for a column.

    Args:
        selector: Function returning the text to search in for an item
        case_sensitive: Whether matching is case-sensitive

    Returns:
        ``(item, term) -> bool`` predicate. None values never match.

    Example:
        table.add_col('Title', lambda v: v['title'],
                      search_fn=contains(lambda v: v['title'], case_sensitive=False))
    """
    def predicate(item, term: Optional[str]) -> bool:
        value = selector(item)
        if value is None or term is None:
            return False
        value = str(value)
        if case_sensitive:
            return term in value
        return term.casefold() in value.casefold()

    return predicate
