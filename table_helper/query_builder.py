"""
Query builder module for table data sources.
Provides a fluent, lazily evaluated query over any iterable of items.
"""
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, List, Tuple

QUERY_METHODS = ('where', 'materialize', 'count', 'order_by', 'skip', 'take', 'to_list')


class ItemQuery:
    """
    Fluent query over an iterable of items.

    Operations are recorded and only run when the query is iterated,
    counted or converted to a list. Every method returns a new query, so
    a query can be shared and extended without side effects.

    Example usage:
        rows = (ItemQuery(videos)
                .where(lambda v: v['rating'] == 'like')
                .order_by(lambda v: v['play_count'], descending=True)
                .skip(20)
                .take(10)
                .to_list())
    """

    def __init__(self, source: Iterable[Any],
                 operations: Tuple[Tuple[str, Any], ...] = ()):
        """
        Initialize query over a source.

        Args:
            source: Any iterable; re-iterated on every evaluation unless the
                query is materialized
            operations: Recorded operations (internal)
        """
        self._source = source
        self._operations = operations

    def _extend(self, operation: str, argument: Any) -> 'ItemQuery':
        return ItemQuery(self._source, self._operations + ((operation, argument),))

    def where(self, predicate: Callable[[Any], bool]) -> 'ItemQuery':
        """
        Keep items for which the predicate is true.

        Args:
            predicate: Function of one item

        Returns:
            New query
        """
        return self._extend('where', predicate)

    def order_by(self, key: Callable[[Any], Any], descending: bool = False) -> 'ItemQuery':
        """
        Stable sort by a key function.

        Args:
            key: Function returning a comparable value for an item
            descending: Reverse the order

        Returns:
            New query
        """
        return self._extend('order_by', (key, descending))

    def skip(self, count: int) -> 'ItemQuery':
        """
        Bypass the first ``count`` items. Non-positive counts skip nothing.

        Returns:
            New query
        """
        return self._extend('skip', count)

    def take(self, count: int) -> 'ItemQuery':
        """
        Keep at most ``count`` items. Non-positive counts keep nothing.

        Returns:
            New query
        """
        return self._extend('take', count)

    def materialize(self) -> 'ItemQuery':
        """
        Evaluate the query once and return a query over the cached results.

        Later counts and iterations of the returned query do not touch the
        original source again.
        """
        return ItemQuery(self.to_list())

    def __iter__(self) -> Iterator[Any]:
        items: Iterable[Any] = self._source
        for operation, argument in self._operations:
            if operation == 'where':
                items = filter(argument, items)
            elif operation == 'order_by':
                key, descending = argument
                items = sorted(items, key=key, reverse=descending)
            elif operation == 'skip':
                items = islice(items, max(argument, 0), None)
            elif operation == 'take':
                items = islice(items, max(argument, 0))
        return iter(items)

    def to_list(self) -> List[Any]:
        """Execute the query and return all items."""
        return list(self)

    def count(self) -> int:
        """Execute the query and return the number of items."""
        if not self._operations and hasattr(self._source, '__len__'):
            return len(self._source)
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        steps = ', '.join(op for op, _ in self._operations) or 'source'
        return f"ItemQuery({steps})"


def as_query(items) -> 'ItemQuery':
    """
    Wrap a data source for the renderer.

    ItemQuery instances and objects providing the full fluent surface
    (see QUERY_METHODS) are used as they are; any other iterable is wrapped
    in an ItemQuery.
    """
    if isinstance(items, ItemQuery):
        return items
    if all(callable(getattr(items, name, None)) for name in QUERY_METHODS):
        return items
    return ItemQuery(items)
