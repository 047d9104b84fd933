"""
Request helpers for building links from the current request.

RequestContext is the only view of the request the renderer gets. It is
built once per render (from Flask via ``table_helper.flask_ext`` or directly
from a URL) and passed explicitly to every step that needs it.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from werkzeug.datastructures import MultiDict


class RequestContext:
    """
    Framework-agnostic view of the current request.

    Args:
        url: Full display URL of the current request, including the query
            string (e.g. ``http://localhost/items?take=10``)
    """

    def __init__(self, url: str):
        parts = urlsplit(url)
        self.url = url
        self.path = parts.path or '/'
        self.query_string = parts.query
        self._parts = parts
        self.args = MultiDict(parse_qsl(parts.query, keep_blank_values=True))

    @classmethod
    def from_parts(cls, path: str, query_string: str = '',
                   host_url: str = '') -> 'RequestContext':
        """
        Build a context from path and query string.

        Args:
            path: Request path (e.g. '/items')
            query_string: Raw query string without the leading '?'
            host_url: Optional scheme and host (e.g. 'http://localhost')
        """
        url = host_url.rstrip('/') + path
        if query_string:
            url = f"{url}?{query_string}"
        return cls(url)

    def query_pairs(self) -> List[Tuple[str, str]]:
        """Return the current query string as an ordered list of pairs."""
        return parse_qsl(self.query_string, keep_blank_values=True)

    def build_url(self, query_string: str) -> str:
        """Rebuild the current URL with the given query string."""
        return urlunsplit((self._parts.scheme, self._parts.netloc, self.path,
                           query_string, ''))

    def __repr__(self) -> str:
        return f"RequestContext({self.url!r})"


def overlay_query(pairs: List[Tuple[str, str]],
                  parameters: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Set or replace named keys in a list of query pairs.

    The first occurrence of a key keeps its position and takes the new value,
    later duplicates are dropped, and keys not present yet are appended in
    the order given.

    Examples:
        >>> overlay_query([('a', '1'), ('skip', '20')], {'skip': 0})
        [('a', '1'), ('skip', '0')]
        >>> overlay_query([('a', '1')], {'take': 50})
        [('a', '1'), ('take', '50')]
    """
    overrides: Dict[str, str] = {key: str(value) for key, value in parameters.items()}
    result = []
    seen = set()
    for key, value in pairs:
        if key in overrides:
            if key in seen:
                continue
            seen.add(key)
            result.append((key, overrides[key]))
        else:
            result.append((key, value))
    for key, value in overrides.items():
        if key not in seen:
            result.append((key, value))
    return result


def set_url_parameters(request_context: RequestContext,
                       parameters: Optional[Mapping[str, Any]] = None) -> str:
    """
    Build a link to the current URL with some query parameters overridden.

    Every other current query parameter is preserved.

    Args:
        request_context: The current request
        parameters: Parameters to set or replace

    Returns:
        Complete URL

    Examples:
        >>> ctx = RequestContext('http://localhost/items?sortBy=1&skip=20')
        >>> set_url_parameters(ctx, {'skip': 0})
        'http://localhost/items?sortBy=1&skip=0'
    """
    pairs = overlay_query(request_context.query_pairs(), parameters or {})
    return request_context.build_url(urlencode(pairs))


def strip_query(request_context: RequestContext) -> str:
    """Return the current URL without any query parameters."""
    return request_context.build_url('')
