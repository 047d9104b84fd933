"""
Pagination helper utilities.

Pager math works on the filtered total (before skip/take), the page size
and the current offset, all taken from the resolved state. Values are not
bounds checked: a page size of 0 raises ZeroDivisionError and a small page
size over a large total yields one link per page.
"""
from typing import List, NamedTuple


class PageLink(NamedTuple):
    """One numbered pager link."""
    number: int     # 1-based label
    skip: int       # offset the link navigates to
    active: bool


def apply_pagination(query, state):
    """Skip ``page_skip`` items, then take ``page_size`` items."""
    return query.skip(state.page_skip).take(state.page_size)


def active_page_index(skip: int, take: int) -> int:
    """
    Zero-based index of the page containing the offset.

    Examples:
        >>> active_page_index(20, 10)
        2
        >>> active_page_index(0, 20)
        0
    """
    return skip // take


def last_page_skip(total: int, take: int) -> int:
    """
    Offset of the last page.

    Examples:
        >>> last_page_skip(25, 10)
        20
        >>> last_page_skip(20, 10)
        10
    """
    return (total // take - (1 if total % take == 0 else 0)) * take


def generate_page_links(total: int, take: int, skip: int) -> List[PageLink]:
    """
    Generate the numbered pager links.

    Pages ``0 .. total // take`` are candidates; a page is emitted only if it
    starts before ``total``, which drops the trailing empty page when total
    is an exact multiple of take.

    Args:
        total: Number of items after filtering
        take: Page size
        skip: Current offset

    Returns:
        List of PageLink

    Examples:
        >>> [link.number for link in generate_page_links(25, 20, 0)]
        [1, 2]
        >>> [link.number for link in generate_page_links(20, 10, 0)]
        [1, 2]
    """
    active = active_page_index(skip, take)
    links = []
    for page in range(total // take + 1):
        if page * take < total:
            links.append(PageLink(page + 1, page * take, page == active))
    return links
