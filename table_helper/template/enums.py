"""
Enumerations used to configure tables.
"""

from enum import Enum


class ColumnSetting(Enum):
    """Special behaviour flags for a column."""
    DEFAULT_SORT = "default_sort"
    FIRST_SORT_DESC = "first_sort_desc"


class ElementPlacement(Enum):
    """Where the search panel or pager is rendered relative to the table."""
    TOP = "top"
    BOTTOM = "bottom"
    BOTH = "both"

    @property
    def at_top(self) -> bool:
        return self in (ElementPlacement.TOP, ElementPlacement.BOTH)

    @property
    def at_bottom(self) -> bool:
        return self in (ElementPlacement.BOTTOM, ElementPlacement.BOTH)


class ElementAlignment(Enum):
    """Horizontal alignment of the search panel or pager."""
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
