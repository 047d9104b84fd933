"""
Data structures for table configuration.

Provides the column definition and the caller-configured table options.
Column behaviour is injected as plain callables (display, sort key, search,
cell attributes); there is no column class hierarchy.
"""

from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from table_helper import constants
from table_helper.error_handler import ConfigurationError
from .enums import ColumnSetting, ElementAlignment, ElementPlacement


def _default_search_term_criteria(term: Optional[str]) -> bool:
    """Search is applied when the term is a non-empty string."""
    return bool(term)


class TableColumn:
    """
    Represents one displayed column.

    Args:
        index: Zero-based position of the column; used in URLs instead of the
            name since names may not be URL safe
        name: Display name for the column header
        display_fn: Produces the cell content for an item. Values exposing
            ``__html__`` (e.g. ``markupsafe.Markup``) are emitted as raw
            markup, None as empty text, anything else is escaped
        sort_key: Optional key function; enables sorting on this column
        search_fn: Optional ``(item, term) -> bool`` predicate; enables
            searching on this column
        cell_attributes_fn: Optional function returning an attribute dict
            merged onto the ``<td>`` for an item
        settings: Iterable of ColumnSetting flags
    """

    def __init__(self, index: int, name: str, display_fn: Callable[[Any], Any],
                 sort_key: Optional[Callable[[Any], Any]] = None,
                 search_fn: Optional[Callable[[Any, str], bool]] = None,
                 cell_attributes_fn: Optional[Callable[[Any], Dict[str, Any]]] = None,
                 settings: Iterable[ColumnSetting] = ()):
        for label, fn in (('display_fn', display_fn), ('sort_key', sort_key),
                          ('search_fn', search_fn),
                          ('cell_attributes_fn', cell_attributes_fn)):
            if label == 'display_fn' and fn is None:
                raise ConfigurationError(f"Column '{name}' needs a display function")
            if fn is not None and not callable(fn):
                raise ConfigurationError(f"Column '{name}': {label} must be callable")

        settings = frozenset(settings)
        for setting in settings:
            if not isinstance(setting, ColumnSetting):
                raise ConfigurationError(
                    f"Column '{name}': unknown column setting {setting!r}"
                )

        self.index = index
        self.name = name
        self.display_fn = display_fn
        self.sort_key = sort_key
        self.search_fn = search_fn
        self.cell_attributes_fn = cell_attributes_fn
        self.settings = settings

    @property
    def sortable(self) -> bool:
        return self.sort_key is not None

    @property
    def searchable(self) -> bool:
        return self.search_fn is not None

    @property
    def is_default_sort(self) -> bool:
        return ColumnSetting.DEFAULT_SORT in self.settings

    @property
    def first_sort_desc(self) -> bool:
        return ColumnSetting.FIRST_SORT_DESC in self.settings

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index': self.index,
            'name': self.name,
            'sortable': self.sortable,
            'searchable': self.searchable,
            'settings': sorted(s.value for s in self.settings)
        }

    def __repr__(self) -> str:
        return f"TableColumn(index={self.index}, name={self.name!r})"


class TableOptions:
    """
    Caller-configured options for a table.

    Options are set up before rendering and only read during a render.
    Defaults match the values in ``table_helper.constants``; use
    ``TableOptions.from_env()`` to pick up environment configuration.
    """

    def __init__(self, **overrides):
        # Pagination
        self.page_size_options: Tuple[int, ...] = constants.DEFAULT_PAGE_SIZE_OPTIONS
        self.default_take = constants.DEFAULT_TAKE_ITEMS
        self.default_skip = constants.DEFAULT_SKIP_ITEMS
        self.pagination_placement = ElementPlacement.BOTTOM
        self.pagination_alignment = ElementAlignment.RIGHT
        self.first_page_text = constants.FIRST_PAGE_TEXT
        self.last_page_text = constants.LAST_PAGE_TEXT

        # Sorting
        self.ascending_character = constants.ASCENDING_CHARACTER
        self.descending_character = constants.DESCENDING_CHARACTER

        # Search
        self.search_placement = ElementPlacement.TOP
        self.search_alignment = ElementAlignment.RIGHT
        self.search_button_text = constants.SEARCH_BUTTON_TEXT
        self.search_clear_text = constants.SEARCH_CLEAR_TEXT
        self.search_term_criteria: Callable[[Optional[str]], bool] = _default_search_term_criteria

        # Rows and cells
        self.row_attributes_fn: Optional[Callable[[Any], Dict[str, Any]]] = None
        self.sanitize_cell_html = False

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise ConfigurationError(f"Unknown table option '{key}'")
            setattr(self, key, value)

    @classmethod
    def from_env(cls, environ=None, **overrides) -> 'TableOptions':
        """Build options from TABLE_* environment variables, then apply overrides."""
        from table_helper.config import load_table_defaults

        values = load_table_defaults(environ)
        values.update(overrides)
        return cls(**values)

    def copy(self, **overrides) -> 'TableOptions':
        """Return an independent copy with the given options replaced."""
        clone = TableOptions()
        clone.__dict__.update(self.__dict__)
        for key, value in overrides.items():
            if not hasattr(clone, key):
                raise ConfigurationError(f"Unknown table option '{key}'")
            setattr(clone, key, value)
        return clone

    def validate(self):
        """Raise ConfigurationError for options the renderer cannot use."""
        if not self.page_size_options:
            raise ConfigurationError("page_size_options must not be empty")
        for label in ('pagination_placement', 'search_placement'):
            if not isinstance(getattr(self, label), ElementPlacement):
                raise ConfigurationError(f"{label} must be an ElementPlacement")
        for label in ('pagination_alignment', 'search_alignment'):
            if not isinstance(getattr(self, label), ElementAlignment):
                raise ConfigurationError(f"{label} must be an ElementAlignment")
        if not callable(self.search_term_criteria):
            raise ConfigurationError("search_term_criteria must be callable")
        if self.row_attributes_fn is not None and not callable(self.row_attributes_fn):
            raise ConfigurationError("row_attributes_fn must be callable")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'page_size_options': list(self.page_size_options),
            'default_take': self.default_take,
            'default_skip': self.default_skip,
            'pagination_placement': self.pagination_placement.value,
            'pagination_alignment': self.pagination_alignment.value,
            'search_placement': self.search_placement.value,
            'search_alignment': self.search_alignment.value,
            'first_page_text': self.first_page_text,
            'last_page_text': self.last_page_text,
            'ascending_character': self.ascending_character,
            'descending_character': self.descending_character,
            'search_button_text': self.search_button_text,
            'search_clear_text': self.search_clear_text,
            'sanitize_cell_html': self.sanitize_cell_html
        }
