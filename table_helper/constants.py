"""
Common constants used across the table helper.
"""

# Values that are considered "false" for boolean environment variables
# Include empty string to handle unset or blank environment variables
FALSE_VALUES = {'false', '0', 'no', 'off', ''}

# Query string parameter base names (optionally prefixed with "<table id>-")
SEARCH_BY_PARAM = 'searchBy'
SEARCH_COL_PARAM = 'searchCol'
SORT_BY_PARAM = 'sortBy'
SORT_ORDER_PARAM = 'sortOrder'
PAGE_TAKE_PARAM = 'take'
PAGE_SKIP_PARAM = 'skip'

# sortOrder values
SORT_ORDER_ASC = 'asc'
SORT_ORDER_DESC = 'desc'

# Table option defaults
DEFAULT_PAGE_SIZE_OPTIONS = (10, 20, 50, 100)
DEFAULT_TAKE_ITEMS = 20
DEFAULT_SKIP_ITEMS = 0

FIRST_PAGE_TEXT = '<<'
LAST_PAGE_TEXT = '>>'
ASCENDING_CHARACTER = '▲'
DESCENDING_CHARACTER = '▼'
SEARCH_BUTTON_TEXT = '🔍'
SEARCH_CLEAR_TEXT = '×'

# Inline navigation for the page size selector
PAGE_SIZE_ONCHANGE = 'window.location=this.value;'
