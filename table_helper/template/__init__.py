"""
Template helpers for table rendering.

Re-exports the column/option data structures, the markup formatters and the
renderer.
"""

# Enums
from .enums import (
    ColumnSetting,
    ElementPlacement,
    ElementAlignment
)

# Data structures
from .data_structures import (
    TableColumn,
    TableOptions
)

# Formatters
from .formatters import (
    alignment_class,
    format_attributes,
    format_cell_content,
    format_option,
    format_page_link,
    merge_attributes,
    render_tag
)

# Sanitization
from .sanitization import (
    sanitize_html
)

# Rendering
from .rendering import (
    Table,
    render_table
)

__all__ = [
    # Enums
    'ColumnSetting',
    'ElementPlacement',
    'ElementAlignment',
    # Data structures
    'TableColumn',
    'TableOptions',
    # Formatters
    'alignment_class',
    'format_attributes',
    'format_cell_content',
    'format_option',
    'format_page_link',
    'merge_attributes',
    'render_tag',
    # Sanitization
    'sanitize_html',
    # Rendering
    'Table',
    'render_table',
]
