"""
Markup building functions for the table renderer.

Everything returned here is ``markupsafe.Markup``; text and attribute values
are escaped on the way in.
"""

from typing import Any, Iterable, Mapping, Optional

from markupsafe import Markup, escape

from .enums import ElementAlignment
from .sanitization import sanitize_html

ALIGNMENT_CLASSES = {
    ElementAlignment.LEFT: 'justify-content-md-start ml-md-1',
    ElementAlignment.RIGHT: 'justify-content-md-end mr-md-1',
    ElementAlignment.CENTER: 'justify-content-md-center',
}

VOID_TAGS = {'input', 'br', 'img', 'hr', 'meta', 'link'}


def alignment_class(alignment: ElementAlignment) -> str:
    """CSS classes for an alignment (right aligned for unknown values)."""
    return ALIGNMENT_CLASSES.get(alignment, ALIGNMENT_CLASSES[ElementAlignment.RIGHT])


def merge_attributes(base: Mapping[str, Any],
                     extra: Optional[Mapping[str, Any]]) -> dict:
    """
    Merge caller attributes onto element attributes.

    ``class`` values are appended to the existing classes; any other
    attribute from ``extra`` replaces the base value. Attributes whose value
    is None are dropped.

    Examples:
        >>> merge_attributes({'class': 'table'}, {'class': 'striped', 'id': 't1'})
        {'class': 'table striped', 'id': 't1'}
    """
    merged = {key: value for key, value in base.items() if value is not None}
    for key, value in (extra or {}).items():
        if value is None:
            continue
        if key == 'class' and merged.get('class'):
            merged['class'] = f"{merged['class']} {value}"
        else:
            merged[key] = value
    return merged


def format_attributes(attributes: Optional[Mapping[str, Any]]) -> Markup:
    """
    Render an attribute mapping as ``' key="value"'`` pairs.

    True renders a bare attribute, False and None are skipped.
    """
    parts = []
    for key, value in (attributes or {}).items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(Markup(' {}').format(key))
        else:
            parts.append(Markup(' {}="{}"').format(key, value))
    return Markup('').join(parts)


def render_tag(tag: str, content: Any = None,
               attributes: Optional[Mapping[str, Any]] = None) -> Markup:
    """
    Render one element.

    Args:
        tag: Element name
        content: Inner content; Markup is kept as is, anything else escaped
        attributes: Attribute mapping

    Returns:
        Markup for the element
    """
    attrs = format_attributes(attributes)
    if tag in VOID_TAGS:
        return Markup('<{}{}>').format(Markup(tag), attrs)
    inner = escape(content) if content is not None else Markup('')
    return Markup('<{0}{1}>{2}</{0}>').format(Markup(tag), attrs, inner)


def join_markup(parts: Iterable[Any]) -> Markup:
    """Concatenate markup fragments, escaping plain strings."""
    return Markup('').join(parts)


def format_cell_content(value: Any, sanitize: bool = False) -> Markup:
    """
    Convert a display function result to cell content.

    Values exposing ``__html__`` are raw markup (optionally sanitized), None
    is empty text, anything else is converted to text and escaped.
    """
    if value is None:
        return Markup('')
    if hasattr(value, '__html__'):
        return sanitize_html(value) if sanitize else Markup(value)
    return escape(str(value))


def format_page_link(text: str, url: str, active: bool = False) -> Markup:
    """Render one pager ``<li>`` with its link."""
    css_class = 'page-item active' if active else 'page-item'
    link = render_tag('a', text, {'class': 'page-link', 'href': url})
    return render_tag('li', link, {'class': css_class})


def format_option(text: Any, value: Any, selected: bool = False) -> Markup:
    """Render one ``<option>``."""
    return render_tag('option', str(text),
                      {'value': value, 'selected': 'selected' if selected else None})
