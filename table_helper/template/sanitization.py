"""
HTML sanitization for raw cell markup.

Used when ``TableOptions.sanitize_cell_html`` is enabled: markup returned by
display functions is cleaned with bleach before it is emitted.
"""

import bleach
from markupsafe import Markup

ALLOWED_TAGS = ['a', 'span', 'strong', 'em', 'b', 'i', 'br', 'small', 'code', 'pre']
ALLOWED_ATTRIBUTES = {
    'a': ['href', 'target', 'rel', 'title'],
    'span': ['class', 'title', 'style'],
    '*': ['class', 'title']
}
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']


def sanitize_html(html_content) -> Markup:
    """
    Sanitize HTML content to prevent XSS attacks.

    Only safe tags and attributes are kept; disallowed tags are stripped
    (their text content is kept, script bodies included as text).

    Args:
        html_content: Raw HTML content (str or Markup)

    Returns:
        Sanitized markup safe for rendering
    """
    if not html_content:
        return Markup('')

    cleaned = bleach.clean(
        str(html_content),
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True
    )
    return Markup(cleaned)
