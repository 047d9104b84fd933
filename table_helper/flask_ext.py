"""
Flask integration.

Usage:
    from flask import Flask
    from table_helper.flask_ext import init_app

    app = Flask(__name__)
    init_app(app)

Then, in a view:
    return render_template('videos.html', videos=videos)

and in the template:
    {{ table(videos, setup_video_columns, table_id='videos') }}

or directly from Python with ``render_flask_table(...)``.
"""
from typing import Any, Callable, Mapping, Optional

from flask import current_app, request as flask_request
from markupsafe import Markup

from table_helper.config import CONFIG_KEYS, load_table_defaults
from table_helper.helpers.request_helpers import RequestContext
from table_helper.logging_helper import LoggingHelper, LogType
from table_helper.template.data_structures import TableOptions
from table_helper.template.rendering import render_table

logger = LoggingHelper.get_logger(LogType.MAIN)

EXTENSION_KEY = 'table_helper'


def request_context_from_flask(request=None) -> RequestContext:
    """
    Build a RequestContext from a Flask request (the current one by default).

    ``request.url`` already carries scheme, host, path and query string as
    the client sees them (including ProxyFix adjustments).
    """
    request = request if request is not None else flask_request
    return RequestContext(request.url)


def _config_value_as_str(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ','.join(str(part) for part in value)
    if hasattr(value, 'value'):
        # ElementPlacement and other enums
        return str(value.value)
    return str(value)


def _options_from_app_config(config: Mapping[str, Any]) -> TableOptions:
    """Environment defaults, overridden by TABLE_* keys in app.config."""
    values = load_table_defaults()
    app_values = load_table_defaults(
        {key: _config_value_as_str(config[key]) for key in CONFIG_KEYS if key in config}
    )
    values.update(app_values)
    return TableOptions(**values)


def get_default_options() -> TableOptions:
    """Default TableOptions of the current app (plain defaults without init_app)."""
    options = current_app.extensions.get(EXTENSION_KEY)
    return options if options is not None else TableOptions()


def render_flask_table(items, setup: Callable, table_id: Optional[str] = None,
                       html_attributes: Optional[Mapping[str, Any]] = None,
                       options: Optional[TableOptions] = None) -> Markup:
    """
    Render a table for the current Flask request.

    Args:
        items: Items to show in the table
        setup: Called with the Table to add columns and adjust options
        table_id: Optional id unique to this table for this page
        html_attributes: Attributes merged onto the ``<table>`` element
        options: Base options; the app defaults when omitted

    Returns:
        Markup, safe to return from a view or embed in a template
    """
    return render_table(
        items,
        setup,
        request_context_from_flask(),
        table_id=table_id,
        html_attributes=html_attributes,
        options=options if options is not None else get_default_options(),
    )


def init_app(app):
    """
    Register the table helper with a Flask app.

    Stores default TableOptions under ``app.extensions['table_helper']`` and
    adds a ``table`` global to the Jinja environment.
    """
    app.extensions[EXTENSION_KEY] = _options_from_app_config(app.config)
    app.add_template_global(render_flask_table, name='table')
    logger.debug("Table helper registered on app %s", app.name)
    return app
