"""
Rendering functions for sortable, searchable, paginated tables.

The Table class collects column definitions and options, then renders in
one pass: resolve the query state, filter, count, sort, paginate,
materialize once, and emit markup. The resolved state and request context
are passed explicitly to every step.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from markupsafe import Markup

from table_helper.error_handler import ConfigurationError, log_and_reraise
from table_helper.helpers.pagination_helpers import (
    apply_pagination,
    generate_page_links,
    last_page_skip,
)
from table_helper.helpers.request_helpers import (
    RequestContext,
    set_url_parameters,
    strip_query,
)
from table_helper.helpers.search_helpers import apply_search
from table_helper.helpers.sorting_helpers import apply_sort, link_sort_order, sort_arrow
from table_helper.helpers.table_state import ParamNames, ResolvedQueryState, resolve_query_state
from table_helper.logging_helper import LoggingHelper, LogType
from table_helper.query_builder import as_query
from table_helper.constants import PAGE_SIZE_ONCHANGE
from .data_structures import TableColumn, TableOptions
from .enums import ColumnSetting
from .formatters import (
    alignment_class,
    format_cell_content,
    format_option,
    format_page_link,
    join_markup,
    merge_attributes,
    render_tag,
)

logger = LoggingHelper.get_logger(LogType.MAIN)


class Table:
    """
    A table bound to one data source and one request.

    Args:
        items: Data source; any iterable, an ItemQuery, or an object with the
            same fluent query surface
        request_context: The current request
        table_id: Optional id unique to this table on the page; must be URL
            safe. Prefixes every query parameter name
        html_attributes: Attributes merged onto the ``<table>`` element
        options: TableOptions; defaults are used when omitted
    """

    def __init__(self, items, request_context: RequestContext,
                 table_id: Optional[str] = None,
                 html_attributes: Optional[Mapping[str, Any]] = None,
                 options: Optional[TableOptions] = None):
        self.items = items
        self.request_context = request_context
        self.table_id = table_id
        self.html_attributes = dict(html_attributes or {})
        self.options = options.copy() if options is not None else TableOptions()
        self.param_names = ParamNames(table_id)
        self.columns: List[TableColumn] = []
        self._state: Optional[ResolvedQueryState] = None

    # =============================================================================
    # Configuration
    # =============================================================================

    def add_col(self, name: str, display_fn: Callable[[Any], Any],
                sort_key: Optional[Callable[[Any], Any]] = None,
                search_fn: Optional[Callable[[Any, str], bool]] = None,
                cell_attributes_fn: Optional[Callable[[Any], Dict[str, Any]]] = None,
                *settings: ColumnSetting) -> TableColumn:
        """
        Add a column to the table.

        Args:
            name: Column header text
            display_fn: Produces the cell content for an item
            sort_key: Optional key function enabling sorting on the column
            search_fn: Optional ``(item, term) -> bool`` enabling search on
                the column; see ``search_helpers.contains``
            cell_attributes_fn: Optional function giving ``<td>`` attributes
            *settings: ColumnSetting flags

        Returns:
            The new TableColumn

        Raises:
            ConfigurationError: For a second DEFAULT_SORT column or
                non-callable functions
        """
        column = TableColumn(
            index=len(self.columns),
            name=name,
            display_fn=display_fn,
            sort_key=sort_key,
            search_fn=search_fn,
            cell_attributes_fn=cell_attributes_fn,
            settings=settings,
        )
        if column.is_default_sort and any(c.is_default_sort for c in self.columns):
            raise ConfigurationError(
                f"Column '{name}' cannot be the default sort: "
                f"another column already is"
            )
        self.columns.append(column)
        return column

    def add_column(self, name: str, display_fn: Callable[[Any], Any], *,
                   sort_key=None, search_fn=None, cell_attributes_fn=None,
                   settings=()) -> TableColumn:
        """Keyword-only variant of add_col."""
        return self.add_col(name, display_fn, sort_key, search_fn,
                            cell_attributes_fn, *settings)

    # =============================================================================
    # State
    # =============================================================================

    @property
    def state(self) -> ResolvedQueryState:
        """Query state for the current request; resolved on first access."""
        if self._state is None:
            self._state = resolve_query_state(self.request_context.args, self.columns,
                                              self.options, self.param_names)
        return self._state

    @property
    def search_term(self) -> Optional[str]:
        """The active search term, or None when search is not applied."""
        return self.state.search_term

    # =============================================================================
    # Rendering
    # =============================================================================

    def render(self) -> Markup:
        """
        Render the table with its search panel and pager.

        Returns:
            Markup for the container ``<div>``
        """
        self.options.validate()
        # Columns are final now; resolve against them
        self._state = None
        state = self.state
        ctx = self.request_context

        try:
            query = apply_search(as_query(self.items), self.columns, state)
            # Pager total is counted after filtering and before pagination
            query = query.materialize()
            total = query.count()
            query = apply_pagination(apply_sort(query, self.columns, state), state)
            items = query.to_list()
            body = self._render_body(items)
            pagination = self._render_pagination(total, state, ctx)
        except Exception as e:
            log_and_reraise(e, "Failed to render table")

        search_panel = self._render_search_panel(state, ctx)

        table_attributes = merge_attributes({'class': 'table'}, self.html_attributes)
        table = render_tag('table', join_markup([self._render_head(state, ctx), body]),
                           table_attributes)

        opts = self.options
        parts = []
        if search_panel is not None and opts.search_placement.at_top:
            parts.append(search_panel)
        if pagination is not None and opts.pagination_placement.at_top:
            parts.append(pagination)
        parts.append(table)
        if pagination is not None and opts.pagination_placement.at_bottom:
            parts.append(pagination)
        if search_panel is not None and opts.search_placement.at_bottom:
            parts.append(search_panel)

        logger.debug(f"Rendered table {self.table_id or '-'}: {len(items)} of {total} rows")
        return render_tag('div', join_markup(parts))

    def _render_body(self, items: List[Any]) -> Markup:
        row_attributes_fn = self.options.row_attributes_fn
        sanitize = self.options.sanitize_cell_html
        rows = []
        for item in items:
            cells = []
            for column in self.columns:
                attributes = column.cell_attributes_fn(item) if column.cell_attributes_fn else None
                content = format_cell_content(column.display_fn(item), sanitize)
                cells.append(render_tag('td', content, attributes))
            row_attributes = row_attributes_fn(item) if row_attributes_fn else None
            rows.append(render_tag('tr', join_markup(cells), row_attributes))
        return render_tag('tbody', join_markup(rows))

    def _render_head(self, state: ResolvedQueryState, ctx: RequestContext) -> Markup:
        names = self.param_names
        headings = []
        for column in self.columns:
            if not column.sortable:
                headings.append(render_tag('th', column.name))
                continue

            url = set_url_parameters(ctx, {
                names.sort_by: column.index,
                names.sort_order: link_sort_order(column, state),
            })
            label = Markup("{}{}").format(column.name, sort_arrow(column, state, self.options))
            headings.append(render_tag('th', render_tag('a', label, {'href': url})))

        return render_tag('thead', render_tag('tr', join_markup(headings)))

    def _render_search_panel(self, state: ResolvedQueryState,
                             ctx: RequestContext) -> Optional[Markup]:
        searchable = [column for column in self.columns if column.searchable]
        if not searchable:
            return None

        opts = self.options
        names = self.param_names

        # Keep the rest of the page state; a new search starts at the first page
        own_keys = {names.search_by, names.search_col, names.skip}
        hidden = [
            render_tag('input', attributes={'type': 'hidden', 'name': key, 'value': value})
            for key, value in ctx.query_pairs() if key not in own_keys
        ]

        options = [
            format_option(column.name, column.index,
                          selected=column.index == state.search_column_index)
            for column in searchable
        ]
        selector = render_tag('select', join_markup(options),
                              {'class': 'form-control', 'name': names.search_col})

        term_input = render_tag('input', attributes={
            'class': 'form-control',
            'type': 'text',
            'value': state.search_term or '',
            'name': names.search_by,
        })
        clear_button = render_tag('input', attributes={
            'class': 'btn btn-warning',
            'type': 'reset',
            'value': opts.search_clear_text,
        })
        search_button = render_tag('button', opts.search_button_text,
                                   {'class': 'btn btn-primary', 'type': 'submit'})

        buttons = render_tag('div', join_markup([clear_button, search_button]),
                             {'class': 'input-group-append'})
        field_group = render_tag('div', join_markup([term_input, buttons]),
                                 {'class': 'input-group'})

        panel = render_tag('div', join_markup([
            render_tag('div', selector, {'class': 'col-md-auto'}),
            render_tag('div', field_group, {'class': 'col-md-auto'}),
        ]), {'class': f"row {alignment_class(opts.search_alignment)}"})

        return render_tag('form', join_markup(hidden + [panel]), {
            'class': 'mb-2',
            'method': 'GET',
            'action': strip_query(ctx),
        })

    def _render_pagination(self, total: int, state: ResolvedQueryState,
                           ctx: RequestContext) -> Optional[Markup]:
        if total == 0:
            return None

        opts = self.options
        names = self.param_names
        take = state.page_size
        alignment = alignment_class(opts.pagination_alignment)

        size_options = [
            format_option(size, set_url_parameters(ctx, {names.take: size}),
                          selected=size == take)
            for size in opts.page_size_options
        ]
        size_selector = render_tag('select', join_markup(size_options), {
            'class': 'form-control d-inline',
            'onchange': PAGE_SIZE_ONCHANGE,
        })

        links = [format_page_link(opts.first_page_text,
                                  set_url_parameters(ctx, {names.skip: 0}))]
        for page in generate_page_links(total, take, state.page_skip):
            links.append(format_page_link(str(page.number),
                                          set_url_parameters(ctx, {names.skip: page.skip}),
                                          page.active))
        links.append(format_page_link(opts.last_page_text,
                                      set_url_parameters(ctx, {names.skip: last_page_skip(total, take)})))

        page_list = render_tag('ul', join_markup(links), {'class': f"pagination {alignment}"})

        return render_tag('div', join_markup([
            render_tag('div', size_selector, {'class': 'col-md-auto'}),
            render_tag('div', render_tag('nav', page_list), {'class': 'col-md-auto'}),
        ]), {'class': f"row {alignment}"})


def render_table(items, setup: Callable[[Table], Any],
                 request_context: RequestContext,
                 table_id: Optional[str] = None,
                 html_attributes: Optional[Mapping[str, Any]] = None,
                 options: Optional[TableOptions] = None) -> Markup:
    """
    Create an HTML table from the items provided.

    Args:
        items: Items to show in the table
        setup: Called with the Table to add columns and adjust options
        request_context: The current request
        table_id: Optional id unique to this table for this page; must be URL safe
        html_attributes: Attributes merged onto the ``<table>`` element
        options: Base TableOptions; ``setup`` may change a copy of them

    Returns:
        Markup for the whole table block

    Example:
        html = render_table(
            videos,
            lambda t: (t.add_col('Title', lambda v: v['title'], lambda v: v['title']),
                       t.add_col('Plays', lambda v: v['plays'], lambda v: v['plays'])),
            RequestContext(request.url),
        )
    """
    table = Table(items, request_context, table_id, html_attributes, options)
    setup(table)
    return table.render()
