"""
Shared fixtures and helpers for table helper tests.
"""
import html
import re
from urllib.parse import parse_qs, urlsplit

import pytest

from table_helper import ColumnSetting, RequestContext, contains
from table_helper.logging_helper import LoggingHelper, LogType

BASE_URL = 'http://localhost/videos'

_HREF_PATTERN = re.compile(r'href="([^"]*)"')
_ROW_PATTERN = re.compile(r'<tr[^>]*>(.*?)</tr>', re.S)
_CELL_PATTERN = re.compile(r'<td[^>]*>(.*?)</td>', re.S)


def make_videos(count):
    """Videos numbered 1..count; play counts descend as ids ascend."""
    return [
        {'id': i, 'title': f"Video {i:02d}", 'plays': 100 - i}
        for i in range(1, count + 1)
    ]


def context(query: str = '') -> RequestContext:
    return RequestContext(f"{BASE_URL}?{query}" if query else BASE_URL)


def hrefs(markup) -> list:
    """All href values in the markup, unescaped."""
    return [html.unescape(href) for href in _HREF_PATTERN.findall(str(markup))]


def query_of(url: str) -> dict:
    """Query parameters of a URL as {key: first value}."""
    return {key: values[0] for key, values in parse_qs(urlsplit(url).query,
                                                       keep_blank_values=True).items()}


def body_rows(markup) -> list:
    """Cell texts per body row."""
    body = str(markup).split('<tbody>', 1)[1]
    return [[html.unescape(cell) for cell in _CELL_PATTERN.findall(row)]
            for row in _ROW_PATTERN.findall(body)]


def header_links(markup) -> list:
    """hrefs inside the <thead> only."""
    head = str(markup).split('<thead>', 1)[1].split('</thead>', 1)[0]
    return hrefs(head)


def pager_links(markup) -> list:
    """(text, href, active) for each pager item."""
    items = re.findall(r'<li class="([^"]*)"><a class="page-link" href="([^"]*)">(.*?)</a></li>',
                       str(markup))
    return [(html.unescape(text), html.unescape(href), 'active' in css)
            for css, href, text in items]


def video_columns(table):
    """Id (sortable), Title (sortable, searchable), Plays (sortable)."""
    table.add_col('Id', lambda v: v['id'], lambda v: v['id'])
    table.add_col('Title', lambda v: v['title'], lambda v: v['title'],
                  contains(lambda v: v['title']))
    table.add_col('Plays', lambda v: v['plays'], lambda v: v['plays'])


@pytest.fixture
def videos():
    return make_videos(25)


@pytest.fixture
def desc_default_columns():
    """Column 0 is the default sort and sorts descending first."""
    def setup(table):
        table.add_col('Id', lambda v: v['id'], lambda v: v['id'], None, None,
                      ColumnSetting.DEFAULT_SORT, ColumnSetting.FIRST_SORT_DESC)
        table.add_col('Title', lambda v: v['title'], lambda v: v['title'])
    return setup


@pytest.fixture
def error_log(caplog):
    """Error records of the package logger, which does not propagate to root."""
    logger = LoggingHelper.get_logger(LogType.MAIN)
    logger.addHandler(caplog.handler)
    yield lambda: [r for r in caplog.records if r.levelname == 'ERROR']
    logger.removeHandler(caplog.handler)
