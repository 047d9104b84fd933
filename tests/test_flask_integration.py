"""
Integration tests for the Flask extension.
Tests that tables render end-to-end through route handlers and templates.
"""
import pytest
from flask import Flask, render_template_string

from table_helper import ColumnSetting, ElementPlacement, contains
from table_helper.flask_ext import (
    EXTENSION_KEY,
    init_app,
    render_flask_table,
    request_context_from_flask,
)

from conftest import body_rows, make_videos, pager_links, query_of

VIDEOS = make_videos(25)


def setup_video_columns(table):
    table.add_col('Title', lambda v: v['title'], lambda v: v['title'],
                  contains(lambda v: v['title']))
    table.add_col('Plays', lambda v: v['plays'], lambda v: v['plays'], None, None,
                  ColumnSetting.DEFAULT_SORT, ColumnSetting.FIRST_SORT_DESC)


@pytest.fixture
def app():
    app = Flask(__name__)
    app.config['TESTING'] = True
    app.config['TABLE_DEFAULT_TAKE'] = 10
    app.config['TABLE_PAGINATION_PLACEMENT'] = ElementPlacement.BOTH
    init_app(app)

    @app.route('/videos')
    def videos():
        return render_flask_table(VIDEOS, setup_video_columns, table_id='videos')

    @app.route('/page')
    def page():
        return render_template_string(
            '<h1>Videos</h1>{{ table(videos, setup, table_id="v") }}',
            videos=VIDEOS,
            setup=setup_video_columns,
        )

    return app


@pytest.fixture
def client(app):
    """Create test client."""
    with app.test_client() as client:
        yield client


def test_default_options_from_app_config(app):
    options = app.extensions[EXTENSION_KEY]
    assert options.default_take == 10
    assert options.pagination_placement == ElementPlacement.BOTH


def test_route_renders_table(client):
    response = client.get('/videos')
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    rows = body_rows(html)
    assert len(rows) == 10
    # Plays sorts descending first: lowest ids have the most plays
    assert rows[0] == ['Video 01', '99']
    assert html.count('<ul class="pagination') == 2


def test_links_use_request_url(client):
    html = client.get('/videos?tab=all&videos-skip=10').get_data(as_text=True)
    links = pager_links(html)
    assert links[0][1].startswith('http://localhost/videos?')
    assert query_of(links[0][1]) == {'tab': 'all', 'videos-skip': '0'}
    assert [text for text, _, active in links if active] == ['2', '2']


def test_search_through_route(client):
    html = client.get('/videos?videos-searchCol=0&videos-searchBy=Video%202').get_data(as_text=True)
    titles = [row[0] for row in body_rows(html)]
    assert titles == ['Video 20', 'Video 21', 'Video 22', 'Video 23', 'Video 24', 'Video 25']


def test_invalid_parameters_handled_gracefully(client):
    response = client.get('/videos?videos-sortBy=abc&videos-take=x&videos-searchCol=zz&videos-searchBy=a')
    assert response.status_code == 200
    assert len(body_rows(response.get_data(as_text=True))) == 10


def test_template_global(client):
    html = client.get('/page?v-take=5').get_data(as_text=True)
    assert html.startswith('<h1>Videos</h1><div>')
    assert len(body_rows(html)) == 5


def test_request_context_from_flask(app):
    with app.test_request_context('/videos?take=5&searchBy=a+b'):
        ctx = request_context_from_flask()
    assert ctx.path == '/videos'
    assert ctx.args.get('searchBy') == 'a b'
    assert ctx.url == 'http://localhost/videos?take=5&searchBy=a+b'


def test_render_without_init_app_uses_plain_defaults():
    app = Flask(__name__)
    with app.test_request_context('/videos'):
        html = render_flask_table(VIDEOS, setup_video_columns)
    assert len(body_rows(html)) == 20
