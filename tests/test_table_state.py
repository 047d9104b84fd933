"""
Unit tests for query state resolution.
"""
import unittest

import pytest

from table_helper import ColumnSetting, Table, TableOptions
from table_helper.helpers.table_state import ParamNames, resolve_query_state

from conftest import context, video_columns


def _columns(setup=video_columns):
    table = Table([], context())
    setup(table)
    return table.columns


def _resolve(query='', setup=video_columns, options=None, table_id=None):
    ctx = context(query)
    return resolve_query_state(ctx.args, _columns(setup), options or TableOptions(),
                               ParamNames(table_id))


class TestParamNames(unittest.TestCase):
    """Test parameter name computation."""

    def test_unprefixed_names(self):
        names = ParamNames()
        self.assertEqual(names.search_by, 'searchBy')
        self.assertEqual(names.search_col, 'searchCol')
        self.assertEqual(names.sort_by, 'sortBy')
        self.assertEqual(names.sort_order, 'sortOrder')
        self.assertEqual(names.take, 'take')
        self.assertEqual(names.skip, 'skip')

    def test_prefixed_names(self):
        names = ParamNames('liked')
        self.assertEqual(names.sort_by, 'liked-sortBy')
        self.assertEqual(names.skip, 'liked-skip')

    def test_names_are_immutable(self):
        names = ParamNames('liked')
        with self.assertRaises(AttributeError):
            names.sort_by = 'other'


class TestSortResolution(unittest.TestCase):
    """Test sort column and direction resolution."""

    def test_first_column_is_default_without_default_sort_flag(self):
        state = _resolve()
        self.assertEqual(state.sort_column_index, 0)
        self.assertTrue(state.sort_ascending)
        self.assertFalse(state.sort_from_url)

    def test_default_sort_column_is_used_without_sort_param(self):
        def setup(table):
            table.add_col('Id', lambda v: v['id'], lambda v: v['id'])
            table.add_col('Plays', lambda v: v['plays'], lambda v: v['plays'], None, None,
                          ColumnSetting.DEFAULT_SORT)
        state = _resolve(setup=setup)
        self.assertEqual(state.sort_column_index, 1)
        self.assertTrue(state.sort_ascending)

    def test_first_sort_desc_sets_initial_direction(self):
        def setup(table):
            table.add_col('Id', lambda v: v['id'], lambda v: v['id'], None, None,
                          ColumnSetting.DEFAULT_SORT, ColumnSetting.FIRST_SORT_DESC)
        state = _resolve(setup=setup)
        self.assertFalse(state.sort_ascending)

    def test_sort_param_overrides_default(self):
        state = _resolve('sortBy=2&sortOrder=desc')
        self.assertEqual(state.sort_column_index, 2)
        self.assertFalse(state.sort_ascending)
        self.assertTrue(state.sort_from_url)

    def test_sort_order_ignored_without_sort_by(self):
        state = _resolve('sortOrder=desc')
        self.assertEqual(state.sort_column_index, 0)
        self.assertTrue(state.sort_ascending)

    def test_sort_by_without_order_is_ascending(self):
        def setup(table):
            table.add_col('Id', lambda v: v['id'], lambda v: v['id'], None, None,
                          ColumnSetting.FIRST_SORT_DESC)
        state = _resolve('sortBy=0', setup=setup)
        self.assertTrue(state.sort_ascending)

    def test_unknown_sort_order_value_is_ascending(self):
        state = _resolve('sortBy=1&sortOrder=sideways')
        self.assertTrue(state.sort_ascending)

    def test_invalid_sort_index_falls_back_to_default(self):
        for value in ('abc', '99', '-1', '1.5', ''):
            with self.subTest(value=value):
                state = _resolve(f'sortBy={value}&sortOrder=desc')
                self.assertEqual(state.sort_column_index, 0)
                self.assertFalse(state.sort_ascending)

    def test_unsortable_column_index_falls_back_to_default(self):
        def setup(table):
            table.add_col('Id', lambda v: v['id'], lambda v: v['id'])
            table.add_col('Notes', lambda v: '')
        state = _resolve('sortBy=1', setup=setup)
        self.assertEqual(state.sort_column_index, 0)

    def test_no_columns(self):
        state = _resolve('sortBy=0', setup=lambda table: None)
        self.assertIsNone(state.sort_column_index)


class TestSearchResolution(unittest.TestCase):
    """Test search term and column resolution."""

    def test_search_active_with_valid_column(self):
        state = _resolve('searchBy=foo&searchCol=1')
        self.assertTrue(state.search_active)
        self.assertEqual(state.search_term, 'foo')
        self.assertEqual(state.search_column_index, 1)

    def test_search_inactive_without_term(self):
        state = _resolve('searchCol=1')
        self.assertFalse(state.search_active)
        self.assertIsNone(state.search_term)

    def test_empty_term_does_not_activate_search(self):
        state = _resolve('searchBy=&searchCol=1')
        self.assertFalse(state.search_active)

    def test_invalid_search_column_disables_search(self):
        for query in ('searchBy=foo', 'searchBy=foo&searchCol=x',
                      'searchBy=foo&searchCol=7', 'searchBy=foo&searchCol=0'):
            with self.subTest(query=query):
                state = _resolve(query)
                self.assertFalse(state.search_active)
                self.assertIsNone(state.search_term)

    def test_custom_search_term_criteria(self):
        options = TableOptions(search_term_criteria=lambda term: term is not None and len(term) >= 3)
        self.assertFalse(_resolve('searchBy=fo&searchCol=1', options=options).search_active)
        self.assertTrue(_resolve('searchBy=foo&searchCol=1', options=options).search_active)


class TestPaginationResolution(unittest.TestCase):
    """Test take/skip resolution."""

    def test_defaults(self):
        state = _resolve()
        self.assertEqual(state.page_size, 20)
        self.assertEqual(state.page_skip, 0)

    def test_configured_defaults(self):
        state = _resolve(options=TableOptions(default_take=50, default_skip=10))
        self.assertEqual((state.page_size, state.page_skip), (50, 10))

    def test_url_values(self):
        state = _resolve('take=10&skip=20')
        self.assertEqual((state.page_size, state.page_skip), (10, 20))

    def test_invalid_values_fall_back(self):
        state = _resolve('take=ten&skip=')
        self.assertEqual((state.page_size, state.page_skip), (20, 0))

    def test_no_bounds_validation(self):
        state = _resolve('take=0&skip=-5')
        self.assertEqual((state.page_size, state.page_skip), (0, -5))


def test_prefixed_parameters_only_affect_their_table():
    """Parameters of another table id are ignored."""
    state = _resolve('sortBy=2&take=5&liked-take=50&liked-sortBy=1', table_id='liked')
    assert state.page_size == 50
    assert state.sort_column_index == 1


def test_first_value_wins_for_repeated_keys():
    ctx = context('take=10&take=50')
    state = resolve_query_state(ctx.args, _columns(), TableOptions())
    assert state.page_size == 10


def test_plain_dict_args_are_accepted():
    state = resolve_query_state({'sortBy': '1', 'sortOrder': 'desc'}, _columns(), TableOptions())
    assert state.sort_column_index == 1
    assert state.sort_ascending is False


def test_resolved_state_is_immutable():
    state = _resolve()
    with pytest.raises(AttributeError):
        state.page_size = 5


def test_resolved_state_equality_and_dict():
    assert _resolve('take=5') == _resolve('take=5')
    assert _resolve('take=5').to_dict()['page_size'] == 5
