"""
Tests for template helper functions.

These tests verify the template dictionary built for the page index control
and the caption formatters used around it.
"""

import unittest
from helpers.pagination_controller import derive_pagination
from helpers.pagination_helpers import PaginationConfig
from helpers.template import create_pagination_info, format_item_range_message, pluralize


class TestCreatePaginationInfo(unittest.TestCase):
    """Test create_pagination_info functionality."""

    def test_hidden_view_returns_none(self):
        """Test no template data is produced for a single page."""
        view = derive_pagination(PaginationConfig(3, 5, 1))
        self.assertIsNone(create_pagination_info(view, '/posts'))

    def test_middle_page(self):
        """Test links and page numbers for a middle page."""
        view = derive_pagination(PaginationConfig(100, 5, 10))
        info = create_pagination_info(view, '/posts')
        self.assertEqual(info['current_page'], 10)
        self.assertEqual(info['total_pages'], 20)
        self.assertEqual([t['page'] for t in info['tokens']], [1, None, 9, 10, 11, None, 20])
        self.assertEqual(info['first_url'], '/posts?page=1')
        self.assertEqual(info['prev_url'], '/posts?page=9')
        self.assertEqual(info['next_url'], '/posts?page=11')
        self.assertEqual(info['last_url'], '/posts?page=20')
        self.assertEqual(set(info), {'current_page', 'total_pages', 'tokens',
                                     'first_url', 'prev_url', 'next_url', 'last_url'})

    def test_ellipsis_tokens_have_no_url(self):
        """Test ellipsis entries cannot be linked."""
        view = derive_pagination(PaginationConfig(100, 5, 10))
        info = create_pagination_info(view, '/posts')
        gaps = [t for t in info['tokens'] if t['page'] is None]
        self.assertEqual(len(gaps), 2)
        for gap in gaps:
            self.assertIsNone(gap['url'])
            self.assertEqual(gap['label'], '...')
            self.assertFalse(gap['current'])

    def test_disabled_buttons_have_no_url(self):
        """Test first/previous have no link on the first page."""
        view = derive_pagination(PaginationConfig(100, 5, 1))
        info = create_pagination_info(view, '/posts')
        self.assertIsNone(info['first_url'])
        self.assertIsNone(info['prev_url'])
        self.assertEqual(info['next_url'], '/posts?page=2')

    def test_filters_preserved(self):
        """Test filters are carried over to every link."""
        view = derive_pagination(PaginationConfig(100, 5, 20))
        info = create_pagination_info(view, '/posts', {'page_size': '5'})
        self.assertEqual(info['prev_url'], '/posts?page=19&page_size=5')
        self.assertIsNone(info['next_url'])
        current = [t for t in info['tokens'] if t['current']]
        self.assertEqual(current[0]['url'], '/posts?page=20&page_size=5')


class TestFormatters(unittest.TestCase):
    """Test caption formatters."""

    def test_item_range_message(self):
        self.assertEqual(format_item_range_message(PaginationConfig(100, 5, 2), 'post'),
                         'Showing 6-10 of 100 posts')

    def test_item_range_message_partial_last_page(self):
        self.assertEqual(format_item_range_message(PaginationConfig(1203, 100, 13), 'post'),
                         'Showing 1,201-1,203 of 1,203 posts')

    def test_item_range_message_single_item(self):
        self.assertEqual(format_item_range_message(PaginationConfig(1, 5, 1), 'post'),
                         'Showing 1-1 of 1 post')

    def test_item_range_message_empty(self):
        self.assertEqual(format_item_range_message(PaginationConfig(0, 5, 1)), 'No items')

    def test_pluralize(self):
        self.assertEqual(pluralize(1, 'post'), 'post')
        self.assertEqual(pluralize(2, 'post'), 'posts')
        self.assertEqual(pluralize(0, 'entry', 'entries'), 'entries')


if __name__ == '__main__':
    unittest.main()
