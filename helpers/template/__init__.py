"""
Template helpers for the page index control.

This module provides utilities to format pagination data for the templates.
"""

# Formatters
from .formatters import (
    format_item_range_message,
    pluralize
)

# Rendering
from .rendering import (
    create_pagination_info,
    render_posts_page
)

__all__ = [
    # Formatters
    'format_item_range_message',
    'pluralize',
    # Rendering
    'create_pagination_info',
    'render_posts_page'
]
