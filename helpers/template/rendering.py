"""
Rendering functions for the page index control.

Provides utilities to turn a PaginationView into the dictionary consumed by
the pagination.html template.
"""

from typing import Dict, Any, Optional
from flask import render_template

from helpers.pagination_controller import PaginationView
from helpers.pagination_helpers import build_pagination_url
from .formatters import format_item_range_message


def create_pagination_info(view: PaginationView, base_url: str,
                           filters: Optional[Dict[str, str]] = None) -> Optional[Dict[str, Any]]:
    """
    Create pagination information for the pagination template.

    Every page number and enabled navigation button gets a URL; ellipsis
    tokens and disabled buttons get None so the template cannot link them.

    Args:
        view: PaginationView from derive_pagination
        base_url: Base URL for pagination links
        filters: Optional query parameters preserved on every link

    Returns:
        Dictionary containing pagination information for the template, or None
        when the control should not be rendered
    """
    if not view.visible:
        return None

    tokens = []
    for token in view.tokens:
        tokens.append({
            'label': token.label,
            'page': token.page if token.navigable else None,
            'url': build_pagination_url(base_url, token.page, filters) if token.navigable else None,
            'current': view.is_current(token)
        })

    def _button_url(button):
        if not button.enabled:
            return None
        return build_pagination_url(base_url, button.target_page, filters)

    nav = view.navigation
    return {
        'current_page': view.current_page,
        'total_pages': view.total_pages,
        'tokens': tokens,
        'first_url': _button_url(nav.first),
        'prev_url': _button_url(nav.previous),
        'next_url': _button_url(nav.next),
        'last_url': _button_url(nav.last)
    }


def render_posts_page(posts, config, view: PaginationView, base_url: str,
                      filters: Optional[Dict[str, str]] = None):
    """
    Render the post listing with the page index control beneath it.

    Args:
        posts: Posts on the current page
        config: PaginationConfig the view was derived from
        view: PaginationView for config
        base_url: Base URL for pagination links
        filters: Optional query parameters preserved on every link

    Returns:
        Rendered template response
    """
    return render_template(
        'posts.html',
        posts=posts,
        pagination=create_pagination_info(view, base_url, filters),
        status_message=format_item_range_message(config, 'post')
    )
