"""
Pagination routes blueprint.

Serves the page window as JSON for client-side render layers and a demo post
listing that renders the control server-side. In both cases the page-change
callback is a link: following ?page=N is how a render layer asks the caller
for another page.
"""
from flask import Blueprint, request, Response

from constants import DEFAULT_MAX_PAGE_SIZE, DEFAULT_MAX_SIBLING_COUNT, DEFAULT_PAGE_SIZE, DEFAULT_SIBLING_COUNT
from helpers.pagination_controller import derive_pagination
from helpers.pagination_helpers import build_pagination_url
from helpers.response_helpers import success_response
from helpers.template.rendering import render_posts_page
from helpers.validation_helpers import parse_pagination_config
from logger import logger

# Create blueprint
bp = Blueprint('pagination', __name__)

# Settings and post source will be injected
_post_source = None
_settings = {
    'page_size': DEFAULT_PAGE_SIZE,
    'max_page_size': DEFAULT_MAX_PAGE_SIZE,
    'sibling_count': DEFAULT_SIBLING_COUNT,
    'max_sibling_count': DEFAULT_MAX_SIBLING_COUNT
}


def init_pagination_routes(post_source, page_size: int = DEFAULT_PAGE_SIZE,
                           max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
                           sibling_count: int = DEFAULT_SIBLING_COUNT,
                           max_sibling_count: int = DEFAULT_MAX_SIBLING_COUNT):
    """
    Initialize the pagination routes with the post source and request defaults.

    Args:
        post_source: Object with count() and get_page(offset, limit)
        page_size: Page size when a request does not name one
        max_page_size: Largest page size a request may ask for
        sibling_count: Sibling count when a request does not name one
        max_sibling_count: Largest sibling count a request may ask for
    """
    global _post_source
    _post_source = post_source
    _settings.update(page_size=page_size, max_page_size=max_page_size,
                     sibling_count=sibling_count, max_sibling_count=max_sibling_count)


def _preserved_filters():
    """Query parameters every pagination link must carry over, except page."""
    return {key: value for key, value in request.args.items() if key != 'page'}


def _parse(total_count=None):
    return parse_pagination_config(
        request.args,
        total_count=total_count,
        default_page_size=_settings['page_size'],
        max_page_size=_settings['max_page_size'],
        default_sibling_count=_settings['sibling_count'],
        max_sibling_count=_settings['max_sibling_count']
    )


@bp.route('/api/pagination', methods=['GET'])
def get_pagination() -> Response:
    """Compute tokens and navigation for the item count given in the query."""
    config, error = _parse()
    if error:
        return error

    view = derive_pagination(config)
    filters = _preserved_filters()

    data = view.to_dict()
    for token_data, token in zip(data['tokens'], view.tokens):
        if token.navigable:
            token_data['url'] = build_pagination_url(request.path, token.page, filters)
    for button in view.navigation.buttons():
        if button.enabled:
            data['navigation'][button.name]['url'] = build_pagination_url(
                request.path, button.target_page, filters)

    return success_response(data)


@bp.route('/posts', methods=['GET'])
def posts_page():
    """List the current page of posts with the page index control beneath."""
    if _post_source is None:
        logger.error("Post source not initialized")
        return "Post source not initialized", 500

    config, error = _parse(total_count=_post_source.count())
    if error:
        return error

    view = derive_pagination(config)
    posts = _post_source.get_page(config.offset, config.page_size)
    logger.debug(f"Serving {len(posts)} posts for page {view.current_page}/{view.total_pages}")

    return render_posts_page(posts, config, view, request.path, _preserved_filters())
