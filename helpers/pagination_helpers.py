"""
Pagination helper utilities.

Computes the bounded page window shown by the page index control: a short
sequence of page numbers and ellipsis markers whose length does not grow with
the total number of pages.
"""
import math
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode

from constants import (
    DEFAULT_SIBLING_COUNT,
    EDGE_FIXED_ITEMS,
    ELLIPSIS_LABEL,
    WINDOW_FIXED_SLOTS,
)
from error_handler import InvalidConfiguration
from logger import logger


class PageToken:
    """Base class for the entries of a page range."""

    navigable = False

    @property
    def label(self) -> str:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        raise NotImplementedError


class PageNumber(PageToken):
    """
    A clickable page number.

    Args:
        page: 1-based page number
    """

    navigable = True

    def __init__(self, page: int):
        self.page = page

    @property
    def label(self) -> str:
        return str(self.page)

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': 'page', 'page': self.page}

    def __eq__(self, other):
        return isinstance(other, PageNumber) and other.page == self.page

    def __hash__(self):
        return hash(('page', self.page))

    def __repr__(self):
        return f"PageNumber({self.page})"


class EllipsisMarker(PageToken):
    """A gap marker standing in for one or more omitted pages."""

    @property
    def label(self) -> str:
        return ELLIPSIS_LABEL

    def to_dict(self) -> Dict[str, Any]:
        return {'kind': 'ellipsis'}

    def __eq__(self, other):
        return isinstance(other, EllipsisMarker)

    def __hash__(self):
        return hash('ellipsis')

    def __repr__(self):
        return "ELLIPSIS"


ELLIPSIS = EllipsisMarker()

PageRange = Tuple[PageToken, ...]


def _require_int(field: str, value: Any, minimum: int) -> None:
    # bool is an int subclass, but True is never a meaningful page size
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(field, value, 'must be an integer')
    if value < minimum:
        raise InvalidConfiguration(field, value, f'must be at least {minimum}')


class PaginationConfig:
    """
    Inputs for one computation of the page window.

    Built fresh by the caller every time its state changes. Validation happens
    on construction, so a config that exists can always be computed.

    Args:
        total_count: Number of items across all pages (>= 0)
        page_size: Items per page (> 0)
        current_page: 1-based page the caller is showing (>= 1)
        sibling_count: Pages shown on each side of the current page (>= 0)

    Raises:
        InvalidConfiguration: If any field is out of range or not an integer
    """

    def __init__(self, total_count: int, page_size: int, current_page: int,
                 sibling_count: int = DEFAULT_SIBLING_COUNT):
        _require_int('total_count', total_count, 0)
        _require_int('page_size', page_size, 1)
        _require_int('current_page', current_page, 1)
        _require_int('sibling_count', sibling_count, 0)

        self.total_count = total_count
        self.page_size = page_size
        self.current_page = current_page
        self.sibling_count = sibling_count

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def clamped_page(self) -> int:
        """Current page clamped to [1, total_pages] (1 when there are no pages)."""
        return max(1, min(self.current_page, self.total_pages))

    @property
    def offset(self) -> int:
        """Index of the first item on the current page, for data source queries."""
        return (self.clamped_page - 1) * self.page_size

    @property
    def item_range(self) -> Tuple[int, int]:
        """1-based (first, last) item numbers shown on the current page, (0, 0) if empty."""
        if self.total_count == 0:
            return 0, 0
        start = self.offset + 1
        end = min(self.offset + self.page_size, self.total_count)
        return start, end

    def with_page(self, page: int) -> 'PaginationConfig':
        """Return a copy of this config pointing at another page."""
        return PaginationConfig(self.total_count, self.page_size, page, self.sibling_count)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_count': self.total_count,
            'page_size': self.page_size,
            'current_page': self.current_page,
            'sibling_count': self.sibling_count,
            'total_pages': self.total_pages
        }

    def __eq__(self, other):
        if not isinstance(other, PaginationConfig):
            return NotImplemented
        return (self.total_count, self.page_size, self.current_page, self.sibling_count) == \
            (other.total_count, other.page_size, other.current_page, other.sibling_count)

    def __hash__(self):
        return hash((self.total_count, self.page_size, self.current_page, self.sibling_count))

    def __repr__(self):
        return (f"PaginationConfig(total_count={self.total_count}, page_size={self.page_size}, "
                f"current_page={self.current_page}, sibling_count={self.sibling_count})")


def _pages(start: int, end: int) -> List[PageToken]:
    return [PageNumber(p) for p in range(start, end + 1)]


@lru_cache(maxsize=256)
def _page_window(total_pages: int, current_page: int, sibling_count: int) -> PageRange:
    # Fits without collapsing anything
    if sibling_count + WINDOW_FIXED_SLOTS >= total_pages:
        return tuple(_pages(1, total_pages))

    left_sibling = max(current_page - sibling_count, 1)
    right_sibling = min(current_page + sibling_count, total_pages)

    show_left_ellipsis = left_sibling > 2
    show_right_ellipsis = right_sibling < total_pages - 2

    # Pages kept on the uncollapsed side of a one-sided window
    edge_item_count = EDGE_FIXED_ITEMS + 2 * sibling_count

    if not show_left_ellipsis and show_right_ellipsis:
        if edge_item_count >= total_pages - 1:
            logger.debug(f"Right gap would be empty (pages={total_pages}, siblings={sibling_count}), "
                         "showing all pages")
            return tuple(_pages(1, total_pages))
        return tuple(_pages(1, edge_item_count) + [ELLIPSIS, PageNumber(total_pages)])

    if show_left_ellipsis and not show_right_ellipsis:
        if edge_item_count >= total_pages - 1:
            logger.debug(f"Left gap would be empty (pages={total_pages}, siblings={sibling_count}), "
                         "showing all pages")
            return tuple(_pages(1, total_pages))
        return tuple([PageNumber(1), ELLIPSIS] + _pages(total_pages - edge_item_count + 1, total_pages))

    if show_left_ellipsis and show_right_ellipsis:
        return tuple([PageNumber(1), ELLIPSIS] + _pages(left_sibling, right_sibling) +
                     [ELLIPSIS, PageNumber(total_pages)])

    # Siblings already reach both edges
    return tuple(_pages(1, total_pages))


def compute_page_range(config: PaginationConfig) -> PageRange:
    """
    Compute the page window for a pagination config.

    Logic:
    - If sibling_count + 5 pages or fewer: show every page
    - Otherwise: show first, last, and the current page with its siblings,
      replacing the skipped runs with ELLIPSIS

    Args:
        config: PaginationConfig describing the caller's current state

    Returns:
        Tuple of PageNumber and ELLIPSIS tokens
        Example: (1, ELLIPSIS, 9, 10, 11, ELLIPSIS, 20)

    Raises:
        InvalidConfiguration: If config is not a PaginationConfig

    Examples:
        >>> compute_page_range(PaginationConfig(100, 5, 1))
        (PageNumber(1), PageNumber(2), PageNumber(3), PageNumber(4), PageNumber(5), ELLIPSIS, PageNumber(20))

        >>> compute_page_range(PaginationConfig(100, 5, 10))
        (PageNumber(1), ELLIPSIS, PageNumber(9), PageNumber(10), PageNumber(11), ELLIPSIS, PageNumber(20))

        >>> compute_page_range(PaginationConfig(3, 5, 1))
        (PageNumber(1),)
    """
    if not isinstance(config, PaginationConfig):
        raise InvalidConfiguration('config', config, 'must be a PaginationConfig')

    if config.current_page != config.clamped_page:
        logger.debug(f"Clamping page {config.current_page} to {config.clamped_page} "
                     f"(total pages: {config.total_pages})")

    return _page_window(config.total_pages, config.clamped_page, config.sibling_count)


def build_pagination_url(base_path: str, page: int, filters: Optional[Dict[str, str]] = None) -> str:
    """
    Build a pagination URL with query parameters.

    Args:
        base_path: Base URL path (e.g., '/posts')
        page: Page number
        filters: Optional dictionary of filter parameters to include in the URL

    Returns:
        Complete URL with query parameters

    Examples:
        >>> build_pagination_url('/posts', 2)
        '/posts?page=2'

        >>> build_pagination_url('/posts', 2, {'page_size': '10'})
        '/posts?page=2&page_size=10'
    """
    params = {'page': str(page)}

    if filters:
        for key, value in filters.items():
            if key == 'page':
                continue
            if value is not None and value != '':
                params[key] = str(value)

    return f"{base_path}?{urlencode(params)}"
