"""
Helper utilities for the page index control.
Centralizes the page window computation and the glue around it.
"""

# Export all helpers for easy importing
from .pagination_helpers import (
    PageToken,
    PageNumber,
    EllipsisMarker,
    ELLIPSIS,
    PaginationConfig,
    compute_page_range,
    build_pagination_url
)
from .pagination_controller import (
    NavigationButton,
    NavigationState,
    PaginationView,
    PaginationController,
    derive_pagination
)
from .response_helpers import error_response, success_response
from .validation_helpers import validate_page_param, validate_limit_param, parse_pagination_config

__all__ = [
    # Pagination helpers
    'PageToken',
    'PageNumber',
    'EllipsisMarker',
    'ELLIPSIS',
    'PaginationConfig',
    'compute_page_range',
    'build_pagination_url',
    # Pagination controller
    'NavigationButton',
    'NavigationState',
    'PaginationView',
    'PaginationController',
    'derive_pagination',
    # Response helpers
    'error_response',
    'success_response',
    # Validation helpers
    'validate_page_param',
    'validate_limit_param',
    'parse_pagination_config',
]
