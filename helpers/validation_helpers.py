"""
Parameter validation helper utilities.

Turns raw request arguments into validated pagination inputs so routes never
build a PaginationConfig from unchecked strings.
"""
from typing import Tuple, Optional
from flask import Response

from constants import DEFAULT_MAX_PAGE_SIZE, DEFAULT_MAX_SIBLING_COUNT, DEFAULT_PAGE_SIZE, DEFAULT_SIBLING_COUNT
from error_handler import InvalidConfiguration
from helpers.pagination_helpers import PaginationConfig
from helpers.response_helpers import error_response as create_error_response
from logger import logger


def validate_limit_param(
    request_args,
    param_name: str = 'page_size',
    default: int = DEFAULT_PAGE_SIZE,
    min_value: int = 1,
    max_value: int = DEFAULT_MAX_PAGE_SIZE
) -> Tuple[Optional[int], Optional[Response]]:
    """
    Validate and sanitize a numeric limit parameter from request arguments.

    Args:
        request_args: Flask request.args object (or any mapping with .get)
        param_name: Name of the parameter to validate (default: 'page_size')
        default: Default value if parameter not provided
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive)

    Returns:
        Tuple of (validated_value, error_response)
        - (int, None) if validation succeeds
        - (None, Response) if validation fails

    Usage:
        page_size, error = validate_limit_param(request.args, max_value=100)
        if error:
            return error

    Examples:
        >>> # Out of bounds (gets clamped)
        >>> # request.args.get('page_size') = '200'
        >>> page_size, error = validate_limit_param(request.args, max_value=100)
        >>> # page_size = 100, error = None

        >>> # Invalid input
        >>> # request.args.get('page_size') = 'abc'
        >>> page_size, error = validate_limit_param(request.args)
        >>> # page_size = None, error = <Response with 400 status>
    """
    raw_value = request_args.get(param_name)
    if raw_value is None or raw_value == '':
        return default, None

    try:
        value = int(raw_value)
        # Clamp to valid range
        value = max(min_value, min(value, max_value))
        return value, None
    except (ValueError, TypeError):
        return None, create_error_response(f'Invalid {param_name} parameter')


def validate_page_param(
    request_args,
    param_name: str = 'page',
    default: int = 1
) -> Tuple[Optional[int], Optional[Response]]:
    """
    Validate a page number parameter from request arguments.

    Unlike limits, page numbers below 1 are rejected rather than clamped.
    There is no upper bound: a page past the end is clamped to the last page
    by PaginationConfig.

    Args:
        request_args: Flask request.args object (or any mapping with .get)
        param_name: Name of the parameter to validate (default: 'page')
        default: Default value if parameter not provided (default: 1)

    Returns:
        Tuple of (validated_value, error_response)
        - (int, None) if validation succeeds
        - (None, Response) if validation fails
    """
    raw_value = request_args.get(param_name)
    if raw_value is None or raw_value == '':
        return default, None

    try:
        value = int(raw_value)
    except (ValueError, TypeError):
        return None, create_error_response(f'Invalid {param_name} parameter: must be a positive integer')
    if value < 1:
        return None, create_error_response(f'{param_name.capitalize()} must be at least 1')
    return value, None


def validate_count_param(
    request_args,
    param_name: str,
    default: int = 0,
    max_value: Optional[int] = None
) -> Tuple[Optional[int], Optional[Response]]:
    """
    Validate a non-negative integer parameter such as total_count or sibling_count.

    Negative values are rejected; values above max_value (if given) are clamped.

    Returns:
        Tuple of (validated_value, error_response)
    """
    raw_value = request_args.get(param_name)
    if raw_value is None or raw_value == '':
        return default, None

    try:
        value = int(raw_value)
    except (ValueError, TypeError):
        return None, create_error_response(f'Invalid {param_name} parameter: must be a non-negative integer')
    if value < 0:
        return None, create_error_response(f'{param_name} must not be negative')
    if max_value is not None:
        value = min(value, max_value)
    return value, None


def parse_pagination_config(
    request_args,
    total_count: Optional[int] = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
    default_sibling_count: int = DEFAULT_SIBLING_COUNT,
    max_sibling_count: int = DEFAULT_MAX_SIBLING_COUNT
) -> Tuple[Optional[PaginationConfig], Optional[Response]]:
    """
    Build a PaginationConfig from request arguments.

    Reads page, page_size and sibling_count, plus total_count unless the caller
    already knows it from its data source. Clamping sibling_count keeps the
    page window at most 2 * max_sibling_count + 5 tokens wide whatever the
    item count.

    Args:
        request_args: Flask request.args object (or any mapping with .get)
        total_count: Item count supplied by the data source, or None to read it
            from the total_count parameter
        default_page_size: Page size when the request does not name one
        max_page_size: Largest page size accepted (larger values are clamped)
        default_sibling_count: Sibling count when the request does not name one
        max_sibling_count: Largest sibling count accepted (larger values are clamped)

    Returns:
        Tuple of (config, error_response)
        - (PaginationConfig, None) if validation succeeds
        - (None, Response) if validation fails

    Usage:
        config, error = parse_pagination_config(request.args, total_count=len(posts))
        if error:
            return error
    """
    page, error = validate_page_param(request_args)
    if error:
        return None, error

    page_size, error = validate_limit_param(request_args, default=default_page_size,
                                            max_value=max_page_size)
    if error:
        return None, error

    sibling_count, error = validate_count_param(request_args, 'sibling_count',
                                                default=default_sibling_count,
                                                max_value=max_sibling_count)
    if error:
        return None, error

    if total_count is None:
        total_count, error = validate_count_param(request_args, 'total_count')
        if error:
            return None, error

    try:
        return PaginationConfig(total_count, page_size, page, sibling_count), None
    except InvalidConfiguration as exc:
        logger.warning(f"Rejected pagination parameters: {exc}")
        return None, create_error_response(str(exc), extra_data={'field': exc.field})
