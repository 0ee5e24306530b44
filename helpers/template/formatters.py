"""
Text formatters for the page index control and the pages around it.
"""

from helpers.pagination_helpers import PaginationConfig


def format_item_range_message(config: PaginationConfig, item_type: str = 'item') -> str:
    """
    Describe which items the current page shows.

    Args:
        config: PaginationConfig for the page being rendered
        item_type: Singular name of the items (e.g., 'post')

    Returns:
        Status message for the caption under a paged list

    Example:
        >>> format_item_range_message(PaginationConfig(100, 5, 2), 'post')
        'Showing 6-10 of 100 posts'
        >>> format_item_range_message(PaginationConfig(0, 5, 1), 'post')
        'No posts'
    """
    total = config.total_count
    if total == 0:
        return f"No {pluralize(0, item_type)}"

    start, end = config.item_range
    return f"Showing {start:,}-{end:,} of {total:,} {pluralize(total, item_type)}"


def pluralize(count: int, singular: str, plural: str = None) -> str:
    """
    Return singular or plural form based on count.

    Args:
        count: The count to check
        singular: Singular form of the word
        plural: Optional plural form (defaults to singular + 's')

    Returns:
        Singular or plural form of the word

    Example:
        >>> pluralize(1, 'post')
        'post'
        >>> pluralize(5, 'post')
        'posts'
        >>> pluralize(3, 'entry', 'entries')
        'entries'
    """
    if plural is None:
        plural = singular + 's'
    return singular if count == 1 else plural
