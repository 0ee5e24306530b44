"""
Standardized error handling utilities for consistent error management.
"""

import os
from typing import Optional, Any, Callable
from logger import logger


class PageWindowError(Exception):
    """Base exception for all page window errors."""
    pass


class ValidationError(PageWindowError):
    """Data validation errors."""
    pass


class InvalidConfiguration(ValidationError):
    """
    A pagination config that cannot produce a page range.

    Raised for a non-positive page size, a negative item count or sibling
    count, a current page below 1, or a field that is not an integer.

    Attributes:
        field: Name of the offending config field
        value: The rejected value
    """

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")


def log_and_reraise(exc: Exception, message: str, *args) -> None:
    """
    Log an exception with context and re-raise it.

    Must be called from inside the except block handling exc.

    Args:
        exc: The exception to log
        message: Log message with %-style placeholders
        *args: Arguments for message formatting

    Raises:
        The exception currently being handled
    """
    logger.error(message + ": %s", *args, exc)
    logger.debug("Exception details", exc_info=True)
    raise


def validate_environment_variable(
    var_name: str,
    default: Any,
    validator: Optional[Callable[[Any], bool]] = None,
    converter: Optional[Callable[[str], Any]] = None
) -> Any:
    """
    Safely get and validate an environment variable.

    Args:
        var_name: Name of the environment variable
        default: Default value if not set or invalid
        validator: Optional validation function
        converter: Optional conversion function (e.g., int, float)

    Returns:
        The validated and converted environment variable value
    """
    raw_value = os.getenv(var_name)

    if raw_value is None:
        logger.debug(f"Environment variable {var_name} not set, using default: {default}")
        return default

    if converter:
        try:
            value = converter(raw_value)
        except (ValueError, TypeError) as exc:
            logger.warning(
                f"Invalid {var_name}='{raw_value}': {exc}. Using default: {default}"
            )
            return default
    else:
        value = raw_value

    if validator and not validator(value):
        logger.warning(
            f"Invalid {var_name}='{value}' failed validation. Using default: {default}"
        )
        return default

    logger.debug(f"Using {var_name}={value}")
    return value
