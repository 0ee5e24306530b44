"""
JSON envelopes for the pagination endpoints.

Every response carries a boolean 'success'; failures add 'error' and
optionally the offending field.
"""
from typing import Any, Dict, Optional, Tuple
from flask import jsonify, Response


def error_response(
    message: str,
    status_code: int = 400,
    extra_data: Optional[Dict[str, Any]] = None
) -> Tuple[Response, int]:
    """
    Build a failed response.

    Args:
        message: Error message to return to client
        status_code: HTTP status code (default: 400)
        extra_data: Optional fields merged into the body (e.g. {'field': 'page'})

    Returns:
        Tuple of (Response, status_code)
    """
    body = dict(extra_data or {}, success=False, error=message)
    return jsonify(body), status_code


def success_response(payload: Dict[str, Any]) -> Tuple[Response, int]:
    """Build a 200 response with the payload fields at top level."""
    return jsonify(dict(payload, success=True)), 200
