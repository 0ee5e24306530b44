"""
Unit tests for request parameter validation.
"""
import pytest
from flask import Flask
from helpers.pagination_helpers import PaginationConfig
from helpers.response_helpers import error_response, success_response
from helpers.validation_helpers import (
    parse_pagination_config,
    validate_count_param,
    validate_limit_param,
    validate_page_param,
)


@pytest.fixture(autouse=True)
def app_context():
    """Error responses are built with jsonify, which needs an app context."""
    app = Flask(__name__)
    with app.app_context():
        yield


def test_page_param_default():
    """Test a missing or blank page falls back to the default."""
    assert validate_page_param({}) == (1, None)
    assert validate_page_param({'page': ''}) == (1, None)


def test_page_param_valid():
    """Test a numeric page is accepted."""
    assert validate_page_param({'page': '7'}) == (7, None)


@pytest.mark.parametrize('raw', ['0', '-1', 'abc'])
def test_page_param_invalid(raw):
    """Test pages below 1 or non-numeric are rejected."""
    value, error = validate_page_param({'page': raw})
    assert value is None
    response, status = error
    assert status == 400
    assert response.get_json()['success'] is False


def test_page_param_has_no_upper_bound():
    """Test large pages are accepted and left for the window to clamp."""
    assert validate_page_param({'page': '20000'}) == (20000, None)


def test_limit_param_clamped():
    """Test page sizes are clamped to the allowed range."""
    assert validate_limit_param({'page_size': '500'}, max_value=100) == (100, None)
    assert validate_limit_param({'page_size': '0'}) == (1, None)
    assert validate_limit_param({}, default=20) == (20, None)


def test_count_param_negative_rejected():
    """Test negative counts are rejected."""
    value, error = validate_count_param({'total_count': '-5'}, 'total_count')
    assert value is None
    assert error[1] == 400


def test_parse_pagination_config():
    """Test a full set of parameters becomes a PaginationConfig."""
    config, error = parse_pagination_config(
        {'total_count': '100', 'page_size': '5', 'page': '10', 'sibling_count': '2'})
    assert error is None
    assert config == PaginationConfig(100, 5, 10, sibling_count=2)


def test_parse_pagination_config_defaults():
    """Test defaults apply and a known total_count overrides the query."""
    config, error = parse_pagination_config({'total_count': '999'}, total_count=42,
                                            default_page_size=10, default_sibling_count=0)
    assert error is None
    assert config == PaginationConfig(42, 10, 1, sibling_count=0)


def test_parse_pagination_config_error():
    """Test the first invalid parameter short-circuits with an error."""
    config, error = parse_pagination_config({'total_count': '100', 'sibling_count': 'x'})
    assert config is None
    assert error[1] == 400


def test_count_param_clamped_to_max():
    """Test counts above max_value are clamped rather than rejected."""
    assert validate_count_param({'sibling_count': '300000'}, 'sibling_count',
                                max_value=10) == (10, None)
    assert validate_count_param({'sibling_count': '3'}, 'sibling_count',
                                max_value=10) == (3, None)


def test_parse_pagination_config_clamps_sibling_count():
    """Test an oversized sibling_count is clamped to max_sibling_count."""
    config, error = parse_pagination_config(
        {'total_count': '100', 'sibling_count': '300000'}, max_sibling_count=10)
    assert error is None
    assert config.sibling_count == 10


def test_success_response_envelope():
    """Test the payload is returned at top level with success set."""
    response, status = success_response({'visible': True, 'total_pages': 3})
    assert status == 200
    assert response.get_json() == {'success': True, 'visible': True, 'total_pages': 3}


def test_error_response_envelope():
    """Test extra fields are merged into a failed response."""
    response, status = error_response('bad page', 400, {'field': 'page'})
    assert status == 400
    assert response.get_json() == {'success': False, 'error': 'bad page', 'field': 'page'}
