from flask import Flask
import os
from dotenv import load_dotenv
from logger import logger
from constants import (
    DEFAULT_MAX_PAGE_SIZE,
    DEFAULT_MAX_SIBLING_COUNT,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SAMPLE_POSTS,
    DEFAULT_SIBLING_COUNT,
)
from error_handler import InvalidConfiguration, validate_environment_variable
from helpers.response_helpers import error_response
from routes.pagination_routes import bp as pagination_bp, init_pagination_routes
from sample_posts import SamplePostSource

load_dotenv()

# ============================================================================
# CONFIGURATION
# ============================================================================

PORT = int(os.getenv('PORT', '8080'))
HOST = os.getenv('HOST', '0.0.0.0')

PAGE_SIZE = validate_environment_variable(
    'PAGE_WINDOW_PAGE_SIZE', DEFAULT_PAGE_SIZE,
    validator=lambda v: v > 0, converter=int
)
MAX_PAGE_SIZE = validate_environment_variable(
    'PAGE_WINDOW_MAX_PAGE_SIZE', DEFAULT_MAX_PAGE_SIZE,
    validator=lambda v: v >= PAGE_SIZE, converter=int
)
MAX_SIBLING_COUNT = validate_environment_variable(
    'PAGE_WINDOW_MAX_SIBLING_COUNT', DEFAULT_MAX_SIBLING_COUNT,
    validator=lambda v: v >= 0, converter=int
)
SIBLING_COUNT = validate_environment_variable(
    'PAGE_WINDOW_SIBLING_COUNT', min(DEFAULT_SIBLING_COUNT, MAX_SIBLING_COUNT),
    validator=lambda v: 0 <= v <= MAX_SIBLING_COUNT, converter=int
)
SAMPLE_POSTS = validate_environment_variable(
    'PAGE_WINDOW_SAMPLE_POSTS', DEFAULT_SAMPLE_POSTS,
    validator=lambda v: v >= 0, converter=int
)

app = Flask(__name__)

init_pagination_routes(
    SamplePostSource(SAMPLE_POSTS),
    page_size=PAGE_SIZE,
    max_page_size=MAX_PAGE_SIZE,
    sibling_count=SIBLING_COUNT,
    max_sibling_count=MAX_SIBLING_COUNT
)
app.register_blueprint(pagination_bp)


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.errorhandler(InvalidConfiguration)
def handle_invalid_configuration(exc: InvalidConfiguration):
    logger.warning(f"Invalid pagination configuration: {exc}")
    return error_response(str(exc), 400, {'field': exc.field})


if __name__ == '__main__':
    logger.info(f"Page window demo listening on {HOST}:{PORT} "
                f"(page_size={PAGE_SIZE}, sibling_count={SIBLING_COUNT})")
    app.run(host=HOST, port=PORT)
