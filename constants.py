"""
Common constants used across the page window control.
"""

# Label rendered for a gap marker between two visible page numbers
ELLIPSIS_LABEL = '...'

# Pages shown on each side of the current page unless the caller asks otherwise
DEFAULT_SIBLING_COUNT = 1

# First page + last page + current page + two ellipsis slots
WINDOW_FIXED_SLOTS = 5

# First/last page + current page + the ellipsis a one-sided window keeps
EDGE_FIXED_ITEMS = 3

# Request defaults (overridable through the environment, see app.py)
DEFAULT_PAGE_SIZE = 5
DEFAULT_MAX_PAGE_SIZE = 100
DEFAULT_MAX_SIBLING_COUNT = 10
DEFAULT_SAMPLE_POSTS = 100

# Names of the navigation buttons in render order
NAVIGATION_BUTTONS = ('first', 'previous', 'next', 'last')
