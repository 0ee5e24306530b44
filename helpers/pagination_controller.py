"""
Navigation derived from the page window.

The controller turns a PaginationConfig into everything a render layer needs
(tokens, visibility, first/previous/next/last buttons) and routes clicks back
to the caller through a single page-change callback. It never stores the
current page; the caller does.
"""
from typing import Any, Callable, Dict, Optional

from constants import NAVIGATION_BUTTONS
from error_handler import log_and_reraise
from helpers.pagination_helpers import PageRange, PageToken, PaginationConfig, compute_page_range
from logger import logger, navigation_logger


class NavigationButton:
    """
    One of the first/previous/next/last buttons.

    Args:
        name: Button name ('first', 'previous', 'next' or 'last')
        enabled: Whether the button can be activated
        target_page: Page requested when the button is activated
    """

    def __init__(self, name: str, enabled: bool, target_page: int):
        self.name = name
        self.enabled = enabled
        self.target_page = target_page

    def to_dict(self) -> Dict[str, Any]:
        return {
            'enabled': self.enabled,
            'target_page': self.target_page
        }

    def __eq__(self, other):
        if not isinstance(other, NavigationButton):
            return NotImplemented
        return (self.name, self.enabled, self.target_page) == \
            (other.name, other.enabled, other.target_page)

    def __repr__(self):
        return f"NavigationButton({self.name!r}, enabled={self.enabled}, target_page={self.target_page})"


class NavigationState:
    """The four navigation buttons of a page index control."""

    def __init__(self, first: NavigationButton, previous: NavigationButton,
                 next: NavigationButton, last: NavigationButton):
        self.first = first
        self.previous = previous
        self.next = next
        self.last = last

    def buttons(self):
        return [getattr(self, name) for name in NAVIGATION_BUTTONS]

    def to_dict(self) -> Dict[str, Any]:
        return {button.name: button.to_dict() for button in self.buttons()}

    def __eq__(self, other):
        if not isinstance(other, NavigationState):
            return NotImplemented
        return self.buttons() == other.buttons()

    def __repr__(self):
        return f"NavigationState({self.buttons()!r})"


class PaginationView:
    """
    Everything a render layer needs to draw the control for one config.

    Args:
        tokens: Page window from compute_page_range
        navigation: First/previous/next/last buttons
        visible: False when there is nothing to navigate (render nothing)
        current_page: Current page after clamping to the available pages
        total_pages: Number of pages in the item set
    """

    def __init__(self, tokens: PageRange, navigation: NavigationState, visible: bool,
                 current_page: int, total_pages: int):
        self.tokens = tokens
        self.navigation = navigation
        self.visible = visible
        self.current_page = current_page
        self.total_pages = total_pages

    def is_current(self, token: PageToken) -> bool:
        return token.navigable and token.page == self.current_page

    def to_dict(self) -> Dict[str, Any]:
        return {
            'visible': self.visible,
            'current_page': self.current_page,
            'total_pages': self.total_pages,
            'tokens': [token.to_dict() for token in self.tokens],
            'navigation': self.navigation.to_dict()
        }

    def __eq__(self, other):
        if not isinstance(other, PaginationView):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"PaginationView(visible={self.visible}, current_page={self.current_page}, "
                f"tokens={list(self.tokens)!r})")


def derive_pagination(config: PaginationConfig) -> PaginationView:
    """
    Derive tokens, visibility and navigation for a config.

    Pure: the same config always yields an equal view.

    Args:
        config: PaginationConfig describing the caller's current state

    Returns:
        PaginationView for the render layer

    Raises:
        InvalidConfiguration: If config is not a valid PaginationConfig
    """
    tokens = compute_page_range(config)
    current_page = config.clamped_page

    # Fewer than two positions means there is nothing to navigate between
    visible = current_page != 0 and len(tokens) >= 2

    last_page = tokens[-1].page if tokens else 1
    on_first = current_page == 1
    on_last = current_page == last_page

    navigation = NavigationState(
        first=NavigationButton('first', not on_first, 1),
        previous=NavigationButton('previous', not on_first, current_page - 1),
        next=NavigationButton('next', not on_last, current_page + 1),
        last=NavigationButton('last', not on_last, last_page),
    )

    return PaginationView(tokens, navigation, visible, current_page, config.total_pages)


class PaginationController:
    """
    Stateless bridge between a render layer and the caller owning the page.

    Args:
        on_page_change: Callback invoked with the requested page number

    Example:
        controller = PaginationController(lambda page: state.update(page=page))
        view = controller.derive(PaginationConfig(100, 5, state.page))
        controller.select(view.tokens[3])
    """

    def __init__(self, on_page_change: Callable[[int], Any]):
        self.on_page_change = on_page_change

    def derive(self, config: PaginationConfig) -> PaginationView:
        return derive_pagination(config)

    def select(self, token: PageToken) -> bool:
        """
        Handle a click on a token of the page window.

        Re-selecting the current page still invokes the callback; the caller
        may ignore it.

        Returns:
            True if the callback was invoked, False for an ellipsis
        """
        if not token.navigable:
            logger.debug("Ignoring click on ellipsis")
            return False
        self._change_page(token.page, 'page')
        return True

    def navigate(self, button: NavigationButton) -> bool:
        """
        Handle a click on a first/previous/next/last button.

        Returns:
            True if the callback was invoked, False if the button is disabled
        """
        if not button.enabled:
            logger.debug(f"Ignoring click on disabled {button.name} button")
            return False
        self._change_page(button.target_page, button.name)
        return True

    def _change_page(self, page: int, source: Optional[str]) -> None:
        try:
            self.on_page_change(page)
        except Exception as exc:
            log_and_reraise(exc, "Page change callback failed for page %s", page)
        navigation_logger.info(f"page {page} ({source})")
