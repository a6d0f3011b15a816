import re
from functools import lru_cache
from typing import TYPE_CHECKING, Pattern

from playwright.sync_api import Locator

from pages.common.base_element import BaseElement

if TYPE_CHECKING:
    from pages.common.browser_session import BrowserSession


def exact_text(text: str) -> Pattern[str]:
    """Pattern matching an element whose whole text is the given string, ignoring surrounding whitespace."""
    return re.compile(rf'^\s*{re.escape(text)}\s*$')


class BaseComponent:
    """
    A fragment of a page scoped to one root element, e.g. a product tile or a cart row.
    Every child lookup is resolved inside the root, so repeated fragments never leak into each other.
    """

    def __init__(self, locator: Locator, session: 'BrowserSession'):
        """
        :param locator: The root element that defines the component's scope.
        :param session: The BrowserSession of the page the component lives on.
        """
        self.root = locator  # The root locator of the component
        self.session = session

    @property
    def element(self) -> BaseElement:
        """
        Get the root base element of the component.

        Returns:
        BaseElement: The base element representing the component's root.
        """
        return self.session.find_element(self.root)

    @property
    def is_visible(self) -> bool:
        """
        Check if the component is visible.

        :return: True if visible, False otherwise.
        """
        return self.element.is_visible

    @lru_cache(maxsize=32)
    def child_el(self, selector: str) -> BaseElement:
        """
        Find an element within the component's scope.
        """
        return BaseElement(self.root.locator(selector), self.session.page, self.session.logger,
                           self.session.action_timeout, self.session.query_timeout, selector)

    def child_elements(self, selector: str) -> list[BaseElement]:
        """
        Find multiple elements within the component's scope.

        :param selector: CSS or XPath selector for elements within the component.
        :return: A list of BaseElement objects.
        """
        return [self.session.find_element(locator) for locator in self.root.locator(selector).all()]

    def wait_for_visibility(self, timeout: int = 5000) -> None:
        """
        Wait until the component's root element is visible.

        :param timeout: Timeout in milliseconds.
        """
        self.root.wait_for(state='visible', timeout=timeout)
