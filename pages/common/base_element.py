import logging
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page


class BaseElement:
    """
    BaseElement is a wrapper class for Playwright's Locator object, providing
    common interaction methods for web elements like clicking, typing and reading state.

    Actions (click, fill, select...) raise Playwright's TimeoutError when the element never becomes
    actionable. Queries (text, is_visible, count...) swallow lookup failures and return a safe default,
    so a missing element reads as '', False, 0 or None instead of failing the test on the spot.

    :param locator: Locator to target the specific web element.
    :param page: Playwright Page object, representing the browser tab.
    :param logger: Logger used to record actions. Nothing is logged when omitted.
    :param default_timeout: Timeout for actions in milliseconds (default is 10000 ms).
    :param query_timeout: Timeout for queries in milliseconds (default is 2000 ms).
    :param selector: Human readable selector used in log lines.
    """

    def __init__(self, locator: Locator, page: Page, logger: Optional[logging.Logger] = None,
                 default_timeout: int = 10000, query_timeout: int = 2000, selector: Optional[str] = None):
        self.raw: Locator = locator  # The actual located web element
        self.selector = selector or str(locator)
        self.page = page
        self.logger = logger
        self._default_timeout = default_timeout
        self._query_timeout = query_timeout

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.info(message)

    def _scoped(self, locator: Locator, suffix: str) -> 'BaseElement':
        return BaseElement(locator, self.page, self.logger, self._default_timeout, self._query_timeout,
                           f'{self.selector} >> {suffix}')

    def nth(self, index: int) -> 'BaseElement':
        """
        Narrow the element to the match at the given zero-based index.
        """
        return self._scoped(self.raw.nth(index), f'nth={index}')

    @property
    def first(self) -> 'BaseElement':
        return self._scoped(self.raw.first, 'nth=0')

    # Queries

    @property
    def text(self) -> str:
        """
        Get the text content of the element.

        :return: The stripped text content, or an empty string if the element cannot be read.
        """
        try:
            return (self.raw.text_content(timeout=self._query_timeout) or '').strip()
        except PlaywrightError:
            return ''

    @property
    def value(self) -> str:
        """
        Get the value of the element, usually for input elements.

        :return: The value attribute of the element, or an empty string if it cannot be read.
        """
        try:
            return self.raw.input_value(timeout=self._query_timeout) or ''
        except PlaywrightError:
            return ''

    @property
    def is_visible(self) -> bool:
        """
        Check if the element is visible.

        :return: True if the element is visible, False otherwise (including when it is missing).
        """
        try:
            return self.raw.is_visible()
        except PlaywrightError:
            return False

    @property
    def is_enabled(self) -> bool:
        """
        Check if the element is both visible and enabled (clickable).

        :return: True if the element is clickable, False otherwise.
        """
        try:
            return self.raw.is_visible() and not self.raw.is_disabled(timeout=self._query_timeout)
        except PlaywrightError:
            return False

    @property
    def is_checked(self) -> bool:
        try:
            return self.raw.is_checked(timeout=self._query_timeout)
        except PlaywrightError:
            return False

    @property
    def count(self) -> int:
        """
        Number of elements currently matching the locator.
        """
        try:
            return self.raw.count()
        except PlaywrightError:
            return 0

    @property
    def all_texts(self) -> list[str]:
        """
        Text content of every matching element, stripped.
        """
        try:
            return [text.strip() for text in self.raw.all_text_contents()]
        except PlaywrightError:
            return []

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of a specified attribute of the element.

        :param name: The name of the attribute to retrieve.
        :return: The attribute value as a string or None if the element or attribute is not found.
        """
        try:
            return self.raw.get_attribute(name, timeout=self._query_timeout)
        except PlaywrightError:
            return None

    def has_class(self, class_name: str) -> bool:
        """
        Check if the element carries the given CSS class.
        """
        classes = self.get_attribute('class') or ''
        return class_name in classes.split()

    # Actions

    def click(self, force: bool = False) -> None:
        """
        Click the element. Optionally force the click, bypassing visibility and interaction constraints.

        :param force: If True, forces the click even if the element is not interactable (default is False).
        """
        self._log(f'Clicking on: {self.selector}')
        self.raw.click(timeout=self._default_timeout, force=force)

    def fill(self, text: str) -> None:
        """
        Clear any existing content and fill the element with the provided text.

        Args:
            text (str): The text to fill into the element.

        Raises:
            playwright.sync_api.TimeoutError: If the action cannot be completed within the default timeout.
        """
        self._log(f'Filling {self.selector} with: {text}')
        self.raw.fill(text, timeout=self._default_timeout)

    def type(self, text: str) -> None:
        """
        Type the provided text into the element, one character at a time.

        Unlike `fill`, this method simulates typing, which triggers events like `keydown`, `keypress`, and `keyup`.
        """
        self._log(f'Typing into {self.selector}: {text}')
        self.raw.press_sequentially(text, timeout=self._default_timeout)

    def press(self, button: str) -> None:
        """
        Simulate a key press action on the element.

        Args:
            button (str): The key to press, e.g., "Enter", "Tab", "ArrowDown".
        """
        self.raw.press(button, timeout=self._default_timeout)

    def clear(self) -> None:
        """
        Clear input
        """
        self.raw.clear(timeout=self._default_timeout)

    def check(self) -> None:
        self._log(f'Checking: {self.selector}')
        self.raw.check(timeout=self._default_timeout)

    def uncheck(self) -> None:
        self._log(f'Unchecking: {self.selector}')
        self.raw.uncheck(timeout=self._default_timeout)

    def select_option(self, value: str) -> None:
        """
        Select an option of a <select> element by value or label.
        """
        self._log(f'Selecting option {value} in {self.selector}')
        self.raw.select_option(value, timeout=self._default_timeout)

    def hover(self, force: bool = False) -> None:
        self.raw.hover(timeout=self._default_timeout, force=force)

    def scroll_into_view(self) -> None:
        self.raw.scroll_into_view_if_needed(timeout=self._default_timeout)

    # Explicit waits

    def wait_until_hidden(self, timeout: int = 15000) -> None:
        """
        Wait until the element is hidden, either removed from the DOM or made invisible.

        :param timeout: Time to wait in milliseconds (default is 15000 ms).
        :raises playwright.sync_api.TimeoutError: If the element stays visible.
        """
        self.raw.wait_for(state='hidden', timeout=timeout)

    def wait_until_visible(self, timeout: int = 15000) -> 'BaseElement':
        """
        Wait until the element becomes visible on the page.

        Args:
            timeout (int): Maximum time to wait for the element to become visible, in milliseconds.

        Raises:
            playwright.sync_api.TimeoutError: If the element does not become visible within the specified timeout.
        """
        self.raw.wait_for(state='visible', timeout=timeout)
        return self
