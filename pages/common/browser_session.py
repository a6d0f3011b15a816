import logging
from pathlib import Path
from typing import Any, Callable, Optional, Union

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from pages.common.base_element import BaseElement


class BrowserSession:
    """
    Session-interaction helper shared by page objects.

    Page objects hold a BrowserSession instead of inheriting navigation helpers. The session wraps the live
    Playwright page of the current test (it never owns it), prefixes relative paths with the site's base URL,
    and hands out BaseElement wrappers configured with the session's timeouts and logger.
    """

    def __init__(self, page: Page, base_url: str, logger: logging.Logger, action_timeout: int = 10000,
                 query_timeout: int = 2000, screenshot_dir: Union[str, Path] = 'screenshots'):
        """
        Args:
            page (Page): The Playwright page object of the running test.
            base_url (str): Site root every relative path is appended to.
            logger (logging.Logger): Handle used for navigation and action log lines.
            action_timeout (int): Timeout for element actions in milliseconds.
            query_timeout (int): Timeout for element queries in milliseconds.
            screenshot_dir (Union[str, Path]): Directory take_screenshot writes into.
        """
        self.page = page
        self.base_url = base_url.rstrip('/')
        self.logger = logger
        self.action_timeout = action_timeout
        self.query_timeout = query_timeout
        self.screenshot_dir = Path(screenshot_dir)

    def url_for(self, path: str = '/') -> str:
        if not path.startswith('/'):
            path = f'/{path}'
        return f'{self.base_url}{path}'

    # Navigation

    def goto(self, path: str = '/', wait: bool = True) -> None:
        """
        Navigate to a path relative to the base URL and optionally wait for the network to settle.

        Args:
            path (str): Relative path, e.g. '/cart'.
            wait (bool): Whether to wait for network idle afterwards. Default is True.
        """
        url = self.url_for(path)
        self.logger.info(f'Navigating to: {url}')
        self.page.goto(url)
        if wait:
            self.wait_for_network_idle()

    def wait_for_network_idle(self) -> None:
        self.page.wait_for_load_state('networkidle')

    def wait_for_navigation(self, action: Callable[[], Any], timeout: Optional[int] = None) -> None:
        """
        Run an action that triggers a navigation and wait until the new document is loaded and idle.

        Args:
            action (Callable[[], Any]): The click/select/submit that starts the navigation.
            timeout (Optional[int]): Navigation timeout in milliseconds. Defaults to the action timeout.

        Raises:
            playwright.sync_api.TimeoutError: If no navigation happens within the timeout.
        """
        with self.page.expect_navigation(timeout=timeout or self.action_timeout):
            action()
        self.wait_for_network_idle()

    def reload(self) -> None:
        """
        Reload the current page.
        """
        self.logger.info(f'Reloading: {self.page.url}')
        self.page.reload()
        self.wait_for_network_idle()

    @property
    def current_url(self) -> str:
        return self.page.url

    def title(self) -> str:
        return self.page.title()

    def take_screenshot(self, name: str) -> Path:
        """
        Save a full page screenshot as <screenshot_dir>/<name>.png.

        Returns:
            Path: Location of the written file.
        """
        self.screenshot_dir.mkdir(parents=True, exist_ok=True)
        path = self.screenshot_dir / f'{name}.png'
        self.page.screenshot(path=str(path), full_page=True)
        self.logger.info(f'Screenshot saved: {path}')
        return path

    def close(self) -> None:
        self.page.close()

    # Elements

    def find_element(self, selector: Union[str, Locator]) -> BaseElement:
        """
        Find a single element on the page.

        Args:
            selector (Union[str, Locator]): CSS or XPath selector, or a Playwright Locator object.

        Returns:
            BaseElement: A BaseElement object wrapping the located element.
        """
        if isinstance(selector, str):
            return BaseElement(self.page.locator(selector), self.page, self.logger, self.action_timeout,
                               self.query_timeout, selector)
        return BaseElement(selector, self.page, self.logger, self.action_timeout, self.query_timeout)

    def find_elements(self, selector: str, wait: bool = True) -> list[BaseElement]:
        """
        Find multiple elements on the page using the given selector.

        Args:
            selector (str): CSS or XPath selector.
            wait (bool): Whether to wait for the first element to become visible before proceeding. Default is True.

        Returns:
            list[BaseElement]: A list of BaseElement objects wrapping the located elements.
        """
        if wait:
            self.page.locator(selector).nth(0).wait_for(state='visible', timeout=self.action_timeout)
        return [self.find_element(locator) for locator in self.page.locator(selector).all()]

    def get_list_of_components(self, selector: str, component: Any) -> list:
        """
        Return a list of component objects found using the provided selector.

        Args:
            selector (str): CSS or XPath selector to locate components on the page.
            component (Any): The component class to instantiate for each located element.

        Returns:
            list: A list of component objects.
        """
        return [component(locator=locator, session=self) for locator in self.page.locator(selector).all()]

    # Selector shortcuts

    def click(self, selector: str) -> None:
        self.find_element(selector).click()

    def fill(self, selector: str, value: str) -> None:
        self.find_element(selector).fill(value)

    def select_option(self, selector: str, value: str) -> None:
        self.find_element(selector).select_option(value)

    def check(self, selector: str) -> None:
        self.find_element(selector).check()

    def is_element_visible(self, selector: str) -> bool:
        return self.find_element(selector).is_visible

    def get_text(self, selector: str) -> str:
        return self.find_element(selector).text

    def get_attribute(self, selector: str, attribute: str) -> Optional[str]:
        return self.find_element(selector).get_attribute(attribute)

    def has_class(self, selector: str, class_name: str) -> bool:
        return self.find_element(selector).has_class(class_name)

    def get_input_value(self, selector: str) -> str:
        return self.find_element(selector).value

    def page_contains_text(self, text: str) -> bool:
        """
        Check whether the given text is visible anywhere on the page.
        """
        try:
            return self.page.get_by_text(text).first.is_visible()
        except PlaywrightError:
            return False

    def wait_for_element(self, selector: str, timeout: int = 5000) -> BaseElement:
        """
        Wait for an element to become visible.

        Raises:
            playwright.sync_api.TimeoutError: If the element is not visible within the timeout.
        """
        return self.find_element(selector).wait_until_visible(timeout=timeout)

    def wait_for_element_hidden(self, selector: str, timeout: int = 5000) -> None:
        """
        Wait for an element to be hidden or detached.

        Raises:
            playwright.sync_api.TimeoutError: If the element is still visible after the timeout.
        """
        self.find_element(selector).wait_until_hidden(timeout=timeout)

    def scroll_to_element(self, selector: str) -> None:
        self.find_element(selector).scroll_into_view()

    def scroll_to_bottom(self) -> None:
        """
        Scroll to the bottom of the page.
        """
        self.page.evaluate('window.scrollTo(0, document.body.scrollHeight)')

    def press_key(self, key: str) -> None:
        """
        Press a keyboard key on whatever element has focus, e.g. "Enter" or "Escape".
        """
        self.logger.info(f'Pressing key: {key}')
        self.page.keyboard.press(key)
