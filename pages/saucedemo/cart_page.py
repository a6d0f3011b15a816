from typing import Optional

from playwright.sync_api import Locator

from pages.common.base_component import BaseComponent
from pages.common.base_element import BaseElement
from pages.common.browser_session import BrowserSession


class CartItem(BaseComponent):
    selector = '//div[@data-test="inventory-item"]'

    def __init__(self, session: BrowserSession, selector: str = selector, locator: Optional[Locator] = None):
        """
        Initialize a CartItem component.

        Args:
            session (BrowserSession): Session of the cart page.
            selector (str): The selector used to locate this component. Defaults to the class selector.
            locator (Optional[Locator]): An existing locator for this component. If provided,
                                         selector will be ignored. Defaults to None.
        """
        super().__init__(locator or session.page.locator(selector), session)

    @property
    def title(self) -> str:
        return self.child_el('//div[@data-test="inventory-item-name"]').text

    @property
    def description(self) -> str:
        return self.child_el('//div[@data-test="inventory-item-desc"]').text

    @property
    def price(self) -> str:
        return self.child_el('//div[@data-test="inventory-item-price"]').text

    @property
    def quantity(self) -> str:
        return self.child_el('//div[@data-test="item-quantity"]').text

    @property
    def remove_button(self) -> BaseElement:
        return self.child_el('//button[text()="Remove"]')


class CartPage:

    def __init__(self, session: BrowserSession):
        self.session = session

    @property
    def title(self) -> BaseElement:
        return self.session.find_element('//span[@data-test="title"]')

    @property
    def continue_shopping_button(self) -> BaseElement:
        return self.session.find_element('//button[@data-test="continue-shopping"]')

    @property
    def checkout_button(self) -> BaseElement:
        return self.session.find_element('//button[@data-test="checkout"]')

    @property
    def cart_items(self) -> list[CartItem]:
        """
        Get a list of CartItem components on the page.

        :return: List of CartItem components.
        """
        return self.session.get_list_of_components(selector=CartItem.selector, component=CartItem)

    def checkout(self) -> None:
        self.checkout_button.click()
        self.session.wait_for_network_idle()

    def continue_shopping(self) -> None:
        self.continue_shopping_button.click()
        self.session.wait_for_network_idle()
