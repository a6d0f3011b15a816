from typing import Optional

from playwright.sync_api import Locator

from pages.common.base_component import BaseComponent, exact_text
from pages.common.base_element import BaseElement
from pages.common.browser_session import BrowserSession


class ProductCard(BaseComponent):
    selector = '//div[@data-test="inventory-item"]'

    def __init__(self, session: BrowserSession, selector: str = selector, locator: Optional[Locator] = None):
        """
        Initialize a ProductCard component.

        Args:
            session (BrowserSession): Session of the inventory page.
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
        return self.child_el('//div[@class="inventory_item_desc"]').text

    @property
    def price(self) -> str:
        return self.child_el('//div[@class="inventory_item_price"]').text

    @property
    def link(self) -> BaseElement:
        return self.child_el('//div[@class="inventory_item_label"]/a')

    @property
    def add_to_cart_button(self) -> BaseElement:
        return self.child_el('//button[text()="Add to cart"]')

    @property
    def remove_from_cart_button(self) -> BaseElement:
        return self.child_el('//button[text()="Remove"]')

    @property
    def is_added_to_cart(self) -> bool:
        """
        Check if the product is added to the cart.

        :return: True if the product is added to the cart, False otherwise.
        """
        return self.remove_from_cart_button.is_visible and not self.add_to_cart_button.is_visible


class ProductsPage:
    """
    The inventory screen SauceDemo lands on after login, including the header (cart link, burger menu).
    """

    def __init__(self, session: BrowserSession):
        self.session = session

    def open_page(self) -> None:
        self.session.goto('/inventory.html')

    @property
    def title(self) -> BaseElement:
        return self.session.find_element('//span[@data-test="title"]')

    @property
    def inventory_list(self) -> BaseElement:
        return self.session.find_element('//div[@data-test="inventory-list"]')

    @property
    def cart_button(self) -> BaseElement:
        return self.session.find_element('//a[@data-test="shopping-cart-link"]')

    @property
    def sort_dropdown(self) -> BaseElement:
        return self.session.find_element('//select[@data-test="product-sort-container"]')

    @property
    def cart_badge(self) -> BaseElement:
        return self.session.find_element('//span[@data-test="shopping-cart-badge"]')

    @property
    def menu_button(self) -> BaseElement:
        return self.session.find_element('//button[@id="react-burger-menu-btn"]')

    @property
    def logout_link(self) -> BaseElement:
        return self.session.find_element('//a[@data-test="logout-sidebar-link"]')

    @property
    def product_cards(self) -> list[ProductCard]:
        """
        Get all product cards on the page.

        :return: List of ProductCard objects.
        """
        return self.session.get_list_of_components(selector=ProductCard.selector, component=ProductCard)

    def get_product_card(self, name: str) -> ProductCard:
        """
        Get the card whose title matches the given product name. Any action on it fails when the product
        is not listed.
        """
        page = self.session.page
        locator = page.locator(ProductCard.selector).filter(
            has=page.locator('[data-test="inventory-item-name"]', has_text=exact_text(name)))
        return ProductCard(self.session, locator=locator)

    def add_product_to_cart(self, name: str) -> None:
        self.get_product_card(name).add_to_cart_button.click()

    def remove_product_from_cart(self, name: str) -> None:
        self.get_product_card(name).remove_from_cart_button.click()

    def get_cart_count(self) -> str:
        """
        Number shown on the cart badge, '0' when the badge is not rendered.
        """
        if not self.cart_badge.is_visible:
            return '0'
        return self.cart_badge.text or '0'

    def open_cart(self) -> None:
        self.cart_button.click()
        self.session.wait_for_network_idle()

    def sort_by(self, option: str) -> None:
        """
        Sort the inventory.

        :param option: One of 'az', 'za', 'lohi', 'hilo'.
        """
        self.sort_dropdown.select_option(option)

    def get_product_names(self) -> list[str]:
        return self.session.find_element('//div[@data-test="inventory-item-name"]').all_texts

    def get_product_prices(self) -> list[float]:
        prices = self.session.find_element('//div[@data-test="inventory-item-price"]').all_texts
        return [float(price.replace('$', '')) for price in prices]

    def wait_until_loaded(self) -> None:
        self.sort_dropdown.wait_until_visible()

    def is_logged_in(self) -> bool:
        return self.inventory_list.is_visible

    def logout(self) -> None:
        self.menu_button.click()
        self.logout_link.click()
        self.session.wait_for_network_idle()
