from pages.common.base_element import BaseElement
from pages.common.browser_session import BrowserSession

# Rendered in the header only while a customer is signed in.
AUTHENTICATED_MARKER = '[data-testid="user-menu"]'


class HomePage:

    def __init__(self, session: BrowserSession):
        self.session = session

    @property
    def search_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="search"]')

    @property
    def search_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="search-button"]')

    @property
    def cart_icon(self) -> BaseElement:
        return self.session.find_element('[data-testid="cart-icon"]')

    @property
    def cart_badge(self) -> BaseElement:
        return self.session.find_element('[data-testid="cart-count"]')

    @property
    def user_menu(self) -> BaseElement:
        return self.session.find_element(AUTHENTICATED_MARKER)

    @property
    def logout_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="logout-button"]')

    @property
    def categories_menu(self) -> BaseElement:
        return self.session.find_element('[data-testid="categories"]')

    def navigate_to_home(self) -> None:
        self.session.goto('/')

    def search_product(self, product_name: str) -> None:
        self.search_input.fill(product_name)
        self.session.wait_for_navigation(self.search_button.click)

    def open_cart(self) -> None:
        self.session.wait_for_navigation(self.cart_icon.click)

    def open_user_menu(self) -> None:
        self.user_menu.click()

    def logout(self) -> None:
        self.open_user_menu()
        self.session.wait_for_navigation(self.logout_button.click)

    def is_cart_icon_visible(self) -> bool:
        return self.cart_icon.is_visible

    def get_cart_count(self) -> str:
        """
        Number shown on the cart badge, '0' when there is no badge.
        """
        if not self.cart_badge.is_visible:
            return '0'
        return self.cart_badge.text or '0'

    def is_logged_in(self) -> bool:
        return self.user_menu.is_visible
