from functools import cached_property

from pages.common.browser_session import BrowserSession
from pages.saucedemo.cart_page import CartPage as SauceCartPage
from pages.saucedemo.checkout_form import CheckoutForm
from pages.saucedemo.login_page import LoginPage as SauceLoginPage
from pages.saucedemo.products_page import ProductsPage as SauceProductsPage
from pages.storefront.cart_page import CartPage
from pages.storefront.checkout_page import CheckoutPage
from pages.storefront.home_page import HomePage
from pages.storefront.login_page import LoginPage
from pages.storefront.products_page import ProductsPage


class StorefrontPages:
    """
    Provides access to all storefront pages bound to one browser session.
    """

    def __init__(self, session: BrowserSession):
        self.session = session

    @cached_property
    def login_page(self) -> LoginPage:
        return LoginPage(self.session)

    @cached_property
    def home_page(self) -> HomePage:
        return HomePage(self.session)

    @cached_property
    def products_page(self) -> ProductsPage:
        return ProductsPage(self.session)

    @cached_property
    def cart_page(self) -> CartPage:
        return CartPage(self.session)

    @cached_property
    def checkout_page(self) -> CheckoutPage:
        return CheckoutPage(self.session)


class SauceDemoPages:
    """
    Provides access to all SauceDemo pages bound to one browser session.
    """

    def __init__(self, session: BrowserSession):
        self.session = session

    @cached_property
    def login_page(self) -> SauceLoginPage:
        return SauceLoginPage(self.session)

    @cached_property
    def products_page(self) -> SauceProductsPage:
        return SauceProductsPage(self.session)

    @cached_property
    def cart_page(self) -> SauceCartPage:
        return SauceCartPage(self.session)

    @cached_property
    def checkout_form(self) -> CheckoutForm:
        return CheckoutForm(self.session)
