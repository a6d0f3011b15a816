"""
Fixtures for the generic storefront suite.

Unless --live-storefront (or STOREFRONT_LIVE=true) is given, every request to BASE_URL is answered by
StorefrontStub, so the suite runs without a deployed shop.
"""
import pytest
from playwright.sync_api import Page

from data.test_data import STOREFRONT_CATALOG, Credentials, PromoCodes, StorefrontUsers
from pages import StorefrontPages
from pages.common.browser_session import BrowserSession
from pages.storefront.cart_page import CartPage
from pages.storefront.checkout_page import CheckoutPage
from pages.storefront.home_page import HomePage
from pages.storefront.login_page import LoginPage
from pages.storefront.products_page import ProductsPage
from utils.storefront_stub import StorefrontStub


@pytest.fixture
def storefront_stub(page, settings, logger):
    """
    Route the storefront host to the in-browser stub for the duration of the test.

    Yields:
        Optional[StorefrontStub]: The active stub, or None when running against a live storefront.
    """
    if settings.live_storefront:
        logger.info(f"Running against live storefront: {settings.base_url}")
        yield None
        return
    accounts = [StorefrontUsers.VALID_USER]
    if settings.username != StorefrontUsers.VALID_USER.email or settings.password != StorefrontUsers.VALID_USER.password:
        accounts.append(Credentials(settings.username, settings.password, 'Test', 'User'))
    stub = StorefrontStub(
        settings.base_url,
        STOREFRONT_CATALOG,
        accounts=accounts,
        locked_accounts=[StorefrontUsers.LOCKED_USER],
        promo_codes=PromoCodes.known(),
        logger=logger,
    )
    with stub.serve(page):
        yield stub


@pytest.fixture
def storefront_session(page, settings, logger, storefront_stub) -> BrowserSession:
    return BrowserSession(page, settings.base_url, logger, action_timeout=settings.action_timeout,
                          screenshot_dir=settings.screenshot_dir)


@pytest.fixture
def storefront(storefront_session) -> StorefrontPages:
    return StorefrontPages(storefront_session)


@pytest.fixture
def login_page(storefront) -> LoginPage:
    return storefront.login_page


@pytest.fixture
def home_page(storefront) -> HomePage:
    return storefront.home_page


@pytest.fixture
def products_page(storefront) -> ProductsPage:
    return storefront.products_page


@pytest.fixture
def cart_page(storefront) -> CartPage:
    return storefront.cart_page


@pytest.fixture
def checkout_page(storefront) -> CheckoutPage:
    return storefront.checkout_page


@pytest.fixture
def authenticated_page(login_page, settings) -> Page:
    """
    Sign in with the configured credentials and hand over the page once the network is idle.

    Returns:
        Page: The signed-in page.
    """
    login_page.navigate_to_login()
    login_page.login(settings.username, settings.password)
    login_page.session.wait_for_network_idle()
    return login_page.session.page


@pytest.fixture
def products_listing(products_page) -> ProductsPage:
    """
    Products page opened and rendered.
    """
    products_page.navigate_to_products()
    products_page.wait_for_products_to_load()
    return products_page


@pytest.fixture
def cart_with_product(products_listing, cart_page) -> CartPage:
    """
    Cart page holding one unit of the first listed product.
    """
    products_listing.add_first_product_to_cart()
    cart_page.navigate_to_cart()
    return cart_page
