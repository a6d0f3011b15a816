from typing import Optional
from urllib.parse import urlencode

from playwright.sync_api import Locator

from pages.common.base_component import BaseComponent, exact_text
from pages.common.base_element import BaseElement
from pages.common.browser_session import BrowserSession


class ProductTile(BaseComponent):
    selector = '[data-testid="product-item"]'

    def __init__(self, session: BrowserSession, selector: str = selector, locator: Optional[Locator] = None):
        super().__init__(locator or session.page.locator(selector), session)

    @property
    def name_link(self) -> BaseElement:
        return self.child_el('[data-testid="product-name"]')

    @property
    def name(self) -> str:
        return self.name_link.text

    @property
    def price(self) -> str:
        return self.child_el('[data-testid="product-price"]').text

    @property
    def rating(self) -> int:
        rating = self.child_el('[data-testid="product-rating"]').get_attribute('data-rating')
        return int(rating) if rating else 0

    @property
    def add_to_cart_button(self) -> BaseElement:
        return self.child_el('[data-testid="add-to-cart"]')

    def open(self) -> None:
        self.session.wait_for_navigation(self.name_link.click)

    def add_to_cart(self) -> None:
        self.add_to_cart_button.click()
        self.session.wait_for_network_idle()


class ProductsPage:
    """
    Product catalog: listing, filtering, sorting, pagination and the product details screen.
    """

    def __init__(self, session: BrowserSession):
        self.session = session

    # Products

    @property
    def product_items(self) -> BaseElement:
        return self.session.find_element(ProductTile.selector)

    @property
    def product_names(self) -> BaseElement:
        return self.session.find_element('[data-testid="product-name"]')

    @property
    def product_prices(self) -> BaseElement:
        return self.session.find_element('[data-testid="product-price"]')

    @property
    def add_to_cart_buttons(self) -> BaseElement:
        return self.session.find_element('[data-testid="add-to-cart"]')

    @property
    def product_tiles(self) -> list[ProductTile]:
        return self.session.get_list_of_components(selector=ProductTile.selector, component=ProductTile)

    # Filters

    @property
    def price_filter_min(self) -> BaseElement:
        return self.session.find_element('[data-testid="price-min"]')

    @property
    def price_filter_max(self) -> BaseElement:
        return self.session.find_element('[data-testid="price-max"]')

    @property
    def category_filter(self) -> BaseElement:
        return self.session.find_element('[data-testid="category-filter"]')

    @property
    def rating_filter(self) -> BaseElement:
        return self.session.find_element('[data-testid="rating-filter"]')

    @property
    def apply_filters_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="apply-filters"]')

    @property
    def clear_filters_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="clear-filters"]')

    @property
    def sort_dropdown(self) -> BaseElement:
        return self.session.find_element('[data-testid="sort"]')

    # Pagination

    @property
    def next_page_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="next-page"]')

    @property
    def previous_page_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="prev-page"]')

    @property
    def page_info(self) -> BaseElement:
        return self.session.find_element('[data-testid="page-info"]')

    # Other

    @property
    def no_results_message(self) -> BaseElement:
        return self.session.find_element('[data-testid="no-results"]')

    @property
    def loading_spinner(self) -> BaseElement:
        return self.session.find_element('[data-testid="loading"]')

    @property
    def detail_name(self) -> BaseElement:
        return self.session.find_element('[data-testid="product-detail-name"]')

    def navigate_to_products(self, category: Optional[str] = None) -> None:
        path = f'/products?{urlencode({"category": category})}' if category else '/products'
        self.session.goto(path)

    def get_product_count(self) -> int:
        return self.product_items.count

    def get_all_product_names(self) -> list[str]:
        return self.product_names.all_texts

    def get_all_product_prices(self) -> list[str]:
        return self.product_prices.all_texts

    def find_tile(self, product_name: str) -> ProductTile:
        """
        Tile of the product with the given name. Any action on it fails when the product is not listed.
        """
        page = self.session.page
        locator = page.locator(ProductTile.selector).filter(
            has=page.locator('[data-testid="product-name"]', has_text=exact_text(product_name)))
        return ProductTile(self.session, locator=locator)

    def click_product_by_name(self, product_name: str) -> None:
        self.find_tile(product_name).open()

    def add_first_product_to_cart(self) -> None:
        self.add_to_cart_buttons.first.click()
        self.session.wait_for_network_idle()

    def add_product_to_cart(self, product_name: str) -> None:
        self.find_tile(product_name).add_to_cart()

    def set_min_price(self, min_price: str) -> None:
        self.price_filter_min.fill(min_price)

    def set_max_price(self, max_price: str) -> None:
        self.price_filter_max.fill(max_price)

    def filter_by_price(self, min_price: str, max_price: str) -> None:
        self.set_min_price(min_price)
        self.set_max_price(max_price)
        self.session.wait_for_navigation(self.apply_filters_button.click)

    def filter_by_category(self, category: str) -> None:
        self.category_filter.select_option(category)
        self.session.wait_for_navigation(self.apply_filters_button.click)

    def filter_by_rating(self, rating: str) -> None:
        self.rating_filter.select_option(rating)
        self.session.wait_for_navigation(self.apply_filters_button.click)

    def clear_all_filters(self) -> None:
        self.session.wait_for_navigation(self.clear_filters_button.click)

    def sort_by(self, sort_option: str) -> None:
        """
        Sort the listing. Picking an option reloads the catalog.

        :param sort_option: One of 'price', 'rating' or 'newest'.
        """
        self.session.wait_for_navigation(lambda: self.sort_dropdown.select_option(sort_option))

    def has_results(self) -> bool:
        return self.get_product_count() > 0

    def is_no_results_message_visible(self) -> bool:
        return self.no_results_message.is_visible

    def is_next_page_available(self) -> bool:
        return self.next_page_button.is_visible

    def go_to_next_page(self) -> None:
        self.session.wait_for_navigation(self.next_page_button.click)

    def go_to_previous_page(self) -> None:
        self.session.wait_for_navigation(self.previous_page_button.click)

    def get_page_info(self) -> str:
        return self.page_info.text

    def get_detail_name(self) -> str:
        return self.detail_name.text

    def wait_for_products_to_load(self) -> None:
        """
        Wait for the loading spinner to go away and the first product tile to show up.

        :raises playwright.sync_api.TimeoutError: If no product is rendered in time.
        """
        self.loading_spinner.wait_until_hidden()
        self.product_items.first.wait_until_visible(timeout=self.session.action_timeout)
