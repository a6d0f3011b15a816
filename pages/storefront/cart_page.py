from typing import Optional

from playwright.sync_api import Locator

from pages.common.base_component import BaseComponent, exact_text
from pages.common.base_element import BaseElement
from pages.common.browser_session import BrowserSession


class CartRow(BaseComponent):
    selector = '[data-testid="cart-item"]'

    def __init__(self, session: BrowserSession, selector: str = selector, locator: Optional[Locator] = None):
        super().__init__(locator or session.page.locator(selector), session)

    @property
    def name(self) -> str:
        return self.child_el('[data-testid="item-name"]').text

    @property
    def price(self) -> str:
        return self.child_el('[data-testid="item-price"]').text

    @property
    def quantity(self) -> str:
        return self.child_el('[data-testid="item-quantity"]').value

    @property
    def remove_button(self) -> BaseElement:
        return self.child_el('[data-testid="remove-item"]')


class CartPage:
    """
    Shopping cart: line items, quantities, coupons, shipping choice and price breakdown.
    """

    def __init__(self, session: BrowserSession):
        self.session = session

    # Line items

    @property
    def cart_items(self) -> BaseElement:
        return self.session.find_element(CartRow.selector)

    @property
    def item_names(self) -> BaseElement:
        return self.session.find_element('[data-testid="item-name"]')

    @property
    def item_prices(self) -> BaseElement:
        return self.session.find_element('[data-testid="item-price"]')

    @property
    def item_quantities(self) -> BaseElement:
        return self.session.find_element('[data-testid="item-quantity"]')

    @property
    def remove_item_buttons(self) -> BaseElement:
        return self.session.find_element('[data-testid="remove-item"]')

    @property
    def increase_quantity_buttons(self) -> BaseElement:
        return self.session.find_element('[data-testid="increase-qty"]')

    @property
    def decrease_quantity_buttons(self) -> BaseElement:
        return self.session.find_element('[data-testid="decrease-qty"]')

    @property
    def rows(self) -> list[CartRow]:
        return self.session.get_list_of_components(selector=CartRow.selector, component=CartRow)

    # Coupons

    @property
    def coupon_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="coupon"]')

    @property
    def apply_coupon_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="apply-coupon"]')

    @property
    def coupon_message(self) -> BaseElement:
        return self.session.find_element('[data-testid="coupon-message"]')

    @property
    def remove_coupon_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="remove-coupon"]')

    # Price breakdown

    @property
    def subtotal(self) -> BaseElement:
        return self.session.find_element('[data-testid="subtotal"]')

    @property
    def shipping_cost(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping"]')

    @property
    def tax_cost(self) -> BaseElement:
        return self.session.find_element('[data-testid="tax"]')

    @property
    def discount(self) -> BaseElement:
        return self.session.find_element('[data-testid="discount"]')

    @property
    def total_price(self) -> BaseElement:
        return self.session.find_element('[data-testid="total"]')

    @property
    def shipping_options(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-option"]')

    # Actions

    @property
    def continue_shopping_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="continue-shopping"]')

    @property
    def checkout_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="checkout"]')

    @property
    def empty_cart_message(self) -> BaseElement:
        return self.session.find_element('[data-testid="empty-cart"]')

    def navigate_to_cart(self) -> None:
        self.session.goto('/cart')

    def get_cart_item_count(self) -> int:
        return self.cart_items.count

    def get_all_item_names(self) -> list[str]:
        return self.item_names.all_texts

    def get_all_item_prices(self) -> list[str]:
        return self.item_prices.all_texts

    def get_first_item_quantity(self) -> str:
        return self.item_quantities.first.value

    def change_quantity(self, item_index: int, quantity: int) -> None:
        self.item_quantities.nth(item_index).fill(str(quantity))
        self.session.wait_for_network_idle()

    def increase_item_quantity(self, item_index: int) -> None:
        self.increase_quantity_buttons.nth(item_index).click()
        self.session.wait_for_network_idle()

    def decrease_item_quantity(self, item_index: int) -> None:
        self.decrease_quantity_buttons.nth(item_index).click()
        self.session.wait_for_network_idle()

    def remove_item(self, item_index: int) -> None:
        self.remove_item_buttons.nth(item_index).click()
        self.session.wait_for_network_idle()

    def remove_item_by_name(self, item_name: str) -> None:
        page = self.session.page
        locator = page.locator(CartRow.selector).filter(
            has=page.locator('[data-testid="item-name"]', has_text=exact_text(item_name)))
        CartRow(self.session, locator=locator).remove_button.click()
        self.session.wait_for_network_idle()

    def apply_coupon(self, coupon_code: str) -> None:
        """
        Apply a coupon or discount code. The outcome is reported in the coupon message.
        """
        self.coupon_input.fill(coupon_code)
        self.apply_coupon_button.click()
        self.session.wait_for_network_idle()

    def get_coupon_message(self) -> str:
        return self.coupon_message.text

    def remove_coupon(self) -> None:
        self.remove_coupon_button.click()
        self.session.wait_for_network_idle()

    def get_subtotal(self) -> str:
        return self.subtotal.text

    def get_shipping_cost(self) -> str:
        return self.shipping_cost.text

    def get_tax_cost(self) -> str:
        return self.tax_cost.text

    def get_discount(self) -> str:
        return self.discount.text

    def get_total_price(self) -> str:
        return self.total_price.text

    def select_shipping_option(self, option_index: int) -> None:
        self.shipping_options.nth(option_index).check()
        self.session.wait_for_network_idle()

    def go_to_checkout(self) -> None:
        self.session.wait_for_navigation(self.checkout_button.click)

    def is_cart_empty(self) -> bool:
        return self.empty_cart_message.is_visible

    def is_continue_shopping_visible(self) -> bool:
        return self.continue_shopping_button.is_visible

    def continue_shopping(self) -> None:
        self.session.wait_for_navigation(self.continue_shopping_button.click)
