from data.test_data import CheckoutDetails
from pages.common.base_element import BaseElement
from pages.common.browser_session import BrowserSession


class CheckoutPage:
    """
    Checkout screen: shipping, billing and card details, shipping method, gift cards and order placement.
    """

    def __init__(self, session: BrowserSession):
        self.session = session

    # Shipping information

    @property
    def first_name_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-first-name"]')

    @property
    def last_name_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-last-name"]')

    @property
    def email_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-email"]')

    @property
    def phone_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-phone"]')

    @property
    def address_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-address"]')

    @property
    def city_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-city"]')

    @property
    def state_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-state"]')

    @property
    def zip_code_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-zip"]')

    @property
    def country_select(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-country"]')

    # Billing

    @property
    def same_as_shipping_checkbox(self) -> BaseElement:
        return self.session.find_element('[data-testid="same-as-shipping"]')

    @property
    def billing_first_name_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="billing-first-name"]')

    @property
    def billing_last_name_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="billing-last-name"]')

    @property
    def billing_address_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="billing-address"]')

    # Payment

    @property
    def card_name_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="card-name"]')

    @property
    def card_number_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="card-number"]')

    @property
    def card_expiry_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="card-expiry"]')

    @property
    def card_cvc_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="card-cvc"]')

    @property
    def gift_card_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="gift-card"]')

    @property
    def apply_gift_card_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="apply-gift"]')

    # Shipping method and summary

    @property
    def shipping_options(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-method"]')

    @property
    def order_summary(self) -> BaseElement:
        return self.session.find_element('[data-testid="order-summary"]')

    @property
    def subtotal_price(self) -> BaseElement:
        return self.session.find_element('[data-testid="summary-subtotal"]')

    @property
    def shipping_price(self) -> BaseElement:
        return self.session.find_element('[data-testid="summary-shipping"]')

    @property
    def tax_price(self) -> BaseElement:
        return self.session.find_element('[data-testid="summary-tax"]')

    @property
    def total_price(self) -> BaseElement:
        return self.session.find_element('[data-testid="summary-total"]')

    # Buttons, messages and tabs

    @property
    def place_order_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="place-order"]')

    @property
    def submit_payment_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="submit-payment"]')

    @property
    def error_message(self) -> BaseElement:
        return self.session.find_element('[data-testid="error"]')

    @property
    def success_message(self) -> BaseElement:
        return self.session.find_element('[data-testid="success"]')

    @property
    def shipping_tab(self) -> BaseElement:
        return self.session.find_element('[data-testid="shipping-tab"]')

    @property
    def payment_tab(self) -> BaseElement:
        return self.session.find_element('[data-testid="payment-tab"]')

    @property
    def review_tab(self) -> BaseElement:
        return self.session.find_element('[data-testid="review-tab"]')

    @property
    def order_confirmation(self) -> BaseElement:
        return self.session.find_element('[data-testid="order-confirmation"]')

    @property
    def order_number(self) -> BaseElement:
        return self.session.find_element('[data-testid="order-number"]')

    def navigate_to_checkout(self) -> None:
        self.session.goto('/checkout')

    def fill_shipping_info(self, details: CheckoutDetails) -> None:
        self.first_name_input.fill(details.first_name)
        self.last_name_input.fill(details.last_name)
        self.email_input.fill(details.email)
        self.phone_input.fill(details.phone)
        self.address_input.fill(details.address)
        self.city_input.fill(details.city)
        self.state_input.fill(details.state)
        self.zip_code_input.fill(details.zip_code)
        self.country_select.select_option(details.country)

    def set_same_as_shipping(self) -> None:
        self.same_as_shipping_checkbox.check()

    def is_same_as_shipping_checked(self) -> bool:
        return self.same_as_shipping_checkbox.is_checked

    def fill_billing_info(self, first_name: str, last_name: str, address: str) -> None:
        self.billing_first_name_input.fill(first_name)
        self.billing_last_name_input.fill(last_name)
        self.billing_address_input.fill(address)

    def fill_card_info(self, details: CheckoutDetails) -> None:
        self.card_name_input.fill(details.card_name)
        self.card_number_input.fill(details.card_number)
        self.card_expiry_input.fill(details.expiry)
        self.card_cvc_input.fill(details.cvc)

    def select_shipping_method(self, method_index: int) -> None:
        self.shipping_options.nth(method_index).check()
        self.session.wait_for_network_idle()

    def get_shipping_method_count(self) -> int:
        return self.shipping_options.count

    def apply_gift_card(self, gift_card_code: str) -> None:
        self.gift_card_input.fill(gift_card_code)
        self.apply_gift_card_button.click()
        self.session.wait_for_network_idle()

    def is_gift_card_available(self) -> bool:
        return self.gift_card_input.is_visible

    def get_subtotal(self) -> str:
        return self.subtotal_price.text

    def get_shipping_cost(self) -> str:
        return self.shipping_price.text

    def get_tax(self) -> str:
        return self.tax_price.text

    def get_total_price(self) -> str:
        return self.total_price.text

    def get_shipping_email(self) -> str:
        return self.email_input.value

    def get_card_name(self) -> str:
        return self.card_name_input.value

    def place_order(self) -> None:
        """
        Submit the order form. Validation errors keep the customer on the checkout screen,
        a valid order moves on to the payment step.
        """
        self.place_order_button.click()
        self.session.wait_for_network_idle()

    def submit_payment(self) -> None:
        self.session.wait_for_navigation(self.submit_payment_button.click)

    def complete_checkout(self, details: CheckoutDetails, shipping_method: int = 0) -> None:
        """
        Run the whole checkout with billing same as shipping.

        Every step acts on the live page, so a missing element fails the step with a Playwright
        TimeoutError and the remaining steps are not attempted. Nothing is rolled back.

        :param details: Shipping and card data.
        :param shipping_method: Index of the shipping method radio to pick.
        """
        self.session.logger.info(f'Completing checkout for: {details.email}')
        self.fill_shipping_info(details)
        self.set_same_as_shipping()
        self.fill_card_info(details)
        self.select_shipping_method(shipping_method)
        self.place_order()
        self.submit_payment()

    def get_error_message(self) -> str:
        return self.error_message.text

    def is_error_visible(self) -> bool:
        return self.error_message.is_visible

    def is_success_message_visible(self) -> bool:
        return self.success_message.is_visible

    def is_order_confirmed(self) -> bool:
        return self.order_confirmation.is_visible

    def get_order_number(self) -> str:
        return self.order_number.text

    def are_tabs_visible(self) -> bool:
        return self.shipping_tab.is_visible and self.payment_tab.is_visible

    def go_to_shipping_tab(self) -> None:
        self.shipping_tab.click()
        self.session.wait_for_network_idle()

    def go_to_payment_tab(self) -> None:
        self.payment_tab.click()
        self.session.wait_for_network_idle()

    def go_to_review_tab(self) -> None:
        self.review_tab.click()
        self.session.wait_for_network_idle()
