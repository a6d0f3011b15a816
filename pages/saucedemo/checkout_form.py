from data.test_data import CheckoutDetails
from pages.common.base_element import BaseElement
from pages.common.browser_session import BrowserSession


class CheckoutForm:
    """
    SauceDemo's three checkout screens: your information, overview and complete.
    """

    def __init__(self, session: BrowserSession):
        self.session = session

    @property
    def title(self) -> BaseElement:
        return self.session.find_element('//span[@data-test="title"]')

    @property
    def first_name_input(self) -> BaseElement:
        return self.session.find_element('//input[@data-test="firstName"]')

    @property
    def last_name_input(self) -> BaseElement:
        return self.session.find_element('//input[@data-test="lastName"]')

    @property
    def zip_code_input(self) -> BaseElement:
        return self.session.find_element('//input[@data-test="postalCode"]')

    @property
    def cancel_button(self) -> BaseElement:
        return self.session.find_element('//button[@data-test="cancel"]')

    @property
    def continue_button(self) -> BaseElement:
        return self.session.find_element('//input[@data-test="continue"]')

    @property
    def finish_button(self) -> BaseElement:
        return self.session.find_element('//button[@data-test="finish"]')

    @property
    def error_message(self) -> BaseElement:
        return self.session.find_element('//h3[@data-test="error"]')

    @property
    def pony_express_image(self) -> BaseElement:
        return self.session.find_element('//img[@data-test="pony-express"]')

    @property
    def complete_header(self) -> BaseElement:
        return self.session.find_element('//h2[@data-test="complete-header"]')

    @property
    def complete_text(self) -> BaseElement:
        return self.session.find_element('//div[@data-test="complete-text"]')

    @property
    def back_to_products_button(self) -> BaseElement:
        return self.session.find_element('//button[@data-test="back-to-products"]')

    def fill_information(self, details: CheckoutDetails) -> None:
        self.first_name_input.fill(details.first_name)
        self.last_name_input.fill(details.last_name)
        self.zip_code_input.fill(details.zip_code)

    def continue_checkout(self) -> None:
        self.continue_button.click()
        self.session.wait_for_network_idle()

    def finish(self) -> None:
        self.finish_button.click()
        self.session.wait_for_network_idle()

    def cancel(self) -> None:
        self.cancel_button.click()
        self.session.wait_for_network_idle()

    def get_error_message(self) -> str:
        return self.error_message.text
