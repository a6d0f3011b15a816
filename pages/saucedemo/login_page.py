from data.test_data import Credentials
from pages.common.base_element import BaseElement
from pages.common.browser_session import BrowserSession


class LoginPage:

    def __init__(self, session: BrowserSession):
        self.session = session

    def open_page(self) -> None:
        """
        Open the login page.
        """
        self.session.goto('/')

    @property
    def username_input(self) -> BaseElement:
        return self.session.find_element('//input[@data-test="username"]')

    @property
    def password_input(self) -> BaseElement:
        return self.session.find_element('//input[@data-test="password"]')

    @property
    def login_button(self) -> BaseElement:
        return self.session.find_element('//input[@data-test="login-button"]')

    @property
    def error_message(self) -> BaseElement:
        return self.session.find_element('//h3[@data-test="error"]')

    def login(self, credentials: Credentials) -> None:
        self.username_input.fill(credentials.email)
        self.password_input.fill(credentials.password)
        self.login_button.click()
        self.session.wait_for_network_idle()

    def get_error_message(self) -> str:
        return self.error_message.text

    def is_error_visible(self) -> bool:
        return self.error_message.is_visible

    def is_login_form_visible(self) -> bool:
        return self.username_input.is_visible and self.login_button.is_visible
