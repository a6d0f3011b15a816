from typing import Optional

from pages.common.base_element import BaseElement
from pages.common.browser_session import BrowserSession
from pages.storefront.home_page import AUTHENTICATED_MARKER


class LoginPage:
    """
    Sign-in, registration and password recovery screens of the storefront.
    """

    def __init__(self, session: BrowserSession):
        self.session = session

    # Login form

    @property
    def email_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="login-email"]')

    @property
    def password_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="login-password"]')

    @property
    def login_button(self) -> BaseElement:
        return self.session.find_element('button[type="submit"]:has-text("Sign In")')

    @property
    def error_message(self) -> BaseElement:
        return self.session.find_element('[data-testid="error-message"]')

    @property
    def welcome_panel(self) -> BaseElement:
        return self.session.find_element('[data-testid="welcome"]')

    # Registration form

    @property
    def register_link(self) -> BaseElement:
        return self.session.find_element('[data-testid="register-link"]')

    @property
    def register_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="register-submit"]')

    @property
    def first_name_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="first-name"]')

    @property
    def last_name_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="last-name"]')

    @property
    def register_email_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="register-email"]')

    @property
    def register_password_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="register-password"]')

    @property
    def confirm_password_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="confirm-password"]')

    @property
    def agree_checkbox(self) -> BaseElement:
        return self.session.find_element('[data-testid="agree-terms"]')

    # Password recovery

    @property
    def forgot_password_link(self) -> BaseElement:
        return self.session.find_element('[data-testid="forgot-password"]')

    @property
    def reset_email_input(self) -> BaseElement:
        return self.session.find_element('[data-testid="reset-email"]')

    @property
    def reset_button(self) -> BaseElement:
        return self.session.find_element('[data-testid="reset-submit"]')

    @property
    def reset_confirmation(self) -> BaseElement:
        return self.session.find_element('[data-testid="reset-confirmation"]')

    def navigate_to_login(self) -> None:
        self.session.goto('/login')

    def login(self, email: str, password: str) -> None:
        """
        Submit the sign-in form with the given credentials.
        """
        self.email_input.fill(email)
        self.password_input.fill(password)
        self.login_button.click()
        self.session.wait_for_network_idle()

    def get_error_message(self) -> str:
        if not self.error_message.is_visible:
            return ''
        return self.error_message.text

    def is_error_visible(self) -> bool:
        return self.error_message.is_visible

    def navigate_to_register(self) -> None:
        self.session.wait_for_navigation(self.register_link.click)

    def fill_registration_form(self, email: str, password: str, first_name: str = 'Test',
                               last_name: str = 'User') -> None:
        self.first_name_input.fill(first_name)
        self.last_name_input.fill(last_name)
        self.register_email_input.fill(email)
        self.register_password_input.fill(password)
        self.confirm_password_input.fill(password)

    def submit_registration(self) -> None:
        """
        Accept the terms and submit the registration form.
        """
        self.agree_checkbox.check()
        self.register_button.click()
        self.session.wait_for_network_idle()

    def register(self, email: str, password: str, first_name: Optional[str] = None,
                 last_name: Optional[str] = None) -> None:
        """
        Complete registration flow, starting from the login screen.
        """
        self.navigate_to_register()
        self.fill_registration_form(email, password, first_name or 'Test', last_name or 'User')
        self.submit_registration()

    def navigate_to_forgot_password(self) -> None:
        self.session.wait_for_navigation(self.forgot_password_link.click)

    def request_password_reset(self, email: str) -> None:
        self.reset_email_input.fill(email)
        self.reset_button.click()
        self.session.wait_for_network_idle()

    def get_reset_confirmation(self) -> str:
        return self.reset_confirmation.text if self.reset_confirmation.is_visible else ''

    def is_login_form_visible(self) -> bool:
        return self.email_input.is_visible

    def is_registration_form_visible(self) -> bool:
        return self.register_email_input.is_visible and self.register_button.is_visible

    def is_reset_form_visible(self) -> bool:
        return self.reset_email_input.is_visible

    def is_logged_in(self) -> bool:
        return self.session.is_element_visible(AUTHENTICATED_MARKER)
