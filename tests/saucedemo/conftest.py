"""
Fixtures for the SauceDemo suite. These tests drive the public site, so they are skipped when it is unreachable.
"""
import pytest
from playwright.sync_api import Error as PlaywrightError

from data.test_data import SauceDemoUsers
from pages import SauceDemoPages
from pages.common.browser_session import BrowserSession


@pytest.fixture(scope="session")
def saucedemo_available(playwright_instance, settings, logger) -> bool:
    """
    Probe the SauceDemo site once per session.

    Returns:
        bool: True when the site answered with a non-error status.
    """
    request_context = playwright_instance.request.new_context()
    try:
        response = request_context.get(settings.saucedemo_url, timeout=settings.action_timeout)
        available = response.ok
    except PlaywrightError as e:
        logger.warning(f"SauceDemo is unreachable: {e}")
        available = False
    finally:
        request_context.dispose()
    return available


@pytest.fixture
def saucedemo_session(saucedemo_available, page, settings, logger) -> BrowserSession:
    if not saucedemo_available:
        pytest.skip(f"{settings.saucedemo_url} is not reachable")
    return BrowserSession(page, settings.saucedemo_url, logger, action_timeout=settings.action_timeout,
                          screenshot_dir=settings.screenshot_dir)


@pytest.fixture
def sauce(saucedemo_session) -> SauceDemoPages:
    return SauceDemoPages(saucedemo_session)


@pytest.fixture
def logged_in(sauce) -> SauceDemoPages:
    """
    Signed in as the standard user, inventory rendered.
    """
    sauce.login_page.open_page()
    sauce.login_page.login(SauceDemoUsers.STANDARD_USER)
    sauce.products_page.wait_until_loaded()
    return sauce
