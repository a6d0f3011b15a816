"""
conftest.py

Pytest configuration shared by both storefront suites: run settings, the logging handle,
Playwright browser fixtures, soft assertions and xdist worker logging.
Site specific fixtures live in tests/storefront/conftest.py and tests/saucedemo/conftest.py.
"""

import logging
import os

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from utils.config import SUPPORTED_BROWSERS, Settings
from utils.logger import build_logger
from utils.soft_assert import SoftAssertContextManager


# Pytest Configuration
def pytest_addoption(parser):
    """Add custom command-line options"""
    parser.addoption("--headless", action="store", default=None,
                     help="Run tests in headless mode (true/false). Defaults to HEADLESS or true")
    parser.addoption("--browser-name", action="store", default=None, choices=SUPPORTED_BROWSERS,
                     help="Browser engine to run against. Defaults to BROWSER or chromium")
    parser.addoption("--live-storefront", action="store_true", default=False,
                     help="Send storefront requests to BASE_URL instead of the built-in stub")


@pytest.fixture(scope="session")
def settings(pytestconfig) -> Settings:
    """
    Run settings: environment variables first, command-line options on top.

    Returns:
        Settings: Frozen settings shared by every fixture in the session.
    """
    headless = pytestconfig.getoption("headless")
    return Settings.from_env().with_overrides(
        headless=None if headless is None else headless.strip().lower() == "true",
        browser_name=pytestconfig.getoption("browser_name"),
        live_storefront=True if pytestconfig.getoption("live_storefront") else None,
    )


@pytest.fixture(scope="session")
def logger(settings) -> logging.Logger:
    """
    The logging handle handed to browser sessions, the storefront stub and the tests.
    """
    return build_logger(level=settings.log_level)


# Playwright Fixtures
@pytest.fixture(scope="session")
def playwright_instance() -> Playwright:
    """
    Set up the Playwright instance for the test session.

    Returns:
        Playwright: A configured Playwright instance with browser engines.
    """
    with sync_playwright() as playwright:
        yield playwright


@pytest.fixture(scope="session")
def browser(playwright_instance, settings, logger) -> Browser:
    """
    Launch the configured browser once per session (once per worker under xdist).

    Args:
        playwright_instance: The Playwright instance from the playwright_instance fixture
        settings: Run settings, see utils/config.py

    Returns:
        Browser: The launched browser
    """
    browser_type = getattr(playwright_instance, settings.browser_name)
    logger.info(f"Launching {settings.browser_name} (headless={settings.headless})")
    if settings.headless or settings.browser_name != "chromium":
        browser = browser_type.launch(headless=settings.headless)
    else:
        # Visible chromium window, maximized
        browser = browser_type.launch(headless=False, args=["--start-maximized"])
    yield browser
    browser.close()


@pytest.fixture
def browser_context(browser, settings) -> BrowserContext:
    """
    Create a fresh browser context for every test.
    Each context has isolated cookies and storage, so carts and sessions never leak between tests.

    Args:
        browser: The Browser instance from the browser fixture

    Returns:
        BrowserContext: An isolated browser context
    """
    if settings.headless:
        # Fixed viewport size for consistent testing in headless mode
        context = browser.new_context(viewport={"width": 1920, "height": 1080}, screen={"width": 1920, "height": 1080})
    else:
        context = browser.new_context(no_viewport=True)
    context.set_default_timeout(settings.action_timeout)
    yield context
    context.close()


@pytest.fixture
def page(browser_context) -> Page:
    """
    Create a new page within the test's browser context.

    Returns:
        Page: A new browser page for test automation
    """
    page = browser_context.new_page()
    yield page
    page.close()


@pytest.fixture
def soft_assert():
    """
    Provides a soft assertion mechanism that collects failures without stopping test execution.
    Everything collected is raised on teardown, so the test still fails.

    Returns:
        SoftAssertContextManager: Soft assertion context for collecting multiple failures
    """
    context = SoftAssertContextManager()
    yield context
    context.assert_all()


@pytest.fixture(autouse=True)
def log_test_case(request, logger):
    """
    Frame every test with start/finish log lines, using the case id from the meta marker when present.
    """
    marker = request.node.get_closest_marker("meta")
    if marker and "case_id" in marker.kwargs:
        case = f"{marker.kwargs['case_id']}: {marker.kwargs.get('case_title', request.node.name)}"
    else:
        case = request.node.name
    logger.info(f"=== Starting {case} ===")
    yield
    logger.info(f"=== Finished {case} ===")


@pytest.hookimpl
def pytest_sessionfinish(session):
    """
    Clean up orphaned Playwright browser processes after all tests finish.

    Args:
        session: The pytest session object containing test information
    """
    import psutil
    current_pid = os.getpid()

    # Only clean processes related to current worker to avoid affecting other test runs
    for proc in psutil.process_iter():
        try:
            if proc.ppid() == current_pid and 'playwright' in proc.name().lower():
                proc.kill()
        except (psutil.NoSuchProcess, psutil.AccessDenied):
            # Skip processes we can't access or that no longer exist
            pass


@pytest.hookimpl(tryfirst=True, optionalhook=True)
def pytest_configure_node(node):
    """
    Logs when a worker node is configured in distributed testing mode.

    Args:
        node: The worker node being configured
    """
    node.log.info(f"Worker {node.gateway.id} is configured and starting")


@pytest.hookimpl(tryfirst=True, optionalhook=True)
def pytest_testnodedown(node, error):
    """
    Logs the status of a worker node when it completes testing.

    Args:
        node: The worker node that has finished
        error: Error information if the node failed, None otherwise
    """
    if error:
        node.log.error(f"Worker {node.gateway.id} failed: {error}")
    else:
        node.log.info(f"Worker {node.gateway.id} finished successfully")
