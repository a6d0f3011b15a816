"""
Run configuration for the browser suite.

Values come from environment variables with defaults that point at the demo storefronts.
Command-line options registered in the root conftest override them.
"""
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_BASE_URL = 'https://example-ecommerce.com'
DEFAULT_SAUCEDEMO_URL = 'https://www.saucedemo.com'
SUPPORTED_BROWSERS = ('chromium', 'firefox', 'webkit')

_TRUTHY = ('1', 'true', 'yes', 'on')


def _as_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None or value == '':
        return default
    return value.strip().lower() in _TRUTHY


def _as_int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value else default
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of everything the fixtures need to build sessions."""

    base_url: str = DEFAULT_BASE_URL
    saucedemo_url: str = DEFAULT_SAUCEDEMO_URL
    username: str = 'test@example.com'
    password: str = 'TestPassword123!'
    log_level: str = 'INFO'
    headless: bool = True
    browser_name: str = 'chromium'
    action_timeout: int = 10000
    live_storefront: bool = False
    screenshot_dir: Path = field(default=Path('screenshots'))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """
        Read settings from environment variables.

        Args:
            environ (Optional[Mapping[str, str]]): Mapping to read from. Defaults to os.environ.

        Returns:
            Settings: Settings with every unset variable left at its default.
        """
        env = os.environ if environ is None else environ
        browser_name = (env.get('BROWSER') or cls.browser_name).strip().lower()
        if browser_name not in SUPPORTED_BROWSERS:
            raise ValueError(f'Unsupported browser "{browser_name}", expected one of {SUPPORTED_BROWSERS}')

        return cls(
            base_url=(env.get('BASE_URL') or DEFAULT_BASE_URL).rstrip('/'),
            saucedemo_url=(env.get('SAUCEDEMO_URL') or DEFAULT_SAUCEDEMO_URL).rstrip('/'),
            username=env.get('TEST_USERNAME') or cls.username,
            password=env.get('TEST_PASSWORD') or cls.password,
            log_level=(env.get('LOG_LEVEL') or cls.log_level).upper(),
            headless=_as_bool(env.get('HEADLESS'), default=True) or env.get('GITHUB_RUN') is not None,
            browser_name=browser_name,
            action_timeout=_as_int(env.get('ACTION_TIMEOUT'), cls.action_timeout),
            live_storefront=_as_bool(env.get('STOREFRONT_LIVE')),
            screenshot_dir=Path(env.get('SCREENSHOT_DIR') or 'screenshots'),
        )

    def with_overrides(self, **overrides) -> 'Settings':
        """Return a copy with the given non-None fields replaced."""
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})
