#!/usr/bin/env python3
"""
Browser selection module.

This module defines the supported browsers and a factory that starts one of
them from a handful of common settings.
"""

from enum import Enum
from typing import Any, Optional, Union


class Browser(Enum):
    """Browsers kolibrium can start."""
    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"
    SAFARI = "safari"

    @classmethod
    def of(cls, value: Union["Browser", str]) -> "Browser":
        """
        Look up a browser by enum member or case-insensitive name.

        Raises:
            ValueError: If the name is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(browser.value for browser in cls)
            raise ValueError(f"Unsupported browser '{value}'. Choose one of: {names}")


class BrowserFactory:
    """Factory class for creating browser instances."""

    @staticmethod
    def create(
        browser: Union[Browser, str] = Browser.CHROME,
        headless: bool = True,
        webdriver_path: Optional[str] = None,
        retry_count: int = 1,
        **kwargs: Any
    ):
        """
        Create a WebDriver for the specified browser.

        Args:
            browser: Browser to start
            headless: Whether to run without a visible window (ignored by Safari)
            webdriver_path: Path to the driver executable; downloaded when omitted
            retry_count: Number of attempts before giving up
            **kwargs: Extra option settings, applied to the options scope

        Returns:
            WebDriver: Started driver
        """
        from ..driver import driver
        from ..arguments import Arguments

        browser = Browser.of(browser)
        headless_argument = {
            Browser.CHROME: Arguments.Chrome.headless,
            Browser.FIREFOX: Arguments.Firefox.headless,
            Browser.EDGE: Arguments.Edge.headless,
        }.get(browser)

        def configure_service(service):
            if webdriver_path:
                service.executable = webdriver_path

        def configure_options(options):
            if headless and headless_argument is not None:
                options.arguments(headless_argument)
            for key, value in kwargs.items():
                setattr(options, key, value)

        return driver(browser, service=configure_service, options=configure_options,
                      retry_count=retry_count)
