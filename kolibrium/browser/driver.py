#!/usr/bin/env python3
"""
WebDriver creation module.

This module contains the driver scopes that pair a driver service with
browser options, and the functions that build a ready WebDriver from them
with retry logic.
"""

import logging
import time
from typing import Any, Callable, Mapping, Optional, Union

from selenium import webdriver
from selenium.common.exceptions import (SessionNotCreatedException,
                                        WebDriverException)

from .common.interface import Browser
from .options import (ChromeOptionsScope, EdgeOptionsScope, FirefoxOptionsScope,
                      OptionsScope, SafariOptionsScope)
from .service import (ChromeDriverServiceScope, DriverServiceScope,
                      EdgeDriverServiceScope, GeckoDriverServiceScope,
                      SafariDriverServiceScope)

logger = logging.getLogger(__name__)

Configurer = Union[Callable[[Any], Any], Mapping[str, Any], None]

RETRY_DELAY = 2


def apply_configuration(scope, configurer: Configurer):
    """
    Apply a configurer to a scope.

    A callable receives the scope and mutates it. A mapping sets attributes
    or, when the key names a method, calls it: lists and tuples are passed as
    positional arguments, dicts as keyword arguments.

    Raises:
        AttributeError: If a mapping key matches nothing on the scope
    """
    if configurer is None:
        return scope
    if callable(configurer):
        configurer(scope)
        return scope
    for key, value in configurer.items():
        if not hasattr(scope, key):
            raise AttributeError(f"{type(scope).__name__} has no setting named '{key}'")
        attribute = getattr(scope, key)
        if callable(attribute):
            if isinstance(value, dict):
                attribute(**value)
            elif isinstance(value, (list, tuple)):
                attribute(*value)
            else:
                attribute(value)
        else:
            setattr(scope, key, value)
    return scope


class DriverScope:
    """
    A driver service scope and an options scope for one browser.

    Subclasses name the scope types and the Selenium driver class.
    """

    browser: Browser = None
    service_scope_class = DriverServiceScope
    options_scope_class = OptionsScope
    driver_class = None

    def __init__(self):
        self.service_scope = self.service_scope_class()
        self.options_scope = self.options_scope_class()

    def driver_service(self, configurer: Configurer):
        apply_configuration(self.service_scope, configurer)
        return self

    def options(self, configurer: Configurer):
        apply_configuration(self.options_scope, configurer)
        return self

    def build(self, retry_count: int = 1):
        """
        Start the browser.

        Args:
            retry_count: Number of attempts before giving up

        Returns:
            WebDriver: The started driver

        Raises:
            WebDriverException: If the driver cannot be started after ``retry_count`` attempts
        """
        options = self.options_scope.build()
        for attempt in range(retry_count):
            try:
                service = self.service_scope.build()
                driver = self.driver_class(service=service, options=options)
                logger.info("Started %s driver", self.browser.value)
                return driver
            except (WebDriverException, SessionNotCreatedException) as e:
                logger.warning("WebDriver creation failed (attempt %d/%d): %s",
                               attempt + 1, retry_count, e)
                if attempt == retry_count - 1:
                    raise
                time.sleep(RETRY_DELAY)

        raise RuntimeError("Failed to create WebDriver after multiple attempts")

    def __repr__(self):
        return f"{type(self).__name__}(driverServiceScope={self.service_scope!r}, optionsScope={self.options_scope!r})"


class ChromeDriverScope(DriverScope):
    browser = Browser.CHROME
    service_scope_class = ChromeDriverServiceScope
    options_scope_class = ChromeOptionsScope
    driver_class = webdriver.Chrome


class FirefoxDriverScope(DriverScope):
    browser = Browser.FIREFOX
    service_scope_class = GeckoDriverServiceScope
    options_scope_class = FirefoxOptionsScope
    driver_class = webdriver.Firefox


class EdgeDriverScope(DriverScope):
    browser = Browser.EDGE
    service_scope_class = EdgeDriverServiceScope
    options_scope_class = EdgeOptionsScope
    driver_class = webdriver.Edge


class SafariDriverScope(DriverScope):
    browser = Browser.SAFARI
    service_scope_class = SafariDriverServiceScope
    options_scope_class = SafariOptionsScope
    driver_class = webdriver.Safari


_SCOPES = {
    Browser.CHROME: ChromeDriverScope,
    Browser.FIREFOX: FirefoxDriverScope,
    Browser.EDGE: EdgeDriverScope,
    Browser.SAFARI: SafariDriverScope,
}


def driver_scope(browser: Union[Browser, str]) -> DriverScope:
    """Return a fresh, unconfigured scope for ``browser``."""
    return _SCOPES[Browser.of(browser)]()


def driver(browser: Union[Browser, str], service: Configurer = None, options: Configurer = None,
           retry_count: int = 1):
    """
    Configure and start a driver for ``browser``.

    Args:
        browser: Browser to start
        service: Callable or mapping configuring the driver service scope
        options: Callable or mapping configuring the options scope
        retry_count: Number of attempts before giving up

    Returns:
        WebDriver: The started driver
    """
    scope = driver_scope(browser)
    scope.driver_service(service).options(options)
    return scope.build(retry_count=retry_count)


def chrome_driver(service: Configurer = None, options: Configurer = None, retry_count: int = 1):
    return driver(Browser.CHROME, service, options, retry_count)


def firefox_driver(service: Configurer = None, options: Configurer = None, retry_count: int = 1):
    return driver(Browser.FIREFOX, service, options, retry_count)


def edge_driver(service: Configurer = None, options: Configurer = None, retry_count: int = 1):
    return driver(Browser.EDGE, service, options, retry_count)


def safari_driver(service: Configurer = None, options: Configurer = None, retry_count: int = 1):
    return driver(Browser.SAFARI, service, options, retry_count)


def driver_service(browser: Union[Browser, str], configurer: Configurer = None):
    """Build only the Selenium Service for ``browser``."""
    scope = driver_scope(browser).service_scope
    return apply_configuration(scope, configurer).build()


def build_options(browser: Union[Browser, str], configurer: Configurer = None):
    """Build only the Selenium options object for ``browser``."""
    scope = driver_scope(browser).options_scope
    return apply_configuration(scope, configurer).build()
