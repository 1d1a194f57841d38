"""
Browser module for creating WebDriver instances.

This package contains the driver creation DSL: validated arguments and
preferences, driver service and options scopes, driver scopes that start a
browser, and ready-made driver factories.
"""

from .arguments import (Arguments, ChromiumDriverLogLevel, ExperimentalFlags,
                        FirefoxDriverLogLevel, PageLoadStrategy, Preferences,
                        Switches, UnexpectedAlertBehaviour)
from .common.interface import Browser, BrowserFactory
from .driver import (build_options, chrome_driver, driver, driver_scope,
                     driver_service, edge_driver, firefox_driver, safari_driver)
from .factories import (chrome, edge, firefox, headless_chrome, headless_edge,
                        headless_firefox, in_private_edge, incognito_chrome,
                        incognito_firefox, safari)

# Export the factory function for creating browser instances
create_browser = BrowserFactory.create

__all__ = [
    "Arguments",
    "ChromiumDriverLogLevel",
    "ExperimentalFlags",
    "FirefoxDriverLogLevel",
    "PageLoadStrategy",
    "Preferences",
    "Switches",
    "UnexpectedAlertBehaviour",
    "Browser",
    "BrowserFactory",
    "create_browser",
    "build_options",
    "chrome_driver",
    "driver",
    "driver_scope",
    "driver_service",
    "edge_driver",
    "firefox_driver",
    "safari_driver",
    "chrome",
    "edge",
    "firefox",
    "safari",
    "headless_chrome",
    "headless_edge",
    "headless_firefox",
    "in_private_edge",
    "incognito_chrome",
    "incognito_firefox",
]
