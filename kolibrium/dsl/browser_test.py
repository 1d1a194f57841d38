#!/usr/bin/env python3
"""
Project-configured browser tests.

``browser_test`` is ``web_test`` with the site, driver factory and lifecycle
settings taken from the discovered project configuration.
"""

from typing import Any, Callable, Optional, Union

from ..browser.common.interface import Browser
from ..cli.config import load_project_configuration
from .web_test import web_test


def browser_test(block: Callable[..., Any], browser: Optional[Union[Browser, str]] = None,
                 base_url: Optional[str] = None, keep_browser_open: Optional[bool] = None):
    """
    Run ``block`` as a web test using the project configuration.

    Args:
        block: Test body receiving the PageEntry
        browser: Browser to start (default: the configured default browser)
        base_url: Overrides the configured base URL
        keep_browser_open: Overrides the configured keep_browser_open

    Raises:
        ProjectConfigurationException: If the project configuration cannot be loaded
    """
    config = load_project_configuration()
    if keep_browser_open is None:
        keep_browser_open = config.keep_browser_open
    web_test(config.site(base_url), config.driver_factory(browser), block,
             keep_browser_open=keep_browser_open)
