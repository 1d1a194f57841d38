#!/usr/bin/env python3
"""
pytest plugin.

Registered through the ``pytest11`` entry point. Provides the project
configuration and a session-bound driver to tests; the
``kolibrium_browser(name)`` marker picks the browser for one test.
"""

import logging

import pytest

from .cli.config import load_project_configuration
from .core.site import Session, SessionContext, with_driver

logger = logging.getLogger(__name__)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "kolibrium_browser(name): start the kolibrium_driver fixture with this browser"
    )


@pytest.fixture
def kolibrium_config():
    """The discovered project configuration."""
    return load_project_configuration()


@pytest.fixture
def kolibrium_driver(request, kolibrium_config):
    """
    A driver for the configured site, bound to a Session on the test's thread.

    The driver is quit afterwards unless the configuration keeps the browser open.
    """
    marker = request.node.get_closest_marker("kolibrium_browser")
    browser = marker.args[0] if marker and marker.args else None
    site = kolibrium_config.site()
    driver = kolibrium_config.driver_factory(browser)()
    try:
        driver.get(site.base_url)
        if site.cookies:
            for cookie in site.cookies:
                driver.add_cookie(dict(cookie))
            driver.get(site.base_url)
        with SessionContext.with_session(Session(driver, site)), with_driver(driver):
            site.configure(driver)
            yield driver
    finally:
        if not kolibrium_config.keep_browser_open:
            try:
                driver.quit()
            except Exception as e:
                logger.warning("Error quitting driver: %s", e)
