"""
Kolibrium package.

This package provides a fluent configuration layer for Selenium WebDriver:
browser creation, declarative locators with waits, decorators for search
contexts, and page flows bound to a per-thread session.
"""

__version__ = "0.9.0"
__author__ = "Kolibrium Developers"

from .browser import Browser, BrowserFactory, create_browser, driver
from .cli.config import ProjectConfiguration, load_project_configuration
from .core.page import Page
from .core.site import Site
from .core.templates import locators
from .core.wait import WaitConfig
from .dsl.browser_test import browser_test
from .dsl.web_test import web_test, web_test_result

__all__ = [
    "Browser",
    "BrowserFactory",
    "create_browser",
    "driver",
    "ProjectConfiguration",
    "load_project_configuration",
    "Page",
    "Site",
    "locators",
    "WaitConfig",
    "browser_test",
    "web_test",
    "web_test_result",
]
