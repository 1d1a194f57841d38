"""
Test DSL module for kolibrium.

This package contains the web test runner, the page flow scopes and the
cookie, frame, navigation and action helpers used inside test bodies.
"""

from .actions import ActionsScope, actions
from .browser_test import browser_test
from .interactions import (CookiesScope, SameSite, cookie, cookies, iframe,
                           navigate_to)
from .page_dsl import PageEntry, PageScope, SwitchBack, SwitchBackScope
from .web_test import TestStatus, WebTestResult, web_test, web_test_result

__all__ = [
    "ActionsScope",
    "actions",
    "browser_test",
    "CookiesScope",
    "SameSite",
    "cookie",
    "cookies",
    "iframe",
    "navigate_to",
    "PageEntry",
    "PageScope",
    "SwitchBack",
    "SwitchBackScope",
    "TestStatus",
    "WebTestResult",
    "web_test",
    "web_test_result",
]
