#!/usr/bin/env python3
"""
Page flow DSL.

This module contains the entry point handed to a web test (PageEntry), the
scope returned after each page step (PageScope), and the bookkeeping needed to
hop to another site in a new window and come back (SwitchBackScope).

Every step runs with the session's driver bound to the current thread, checks
that it is called from the session's thread, and waits for pages to become
ready before handing them to user code.
"""

import logging
from typing import Any, Callable, Iterable, Optional, Type, Union

from ..core.page import Page, join_urls
from ..core.site import (Session, SessionContext, Site, SiteContext,
                         normalize_host, require_session, with_driver)

logger = logging.getLogger(__name__)

PageFactory = Union[Type[Page], Callable[[], Page]]


def _ensure_ready(page: Page):
    page.await_ready()
    page.assert_ready()


def _next_page(page: Page, action: Optional[Callable[[Page], Any]]) -> Page:
    if action is None:
        return page
    result = action(page)
    return page if result is None else result


def _site_instance(site: Union[Site, Type[Site]]) -> Site:
    return site() if isinstance(site, type) else site


class PageEntry:
    """
    Starting point of a web test: opens pages and manages cookies.

    Args:
        driver: The session's WebDriver
    """

    def __init__(self, driver):
        self.driver = driver

    @property
    def site(self) -> Site:
        return require_session("SiteEntry.site").site

    def navigate_to(self, url: str):
        """Navigate to an absolute URL or a path relative to the site's base URL."""
        session = require_session("PageEntry.navigateTo")
        self.driver.get(join_urls(session.site.base_url, url))

    def window_handles(self):
        require_session("PageEntry.windowHandles")
        return list(self.driver.window_handles)

    def current_window_handle(self) -> str:
        require_session("PageEntry.currentWindowHandle")
        return self.driver.current_window_handle

    def switch_to_window(self, handle: str):
        require_session("PageEntry.switchToWindow")
        self.driver.switch_to.window(handle)

    def apply_cookies(self, cookies: Iterable[dict]):
        cookies = list(cookies or ())
        if not cookies:
            return
        require_session("PageEntry.applyCookies")
        for cookie in cookies:
            self.driver.add_cookie(dict(cookie))

    def add_cookie(self, cookie: dict):
        require_session("SiteEntry.addCookie")
        self.driver.add_cookie(dict(cookie))

    def delete_cookie(self, name: str):
        require_session("SiteEntry.deleteCookie")
        self.driver.delete_cookie(name)

    def delete_all_cookies(self):
        require_session("SiteEntry.deleteAllCookies")
        self.driver.delete_all_cookies()

    def configure_site(self, site: Site):
        site.configure(self.driver)

    def open(self, factory: PageFactory, action: Optional[Callable[[Page], Any]] = None,
             path: Optional[str] = None) -> "PageScope":
        """
        Navigate to a page, wait until it is ready and run ``action`` on it.

        Args:
            factory: Page class or callable creating the page
            action: Receives the page and may return the next page
            path: Overrides the page's own path

        Returns:
            PageScope: Scope of the page returned by ``action``
        """
        session = require_session("SiteEntry.open")
        page = factory()
        effective_path = path if path is not None else page.path
        url = join_urls(session.site.base_url, effective_path)
        logger.debug("Opening %s at %s", type(page).__name__, url)
        self.driver.get(url)
        with with_driver(self.driver):
            _ensure_ready(page)
            return self.scope(_next_page(page, action))

    def on(self, factory: PageFactory, action: Optional[Callable[[Page], Any]] = None) -> "PageScope":
        """
        Work with a page that is already displayed in the current tab.

        Raises:
            ValueError: If the current tab is not on the active site's host
        """
        session = require_session("SiteEntry.on")
        page = factory()
        current_host = normalize_host(self.driver.current_url)
        site_host = normalize_host(session.site.base_url)
        if current_host is None or site_host is None or current_host != site_host:
            raise ValueError("Current tab origin does not match site origin")
        with with_driver(self.driver):
            _ensure_ready(page)
            return self.scope(_next_page(page, action))

    def verify(self, page: Page, assertions: Callable[[Page], Any]) -> Page:
        with with_driver(self.driver):
            page.assert_ready()
            assertions(page)
        return page

    def scope(self, page: Page) -> "PageScope":
        with with_driver(self.driver):
            _ensure_ready(page)
        return PageScope(page, self)

    def switch_to_newest_window_if_opened_since(self, original_window: str):
        """Switch to the last window handle when a window opened after ``original_window``."""
        require_session("PageEntry.switchToNewestWindowIfOpenedSince")
        handles = list(self.driver.window_handles)
        if len(handles) > 1 and original_window != handles[-1]:
            self.driver.switch_to.window(handles[-1])

    def perform_site_switch(self, site: Union[Site, Type[Site]], navigate_to_base: bool = True,
                            cookies: Optional[Iterable[dict]] = None) -> Site:
        """Rebind the session to ``site`` on the same driver and configure it."""
        target = _site_instance(site)
        SessionContext.set(Session(self.driver, target))
        if cookies:
            self.apply_cookies(cookies)
        if navigate_to_base:
            self.driver.get(target.base_url)
        self.configure_site(target)
        return target

    def switch_to(self, site: Union[Site, Type[Site]], block: Optional[Callable[["PageEntry"], Any]] = None,
                  navigate_to_base: bool = True, cookies: Optional[Iterable[dict]] = None) -> "SwitchBack":
        """
        Continue on another site, usually in a newly opened window.

        Returns:
            SwitchBack: Restores the original window and site
        """
        original_window = self.current_window_handle()
        original_site = require_session("SiteEntry.switchTo").site
        self.switch_to_newest_window_if_opened_since(original_window)
        target = self.perform_site_switch(site, navigate_to_base, cookies)
        if block is not None:
            with SiteContext.with_site(target), with_driver(self.driver):
                block(self)
        return SwitchBack(self.driver, original_site, original_window)

    def with_site(self, site: Union[Site, Type[Site]], block: Callable[["PageEntry"], Any],
                  navigate_to_base: bool = True):
        """Run ``block`` against ``site`` in the current window, then restore the previous site."""
        original_site = require_session("SiteEntry.withSite").site
        target = self.perform_site_switch(site, navigate_to_base)
        try:
            with SiteContext.with_site(target), with_driver(self.driver):
                return block(self)
        finally:
            SessionContext.set(Session(self.driver, original_site))
            self.configure_site(original_site)


class PageScope:
    """
    The page reached by the previous step, with the entry that produced it.

    Args:
        page: Current page
        entry: The PageEntry of the running test
    """

    def __init__(self, page: Page, entry: PageEntry):
        self.page = page
        self.entry = entry

    def on(self, action: Callable[[Page], Any]) -> "PageScope":
        """Run ``action`` on the current page and move to the page it returns."""
        with with_driver(self.entry.driver):
            self.page.assert_ready()
            return self.entry.scope(_next_page(self.page, action))

    def verify(self, assertions: Callable[[Page], Any]) -> "PageScope":
        """Run assertions against the current page and stay on it."""
        with with_driver(self.entry.driver):
            self.page.assert_ready()
            assertions(self.page)
        return self

    def then(self, action: Callable[[Page], Any]) -> "PageScope":
        """Run ``action`` on the current page and stay on it."""
        with with_driver(self.entry.driver):
            self.page.assert_ready()
            action(self.page)
        return self

    def switch_to(self, site: Union[Site, Type[Site]], block: Optional[Callable[[PageEntry], Any]] = None,
                  navigate_to_base: bool = True, cookies: Optional[Iterable[dict]] = None) -> "SwitchBackScope":
        """
        Continue on another site, then come back to this page with ``switch_back``.

        Args:
            site: Target site instance or class
            block: Receives the PageEntry bound to the target site
            navigate_to_base: Navigate to the target's base URL first
            cookies: Cookies to apply before navigating
        """
        entry = self.entry
        original_window = entry.current_window_handle()
        original_site = require_session("PageScope.switchTo").site
        entry.switch_to_newest_window_if_opened_since(original_window)
        target = entry.perform_site_switch(site, navigate_to_base, cookies)
        if block is not None:
            with SiteContext.with_site(target), with_driver(entry.driver):
                block(entry)
        return SwitchBackScope(entry.driver, original_site, original_window, self.page)

    def with_entry(self, block: Callable[[PageEntry], Any]):
        return block(self.entry)

    def __repr__(self):
        return f"PageScope(page={self.page!r})"


class SwitchBack:
    """Restores the window and site that were active before ``PageEntry.switch_to``."""

    def __init__(self, driver, original_site: Site, original_window: str):
        self.driver = driver
        self.original_site = original_site
        self.original_window = original_window

    def _restore(self):
        require_session("SwitchBack.switchBack")
        self.driver.switch_to.window(self.original_window)
        SessionContext.set(Session(self.driver, self.original_site))
        self.original_site.configure(self.driver)

    def switch_back(self, block: Optional[Callable[[PageEntry], Any]] = None) -> PageEntry:
        self._restore()
        entry = PageEntry(self.driver)
        if block is not None:
            with with_driver(self.driver):
                block(entry)
        return entry


class SwitchBackScope(SwitchBack):
    """Restores the original window and site, then resumes on the original page."""

    def __init__(self, driver, original_site: Site, original_window: str, original_page: Page):
        super().__init__(driver, original_site, original_window)
        self.original_page = original_page

    def switch_back(self, block: Optional[Callable[[Page], Any]] = None) -> PageScope:
        self._restore()
        with with_driver(self.driver):
            if block is not None:
                block(self.original_page)
            return PageScope(self.original_page, PageEntry(self.driver))
