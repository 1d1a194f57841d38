#!/usr/bin/env python3
"""
Site and session state module.

This module contains the Site base class describing a web application under
test, plus the thread-local holders that bind the active site, session and
driver for the code running on the current thread.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterable, List, Optional, Sequence
from urllib.parse import urlparse

from ..exceptions import (ConfigurationException, SessionError,
                          ThreadConfinementError)
from .locator_utils import present_and_displayed
from .wait import WaitConfig

logger = logging.getLogger(__name__)


def _element_displayed(element) -> bool:
    return element.is_displayed()


def normalize_host(url: Optional[str]) -> Optional[str]:
    """
    Extract the host of ``url`` lowercased and without a leading ``www.``.

    Returns:
        str or None: Normalized host, or None when the URL has no host
    """
    if not url:
        return None
    try:
        host = urlparse(url).hostname
    except ValueError:
        return None
    if not host:
        return None
    host = host.lower()
    return host[4:] if host.startswith("www.") else host


class Site:
    """
    Describes a web application: where it lives and how its elements behave.

    Subclasses usually override the class attributes; instances may also be
    built directly by passing keyword arguments.

    Attributes:
        base_url: Root URL every relative page path is resolved against
        cookies: Cookie dicts applied before the first page is opened
        decorators: Decorators wrapping every search context of this site
        element_ready_condition: Predicate deciding when a found element is usable
        elements_ready_condition: Predicate deciding when a found list is usable
        wait_config: Default wait for element resolution on this site
    """
    base_url: str = ""
    cookies: Sequence[dict] = ()
    decorators: Sequence[Any] = ()
    element_ready_condition: Callable[[Any], bool] = staticmethod(_element_displayed)
    elements_ready_condition: Callable[[List[Any]], bool] = staticmethod(present_and_displayed)
    wait_config: WaitConfig = WaitConfig.DEFAULT

    def __init__(self, base_url: Optional[str] = None, cookies: Optional[Iterable[dict]] = None,
                 decorators: Optional[Iterable[Any]] = None,
                 element_ready_condition: Optional[Callable[[Any], bool]] = None,
                 elements_ready_condition: Optional[Callable[[List[Any]], bool]] = None,
                 wait_config: Optional[WaitConfig] = None):
        if base_url is not None:
            self.base_url = base_url
        if cookies is not None:
            self.cookies = tuple(cookies)
        if decorators is not None:
            self.decorators = tuple(decorators)
        if element_ready_condition is not None:
            self.element_ready_condition = element_ready_condition
        if elements_ready_condition is not None:
            self.elements_ready_condition = elements_ready_condition
        if wait_config is not None:
            self.wait_config = wait_config

        if not self.base_url or not self.base_url.strip():
            raise ConfigurationException("baseUrl is not set!")

    def _predicate(self, name: str) -> Callable:
        # Subclasses may assign plain functions or lambdas as class attributes.
        if name in self.__dict__:
            return self.__dict__[name]
        for klass in type(self).__mro__:
            if name in klass.__dict__:
                value = klass.__dict__[name]
                return value.__func__ if isinstance(value, staticmethod) else value
        raise AttributeError(name)

    def is_element_ready(self, element) -> bool:
        """Evaluate the site's element ready condition."""
        return bool(self._predicate("element_ready_condition")(element))

    def are_elements_ready(self, elements) -> bool:
        """Evaluate the site's elements ready condition."""
        return bool(self._predicate("elements_ready_condition")(elements))

    @property
    def host(self) -> Optional[str]:
        """Normalized host of the base URL."""
        return normalize_host(self.base_url)

    def configure_site(self):
        """Hook for per-site tweaks that do not need a session. Runs before on_session_ready."""

    def on_session_ready(self, driver):
        """Hook invoked once a session is bound; navigation is owned by the DSL."""

    def configure(self, driver):
        """Run both configuration hooks in order."""
        self.configure_site()
        self.on_session_ready(driver)

    def __repr__(self):
        return f"{type(self).__name__}(base_url={self.base_url!r})"


class _ThreadLocalSlot:
    """A thread-local value with a scoped override helper."""

    def __init__(self):
        self._local = threading.local()

    def get(self):
        return getattr(self._local, "value", None)

    def set(self, value):
        self._local.value = value

    def clear(self):
        self._local.__dict__.pop("value", None)

    @contextmanager
    def scoped(self, value):
        previous = self.get()
        self.set(value)
        try:
            yield value
        finally:
            if previous is None:
                self.clear()
            else:
                self.set(previous)


class SiteContext:
    """Thread-local holder of the site the current code is running against."""

    _slot = _ThreadLocalSlot()

    @classmethod
    def get(cls) -> Optional[Site]:
        return cls._slot.get()

    @classmethod
    def set(cls, site: Optional[Site]):
        if site is None:
            cls._slot.clear()
        else:
            cls._slot.set(site)

    @classmethod
    def with_site(cls, site: Site):
        """Bind ``site`` for the duration of a ``with`` block, restoring the previous one."""
        return cls._slot.scoped(site)


class Session:
    """
    A driver bound to a site, confined to the thread that created it.

    Args:
        driver: The WebDriver owned by this session
        site: The site the driver is currently pointed at
    """

    def __init__(self, driver, site: Site):
        self.driver = driver
        self.site = site
        self.owning_thread = threading.current_thread()

    def assert_thread_or_fail(self, op: str):
        """
        Raise if called from any thread but the owning one.

        Raises:
            ThreadConfinementError: When ``op`` runs on a foreign thread
        """
        current = threading.current_thread()
        if current is not self.owning_thread:
            raise ThreadConfinementError(
                f"Kolibrium thread confinement violation: {op} was called from a different thread. "
                f"Owning thread='{self.owning_thread.name}', current thread='{current.name}'. "
                "One Session per thread."
            )


class SessionContext:
    """Thread-local holder of the active Session."""

    _slot = _ThreadLocalSlot()

    @classmethod
    def get(cls) -> Optional[Session]:
        return cls._slot.get()

    @classmethod
    def set(cls, session: Optional[Session]):
        if session is None:
            cls._slot.clear()
        else:
            cls._slot.set(session)

    @classmethod
    def clear(cls):
        cls._slot.clear()

    @classmethod
    def with_session(cls, session: Session):
        """Bind ``session`` for the duration of a ``with`` block, restoring the previous one."""
        return cls._slot.scoped(session)


_driver_slot = _ThreadLocalSlot()


@contextmanager
def with_driver(driver):
    """
    Bind ``driver`` as the current driver for locators and pages.

    When a session is active the driver must be the session's own driver and
    the call must come from the session's thread.

    Args:
        driver: WebDriver to bind

    Raises:
        SessionError: If a different driver than the session's is passed
        ThreadConfinementError: If the session belongs to another thread
    """
    session = SessionContext.get()
    if session is not None:
        session.assert_thread_or_fail("withDriver")
        if session.driver is not driver:
            raise SessionError(
                "withDriver() received a WebDriver different from the active Session's driver"
            )
    with _driver_slot.scoped(driver):
        yield driver


def current_driver():
    """
    Return the driver bound on this thread.

    Raises:
        SessionError: If no driver is bound
    """
    driver = _driver_slot.get()
    if driver is None:
        session = SessionContext.get()
        if session is not None:
            session.assert_thread_or_fail("currentDriver")
            return session.driver
        raise SessionError("No WebDriver is bound to the current thread; use with_driver() or web_test()")
    return driver


def current_site() -> Optional[Site]:
    """Return the site of the active session, falling back to SiteContext."""
    session = SessionContext.get()
    if session is not None:
        return session.site
    return SiteContext.get()


def require_session(op: str) -> Session:
    """
    Return the active session after checking thread confinement.

    Raises:
        SessionError: If no session is active
    """
    session = SessionContext.get()
    if session is None:
        raise SessionError(f"No active Session in SessionContext; {op} requires an active session.")
    session.assert_thread_or_fail(op)
    return session
