#!/usr/bin/env python3
"""
Page object base class.

This module contains the Page class that page objects derive from, plus the
URL helpers used when pages are opened relative to a site's base URL.
"""

import inspect
import logging
import posixpath
import re
from typing import List
from urllib.parse import urlsplit, urlunsplit

from selenium.common.exceptions import (NoSuchElementException,
                                        StaleElementReferenceException)

from ..exceptions import ProjectConfigurationException
from .locators import _LocatorDescriptor
from .readiness import ReadinessDescriptor, to_readiness_descriptor
from .site import current_driver, current_site
from .wait import WaitConfig, wait

logger = logging.getLogger(__name__)

_ABSOLUTE_URL = re.compile(r"^[a-zA-Z]+://.*")


def is_absolute_url(url: str) -> bool:
    return bool(_ABSOLUTE_URL.match(url))


def join_urls(base: str, path: str) -> str:
    """
    Join a base URL and a page path with exactly one slash between them.

    A blank path yields the base; an absolute or ``about:`` URL is returned unchanged.
    """
    if not path or not path.strip():
        return base
    if is_absolute_url(path) or path.startswith("about:"):
        return path
    if base.endswith("/"):
        base = base[:-1]
    if path.startswith("/"):
        path = path[1:]
    return f"{base}/{path}"


def resolve_url(url: str, base_url: str = None) -> str:
    """
    Resolve ``url`` against ``base_url`` and normalize dot segments.

    Args:
        url: Absolute URL or path relative to the base
        base_url: Base URL of the site

    Returns:
        str: Absolute URL

    Raises:
        ProjectConfigurationException: If ``url`` is relative and no base URL is set
    """
    if is_absolute_url(url):
        return url
    if not base_url:
        raise ProjectConfigurationException(
            f'Provided "{url}" is a relative URL but "baseUrl" was not configured. '
            'Consider overriding "baseUrl" in your configuration file, or specify an absolute URL.'
        )
    if url == base_url:
        return url
    parts = urlsplit(base_url.rstrip("/") + "/" + url.lstrip("/"))
    path = parts.path
    if path:
        normalized = posixpath.normpath(path)
        if path.endswith("/") and not normalized.endswith("/"):
            normalized += "/"
        path = normalized
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


class Page:
    """
    Base class for page objects.

    Locator descriptors declared on a page resolve against the driver bound
    to the current thread. Attributes a page does not define are looked up
    on that driver, so ``page.title`` or ``page.current_url`` just work.

    Attributes:
        path: Path of the page relative to the site's base URL
        ready: Locator descriptor(s) or readiness descriptor(s) that must be
            satisfied before the page is considered loaded
    """
    path = ""
    ready = None

    @property
    def driver(self):
        return current_driver()

    @property
    def search_context(self):
        return current_driver()

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(current_driver(), name)

    def readiness_descriptors(self) -> List[ReadinessDescriptor]:
        """Normalize the ``ready`` declaration into readiness descriptors."""
        declared = inspect.getattr_static(self, "ready", None)
        if declared is None:
            return []
        if not isinstance(declared, (list, tuple)):
            declared = [declared]
        descriptors = []
        for item in declared:
            if isinstance(item, ReadinessDescriptor):
                descriptors.append(item)
            elif isinstance(item, _LocatorDescriptor):
                descriptors.append(to_readiness_descriptor(item))
            else:
                raise TypeError(f"Unsupported readiness declaration on {type(self).__name__}: {item!r}")
        return descriptors

    def _wait_config_for(self, descriptor: ReadinessDescriptor) -> WaitConfig:
        if descriptor.wait_config is not None:
            return descriptor.wait_config
        site = current_site()
        if site is not None:
            return site.wait_config
        return WaitConfig.DEFAULT

    def await_ready(self):
        """
        Block until every readiness descriptor is satisfied.

        Raises:
            TimeoutException: If a descriptor is not satisfied in time
        """
        driver = self.driver
        for descriptor in self.readiness_descriptors():
            config = self._wait_config_for(descriptor).with_ignoring(NoSuchElementException)
            wait(driver, descriptor.is_ready, config,
                 message=f"{type(self).__name__} did not become ready: {descriptor.locator}")

    def assert_ready(self):
        """
        Check readiness once without waiting.

        Raises:
            AssertionError: If any readiness descriptor is not satisfied
        """
        driver = self.driver
        for descriptor in self.readiness_descriptors():
            try:
                ready = descriptor.is_ready(driver)
            except (NoSuchElementException, StaleElementReferenceException):
                ready = False
            if not ready:
                raise AssertionError(f"{type(self).__name__} is not ready: {descriptor.locator}")

    def __repr__(self):
        return f"{type(self).__name__}(path={self.path!r})"
