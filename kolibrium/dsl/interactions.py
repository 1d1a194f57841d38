#!/usr/bin/env python3
"""
Browser interaction helpers.

This module contains context managers for cookie manipulation and iframe
switching, a cookie builder, and relative navigation.
"""

import posixpath
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union
from urllib.parse import urlsplit

from ..decorators.base import unwrap


class SameSite(Enum):
    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"


def cookie(name: str, value: str, domain: Optional[str] = None, path: Optional[str] = None,
           expires_on: Optional[Union[datetime, int]] = None, secure: Optional[bool] = None,
           http_only: Optional[bool] = None, same_site: Optional[SameSite] = None) -> dict:
    """
    Build a cookie dict in the shape ``WebDriver.add_cookie`` expects.

    Args:
        name: Cookie name
        value: Cookie value
        domain: Domain the cookie is visible to
        path: Path the cookie is visible to
        expires_on: Expiry as a datetime or seconds since the epoch
        secure: Only send over HTTPS
        http_only: Hide from JavaScript
        same_site: SameSite policy

    Returns:
        dict: Cookie definition
    """
    if not name or not name.strip():
        raise ValueError("Cookie name must not be blank")
    result = {"name": name, "value": value}
    if domain is not None:
        result["domain"] = domain
    if path is not None:
        result["path"] = path
    if expires_on is not None:
        result["expiry"] = int(expires_on.timestamp()) if isinstance(expires_on, datetime) else int(expires_on)
    if secure is not None:
        result["secure"] = secure
    if http_only is not None:
        result["httpOnly"] = http_only
    if same_site is not None:
        result["sameSite"] = SameSite(same_site).value
    return result


class CookiesScope:
    """Cookie operations on one driver."""

    def __init__(self, driver):
        self.driver = driver

    def add_cookie(self, name: str, value: str, **attributes) -> dict:
        """Add a cookie; see ``cookie`` for the accepted attributes."""
        new_cookie = cookie(name, value, **attributes)
        self.driver.add_cookie(new_cookie)
        return new_cookie

    def get_cookie(self, name: str) -> Optional[dict]:
        return self.driver.get_cookie(name)

    def get_cookies(self) -> List[dict]:
        return self.driver.get_cookies()

    def delete_cookie(self, name_or_cookie: Union[str, dict]):
        name = name_or_cookie["name"] if isinstance(name_or_cookie, dict) else name_or_cookie
        self.driver.delete_cookie(name)

    def delete_cookies(self):
        self.driver.delete_all_cookies()

    def add_all(self, *cookies: dict):
        for each in cookies:
            self.driver.add_cookie(dict(each))

    def put(self, name: str, value: str) -> dict:
        return self.add_cookie(name, value)

    def put_all(self, pairs: Dict[str, str]):
        for name, value in pairs.items():
            self.add_cookie(name, value)

    def __repr__(self):
        return f"CookiesScope(cookies={self.driver.get_cookies()})"


@contextmanager
def cookies(driver, refresh_page: bool = False):
    """
    Manipulate cookies inside a ``with`` block, optionally refreshing afterwards.

    Example:
        with cookies(driver, refresh_page=True) as jar:
            jar.add_cookie("locale", "en-US")
    """
    yield CookiesScope(driver)
    if refresh_page:
        driver.refresh()


@contextmanager
def iframe(driver, element):
    """Switch into ``element``'s frame for the block, then back to the top document."""
    driver.switch_to.frame(unwrap(element))
    try:
        yield element
    finally:
        driver.switch_to.default_content()


def _normalize_path(path: str) -> str:
    path = "/" + path.lstrip("/")
    normalized = posixpath.normpath(path)
    if path.endswith("/") and normalized != "/":
        normalized += "/"
    return normalized


def navigate_to(driver, relative_path: str):
    """
    Navigate to ``relative_path`` on the current origin; absolute http(s) URLs are used as is.
    """
    path = relative_path.strip()
    if path.startswith("http://") or path.startswith("https://"):
        driver.get(path)
        return
    current = urlsplit(driver.current_url)
    path, _, query = path.partition("?")
    url = f"{current.scheme}://{current.netloc}{_normalize_path(path)}"
    if query:
        url += f"?{query}"
    driver.get(url)
