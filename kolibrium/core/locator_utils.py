#!/usr/bin/env python3
"""
Locator utility functions.

Small predicates over elements and element lists, quote escaping for XPath
literals, and the find helpers that understand the combined id-or-name
strategy.
"""

from typing import Any, List, NamedTuple

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

ID_OR_NAME = "id or name"


class Locator(NamedTuple):
    """A locating strategy and its value, unpackable into ``find_element``."""
    by: str
    value: str

    def __str__(self):
        return f"By.{self.by}: {self.value}"


def is_clickable(element) -> bool:
    """Return True when the element is displayed and enabled."""
    return element.is_displayed() and element.is_enabled()


def all_displayed(elements: List[Any]) -> bool:
    """Return True when every element is displayed; an empty list qualifies."""
    return all(element.is_displayed() for element in elements)


def all_enabled(elements: List[Any]) -> bool:
    """Return True when every element is enabled; an empty list qualifies."""
    return all(element.is_enabled() for element in elements)


def all_clickable(elements: List[Any]) -> bool:
    """Return True when every element is clickable; an empty list qualifies."""
    return all(is_clickable(element) for element in elements)


def present_and_displayed(elements: List[Any]) -> bool:
    """Default readiness of a list: at least one element, all of them displayed."""
    return bool(elements) and all_displayed(elements)


def escape_quotes(value: str) -> str:
    """
    Quote ``value`` as an XPath string literal.

    XPath 1.0 has no escape sequence for the delimiter, so a value containing
    a single quote is assembled with ``concat()``.

    Args:
        value: Raw attribute value

    Returns:
        str: XPath literal
    """
    if "'" in value:
        return "concat('" + value.replace("'", "',\"'\",'") + "')"
    return f"'{value}'"


def find(context, locator: Locator):
    """
    Find a single element under ``context``.

    Raises:
        NoSuchElementException: If nothing matches
    """
    if locator.by == ID_OR_NAME:
        try:
            return context.find_element(By.ID, locator.value)
        except NoSuchElementException:
            return context.find_element(By.NAME, locator.value)
    return context.find_element(locator.by, locator.value)


def find_all(context, locator: Locator) -> List[Any]:
    """Find every element under ``context`` matching ``locator``."""
    if locator.by == ID_OR_NAME:
        found = list(context.find_elements(By.ID, locator.value))
        found.extend(context.find_elements(By.NAME, locator.value))
        return found
    return list(context.find_elements(locator.by, locator.value))
