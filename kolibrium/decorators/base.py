#!/usr/bin/env python3
"""
Decorator base classes.

A decorator wraps a search context (a driver or an element) in a proxy that
intercepts ``find_element`` / ``find_elements`` and wraps every element it
returns, so behavior such as highlighting or slowing down follows the whole
element tree. Everything else is delegated to the wrapped object.
"""

from typing import Any, List, Optional

from selenium.webdriver.common.by import By


def unwrap(obj: Any) -> Any:
    """
    Strip every proxy layer and return the native Selenium object.

    Both kolibrium proxies and Selenium's event firing element wrappers are
    removed, which is what ``execute_script`` and action chains expect.
    """
    while True:
        if isinstance(obj, DecoratedContext):
            obj = obj.wrapped
        elif hasattr(type(obj), "wrapped_element"):
            obj = obj.wrapped_element
        else:
            return obj


def is_element(context: Any) -> bool:
    """Return True when ``context`` looks like a web element rather than a driver."""
    return hasattr(unwrap(context), "is_displayed")


class DecoratedContext:
    """
    Proxy around a driver or element that routes lookups through a decorator.

    Args:
        wrapped: The driver, element or inner proxy
        decorator: The decorator whose hooks run around each lookup
    """

    def __init__(self, wrapped: Any, decorator: "AbstractDecorator"):
        self.__dict__["_wrapped"] = wrapped
        self.__dict__["_decorator"] = decorator

    @property
    def wrapped(self) -> Any:
        return self._wrapped

    @property
    def decorator(self) -> "AbstractDecorator":
        return self._decorator

    def unwrap(self) -> Any:
        return unwrap(self)

    def find_element(self, by: str = By.ID, value: Optional[str] = None):
        self._decorator.on_find(by, value)
        element = self._wrapped.find_element(by, value)
        element = self._decorator.after_find_element(element)
        return self._decorator.decorate_element(element)

    def find_elements(self, by: str = By.ID, value: Optional[str] = None) -> List[Any]:
        self._decorator.on_find(by, value)
        elements = list(self._wrapped.find_elements(by, value))
        elements = self._decorator.after_find_elements(elements)
        return [self._decorator.decorate_element(element) for element in elements]

    def __getattr__(self, name):
        return getattr(self._wrapped, name)

    def __setattr__(self, name, value):
        setattr(self._wrapped, name, value)

    def __eq__(self, other):
        return unwrap(self) == unwrap(other)

    def __hash__(self):
        return hash(unwrap(self))

    def __repr__(self):
        return f"{type(self).__name__}({self._decorator!r}, {self._wrapped!r})"


class DecoratedElement(DecoratedContext):
    """Element proxy; subclasses override element state queries or interactions."""


class AbstractDecorator:
    """
    Base class for search context decorators.

    Subclasses override any of the hooks below. The default implementation
    wraps drivers and elements without changing their behavior.
    """

    def decorate(self, context: Any) -> Any:
        """Wrap ``context`` according to whether it is an element or a driver."""
        if is_element(context):
            return self.decorate_element(context)
        return self.decorate_search_context(context)

    def decorate_search_context(self, context: Any) -> Any:
        return DecoratedContext(context, self)

    def decorate_element(self, element: Any) -> Any:
        return DecoratedElement(element, self)

    def on_find(self, by: str, value: Optional[str]):
        """Called before every lookup made through a decorated context."""

    def after_find_element(self, element: Any) -> Any:
        """Called with each element found by ``find_element``; returns the element to use."""
        return element

    def after_find_elements(self, elements: List[Any]) -> List[Any]:
        """Called with each list found by ``find_elements``; returns the list to use."""
        return [self.after_find_element(element) for element in elements]

    def interaction_listener(self):
        """Return an InteractionListener, or None when this decorator ignores interactions."""
        return None

    def __repr__(self):
        return type(self).__name__
