#!/usr/bin/env python3
"""
Element state cache decorator.

Remembers positive answers to ``is_displayed``, ``is_enabled`` and
``is_selected`` per element, saving a browser round trip each time a
ready condition is re-evaluated.
"""

from .base import AbstractDecorator, DecoratedElement


class _CachingElement(DecoratedElement):

    def __init__(self, wrapped, decorator):
        super().__init__(wrapped, decorator)
        self.__dict__["_state"] = {}

    def _cached(self, query: str, enabled: bool) -> bool:
        if not enabled:
            return getattr(self._wrapped, query)()
        if self._state.get(query):
            return True
        result = getattr(self._wrapped, query)()
        # Only True is stable; a hidden element may still appear.
        if result:
            self._state[query] = True
        return result

    def is_displayed(self) -> bool:
        return self._cached("is_displayed", self._decorator.cache_displayed)

    def is_enabled(self) -> bool:
        return self._cached("is_enabled", self._decorator.cache_enabled)

    def is_selected(self) -> bool:
        return self._cached("is_selected", self._decorator.cache_selected)


class ElementStateCacheDecorator(AbstractDecorator):
    """
    Cache element state queries that returned True.

    Args:
        cache_displayed: Cache ``is_displayed``
        cache_enabled: Cache ``is_enabled``
        cache_selected: Cache ``is_selected``

    Raises:
        ValueError: If every cache is disabled
    """

    def __init__(self, cache_displayed: bool = True, cache_enabled: bool = False,
                 cache_selected: bool = False):
        if not (cache_displayed or cache_enabled or cache_selected):
            raise ValueError("At least one state must be cached.")
        self.cache_displayed = cache_displayed
        self.cache_enabled = cache_enabled
        self.cache_selected = cache_selected

    def decorate_element(self, element):
        return _CachingElement(element, self)

    def __repr__(self):
        return (f"ElementStateCacheDecorator(displayed={self.cache_displayed}, "
                f"enabled={self.cache_enabled}, selected={self.cache_selected})")
