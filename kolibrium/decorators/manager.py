#!/usr/bin/env python3
"""
Test-level decorator registry.

Decorators registered here apply only to the current thread, on top of the
decorators declared by the active site.
"""

import threading
from contextlib import contextmanager
from typing import Any, Iterable, List

from .base import AbstractDecorator
from .listeners import ListenerMultiplexer, ListeningDecorator


class DecoratorManager:
    """Thread-local list of test-level decorators."""

    _local = threading.local()

    @classmethod
    def _decorators(cls) -> List[AbstractDecorator]:
        if not hasattr(cls._local, "decorators"):
            cls._local.decorators = []
        return cls._local.decorators

    @classmethod
    def add(cls, *decorators: AbstractDecorator):
        cls._decorators().extend(decorators)

    @classmethod
    def get(cls) -> List[AbstractDecorator]:
        return list(cls._decorators())

    @classmethod
    def clear(cls):
        cls._local.decorators = []

    @classmethod
    @contextmanager
    def using(cls, *decorators: AbstractDecorator):
        """Register ``decorators`` for the duration of a ``with`` block."""
        previous = cls.get()
        cls.add(*decorators)
        try:
            yield
        finally:
            cls._local.decorators = previous


def _distinct_by_class(decorators: Iterable[AbstractDecorator]) -> List[AbstractDecorator]:
    # Last one of a class wins, first one keeps the position.
    by_class = {}
    for decorator in decorators:
        by_class[type(decorator)] = decorator
    return list(by_class.values())


def merge_decorators(site_decorators: Iterable[AbstractDecorator],
                     test_decorators: Iterable[AbstractDecorator]) -> List[AbstractDecorator]:
    """
    Combine site-level and test-level decorators.

    Each list is de-duplicated by class; when both contain the same class the
    test-level instance wins. Site-level decorators come first.

    Args:
        site_decorators: Decorators declared by the site
        test_decorators: Decorators registered for the current test

    Returns:
        list: Ordered, de-duplicated decorators
    """
    test_level = _distinct_by_class(test_decorators)
    test_classes = {type(decorator) for decorator in test_level}
    site_level = [decorator for decorator in _distinct_by_class(site_decorators)
                  if type(decorator) not in test_classes]
    return site_level + test_level


def decorate_context(context: Any, decorators: Iterable[AbstractDecorator]) -> Any:
    """
    Fold ``context`` through every decorator, in order.

    When at least one decorator is interaction aware, an outermost proxy is
    added that reports clicks and typed keys to all their listeners.
    """
    decorators = list(decorators)
    for decorator in decorators:
        context = decorator.decorate(context)
    listeners = [listener for listener in (d.interaction_listener() for d in decorators)
                 if listener is not None]
    if listeners:
        context = ListeningDecorator(ListenerMultiplexer(listeners)).decorate(context)
    return context
