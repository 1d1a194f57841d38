#!/usr/bin/env python3
"""
Interaction listener support.

Decorators that care about clicks and typed keys expose an
InteractionListener. All listeners of a session are multiplexed behind a
single outermost proxy, so each interaction is reported exactly once.
"""

import logging
from typing import Any, Iterable, List

from .base import AbstractDecorator, DecoratedElement

logger = logging.getLogger(__name__)


class InteractionListener:
    """Receives element interactions before they reach the browser."""

    def before_click(self, element: Any):
        pass

    def before_send_keys(self, element: Any, keys: str):
        pass


class ListenerMultiplexer(InteractionListener):
    """
    Fans every callback out to several listeners.

    A failing listener is logged and skipped; it never prevents the
    interaction or the remaining listeners from running.
    """

    def __init__(self, listeners: Iterable[InteractionListener]):
        self.listeners: List[InteractionListener] = list(listeners)

    def _dispatch(self, method: str, *args):
        for listener in self.listeners:
            try:
                getattr(listener, method)(*args)
            except Exception as e:
                logger.warning("Interaction listener %s failed in %s: %s",
                               type(listener).__name__, method, e)

    def before_click(self, element):
        self._dispatch("before_click", element)

    def before_send_keys(self, element, keys):
        self._dispatch("before_send_keys", element, keys)


class _ListeningElement(DecoratedElement):

    def click(self):
        self._decorator.listener.before_click(self._wrapped)
        return self._wrapped.click()

    def send_keys(self, *value):
        keys = "".join(str(part) for part in value)
        self._decorator.listener.before_send_keys(self._wrapped, keys)
        return self._wrapped.send_keys(*value)


class ListeningDecorator(AbstractDecorator):
    """Outermost decorator that reports interactions to a listener."""

    def __init__(self, listener: InteractionListener):
        self.listener = listener

    def decorate_element(self, element):
        return _ListeningElement(element, self)


class InteractionAware:
    """Mixin for decorators that provide an interaction listener."""

    def interaction_listener(self) -> InteractionListener:
        raise NotImplementedError
