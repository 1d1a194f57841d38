#!/usr/bin/env python3
"""
Slow motion decorator.

Pauses after every lookup and before every click or key press so a human
can follow the test in a visible browser.
"""

import time
from datetime import timedelta
from typing import Union

from .base import AbstractDecorator
from .listeners import InteractionAware, InteractionListener


class _SlowListener(InteractionListener):

    def __init__(self, decorator: "SlowMotionDecorator"):
        self.decorator = decorator

    def before_click(self, element):
        self.decorator.pause()

    def before_send_keys(self, element, keys):
        self.decorator.pause()


class SlowMotionDecorator(InteractionAware, AbstractDecorator):
    """
    Args:
        wait: Pause length in seconds (or a timedelta); must not be negative
    """

    def __init__(self, wait: Union[int, float, timedelta] = 1.0):
        if isinstance(wait, timedelta):
            wait = wait.total_seconds()
        if wait < 0:
            raise ValueError("wait must not be negative.")
        self.wait = float(wait)

    def pause(self):
        time.sleep(self.wait)

    def after_find_element(self, element):
        self.pause()
        return element

    def after_find_elements(self, elements):
        self.pause()
        return elements

    def interaction_listener(self):
        return _SlowListener(self)

    def __repr__(self):
        return f"SlowMotionDecorator(wait={self.wait})"
