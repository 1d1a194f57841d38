#!/usr/bin/env python3
"""
Action chain DSL for scrolling.

Actions are batched and performed when the ``with`` block ends, or performed
one by one when batching is off.
"""

from contextlib import contextmanager

from selenium.webdriver.common.action_chains import ActionChains

from ..decorators.base import unwrap


class ActionsScope:
    """
    Args:
        chain: The ActionChains being built
        batch: Defer ``perform`` until the scope closes
    """

    def __init__(self, chain: ActionChains, batch: bool = True):
        self.chain = chain
        self.batch = batch

    def _step(self):
        if not self.batch:
            self.chain.perform()

    @staticmethod
    def _validate(amount: int):
        if amount <= 0:
            raise ValueError("Scroll amount must be bigger than zero!")

    def scroll_to(self, element):
        self.chain.scroll_to_element(unwrap(element))
        self._step()

    def scroll_down(self, amount: int):
        self._validate(amount)
        self.chain.scroll_by_amount(0, amount)
        self._step()

    def scroll_up(self, amount: int):
        self._validate(amount)
        self.chain.scroll_by_amount(0, -amount)
        self._step()

    def scroll_right(self, amount: int):
        self._validate(amount)
        self.chain.scroll_by_amount(amount, 0)
        self._step()

    def scroll_left(self, amount: int):
        self._validate(amount)
        self.chain.scroll_by_amount(-amount, 0)
        self._step()


@contextmanager
def actions(driver, batch: bool = True):
    """
    Build scroll actions inside a ``with`` block.

    Example:
        with actions(driver) as scroll:
            scroll.scroll_down(300)
    """
    scope = ActionsScope(ActionChains(unwrap(driver)), batch)
    yield scope
    if batch:
        scope.chain.perform()
