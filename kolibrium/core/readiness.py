#!/usr/bin/env python3
"""
Page readiness descriptors.

A readiness descriptor names an element that must reach a state before a
page counts as loaded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .locator_utils import Locator, find, is_clickable
from .wait import WaitConfig


class ReadinessCondition(Enum):
    IS_DISPLAYED = "displayed"
    IS_ENABLED = "enabled"
    IS_CLICKABLE = "clickable"

    def check(self, element) -> bool:
        if self is ReadinessCondition.IS_DISPLAYED:
            return element.is_displayed()
        if self is ReadinessCondition.IS_ENABLED:
            return element.is_enabled()
        return is_clickable(element)


@dataclass(frozen=True)
class ReadinessDescriptor:
    """
    Attributes:
        locator: Where the element is
        wait_config: Wait override; the site's configuration is used otherwise
        condition: State the element must reach
        custom: Extra check that must also pass
    """
    locator: Locator
    wait_config: Optional[WaitConfig] = None
    condition: ReadinessCondition = ReadinessCondition.IS_DISPLAYED
    custom: Optional[Callable[[Any], bool]] = None

    def is_ready(self, context) -> bool:
        """Find the element once and evaluate the condition and the custom check."""
        element = find(context, self.locator)
        if not self.condition.check(element):
            return False
        return self.custom is None or bool(self.custom(element))


def to_readiness_descriptor(descriptor, condition: ReadinessCondition = ReadinessCondition.IS_DISPLAYED,
                            custom: Optional[Callable[[Any], bool]] = None) -> ReadinessDescriptor:
    """Build a readiness descriptor from a locator descriptor, keeping its locator and wait."""
    return ReadinessDescriptor(
        locator=descriptor.locator,
        wait_config=descriptor.wait_config,
        condition=condition,
        custom=custom,
    )
