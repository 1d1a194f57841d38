#!/usr/bin/env python3
"""
Logger decorator.

Logs every lookup at TRACE level and every click or key press at DEBUG.
"""

import logging

from selenium.common.exceptions import StaleElementReferenceException

from .base import AbstractDecorator
from .listeners import InteractionAware, InteractionListener

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

MAX_PREVIEW_CHARS = 20
ELLIPSIS = "…"

logger = logging.getLogger(__name__)


def _safe_tag(element) -> str:
    try:
        return element.tag_name
    except Exception:
        return "?"


def preview(keys: str) -> str:
    """Shorten typed text for log output."""
    if len(keys) > MAX_PREVIEW_CHARS:
        return keys[:MAX_PREVIEW_CHARS] + ELLIPSIS
    return keys


class _InteractionLogger(InteractionListener):

    def before_click(self, element):
        logger.debug("beforeClick on <%s>", _safe_tag(element))

    def before_send_keys(self, element, keys):
        logger.debug("beforeSendKeys '%s' on <%s>", preview(keys), _safe_tag(element))


class LoggerDecorator(InteractionAware, AbstractDecorator):
    """Log lookups and interactions made through decorated contexts."""

    def on_find(self, by, value):
        logger.log(TRACE, "find with locator { By.%s: %s }", by, value)

    def after_find_element(self, element):
        try:
            logger.log(TRACE, "found element <%s>", element.tag_name)
        except StaleElementReferenceException:
            logger.debug("stale element reference while reading element's HTML tag; "
                         "element reference is no longer valid")
        return element

    def after_find_elements(self, elements):
        logger.log(TRACE, "found %d element(s)", len(elements))
        return elements

    def interaction_listener(self):
        return _InteractionLogger()
