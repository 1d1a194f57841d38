#!/usr/bin/env python3
"""
Highlighter decorator.

Draws a border around every element as it is found, removing the border
from the previously highlighted one.
"""

import logging
from enum import Enum

from .base import AbstractDecorator, unwrap

logger = logging.getLogger(__name__)

MIN_WIDTH = 1
MAX_WIDTH = 20

HIGHLIGHT_SCRIPT = """
const elements = document.querySelectorAll('[style*="border"]');
elements.forEach(el => el.style.removeProperty('border'));
arguments[0].style.border = arguments[1];
"""


class BorderStyle(Enum):
    DASHED = "dashed"
    DOTTED = "dotted"
    SOLID = "solid"


class Color(Enum):
    BLACK = "black"
    BLUE = "blue"
    GRAY = "gray"
    GREEN = "green"
    ORANGE = "orange"
    PINK = "pink"
    PURPLE = "purple"
    RED = "red"
    YELLOW = "yellow"
    WHITE = "white"


class HighlighterDecorator(AbstractDecorator):
    """
    Highlight found elements with a CSS border.

    Args:
        style: Border style
        color: Border color
        width: Border width in pixels, between 1 and 20
    """

    def __init__(self, style: BorderStyle = BorderStyle.SOLID, color: Color = Color.RED,
                 width: int = 5):
        if not MIN_WIDTH <= width <= MAX_WIDTH:
            raise ValueError("width must be between 1 and 20.")
        self.style = style
        self.color = color
        self.width = width

    @property
    def border(self) -> str:
        return f"{self.style.value} {self.color.value} {self.width}px"

    def after_find_element(self, element):
        self.highlight(element)
        return element

    def highlight(self, element):
        """Apply the border; failures are logged, never raised."""
        native = unwrap(element)
        driver = getattr(native, "parent", None)
        if driver is None:
            return
        try:
            driver.execute_script(HIGHLIGHT_SCRIPT, native, self.border)
        except Exception as e:
            logger.error("Failed to highlight element: %s", e)

    def __repr__(self):
        return f"HighlighterDecorator(border={self.border!r})"
