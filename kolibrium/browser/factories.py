#!/usr/bin/env python3
"""
Ready-made driver factories.

A driver factory is a zero-argument callable returning a started WebDriver;
``web_test`` and the project configuration accept any such callable.
"""

from typing import Callable

from .arguments import Arguments
from .driver import chrome_driver, edge_driver, firefox_driver, safari_driver

DriverFactory = Callable[[], object]


def _with_arguments(build, *arguments) -> DriverFactory:
    def factory():
        return build(options=lambda options: options.arguments(*arguments))
    return factory


def chrome():
    return chrome_driver()


def firefox():
    return firefox_driver()


def edge():
    return edge_driver()


def safari():
    return safari_driver()


headless_chrome = _with_arguments(chrome_driver, Arguments.Chrome.headless)
incognito_chrome = _with_arguments(chrome_driver, Arguments.Chrome.incognito)
headless_firefox = _with_arguments(firefox_driver, Arguments.Firefox.headless)
incognito_firefox = _with_arguments(firefox_driver, Arguments.Firefox.incognito)
headless_edge = _with_arguments(edge_driver, Arguments.Edge.headless)
in_private_edge = _with_arguments(edge_driver, Arguments.Edge.in_private)
