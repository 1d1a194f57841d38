"""
Shared fixtures: an in-memory WebDriver stand-in and clean thread-local state.
"""

import pytest
from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By

from kolibrium.cli.config import reset_project_configuration
from kolibrium.core.site import SessionContext, SiteContext
from kolibrium.core.wait import WaitConfig
from kolibrium.decorators.manager import DecoratorManager

FAST_WAIT = WaitConfig(polling_interval=0.01, timeout=0.2)


class FakeElement:
    """Element with switchable state that records interactions."""

    def __init__(self, tag_name="div", displayed=True, enabled=True, selected=False, parent=None):
        self.tag_name = tag_name
        self.displayed = displayed
        self.enabled = enabled
        self.selected = selected
        self.parent = parent
        self.calls = []
        self.typed = []
        self.children = {}

    def is_displayed(self):
        self.calls.append("is_displayed")
        return self.displayed

    def is_enabled(self):
        self.calls.append("is_enabled")
        return self.enabled

    def is_selected(self):
        self.calls.append("is_selected")
        return self.selected

    def click(self):
        self.calls.append("click")

    def send_keys(self, *value):
        self.typed.append("".join(value))

    def find_element(self, by=By.ID, value=None):
        found = self.children.get((by, value))
        if not found:
            raise NoSuchElementException(f"{by}={value}")
        return found[0]

    def find_elements(self, by=By.ID, value=None):
        return list(self.children.get((by, value), []))

    def __repr__(self):
        return f"FakeElement(<{self.tag_name}>)"


class FakeSwitchTo:

    def __init__(self, driver):
        self.driver = driver
        self.frames = []

    def window(self, handle):
        if handle not in self.driver.window_handles:
            raise ValueError(f"no such window: {handle}")
        self.driver.current_window_handle = handle

    def frame(self, element):
        self.frames.append(element)

    def default_content(self):
        self.frames.append(None)


class FakeWebDriver:
    """Just enough of a WebDriver for locators, pages and the DSL."""

    def __init__(self, title="Fake page"):
        self.title = title
        self.current_url = "about:blank"
        self.visited = []
        self.elements = {}
        self.cookies = {}
        self.window_handles = ["main"]
        self.current_window_handle = "main"
        self.switch_to = FakeSwitchTo(self)
        self.scripts = []
        self.quit_called = False
        self.refreshed = 0

    def register(self, by, value, *elements):
        for element in elements:
            element.parent = self
        self.elements.setdefault((by, value), []).extend(elements)
        return elements[0] if len(elements) == 1 else elements

    def find_element(self, by=By.ID, value=None):
        found = self.elements.get((by, value))
        if not found:
            raise NoSuchElementException(f"{by}={value}")
        return found[0]

    def find_elements(self, by=By.ID, value=None):
        return list(self.elements.get((by, value), []))

    def get(self, url):
        self.current_url = url
        self.visited.append(url)

    def refresh(self):
        self.refreshed += 1

    def add_cookie(self, cookie):
        self.cookies[cookie["name"]] = dict(cookie)

    def get_cookie(self, name):
        return self.cookies.get(name)

    def get_cookies(self):
        return list(self.cookies.values())

    def delete_cookie(self, name):
        self.cookies.pop(name, None)

    def delete_all_cookies(self):
        self.cookies.clear()

    def open_window(self, handle):
        self.window_handles.append(handle)

    def execute_script(self, script, *args):
        self.scripts.append((script, args))

    def quit(self):
        self.quit_called = True


@pytest.fixture
def driver():
    return FakeWebDriver()


@pytest.fixture
def fast_wait():
    return FAST_WAIT


@pytest.fixture(autouse=True)
def clean_thread_state():
    SessionContext.clear()
    SiteContext.set(None)
    DecoratorManager.clear()
    reset_project_configuration()
    yield
    SessionContext.clear()
    SiteContext.set(None)
    DecoratorManager.clear()
    reset_project_configuration()
