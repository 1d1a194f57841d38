import pytest
from selenium.common.exceptions import TimeoutException
from selenium.webdriver.common.by import By

from kolibrium.core import locators
from kolibrium.core.page import Page, join_urls, resolve_url
from kolibrium.core.readiness import (ReadinessCondition, ReadinessDescriptor,
                                      to_readiness_descriptor)
from kolibrium.core.locator_utils import Locator
from kolibrium.core.site import with_driver
from kolibrium.exceptions import ProjectConfigurationException

from .conftest import FAST_WAIT, FakeElement


class InventoryPage(Page):
    path = "/inventory.html"
    title_label = locators.class_name("title", wait_config=FAST_WAIT)
    checkout = locators.id("checkout", wait_config=FAST_WAIT)
    ready = [title_label, ReadinessDescriptor(Locator(By.ID, "checkout"), FAST_WAIT,
                                              ReadinessCondition.IS_CLICKABLE)]


@pytest.mark.parametrize("base, path, expected", [
    ("https://example.com", "", "https://example.com"),
    ("https://example.com/", "/a", "https://example.com/a"),
    ("https://example.com", "a/b", "https://example.com/a/b"),
    ("https://example.com", "https://other.org/x", "https://other.org/x"),
    ("https://example.com", "file:///tmp/site/index.html", "file:///tmp/site/index.html"),
    ("https://example.com", "about:blank", "about:blank"),
])
def test_join_urls(base, path, expected):
    assert join_urls(base, path) == expected


def test_resolve_url():
    assert resolve_url("https://a.org/x") == "https://a.org/x"
    assert resolve_url("shop/../cart/", "https://example.com/") == "https://example.com/cart/"
    assert resolve_url("/items?id=3", "https://example.com") == "https://example.com/items?id=3"
    with pytest.raises(ProjectConfigurationException, match="relative URL"):
        resolve_url("/items")


def test_to_readiness_descriptor_keeps_locator_and_wait():
    descriptor = to_readiness_descriptor(locators.id("a", wait_config=FAST_WAIT),
                                         ReadinessCondition.IS_ENABLED)
    assert descriptor.locator == Locator(By.ID, "a")
    assert descriptor.wait_config is FAST_WAIT
    assert descriptor.condition is ReadinessCondition.IS_ENABLED


def test_readiness_descriptors_normalize_declaration():
    descriptors = InventoryPage().readiness_descriptors()
    assert [d.locator for d in descriptors] == [Locator(By.CLASS_NAME, "title"), Locator(By.ID, "checkout")]
    assert Page().readiness_descriptors() == []


def test_unsupported_readiness_declaration():
    class Broken(Page):
        ready = "title"

    with pytest.raises(TypeError):
        Broken().readiness_descriptors()


def test_await_ready_and_assert_ready(driver):
    driver.register(By.CLASS_NAME, "title", FakeElement("span"))
    button = driver.register(By.ID, "checkout", FakeElement("button", enabled=False))
    page = InventoryPage()
    with with_driver(driver):
        with pytest.raises(TimeoutException, match="InventoryPage did not become ready: By.id: checkout"):
            page.await_ready()
        with pytest.raises(AssertionError, match="InventoryPage is not ready"):
            page.assert_ready()
        button.enabled = True
        page.await_ready()
        page.assert_ready()


def test_custom_readiness_check(driver):
    driver.register(By.ID, "total", FakeElement("span"))

    class CartPage(Page):
        ready = ReadinessDescriptor(Locator(By.ID, "total"), FAST_WAIT, custom=lambda el: el.tag_name == "div")

    with with_driver(driver), pytest.raises(AssertionError):
        CartPage().assert_ready()


def test_page_delegates_to_driver(driver):
    with with_driver(driver):
        page = InventoryPage()
        assert page.title == "Fake page"
        assert page.driver is driver
        with pytest.raises(AttributeError):
            page._private
