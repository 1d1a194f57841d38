import pytest
from selenium.webdriver.common.by import By

from kolibrium.core import locators
from kolibrium.core.page import Page
from kolibrium.core.site import (Session, SessionContext, Site, current_site,
                                 with_driver)
from kolibrium.dsl import PageEntry, PageScope
from kolibrium.exceptions import SessionError

from .conftest import FAST_WAIT, FakeElement


class ShopSite(Site):
    base_url = "https://shop.example.com"
    wait_config = FAST_WAIT


class PaymentSite(Site):
    base_url = "https://pay.example.com/"
    wait_config = FAST_WAIT


class CartPage(Page):
    path = "/cart"
    total = locators.id("total")
    ready = total


class InventoryPage(Page):
    path = "/inventory"
    checkout = locators.id("checkout")
    ready = checkout

    def open_cart(self):
        self.checkout.click()
        return CartPage()


@pytest.fixture
def shop(driver):
    driver.register(By.ID, "checkout", FakeElement("a"))
    driver.register(By.ID, "total", FakeElement("span"))
    session = Session(driver, ShopSite())
    with SessionContext.with_session(session), with_driver(driver):
        yield PageEntry(driver)


def test_operations_need_a_session(driver):
    with pytest.raises(SessionError, match="requires an active session"):
        PageEntry(driver).open(InventoryPage)


def test_open_navigates_and_follows_returned_page(shop, driver):
    scope = shop.open(InventoryPage, InventoryPage.open_cart)
    assert isinstance(scope, PageScope)
    assert isinstance(scope.page, CartPage)
    assert driver.visited == ["https://shop.example.com/inventory"]


def test_open_with_explicit_path(shop, driver):
    shop.open(InventoryPage, path="sale/")
    assert driver.current_url == "https://shop.example.com/sale/"


def test_on_checks_origin(shop, driver):
    driver.current_url = "https://www.shop.example.com/inventory"
    assert isinstance(shop.on(InventoryPage).page, InventoryPage)
    driver.current_url = "https://evil.example.org/"
    with pytest.raises(ValueError, match="Current tab origin does not match site origin"):
        shop.on(InventoryPage)


def test_scope_chaining(shop):
    seen = []
    scope = (shop.open(InventoryPage)
             .verify(lambda page: seen.append(("verify", type(page).__name__)))
             .then(lambda page: seen.append(("then", type(page).__name__)))
             .on(InventoryPage.open_cart))
    assert isinstance(scope.page, CartPage)
    assert seen == [("verify", "InventoryPage"), ("then", "InventoryPage")]
    assert scope.with_entry(lambda entry: entry) is shop


def test_verify_fails_when_page_not_ready(shop, driver):
    scope = shop.open(InventoryPage)
    driver.elements[(By.ID, "checkout")][0].displayed = False
    with pytest.raises(AssertionError):
        scope.verify(lambda page: None)


def test_cookie_operations(shop, driver):
    shop.add_cookie({"name": "a", "value": "1"})
    shop.add_cookie({"name": "b", "value": "2"})
    shop.delete_cookie("a")
    assert list(driver.cookies) == ["b"]
    shop.delete_all_cookies()
    assert driver.cookies == {}


def test_navigate_to_relative_path(shop, driver):
    shop.navigate_to("/about")
    assert driver.current_url == "https://shop.example.com/about"


class LocalFileSite(Site):
    base_url = "file:///tmp/site/index.html"
    wait_config = FAST_WAIT


def test_navigate_to_absolute_url_of_any_scheme(shop, driver):
    shop.navigate_to("file:///tmp/report.html")
    assert driver.current_url == "file:///tmp/report.html"
    shop.navigate_to("about:blank")
    assert driver.current_url == "about:blank"


def test_switch_to_site_with_file_base_url(shop, driver):
    shop.switch_to(LocalFileSite())
    assert driver.current_url == "file:///tmp/site/index.html"
    assert isinstance(current_site(), LocalFileSite)


def test_switch_to_new_window_and_back(shop, driver):
    scope = shop.open(InventoryPage)
    driver.open_window("payment")
    visited_sites = []

    switch_back = scope.switch_to(PaymentSite, lambda entry: visited_sites.append(entry.site),
                                  cookies=[{"name": "token", "value": "t"}])
    assert driver.current_window_handle == "payment"
    assert isinstance(visited_sites[0], PaymentSite)
    assert driver.current_url == "https://pay.example.com/"
    assert driver.cookies["token"]["value"] == "t"

    back = switch_back.switch_back(lambda page: visited_sites.append(type(page).__name__))
    assert driver.current_window_handle == "main"
    assert isinstance(current_site(), ShopSite)
    assert back.page is scope.page
    assert visited_sites[-1] == "InventoryPage"


def test_entry_switch_to_same_window(shop, driver):
    switch_back = shop.switch_to(PaymentSite(), navigate_to_base=False)
    assert driver.current_window_handle == "main"
    assert isinstance(current_site(), PaymentSite)
    entry = switch_back.switch_back()
    assert isinstance(entry, PageEntry)
    assert isinstance(current_site(), ShopSite)


def test_with_site_restores_original_site(shop, driver):
    result = shop.with_site(PaymentSite, lambda entry: entry.site.base_url)
    assert result == "https://pay.example.com/"
    assert isinstance(current_site(), ShopSite)
