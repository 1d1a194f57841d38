from datetime import datetime, timezone
from unittest import mock

import pytest

from kolibrium.decorators import SlowMotionDecorator, decorate_context
from kolibrium.dsl import SameSite, actions, cookie, cookies, iframe, navigate_to

from .conftest import FakeElement


def test_cookie_builder():
    expiry = datetime(2030, 1, 1, tzinfo=timezone.utc)
    built = cookie("session", "abc", domain="example.com", path="/", expires_on=expiry,
                   secure=True, http_only=True, same_site=SameSite.LAX)
    assert built == {
        "name": "session", "value": "abc", "domain": "example.com", "path": "/",
        "expiry": int(expiry.timestamp()), "secure": True, "httpOnly": True, "sameSite": "Lax",
    }
    assert cookie("a", "b") == {"name": "a", "value": "b"}
    with pytest.raises(ValueError):
        cookie(" ", "b")


def test_cookies_scope(driver):
    with cookies(driver) as jar:
        jar.add_cookie("locale", "en-US", path="/")
        jar.put_all({"theme": "dark", "tz": "UTC"})
        jar.add_all({"name": "extra", "value": "1"})
        assert jar.get_cookie("locale") == {"name": "locale", "value": "en-US", "path": "/"}
        jar.delete_cookie({"name": "theme"})
        jar.delete_cookie("tz")
        assert [c["name"] for c in jar.get_cookies()] == ["locale", "extra"]
        jar.delete_cookies()
        assert jar.get_cookies() == []
    assert driver.refreshed == 0


def test_cookies_refresh_page(driver):
    with cookies(driver, refresh_page=True) as jar:
        jar.put("a", "1")
    assert driver.refreshed == 1


def test_iframe_switches_back_even_on_error(driver):
    frame = FakeElement("iframe")
    wrapped = decorate_context(frame, [SlowMotionDecorator(wait=0)])
    with pytest.raises(RuntimeError):
        with iframe(driver, wrapped):
            raise RuntimeError("inside frame")
    assert driver.switch_to.frames == [frame, None]


@pytest.mark.parametrize("current, target, expected", [
    ("https://example.com/shop/items", "/cart", "https://example.com/cart"),
    ("https://example.com/shop/", "cart/../checkout/?step=2", "https://example.com/checkout/?step=2"),
    ("https://example.com/", "https://other.org/x", "https://other.org/x"),
])
def test_navigate_to(driver, current, target, expected):
    driver.current_url = current
    navigate_to(driver, target)
    assert driver.current_url == expected


def test_actions_batch_performs_once(driver):
    with mock.patch("kolibrium.dsl.actions.ActionChains") as chains:
        chain = chains.return_value
        with actions(driver) as scroll:
            scroll.scroll_down(300)
            scroll.scroll_left(20)
        chains.assert_called_once_with(driver)
        chain.scroll_by_amount.assert_has_calls([mock.call(0, 300), mock.call(-20, 0)])
        assert chain.perform.call_count == 1


def test_actions_unbatched_perform_each_step(driver):
    element = FakeElement()
    with mock.patch("kolibrium.dsl.actions.ActionChains") as chains:
        chain = chains.return_value
        with actions(driver, batch=False) as scroll:
            scroll.scroll_to(decorate_context(element, [SlowMotionDecorator(wait=0)]))
            scroll.scroll_up(10)
        chain.scroll_to_element.assert_called_once_with(element)
        assert chain.perform.call_count == 2


@pytest.mark.parametrize("amount", [0, -5])
def test_scroll_amount_must_be_positive(driver, amount):
    with mock.patch("kolibrium.dsl.actions.ActionChains"):
        with actions(driver) as scroll, pytest.raises(ValueError, match="Scroll amount must be bigger than zero!"):
            scroll.scroll_right(amount)
