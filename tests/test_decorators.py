import logging
from unittest import mock

import pytest
from selenium.webdriver.common.by import By

from kolibrium.decorators import (AbstractDecorator, BorderStyle, Color,
                                  DecoratorManager, ElementStateCacheDecorator,
                                  HighlighterDecorator, InteractionListener,
                                  ListenerMultiplexer, LoggerDecorator,
                                  SlowMotionDecorator, decorate_context,
                                  merge_decorators, unwrap)
from kolibrium.decorators.logger import TRACE, preview

from .conftest import FakeElement


class RecordingDecorator(AbstractDecorator):

    def __init__(self):
        self.finds = []

    def on_find(self, by, value):
        self.finds.append((by, value))


def test_decorated_driver_wraps_found_elements(driver):
    element = driver.register(By.ID, "a", FakeElement())
    decorator = RecordingDecorator()
    context = decorate_context(driver, [decorator])
    found = context.find_element(By.ID, "a")
    assert decorator.finds == [(By.ID, "a")]
    assert found.unwrap() is element
    assert found == element
    assert context.title == "Fake page"
    assert unwrap(context) is driver


def test_nested_lookups_stay_decorated(driver):
    parent = driver.register(By.ID, "form", FakeElement("form"))
    parent.children[(By.NAME, "q")] = [FakeElement("input")]
    decorator = RecordingDecorator()
    form = decorate_context(driver, [decorator]).find_element(By.ID, "form")
    form.find_element(By.NAME, "q")
    assert decorator.finds == [(By.ID, "form"), (By.NAME, "q")]


def test_merge_decorators_prefers_test_level():
    site_cache = ElementStateCacheDecorator()
    site_slow = SlowMotionDecorator(wait=2)
    test_slow = SlowMotionDecorator(wait=0)
    logger = LoggerDecorator()
    merged = merge_decorators([site_cache, site_slow], [test_slow, logger])
    assert merged == [site_cache, test_slow, logger]


def test_decorator_manager_using_restores():
    first, second = LoggerDecorator(), SlowMotionDecorator(wait=0)
    DecoratorManager.add(first)
    with DecoratorManager.using(second):
        assert DecoratorManager.get() == [first, second]
    assert DecoratorManager.get() == [first]
    DecoratorManager.clear()
    assert DecoratorManager.get() == []


def test_state_cache_only_caches_true(driver):
    element = driver.register(By.ID, "a", FakeElement(displayed=False))
    found = decorate_context(driver, [ElementStateCacheDecorator()]).find_element(By.ID, "a")
    assert found.is_displayed() is False
    element.displayed = True
    assert found.is_displayed() is True
    element.displayed = False
    assert found.is_displayed() is True
    assert element.calls.count("is_displayed") == 2
    found.is_enabled()
    found.is_enabled()
    assert element.calls.count("is_enabled") == 2


def test_state_cache_needs_one_state():
    with pytest.raises(ValueError, match="At least one state must be cached."):
        ElementStateCacheDecorator(cache_displayed=False)


def test_highlighter_runs_script_on_native_element(driver):
    element = driver.register(By.ID, "a", FakeElement())
    highlighter = HighlighterDecorator(style=BorderStyle.DASHED, color=Color.BLUE, width=3)
    decorate_context(driver, [highlighter]).find_element(By.ID, "a")
    script, args = driver.scripts[-1]
    assert args == (element, "dashed blue 3px")


def test_highlighter_logs_failures(driver, caplog):
    driver.register(By.ID, "a", FakeElement())
    driver.execute_script = mock.Mock(side_effect=RuntimeError("boom"))
    with caplog.at_level(logging.ERROR):
        decorate_context(driver, [HighlighterDecorator()]).find_element(By.ID, "a")
    assert "Failed to highlight element: boom" in caplog.text


@pytest.mark.parametrize("width", [0, 21])
def test_highlighter_width_range(width):
    with pytest.raises(ValueError, match="width must be between 1 and 20."):
        HighlighterDecorator(width=width)


def test_slow_motion_pauses_after_find_and_before_interactions(driver):
    driver.register(By.ID, "a", FakeElement("button"))
    slow = SlowMotionDecorator(wait=0.5)
    with mock.patch("kolibrium.decorators.slow_motion.time.sleep") as sleep:
        button = decorate_context(driver, [slow]).find_element(By.ID, "a")
        button.click()
        button.send_keys("hi")
    assert sleep.call_count == 3
    sleep.assert_called_with(0.5)


def test_slow_motion_rejects_negative_wait():
    with pytest.raises(ValueError, match="wait must not be negative."):
        SlowMotionDecorator(wait=-1)


def test_logger_decorator_logs_interactions(driver, caplog):
    element = driver.register(By.ID, "a", FakeElement("input"))
    with caplog.at_level(TRACE, logger="kolibrium.decorators.logger"):
        field = decorate_context(driver, [LoggerDecorator()]).find_element(By.ID, "a")
        field.click()
        field.send_keys("a rather long secret value")
    assert "find with locator { By.id: a }" in caplog.text
    assert "found element <input>" in caplog.text
    assert "beforeClick on <input>" in caplog.text
    assert "beforeSendKeys 'a rather long secret…' on <input>" in caplog.text
    assert element.typed == ["a rather long secret value"]
    assert element.calls.count("click") == 1


def test_preview():
    assert preview("short") == "short"
    assert preview("x" * 25) == "x" * 20 + "…"


def test_listener_multiplexer_isolates_failures(caplog):
    class Failing(InteractionListener):
        def before_click(self, element):
            raise RuntimeError("broken listener")

    class Recording(InteractionListener):
        def __init__(self):
            self.clicked = []

        def before_click(self, element):
            self.clicked.append(element)

    recording = Recording()
    ListenerMultiplexer([Failing(), recording]).before_click("el")
    assert recording.clicked == ["el"]
    assert "broken listener" in caplog.text


def test_each_interaction_is_reported_once(driver):
    driver.register(By.ID, "a", FakeElement("button"))
    slow, logger = SlowMotionDecorator(wait=0), LoggerDecorator()
    with mock.patch("kolibrium.decorators.slow_motion.time.sleep") as sleep:
        button = decorate_context(driver, [slow, logger]).find_element(By.ID, "a")
        sleep.reset_mock()
        button.click()
    assert sleep.call_count == 1
