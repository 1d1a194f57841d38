from datetime import timedelta

import pytest
from selenium.common.exceptions import (NoSuchElementException,
                                        StaleElementReferenceException,
                                        TimeoutException)

from kolibrium.core.wait import DEFAULT_TIMEOUT, WaitConfig, wait


def test_timedelta_is_converted_to_seconds():
    config = WaitConfig(polling_interval=timedelta(milliseconds=250), timeout=timedelta(seconds=3))
    assert config.polling_interval == 0.25
    assert config.timeout == 3.0


@pytest.mark.parametrize("kwargs, message", [
    ({"polling_interval": -1}, "pollingInterval must not be negative"),
    ({"polling_interval": 0.005}, "pollingInterval must be at least 10ms"),
    ({"timeout": -1}, "timeout must not be negative"),
    ({"timeout": 0.05}, "timeout must be at least 100ms"),
    ({"polling_interval": 2, "timeout": 1}, "pollingInterval must not be greater than timeout"),
])
def test_invalid_durations_are_rejected(kwargs, message):
    with pytest.raises(ValueError, match=message):
        WaitConfig(**kwargs)


def test_presets():
    assert (WaitConfig.DEFAULT.polling_interval, WaitConfig.DEFAULT.timeout) == (0.2, 10.0)
    assert (WaitConfig.QUICK.polling_interval, WaitConfig.QUICK.timeout) == (0.1, 2.0)
    assert (WaitConfig.PATIENT.polling_interval, WaitConfig.PATIENT.timeout) == (0.5, 30.0)
    for preset in (WaitConfig.DEFAULT, WaitConfig.QUICK, WaitConfig.PATIENT):
        assert preset.message == "Element could not be found"
        assert preset.ignoring == (NoSuchElementException,)


def test_with_ignoring_adds_without_duplicates():
    config = WaitConfig.DEFAULT.with_ignoring(NoSuchElementException, StaleElementReferenceException)
    assert config.ignoring == (NoSuchElementException, StaleElementReferenceException)
    assert WaitConfig.DEFAULT.ignoring == (NoSuchElementException,)


def test_copy_replaces_fields_and_revalidates():
    assert WaitConfig.DEFAULT.copy(timeout=5).timeout == 5.0
    with pytest.raises(ValueError):
        WaitConfig.DEFAULT.copy(timeout=0.1, polling_interval=0.5)


def test_to_wait_uses_default_timeout_when_unset():
    waiter = WaitConfig().to_wait(object())
    assert waiter._timeout == DEFAULT_TIMEOUT
    assert waiter._poll == 0.5


def test_describe():
    assert WaitConfig.QUICK.describe() == "(timeout=2.0, polling=0.1)"


def test_wait_returns_first_truthy_value(fast_wait):
    attempts = []

    def condition(_):
        attempts.append(1)
        if len(attempts) < 3:
            raise StaleElementReferenceException("stale")
        return "done"

    assert wait(object(), condition, fast_wait) == "done"
    assert len(attempts) == 3


def test_wait_raises_timeout_with_message(fast_wait):
    with pytest.raises(TimeoutException, match="never ready"):
        wait(object(), lambda _: False, fast_wait, message="never ready")
