#!/usr/bin/env python3
"""
Wait configuration module.

This module contains the WaitConfig value object used by locators, pages and
the DSL, along with helpers that turn it into a Selenium WebDriverWait.
"""

from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Any, Callable, Optional, Tuple, Type, Union

from selenium.common.exceptions import (NoSuchElementException,
                                        StaleElementReferenceException)
from selenium.webdriver.support.wait import WebDriverWait

Seconds = Union[int, float, timedelta]

MIN_POLLING_INTERVAL = 0.01
MIN_TIMEOUT = 0.1


def _to_seconds(value: Optional[Seconds]) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


@dataclass(frozen=True)
class WaitConfig:
    """
    Polling and timeout settings for element resolution and explicit waits.

    Durations are expressed in seconds; ``timedelta`` values are accepted and
    converted. A ``None`` polling interval uses Selenium's default poll
    frequency (0.5s); a ``None`` timeout uses ``DEFAULT_TIMEOUT`` (10s).

    Attributes:
        polling_interval: Time between two evaluations of the wait condition
        timeout: Maximum time to wait before raising TimeoutException
        message: Message attached to the TimeoutException
        ignoring: Exception types swallowed while polling
    """
    polling_interval: Optional[Seconds] = None
    timeout: Optional[Seconds] = None
    message: Optional[str] = None
    ignoring: Tuple[Type[BaseException], ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Normalize durations and validate them."""
        polling = _to_seconds(self.polling_interval)
        timeout = _to_seconds(self.timeout)
        object.__setattr__(self, "polling_interval", polling)
        object.__setattr__(self, "timeout", timeout)
        object.__setattr__(self, "ignoring", tuple(dict.fromkeys(self.ignoring)))

        if polling is not None:
            if polling < 0:
                raise ValueError("pollingInterval must not be negative")
            if polling < MIN_POLLING_INTERVAL:
                raise ValueError("pollingInterval must be at least 10ms")
        if timeout is not None:
            if timeout < 0:
                raise ValueError("timeout must not be negative")
            if timeout < MIN_TIMEOUT:
                raise ValueError("timeout must be at least 100ms")
        if polling is not None and timeout is not None and polling > timeout:
            raise ValueError("pollingInterval must not be greater than timeout")

    def copy(self, **changes) -> "WaitConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def with_ignoring(self, *exceptions: Type[BaseException]) -> "WaitConfig":
        """Return a copy that additionally ignores ``exceptions``."""
        return replace(self, ignoring=self.ignoring + tuple(exceptions))

    def to_wait(self, context: Any) -> WebDriverWait:
        """
        Build a WebDriverWait over ``context`` honoring this configuration.

        Args:
            context: Driver, element or any object handed to the wait condition

        Returns:
            WebDriverWait: Configured wait instance
        """
        kwargs = {"ignored_exceptions": self.ignoring or None}
        if self.polling_interval is not None:
            kwargs["poll_frequency"] = self.polling_interval
        timeout = self.timeout if self.timeout is not None else DEFAULT_TIMEOUT
        return WebDriverWait(context, timeout, **kwargs)

    def describe(self) -> str:
        """Short human readable summary used in descriptor representations."""
        return f"(timeout={self.timeout}, polling={self.polling_interval})"


DEFAULT_TIMEOUT = 10.0

WaitConfig.DEFAULT = WaitConfig(
    polling_interval=0.2,
    timeout=DEFAULT_TIMEOUT,
    message="Element could not be found",
    ignoring=(NoSuchElementException,),
)
WaitConfig.QUICK = WaitConfig(
    polling_interval=0.1,
    timeout=2.0,
    message="Element could not be found",
    ignoring=(NoSuchElementException,),
)
WaitConfig.PATIENT = WaitConfig(
    polling_interval=0.5,
    timeout=30.0,
    message="Element could not be found",
    ignoring=(NoSuchElementException,),
)


def wait(context: Any, condition: Callable[[Any], Any],
         config: Optional[WaitConfig] = None, message: Optional[str] = None) -> Any:
    """
    Wait until ``condition(context)`` returns a truthy value.

    Stale element references are ignored in addition to whatever the
    configuration ignores, since the condition is expected to re-query.

    Args:
        context: Object passed to the condition on each poll
        condition: Callable evaluated until it returns something truthy
        config: Wait configuration (defaults to WaitConfig.DEFAULT)
        message: Overrides the configured timeout message

    Returns:
        The first truthy value returned by the condition

    Raises:
        TimeoutException: If the condition never succeeds within the timeout
    """
    config = (config or WaitConfig.DEFAULT).with_ignoring(StaleElementReferenceException)
    return config.to_wait(context).until(condition, message or config.message or "")
