#!/usr/bin/env python3
"""
Exception types raised by kolibrium.

Selenium's own exceptions (timeouts, missing elements, stale references)
are never wrapped; the classes here cover configuration mistakes and
misuse of the session-bound DSL.
"""


class ConfigurationException(Exception):
    """Raised when a site or project configuration is invalid."""


class ProjectConfigurationException(ConfigurationException):
    """Raised when the project configuration cannot be discovered or loaded."""


class DslConfigurationException(ConfigurationException):
    """Raised when a value passed to the driver creation DSL is rejected."""


class SessionError(RuntimeError):
    """Raised when a DSL operation needs an active session or driver and none is bound."""


class ThreadConfinementError(RuntimeError):
    """Raised when a session is used from a thread other than the one that created it."""
