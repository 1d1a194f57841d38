"""
Common browser definitions.

This package contains the Browser enumeration and the factory shared by the
CLI, the pytest plugin and the project configuration.
"""

from .interface import Browser, BrowserFactory

__all__ = ["Browser", "BrowserFactory"]
