#!/usr/bin/env python3
"""
Configuration management module.

This module provides the project configuration used by ``browser_test``, the
pytest plugin and the command line, along with JSON load/save helpers and the
discovery of a project's own configuration.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from importlib.metadata import entry_points
from typing import Any, Callable, Dict, List, Optional

from ..browser.common.interface import Browser, BrowserFactory
from ..core.site import Site
from ..core.wait import WaitConfig
from ..exceptions import ProjectConfigurationException
from .argument_parser import create_parser

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "KOLIBRIUM_CONFIG"
ENTRY_POINT_GROUP = "kolibrium.configuration"

# Code-only fields; they never go to or come from JSON.
_RUNTIME_FIELDS = ("decorators", "driver_factories")


@dataclass
class ProjectConfiguration:
    """
    Project-wide defaults for browser tests.

    Serializable fields round-trip through JSON; decorators and driver
    factories can only be set from code.
    """
    # Site
    base_url: str = "about:blank"
    cookies: List[Dict[str, Any]] = field(default_factory=list)

    # Browser configuration
    default_browser: str = Browser.CHROME.value
    headless: bool = False
    keep_browser_open: bool = False
    webdriver_path: Optional[str] = None
    retry_count: int = 1

    # Synchronization
    wait_timeout: float = 10.0
    wait_polling: float = 0.2

    # Code-only
    decorators: List[Any] = field(default_factory=list)
    driver_factories: Dict[str, Callable[[], Any]] = field(default_factory=dict)

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.default_browser = Browser.of(self.default_browser).value
        if self.retry_count < 1:
            raise ValueError(f"retry_count must be at least 1, got {self.retry_count}")
        if not self.base_url or not self.base_url.strip():
            raise ValueError("base_url must not be blank")
        # Raises on invalid durations
        self.wait_config
        self.driver_factories = {Browser.of(name).value: factory
                                 for name, factory in self.driver_factories.items()}

    @property
    def wait_config(self) -> WaitConfig:
        return WaitConfig.DEFAULT.copy(timeout=self.wait_timeout, polling_interval=self.wait_polling)

    @property
    def browser(self) -> Browser:
        return Browser.of(self.default_browser)

    def driver_factory(self, browser: Optional[str] = None) -> Callable[[], Any]:
        """
        Return a zero-argument callable starting ``browser`` (default browser when omitted).

        A factory registered in ``driver_factories`` wins over the built-in one.
        """
        browser = Browser.of(browser or self.default_browser)
        if browser.value in self.driver_factories:
            return self.driver_factories[browser.value]

        def factory():
            return BrowserFactory.create(browser, headless=self.headless,
                                         webdriver_path=self.webdriver_path,
                                         retry_count=self.retry_count)
        return factory

    def site(self, base_url: Optional[str] = None) -> Site:
        """Build a Site from this configuration."""
        return Site(base_url=base_url or self.base_url, cookies=self.cookies,
                    decorators=self.decorators, wait_config=self.wait_config)

    @classmethod
    def from_args(cls, args):
        """
        Create a ProjectConfiguration from parsed command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            ProjectConfiguration: Configuration instance
        """
        return cls(
            base_url=args.url or "about:blank",
            default_browser=args.browser,
            headless=not args.visible,
            keep_browser_open=args.keep_browser_open,
            webdriver_path=args.webdriver_path,
            retry_count=args.retry_count,
            wait_timeout=args.timeout,
            wait_polling=args.polling,
        )

    def to_dict(self):
        """
        Convert configuration to a dictionary.

        Returns:
            dict: JSON-serializable representation without code-only fields
        """
        config_dict = asdict(self)
        for name in _RUNTIME_FIELDS:
            config_dict.pop(name)
        return config_dict

    @classmethod
    def from_dict(cls, config_dict):
        """
        Create a ProjectConfiguration from a dictionary.

        Raises:
            KeyError: If the dictionary contains unknown fields
        """
        known = {f.name for f in fields(cls)} - set(_RUNTIME_FIELDS)
        unknown = set(config_dict) - known
        if unknown:
            raise KeyError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")
        return cls(**config_dict)

    def print_summary(self):
        """Print a summary of the configuration."""
        print("\nKolibrium configuration:")
        print(f"- Base URL: {self.base_url}")
        print(f"- Browser: {self.default_browser} ({'Headless' if self.headless else 'Visible'})")
        print(f"- Wait: timeout {self.wait_timeout}s, polling {self.wait_polling}s")
        print(f"- Driver retries: {self.retry_count}")
        if self.cookies:
            print(f"- Cookies: {', '.join(c.get('name', '?') for c in self.cookies)}")
        if self.keep_browser_open:
            print("- Browser is kept open after the run")
        print()


def load_config(config_file: str) -> ProjectConfiguration:
    """
    Load configuration from a JSON file.

    Raises:
        FileNotFoundError: If the configuration file does not exist
        json.JSONDecodeError: If the configuration file is not valid JSON
    """
    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with open(config_file, 'r') as f:
        config_dict = json.load(f)
    return ProjectConfiguration.from_dict(config_dict)


def save_config(config: ProjectConfiguration, config_file: str) -> None:
    """
    Save configuration to a JSON file, creating the directory when needed.

    Raises:
        IOError: If the configuration file cannot be written
    """
    directory = os.path.dirname(os.path.abspath(config_file))
    if directory and not os.path.exists(directory):
        os.makedirs(directory)

    with open(config_file, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info("Configuration saved to %s", config_file)


def load_config_from_args(args) -> ProjectConfiguration:
    """
    Load configuration from a config file when given, letting explicit arguments override it.
    """
    if not args.config:
        return ProjectConfiguration.from_args(args)

    config = load_config(args.config)
    logger.info("Loaded configuration from %s", args.config)
    return _override_config_from_args(config, args)


def _override_config_from_args(config, args):
    """Override configuration fields with the options given on the command line."""
    explicit = getattr(args, "explicit_options", None)
    if explicit is None:
        defaults = vars(create_parser().parse_args([]))
        explicit = {key for key, value in vars(args).items() if value != defaults.get(key)}
    mapping = {
        "url": "base_url",
        "browser": "default_browser",
        "keep_browser_open": "keep_browser_open",
        "webdriver_path": "webdriver_path",
        "retry_count": "retry_count",
        "timeout": "wait_timeout",
        "polling": "wait_polling",
    }
    for key in explicit:
        value = getattr(args, key)
        if key == "visible":
            config.headless = not value
        elif key in mapping:
            setattr(config, mapping[key], value)
    config.__post_init__()
    return config


def _entry_point_candidates():
    eps = entry_points()
    if hasattr(eps, "select"):
        return list(eps.select(group=ENTRY_POINT_GROUP))
    return list(eps.get(ENTRY_POINT_GROUP, []))


def _instantiate(loaded) -> ProjectConfiguration:
    if isinstance(loaded, ProjectConfiguration):
        return loaded
    if callable(loaded):
        try:
            config = loaded()
        except Exception as e:
            raise ProjectConfigurationException(
                f"Failed to instantiate configuration {loaded!r}: {e}"
            ) from e
        if isinstance(config, ProjectConfiguration):
            return config
    raise ProjectConfigurationException(
        f"{loaded!r} is neither a ProjectConfiguration nor produces one"
    )


_project_configuration: Optional[ProjectConfiguration] = None


def load_project_configuration() -> ProjectConfiguration:
    """
    Discover the project configuration.

    The JSON file named by ``KOLIBRIUM_CONFIG`` wins. Otherwise entry points
    in the ``kolibrium.configuration`` group are used: none gives the
    defaults, exactly one is loaded, more than one is an error. The result is
    cached until ``reset_project_configuration`` is called.

    Raises:
        ProjectConfigurationException: If the configuration file cannot be
            read, several configurations are registered or the registered one
            cannot be loaded or instantiated
    """
    global _project_configuration
    if _project_configuration is not None:
        return _project_configuration

    config_file = os.environ.get(CONFIG_ENV_VAR)
    if config_file:
        logger.info("Loading project configuration from %s", config_file)
        try:
            _project_configuration = load_config(config_file)
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise ProjectConfigurationException(
                f"Failed to load project configuration from {config_file}: {e}"
            ) from e
        return _project_configuration

    candidates = _entry_point_candidates()
    if len(candidates) > 1:
        names = ", ".join(f"{ep.name} ({ep.value})" for ep in candidates)
        raise ProjectConfigurationException(
            f"Multiple project configurations found: {names}. Only one is allowed."
        )
    if not candidates:
        _project_configuration = ProjectConfiguration()
        return _project_configuration

    candidate = candidates[0]
    logger.info("Loading project configuration from %s", candidate.value)
    try:
        loaded = candidate.load()
    except (ImportError, AttributeError) as e:
        raise ProjectConfigurationException(
            f"Failed to load project configuration {candidate.value}: {e}"
        ) from e
    _project_configuration = _instantiate(loaded)
    return _project_configuration


def reset_project_configuration():
    """Forget the cached project configuration."""
    global _project_configuration
    _project_configuration = None
