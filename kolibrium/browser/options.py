#!/usr/bin/env python3
"""
Browser options configuration module.

This module contains the scopes that collect browser capabilities
(arguments, window size, preferences, proxy, timeouts, extensions) and apply
them to Selenium's option objects for Chrome, Edge, Firefox and Safari.
"""

import logging
from datetime import timedelta
from typing import Any, Dict, List, Optional, Union

from selenium.webdriver import ChromeOptions, EdgeOptions, FirefoxOptions, SafariOptions
from selenium.webdriver.common.proxy import Proxy
from selenium.webdriver.firefox.firefox_profile import FirefoxProfile

from .arguments import (Argument, ChromeArgument, EdgeArgument, ExperimentalFlag,
                        FirefoxArgument, PageLoadStrategy, Switch,
                        UnexpectedAlertBehaviour)
from .service import if_exists

logger = logging.getLogger(__name__)

MIN_WINDOW_WIDTH = 1280
MIN_WINDOW_HEIGHT = 720

Seconds = Union[int, float, timedelta]


def _millis(value: Seconds) -> int:
    if isinstance(value, timedelta):
        return int(value.total_seconds() * 1000)
    return int(value * 1000)


class OptionsScope:
    """
    Capabilities shared by every browser.

    Attributes:
        accept_insecure_certs: Trust self-signed or expired certificates
        browser_version: Requested browser version
        page_load_strategy: When navigation counts as finished
        platform: Requested platform name
        strict_file_interactability: Check file inputs for interactability
        unhandled_prompt_behaviour: What to do with unexpected alerts
    """

    options_class = None
    argument_class = Argument

    def __init__(self):
        self.accept_insecure_certs: Optional[bool] = None
        self.browser_version: Optional[str] = None
        self.page_load_strategy: Optional[PageLoadStrategy] = None
        self.platform: Optional[str] = None
        self.strict_file_interactability: Optional[bool] = None
        self.unhandled_prompt_behaviour: Optional[UnexpectedAlertBehaviour] = None
        self.args: List[str] = []
        self.timeout_values: Dict[str, int] = {}
        self.proxy_settings: Optional[Dict[str, Any]] = None

    def arguments(self, *args: str):
        """Add command line arguments; plain strings are validated as this browser's arguments."""
        for arg in args:
            if not isinstance(arg, Argument):
                arg = self.argument_class(arg)
            if arg not in self.args:
                self.args.append(arg)

    def timeouts(self, implicit_wait: Optional[Seconds] = None, page_load: Optional[Seconds] = None,
                 script: Optional[Seconds] = None):
        """Set session timeouts, in seconds or as timedelta."""
        if implicit_wait is not None:
            self.timeout_values["implicit"] = _millis(implicit_wait)
        if page_load is not None:
            self.timeout_values["pageLoad"] = _millis(page_load)
        if script is not None:
            self.timeout_values["script"] = _millis(script)

    def proxy(self, proxy_type: Optional[str] = None, autodetect: Optional[bool] = None,
              http_proxy: Optional[str] = None, ssl_proxy: Optional[str] = None,
              no_proxy: Optional[str] = None, proxy_autoconfig_url: Optional[str] = None,
              socks_proxy: Optional[str] = None, socks_version: Optional[int] = None,
              socks_username: Optional[str] = None, socks_password: Optional[str] = None):
        """
        Route browser traffic through a proxy.

        ``proxy_type`` accepts a ProxyType attribute name such as ``MANUAL``
        or ``PAC``. When omitted, Selenium infers it from the first setting
        given (``MANUAL`` for proxies, ``PAC`` for an autoconfig URL,
        ``AUTODETECT`` for autodetection).
        """
        raw = {
            "proxyType": proxy_type.upper() if proxy_type else None,
            "autodetect": autodetect,
            "httpProxy": http_proxy,
            "sslProxy": ssl_proxy,
            "noProxy": no_proxy,
            "proxyAutoconfigUrl": proxy_autoconfig_url,
            "socksProxy": socks_proxy,
            "socksVersion": socks_version,
            "socksUsername": socks_username,
            "socksPassword": socks_password,
        }
        self.proxy_settings = {key: value for key, value in raw.items() if value is not None}

    def build_proxy(self) -> Optional[Proxy]:
        if self.proxy_settings is None:
            return None
        return Proxy(raw=self.proxy_settings)

    def configure(self, options):
        """Apply the shared capabilities to a Selenium options object."""
        if self.accept_insecure_certs is not None:
            options.accept_insecure_certs = self.accept_insecure_certs
        if self.browser_version is not None:
            options.browser_version = self.browser_version
        if self.page_load_strategy is not None:
            options.page_load_strategy = PageLoadStrategy(self.page_load_strategy).value
        if self.platform is not None:
            options.platform_name = self.platform
        if self.strict_file_interactability is not None:
            options.strict_file_interactability = self.strict_file_interactability
        if self.unhandled_prompt_behaviour is not None:
            options.unhandled_prompt_behavior = UnexpectedAlertBehaviour(self.unhandled_prompt_behaviour).value
        if self.timeout_values:
            options.timeouts = dict(self.timeout_values)
        proxy = self.build_proxy()
        if proxy is not None:
            options.proxy = proxy
        for arg in self.args:
            options.add_argument(str(arg))

    def build(self):
        options = self.options_class()
        self.configure(options)
        return options

    def __repr__(self):
        return (f"{type(self).__name__}(arguments={self.args}, acceptInsecureCerts={self.accept_insecure_certs}, "
                f"pageLoadStrategy={self.page_load_strategy}, timeouts={self.timeout_values})")


class ChromiumOptionsScope(OptionsScope):
    """Capabilities shared by Chrome and Edge."""

    def __init__(self):
        super().__init__()
        self.binary: Optional[str] = None
        self.prefs: Dict[str, Any] = {}
        self.excluded_switches: List[str] = []
        self.lab_flags: List[str] = []
        self.extension_paths: List[str] = []

    def window_size(self, width: int, height: int):
        """Start with a window of ``width`` x ``height``; sizes below 1280x720 are ignored."""
        if width < MIN_WINDOW_WIDTH or height < MIN_WINDOW_HEIGHT:
            logger.debug("Window size %dx%d is below %dx%d, keeping the browser default",
                         width, height, MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)
            return
        self.args = [arg for arg in self.args if not arg.startswith("--window-size=")]
        self.arguments(f"--window-size={width},{height}")

    def preferences(self, prefs: Optional[Dict[str, Any]] = None, **more: Any):
        """Set entries of the ``prefs`` experimental option."""
        self.prefs.update(prefs or {})
        self.prefs.update(more)

    def exclude_switches(self, *switches: str):
        for switch in switches:
            switch = switch if isinstance(switch, Switch) else Switch(switch)
            if switch not in self.excluded_switches:
                self.excluded_switches.append(switch)

    def local_state_flags(self, *flags: str):
        """Enable ``chrome://flags`` experiments through the browser's local state."""
        for flag in flags:
            if flag not in self.lab_flags:
                self.lab_flags.append(ExperimentalFlag(flag))

    def experimental_options(self, prefs: Optional[Dict[str, Any]] = None, exclude_switches=(),
                             local_state_flags=()):
        if prefs:
            self.preferences(prefs)
        self.exclude_switches(*exclude_switches)
        self.local_state_flags(*local_state_flags)

    def extensions(self, *paths: str):
        """Install packed extensions (.crx files)."""
        for path in paths:
            self.extension_paths.append(if_exists(path))

    def configure(self, options):
        super().configure(options)
        if self.binary is not None:
            options.binary_location = if_exists(self.binary)
        if self.prefs:
            options.add_experimental_option("prefs", dict(self.prefs))
        if self.excluded_switches:
            options.add_experimental_option("excludeSwitches", [str(s) for s in self.excluded_switches])
        if self.lab_flags:
            options.add_experimental_option(
                "localState", {"browser.enabled_labs_experiments": [str(f) for f in self.lab_flags]}
            )
        for path in self.extension_paths:
            options.add_extension(path)


class ChromeOptionsScope(ChromiumOptionsScope):
    options_class = ChromeOptions
    argument_class = ChromeArgument


class EdgeOptionsScope(ChromiumOptionsScope):
    options_class = EdgeOptions
    argument_class = EdgeArgument

    def __init__(self):
        super().__init__()
        self.use_webview: Optional[bool] = None

    def configure(self, options):
        super().configure(options)
        if self.use_webview is not None:
            options.use_webview = self.use_webview


class FirefoxOptionsScope(OptionsScope):
    """
    Firefox capabilities.

    Attributes:
        binary: Path to the Firefox executable
        profile_dir: Existing profile directory to start from
    """

    options_class = FirefoxOptions
    argument_class = FirefoxArgument

    def __init__(self):
        super().__init__()
        self.binary: Optional[str] = None
        self.profile_dir: Optional[str] = None
        self.prefs: Dict[str, Any] = {}
        self.profile_prefs: Dict[str, Any] = {}

    def window_size(self, width: int, height: int):
        if width < MIN_WINDOW_WIDTH or height < MIN_WINDOW_HEIGHT:
            logger.debug("Window size %dx%d is below %dx%d, keeping the browser default",
                         width, height, MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)
            return
        self.args = [arg for arg in self.args
                     if not (arg.startswith("--width=") or arg.startswith("--height="))]
        self.arguments(f"--width={width}", f"--height={height}")

    def preferences(self, prefs: Optional[Dict[str, Any]] = None, **more: Any):
        """Set ``about:config`` preferences on the options."""
        self.prefs.update(prefs or {})
        self.prefs.update(more)

    def profile(self, prefs: Optional[Dict[str, Any]] = None, **more: Any):
        """Start from a fresh profile carrying the given preferences."""
        self.profile_prefs.update(prefs or {})
        self.profile_prefs.update(more)

    def configure(self, options):
        super().configure(options)
        if self.binary is not None:
            options.binary_location = if_exists(self.binary)
        for key, value in self.prefs.items():
            options.set_preference(key, value)
        if self.profile_dir is not None:
            options.profile = FirefoxProfile(if_exists(self.profile_dir))
        if self.profile_prefs:
            profile = FirefoxProfile()
            for key, value in self.profile_prefs.items():
                profile.set_preference(key, value)
            options.profile = profile


class SafariOptionsScope(OptionsScope):
    options_class = SafariOptions

    def __init__(self):
        super().__init__()
        self.automatic_inspection: Optional[bool] = None
        self.automatic_profiling: Optional[bool] = None
        self.use_technology_preview: Optional[bool] = None

    def configure(self, options):
        super().configure(options)
        if self.automatic_inspection is not None:
            options.automatic_inspection = self.automatic_inspection
        if self.automatic_profiling is not None:
            options.automatic_profiling = self.automatic_profiling
        if self.use_technology_preview is not None:
            options.use_technology_preview = self.use_technology_preview
