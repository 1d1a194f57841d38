#!/usr/bin/env python3
"""
Browser command line arguments, switches, flags and preference keys.

This module contains the validated value types accepted by the options DSL
together with catalogues of the values most test suites need.
"""

from enum import Enum


class Argument(str):
    """A browser command line argument; must start with ``--``."""

    browser = "Browser"

    def __new__(cls, value: str):
        if not value.startswith("--"):
            raise ValueError(f'{cls.browser} argument "{value}" must start with "--"')
        return super().__new__(cls, value)


class ChromeArgument(Argument):
    browser = "Chrome"


class FirefoxArgument(Argument):
    browser = "Firefox"


class EdgeArgument(Argument):
    browser = "Edge"


class Arguments:
    """Well known arguments, grouped by browser."""

    class Chrome:
        disable_dev_shm_usage = ChromeArgument("--disable-dev-shm-usage")
        disable_extensions = ChromeArgument("--disable-extensions")
        disable_gpu = ChromeArgument("--disable-gpu")
        disable_popup_blocking = ChromeArgument("--disable-popup-blocking")
        disable_notifications = ChromeArgument("--disable-notifications")
        disable_search_engine_choice_screen = ChromeArgument("--disable-search-engine-choice-screen")
        headless = ChromeArgument("--headless=new")
        ignore_certificate_errors = ChromeArgument("--ignore-certificate-errors")
        incognito = ChromeArgument("--incognito")
        no_sandbox = ChromeArgument("--no-sandbox")
        remote_allow_origins = ChromeArgument("--remote-allow-origins=*")
        start_maximized = ChromeArgument("--start-maximized")

    class Firefox:
        headless = FirefoxArgument("--headless")
        incognito = FirefoxArgument("--incognito")
        height = FirefoxArgument("--height")
        width = FirefoxArgument("--width")

    class Edge:
        headless = EdgeArgument("--headless")
        in_private = EdgeArgument("--inprivate")


class Switch(str):
    """A Chromium switch to exclude, such as ``enable-automation``."""

    def __new__(cls, value: str):
        if not value or not value.strip():
            raise ValueError("Switch must not be blank")
        return super().__new__(cls, value)


class Switches:
    enable_automation = Switch("enable-automation")
    disable_popup_blocking = Switch("disable-popup-blocking")


class ExperimentalFlag(str):
    """An entry of ``chrome://flags``, stored in the browser's local state."""


class ExperimentalFlags:
    cookies_without_same_site_must_be_secure = ExperimentalFlag("cookies-without-same-site-must-be-secure@2")
    same_site_by_default_cookies = ExperimentalFlag("same-site-by-default-cookies@2")
    use_automation_extension = ExperimentalFlag("useAutomationExtension")


class ChromiumPreference(str):
    """A key of the Chromium ``prefs`` experimental option."""


class FirefoxPreference(str):
    """A Firefox ``about:config`` preference name."""


class Preferences:
    """Preference keys grouped by browser family."""

    class Chromium:
        credentials_enable_service = ChromiumPreference("credentials_enable_service")
        download_default_directory = ChromiumPreference("download.default_directory")
        download_directory_upgrade = ChromiumPreference("download.directory_upgrade")
        download_prompt_for_download = ChromiumPreference("download.prompt_for_download")
        profile_password_manager_enabled = ChromiumPreference("profile.password_manager_enabled")
        profile_password_manager_leak_detection = ChromiumPreference("profile.password_manager_leak_detection")
        safebrowsing_enabled = ChromiumPreference("safebrowsing.enabled")

    class Firefox:
        network_automatic_ntlm_auth_trusted_uris = FirefoxPreference("network.automatic-ntlm-auth.trusted-uris")
        network_automatic_ntlm_auth_allow_non_fqdn = FirefoxPreference("network.automatic-ntlm-auth.allow-non-fqdn")
        network_negotiate_auth_delegation_uris = FirefoxPreference("network.negotiate-auth.delegation-uris")
        network_negotiate_auth_trusted_uris = FirefoxPreference("network.negotiate-auth.trusted-uris")
        network_http_phishy_userpass_length = FirefoxPreference("network.http.phishy-userpass-length")
        security_csp_enable = FirefoxPreference("security.csp.enable")
        network_proxy_no_proxies_on = FirefoxPreference("network.proxy.no_proxies_on")
        browser_download_folder_list = FirefoxPreference("browser.download.folderList")
        browser_download_manager_show_when_starting = FirefoxPreference("browser.download.manager.showWhenStarting")
        browser_download_manager_focus_when_starting = FirefoxPreference("browser.download.manager.focusWhenStarting")
        browser_download_use_download_dir = FirefoxPreference("browser.download.useDownloadDir")
        browser_download_manager_alert_on_exe_open = FirefoxPreference("browser.download.manager.alertOnEXEOpen")
        browser_download_manager_close_when_done = FirefoxPreference("browser.download.manager.closeWhenDone")
        browser_download_manager_show_alert_on_complete = FirefoxPreference("browser.download.manager.showAlertOnComplete")
        browser_download_manager_use_window = FirefoxPreference("browser.download.manager.useWindow")
        browser_helper_apps_always_ask_force = FirefoxPreference("browser.helperApps.alwaysAsk.force")
        browser_helper_apps_never_ask_save_to_disk = FirefoxPreference("browser.helperApps.neverAsk.saveToDisk")


class PageLoadStrategy(Enum):
    NORMAL = "normal"
    EAGER = "eager"
    NONE = "none"


class UnexpectedAlertBehaviour(Enum):
    ACCEPT = "accept"
    ACCEPT_AND_NOTIFY = "accept and notify"
    DISMISS = "dismiss"
    DISMISS_AND_NOTIFY = "dismiss and notify"
    IGNORE = "ignore"


class ChromiumDriverLogLevel(Enum):
    ALL = "ALL"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    SEVERE = "SEVERE"
    OFF = "OFF"


class FirefoxDriverLogLevel(Enum):
    TRACE = "trace"
    DEBUG = "debug"
    CONFIG = "config"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    FATAL = "fatal"
