#!/usr/bin/env python3
"""
Driver service configuration module.

This module contains the scopes that collect driver service settings (port,
environment, logging, allowed clients) and turn them into Selenium Service
objects. When no driver executable is configured the binary is downloaded
with webdriver-manager.
"""

import ipaddress
import logging
import os
import socket
from typing import Dict, List, Optional

from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.safari.service import Service as SafariService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from ..exceptions import DslConfigurationException
from .arguments import ChromiumDriverLogLevel, FirefoxDriverLogLevel

logger = logging.getLogger(__name__)


def check_port(port: int):
    """
    Make sure nothing is listening on ``port``.

    Raises:
        DslConfigurationException: If the port cannot be bound
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        try:
            sock.bind(("127.0.0.1", port))
        except OSError:
            raise DslConfigurationException(f"Port {port} already in use")


def if_exists(path: Optional[str]) -> Optional[str]:
    """
    Return ``path`` unchanged after checking it exists.

    Raises:
        DslConfigurationException: If a path is given and nothing exists there
    """
    if path is not None and not os.path.exists(path):
        raise DslConfigurationException(
            f"The following file does not exist at the specified path: {path}"
        )
    return path


class DriverServiceScope:
    """
    Settings shared by every driver service.

    Attributes:
        port: Port the driver listens on; checked to be free when building
        executable: Path to the driver binary
        use_driver_manager: Download the driver with webdriver-manager when
            no executable is set
    """

    service_class = None

    def __init__(self):
        self.port: Optional[int] = None
        self.executable: Optional[str] = None
        self.use_driver_manager: bool = True
        self.environment_variables: Dict[str, str] = {}

    def environment(self, name: str, value: str):
        """Set an environment variable for the driver process."""
        self.environment_variables[name] = value

    def environments(self, **variables: str):
        self.environment_variables.update(variables)

    def service_args(self) -> List[str]:
        return []

    def log_output(self) -> Optional[str]:
        return None

    def download_driver(self) -> Optional[str]:
        return None

    def resolve_executable(self) -> Optional[str]:
        if self.executable is not None:
            return if_exists(self.executable)
        if self.use_driver_manager:
            return self.download_driver()
        return None

    def build(self):
        """
        Create the Selenium Service described by this scope.

        Raises:
            DslConfigurationException: If the port is taken or a file is missing
        """
        kwargs = {"service_args": self.service_args()}
        if self.port is not None:
            check_port(self.port)
            kwargs["port"] = self.port
        if self.environment_variables:
            kwargs["env"] = {**os.environ, **self.environment_variables}
        if self.log_output() is not None:
            kwargs["log_output"] = self.log_output()
        executable = self.resolve_executable()
        if executable is not None:
            kwargs["executable_path"] = executable
        return self.service_class(**kwargs)

    def __repr__(self):
        return (f"{type(self).__name__}(port={self.port}, executable={self.executable}, "
                f"environment={self.environment_variables})")


class ChromiumDriverServiceScope(DriverServiceScope):
    """Settings understood by chromedriver and msedgedriver."""

    def __init__(self):
        super().__init__()
        self.append_log: Optional[bool] = None
        self.build_check_disabled: Optional[bool] = None
        self.log_file: Optional[str] = None
        self.log_level: Optional[ChromiumDriverLogLevel] = None
        self.readable_timestamp: Optional[bool] = None
        self.ips: List[str] = []

    def allowed_ips(self, *ips: str):
        """
        Allow remote connections from ``ips``.

        Raises:
            DslConfigurationException: If any address is not a valid IPv4 or IPv6 address
        """
        invalid = []
        for ip in ips:
            try:
                ipaddress.ip_address(ip)
            except ValueError:
                invalid.append(ip)
        if invalid:
            raise DslConfigurationException(f"Following IP addresses are invalid: {invalid}")
        self.ips.extend(ip for ip in ips if ip not in self.ips)

    def service_args(self) -> List[str]:
        args = []
        if self.append_log:
            args.append("--append-log")
        if self.build_check_disabled:
            args.append("--disable-build-check")
        if self.log_level is not None:
            args.append(f"--log-level={ChromiumDriverLogLevel(self.log_level).value}")
        if self.readable_timestamp:
            args.append("--readable-timestamp")
        if self.ips:
            args.append(f"--allowed-ips={', '.join(self.ips)}")
        return args

    def log_output(self) -> Optional[str]:
        return self.log_file


class ChromeDriverServiceScope(ChromiumDriverServiceScope):
    service_class = ChromeService

    def download_driver(self):
        return ChromeDriverManager().install()


class EdgeDriverServiceScope(ChromiumDriverServiceScope):
    service_class = EdgeService

    def download_driver(self):
        return EdgeChromiumDriverManager().install()


class GeckoDriverServiceScope(DriverServiceScope):
    """Settings understood by geckodriver."""

    service_class = FirefoxService

    def __init__(self):
        super().__init__()
        self.log_file: Optional[str] = None
        self.log_level: Optional[FirefoxDriverLogLevel] = None
        self.profile_root: Optional[str] = None
        self.truncated_logs: Optional[bool] = None
        self.hosts: List[str] = []

    def allowed_hosts(self, *hosts: str):
        """Accept requests whose Host header names one of ``hosts``."""
        self.hosts.extend(host for host in hosts if host not in self.hosts)

    def service_args(self) -> List[str]:
        args = []
        if self.log_level is not None:
            args.extend(["--log", FirefoxDriverLogLevel(self.log_level).value])
        if self.profile_root is not None:
            args.extend(["--profile-root", if_exists(self.profile_root)])
        if self.truncated_logs is False:
            args.append("--log-no-truncate")
        if self.hosts:
            args.append("--allow-hosts")
            args.extend(self.hosts)
        return args

    def log_output(self) -> Optional[str]:
        return self.log_file

    def download_driver(self):
        return GeckoDriverManager().install()


class SafariDriverServiceScope(DriverServiceScope):
    """Settings understood by safaridriver; it ships with macOS, so nothing is downloaded."""

    service_class = SafariService

    def __init__(self):
        super().__init__()
        self.use_driver_manager = False
        self.logging: Optional[bool] = None

    def service_args(self) -> List[str]:
        return ["--diagnose"] if self.logging else []
