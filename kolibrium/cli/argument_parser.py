#!/usr/bin/env python3
"""
Command-line argument parsing module.

This module provides functions for setting up and parsing the arguments of
the ``kolibrium`` smoke check command.
"""

import argparse
import sys
from urllib.parse import urlparse

from ..browser.common.interface import Browser


def create_parser():
    """
    Create the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog='kolibrium',
        description='Open a site in a configured browser and check that key elements become ready'
    )

    parser.add_argument('url', type=str, nargs='?', default=None,
                        help='URL to open (default: base_url from the configuration)')

    # Browser options
    browser_group = parser.add_argument_group('Browser Options')
    browser_group.add_argument('--browser', type=str, default=Browser.CHROME.value,
                               choices=[browser.value for browser in Browser],
                               help='Browser to start (default: chrome)')
    browser_group.add_argument('--visible', action='store_true',
                               help='Run in visible browser mode instead of headless (default: headless)')
    browser_group.add_argument('--webdriver-path', type=str, default=None,
                               help='Path to the driver executable (default: downloaded)')
    browser_group.add_argument('--retry-count', type=int, default=1,
                               help='Attempts to start the driver before giving up (default: 1)')
    browser_group.add_argument('--keep-browser-open', action='store_true',
                               help='Leave the browser running after the check')

    # Synchronization
    wait_group = parser.add_argument_group('Wait Options')
    wait_group.add_argument('--timeout', type=float, default=10.0,
                            help='Seconds to wait for each element (default: 10)')
    wait_group.add_argument('--polling', type=float, default=0.2,
                            help='Seconds between readiness checks (default: 0.2)')

    # Checks
    parser.add_argument('--check-css', type=str, action='append', default=[],
                        metavar='SELECTOR',
                        help='CSS selector that must become displayed (repeatable)')

    # Configuration file options
    config_group = parser.add_argument_group('Configuration Options')
    config_group.add_argument('--config', type=str, default=None,
                              help='Load configuration from a JSON file')
    config_group.add_argument('--save-config', type=str, default=None,
                              help='Save the effective configuration to a JSON file')

    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increase log output (-v info, -vv debug)')

    return parser


def parse_args(argv=None):
    """
    Parse and validate command-line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.url:
        parsed_url = urlparse(args.url)
        if not parsed_url.scheme or not parsed_url.netloc:
            parser.error(f"Invalid URL: {args.url}")

    if args.timeout <= 0 or args.polling <= 0:
        parser.error("--timeout and --polling must be positive")

    if not args.url and not args.config:
        print("No URL given; using base_url from the configuration", file=sys.stderr)

    args.explicit_options = explicit_options(argv)
    return args


def explicit_options(argv=None):
    """
    Return the names of the options actually given on the command line.

    Options repeating their default value are included, so they can still
    override a configuration file.
    """
    parser = create_parser()
    for action in parser._actions:
        action.default = argparse.SUPPRESS
    given, _ = parser.parse_known_args(argv)
    return {name for name, value in vars(given).items() if value != argparse.SUPPRESS}
