#!/usr/bin/env python3
"""
Main entry point for kolibrium.

This module provides a smoke check from the command line: it starts a
browser with the configured settings, opens the site, waits for the given
CSS selectors and reports whether each became ready.
"""

import logging
import sys
import traceback

from selenium.common.exceptions import TimeoutException

from .cli.argument_parser import parse_args
from .cli.config import load_config_from_args, save_config
from .core.locators import css_selector
from .core.site import Session, SessionContext, with_driver

logger = logging.getLogger(__name__)


def _configure_logging(verbosity):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def check_selectors(selectors, wait_config):
    """
    Wait for every CSS selector to become displayed on the current driver.

    Args:
        selectors: CSS selectors to check
        wait_config: Wait applied to each selector

    Returns:
        dict: Selector mapped to True when it became ready in time
    """
    results = {}
    for selector in selectors:
        locator = css_selector(selector, cache_lookup=False, wait_config=wait_config)
        try:
            locator.get()
            results[selector] = True
        except TimeoutException:
            logger.info("Selector %s did not become ready", selector)
            results[selector] = False
    return results


def main(argv=None):
    """Main entry point for the kolibrium smoke check."""
    try:
        # Parse command-line arguments
        args = parse_args(argv)
        _configure_logging(args.verbose)

        # Load or create configuration
        config = load_config_from_args(args)

        # Save configuration if requested
        if args.save_config:
            save_config(config, args.save_config)
            print(f"Configuration saved to {args.save_config}")
            # If only saving config was requested, exit
            if args.config and not args.url:
                return 0

        config.print_summary()

        site = config.site()
        driver = config.driver_factory()()
        try:
            driver.get(site.base_url)
            if site.cookies:
                for cookie in site.cookies:
                    driver.add_cookie(dict(cookie))
                driver.get(site.base_url)

            with SessionContext.with_session(Session(driver, site)), with_driver(driver):
                site.configure(driver)
                results = check_selectors(args.check_css, config.wait_config)
                print(f"Title: {driver.title}")
                print(f"URL: {driver.current_url}")
        finally:
            if config.keep_browser_open:
                print("Leaving the browser open")
            else:
                driver.quit()

        for selector, ready in results.items():
            print(f"- {selector}: {'ready' if ready else 'NOT READY'}")

        return 0 if all(results.values()) else 1

    except KeyboardInterrupt:
        print("\nCheck interrupted by user.")
        return 130  # Standard exit code for SIGINT

    except Exception as e:
        print(f"\nError: {e}")
        if logger.isEnabledFor(logging.DEBUG):
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
