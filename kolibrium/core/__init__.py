"""
Core module for kolibrium.

This package contains waits, sites and sessions, locator descriptors,
template locators and the Page base class.
"""

from .locators import (class_name, class_names, css_selector, css_selectors,
                       data_qa, data_qas, data_test, data_test_id, data_test_ids,
                       data_tests, id, id_or_name, link_text, link_texts, name,
                       names, partial_link_text, partial_link_texts, tag_name,
                       tag_names, xpath, xpaths)
from .page import Page, join_urls, resolve_url
from .readiness import (ReadinessCondition, ReadinessDescriptor,
                        to_readiness_descriptor)
from .site import (Session, SessionContext, Site, SiteContext, current_driver,
                   with_driver)
from .wait import WaitConfig, wait

__all__ = [
    "class_name", "class_names", "css_selector", "css_selectors",
    "data_qa", "data_qas", "data_test", "data_test_id", "data_test_ids",
    "data_tests", "id", "id_or_name", "link_text", "link_texts", "name",
    "names", "partial_link_text", "partial_link_texts", "tag_name",
    "tag_names", "xpath", "xpaths",
    "Page", "join_urls", "resolve_url",
    "ReadinessCondition", "ReadinessDescriptor", "to_readiness_descriptor",
    "Session", "SessionContext", "Site", "SiteContext", "current_driver", "with_driver",
    "WaitConfig", "wait",
]
