#!/usr/bin/env python3
"""
Locator descriptors.

This module contains descriptors that find elements lazily. Declared as class
attributes of a page or component they resolve against the instance's search
context; created standalone they resolve against an explicit context or the
driver bound to the current thread.

Resolution waits until the element is found and ready, honors the active
site's wait configuration, ready conditions and decorators, and recovers from
stale element references by finding the element again.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from selenium.common.exceptions import (NoSuchElementException,
                                        StaleElementReferenceException)
from selenium.webdriver.common.by import By

from ..decorators.manager import (DecoratorManager, decorate_context,
                                  merge_decorators)
from .locator_utils import (ID_OR_NAME, Locator, escape_quotes, find, find_all,
                            present_and_displayed)
from .site import current_driver, current_site
from .wait import WaitConfig

logger = logging.getLogger(__name__)

_CACHE_ATTRIBUTE = "_kolibrium_locator_cache"


def _default_element_ready(element) -> bool:
    return element.is_displayed()


class _LocatorDescriptor:
    """Shared machinery of the single and plural descriptors."""

    kind = "Descriptor"

    def __init__(self, locator: Locator, cache_lookup: bool = True,
                 wait_config: Optional[WaitConfig] = None,
                 ready_when: Optional[Callable[[Any], bool]] = None,
                 context: Any = None):
        self.locator = locator
        self.cache_lookup = cache_lookup
        self.wait_config = wait_config
        self.ready_when = ready_when
        self.context = context
        self.owner = None
        self.name = None
        self._cache: Dict[Any, Any] = {}

    def __set_name__(self, owner, name):
        self.owner = owner
        self.name = name

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        context = getattr(instance, "search_context", None)
        if context is None:
            context = current_driver()
        cache = instance.__dict__.setdefault(_CACHE_ATTRIBUTE, {})
        return self._resolve(context, cache)

    def get(self):
        """Resolve a standalone descriptor against its context or the current driver."""
        context = self.context if self.context is not None else current_driver()
        return self._resolve(context, self._cache)

    __call__ = get

    def clear_cache(self):
        self._cache.pop(self, None)

    def effective_wait_config(self, site=None) -> WaitConfig:
        """Explicit config, else the site's, else the default; lookups always ignore missing elements."""
        config = self.wait_config
        if config is None and site is not None:
            config = site.wait_config
        if config is None:
            config = WaitConfig.DEFAULT
        return config.with_ignoring(NoSuchElementException)

    def decorators(self, site=None) -> List[Any]:
        site_decorators = site.decorators if site is not None else ()
        return merge_decorators(site_decorators, DecoratorManager.get())

    def _find(self, search_context):
        raise NotImplementedError

    def _is_ready(self, found, site) -> bool:
        raise NotImplementedError

    def _resolve(self, context, cache: Dict[Any, Any]):
        site = current_site()
        config = self.effective_wait_config(site)
        search_context = decorate_context(context, self.decorators(site))
        last = {}

        def found_and_ready(_):
            found = cache.get(self) if self.cache_lookup else None
            if found is None:
                found = self._find(search_context)
            last["value"] = found
            try:
                ready = self._is_ready(found, site)
            except StaleElementReferenceException:
                logger.debug("Stale element for %s, finding it again", self.locator)
                cache.pop(self, None)
                return False
            # Only ready results are cached; otherwise the next poll searches again.
            if ready and self.cache_lookup:
                cache[self] = found
            return ready

        config.to_wait(search_context).until(found_and_ready, config.message or "")
        if "value" in last:
            return last["value"]
        return self._find(search_context)

    def __repr__(self):
        site = current_site()
        config = self.effective_wait_config(site)
        decorators = self.decorators(site)
        rendered = "[" + ", ".join(repr(d) for d in decorators) + "]" if decorators else "N/A"
        owner = self.owner.__name__ if self.owner is not None else type(self.context).__name__
        return (f"{self.kind}(ctx={owner}, by={self.locator}, cacheLookup={self.cache_lookup}, "
                f"waitConfig={config.describe()}, decorators={rendered})")


class ElementDescriptor(_LocatorDescriptor):
    """Resolves to a single element."""

    kind = "ElementDescriptor"

    def _find(self, search_context):
        return find(search_context, self.locator)

    def _is_ready(self, found, site) -> bool:
        if self.ready_when is not None:
            return bool(self.ready_when(found))
        if site is not None:
            return site.is_element_ready(found)
        return _default_element_ready(found)


class ElementsDescriptor(_LocatorDescriptor):
    """Resolves to a list of elements."""

    kind = "ElementsDescriptor"

    def _find(self, search_context):
        return find_all(search_context, self.locator)

    def _is_ready(self, found, site) -> bool:
        if self.ready_when is not None:
            return bool(self.ready_when(found))
        if site is not None:
            return site.are_elements_ready(found)
        return present_and_displayed(found)


def _locator(by: str, value: str) -> Locator:
    if value is None or not str(value).strip():
        raise ValueError('"value" must not be blank')
    return Locator(by, value)


def _data_attribute_xpath(attribute: str, value: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError('"value" must not be blank')
    return f".//*[@{attribute}={escape_quotes(value)}]"


def _single(by: str, doc: str):
    def strategy(value: str, cache_lookup: bool = True, wait_config: Optional[WaitConfig] = None,
                 ready_when: Optional[Callable[[Any], bool]] = None, context: Any = None):
        return ElementDescriptor(_locator(by, value), cache_lookup, wait_config, ready_when, context)
    strategy.__doc__ = doc
    return strategy


def _plural(by: str, doc: str):
    def strategy(value: str, cache_lookup: bool = True, wait_config: Optional[WaitConfig] = None,
                 ready_when: Optional[Callable[[List[Any]], bool]] = None, context: Any = None):
        return ElementsDescriptor(_locator(by, value), cache_lookup, wait_config, ready_when, context)
    strategy.__doc__ = doc
    return strategy


def _data_single(attribute: str, doc: str):
    def strategy(value: str, cache_lookup: bool = True, wait_config: Optional[WaitConfig] = None,
                 ready_when: Optional[Callable[[Any], bool]] = None, context: Any = None):
        return ElementDescriptor(Locator(By.XPATH, _data_attribute_xpath(attribute, value)),
                                 cache_lookup, wait_config, ready_when, context)
    strategy.__doc__ = doc
    return strategy


def _data_plural(attribute: str, doc: str):
    def strategy(value: str, cache_lookup: bool = True, wait_config: Optional[WaitConfig] = None,
                 ready_when: Optional[Callable[[List[Any]], bool]] = None, context: Any = None):
        return ElementsDescriptor(Locator(By.XPATH, _data_attribute_xpath(attribute, value)),
                                  cache_lookup, wait_config, ready_when, context)
    strategy.__doc__ = doc
    return strategy


class_name = _single(By.CLASS_NAME, "Find an element by its class name.")
class_names = _plural(By.CLASS_NAME, "Find elements by class name.")
css_selector = _single(By.CSS_SELECTOR, "Find an element by CSS selector.")
css_selectors = _plural(By.CSS_SELECTOR, "Find elements by CSS selector.")
id_or_name = _single(ID_OR_NAME, "Find an element by id, falling back to its name attribute.")
link_text = _single(By.LINK_TEXT, "Find a link by its exact text.")
link_texts = _plural(By.LINK_TEXT, "Find links by their exact text.")
name = _single(By.NAME, "Find an element by its name attribute.")
names = _plural(By.NAME, "Find elements by name attribute.")
partial_link_text = _single(By.PARTIAL_LINK_TEXT, "Find a link containing the given text.")
partial_link_texts = _plural(By.PARTIAL_LINK_TEXT, "Find links containing the given text.")
tag_name = _single(By.TAG_NAME, "Find an element by tag name.")
tag_names = _plural(By.TAG_NAME, "Find elements by tag name.")
xpath = _single(By.XPATH, "Find an element by XPath.")
xpaths = _plural(By.XPATH, "Find elements by XPath.")
data_qa = _data_single("data-qa", "Find an element by its data-qa attribute.")
data_qas = _data_plural("data-qa", "Find elements by data-qa attribute.")
data_test = _data_single("data-test", "Find an element by its data-test attribute.")
data_tests = _data_plural("data-test", "Find elements by data-test attribute.")
data_test_id = _data_single("data-testid", "Find an element by its data-testid attribute.")
data_test_ids = _data_plural("data-testid", "Find elements by data-testid attribute.")
id = _single(By.ID, "Find an element by id.")
